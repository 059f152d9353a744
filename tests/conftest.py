# conftest.py
"""pytest 配置文件，用于测试环境的设置"""

import logging

import pytest

from pathcheck.pytest_plugin.log_plugin import LogPlugin
from tests.fixtures.fs_fixtures import data_dir, memory_fs  # noqa: F401


def pytest_addoption(parser):
    """添加pytest命令行选项"""
    parser.addoption(
        "--run-id",
        action="store",
        default=None,
        help="测试运行的run_id，用于区分日志目录",
    )


def pytest_configure(config: pytest.Config):
    """pytest配置钩子 - 注册插件"""
    plugin = LogPlugin(config)
    plugin.setup_logging()
    config.pluginmanager.register(plugin, "log_plugin")


@pytest.fixture(scope="session", autouse=True)
def test_logger():
    return logging.getLogger("test")
