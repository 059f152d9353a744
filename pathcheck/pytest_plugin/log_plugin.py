"""pytest日志插件 - 按 run_id 收集每次测试运行的日志"""

import logging
import uuid
from pathlib import Path
from typing import Optional

from pathcheck.frame_logger import DATE_FORMAT, LOG_FORMAT, LOGGER_NAME


class LogPlugin:
    """pytest日志插件"""

    def __init__(self, config, log_root: Path = Path("logs")):
        """初始化插件"""
        self.config = config
        self.log_root = log_root
        self.run_id: Optional[str] = None

    def _get_run_id(self) -> str:
        """从pytest配置中获取run_id，未传入时自动生成"""
        run_id = self.config.getoption("--run-id", default=None)
        if not run_id:
            run_id = str(uuid.uuid4())

        self.config.run_id = run_id
        self.run_id = run_id
        return run_id

    def setup_logging(self) -> None:
        """设置日志: pathcheck 和 test 日志器都写入本次运行的日志文件"""
        file_handler = self.get_file_handler(self.get_pytest_file_log_path())

        package_logger = logging.getLogger(LOGGER_NAME)
        package_logger.setLevel(logging.DEBUG)
        package_logger.handlers.clear()
        package_logger.propagate = True
        package_logger.addHandler(file_handler)

        test_logger = logging.getLogger("test")
        test_logger.setLevel(logging.DEBUG)
        test_logger.handlers.clear()
        test_logger.propagate = True
        test_logger.addHandler(file_handler)

    def get_file_handler(self, filepath: Path) -> logging.FileHandler:
        filepath.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(filepath, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return file_handler

    def get_pytest_file_log_path(self) -> Path:
        run_id = self._get_run_id()
        return self.log_root.joinpath(run_id).joinpath("pytest.log")

    def pytest_report_header(self, config):
        return f"pathcheck run_id: {self.run_id}"
