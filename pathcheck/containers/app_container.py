from dependency_injector import containers, providers

from pathcheck.checker.path_checker import PathChecker
from pathcheck.config import PathCheckConfig
from pathcheck.frame_logger import setup_logger
from pathcheck.fs.local_fs import LocalFileSystem


class AppContainer(containers.DeclarativeContainer):
    """应用依赖注入容器."""

    config = providers.Singleton(PathCheckConfig)

    logger = providers.Singleton(
        setup_logger,
        log_config=config.provided.log,
    )

    filesystem = providers.Singleton(
        LocalFileSystem,
        follow_symlinks=config.provided.checker.follow_symlinks,
    )

    path_checker = providers.Factory(
        PathChecker,
        filesystem=filesystem,
        config=config.provided.checker,
    )
