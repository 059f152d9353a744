from logging.handlers import RotatingFileHandler
import logging

from pathcheck.config import LogConfig

LOGGER_NAME = "pathcheck"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(log_config: LogConfig | None = None) -> logging.Logger:
    """
    初始化包日志器, 子模块的 logger 透传到这里即可.

    已经挂载过 Handler 时直接返回, 避免重复添加.

    Args:
        log_config: 日志配置, 为空时使用默认配置

    Returns:
        logging.Logger: pathcheck 日志器
    """
    log_config = log_config or LogConfig()
    logger = logging.getLogger(LOGGER_NAME)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_config.log_file is not None:
        # 日志轮转，避免文件过大
        log_config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_config.log_file,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if log_config.console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logger.handlers:
        # 仅在本次挂载 Handler 时设置级别
        logger.setLevel(log_config.level)
        logger.debug(f"日志器初始化完成: level={log_config.level}, file={log_config.log_file}")

    return logger
