import logging
import sys
from pathlib import Path

from junit_merge.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """配置日志

    stdout 留给合并结果摘要，日志统一写 stderr（可选再写一份到文件）。
    """
    settings = settings or get_settings()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_file = Path(settings.LOG_FILE)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger("junit_merge")
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)

    logger.debug("日志服务已启动")
    return logger
