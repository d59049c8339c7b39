import logging
import os
from datetime import datetime
from contextvars import ContextVar

from uiframework.utils.config_loader import cfg_get, load_config, resolve_path

_CURRENT_TEST: ContextVar[str] = ContextVar("CURRENT_TEST", default="-")


def set_current_test(name: str) -> None:
    """
    设置当前测试名称上下文。

        name: 当前测试名称。
    """

    _CURRENT_TEST.set(name or "-")


class _InjectTestNameFilter(logging.Filter):
    """
    日志过滤器，注入测试名称到记录中。
    Logger filter injecting test name into log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "test"):
            record.test = _CURRENT_TEST.get()
        return True


LOGGER_NAME = "automation_logger"

DEFAULT_LOG_DIR = "logs"


def log_dir() -> str:
    """
    中文：日志目录，读取 paths.logs，相对路径按项目根目录解析。
    """

    try:
        configured = cfg_get(load_config(), ["paths", "logs"], DEFAULT_LOG_DIR)
    except FileNotFoundError:
        configured = DEFAULT_LOG_DIR
    return str(resolve_path(configured))


def _log_file() -> str:
    folder = log_dir()
    os.makedirs(folder, exist_ok=True)
    return os.path.join(
        folder,
        f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{os.getpid()}.log"
    )


def get_logger() -> logging.Logger:
    """
    获取全局日志记录器，首次调用时挂载控制台与文件输出。
    """

    logger = logging.getLogger(LOGGER_NAME)

    if getattr(logger, "_inited", False):
        return logger

    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(test)s | %(filename)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(_InjectTestNameFilter())

    file_handler = logging.FileHandler(_log_file(), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(_InjectTestNameFilter())

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    logger.propagate = False

    logger._inited = True
    return logger


def get_page_logger(page_name: str | None = None) -> logging.Logger:
    """
    获取页面级日志记录器。

        page_name: 页面名称，可为空。
    """

    logger = get_logger()
    if page_name:
        logger = logging.LoggerAdapter(logger, {"page": page_name})
    return logger
