import threading

from uiframework.core.context import current_worker_id
from uiframework.driver.driver_factory import create_driver
from uiframework.utils.logger import get_logger

log = get_logger()


class DriverManager:
    """
    驱动管理器，按 worker 创建与释放浏览器驱动，每个 worker 一个会话。
    Driver manager keeping one browser session per worker.
    """

    _drivers = {}
    _lock = threading.Lock()

    @classmethod
    def get_driver(cls, browser: str | None = None, headless: bool | None = None):
        """
        获取当前 worker 的 WebDriver 实例，不存在则创建。
        """

        key = current_worker_id()
        with cls._lock:
            driver = cls._drivers.get(key)
        if driver is None:
            driver = create_driver(browser, headless)
            log.info(f"[DRIVER] created for worker {key}")
            with cls._lock:
                cls._drivers[key] = driver
        return driver

    @classmethod
    def quit(cls):
        """
        关闭并清理当前 worker 的 WebDriver 实例。
        """

        key = current_worker_id()
        with cls._lock:
            driver = cls._drivers.pop(key, None)
        if driver is not None:
            driver.quit()
            log.info(f"[DRIVER] quit for worker {key}")

    @classmethod
    def quit_all(cls):
        with cls._lock:
            drivers = list(cls._drivers.items())
            cls._drivers.clear()
        for key, driver in drivers:
            try:
                driver.quit()
            except Exception as exc:
                log.warning(f"[DRIVER] quit failed for worker {key}: {exc}")
