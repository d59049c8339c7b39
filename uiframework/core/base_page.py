from selenium.webdriver.support.ui import WebDriverWait

from uiframework.core.resolver import (
    DEFAULT_FALLBACK_WAIT,
    DEFAULT_POLL_FREQUENCY,
    FallbackResolver,
)
from uiframework.interactions.dom import DomMixin
from uiframework.interactions.wait import WaitMixin
from uiframework.utils.config_loader import cfg_get, load_config
from uiframework.utils.locator_loader import build_page_locators
from uiframework.utils.logger import get_page_logger

DEFAULT_EXPLICIT_WAIT = 30


class BasePage(
    DomMixin,
    WaitMixin,
):
    """
    页面基类，提供通用交互与日志能力。
    Base page class providing common interactions and logging.

    子类通过 ELEMENTS 声明单一定位器，通过 FALLBACKS 声明回退链。
    一个页面对象在其生命周期内只绑定一个浏览器会话。
    """

    ELEMENTS = ()
    FALLBACKS = ()

    def __init__(
        self,
        driver,
        locator_loader,
        page_name=None,
        timeout=None,
        fallback_timeout=None,
        poll_frequency=None,
    ):
        """
        初始化页面基类并绑定驱动与定位器。

            driver: WebDriver 实例。
            locator_loader: 定位器加载器或 PageLocators。
            page_name: 页面名称。
            timeout: 单一元素等待上限（秒），为空时读取 selenium.explicit_wait。
            fallback_timeout: 回退链每一步的等待上限（秒），为空时读取 selenium.fallback_wait。
            poll_frequency: 轮询间隔（秒），为空时读取 selenium.poll_frequency。
        """

        if timeout is None or fallback_timeout is None or poll_frequency is None:
            cfg = load_config()
            if timeout is None:
                timeout = cfg_get(cfg, ["selenium", "explicit_wait"], DEFAULT_EXPLICIT_WAIT)
            if fallback_timeout is None:
                fallback_timeout = cfg_get(cfg, ["selenium", "fallback_wait"], DEFAULT_FALLBACK_WAIT)
            if poll_frequency is None:
                poll_frequency = cfg_get(cfg, ["selenium", "poll_frequency"], DEFAULT_POLL_FREQUENCY)

        self._driver = driver
        self._locators = build_page_locators(locator_loader, page_name)
        self._page_name = page_name or self._locators.page_name
        self._log = get_page_logger(self._page_name)
        self._timeout = float(timeout)
        self._fallback_timeout = float(fallback_timeout)
        self._poll_frequency = float(poll_frequency)

        self._wait = None
        self._elements = None
        self._resolvers = None

    @property
    def driver(self):
        return self._driver

    @property
    def elements_bound(self) -> bool:
        return self._elements is not None and self._wait is not None

    def init_elements(self):
        """
        （重新）绑定本页面全部定位器与等待对象。

        只做本地绑定，不向浏览器发出任何命令，可重复调用。
        """

        elements = {name: self._locators.get(name) for name in self.ELEMENTS}
        resolvers = {
            name: FallbackResolver(
                self._driver,
                f"{self._page_name}.{name}",
                self._locators.get_chain(name),
                timeout=self._fallback_timeout,
                poll_frequency=self._poll_frequency,
                logger=self._log,
            )
            for name in self.FALLBACKS
        }
        self._wait = WebDriverWait(self._driver, self._timeout, poll_frequency=self._poll_frequency)
        self._elements = elements
        self._resolvers = resolvers
        self._log.debug(
            f"[INIT_ELEMENTS] {self._page_name} "
            f"elements={len(elements)} fallbacks={len(resolvers)}"
        )

    def ensure_elements(self):
        if not self.elements_bound:
            self.init_elements()
