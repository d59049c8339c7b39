from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from uiframework.core.resolver import FallbackResolver


class WaitMixin:
    """
    中文：等待交互混入类，提供有界等待与回退链解析能力。
    English: Wait interaction mixin providing bounded waits and fallback resolution.
    """

    def _waiter(self, timeout=None):
        if timeout is None:
            return self._wait
        return WebDriverWait(self._driver, timeout, poll_frequency=self._poll_frequency)

    def wait_visible(self, name, timeout=None):
        """
        中文：等待元素可见并返回该元素。
        参数:
            name: 定位器名称。
            timeout: 最大等待时间（秒），为空时使用页面默认值。
        """

        locator = self._get_locator(name)
        self._log.debug(f"[WAIT_VISIBLE] {self._page_name}.{name} ({locator})")
        return self._waiter(timeout).until(
            EC.visibility_of_element_located(locator.as_selenium())
        )

    def wait_clickable(self, name, timeout=None):
        """
        中文：等待元素可点击并返回该元素。
        """

        locator = self._get_locator(name)
        self._log.debug(f"[WAIT_CLICKABLE] {self._page_name}.{name} ({locator})")
        return self._waiter(timeout).until(
            EC.element_to_be_clickable(locator.as_selenium())
        )

    def wait_present(self, name, timeout=None):
        locator = self._get_locator(name)
        self._log.debug(f"[WAIT_PRESENT] {self._page_name}.{name} ({locator})")
        return self._waiter(timeout).until(
            EC.presence_of_element_located(locator.as_selenium())
        )

    def _get_resolver(self, name) -> FallbackResolver:
        self.ensure_elements()
        try:
            return self._resolvers[name]
        except KeyError:
            raise KeyError(f"Fallback chain not bound: {self._page_name}.{name}") from None

    def resolve(self, name):
        """
        中文：按回退链解析元素，全部未命中时抛出 ElementNotResolvedError。
        """

        return self._get_resolver(name).resolve()

    def try_resolve(self, name):
        """
        中文：按回退链解析元素，返回 Resolution 结果对象而不抛出。
        """

        return self._get_resolver(name).try_resolve()
