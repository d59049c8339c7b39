def _mask_if_sensitive(name: str, text: str) -> str:
    n = (name or "").lower()
    sensitive_keywords = ("password", "passwd", "pwd", "otp", "token", "secret")
    if any(k in n for k in sensitive_keywords):
        return "****"
    return text


class DomMixin:
    """
    中文：DOM 交互混入类，提供基础元素操作。
    English: DOM interaction mixin providing basic element operations.
    """

    def _get_locator(self, name):
        """
        中文：获取已绑定的定位器。
        参数:
            name: 定位器名称。
        """

        self.ensure_elements()
        try:
            return self._elements[name]
        except KeyError:
            raise KeyError(f"Locator not bound: {self._page_name}.{name}") from None

    def open(self, url: str):
        """
        中文：打开指定 URL。
        参数:
            url: 目标页面地址。
        """

        self._log.info(f"[OPEN] {self._page_name} -> {url}")
        self._driver.get(url)

    def click(self, name):
        """
        中文：等待元素可点击后点击。
        参数:
            name: 定位器名称。
        """

        self._log.debug(f"[CLICK] {self._page_name}.{name}")
        self.wait_clickable(name).click()

    def input(self, name, text):
        """
        中文：等待元素可见，清空后输入文本。
        参数:
            name: 定位器名称。
            text: 需要输入的文本。
        """

        masked = _mask_if_sensitive(name, text)
        self._log.debug(f"[INPUT] {self._page_name}.{name} = {masked}")
        el = self.wait_visible(name)
        el.clear()
        el.send_keys(text)

    def text_of(self, name):
        return self.wait_visible(name).text
