from uiframework.core.base_page import BasePage
from uiframework.core.resolver import ElementNotResolvedError
from uiframework.utils.config_loader import cfg_get, load_config


class LoginPage(BasePage):
    """
    中文：登录页面对象，封装登录、登出与结果校验。
    English: Login page object wrapping login, logout and result checks.

    两类错误处理策略并存，调用方依赖这种区别，不要合并：
    - 动作（输入、提交、login、logout、open）失败时记录日志并原样抛出；
    - 观察（verify_* / get_*）失败时记录日志并返回 False 或空字符串。
    """

    ELEMENTS = (
        "username_input",
        "password_input",
        "submit_button",
        "success_message",
        "logout_link",
    )
    FALLBACKS = ("error_message",)

    def __init__(
        self,
        driver,
        locator_loader,
        timeout=None,
        fallback_timeout=None,
        poll_frequency=None,
    ):
        """
        中文：初始化登录页面对象。
        参数:
            driver: WebDriver 实例。
            locator_loader: 定位器加载器实例。
            timeout / fallback_timeout / poll_frequency: 见 BasePage。
        """

        super().__init__(
            driver,
            locator_loader,
            page_name="LoginPage",
            timeout=timeout,
            fallback_timeout=fallback_timeout,
            poll_frequency=poll_frequency,
        )

    # ========= 动作（失败即抛出） =========
    def open(self, url: str | None = None):
        """
        中文：打开登录页。
        参数:
            url: 目标地址，为空时读取 project.base_url。
        """

        if url is None:
            url = cfg_get(load_config(), ["project", "base_url"])
            if not url:
                raise ValueError("project.base_url is not configured")
        try:
            super().open(url)
        except Exception as exc:
            self._log.error(f"Error opening login page {url}: {exc}", exc_info=True)
            raise

    def enter_username(self, username: str):
        """
        中文：等待用户名输入框可见，清空后输入用户名。
        参数:
            username: 登录用户名。
        """

        try:
            self.input("username_input", username)
            self._log.info(f"Username entered: {username}")
        except Exception as exc:
            self._log.error(f"Error entering username: {exc}", exc_info=True)
            raise

    def enter_password(self, password: str):
        """
        中文：等待密码输入框可见，清空后输入密码（日志中不记录密码）。
        参数:
            password: 登录密码。
        """

        try:
            self.input("password_input", password)
            self._log.info("Password entered")
        except Exception as exc:
            self._log.error(f"Error entering password: {exc}", exc_info=True)
            raise

    def click_submit(self):
        """
        中文：等待提交按钮可点击后点击。
        """

        try:
            self.click("submit_button")
            self._log.info("Submit button clicked")
        except Exception as exc:
            self._log.error(f"Error clicking submit button: {exc}", exc_info=True)
            raise

    def login(self, username: str, password: str):
        """
        中文：重新绑定元素后依次输入用户名、密码并提交。
        任一步失败即中止，页面停留在失败时的状态。
        """

        self.init_elements()
        self.enter_username(username)
        self.enter_password(password)
        self.click_submit()

    def logout(self):
        """
        中文：等待登出链接可点击后点击。
        """

        try:
            self.init_elements()
            self.click("logout_link")
            self._log.info("Logout performed successfully")
        except Exception as exc:
            self._log.error(f"Error performing logout: {exc}", exc_info=True)
            raise

    # ========= 观察（失败降级为默认值） =========
    def verify_login_success(self) -> bool:
        try:
            self.init_elements()
            displayed = self.wait_visible("success_message").is_displayed()
            self._log.info(f"Login success verification: {displayed}")
            return displayed
        except Exception as exc:
            self._log.error(f"Error verifying login success: {exc!r}")
            return False

    def get_success_message(self) -> str:
        try:
            self.init_elements()
            return self.text_of("success_message")
        except Exception as exc:
            self._log.error(f"Error getting success message: {exc!r}")
            return ""

    def find_error_element(self):
        """
        中文：按 id、class、xpath、文本的顺序查找错误提示元素。
        全部未命中时抛出 ElementNotResolvedError，供需要失败即停的调用方使用。
        """

        self.init_elements()
        return self.resolve("error_message")

    def get_error_message(self) -> str:
        try:
            text = self.find_error_element().text
            self._log.info(f"Error message found: {text}")
            return text
        except ElementNotResolvedError:
            # 解析器已记录汇总日志
            return ""
        except Exception as exc:
            self._log.error(f"Error getting error message: {exc!r}")
            return ""

    def verify_error_message_displayed(self) -> bool:
        try:
            displayed = self.find_error_element().is_displayed()
            self._log.info(f"Error message displayed: {displayed}")
            return displayed
        except ElementNotResolvedError:
            return False
        except Exception as exc:
            self._log.error(f"Error message not found: {exc!r}")
            return False
