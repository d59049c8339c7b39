import logging
import os
from pathlib import Path

import pytest

from pages.login_page import LoginPage
from tests.fake_browser import build_login_site
from uiframework.core.context import run_context
from uiframework.core.driver_manager import DriverManager
from uiframework.utils.config_loader import load_config
from uiframework.utils.locator_loader import LocatorLoader, PageLocators
from uiframework.utils.logger import get_logger

# 假浏览器下使用的短等待，避免单个用例耗时
FAST_WAITS = {"timeout": 0.3, "fallback_timeout": 0.05, "poll_frequency": 0.01}


@pytest.fixture(scope="session")
def config():
    """
    加载并补全全局配置，挂载已校验的定位器加载器。
    """

    cfg = load_config()

    project_root = Path(cfg.get("_project_root", "."))
    if "paths" in cfg and isinstance(cfg["paths"], dict):
        for k, v in list(cfg["paths"].items()):
            if isinstance(v, str) and v and not Path(v).is_absolute():
                cfg["paths"][k] = str((project_root / v).resolve())

    loader = LocatorLoader(cfg["paths"]["locator"])
    loader.validate_all()
    cfg["locator_loader"] = loader

    return cfg


@pytest.fixture(scope="session")
def login_locators(config):
    return PageLocators(config["locator_loader"], "LoginPage")


@pytest.fixture(autouse=True)
def scenario_context():
    """
    每个场景结束时无条件清空运行期上下文（包括失败的场景）。
    """

    with run_context.scope():
        yield run_context


@pytest.fixture
def log_capture(caplog):
    """
    automation_logger 不向根记录器传播，将 caplog 的处理器直接挂到该记录器上。
    """

    logger = get_logger()
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=logger.name)
    yield caplog
    logger.removeHandler(caplog.handler)


@pytest.fixture
def make_site(login_locators):
    def _make(**kwargs):
        return build_login_site(login_locators, **kwargs)

    return _make


@pytest.fixture
def site(make_site):
    return make_site()


@pytest.fixture
def make_login_page(config):
    def _make(browser):
        return LoginPage(browser, config["locator_loader"], **FAST_WAITS)

    return _make


@pytest.fixture
def login_page(site, make_login_page):
    return make_login_page(site)


@pytest.fixture
def driver(config):
    """
    真实浏览器会话，每个场景一个，结束时关闭。仅供 live 用例使用。
    """

    driver = DriverManager.get_driver()

    selenium_cfg = config.get("selenium", {}) or {}
    implicit_wait = selenium_cfg.get("implicit_wait")
    if implicit_wait is not None:
        driver.implicitly_wait(float(implicit_wait))

    page_load_timeout = selenium_cfg.get("page_load_timeout")
    if page_load_timeout is not None:
        driver.set_page_load_timeout(float(page_load_timeout))

    yield driver
    DriverManager.quit()


@pytest.fixture
def account(config):
    account_cfg = config.get("account", {}) or {}
    username = os.getenv("UI_ACCOUNT_USERNAME") or account_cfg.get("username")
    password = os.getenv("UI_ACCOUNT_PASSWORD") or account_cfg.get("password")
    if not username or not password:
        pytest.skip("未配置登录账号（account 或 UI_ACCOUNT_USERNAME / UI_ACCOUNT_PASSWORD）")
    return username, password


pytest_plugins = ["tests.pytest_hooks"]
