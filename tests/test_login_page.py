import pytest
from selenium.common.exceptions import TimeoutException

from tests.fake_browser import LOGIN_URL, SUCCESS_TEXT
from uiframework.core.resolver import ElementNotResolvedError


def _error_chain(login_locators):
    return login_locators.get_chain("error_message")


def test_valid_credentials_log_in(login_page):
    login_page.login("alice", "correctpw")

    assert login_page.verify_login_success() is True
    assert login_page.get_success_message() == SUCCESS_TEXT


def test_error_marked_by_id(login_page, login_locators, site):
    login_page.login("alice", "wrongpw")

    assert login_page.get_error_message() == "Your password is invalid!"
    assert login_page.verify_error_message_displayed() is True
    by_id, by_class, _, _ = _error_chain(login_locators)
    assert not site.queried(by_class)


def test_error_marked_only_by_class(make_site, make_login_page, login_locators):
    site = make_site(error_markup="class")
    page = make_login_page(site)

    page.login("alice", "wrongpw")
    message = page.get_error_message()

    by_id, by_class, by_xpath, by_text = _error_chain(login_locators)
    assert message == "Your password is invalid!"
    assert site.queried(by_id)
    assert site.queried(by_class)
    assert not site.queried(by_xpath)
    assert not site.queried(by_text)


def test_error_only_as_plain_text(make_site, make_login_page, login_locators):
    site = make_site(error_markup="text", error_text="Your password is invalid")
    page = make_login_page(site)

    page.login("alice", "wrongpw")

    assert page.get_error_message() == "Your password is invalid"
    assert all(site.queried(locator) for locator in _error_chain(login_locators))


def test_no_error_markup_degrades_to_defaults(make_site, make_login_page):
    site = make_site(error_markup="none")
    page = make_login_page(site)
    page.login("alice", "wrongpw")

    assert page.get_error_message() == ""
    assert page.verify_error_message_displayed() is False


def test_find_error_element_fails_fast(make_site, make_login_page):
    page = make_login_page(make_site(error_markup="none"))
    page.login("alice", "wrongpw")

    with pytest.raises(ElementNotResolvedError):
        page.find_error_element()


def test_logout_then_success_is_not_observed(login_page, site):
    login_page.login("alice", "correctpw")
    assert login_page.verify_login_success() is True

    login_page.logout()

    assert site.current == "login"
    assert login_page.verify_login_success() is False
    assert login_page.get_success_message() == ""


def test_fields_are_cleared_before_typing(login_page, login_locators, site):
    username = site.elements[login_locators.get("username_input").as_selenium()]
    password = site.elements[login_locators.get("password_input").as_selenium()]
    username.value = "leftover-user"
    password.value = "alice"

    login_page.enter_username("bob")
    login_page.enter_password("secret")

    assert username.history == ["clear", ("send_keys", "bob")]
    assert password.history == ["clear", ("send_keys", "secret")]
    assert password.value == "secret"


def test_password_is_not_logged(login_page, log_capture):
    login_page.login("alice", "correctpw")

    assert "correctpw" not in log_capture.text


@pytest.mark.parametrize("action", ["enter_username", "enter_password"])
def test_entry_actions_fail_fast(login_page, site, action):
    site.show("secure")

    with pytest.raises(TimeoutException):
        getattr(login_page, action)("value")


def test_submit_and_logout_fail_fast(login_page, site):
    with pytest.raises(TimeoutException):
        login_page.logout()

    site.show("secure")
    with pytest.raises(TimeoutException):
        login_page.click_submit()


def test_login_stops_at_first_failing_step(login_page, login_locators, site, log_capture):
    submit = site.elements[login_locators.get("submit_button").as_selenium()]
    del site.elements[login_locators.get("password_input").as_selenium()]

    with pytest.raises(TimeoutException):
        login_page.login("alice", "correctpw")

    assert submit.history == []
    assert "Error entering password" in log_capture.text


def test_disabled_submit_is_not_clicked(login_page, login_locators, site):
    submit = site.elements[login_locators.get("submit_button").as_selenium()]
    submit.enabled = False

    with pytest.raises(TimeoutException):
        login_page.click_submit()
    assert submit.history == []


def test_init_elements_is_idempotent(login_page, site):
    assert not login_page.elements_bound

    login_page.init_elements()
    login_page.init_elements()
    login_page.ensure_elements()

    assert login_page.elements_bound
    assert site.lookups == []
    assert site.navigations == []
    assert site.current == "login"


def test_open_navigates_once(login_page, site):
    site.show("secure")

    login_page.open(LOGIN_URL)

    assert site.navigations == [LOGIN_URL]
    assert site.current == "login"


def test_login_message_shared_between_steps(login_page, scenario_context):
    login_page.login("alice", "wrongpw")
    scenario_context.set_message(login_page.get_error_message())

    assert scenario_context.get_message() == "Your password is invalid!"


def test_page_binds_one_session(login_page, site):
    assert login_page.driver is site
