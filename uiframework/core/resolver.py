"""
回退链元素解析。
Fallback element resolution.

同一逻辑元素在不同版本页面上的标记方式可能不同。FallbackResolver 按顺序
逐个尝试定位器，每一步有各自的有界等待，第一个满足条件的元素即为结果，
其后的定位器不再查询。全部未命中时 try_resolve() 返回 found 为 False 的
Resolution，resolve() 抛出 ElementNotResolvedError。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from selenium.common.exceptions import (
    NoSuchElementException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from uiframework.core.locators import CLICKABLE, PRESENT, ElementLocator
from uiframework.utils.logger import get_logger

DEFAULT_FALLBACK_WAIT = 5
DEFAULT_POLL_FREQUENCY = 0.5


class ElementNotResolvedError(NoSuchElementException):
    """
    中文：回退链中所有定位器在各自等待时间内均未命中。
    English: No locator in a fallback chain matched within its bounded wait.
    """

    def __init__(self, name: str, attempted: Sequence[ElementLocator]):
        """
        参数:
            name: 元素名称，通常为 页面名.定位器名。
            attempted: 已尝试的定位器，按尝试顺序排列。
        """

        self.name = name
        self.attempted = tuple(attempted)
        tried = ", ".join(str(locator) for locator in self.attempted)
        super().__init__(f"{name} not found by any locator: [{tried}]")


@dataclass(frozen=True)
class Resolution:
    """
    中文：一次解析的结果值；未命中时 element 与 locator 为空。
    English: Outcome of one resolution; element and locator are None on a miss.
    """

    name: str
    element: Any = None
    locator: Optional[ElementLocator] = None
    attempted: tuple = ()

    @property
    def found(self) -> bool:
        return self.element is not None


def expected_condition(locator: ElementLocator):
    """
    中文：将定位器的等待条件映射为 Selenium expected condition。
    参数:
        locator: ElementLocator 实例。
    """

    target = locator.as_selenium()
    if locator.condition == PRESENT:
        return EC.presence_of_element_located(target)
    if locator.condition == CLICKABLE:
        return EC.element_to_be_clickable(target)
    return EC.visibility_of_element_located(target)


class FallbackResolver:
    """
    中文：按优先级依次尝试定位器的解析器，首个命中即返回。
    English: Resolver trying locators in priority order, first hit wins.
    """

    def __init__(
        self,
        driver,
        name: str,
        chain: Sequence[ElementLocator],
        timeout: float = DEFAULT_FALLBACK_WAIT,
        poll_frequency: float = DEFAULT_POLL_FREQUENCY,
        logger=None,
    ):
        """
        中文：初始化解析器。
        参数:
            driver: WebDriver 实例。
            name: 元素名称，用于日志与异常信息。
            chain: 按优先级排列的定位器，不可为空。
            timeout: 每个定位器的等待上限（秒）。
            poll_frequency: 轮询间隔（秒）。
            logger: 日志记录器，为空时使用全局记录器。
        """

        if not chain:
            raise ValueError(f"{name}: fallback chain is empty")
        self._driver = driver
        self._name = name
        self._chain = tuple(chain)
        self._timeout = timeout
        self._poll_frequency = poll_frequency
        self._log = logger or get_logger()

    @property
    def chain(self) -> tuple:
        return self._chain

    def _attempt(self, locator: ElementLocator):
        """
        中文：在有界等待内尝试单个定位器，未命中返回 None。
        超时与其他 WebDriver 错误（如非法选择器）都视为未命中，继续下一个定位器。
        """

        wait = WebDriverWait(self._driver, self._timeout, poll_frequency=self._poll_frequency)
        try:
            return wait.until(expected_condition(locator))
        except TimeoutException:
            return None
        except WebDriverException as exc:
            self._log.debug(
                f"[RESOLVE] {self._name} {locator} raised {type(exc).__name__}"
            )
            return None

    def try_resolve(self) -> Resolution:
        """
        中文：按顺序解析元素，返回 Resolution，不因未命中抛出。
        English: Resolve in order and return a Resolution value.
        """

        attempted = []
        for index, locator in enumerate(self._chain):
            attempted.append(locator)
            element = self._attempt(locator)
            if element is None:
                self._log.debug(
                    f"[RESOLVE] {self._name} miss by {locator} within {self._timeout}s"
                )
                continue

            if index:
                self._log.warning(
                    f"[RESOLVE] {self._name} found by fallback {locator} "
                    f"after {index} miss(es), primary {self._chain[0]}"
                )
            else:
                self._log.debug(f"[RESOLVE] {self._name} found by {locator}")
            return Resolution(self._name, element, locator, tuple(attempted))

        self._log.error(
            f"[RESOLVE] {self._name} not found by any of {len(attempted)} locators"
        )
        return Resolution(self._name, attempted=tuple(attempted))

    def resolve(self):
        """
        中文：按顺序解析元素，全部未命中时抛出 ElementNotResolvedError。
        """

        resolution = self.try_resolve()
        if not resolution.found:
            raise ElementNotResolvedError(self._name, resolution.attempted)
        return resolution.element
