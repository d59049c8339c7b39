"""
元素定位器值对象。
Element locator value objects.

ElementLocator 描述如何查找一个元素：定位策略、定位值，以及等待时元素需满足的条件。
TEXT_CONTAINS 不是 WebDriver 原生策略，会编译为 XPath，匹配文本包含该短语任一大小写变体的元素。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from selenium.webdriver.common.by import By

VISIBLE = "visible"
PRESENT = "present"
CLICKABLE = "clickable"

CONDITIONS = (VISIBLE, PRESENT, CLICKABLE)


class Strategy(str, Enum):
    """
    中文：定位策略枚举，值与定位器 YAML 中的 by 字段一致。
    English: Locator strategies, valued as written in the locator YAML.
    """

    ID = "id"
    CLASS_NAME = "class"
    XPATH = "xpath"
    LINK_TEXT = "link_text"
    TEXT_CONTAINS = "text"
    NAME = "name"
    CSS = "css"

    @classmethod
    def parse(cls, raw: str) -> "Strategy":
        """
        中文：解析 YAML 中的 by 字段，支持常见别名。
        参数:
            raw: 策略字符串，如 id、class、link text。
        """

        key = (raw or "").strip().lower().replace(" ", "_")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unsupported locator type: {raw}") from None


_ALIASES = {
    "class_name": "class",
    "classname": "class",
    "link": "link_text",
    "css_selector": "css",
    "text_contains": "text",
}

_BY = {
    Strategy.ID: By.ID,
    Strategy.CLASS_NAME: By.CLASS_NAME,
    Strategy.XPATH: By.XPATH,
    Strategy.LINK_TEXT: By.LINK_TEXT,
    Strategy.NAME: By.NAME,
    Strategy.CSS: By.CSS_SELECTOR,
}


def xpath_literal(text: str) -> str:
    """
    中文：将文本转为 XPath 1.0 字符串字面量，同时含单双引号时使用 concat()。
    参数:
        text: 原始文本。
    """

    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = [f"'{part}'" for part in text.split("'")]
    return "concat(" + ", \"'\", ".join(parts) + ")"


def case_variants(phrase: str) -> list[str]:
    """
    中文：返回短语的大小写变体（原样、小写、首字母大写、大写），去重且保持顺序。
    """

    variants: list[str] = []
    for variant in (phrase, phrase.lower(), phrase.capitalize(), phrase.upper()):
        if variant and variant not in variants:
            variants.append(variant)
    return variants


def text_contains_xpath(phrase: str) -> str:
    """
    中文：生成匹配文本包含短语任一变体的 XPath。
    参数:
        phrase: 待匹配的短语。
    """

    clauses = " or ".join(
        f"contains(text(), {xpath_literal(v)})" for v in case_variants(phrase)
    )
    return f"//*[{clauses}]"


@dataclass(frozen=True)
class ElementLocator:
    """
    中文：不可变的元素定位器。
    English: Immutable description of how to find one element.

        strategy: 定位策略。
        value: 定位值。
        condition: 等待条件，visible、present 或 clickable。
    """

    strategy: Strategy
    value: str
    condition: str = VISIBLE

    def __post_init__(self):
        if not isinstance(self.strategy, Strategy):
            object.__setattr__(self, "strategy", Strategy.parse(self.strategy))
        if not self.value:
            raise ValueError(f"Locator value is empty for strategy {self.strategy.value}")
        if self.condition not in CONDITIONS:
            raise ValueError(
                f"Unsupported wait condition: {self.condition} (expected one of {CONDITIONS})"
            )

    @classmethod
    def parse(cls, by: str, value: str, condition: str | None = None) -> "ElementLocator":
        """
        中文：由 YAML 条目字段构建定位器，condition 为空时默认 visible。
        """

        return cls(Strategy.parse(by), str(value), condition or VISIBLE)

    def as_selenium(self) -> tuple[str, str]:
        """
        中文：返回 Selenium 查找与等待接口使用的 (By, value)。
        """

        if self.strategy is Strategy.TEXT_CONTAINS:
            return By.XPATH, text_contains_xpath(self.value)
        return _BY[self.strategy], self.value

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.value}"
