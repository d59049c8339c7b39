import os

import yaml

from uiframework.core.locators import ElementLocator


class LocatorLoader:
    """
    定位器加载器，负责读取并校验定位器配置。
    Locator loader that reads and validates locator configurations.

    每个条目为 ``{by, value[, condition]}``，或按优先级排列的此类条目列表（回退链）。
    """

    def __init__(self, yaml_path):
        if not os.path.exists(yaml_path):
            raise FileNotFoundError(f"Locator file not found: {yaml_path}")
        with open(yaml_path, "r", encoding="utf-8") as f:
            self.data = yaml.safe_load(f)

    @classmethod
    def from_dict(cls, data: dict) -> "LocatorLoader":
        loader = cls.__new__(cls)
        loader.data = data
        return loader

    def validate_all(self):
        """
        校验定位器配置结构，错误时抛出 ValueError。
        """

        if not isinstance(self.data, dict):
            raise ValueError("Locator root must be a dict")

        for page, locators in self.data.items():
            if not isinstance(locators, dict):
                raise ValueError(f"Page {page} must be a dict")
            for name, entry in locators.items():
                for locator in _as_chain(entry, f"{page}.{name}"):
                    _to_locator(locator, f"{page}.{name}")

    def get(self, page, name):
        """
        获取指定页面的原始定位器配置。

            page: 页面名称。
            name: 定位器名称。
        """

        try:
            return self.data[page][name]
        except (KeyError, TypeError):
            raise KeyError(f"Locator not found: {page}.{name}") from None


class PageLocators:
    """
    页面定位器代理，转换为 ElementLocator。
    Page locator proxy that converts entries to ElementLocator objects.
    """

    def __init__(self, loader: LocatorLoader, page_name: str):
        self._loader = loader
        self._page_name = page_name

    @property
    def page_name(self):
        return self._page_name

    def get(self, name) -> ElementLocator:
        where = f"{self._page_name}.{name}"
        entry = self._loader.get(self._page_name, name)
        if isinstance(entry, list):
            raise ValueError(f"{where} is a fallback chain, use get_chain()")
        return _to_locator(entry, where)

    def get_chain(self, name) -> tuple:
        where = f"{self._page_name}.{name}"
        entry = self._loader.get(self._page_name, name)
        return tuple(_to_locator(item, where) for item in _as_chain(entry, where))


def _as_chain(entry, where: str) -> list:
    if isinstance(entry, list):
        if not entry:
            raise ValueError(f"{where} fallback chain is empty")
        return entry
    return [entry]


def _to_locator(entry, where: str) -> ElementLocator:
    if not isinstance(entry, dict) or "by" not in entry or "value" not in entry:
        raise ValueError(f"{where} missing by/value")
    try:
        return ElementLocator.parse(entry["by"], entry["value"], entry.get("condition"))
    except ValueError as exc:
        raise ValueError(f"{where}: {exc}") from None


def build_page_locators(locator_loader, page_name: str):
    """
    构建页面定位器代理；已是代理时原样返回。
    """

    if isinstance(locator_loader, PageLocators):
        return locator_loader
    if page_name is None:
        raise ValueError("page_name is required to build page locators")
    return PageLocators(locator_loader, page_name)
