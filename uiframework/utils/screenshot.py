import os
import re
from datetime import datetime


def _safe_name(s: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.=-]+", "_", s)


def take_screenshot(
    driver,
    folder: str,
    prefix: str = "case",
) -> str:
    """
    中文：保存截图并返回文件路径。
    参数:
        driver: WebDriver 实例。
        folder: 截图输出目录。
        prefix: 文件名前缀，非法字符会被替换。
    """

    os.makedirs(folder, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = f"{_safe_name(prefix)}_{ts}_{os.getpid()}.png"
    path = os.path.join(folder, filename)
    driver.save_screenshot(path)
    return path
