# movie_crawler/utils.py
"""
此模組提供全域的通用工具函數：網絡請求、計時、除錯輸出與對齊打印。
"""
import logging
import time
import unicodedata
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypeVar

import requests

logger = logging.getLogger(__name__)

T = TypeVar("T")


def make_request(
    session: requests.Session,
    url: str,
    params: Optional[Dict] = None,
    timeout: float = 20,
    **kwargs
) -> requests.Response:
    """
    使用共享 session 發送 GET 請求，非 2xx 狀態碼會拋出 `requests.HTTPError`。
    """
    logger.debug(f"Making GET request to {url} with params: {params}")
    response = session.get(url, params=params, timeout=timeout, **kwargs)
    response.raise_for_status()
    return response


def time_it(label: str, func: Callable[[], T]) -> T:
    """執行 `func` 並記錄 `"{label} took: {duration}"`，異常照常拋出。"""
    start = time.perf_counter()
    try:
        return func()
    finally:
        logger.info(f"{label} took: {time.perf_counter() - start:.2f}s")


def write_if_not_exists(path: str, content: str) -> bool:
    """
    僅當文件不存在時寫入內容，返回是否實際寫入。

    以 'x' 模式打開，多個線程同時寫同一路徑時只有一個會成功。
    """
    target = Path(path)
    try:
        with target.open("x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError:
        logger.info(f"File '{path}' already exists. Write operation skipped.")
        return False
    logger.info(f"File '{path}' did not exist. Content written.")
    return True


def display_width(text: str) -> int:
    """終端顯示寬度：全形/寬字元（如中文）算 2，組合字元算 0。"""
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def format_aligned(rank: int, title: str, link: Any, width: int = 30) -> str:
    """按顯示寬度填充標題欄，使連結欄在等寬終端中對齊。"""
    padding = " " * max(width - display_width(title), 0)
    return f"{rank:03}: {title}{padding} {link}"
