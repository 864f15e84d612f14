# movie_crawler/client.py
"""HTTP 客戶端工廠 (HTTP Client Factory)。

此模組負責創建整個程序共享的 `requests.Session`。與全域懶加載單例不同，
客戶端在程序入口處被顯式創建一次，再注入到每個需要它的抓取策略中，
所有併發頁面任務共用同一個連接池。
"""
import logging
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from movie_crawler.settings import HttpSettings, settings

logger = logging.getLogger(__name__)


def common_headers(http_settings: HttpSettings) -> Dict[str, str]:
    """構建統一的默認請求頭。"""
    return {"User-Agent": http_settings.user_agent}


def max_concurrent_pages() -> int:
    """所有站點配置中最大的頁面範圍，即調度器可能同時開啟的線程數。"""
    ranges = [cfg.end_page - cfg.start_page for cfg in (settings.douban, settings.imdb)]
    return max(ranges + [1])


def create_session(http_settings: Optional[HttpSettings] = None, pool_size: Optional[int] = None) -> requests.Session:
    """創建一個配置好默認請求頭的 Session。

    Args:
        http_settings: HTTP 配置，默認使用全域 `settings.http`。
        pool_size: 連接池大小；未指定時依次使用 `http_settings.pool_size`
            與 `max_concurrent_pages()`。

    Returns:
        requests.Session: 可在多個線程間共享的客戶端。

    Raises:
        RuntimeError: 如果客戶端無法被創建。
    """
    hs = http_settings or settings.http
    pool_size = pool_size or hs.pool_size or max_concurrent_pages()
    try:
        session = requests.Session()
        session.headers.update(common_headers(hs))
        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
    except (requests.RequestException, ValueError) as e:
        logger.critical(f"HTTP 客戶端創建失敗: {e}", exc_info=True)
        raise RuntimeError("無法初始化 HTTP 客戶端。") from e
    logger.debug(f"HTTP 客戶端已創建，User-Agent: {hs.user_agent}，連接池大小: {pool_size}")
    return session
