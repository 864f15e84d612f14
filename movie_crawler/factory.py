# movie_crawler/factory.py
"""
此模組提供工廠函數，根據站點枚舉創建並配置對應的抓取策略與提取器。
"""
import logging
from typing import Any, Optional

import requests

from movie_crawler.core.decorators import LoggingFetchStrategy
from movie_crawler.core.protocols import Extractor, FetchStrategy
from movie_crawler.enums import SourceSite
from movie_crawler.settings import settings

logger = logging.getLogger(__name__)


def _get_site_settings(site: SourceSite) -> Any:
    """根據站點枚舉從全局配置中獲取對應的站點配置。"""
    site_setting_map = {
        SourceSite.DOUBAN: settings.douban,
        SourceSite.IMDB: settings.imdb,
    }
    if site not in site_setting_map:
        raise ValueError(f"Settings for site '{site.value}' not found.")
    return site_setting_map[site]


def create_fetch_strategy(
    site: SourceSite,
    session: requests.Session,
    timed: bool = True,
    dump_path: Optional[str] = None,
) -> FetchStrategy:
    """
    工廠函數：實例化站點抓取策略，`timed` 為真時包上計時裝飾器。
    """
    site_settings = _get_site_settings(site)
    timeout = settings.http.timeout

    if site == SourceSite.DOUBAN:
        from movie_crawler.projects.douban import strategies
        strategy: FetchStrategy = strategies.DoubanFetchStrategy(session, site_settings, timeout=timeout)
    elif site == SourceSite.IMDB:
        from movie_crawler.projects.imdb import strategies
        strategy = strategies.ImdbFetchStrategy(session, site_settings, timeout=timeout, dump_path=dump_path)
    else:
        raise ValueError(f"Fetch strategy for site '{site.value}' not found.")

    if timed:
        strategy = LoggingFetchStrategy(strategy)
    logger.info(f"[{site.value}] 抓取策略實例化完成。")
    return strategy


def create_extractor(site: SourceSite) -> Optional[Extractor]:
    """工廠函數：返回站點的 HTML 提取器；IMDb 使用內嵌數據掃描，不需要提取器。"""
    if site == SourceSite.DOUBAN:
        from movie_crawler.projects.douban import parsers
        return parsers.create_douban_extractor()
    if site == SourceSite.IMDB:
        return None
    raise ValueError(f"Extractor for site '{site.value}' not found.")
