# movie_crawler/projects/douban/strategies.py
"""豆瓣的特種兵 (HTML Specialist)。

此模組為豆瓣 Top 250 實現了 `FetchStrategy` 接口：隨機延遲後按
`start = page * page_size` 請求列表頁，再交由提取器解析 HTML。
"""
import logging
import random
import time
from typing import Any, List, Optional

import requests
from bs4 import BeautifulSoup

from movie_crawler.core.errors import MissingDependencyError, NetworkError, ParseError
from movie_crawler.core.models import PageRecord
from movie_crawler.core.protocols import Extractor
from movie_crawler.utils import make_request, time_it

logger = logging.getLogger(__name__)


class DoubanFetchStrategy:
    """策略實現：抓取豆瓣 Top 250 的一個列表頁，必須提供提取器。"""
    def __init__(self, session: requests.Session, settings: Any, timeout: float = 20):
        self.session = session
        self.cfg = settings
        self.timeout = timeout

    def fetch_page(self, page_index: int, page_size: int, extractor: Optional[Extractor] = None) -> List[PageRecord]:
        if extractor is None:
            raise MissingDependencyError(page_index, "Parser is required for Douban")

        # 隨機延遲，模擬人工瀏覽
        time.sleep(random.uniform(self.cfg.min_delay, self.cfg.max_delay))

        start = page_index * page_size
        try:
            res = time_it(
                f"Page {page_index} request",
                lambda: make_request(self.session, self.cfg.list_url, params={"start": start}, timeout=self.timeout),
            )
            body = res.text
        except requests.RequestException as e:
            raise NetworkError(page_index, f"Request for start={start} failed: {e}") from e

        try:
            document = BeautifulSoup(body, "html.parser")
            return time_it(f"Parse {page_index}", lambda: extractor(page_index, document))
        except (ValueError, AttributeError, TypeError, KeyError) as e:
            raise ParseError(page_index, f"Extractor failed on start={start}: {e}") from e
