# movie_crawler/core/decorators.py
"""抓取策略裝飾器。

`LoggingFetchStrategy` 與被包裝的策略實現相同的 `FetchStrategy` 契約，
只額外記錄每次調用的耗時，不改變成功/失敗語義與記錄內容。
"""
import logging
from typing import List, Optional

from movie_crawler.core.models import PageRecord
from movie_crawler.core.protocols import Extractor, FetchStrategy
from movie_crawler.utils import time_it

logger = logging.getLogger(__name__)


class LoggingFetchStrategy:
    """為任意 FetchStrategy 增加計時日誌，可以多層嵌套。"""
    def __init__(self, inner: FetchStrategy, label_template: str = "Page {page} fetched"):
        self.inner = inner
        self.label_template = label_template

    def fetch_page(self, page_index: int, page_size: int, extractor: Optional[Extractor] = None) -> List[PageRecord]:
        label = self.label_template.format(page=page_index)
        return time_it(label, lambda: self.inner.fetch_page(page_index, page_size, extractor))
