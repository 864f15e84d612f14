# movie_crawler/core/protocols.py
"""接口藍圖 (Contracts)。

此模組使用 typing.Protocol 定義了爬蟲框架的兩個可插拔組件：
抓取策略 (FetchStrategy) 與頁面提取器 (Extractor)。調度器只依賴這些
契約，而不關心具體站點的實現細節；裝飾器同樣實現 FetchStrategy，
因此可以在任何需要策略的地方替換使用。
"""
from typing import List, Optional, Protocol

from bs4 import BeautifulSoup

from movie_crawler.core.models import PageRecord


class Extractor(Protocol):
    """
    策略接口：將一個已解析的 HTML 文檔轉換為零或多筆記錄。

    實現此協議的類必須是純函數式的：不執行 I/O，也不涉及併發。
    返回的記錄都帶有傳入的頁碼，順序即文檔順序。
    """
    def __call__(self, page_index: int, document: BeautifulSoup) -> List[PageRecord]:
        ...


class FetchStrategy(Protocol):
    """
    策略接口：定義如何把一個頁碼轉換為網絡請求與提取出的記錄。

    成功時返回該頁的完整記錄列表（可以為空）；失敗時拋出
    `FetchError` 的子類。一頁要麼完整成功，要麼完整失敗。
    """
    def fetch_page(self, page_index: int, page_size: int, extractor: Optional[Extractor] = None) -> List[PageRecord]:
        ...
