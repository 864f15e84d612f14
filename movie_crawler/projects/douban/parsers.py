# movie_crawler/projects/douban/parsers.py
"""豆瓣的數據翻譯官 (Data Translator)。

此模組包含將豆瓣 Top 250 列表頁 HTML 轉換為 `PageRecord` 的提取器。
它不執行任何 I/O 操作，僅專注於 CSS 選擇與數據轉換。
"""
import logging
from typing import List

from bs4 import BeautifulSoup

from movie_crawler.core.models import PageRecord

logger = logging.getLogger(__name__)

MISSING_LINK = "N/A"


class DoubanExtractor:
    """
    Extractor 實現：用固定的 CSS 選擇器從列表頁中提取每一部電影。

    每個 `item_selector` 節點產生一筆記錄；標題取自標題節點的內部 HTML
    （缺失時為空字串），連結取自錨點的 href（缺失時為 "N/A"）。
    """
    def __init__(self, item_selector: str, title_selector: str, link_selector: str):
        self.item_selector = item_selector
        self.title_selector = title_selector
        self.link_selector = link_selector

    def __call__(self, page_index: int, document: BeautifulSoup) -> List[PageRecord]:
        results = []
        for item in document.select(self.item_selector):
            title_tag = item.select_one(self.title_selector)
            title = title_tag.decode_contents() if title_tag else ""

            link_tag = item.select_one(self.link_selector)
            link = link_tag.get("href", MISSING_LINK) if link_tag else MISSING_LINK

            results.append(PageRecord(page_index=page_index, title=title, link=link))

        logger.debug(f"[Douban] Page {page_index} 提取到 {len(results)} 筆記錄。")
        return results


def create_douban_extractor() -> DoubanExtractor:
    """工廠函數：創建一個使用豆瓣列表頁選擇器的提取器。"""
    return DoubanExtractor(
        item_selector="div.item",
        title_selector="div.hd > a > span.title",
        link_selector="div.hd > a",
    )
