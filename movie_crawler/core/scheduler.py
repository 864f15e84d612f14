# movie_crawler/core/scheduler.py
"""
此模組包含頁面調度器，是爬蟲框架的核心大腦。

調度器為每一頁啟動一個獨立的線程任務，按完成順序收集結果，
在頁面邊界隔離失敗，最後按頁碼穩定排序輸出。
"""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional

from movie_crawler.core.errors import FetchError
from movie_crawler.core.models import PageOutcome, PageRange, PageRecord
from movie_crawler.core.protocols import Extractor, FetchStrategy
from movie_crawler.enums import SourceSite
from movie_crawler.settings import settings

logger = logging.getLogger(__name__)


def _fetch_one(
    strategy: FetchStrategy,
    page_index: int,
    page_size: int,
    extractor: Optional[Extractor],
    site_label: str,
) -> PageOutcome:
    """在工作線程中抓取一頁，將 FetchError 轉為失敗結果；其他異常留給 future。"""
    try:
        records = strategy.fetch_page(page_index, page_size, extractor)
    except FetchError as e:
        logger.error(f"[{site_label}] Page {page_index} fetch failed: {e}")
        return PageOutcome(page_index=page_index, error=e)
    return PageOutcome(page_index=page_index, records=list(records))


def schedule_fetch(
    page_range: PageRange,
    strategy: FetchStrategy,
    extractor: Optional[Extractor] = None,
    site_label: str = "",
) -> List[PageRecord]:
    """併發抓取 `[start_page, end_page)` 中的每一頁，返回按頁碼排序的記錄。

    每頁一個任務，不設併發上限；等待所有任務結束後才返回，沒有超時。
    單頁失敗只會使該頁不貢獻記錄，不影響其他頁面。

    Args:
        page_range: 要抓取的頁碼範圍與每頁大小。
        strategy: 站點抓取策略。
        extractor: 可選的頁面提取器，原樣傳給策略。
        site_label: 日誌前綴中的站點名稱。

    Returns:
        List[PageRecord]: 按 `page_index` 穩定升序排列的記錄；同一頁內保持提取器輸出順序。
    """
    pages = page_range.pages()
    if not pages:
        return []

    results: List[PageRecord] = []
    with ThreadPoolExecutor(max_workers=len(pages)) as executor:
        futures = [
            executor.submit(_fetch_one, strategy, page, page_range.page_size, extractor, site_label)
            for page in pages
        ]
        for future in as_completed(futures):
            try:
                outcome = future.result()
            except KeyboardInterrupt:
                raise
            except BaseException as exc:
                # 任務本身異常終止（包括 SystemExit），只丟棄該頁
                logger.error(f"[{site_label}] Join error: {exc!r}", exc_info=True)
                continue
            if outcome.ok:
                results.extend(outcome.records)

    # sorted() 是穩定排序，同頁記錄保持原有順序
    return sorted(results, key=lambda record: record.page_index)


def scrape_douban_top250(strategy: FetchStrategy, extractor: Extractor) -> List[PageRecord]:
    """豆瓣 Top 250：默認 10 頁，每頁 25 部。"""
    cfg = settings.douban
    page_range = PageRange(start_page=cfg.start_page, end_page=cfg.end_page, page_size=cfg.page_size)
    return schedule_fetch(page_range, strategy, extractor, SourceSite.DOUBAN.value)


def scrape_imdb_top1000(strategy: FetchStrategy, extractor: Optional[Extractor] = None) -> List[PageRecord]:
    """IMDb Top 1000：默認 4 頁，每頁 250 部，記錄序號即全局排名。"""
    cfg = settings.imdb
    page_range = PageRange(start_page=cfg.start_page, end_page=cfg.end_page, page_size=cfg.page_size)
    return schedule_fetch(page_range, strategy, extractor, SourceSite.IMDB.value)
