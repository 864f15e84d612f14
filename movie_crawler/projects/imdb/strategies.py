# movie_crawler/projects/imdb/strategies.py
"""
Strategies for IMDb, fetching the compact list view and scanning the embedded
JSON-LD for list items.
"""
import logging
import random
import time
from typing import Any, List, Optional

import requests

from movie_crawler.core.errors import NetworkError
from movie_crawler.core.models import PageRecord
from movie_crawler.core.protocols import Extractor
from movie_crawler.utils import make_request, time_it, write_if_not_exists
from . import parsers

logger = logging.getLogger(__name__)


class ImdbFetchStrategy:
    """
    Strategy Implementation: fetches one page of the IMDb list. Any extractor
    passed in is ignored; records come from the embedded-data scan, ranked
    globally by `page_index * page_size`.
    """
    def __init__(self, session: requests.Session, settings: Any, timeout: float = 20, dump_path: Optional[str] = None):
        self.session = session
        self.cfg = settings
        self.timeout = timeout
        self.dump_path = dump_path

    def fetch_page(self, page_index: int, page_size: int, extractor: Optional[Extractor] = None) -> List[PageRecord]:
        time.sleep(random.uniform(self.cfg.min_delay, self.cfg.max_delay))

        params = {"view": "compact", "page": page_index + 1}
        try:
            text = time_it(
                f"IMDb {page_index} request",
                lambda: make_request(self.session, self.cfg.list_url, params=params, timeout=self.timeout).text,
            )
        except requests.RequestException as e:
            raise NetworkError(page_index, f"Request for page {page_index + 1} failed: {e}") from e

        if self.dump_path:
            try:
                write_if_not_exists(self.dump_path, text)
            except OSError as e:
                logger.warning(f"[IMDb] Could not dump page {page_index} to '{self.dump_path}': {e}")

        return time_it(
            f"Parse {page_index}",
            lambda: parsers.parse_titles_from_next_data(page_index * page_size, text),
        )
