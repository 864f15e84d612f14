import logging
import threading
import time
from typing import List, Optional

import pytest
from pydantic import ValidationError

from movie_crawler.core.errors import MissingDependencyError, NetworkError
from movie_crawler.core.models import PageRange, PageRecord
from movie_crawler.core.scheduler import schedule_fetch, scrape_douban_top250, scrape_imdb_top1000


class OneRecordPerPage:
    """Deterministic strategy: page p yields (p, "title{p}", "link{p}")."""
    def __init__(self, delays: Optional[dict] = None):
        self.delays = delays or {}

    def fetch_page(self, page_index, page_size, extractor=None) -> List[PageRecord]:
        time.sleep(self.delays.get(page_index, 0))
        return [PageRecord(page_index=page_index, title=f"title{page_index}", link=f"link{page_index}")]


class ReversedCompletion:
    """Page 2 finishes first; page 1 waits for it. Each page yields two records."""
    def __init__(self):
        self.page2_done = threading.Event()
        self.completed = []

    def fetch_page(self, page_index, page_size, extractor=None):
        if page_index == 1:
            assert self.page2_done.wait(timeout=5)
            time.sleep(0.05)
        records = [
            PageRecord(page_index=page_index, title=f"{page_index}-a", link="x"),
            PageRecord(page_index=page_index, title=f"{page_index}-b", link="y"),
        ]
        self.completed.append(page_index)
        if page_index == 2:
            self.page2_done.set()
        return records


class FailingPages:
    def __init__(self, network_fail=(), crash=()):
        self.network_fail = set(network_fail)
        self.crash = set(crash)

    def fetch_page(self, page_index, page_size, extractor=None):
        if page_index in self.network_fail:
            raise NetworkError(page_index, "boom")
        if page_index in self.crash:
            raise RuntimeError("task exploded")
        return [PageRecord(page_index=page_index, title=f"title{page_index}", link=f"link{page_index}")]


def test_schedule_fetch_orders_by_page_index():
    page_range = PageRange(start_page=0, end_page=3, page_size=25)
    strategy = OneRecordPerPage(delays={0: 0.1, 1: 0.05, 2: 0})

    result = schedule_fetch(page_range, strategy, site_label="Test")

    assert [r.as_tuple() for r in result] == [
        (0, "title0", "link0"),
        (1, "title1", "link1"),
        (2, "title2", "link2"),
    ]


def test_schedule_fetch_is_stable_under_reversed_completion():
    strategy = ReversedCompletion()
    result = schedule_fetch(PageRange(start_page=1, end_page=3, page_size=10), strategy, site_label="Test")

    assert strategy.completed == [2, 1]
    assert [r.title for r in result] == ["1-a", "1-b", "2-a", "2-b"]


def test_schedule_fetch_passes_page_size_and_extractor():
    calls = []
    sentinel_extractor = object()

    class Recording:
        def fetch_page(self, page_index, page_size, extractor=None):
            calls.append((page_index, page_size, extractor))
            return []

    schedule_fetch(PageRange(start_page=2, end_page=4, page_size=25), Recording(), sentinel_extractor, "Test")

    assert sorted(calls, key=lambda c: c[0]) == [(2, 25, sentinel_extractor), (3, 25, sentinel_extractor)]


def test_schedule_fetch_isolates_fetch_errors(caplog):
    caplog.set_level(logging.ERROR)
    strategy = FailingPages(network_fail={1})

    result = schedule_fetch(PageRange(start_page=0, end_page=3, page_size=25), strategy, site_label="Test")

    assert [r.page_index for r in result] == [0, 2]
    assert "[Test] Page 1 fetch failed: boom" in caplog.messages


def test_schedule_fetch_logs_task_faults(caplog):
    caplog.set_level(logging.ERROR)
    strategy = FailingPages(crash={0})

    result = schedule_fetch(PageRange(start_page=0, end_page=2, page_size=25), strategy, site_label="Test")

    assert [r.page_index for r in result] == [1]
    join_lines = [m for m in caplog.messages if m.startswith("[Test] Join error:")]
    assert len(join_lines) == 1
    assert "task exploded" in join_lines[0]


def test_schedule_fetch_all_pages_failing_returns_empty(caplog):
    caplog.set_level(logging.ERROR)
    strategy = FailingPages(network_fail={0, 1}, crash={2})

    result = schedule_fetch(PageRange(start_page=0, end_page=3, page_size=25), strategy, site_label="Test")

    assert result == []


def test_schedule_fetch_missing_extractor_is_contained(caplog):
    caplog.set_level(logging.ERROR)

    class NeedsExtractor:
        def fetch_page(self, page_index, page_size, extractor=None):
            if extractor is None:
                raise MissingDependencyError(page_index, "Parser is required")
            return []

    result = schedule_fetch(PageRange(start_page=0, end_page=1, page_size=25), NeedsExtractor(), site_label="Douban")

    assert result == []
    assert "[Douban] Page 0 fetch failed: Parser is required" in caplog.messages


def test_schedule_fetch_success_path_does_not_log(caplog):
    caplog.set_level(logging.DEBUG, logger="movie_crawler.core.scheduler")
    schedule_fetch(PageRange(start_page=0, end_page=2, page_size=25), OneRecordPerPage(), site_label="Test")

    assert [r for r in caplog.records if r.name == "movie_crawler.core.scheduler"] == []


def test_schedule_fetch_empty_range():
    assert schedule_fetch(PageRange(start_page=3, end_page=3, page_size=25), OneRecordPerPage()) == []


def test_schedule_fetch_is_idempotent():
    page_range = PageRange(start_page=0, end_page=5, page_size=10)
    first = schedule_fetch(page_range, OneRecordPerPage(delays={0: 0.02, 3: 0.01}))
    second = schedule_fetch(page_range, OneRecordPerPage(delays={4: 0.02, 1: 0.01}))

    assert [r.model_dump_json() for r in first] == [r.model_dump_json() for r in second]


def test_output_is_monotonic_for_multi_record_pages():
    class ManyPerPage:
        def fetch_page(self, page_index, page_size, extractor=None):
            time.sleep(0.01 * (5 - page_index))
            return [PageRecord(page_index=page_index, title=str(n), link="l") for n in range(3)]

    result = schedule_fetch(PageRange(start_page=0, end_page=5, page_size=3), ManyPerPage())

    indices = [r.page_index for r in result]
    assert indices == sorted(indices)
    assert len(result) == 15
    assert [r.title for r in result[:3]] == ["0", "1", "2"]


@pytest.mark.parametrize("kwargs", [
    {"start_page": 3, "end_page": 2, "page_size": 25},
    {"start_page": 0, "end_page": 2, "page_size": 0},
])
def test_invalid_page_range_is_rejected(kwargs):
    with pytest.raises(ValidationError):
        PageRange(**kwargs)


def test_site_presets_use_configured_ranges():
    calls = []

    class Recording:
        def fetch_page(self, page_index, page_size, extractor=None):
            calls.append((page_index, page_size))
            return [PageRecord(page_index=page_index, title="t", link="l")]

    douban = scrape_douban_top250(Recording(), extractor=object())
    assert [r.page_index for r in douban] == list(range(10))
    assert {size for _, size in calls} == {25}

    calls.clear()
    imdb = scrape_imdb_top1000(Recording())
    assert [r.page_index for r in imdb] == [0, 1, 2, 3]
    assert {size for _, size in calls} == {250}


def test_schedule_fetch_contains_non_exception_task_faults(caplog):
    caplog.set_level(logging.ERROR)

    class DyingWorker:
        def fetch_page(self, page_index, page_size, extractor=None):
            if page_index == 0:
                raise SystemExit("worker died")
            return [PageRecord(page_index=page_index, title=f"title{page_index}", link=f"link{page_index}")]

    result = schedule_fetch(PageRange(start_page=0, end_page=2, page_size=25), DyingWorker(), site_label="Test")

    assert [r.page_index for r in result] == [1]
    join_lines = [m for m in caplog.messages if m.startswith("[Test] Join error:")]
    assert len(join_lines) == 1
    assert "worker died" in join_lines[0]
