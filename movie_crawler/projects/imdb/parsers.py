# movie_crawler/projects/imdb/parsers.py
"""
Parsers for IMDb list pages.

IMDb embeds the list as machine-generated JSON-LD inside the page. Rather than
pulling in a full JSON parse of a large, partially irregular blob, the scan
below walks the raw text for `ListItem` wrappers and slices out the `url`
and `name` fields that follow each one.
"""
import logging
from typing import List

from movie_crawler.core.models import PageRecord

logger = logging.getLogger(__name__)

LIST_ITEM_MARKER = '@type":"ListItem","item":{"@type":"'
URL_KEY = 'url":"'
NAME_KEY = '"name":"'
# Fixed cursor step from each marker start. Dense input can overlap or skip
# items shorter than this step.
SCAN_STEP = 50


def parse_titles_from_next_data(start_offset: int, text: str) -> List[PageRecord]:
    """
    Extracts (rank, title, url) records from raw page text.

    Ranks are `start_offset + n` where n counts successful extractions from 1.
    An occurrence missing either field is skipped without advancing n, and the
    cursor always moves forward so malformed input terminates.
    """
    results = []
    pos = 0
    index = 1

    while (start := text.find(LIST_ITEM_MARKER, pos)) != -1:
        tail = text[start + len(LIST_ITEM_MARKER):]

        url_pos = tail.find(URL_KEY)
        if url_pos != -1:
            url_start = url_pos + len(URL_KEY)
            url_end = tail.find('"', url_start)
            if url_end != -1:
                url = tail[url_start:url_end]

                # name must come after the url field
                name_pos = tail.find(NAME_KEY, url_end)
                if name_pos != -1:
                    name_start = name_pos + len(NAME_KEY)
                    name_end = tail.find('"', name_start)
                    if name_end != -1:
                        title = tail[name_start:name_end]
                        results.append(PageRecord(page_index=start_offset + index, title=title, link=url))
                        index += 1

        pos = start + SCAN_STEP

    logger.debug(f"[IMDb] Extracted {len(results)} items starting at offset {start_offset}.")
    return results
