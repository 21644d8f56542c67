# Request parsing and pagination math. No I/O in here; the fetcher does the network part.
import math
from typing import Mapping, Optional

from .errors import InvalidPageNumber
from .schemas import ArticlesPayload, SearchCursor, SearchResult

DEFAULT_PAGE_SIZE = 20

def parse_search_params(params: Mapping[str, str]) -> SearchCursor:
    keyword = params.get("q") or ""
    raw_page: Optional[str] = params.get("page")
    if raw_page is None or not raw_page.strip():
        return SearchCursor(keyword=keyword, requested_page=1)
    raw_page = raw_page.strip()
    if not raw_page.isdecimal():
        raise InvalidPageNumber(raw_page)
    try:
        page = int(raw_page)
    except ValueError:
        # past the interpreter's digit limit
        raise InvalidPageNumber(raw_page) from None
    if page < 1:
        raise InvalidPageNumber(raw_page)
    return SearchCursor(keyword=keyword, requested_page=page)

def count_pages(total_results: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be positive")
    return math.ceil(total_results / page_size)

def build_result(cursor: SearchCursor, payload: ArticlesPayload, page_size: int = DEFAULT_PAGE_SIZE) -> SearchResult:
    total_pages = count_pages(payload.total_results, page_size)
    current = cursor.requested_page
    next_page = current + 1 if current < total_pages else current
    return SearchResult(
        keyword=cursor.keyword,
        articles=payload.articles,
        current_page=current,
        next_page=next_page,
        total_pages=total_pages,
        total_results=payload.total_results,
    )
