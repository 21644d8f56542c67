import requests
import structlog
from pydantic import ValidationError

from ..errors import UpstreamProtocolError, UpstreamRejected, UpstreamUnreachable
from ..schemas import ArticlesPayload, SearchCursor, SearchResult, UpstreamError
from ..search import DEFAULT_PAGE_SIZE, build_result

API = "https://newsapi.org/v2"

log = structlog.get_logger(__name__)

class ArticleFetcher:
    """
    Runs one newsapi.org ``/everything`` query per call and turns the response
    into a SearchResult.

    - Holds configuration only; ``http`` is anything with a requests-style
      ``get`` (the ``requests`` module itself by default).
    - No retries: a failed call raises a FetchFailure subclass.
    - The response is always closed, whichever way the call ends.
    """

    def __init__(self, base_url: str = API, language: str = "en", timeout: float = 10.0, http=None):
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.timeout = timeout
        self._http = http or requests

    def build_params(self, cursor: SearchCursor, api_key: str, page_size: int) -> dict:
        return {
            "q": cursor.keyword,
            "pageSize": page_size,
            "page": cursor.requested_page,
            "apiKey": api_key,
            "sortBy": "publishedAt",
            "language": self.language,
        }

    def fetch(self, cursor: SearchCursor, api_key: str, page_size: int = DEFAULT_PAGE_SIZE) -> SearchResult:
        endpoint = f"{self.base_url}/everything"
        params = self.build_params(cursor, api_key, page_size)
        log.info("newsapi.request", keyword=cursor.keyword, page=cursor.requested_page, page_size=page_size)
        try:
            resp = self._http.get(endpoint, params=params, timeout=self.timeout, stream=True)
        except requests.RequestException as exc:
            log.warning("newsapi.unreachable", error=str(exc))
            raise UpstreamUnreachable() from exc

        with resp:
            if resp.status_code != 200:
                err = _decode(resp, UpstreamError)
                log.warning("newsapi.rejected", status_code=resp.status_code, code=err.code, message=err.message)
                raise UpstreamRejected(err.message, code=err.code)
            payload = _decode(resp, ArticlesPayload)

        result = build_result(cursor, payload, page_size)
        log.info("newsapi.response", total_results=result.total_results, total_pages=result.total_pages,
                 returned=len(result.articles))
        return result

def _decode(resp, model):
    try:
        return model.model_validate(resp.json())
    except (ValueError, ValidationError, requests.RequestException) as exc:
        # ValueError covers requests' JSONDecodeError; RequestException covers a body cut off mid-read
        log.warning("newsapi.bad_payload", status_code=resp.status_code, expected=model.__name__, error=str(exc))
        raise UpstreamProtocolError() from exc
