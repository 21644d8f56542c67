"""Failures raised while turning a search request into a result page."""


class SearchError(Exception):
    status_code = 500
    detail = "Unexpected server error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class InvalidPageNumber(SearchError):
    status_code = 400

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid page number: {value!r}")


class FetchFailure(SearchError):
    pass


class UpstreamUnreachable(FetchFailure):
    pass


class UpstreamProtocolError(FetchFailure):
    pass


class UpstreamRejected(FetchFailure):
    # Upstream message is shown to the user as-is.
    def __init__(self, message: str, code: str = ""):
        self.code = code
        super().__init__(message)
