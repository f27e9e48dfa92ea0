"""Custom exception hierarchy."""

from __future__ import annotations


class QueryError(Exception):
    """Base exception for all library errors."""

    pass


class CapabilityError(QueryError):
    """A required collaborator capability was not supplied.

    Raised when a capability set is built without one of its required
    callables. This is a configuration bug in the calling code, not a
    problem with the request being served.
    """

    def __init__(self, message: str, capability: str | None = None) -> None:
        super().__init__(message)
        self.capability = capability


class MissingFetchIDsCapability(CapabilityError):
    """No primary-ID fetch callable was configured."""

    def __init__(self, message: str = "missing fetch_ids capability") -> None:
        super().__init__(message, capability="fetch_ids")


class MissingFetchResourcesCapability(CapabilityError):
    """No resource fetch callable was configured."""

    def __init__(self, message: str = "missing fetch_resources capability") -> None:
        super().__init__(message, capability="fetch_resources")


class ParamsError(QueryError):
    """The query parameters of a request are malformed.

    These surface to the API caller as a client error.
    """

    status_code = 400

    def __init__(self, message: str, params: list[str] | None = None) -> None:
        super().__init__(message)
        self.params = params or []


class MismatchedFieldsParams(ParamsError):
    """Both ``fields`` and ``fields[kind]`` were given in one request."""

    def __init__(self, params: list[str] | None = None) -> None:
        super().__init__(
            "mismatched fields param, got fields and fields[kind] - "
            "use one format or the other",
            params=params,
        )


class MismatchedSortParams(ParamsError):
    """Both ``sort`` and ``sort[kind]`` were given in one request."""

    def __init__(self, params: list[str] | None = None) -> None:
        super().__init__(
            "mismatched sort param, got sort and sort[kind] - use one format or the other",
            params=params,
        )


class ValidationError(QueryError):
    """A collaborator returned data of the wrong shape."""

    pass
