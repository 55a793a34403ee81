"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class VoteApiError(AdapterError):
    """A vote API call did not fully succeed.

    Covers non-2xx responses, ``success: false`` payloads, transport
    failures and timeouts, and unparsable responses alike.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
