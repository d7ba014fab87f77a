"""
=============================================================================
HTTP STATUS CODES
=============================================================================

The handful of status codes the contact server ever puts on the wire.

The server writes its status lines verbatim, so the reason phrase that goes
out is not always the RFC phrase:

    ┌────────┬──────────────────┬───────────────────────────────────────┐
    │  Code  │  Wire phrase     │  Used for                             │
    ├────────┼──────────────────┼───────────────────────────────────────┤
    │  200   │  OK              │  every successful operation           │
    │  400   │  NOT FOUND       │  missing contact AND unknown route    │
    │  500   │  INTERNAL ERROR  │  storage failures, bad id, bad JSON   │
    └────────┴──────────────────┴───────────────────────────────────────┘

Note the 400 line: clients of this service key off the code, and the code
for "not found" has always been 400. Don't "fix" it to 404.

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes used by the server.

    IntEnum, so members compare equal to plain integers:

        >>> HTTPStatus.OK == 200
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'NOT FOUND'
    """

    OK = 200
    NOT_FOUND = 400               # Label says NOT FOUND, code stays 400
    INTERNAL_SERVER_ERROR = 500

    @property
    def phrase(self) -> str:
        """Reason phrase written on the status line."""
        return _PHRASES[self]


_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.NOT_FOUND: "NOT FOUND",
    HTTPStatus.INTERNAL_SERVER_ERROR: "INTERNAL ERROR",
}
