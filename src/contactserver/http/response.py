"""
=============================================================================
HTTP RESPONSES
=============================================================================

Every response the contact server sends is one of three FIXED status blocks
followed by a body:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     RESPONSE SHAPES                                  │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   HTTP/1.1 200 OK\r\n                                               │
    │   Content-Type: application/json\r\n                                │
    │   \r\n                                                               │
    │   {"id":1,"name":"Ana","email":"a@x.com","phone":"555"}             │
    │                                                                      │
    │   HTTP/1.1 400 NOT FOUND\r\n                                        │
    │   \r\n                                                               │
    │   Contact not found                                                  │
    │                                                                      │
    │   HTTP/1.1 500 INTERNAL ERROR\r\n                                   │
    │   \r\n                                                               │
    │   Internal error                                                     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

No header is synthesized: there is no Content-Length, Date or Server line.
The body ends when the server closes the connection, which it always does
after one response.

Bodies are JSON for reads and plain text for writes and errors. The JSON
content-type header rides on every 200, including the plain confirmation
strings ("Contact created", ...). Clients have always relied on that, so it
stays.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .status_codes import HTTPStatus


JSON_CONTENT_TYPE = "application/json"

# Fixed bodies
CREATED_MESSAGE = "Contact created"
UPDATED_MESSAGE = "Contact updated"
DELETED_MESSAGE = "Contact deleted"
CONTACT_NOT_FOUND_MESSAGE = "Contact not found"
ROUTE_NOT_FOUND_MESSAGE = "Not found"
INTERNAL_ERROR_MESSAGE = "Internal error"


@dataclass
class HTTPResponse:
    """
    A response ready to be written to the socket.

    =========================================================================
    RESPONSE LIFECYCLE
    =========================================================================

        Handler returns          to_bytes()              Socket sends
        HTTPResponse    ─────►   serializes    ─────►    raw bytes
            │                       │                        │
        HTTPResponse(            b"HTTP/1.1 200 OK\r\n   conn.send_response(
          status=200,              Content-Type: ...\r\n     response_bytes
          headers={...},           \r\n                    )
          body=b"..."              {\"id\":1,...}"
        )

    =========================================================================
    """

    status: HTTPStatus = HTTPStatus.OK
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    version: str = "HTTP/1.1"

    @property
    def status_line(self) -> str:
        """
        Status line, e.g. "HTTP/1.1 400 NOT FOUND".

        The reason phrase comes from HTTPStatus.phrase, which carries the
        server's own wording rather than the RFC one.
        """
        return f"{self.version} {int(self.status)} {self.status.phrase}"

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 (handy in tests and logs)."""
        return self.body.decode("utf-8")

    def set_header(self, name: str, value: str) -> "HTTPResponse":
        self.headers[name] = value
        return self

    def set_body(self, body: Union[str, bytes]) -> "HTTPResponse":
        """Set the body, encoding strings as UTF-8."""
        if isinstance(body, str):
            self.body = body.encode("utf-8")
        else:
            self.body = body
        return self

    def to_bytes(self) -> bytes:
        """
        Serialize exactly what the handler produced.

            HTTP/1.1 200 OK\r\n                  ← Status line
            Content-Type: application/json\r\n   ← Only headers set by handler
            \r\n                                 ← Separator
            [...]                                ← Body bytes

        Returns:
            Complete HTTP response as bytes ready for socket.sendall()
        """
        lines = [self.status_line]
        for name, value in self.headers.items():
            lines.append(f"{name}: {value}")
        lines.append("")

        header_bytes = "\r\n".join(lines).encode("utf-8") + b"\r\n"
        return header_bytes + self.body


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================
#
# Handlers never build responses by hand; they pick one of these:
#
#     return ok(contact.to_json())
#     return not_found()
#     return internal_error()
#
# =============================================================================

def ok(body: Union[str, bytes] = "") -> HTTPResponse:
    """
    200 OK with the JSON content-type header.

    Args:
        body: Pre-encoded JSON or a confirmation string.
    """
    return (HTTPResponse(status=HTTPStatus.OK)
        .set_header("Content-Type", JSON_CONTENT_TYPE)
        .set_body(body))


def not_found(message: Optional[str] = None) -> HTTPResponse:
    """
    The 400-labeled "NOT FOUND" response.

    Used both when a contact doesn't exist and when no route matches.
    """
    return HTTPResponse(status=HTTPStatus.NOT_FOUND).set_body(
        message if message is not None else CONTACT_NOT_FOUND_MESSAGE
    )


def route_not_found() -> HTTPResponse:
    """Fallback for requests that match no route."""
    return not_found(ROUTE_NOT_FOUND_MESSAGE)


def internal_error(message: str = INTERNAL_ERROR_MESSAGE) -> HTTPResponse:
    """
    500 response for storage failures and undecodable input alike.

    Keep the message generic; callers never learn which of the two it was.
    """
    return HTTPResponse(status=HTTPStatus.INTERNAL_SERVER_ERROR).set_body(message)
