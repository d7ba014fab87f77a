"""
=============================================================================
HTTP REQUEST FRAMING
=============================================================================

Turns the decoded text of one socket read into an HTTPRequest the router
can dispatch on.

=============================================================================
ONE READ, ONE REQUEST
=============================================================================

The server reads a single buffer per connection and never loops to drain
the rest. Whatever arrived in that read IS the request:

    ┌─────────────────────────────────────────────────────────────────┐
    │  REQUEST LINE                                                    │
    │  PUT /contacts/7 HTTP/1.1\r\n                                   │
    │  └─┘ └─────────┘ └──────┘                                        │
    │  Method   Path    Version         ← used for routing             │
    ├─────────────────────────────────────────────────────────────────┤
    │  HEADERS                                                         │
    │  Host: localhost:8080\r\n                                       │
    │  Content-Type: application/json\r\n  ← parsed, for DEBUG log    │
    │  \r\n                                                            │
    ├─────────────────────────────────────────────────────────────────┤
    │  BODY                                                            │
    │  {"name":"Ana","email":"a@x.com","phone":"555"}                 │
    │                                    ← whatever follows, no       │
    │                                      Content-Length check       │
    └─────────────────────────────────────────────────────────────────┘

A body cut short by the buffer is not detected here. It simply fails JSON
decoding later and the handler answers with an internal error.

The full decoded text is kept on HTTPRequest.text because the contact
handlers pull the id and body out of it directly (see contacts.parsing).

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict
from urllib.parse import urlparse, unquote
import re


class HTTPParseError(Exception):
    """
    Raised when the request line can't be parsed.

    The server answers these with the same response as an unknown route:
    a request it can't read is a request it has no handler for.
    """


@dataclass
class HTTPRequest:
    """
    A request as seen by the router and handlers.

    Attributes:
        method: Upper-case HTTP method ("GET", "POST", ...).
        path: URL-decoded path without the query string.
        version: Protocol version from the request line.
        headers: Header names lower-cased.
        body: Text following the first blank line.
        text: The entire decoded request, untouched.
        client_address: (ip, port) of the peer.
        path_params: Filled in by the router on a match.
    """

    method: str
    path: str
    version: str = "HTTP/1.1"
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    text: str = ""
    client_address: tuple[str, int] = ("", 0)
    path_params: Dict[str, str] = field(default_factory=dict)


class RequestParser:
    """
    Parses decoded request text into HTTPRequest objects.

    Lenient on purpose: headers that don't look like "Name: value" are
    skipped, a missing blank line just means "no body", and the body is
    never checked against Content-Length. Only the request line is
    mandatory.

    REQUEST_LINE_PATTERN: ^([A-Z]+) ([^ ]+) (HTTP/\\d\\.\\d)$

        ([A-Z]+)      - METHOD
        ([^ ]+)       - URI (path + optional query)
        (HTTP/\\d\\.\\d) - Version
    """

    REQUEST_LINE_PATTERN = re.compile(r"^([A-Z]+) ([^ ]+) (HTTP/\d\.\d)$")
    HEADER_PATTERN = re.compile(r"^([^:]+):\s*(.*)$")

    def parse(
        self,
        text: str,
        client_address: tuple[str, int] = ("", 0)
    ) -> HTTPRequest:
        """
        Parse one request.

        Args:
            text: The request as decoded from the socket buffer.
            client_address: Client's (ip, port) tuple for logging.

        Returns:
            Parsed HTTPRequest object.

        Raises:
            HTTPParseError: If the request line is missing or malformed.
        """
        # Split headers and body at the first \r\n\r\n
        header_end = text.find("\r\n\r\n")
        if header_end == -1:
            header_section, body = text, ""
        else:
            header_section, body = text[:header_end], text[header_end + 4:]

        lines = header_section.split("\r\n")
        if not lines or not lines[0]:
            raise HTTPParseError("Empty request")

        method, path, version = self._parse_request_line(lines[0])
        headers = self._parse_headers(lines[1:])

        return HTTPRequest(
            method=method,
            path=path,
            version=version,
            headers=headers,
            body=body,
            text=text,
            client_address=client_address,
        )

    def _parse_request_line(self, line: str) -> tuple[str, str, str]:
        """
        Parse "METHOD SP REQUEST-URI SP HTTP-VERSION".

        The query string is dropped; the contact routes don't take one.
        """
        match = self.REQUEST_LINE_PATTERN.match(line)
        if not match:
            raise HTTPParseError(f"Invalid request line: {line!r}")

        method, uri, version = match.groups()
        path = unquote(urlparse(uri).path) or "/"
        return method, path, version

    def _parse_headers(self, lines: list[str]) -> Dict[str, str]:
        """
        Parse header lines into a dict with lower-cased names.

        Repeated headers are joined with ", " as RFC 7230 allows.
        """
        headers: Dict[str, str] = {}

        for line in lines:
            match = self.HEADER_PATTERN.match(line)
            if not match:
                continue

            name, value = match.groups()
            name = name.strip().lower()
            value = value.strip()

            if name in headers:
                headers[name] += ", " + value
            else:
                headers[name] = value

        return headers


def parse_request(
    text: str,
    client_address: tuple[str, int] = ("", 0)
) -> HTTPRequest:
    """Parse a request with a throwaway RequestParser."""
    return RequestParser().parse(text, client_address)
