"""
Unit tests for HTTP response serialization.
"""

from contactserver.http.response import (
    HTTPResponse,
    HTTPStatus,
    ok,
    not_found,
    route_not_found,
    internal_error,
)


class TestHTTPResponse:
    """Tests for HTTPResponse class."""

    def test_status_line(self):
        """Test status line generation uses the server's phrases."""
        assert HTTPResponse(status=HTTPStatus.OK).status_line == "HTTP/1.1 200 OK"
        assert HTTPResponse(status=HTTPStatus.NOT_FOUND).status_line == "HTTP/1.1 400 NOT FOUND"
        assert (
            HTTPResponse(status=HTTPStatus.INTERNAL_SERVER_ERROR).status_line
            == "HTTP/1.1 500 INTERNAL ERROR"
        )

    def test_to_bytes_adds_no_headers(self):
        """Test that nothing beyond the handler's headers is written."""
        result = HTTPResponse(status=HTTPStatus.NOT_FOUND, body=b"gone").to_bytes()
        assert result == b"HTTP/1.1 400 NOT FOUND\r\n\r\ngone"

    def test_set_header_chaining(self):
        """Test method chaining for headers."""
        response = (HTTPResponse()
            .set_header("X-One", "1")
            .set_header("X-Two", "2"))

        assert response.headers == {"X-One": "1", "X-Two": "2"}

    def test_set_body_encodes_text(self):
        """Test that str bodies become UTF-8 bytes."""
        response = HTTPResponse().set_body("José")
        assert response.body == "José".encode("utf-8")
        assert response.text == "José"


class TestConvenienceFunctions:
    """Tests for the fixed responses."""

    def test_ok(self):
        """Test 200 carries the JSON content-type."""
        result = ok('{"id":1}').to_bytes()
        assert result == b'HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n{"id":1}'

    def test_ok_with_confirmation(self):
        """Test a plain-text confirmation still goes out on the 200 line."""
        response = ok("Contact created")
        assert response.status == HTTPStatus.OK
        assert response.headers["Content-Type"] == "application/json"
        assert response.text == "Contact created"

    def test_not_found(self):
        """Test the contact-not-found response."""
        assert not_found().to_bytes() == b"HTTP/1.1 400 NOT FOUND\r\n\r\nContact not found"

    def test_route_not_found(self):
        """Test the route-miss response shares the 400 line."""
        response = route_not_found()
        assert response.status == 400
        assert response.text == "Not found"

    def test_internal_error(self):
        """Test the 500 response."""
        assert internal_error().to_bytes() == b"HTTP/1.1 500 INTERNAL ERROR\r\n\r\nInternal error"
