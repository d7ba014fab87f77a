"""
Pull the contact id and JSON body out of raw request text.

Both work on the full decoded request rather than the parsed path, so they
behave the same whatever the router normalized:

    "PUT /contacts/7 HTTP/1.1\\r\\nHost: x\\r\\n\\r\\n{...}"
          │       │ │                         │
          split("/")[2] = "7 HTTP"            └── split("\\r\\n\\r\\n")[-1]
                          └── first token "7"
"""

import re

from .models import Contact, ContactDecodeError


# Plain ASCII decimal only: int() alone would also take "1_0" and "١"
ID_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

# ids are PostgreSQL INTEGER (SERIAL)
ID_MIN = -2 ** 31
ID_MAX = 2 ** 31 - 1


def extract_id(request_text: str) -> str:
    """
    Return the path segment after ``contacts``, or "" if there isn't one.

    The text is split on "/" and segment 2 is cut at the first whitespace,
    which drops the trailing " HTTP" of the request line. No conversion or
    validation happens here.
    """
    segments = request_text.split("/")
    if len(segments) < 3:
        return ""
    tokens = segments[2].split()
    return tokens[0] if tokens else ""


def parse_contact_id(request_text: str) -> int:
    """
    extract_id() converted to an int.

    Only an optional sign followed by ASCII digits is accepted, and the
    value must fit a 32-bit signed integer.

    Raises:
        ContactDecodeError: If the segment is empty, not a plain decimal
                            number, or out of range.
    """
    raw_id = extract_id(request_text)
    if not ID_PATTERN.fullmatch(raw_id):
        raise ContactDecodeError(f"Invalid contact id: {raw_id!r}")

    contact_id = int(raw_id)
    if not ID_MIN <= contact_id <= ID_MAX:
        raise ContactDecodeError(f"Contact id out of range: {raw_id!r}")
    return contact_id


def extract_body(request_text: str) -> Contact:
    """
    Decode the text after the last blank line as a Contact.

    Raises:
        ContactDecodeError: If that text isn't a valid contact payload.
    """
    payload = request_text.split("\r\n\r\n")[-1]
    return Contact.from_json(payload)
