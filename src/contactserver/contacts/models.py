"""
Contact record and its JSON encoding.

Wire format (compact, key order fixed):

    {"id":1,"name":"Ana","email":"a@x.com","phone":"555"}

On the way in, ``id`` may be missing or null. It is accepted but never
used for inserts; the database assigns ids.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional
import json


class ContactDecodeError(ValueError):
    """Raised when an id or payload can't be turned into a Contact."""


TEXT_FIELDS = ("name", "email", "phone")


def _dumps(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


@dataclass
class Contact:
    """A single contact row."""

    name: str
    email: str
    phone: str
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "Contact":
        """
        Build a Contact from a decoded JSON object.

        Raises:
            ContactDecodeError: If ``data`` is not an object, a text field
                is missing or not a string, or ``id`` is neither null nor
                an integer.
        """
        if not isinstance(data, dict):
            raise ContactDecodeError(f"Expected a JSON object, got {type(data).__name__}")

        values = {}
        for name in TEXT_FIELDS:
            if name not in data:
                raise ContactDecodeError(f"Missing field: {name}")
            if not isinstance(data[name], str):
                raise ContactDecodeError(f"Field {name} must be a string")
            values[name] = data[name]

        contact_id = data.get("id")
        # bool is an int subclass; true/false is not an id
        if contact_id is not None and (
            not isinstance(contact_id, int) or isinstance(contact_id, bool)
        ):
            raise ContactDecodeError("Field id must be an integer or null")

        return cls(id=contact_id, **values)

    @classmethod
    def from_json(cls, text: str) -> "Contact":
        """
        Parse a JSON payload.

        Raises:
            ContactDecodeError: On invalid JSON or an invalid shape.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ContactDecodeError(f"Invalid JSON body: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Contact":
        """Map a ``dict_row`` from the contacts table."""
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
        )


def contacts_to_json(contacts: Iterable[Contact]) -> str:
    """Encode contacts as a JSON array, keeping their order."""
    return _dumps([contact.to_dict() for contact in contacts])
