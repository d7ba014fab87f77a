"""
The contact resource: model, storage, request decoding and route handlers.
"""

from .models import Contact, ContactDecodeError, contacts_to_json
from .parsing import extract_id, extract_body, parse_contact_id
from .storage import ContactStore, StorageError
from .handlers import ContactHandlers

__all__ = [
    "Contact",
    "ContactDecodeError",
    "contacts_to_json",
    "extract_id",
    "extract_body",
    "parse_contact_id",
    "ContactStore",
    "StorageError",
    "ContactHandlers",
]
