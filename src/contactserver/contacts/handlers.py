"""
=============================================================================
CONTACT HANDLERS
=============================================================================

One handler per route. Each one:

    1. Decodes what it needs from the request text (id, body, or nothing)
    2. Runs ONE store call
    3. Maps the outcome to a fixed response

    ┌────────────┬───────────────────────┬───────────────────────────────┐
    │ Handler    │ Success               │ Failure                       │
    ├────────────┼───────────────────────┼───────────────────────────────┤
    │ create     │ 200 "Contact created" │ 500 bad body / storage        │
    │ get_by_id  │ 200 contact JSON      │ 400 missing, 500 bad id/store │
    │ list_all   │ 200 JSON array        │ 500 storage                   │
    │ update     │ 200 "Contact updated" │ 500 bad id/body / storage     │
    │ delete     │ 200 "Contact deleted" │ 400 missing, 500 bad id/store │
    └────────────┴───────────────────────┴───────────────────────────────┘

Update never answers "not found": updating an id that doesn't exist still
reports "Contact updated".

Errors are turned into responses right here and go no further. Nothing is
logged for them.

=============================================================================
"""

from ..http.request import HTTPRequest
from ..http.response import (
    HTTPResponse,
    ok,
    not_found,
    internal_error,
    CREATED_MESSAGE,
    UPDATED_MESSAGE,
    DELETED_MESSAGE,
)
from ..http.router import Router
from .models import ContactDecodeError, contacts_to_json
from .parsing import extract_body, parse_contact_id
from .storage import ContactStore, StorageError


# Everything a handler converts into a 500
HANDLED_ERRORS = (ContactDecodeError, StorageError)


class ContactHandlers:
    """Route handlers bound to a ContactStore."""

    def __init__(self, store: ContactStore):
        self.store = store

    def create(self, request: HTTPRequest) -> HTTPResponse:
        try:
            contact = extract_body(request.text)
            self.store.insert(contact)
        except HANDLED_ERRORS:
            return internal_error()
        return ok(CREATED_MESSAGE)

    def get_by_id(self, request: HTTPRequest) -> HTTPResponse:
        try:
            contact_id = parse_contact_id(request.text)
            contact = self.store.get_by_id(contact_id)
        except HANDLED_ERRORS:
            return internal_error()

        if contact is None:
            return not_found()
        return ok(contact.to_json())

    def list_all(self, request: HTTPRequest) -> HTTPResponse:
        try:
            contacts = self.store.list_all()
        except StorageError:
            return internal_error()
        return ok(contacts_to_json(contacts))

    def update(self, request: HTTPRequest) -> HTTPResponse:
        try:
            contact_id = parse_contact_id(request.text)
            contact = extract_body(request.text)
            self.store.update(contact_id, contact)
        except HANDLED_ERRORS:
            return internal_error()
        return ok(UPDATED_MESSAGE)

    def delete(self, request: HTTPRequest) -> HTTPResponse:
        try:
            contact_id = parse_contact_id(request.text)
            deleted = self.store.delete(contact_id)
        except HANDLED_ERRORS:
            return internal_error()

        if not deleted:
            return not_found()
        return ok(DELETED_MESSAGE)

    def register(self, router: Router) -> Router:
        """
        Add the contact routes to ``router`` in match order.

        get_by_id goes before list_all so "/contacts/<anything>" never
        falls through to the listing. Paths are matched whole, so
        "POST /contacts/5" or "GET /contacts/1/extra" reach no handler
        and get the route-miss response.
        """
        router.add_route("/contacts", self.create, method="POST", name="create_contact")
        router.add_route("/contacts/:id", self.get_by_id, method="GET", name="get_contact")
        router.add_route("/contacts", self.list_all, method="GET", name="list_contacts")
        router.add_route("/contacts/:id", self.update, method="PUT", name="update_contact")
        router.add_route("/contacts/:id", self.delete, method="DELETE", name="delete_contact")
        return router
