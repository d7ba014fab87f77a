"""
=============================================================================
CONTACTSERVER - CONTACT CRUD OVER RAW HTTP
=============================================================================

A small HTTP/1.1 server on plain TCP sockets that stores contacts in
PostgreSQL.

    POST   /contacts        create          → "Contact created"
    GET    /contacts/:id    read one        → contact JSON
    GET    /contacts        read all        → JSON array
    PUT    /contacts/:id    replace fields  → "Contact updated"
    DELETE /contacts/:id    delete          → "Contact deleted"

=============================================================================
PROJECT STRUCTURE
=============================================================================

    contactserver/
    ├── __init__.py        # Package exports
    ├── __main__.py        # CLI entry point (python -m contactserver)
    ├── config.py          # ServerConfig dataclass
    ├── server.py          # ContactServer: startup + per-connection flow
    ├── core/
    │   ├── socket_server.py  # Listening socket, serial accept loop
    │   └── connection.py     # One client socket, one read, one write
    ├── http/
    │   ├── request.py     # Request line framing
    │   ├── response.py    # Fixed status lines and bodies
    │   ├── router.py      # Ordered route table
    │   └── status_codes.py
    └── contacts/
        ├── models.py      # Contact + JSON codec
        ├── parsing.py     # extract_id / extract_body
        ├── storage.py     # ContactStore (psycopg)
        └── handlers.py    # One handler per route

=============================================================================
"""

__version__ = "1.0.0"

from .server import ContactServer, create_app
from .config import ServerConfig

__all__ = ["ContactServer", "ServerConfig", "create_app", "__version__"]
