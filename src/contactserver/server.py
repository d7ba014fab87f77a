"""
=============================================================================
CONTACT SERVER
=============================================================================

Ties the pieces together:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                         REQUEST FLOW                                │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   SocketServer.accept()                                              │
    │        │                                                             │
    │        ▼                                                             │
    │   Connection.read_request()       one recv(buffer_size)              │
    │        │                                                             │
    │        ▼                                                             │
    │   bytes.decode("utf-8", "replace")                                   │
    │        │                                                             │
    │        ▼                                                             │
    │   RequestParser.parse()   ──► HTTPParseError ──► 400 route miss      │
    │        │                                                             │
    │        ▼                                                             │
    │   Router.handle()         ──► ContactHandlers ──► ContactStore       │
    │        │                                                             │
    │        ▼                                                             │
    │   Connection.send_response(response.to_bytes())                      │
    │        │                                                             │
    │        ▼                                                             │
    │   Connection.close()      then back to accept()                      │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
STARTUP ORDER
=============================================================================

    1. logging.basicConfig
    2. store.ensure_schema()    ← StorageError here aborts run()
    3. bind + listen            ← OSError here aborts run()
    4. accept loop (blocks until shutdown)

=============================================================================
"""

import logging
from typing import Optional

from .config import ServerConfig
from .core import SocketServer, Connection
from .contacts import ContactHandlers, ContactStore
from .http import (
    HTTPResponse,
    HTTPParseError,
    RequestParser,
    Router,
    internal_error,
    route_not_found,
)


logger = logging.getLogger(__name__)


class ContactServer:
    """
    The contact CRUD server.

    Usage:
        config = ServerConfig.from_env()
        server = ContactServer(config)
        server.run()                      # Blocks until Ctrl+C

    A store can be injected (tests pass an in-memory one); otherwise a
    ContactStore is built from config.database_url.
    """

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        store: Optional[ContactStore] = None,
    ):
        self.config = config or ServerConfig.from_env()
        self.config.validate()

        self.store = store or ContactStore(self.config.database_url)

        self._socket_server = SocketServer(self.config)
        self._parser = RequestParser()
        self._router = ContactHandlers(self.store).register(Router())

        self._running = False

    @property
    def router(self) -> Router:
        return self._router

    @property
    def address(self):
        """Bound (host, port) once running."""
        return self._socket_server.address

    # =========================================================================
    # SERVER LIFECYCLE
    # =========================================================================

    def run(self):
        """
        Ensure the schema, then serve until shutdown.

        Raises:
            StorageError: If the contacts table can't be ensured.
            OSError: If the listening socket can't be bound.
        """
        self._setup_logging()

        try:
            self.store.ensure_schema()
        except Exception as e:
            logger.error(f"Schema initialization failed: {e}")
            raise

        self._router.log_routes()
        self._running = True

        try:
            self._socket_server.start(self._handle_connection)
        except KeyboardInterrupt:
            logger.info("Received keyboard interrupt")
        finally:
            self._running = False
            logger.info("Server stopped")

    def shutdown(self):
        """Ask the accept loop to stop (it notices within a second)."""
        self._socket_server.shutdown()

    @property
    def is_running(self) -> bool:
        return self._running and self._socket_server.is_running

    def _setup_logging(self):
        """Configure logging based on config."""
        level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logging.getLogger("contactserver").setLevel(level)

    # =========================================================================
    # REQUEST HANDLING
    # =========================================================================

    def _handle_connection(self, conn: Connection):
        """
        Serve one connection start to finish (runs on the accept loop).

        Every connection gets a response. An empty read dispatches like any
        other text and gets the route-miss response; if the peer is
        really gone the send just fails.
        """
        with conn:
            try:
                raw_request = conn.read_request()
                text = raw_request.decode("utf-8", errors="replace")
                response = self.dispatch(text, conn.address)
                conn.send_response(response.to_bytes())
            except Exception as e:
                logger.exception(f"[{conn.id}] Connection error: {e}")

    def dispatch(self, text: str, client_address: tuple[str, int] = ("", 0)) -> HTTPResponse:
        """
        Route decoded request text to a handler and return its response.

        Unparseable requests get the route-miss response. An exception
        escaping a handler is logged and answered with an internal error.
        """
        try:
            request = self._parser.parse(text, client_address)
        except HTTPParseError:
            return route_not_found()

        logger.debug(
            f"{request.method} {request.path} from {client_address[0]} "
            f"content-type={request.headers.get('content-type', '-')} "
            f"user-agent={request.headers.get('user-agent', '-')}"
        )

        try:
            return self._router.handle(request)
        except Exception as e:
            logger.exception(f"Handler error: {e}")
            return internal_error()


def create_app(config: Optional[ServerConfig] = None) -> ContactServer:
    """Factory for a ContactServer with the default PostgreSQL store."""
    return ContactServer(config)
