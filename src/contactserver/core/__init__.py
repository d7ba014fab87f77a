"""
=============================================================================
CORE NETWORKING
=============================================================================

The transport half of the server:

    SocketServer   listening socket + serial accept loop
    Connection     one client socket, one read, one write, close

Everything above this layer works with decoded text and HTTPResponse
objects and never touches a socket.
=============================================================================
"""

from .socket_server import SocketServer
from .connection import Connection, ConnectionState

__all__ = [
    "SocketServer",     # Main TCP server - accepts connections
    "Connection",       # Wrapper for client socket - handles I/O
    "ConnectionState",  # Enum for connection lifecycle states
]
