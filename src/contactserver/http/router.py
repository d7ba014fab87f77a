"""
=============================================================================
URL ROUTER
=============================================================================

An explicit route table: (method, path pattern) → handler, tried in
registration order, first match wins.

=============================================================================
ROUTE TABLE FOR THE CONTACT SERVER
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │  #  METHOD   PATTERN           HANDLER                              │
    ├─────────────────────────────────────────────────────────────────────┤
    │  1  POST     /contacts         create                               │
    │  2  GET      /contacts/:id     get_by_id   ← must precede #3        │
    │  3  GET      /contacts         list_all                             │
    │  4  PUT      /contacts/:id     update                               │
    │  5  DELETE   /contacts/:id     delete                               │
    │  -  anything else              400 NOT FOUND                        │
    └─────────────────────────────────────────────────────────────────────┘

ORDER MATTERS. "GET /contacts/" has to land on get_by_id (and fail there
with an empty id), not on list_all, so #2 is registered before #3.

=============================================================================
PATTERN MATCHING
=============================================================================

Patterns compile to anchored regexes:

    Pattern:  /contacts/:id
    Regex:    ^/contacts/(?P<id>[^/]*)$
                        ───────────
                        Named capture, may be EMPTY

    Pattern:  /contacts
    Regex:    ^/contacts/?$
                        ──
                        A static tail tolerates one trailing slash

Parameters may be empty so that a missing id reaches the handler and is
reported as an internal error, not as an unknown route.

Matching is on the whole path, not on a prefix of the request text.
Anything with extra segments is a route miss:

    POST   /contacts/5          400 Not found   (no create-with-id route)
    GET    /contacts/1/extra    400 Not found   (":id" is one segment)
    PUT    /contacts            400 Not found   (update needs an id)

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Dict, List
import logging
import re

from .request import HTTPRequest
from .response import HTTPResponse, route_not_found


logger = logging.getLogger(__name__)

# Handler: takes the request, returns the response to write
Handler = Callable[[HTTPRequest], HTTPResponse]


@dataclass
class Route:
    """
    A registered route.

        Route(
            path="/contacts/:id",
            method="GET",
            handler=handlers.get_by_id,
            name="get_contact",
            _pattern=<compiled>,
            _param_names=["id"],
        )
    """

    path: str                        # URL pattern (e.g., /contacts/:id)
    method: Optional[str]            # HTTP method (None = any method)
    handler: Handler
    name: Optional[str] = None

    _pattern: Optional[re.Pattern] = field(default=None, repr=False)
    _param_names: List[str] = field(default_factory=list, repr=False)


@dataclass
class RouteMatch:
    """A matched route plus the path parameters it captured."""
    route: Route
    params: Dict[str, str]


class Router:
    """
    Method + path router with named path parameters.

    Usage:
        router = Router()

        router.add_route("/contacts/:id", get_contact, method="GET")

        response = router.handle(request)
    """

    def __init__(self):
        self._routes: List[Route] = []
        self._named_routes: Dict[str, Route] = {}

    # =========================================================================
    # ROUTE REGISTRATION
    # =========================================================================

    def add_route(
        self,
        path: str,
        handler: Handler,
        method: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Route:
        """
        Register a route at the END of the table.

        Args:
            path: URL pattern (e.g., /contacts/:id)
            handler: Function taking a request and returning a response
            method: HTTP method (None for any)
            name: Optional route name

        Returns:
            The registered Route object
        """
        pattern, param_names = self._compile_pattern(path)

        route = Route(
            path=path,
            method=method.upper() if method else None,
            handler=handler,
            name=name,
            _pattern=pattern,
            _param_names=param_names,
        )

        self._routes.append(route)
        if name:
            self._named_routes[name] = route

        return route

    def _compile_pattern(self, path: str) -> tuple[re.Pattern, List[str]]:
        """
        Compile a path pattern into a regex.

        Input:  "/contacts/:id"

        Step 1: Split by "/"          ["", "contacts", ":id"]
        Step 2: Map each segment
                "contacts" → /contacts          (static)
                ":id"      → /(?P<id>[^/]*)     (param, may be empty)
        Step 3: Anchor                ^/contacts/(?P<id>[^/]*)$

        A pattern ending in a static segment gets an optional trailing
        slash before the end anchor.
        """
        param_names: List[str] = []
        regex_parts = ["^"]
        ends_static = True

        for segment in path.split("/"):
            if not segment:
                continue

            regex_parts.append("/")

            if segment.startswith(":"):
                param_name = segment[1:]
                param_names.append(param_name)
                regex_parts.append(f"(?P<{param_name}>[^/]*)")
                ends_static = False
            else:
                regex_parts.append(re.escape(segment))
                ends_static = True

        if ends_static:
            regex_parts.append("/?")
        regex_parts.append("$")

        return re.compile("".join(regex_parts)), param_names

    # =========================================================================
    # ROUTE MATCHING
    # =========================================================================

    def match(self, method: str, path: str) -> Optional[RouteMatch]:
        """
        Return the first route matching method and path, or None.

        The path is matched as-is (no trailing slash stripping) so
        "/contacts/" stays distinguishable from "/contacts".
        """
        for route in self._routes:
            if route.method and route.method != method.upper():
                continue

            if route._pattern:
                found = route._pattern.match(path)
                if found:
                    return RouteMatch(route=route, params=found.groupdict())

        return None

    def handle(self, request: HTTPRequest) -> HTTPResponse:
        """
        Dispatch a request.

        1. Find the first matching route
        2. Store captured parameters on request.path_params
        3. Call the handler

        No match at all → the fixed not-found response. There is no 405:
        a wrong method is just another route miss.
        """
        match = self.match(request.method, request.path)

        if match:
            request.path_params = match.params
            return match.route.handler(request)

        return route_not_found()

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def routes(self) -> List[Route]:
        """All registered routes in match order."""
        return list(self._routes)

    def get_route(self, name: str) -> Optional[Route]:
        """Look up a route by the name it was registered with."""
        return self._named_routes.get(name)

    def log_routes(self) -> None:
        """
        Log the route table at INFO level.

        Example output:
            Registered routes:
              POST     /contacts
              GET      /contacts/:id
              GET      /contacts
        """
        logger.info("Registered routes:")
        for route in self._routes:
            logger.info(f"  {route.method or 'ANY':8} {route.path}")
