"""Compiled page router with trie-based path matching.

Routes are registered during setup and compiled into an immutable
lookup structure before the first navigation.
"""

import logging
import re
from dataclasses import dataclass

from tasklane.errors import ConfigurationError, NotFound
from tasklane.routing.params import CONVERTERS
from tasklane.routing.route import PageRoute, PathSegment, RouteMatch

logger = logging.getLogger("tasklane.routing")

_FLASK_PARAM = re.compile(r"^<[^>]*>$")


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route pattern into segments.

    Examples::

        "/today"          -> [PathSegment("today")]
        "/list/{id}"      -> [PathSegment("list"), PathSegment("{id}", is_param=True, ...)]
        "/list/{id:int}"  -> [..., PathSegment("{id:int}", is_param=True, param_type="int")]
        "/"               -> []
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if _FLASK_PARAM.match(part) or part.startswith(":"):
            msg = (
                f"Invalid route pattern {path!r}: use {{param}} for path parameters, "
                "not <param> or :param."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if not param_name:
                msg = f"Invalid route pattern {path!r}: empty parameter name."
                raise ConfigurationError(msg)
            if param_type not in CONVERTERS:
                msg = (
                    f"Invalid route pattern {path!r}: unknown converter {param_type!r}. "
                    f"Supported: {', '.join(sorted(CONVERTERS))}"
                )
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


def _split_target(path: str) -> list[str]:
    """Split a navigated path into segments, dropping query and fragment."""
    path = path.split("#", 1)[0].split("?", 1)[0]
    return [p for p in path.strip("/").split("/") if p]


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_all", "children", "param_child", "route")

    def __init__(self) -> None:
        # Static segment children: "today" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param pattern per level)
        self.param_child: _ParamEdge | None = None
        # Catch-all (path converter)
        self.catch_all: _CatchAllEdge | None = None
        # Route terminating at this node
        self.route: PageRoute | None = None


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


@dataclass(slots=True)
class _CatchAllEdge:
    """A catch-all (path) edge — consumes the remaining path."""

    param_name: str
    route: PageRoute


class PageRouter:
    """Compiled page router.

    Usage::

        router = PageRouter()
        router.add(PageRoute("/", View.HOME))
        router.add(PageRoute("/list/{id}", View.LIST))
        router.compile()
        match = router.resolve("/list/9")
        match.view, match.params   # ("list", {"id": "9"})
    """

    __slots__ = ("_by_name", "_compiled", "_root", "_routes")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False
        self._routes: list[PageRoute] = []
        self._by_name: dict[str, tuple[PageRoute, list[PathSegment]]] = {}

    def add(self, route: PageRoute) -> None:
        """Add a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        if route.name in self._by_name:
            msg = f"Duplicate route name {route.name!r} for pattern {route.path!r}"
            raise ConfigurationError(msg)

        segments = parse_path(route.path)
        node = self._root

        for index, seg in enumerate(segments):
            if seg.is_param and seg.param_type == "path":
                if index != len(segments) - 1:
                    msg = f"Invalid route pattern {route.path!r}: path converter must be last."
                    raise ConfigurationError(msg)
                if node.catch_all is not None:
                    self._duplicate(route)
                node.catch_all = _CatchAllEdge(param_name=seg.param_name or "path", route=route)
                self._register(route, segments)
                return

            if seg.is_param:
                if node.param_child is None:
                    pattern = CONVERTERS[seg.param_type]
                    node.param_child = _ParamEdge(
                        param_name=seg.param_name or "",
                        param_type=seg.param_type,
                        regex=re.compile(f"^{pattern}$"),
                        node=_TrieNode(),
                    )
                elif (
                    node.param_child.param_name != seg.param_name
                    or node.param_child.param_type != seg.param_type
                ):
                    edge = node.param_child
                    msg = (
                        f"Invalid route pattern {route.path!r}: {seg.value} conflicts with "
                        f"{{{edge.param_name}:{edge.param_type}}} registered at the same position."
                    )
                    raise ConfigurationError(msg)
                node = node.param_child.node
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        if node.route is not None:
            self._duplicate(route)
        node.route = route
        self._register(route, segments)

    def _register(self, route: PageRoute, segments: list[PathSegment]) -> None:
        self._routes.append(route)
        self._by_name[route.name] = (route, segments)

    @staticmethod
    def _duplicate(route: PageRoute) -> None:
        msg = f"Pattern {route.path!r} is already bound to another view."
        raise ConfigurationError(msg)

    @property
    def routes(self) -> list[PageRoute]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def resolve(self, path: str) -> RouteMatch:
        """Resolve a navigated path to exactly one route.

        Literal segments are preferred over parameters at every depth, so
        ``/list/new`` would beat ``/list/{id}`` if both were registered.
        Raises ``NotFound`` if nothing matches.
        """
        parts = _split_target(path)
        result = self._match_node(self._root, parts, 0, {})
        if result is None:
            logger.debug("No page for %r", path)
            raise NotFound(path)

        route, params = result
        logger.debug("Resolved %r to view %s %s", path, route.view, params)
        return RouteMatch(route=route, params=params)

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[PageRoute, dict[str, str]] | None:
        """Recursively match path parts against the trie."""
        if index == len(parts):
            if node.route is not None:
                return node.route, params
            return None

        part = parts[index]

        # 1. Static child first (exact match)
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        # 2. Parameter child
        if node.param_child is not None:
            edge = node.param_child
            if edge.regex.match(part):
                new_params = {**params, edge.param_name: part}
                result = self._match_node(edge.node, parts, index + 1, new_params)
                if result is not None:
                    return result

        # 3. Catch-all
        if node.catch_all is not None:
            remaining = "/".join(parts[index:])
            return node.catch_all.route, {**params, node.catch_all.param_name: remaining}

        return None

    def path_for(self, name: str, **params: object) -> str:
        """Build the URL path of a named route.

        Raises ``ConfigurationError`` for an unknown name or a missing
        parameter.
        """
        try:
            route, segments = self._by_name[name]
        except KeyError:
            msg = f"No page route named {name!r}"
            raise ConfigurationError(msg) from None

        parts: list[str] = []
        for seg in segments:
            if not seg.is_param:
                parts.append(seg.value)
                continue
            if seg.param_name not in params:
                msg = f"Route {route.path!r} requires parameter {seg.param_name!r}"
                raise ConfigurationError(msg)
            parts.append(str(params[seg.param_name]))
        return "/" + "/".join(parts)
