"""The application's page table.

Four pages, most specific literal first, the parameterized list page last.
There is no not-found page: unmatched paths raise ``NotFound`` and the
caller decides what to render.
"""

from tasklane.routing.route import PageRoute, RouteMatch, View
from tasklane.routing.router import PageRouter

ROUTES: tuple[PageRoute, ...] = (
    PageRoute("/", View.HOME),
    PageRoute("/today", View.TODAY),
    PageRoute("/upcoming", View.UPCOMING),
    PageRoute("/list/{id}", View.LIST),
)


def build_router() -> PageRouter:
    """Return a compiled router over ``ROUTES``."""
    router = PageRouter()
    for route in ROUTES:
        router.add(route)
    router.compile()
    return router


_router = build_router()


def resolve(path: str) -> RouteMatch:
    """Resolve *path* against the application's page table."""
    return _router.resolve(path)


def path_for(name: str, **params: object) -> str:
    """Build the path of a page by name, e.g. ``path_for("list", id=9)``."""
    return _router.path_for(name, **params)
