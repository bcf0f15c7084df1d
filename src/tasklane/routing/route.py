"""PageRoute and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from enum import StrEnum


class View(StrEnum):
    """Identifiers of the views a page route can activate."""

    HOME = "home"
    TODAY = "today"
    UPCOMING = "upcoming"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Static:  ``/today``      (is_param=False)
    Param:   ``/{id}``       (is_param=True, param_name="id")
    Typed:   ``/{id:int}``   (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class PageRoute:
    """A pattern bound to a view. ``name`` defaults to the view identifier."""

    path: str
    view: str
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", str(self.view))


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful resolution. Parameters stay opaque strings."""

    route: PageRoute
    params: dict[str, str]

    @property
    def view(self) -> str:
        return self.route.view
