"""Tasklane — page routing and a REST client for a todo/list app.

Basic usage::

    from tasklane import ApiClient, resolve

    match = resolve("/list/9")
    match.view, match.params   # ("list", {"id": "9"})

    async with ApiClient() as api:
        todo_list = await api.get_list(match.params["id"])
"""

__version__ = "0.1.0"
__all__ = [
    "ApiClient",
    "ClientConfig",
    "ConfigurationError",
    "NotFound",
    "PageRoute",
    "PageRouter",
    "RequestFailure",
    "RequestOptions",
    "RouteMatch",
    "TasklaneError",
    "View",
    "resolve",
]

# Public name -> defining module. Resolved on first access.
_LAZY_IMPORTS: dict[str, str] = {
    "ApiClient": "tasklane.api.client",
    "ClientConfig": "tasklane.config",
    "ConfigurationError": "tasklane.errors",
    "NotFound": "tasklane.errors",
    "PageRoute": "tasklane.routing.route",
    "PageRouter": "tasklane.routing.router",
    "RequestFailure": "tasklane.errors",
    "RequestOptions": "tasklane.api.options",
    "RouteMatch": "tasklane.routing.route",
    "TasklaneError": "tasklane.errors",
    "View": "tasklane.routing.route",
    "resolve": "tasklane.routing.table",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import tasklane`` from importing httpx until the client is used.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
