"""REST client for the todo/list backend.

Usage::

    from tasklane.api import ApiClient

    async with ApiClient() as api:
        todos = await api.get_todos()
        await api.create_list({"name": "Groceries"})
"""

from tasklane.api.client import ApiClient
from tasklane.api.options import RequestOptions

__all__ = ["ApiClient", "RequestOptions"]
