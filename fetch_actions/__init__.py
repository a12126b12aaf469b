"""fetch-actions for Python.

Declarative HTTP requests that dispatch a pending → success | failure action
sequence into a thunk-style state store.

Public API:
    GET, POST, PUT, PATCH, DELETE - Declare a request, returning a thunk
    RequestPipeline - The thunk type returned by every verb

Internal (not for direct use):
    _internal.pipeline - Request pipeline and parameter transformer
    _internal.http - Default httpx transport
"""

from fetch_actions._internal.pipeline import RequestPipeline
from fetch_actions._version import __version__
from fetch_actions.verbs import DELETE, GET, PATCH, POST, PUT

__all__ = [
    "__version__",
    "GET",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "RequestPipeline",
]
