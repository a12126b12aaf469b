"""Verb helpers: declare a request and get back a thunk.

Example:
    from fetch_actions import GET

    fetch_items = GET(
        "https://api.example.com/items",
        ("ITEMS_PENDING", "ITEMS_OK", "ITEMS_ERR"),
        query={"page": 1},
    )

    # later, from a thunk-aware store
    ok = await fetch_items(store.dispatch, store.get_state, services)
"""

from collections.abc import Sequence
from typing import Any

from fetch_actions._internal.http import Transport
from fetch_actions._internal.pipeline import ActionTriple, RequestPipeline, common

Actions = ActionTriple | Sequence[str]


def GET(  # noqa: N802
    url: str, actions: Actions, *, transport: Transport | None = None, **options: Any
) -> RequestPipeline:
    """Declare a GET request. Options are the RequestOptions fields."""
    return common(url, actions, method="GET", transport=transport, **options)


def POST(  # noqa: N802
    url: str, actions: Actions, *, transport: Transport | None = None, **options: Any
) -> RequestPipeline:
    """Declare a POST request; ``body`` is sent as JSON."""
    return common(url, actions, method="POST", transport=transport, **options)


def PUT(  # noqa: N802
    url: str, actions: Actions, *, transport: Transport | None = None, **options: Any
) -> RequestPipeline:
    """Declare a PUT request; ``body`` is sent as JSON."""
    return common(url, actions, method="PUT", transport=transport, **options)


def PATCH(  # noqa: N802
    url: str, actions: Actions, *, transport: Transport | None = None, **options: Any
) -> RequestPipeline:
    """Declare a PATCH request; ``body`` is sent as JSON."""
    return common(url, actions, method="PATCH", transport=transport, **options)


def DELETE(  # noqa: N802
    url: str, actions: Actions, *, transport: Transport | None = None, **options: Any
) -> RequestPipeline:
    """Declare a DELETE request."""
    return common(url, actions, method="DELETE", transport=transport, **options)
