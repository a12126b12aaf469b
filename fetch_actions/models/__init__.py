"""Public models for declaring requests and reading dispatched actions.

Example:
    from fetch_actions import GET
    from fetch_actions.models import Transform

    fetch_items = GET(
        "https://api.example.com/items",
        ("ITEMS_PENDING", "ITEMS_OK", "ITEMS_ERR"),
        query={"page": 1},
        transform=Transform(query=lambda get_state, q: {**q, "user": get_state()["user"]}),
    )
"""

from fetch_actions._internal.pipeline.models import (
    ActionTriple,
    ComputedHeaders,
    FailureAction,
    PendingAction,
    RequestOptions,
    StaticHeaders,
    SuccessAction,
    Transform,
)

__all__ = [
    "ActionTriple",
    "RequestOptions",
    "StaticHeaders",
    "ComputedHeaders",
    "Transform",
    "PendingAction",
    "SuccessAction",
    "FailureAction",
]
