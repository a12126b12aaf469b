"""Request pipeline for fetch-actions.

WARNING: This is an implementation module used by the verb helpers.
Use fetch_actions.GET/POST/PUT/PATCH/DELETE instead of calling it directly.
"""

from fetch_actions._internal.pipeline.client import RequestPipeline, build_target, common
from fetch_actions._internal.pipeline.models import (
    ActionTriple,
    ComputedHeaders,
    FailureAction,
    PendingAction,
    RequestOptions,
    RequestParams,
    StaticHeaders,
    SuccessAction,
    Transform,
)
from fetch_actions._internal.pipeline.transform import transform_params

__all__ = [
    "RequestPipeline",
    "common",
    "build_target",
    "transform_params",
    "ActionTriple",
    "RequestOptions",
    "RequestParams",
    "StaticHeaders",
    "ComputedHeaders",
    "Transform",
    "PendingAction",
    "SuccessAction",
    "FailureAction",
]
