"""Request pipeline: one HTTP request turned into pending/success/failure actions."""

import json
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from fetch_actions._internal.debug import debug_enabled, log_debug, log_error
from fetch_actions._internal.http import (
    Transport,
    TransportOptions,
    TransportResponse,
    get_default_transport,
)
from fetch_actions._internal.pipeline.models import (
    ActionTriple,
    Dispatch,
    FailureAction,
    GetState,
    PendingAction,
    RequestOptions,
    RequestParams,
    SuccessAction,
)
from fetch_actions._internal.pipeline.transform import transform_params
from fetch_actions._internal.redaction import redact_headers, redact_params
from fetch_actions.exceptions import FetchActionsAPIError, FetchActionsValidationError

ERROR_STATUS_MIN = 400


def build_target(url: str, query: Any) -> str:
    """Append the form-encoded query to the URL.

    An absent or empty query leaves the URL untouched (no trailing "?").
    """
    if not query:
        return url
    return f"{url}?{httpx.QueryParams(query)}"


async def build_http_error(response: TransportResponse) -> FetchActionsAPIError:
    """Build the error for a response with status >= 400.

    The error body is decoded as JSON; a body that does not decode raises the
    decoder's error instead.
    """
    decoded = await response.json()
    message = json.dumps(
        {"code": response.status, "message": decoded},
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return FetchActionsAPIError(message, status_code=response.status, body=decoded)


class RequestPipeline:
    """A declared request, usable as a thunk by a store middleware.

    Calling the pipeline with ``(dispatch, get_state, extra_args)`` runs one
    request and dispatches exactly one pending action followed by exactly one
    success or failure action, unless the ``condition`` hook rejects it, in
    which case nothing is dispatched. Errors never propagate from a call: the
    returned bool is True on success and False on failure or rejection.

    The pipeline holds no per-invocation state, so a single instance can be
    invoked concurrently.
    """

    def __init__(
        self,
        url: str,
        actions: ActionTriple,
        options: RequestOptions,
        *,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            url: Request URL, without query string.
            actions: The pending/success/failure action types.
            options: Validated request options.
            transport: Transport to send requests with. Defaults to an
                HttpxTransport configured from the environment at call time.
        """
        self._url = url
        self._actions = actions
        self._options = options
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    @property
    def actions(self) -> ActionTriple:
        return self._actions

    @property
    def options(self) -> RequestOptions:
        return self._options

    def __repr__(self) -> str:
        return f"<RequestPipeline {self._options.method} {self._url} {self._actions.pending}>"

    async def __call__(
        self,
        dispatch: Dispatch,
        get_state: GetState,
        extra_args: Any = None,
    ) -> bool:
        """Run the request and dispatch its actions.

        Args:
            dispatch: The store's dispatch function.
            get_state: The store's state accessor.
            extra_args: Opaque value handed unchanged to the hooks.

        Returns:
            True if the success action was dispatched, False otherwise.
        """
        options = self._options
        pending, success, failure = self._actions.as_tuple()

        if options.condition is not None and not options.condition(
            dispatch, get_state, extra_args
        ):
            log_debug(f"Condition not met, skipping {pending}")
            return False

        params = RequestParams(query=options.query, body=options.body)
        transform_error: Exception | None = None
        if options.transform is not None:
            try:
                params = transform_params(get_state, params, options.transform)
            except Exception as e:
                transform_error = e
        query, body = params.query, params.body

        dispatch(PendingAction(type=pending, query=query))
        try:
            if transform_error is not None:
                raise transform_error
            payload = await self._execute(dispatch, get_state, extra_args, query, body)
            dispatch(SuccessAction(type=success, query=query, body=body, payload=payload))
            return True
        except Exception as e:
            log_error(f"{failure} {e!r}")
            error = (
                options.fail(dispatch, get_state, extra_args, e)
                if options.fail is not None
                else e
            )
            dispatch(FailureAction(type=failure, error=error, query=query, body=body))
            return False

    async def _execute(
        self,
        dispatch: Dispatch,
        get_state: GetState,
        extra_args: Any,
        query: Any,
        body: Any,
    ) -> Any:
        """Send the request and compute the success payload."""
        options = self._options
        headers = options.headers.resolve(get_state) if options.headers is not None else None

        target = build_target(self._url, query)
        request: TransportOptions = {"method": options.method, "headers": headers}
        if body is not None:
            request["body"] = json.dumps(body)

        if debug_enabled():
            log_debug(
                f"{options.method} {self._url} query={redact_params(query)!r} "
                f"headers={redact_headers(headers)!r}"
            )

        transport = self._transport if self._transport is not None else get_default_transport()
        response = await transport(target, request)

        if response.status >= ERROR_STATUS_MIN:
            raise await build_http_error(response)

        if options.response_type == "text":
            decoded = await response.text()
        else:
            decoded = await response.json()

        if options.success is not None:
            return options.success(dispatch, get_state, extra_args, decoded)
        return decoded


def common(
    url: str,
    actions: ActionTriple | Sequence[str],
    *,
    method: str,
    transport: Transport | None = None,
    **options: Any,
) -> RequestPipeline:
    """Declare a request and bind it into a reusable pipeline.

    Args:
        url: Request URL, without query string.
        actions: (pending, success, failure) action types.
        method: HTTP method.
        transport: Optional transport; see RequestPipeline.
        **options: RequestOptions fields (query, body, headers, transform,
            success, fail, response_type, condition).

    Returns:
        A RequestPipeline to hand to the store's dispatch.

    Raises:
        FetchActionsValidationError: If the actions or options are invalid.
    """
    triple = ActionTriple.from_actions(actions)
    try:
        request_options = RequestOptions(method=method, **options)
    except ValidationError as e:
        raise FetchActionsValidationError(str(e)) from e
    return RequestPipeline(url, triple, request_options, transport=transport)
