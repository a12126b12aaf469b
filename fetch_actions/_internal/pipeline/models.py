"""Pydantic models for request declarations and the dispatched action shapes."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Literal, TypedDict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from fetch_actions.exceptions import FetchActionsValidationError

# =============================================================================
# Constants
# =============================================================================

ResponseType = Literal["json", "text"]
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

GetState = Callable[[], Any]
Dispatch = Callable[[Any], Any]

# =============================================================================
# Action Triple
# =============================================================================


class ActionTriple(BaseModel):
    """The three action types a request emits.

    Fields:
        pending: Dispatched before the request is sent
        success: Dispatched with the decoded (or hooked) payload
        failure: Dispatched with the caught (or hooked) error
    """

    model_config = ConfigDict(frozen=True)

    pending: str = Field(min_length=1)
    success: str = Field(min_length=1)
    failure: str = Field(min_length=1)

    @model_validator(mode="after")
    def types_distinct(self) -> "ActionTriple":
        if len({self.pending, self.success, self.failure}) != 3:
            raise ValueError("action types must be distinct")
        return self

    @classmethod
    def from_actions(cls, actions: "ActionTriple | Sequence[str]") -> "ActionTriple":
        """Build a triple from a (pending, success, failure) sequence.

        Raises:
            FetchActionsValidationError: If the sequence is not three distinct
                non-empty strings.
        """
        if isinstance(actions, ActionTriple):
            return actions
        if isinstance(actions, str) or not isinstance(actions, Sequence) or len(actions) != 3:
            raise FetchActionsValidationError(
                f"actions must be a (pending, success, failure) triple, got {actions!r}"
            )
        pending, success, failure = actions
        try:
            return cls(pending=pending, success=success, failure=failure)
        except ValidationError as e:
            raise FetchActionsValidationError(str(e)) from e

    def as_tuple(self) -> tuple[str, str, str]:
        return (self.pending, self.success, self.failure)


# =============================================================================
# Request Options
# =============================================================================


def stringify_headers(headers: Mapping[str, Any] | None) -> dict[str, str] | None:
    """Render header values as strings; None means no headers."""
    if headers is None:
        return None
    return {name: str(value) for name, value in headers.items()}


class StaticHeaders(BaseModel):
    """Headers fixed at declaration time. Values are sent as strings."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    values: dict[str, Any]

    def resolve(self, get_state: GetState) -> dict[str, str]:
        return {name: str(value) for name, value in self.values.items()}


class ComputedHeaders(BaseModel):
    """Headers computed from the store state on every invocation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["computed"] = "computed"
    compute: Callable[[GetState], Mapping[str, Any] | None]

    def resolve(self, get_state: GetState) -> dict[str, str] | None:
        return stringify_headers(self.compute(get_state))


Headers = StaticHeaders | ComputedHeaders


class Transform(BaseModel):
    """Per-field transform functions, each called as fn(get_state, raw_value).

    Only ``query`` and ``body`` can be configured. A field without a function
    is dropped from the transformed parameters; it is not passed through.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: Callable[[GetState, Any], Any] | None = None
    body: Callable[[GetState, Any], Any] | None = None


class RequestParams(BaseModel):
    """Effective query/body pair of one invocation.

    ``model_fields_set`` lists the fields actually produced.
    """

    model_config = ConfigDict(frozen=True)

    query: Any = None
    body: Any = None


class RequestOptions(BaseModel):
    """Options bound into a request pipeline at declaration time.

    Hooks:
        success(dispatch, get_state, extra_args, decoded) -> payload
        fail(dispatch, get_state, extra_args, error) -> error value
        condition(dispatch, get_state, extra_args) -> bool
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: HttpMethod = "GET"
    query: Any = None
    body: Any = None
    headers: Headers | None = None
    transform: Transform | None = None
    success: Callable[..., Any] | None = None
    fail: Callable[..., Any] | None = None
    response_type: ResponseType = "json"
    condition: Callable[..., Any] | None = None

    @field_validator("headers", mode="before")
    @classmethod
    def tag_headers(cls, v: Any) -> Any:
        if v is None or isinstance(v, StaticHeaders | ComputedHeaders):
            return v
        if isinstance(v, Mapping):
            return StaticHeaders(values=dict(v))
        if callable(v):
            return ComputedHeaders(compute=v)
        raise ValueError("headers must be a mapping or a function of get_state")


# =============================================================================
# Dispatched Actions
# =============================================================================


class PendingAction(TypedDict):
    """Dispatched before the request; carries no body."""

    type: str
    query: Any


class SuccessAction(TypedDict):
    type: str
    query: Any
    body: Any
    payload: Any


class FailureAction(TypedDict):
    type: str
    error: Any
    query: Any
    body: Any
