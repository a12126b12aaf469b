"""Tests for request declaration models."""

import pytest
from pydantic import ValidationError

from fetch_actions._internal.pipeline.models import (
    ActionTriple,
    ComputedHeaders,
    RequestOptions,
    StaticHeaders,
    Transform,
)
from fetch_actions.exceptions import FetchActionsValidationError


class TestActionTriple:
    """Tests for ActionTriple."""

    def test_from_tuple(self):
        """Should build a triple from a 3-tuple."""
        triple = ActionTriple.from_actions(("P", "S", "F"))
        assert triple.pending == "P"
        assert triple.success == "S"
        assert triple.failure == "F"
        assert triple.as_tuple() == ("P", "S", "F")

    def test_from_list(self):
        """Should accept a list."""
        assert ActionTriple.from_actions(["P", "S", "F"]).as_tuple() == ("P", "S", "F")

    def test_passes_through_instance(self):
        """Should return an existing triple unchanged."""
        triple = ActionTriple(pending="P", success="S", failure="F")
        assert ActionTriple.from_actions(triple) is triple

    def test_wrong_length(self):
        """Should reject sequences that are not three items long."""
        with pytest.raises(FetchActionsValidationError):
            ActionTriple.from_actions(("P", "S"))

    def test_string_is_not_a_triple(self):
        """Should reject a bare three-character string."""
        with pytest.raises(FetchActionsValidationError):
            ActionTriple.from_actions("PSF")

    def test_duplicate_types(self):
        """Should reject duplicated action types."""
        with pytest.raises(FetchActionsValidationError) as exc_info:
            ActionTriple.from_actions(("P", "P", "F"))
        assert "distinct" in str(exc_info.value)

    def test_empty_type(self):
        """Should reject empty action types."""
        with pytest.raises(FetchActionsValidationError):
            ActionTriple.from_actions(("", "S", "F"))

    def test_frozen(self):
        """Should be immutable once built."""
        triple = ActionTriple(pending="P", success="S", failure="F")
        with pytest.raises(ValidationError):
            triple.pending = "X"


class TestRequestOptionsHeaders:
    """Tests for header normalization."""

    def test_mapping_becomes_static(self):
        """Should tag a mapping as static headers."""
        options = RequestOptions(headers={"X-Trace": "1"})
        assert isinstance(options.headers, StaticHeaders)
        assert options.headers.resolve(lambda: None) == {"X-Trace": "1"}

    def test_callable_becomes_computed(self):
        """Should tag a function of state as computed headers."""
        options = RequestOptions(headers=lambda get_state: {"X-User": get_state()})
        assert isinstance(options.headers, ComputedHeaders)
        assert options.headers.resolve(lambda: "u-1") == {"X-User": "u-1"}

    def test_explicit_variant_kept(self):
        """Should keep an explicit variant as-is."""
        headers = StaticHeaders(values={"A": "b"})
        assert RequestOptions(headers=headers).headers == headers

    def test_static_non_string_values(self):
        """Should accept non-string static header values and send them as strings."""
        options = RequestOptions(headers={"X-Retry": 3, "X-Debug": True})
        assert options.headers.resolve(lambda: None) == {"X-Retry": "3", "X-Debug": "True"}

    def test_computed_values_stringified(self):
        """Should render computed header values the same way as static ones."""
        options = RequestOptions(headers=lambda get_state: {"X-Retry": 3})
        assert options.headers.resolve(lambda: None) == {"X-Retry": "3"}

    def test_computed_none(self):
        """Should keep None from a header function as no headers."""
        options = RequestOptions(headers=lambda get_state: None)
        assert options.headers.resolve(lambda: None) is None

    def test_absent_headers(self):
        """Should default to no headers."""
        assert RequestOptions().headers is None

    def test_invalid_headers(self):
        """Should reject values that are neither mapping nor callable."""
        with pytest.raises(ValidationError):
            RequestOptions(headers=42)


class TestRequestOptions:
    """Tests for RequestOptions defaults and validation."""

    def test_defaults(self):
        """Should default to a GET with JSON decoding and no hooks."""
        options = RequestOptions()
        assert options.method == "GET"
        assert options.response_type == "json"
        assert options.query is None
        assert options.body is None
        assert options.transform is None
        assert options.success is None
        assert options.fail is None
        assert options.condition is None

    def test_transform_from_mapping(self):
        """Should build a Transform from a mapping."""
        options = RequestOptions(transform={"query": lambda get_state, q: q})
        assert isinstance(options.transform, Transform)
        assert options.transform.body is None

    def test_transform_unknown_key(self):
        """Should reject transform keys other than query/body."""
        with pytest.raises(ValidationError):
            RequestOptions(transform={"headers": lambda get_state, h: h})

    def test_non_callable_hook(self):
        """Should reject hooks that are not callable."""
        with pytest.raises(ValidationError):
            RequestOptions(success="not callable")

    def test_unknown_method(self):
        """Should reject verbs outside GET/POST/PUT/PATCH/DELETE."""
        with pytest.raises(ValidationError):
            RequestOptions(method="TRACE")

    def test_query_kept_by_reference(self):
        """Should not copy arbitrary query data."""
        query = {"page": 1}
        assert RequestOptions(query=query).query is query
