"""Parameter transformer for request pipelines."""

from fetch_actions._internal.pipeline.models import GetState, RequestParams, Transform

TRANSFORMABLE_FIELDS = ("query", "body")


def transform_params(
    get_state: GetState,
    params: RequestParams,
    transformer: Transform,
) -> RequestParams:
    """Map query/body through the configured transform functions.

    Fields are visited in a fixed order, query then body. A configured field
    is replaced by ``fn(get_state, raw_value)``. A field with no function is
    dropped from the result (left unset, reading as None) rather than passed
    through unchanged.

    Args:
        get_state: The store's state accessor, handed to each function.
        params: The raw query/body pair.
        transformer: The per-field transform functions.

    Returns:
        New RequestParams whose ``model_fields_set`` is exactly the
        configured fields.
    """
    produced = {}
    for field in TRANSFORMABLE_FIELDS:
        fn = getattr(transformer, field)
        if fn is not None:
            produced[field] = fn(get_state, getattr(params, field))
    return RequestParams(**produced)
