"""URL builder — projects a selection state onto the product-image URL."""

from __future__ import annotations

from urllib.parse import quote

from customiser.engine.descriptor import ModelDescriptor
from customiser.engine.state import SelectionState

DEFAULT_BASE_TEMPLATE = (
    "https://customiser-images.lindberg.com/model/"
    "{type_id}/{model_id}/{perspective}/{variant}/ACETATE"
)

# Characters encodeURIComponent leaves alone on top of quote()'s own set
_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=_COMPONENT_SAFE)


def build_query(params: list[tuple[str, str]]) -> str:
    return "&".join(f"{name}={encode_component(value)}" for name, value in params)


def build_url(
    state: SelectionState | None,
    descriptor: ModelDescriptor | None,
    base_template: str | None = DEFAULT_BASE_TEMPLATE,
) -> str:
    """Return the image URL, or "" when there is nothing valid to render.

    Placeholders ``{type_id}``, ``{model_id}``, ``{perspective}`` and
    ``{variant}`` are replaced everywhere they occur in the template.
    """
    if not base_template or state is None or descriptor is None or not state.model_id:
        return ""

    path = base_template
    for placeholder, value in (
        ("{type_id}", descriptor.type_token),
        ("{model_id}", state.model_id),
        ("{perspective}", state.perspective),
        ("{variant}", descriptor.variant_token),
    ):
        path = path.replace(placeholder, encode_component(value))

    query = build_query(descriptor.url_params(state.front, state.back, state.rim, state.conf_id))
    return f"{path}?{query}"
