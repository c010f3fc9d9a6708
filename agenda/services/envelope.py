from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from agenda.schemas.common import ApiEnvelope
from agenda.services.exceptions import MalformedEnvelopeError

T = TypeVar("T")


def unwrap(adapter: TypeAdapter[ApiEnvelope[T]], body: Any) -> T:
    """Validate ``body`` as an envelope and return its ``data``."""
    try:
        return adapter.validate_python(body).data
    except ValidationError as exc:
        raise MalformedEnvelopeError(
            "Response does not match the API envelope", cause=exc
        ) from exc
