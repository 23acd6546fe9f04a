"""JSON envelope decoding and encoding.

Shopify nests every payload under a resource key, singular for single
objects (``{"order": {...}}``) and plural for lists (``{"orders": [...]}``).
Write requests use the same convention for their body.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Generic, Optional, TypeVar, TYPE_CHECKING

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import InvalidResponseError

if TYPE_CHECKING:
    import requests

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """Associates a resource key with the type nested under it.

    ``key=None`` means the payload is the whole body.

    Example:
        >>> Envelope("orders", list[Order]).decode(resp)
        [Order(id=1, ...), ...]
    """

    key: Optional[str]
    type_: Any

    def decode(self, response: "requests.Response") -> T:
        try:
            data = response.json()
        except ValueError as exc:
            snippet = getattr(response, "text", "")[:300]
            raise InvalidResponseError(f"response is not JSON: {snippet}") from exc
        return self.unwrap(data)

    def unwrap(self, data: Any) -> T:
        if self.key is not None:
            if not isinstance(data, dict):
                raise InvalidResponseError(
                    f"expected a JSON object with key {self.key!r}, got {type(data).__name__}"
                )
            if self.key not in data:
                keys = ", ".join(sorted(data)) or "<none>"
                raise InvalidResponseError(f"missing key {self.key!r} (found: {keys})")
            data = data[self.key]
        try:
            return _adapter(self.type_).validate_python(data)
        except ValidationError as exc:
            raise InvalidResponseError(f"invalid {self.key or 'response'} payload: {exc}") from exc


def dump(value: Any) -> Any:
    """Convert ``value`` into JSON-ready data.

    Models drop their unset (``None``) fields; anything else is serialized as is.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return _adapter(Any).dump_python(value, mode="json")


def json_body(key: str, value: Any) -> Callable[["requests.Request"], None]:
    """Build a body hook sending ``{key: value}`` as the JSON request body."""

    body = {key: dump(value)}

    def hook(request: "requests.Request") -> None:
        request.json = body

    return hook
