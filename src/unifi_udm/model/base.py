"""Dataclass <-> UDM JSON mapping shared by all models.

Field metadata controls the wire form:

- ``api``: JSON key (defaults to the attribute name).
- ``omitempty``: drop the key from :meth:`ApiModel.to_api` when the value is
  falsy, mirroring how the UDM firmware serialises optional fields.
- ``model``: nested :class:`ApiModel` subclass for object-valued keys.
"""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

_M = TypeVar("_M", bound="ApiModel")


def api_field(
    key: str | None = None,
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    omitempty: bool = False,
    model: type[ApiModel] | None = None,
) -> Any:
    """Declare a dataclass field with its wire metadata."""
    metadata: dict[str, Any] = {"omitempty": omitempty}
    if key is not None:
        metadata["api"] = key
    if model is not None:
        metadata["model"] = model
    return dataclasses.field(
        default=default, default_factory=default_factory, metadata=metadata
    )


class ApiModel:
    """Mixin for dataclasses that travel as UDM JSON objects."""

    @classmethod
    def from_api(cls: type[_M], data: dict[str, Any] | None) -> _M:
        """Build an instance from a decoded JSON object.

        Unknown keys are ignored; missing keys keep the field default.
        """
        data = data or {}
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):  # type: ignore[arg-type]
            key = f.metadata.get("api", f.name)
            if key not in data or data[key] is None:
                continue
            value = data[key]
            nested = f.metadata.get("model")
            if nested is not None:
                value = nested.from_api(value)
            kwargs[f.name] = value
        return cls(**kwargs)

    def to_api(self) -> dict[str, Any]:
        """Return the JSON object sent to the UDM."""
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if f.metadata.get("omitempty") and not value:
                continue
            if isinstance(value, ApiModel):
                value = value.to_api()
            elif isinstance(value, list):
                value = list(value)
            out[f.metadata.get("api", f.name)] = value
        return out
