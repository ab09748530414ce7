"""
Shared base class for Pritunl wire entities.

Pritunl returns JSON ``null`` for many scalar fields that are plain strings,
integers or booleans in practice (an unset name, a server that has never
reported a status). Field names on every model match the wire keys exactly,
so no aliases are needed.

Decoding rules:
    - Unknown keys are ignored, so new server-side fields never break a decode.
    - ``null`` for a field whose default is not ``None`` falls back to that
      default. Fields that are genuinely nullable are typed ``X | None`` with
      a ``None`` default and keep the ``null``.

Encoding rules:
    - ``to_payload()`` returns a JSON-compatible dict keyed by wire name.
    - Keys listed in ``omit_empty`` are dropped when their value is falsy,
      matching the server's expectations for create requests (no ``"id": ""``).
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class PritunlModel(BaseModel):
    """Base model for every entity exchanged with the Pritunl API."""

    model_config = ConfigDict(extra="ignore")

    omit_empty: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Replace ``null`` with the field default for non-nullable fields."""
        if not isinstance(data, dict):
            return data
        return {
            key: value
            for key, value in data.items()
            if value is not None or cls._accepts_null(key)
        }

    @classmethod
    def _accepts_null(cls, name: str) -> bool:
        field = cls.model_fields.get(name)
        return field is None or field.default is None

    def to_payload(self) -> dict[str, Any]:
        """Serialize the entity into a request body."""
        payload = self.model_dump(mode="json")
        for key in self.omit_empty:
            if not payload.get(key):
                payload.pop(key, None)
        return payload
