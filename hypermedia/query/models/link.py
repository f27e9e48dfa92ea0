"""Link descriptor model."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError


class ResourceLink(BaseModel):
    """Where a requested relationship can be fetched."""

    href: str
    kind: str = Field(..., alias="type")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def coerce(cls, value: Any) -> "ResourceLink":
        """Build a link from a collaborator return value.

        Accepts a ResourceLink, a mapping with ``href`` and ``type`` (or
        ``kind``), or an ``(href, kind)`` pair.
        """
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, Mapping):
                return cls.model_validate(dict(value))
            if isinstance(value, tuple) and len(value) == 2:
                href, kind = value
                return cls(href=href, kind=kind)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid link descriptor: {e}") from e
        raise ValidationError(f"Invalid link descriptor: {value!r}")
