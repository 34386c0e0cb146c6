"""
Building blocks shared by the entity schemas.

Every entity comes in three shapes: a ``*Create`` payload with the
required fields enforced, a ``*Update`` payload where every field may
be omitted, and a ``*Read`` record as kept by the repository.
"""

from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class Record(BaseModel):
    """Base for stored records: immutable and carrying an ``id``."""

    id: int

    model_config = ConfigDict(frozen=True, from_attributes=True)


class PartialUpdate(BaseModel):
    """Base for partial update payloads.

    Fields left out of the request stay untouched.  An explicit ``null``
    is only accepted for fields listed in ``nullable_fields``; sending
    ``null`` for anything else would leave a required column empty.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("field may not be null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Return only the fields that were present in the request."""
        return self.model_dump(exclude_unset=True)
