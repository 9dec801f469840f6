"""Roster record data models."""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class PersonRecord:
    """One attendee/faculty row as returned by the conference API."""

    id: str  # backend `_id`, never generated here
    name: str
    email: str
    phone: str
    fields: Mapping[str, Any] = field(default_factory=dict)  # raw payload

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "PersonRecord":
        """Build a record from one element of the API's `data` array."""
        record_id = payload.get("_id") or payload.get("id")
        if not record_id:
            raise ValueError("Roster record without an id")
        return cls(
            id=str(record_id),
            name=payload.get("facultyName") or "",
            email=payload.get("email") or "",
            phone=payload.get("mobile") or "",
            fields=dict(payload),
        )

    def get(self, name: str, default: Any = None) -> Any:
        """Raw field value, or `default` when the backend omitted it."""
        value = self.fields.get(name)
        return default if value is None else value

    def flag(self, name: str) -> bool:
        """Status flags default to false when absent."""
        return bool(self.fields.get(name))
