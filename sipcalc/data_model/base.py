from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class FieldDefinition:
    """Lightweight schema descriptor used by the forms and the schema endpoint."""

    field: str
    label: str
    kind: str = "number"  # number | select
    default: Any = ""
    options: List[str] | None = None
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    help: str | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "label": self.label,
            "kind": self.kind,
            "default": self.default,
            "options": self.options or [],
            "min": self.min_value,
            "max": self.max_value,
            "step": self.step,
            "help": self.help,
        }


@dataclass
class FormModel:
    """Container for a form's field schema."""

    name: str
    fields: List[FieldDefinition] = field(default_factory=list)

    def get(self, field_id: str) -> FieldDefinition:
        for item in self.fields:
            if item.field == field_id:
                return item
        raise KeyError(f"Unknown field: {field_id}")

    def defaults(self) -> dict[str, Any]:
        return {item.field: item.default for item in self.fields}

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "fields": [item.to_dict() for item in self.fields]}
