"""Endpoint and parameter definitions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal

ParamType = Literal["string", "enum", "search", "id", "array", "number", "email", "textarea"]


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """One input parameter of an endpoint."""

    name: str
    type: ParamType = "string"
    label: str = ""
    required: bool = False
    help_text: str = ""
    default: Any = None
    options: tuple[str, ...] = ()

    def named(self, name: str, **overrides: Any) -> "ParamSpec":
        return replace(self, name=name, **overrides)

    def coerce(self, value: Any) -> Any:
        """Convert raw CLI/form text to the parameter's wire value."""
        if not isinstance(value, str):
            return value
        if self.type == "array":
            return [item.strip() for item in value.split(",") if item.strip()]
        if self.type == "number":
            try:
                return int(value)
            except ValueError:
                return value
        return value

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "label": self.label,
            "required": self.required,
        }
        if self.help_text:
            payload["help_text"] = self.help_text
        if self.default is not None:
            payload["default"] = self.default
        if self.options:
            payload["options"] = list(self.options)
        return payload


@dataclass(frozen=True, slots=True)
class Endpoint:
    """An API operation both backends are expected to serve identically."""

    id: str
    name: str
    resource: str
    method: str
    path: str
    params: tuple[ParamSpec, ...] = field(default_factory=tuple)
    docs: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "resource": self.resource,
            "method": self.method,
            "path": self.path,
            "params": [param.to_dict() for param in self.params],
            "docs": self.docs,
        }
