"""Data models for structural response diffs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from paritypack.core.types import DiffType, Severity


@dataclass(frozen=True, slots=True)
class DiffRecord:
    """One divergence between the reference and candidate body at a path."""

    path: str
    type: DiffType
    real: Any
    clone: Any
    severity: Severity
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "type": self.type,
            "real": self.real,
            "clone": self.clone,
            "severity": self.severity,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "DiffRecord":
        return cls(
            path=raw["path"],
            type=raw["type"],
            real=raw.get("real"),
            clone=raw.get("clone"),
            severity=raw.get("severity", "medium"),
            message=raw.get("message", ""),
        )


@dataclass(slots=True)
class DiffResult:
    """Flat, pre-order list of divergences between two bodies."""

    details: list[DiffRecord] = field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        return len(self.details) > 0

    @property
    def paths(self) -> list[str]:
        return [record.path for record in self.details]

    def summary(self) -> dict[str, Any]:
        return {
            "count": len(self.details),
            "paths": self.paths,
        }

    def find(self, path: str) -> DiffRecord | None:
        """Return the first record at exactly ``path``."""
        for record in self.details:
            if record.path == path:
                return record
        return None

    def by_severity(self, severity: Severity) -> list[DiffRecord]:
        return [record for record in self.details if record.severity == severity]

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_differences": self.has_differences,
            "summary": self.summary(),
            "details": [record.to_dict() for record in self.details],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "DiffResult":
        return cls(details=[DiffRecord.from_dict(item) for item in raw.get("details", [])])
