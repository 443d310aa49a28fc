"""Field-exclusion rules for response comparison."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import re

from paritypack.core.types import DEFAULT_IGNORE_FIELDS


class IgnorePatternError(ValueError):
    """Raised when a wildcard ignore entry does not compile."""


@dataclass(frozen=True, slots=True)
class IgnoreSpec:
    """Compiled ignore list.

    Entries are bare field names (match the key at any depth), full paths
    (exact match) or ``*`` wildcard patterns matched against the full path.
    """

    entries: tuple[str, ...] = DEFAULT_IGNORE_FIELDS
    patterns: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "patterns", _compile_patterns(self.entries))

    @classmethod
    def of(cls, ignore_fields: "IgnoreSpec | Iterable[str] | None") -> "IgnoreSpec":
        if ignore_fields is None:
            return DEFAULT_IGNORE_SPEC
        if isinstance(ignore_fields, IgnoreSpec):
            return ignore_fields
        if isinstance(ignore_fields, str):
            return cls(entries=(ignore_fields,))
        return cls(entries=tuple(ignore_fields))

    def extend(self, extra: Iterable[str]) -> "IgnoreSpec":
        merged = list(self.entries)
        for entry in extra:
            if entry not in merged:
                merged.append(entry)
        return IgnoreSpec(entries=tuple(merged))

    def should_ignore(self, full_path: str, field_name: str) -> bool:
        if field_name in self.entries or full_path in self.entries:
            return True
        return any(pattern.fullmatch(full_path) for pattern in self.patterns)


def should_ignore_field(
    full_path: str,
    field_name: str,
    ignore_fields: IgnoreSpec | Iterable[str] | None = None,
) -> bool:
    """Return True when a key is excluded from comparison."""
    return IgnoreSpec.of(ignore_fields).should_ignore(full_path, field_name)


def _compile_patterns(entries: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    compiled: list[re.Pattern[str]] = []
    for entry in entries:
        if "*" not in entry:
            continue
        try:
            compiled.append(re.compile(entry.replace("*", ".*")))
        except re.error as error:
            raise IgnorePatternError(f"Invalid ignore pattern {entry!r}: {error}") from error
    return tuple(compiled)


DEFAULT_IGNORE_SPEC = IgnoreSpec()
