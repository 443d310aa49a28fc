"""Recursive structural diff of two JSON response bodies."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Any

from paritypack.core.paths import display_value, join_index, join_key, json_kind
from paritypack.core.types import ROOT_PATH
from paritypack.diff.ignore import IgnoreSpec
from paritypack.diff.models import DiffRecord, DiffResult

logger = logging.getLogger(__name__)


def generate_diff(
    real_body: Any,
    clone_body: Any,
    ignore_fields: IgnoreSpec | Iterable[str] | None = None,
) -> DiffResult:
    """Diff a reference body against a candidate body.

    ``None`` stands for an absent body. Two absent bodies are equal; a single
    absent body produces one ``missing_response`` record at the root.
    """
    if real_body is None and clone_body is None:
        return DiffResult()

    if real_body is None or clone_body is None:
        missing_side = "real" if real_body is None else "clone"
        return DiffResult(
            details=[
                DiffRecord(
                    path=ROOT_PATH,
                    type="missing_response",
                    real=real_body,
                    clone=clone_body,
                    severity="high",
                    message=f"Missing response: {missing_side}",
                )
            ]
        )

    spec = IgnoreSpec.of(ignore_fields)
    details = compare_values(real_body, clone_body, path="", ignore=spec)
    logger.debug(
        "diff complete: %d difference(s) at %s",
        len(details),
        [record.path for record in details],
    )
    return DiffResult(details=details)


def compare_values(
    real: Any,
    clone: Any,
    *,
    path: str = "",
    ignore: IgnoreSpec | Iterable[str] | None = (),
) -> list[DiffRecord]:
    """Compare two decoded JSON values and return records in pre-order."""
    spec = IgnoreSpec.of(ignore)
    out: list[DiffRecord] = []
    _compare(real, clone, path=path, ignore=spec, out=out)
    return out


def compare_arrays(
    real: list[Any],
    clone: list[Any],
    *,
    path: str = "",
    ignore: IgnoreSpec | Iterable[str] | None = (),
) -> list[DiffRecord]:
    """Compare two arrays by position, reporting length and element gaps."""
    spec = IgnoreSpec.of(ignore)
    out: list[DiffRecord] = []
    _compare_arrays(real, clone, path=path, ignore=spec, out=out)
    return out


def _compare(
    real: Any,
    clone: Any,
    *,
    path: str,
    ignore: IgnoreSpec,
    out: list[DiffRecord],
) -> None:
    real_kind = json_kind(real)
    clone_kind = json_kind(clone)

    if real_kind != clone_kind:
        out.append(
            DiffRecord(
                path=path or ROOT_PATH,
                type="type_mismatch",
                real=real,
                clone=clone,
                severity="high",
                message=f"Type mismatch: {real_kind} vs {clone_kind}",
            )
        )
        return

    if real_kind == "array":
        _compare_arrays(real, clone, path=path, ignore=ignore, out=out)
        return

    if real_kind == "object":
        _compare_objects(real, clone, path=path, ignore=ignore, out=out)
        return

    if real != clone:
        out.append(
            DiffRecord(
                path=path or ROOT_PATH,
                type="value_mismatch",
                real=real,
                clone=clone,
                severity="high",
                message=f'Value mismatch: "{display_value(real)}" vs "{display_value(clone)}"',
            )
        )


def _compare_objects(
    real: dict[str, Any],
    clone: dict[str, Any],
    *,
    path: str,
    ignore: IgnoreSpec,
    out: list[DiffRecord],
) -> None:
    keys = list(real.keys())
    keys.extend(key for key in clone.keys() if key not in real)

    for key in keys:
        name = str(key)
        current_path = join_key(path, name)
        if ignore.should_ignore(current_path, name):
            continue

        if key not in real:
            out.append(
                DiffRecord(
                    path=current_path,
                    type="missing_in_real",
                    real=None,
                    clone=clone[key],
                    severity="medium",
                    message=f"Missing in Real: {name}",
                )
            )
            continue

        if key not in clone:
            out.append(
                DiffRecord(
                    path=current_path,
                    type="missing_in_clone",
                    real=real[key],
                    clone=None,
                    severity="medium",
                    message=f"Missing in Clone: {name}",
                )
            )
            continue

        _compare(real[key], clone[key], path=current_path, ignore=ignore, out=out)


def _compare_arrays(
    real: list[Any],
    clone: list[Any],
    *,
    path: str,
    ignore: IgnoreSpec,
    out: list[DiffRecord],
) -> None:
    if len(real) != len(clone):
        out.append(
            DiffRecord(
                path=f"{path}.length",
                type="array_length_mismatch",
                real=len(real),
                clone=len(clone),
                severity="medium",
                message=f"Array length mismatch: {len(real)} vs {len(clone)}",
            )
        )

    for idx in range(max(len(real), len(clone))):
        element_path = join_index(path, idx)

        if idx >= len(real):
            out.append(
                DiffRecord(
                    path=element_path,
                    type="missing_in_real",
                    real=None,
                    clone=clone[idx],
                    severity="medium",
                    message=f"Element missing in Real at index {idx}",
                )
            )
            continue

        if idx >= len(clone):
            out.append(
                DiffRecord(
                    path=element_path,
                    type="missing_in_clone",
                    real=real[idx],
                    clone=None,
                    severity="medium",
                    message=f"Element missing in Clone at index {idx}",
                )
            )
            continue

        _compare(real[idx], clone[idx], path=element_path, ignore=ignore, out=out)
