#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Result zipper: turns a row count plus parallel output arrays into typed records.

Row ``k`` of the output is built from index ``k`` of every declared array, in the
declared field order. Length mismatches are contract violations of the engine
call and raise `MarshallingError`; nothing is truncated or padded.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type, TypeVar

from .exceptions import EtabsError, MarshallingError

log = logging.getLogger(__name__)

T = TypeVar("T")

RowTransform = Callable[[Dict[str, Any]], Dict[str, Any]]
RowFilter = Callable[[Any], bool]


@dataclass(frozen=True)
class RowSet:
    """Row count plus the parallel arrays an engine call returned."""

    count: Any
    arrays: Tuple[Optional[Sequence[Any]], ...]

    @classmethod
    def from_outputs(cls, outputs: Sequence[Any], count_index: int = 0, width: Optional[int] = None) -> "RowSet":
        """
        Slice a RowSet out of a call's outputs: the count sits at `count_index`, the
        arrays follow it. `width` limits how many arrays are taken; trailing scalars
        (e.g. the BaseReact centroid) are left out.
        """
        if count_index >= len(outputs):
            return cls(None, ())
        start = count_index + 1
        end = len(outputs) if width is None else min(len(outputs), start + width)
        return cls(outputs[count_index], tuple(outputs[start:end]))


def _row_count(rowset: RowSet, operation: Optional[str]) -> int:
    try:
        count = int(rowset.count)
    except (TypeError, ValueError) as exc:
        raise MarshallingError(f"row count {rowset.count!r} is not an integer", operation=operation,
                               cause=exc) from exc
    if count < 0:
        raise MarshallingError(f"negative row count {count}", operation=operation)
    return count


def _columns(rowset: RowSet, fields: Sequence[Optional[str]], optional: Sequence[str], count: int,
             operation: Optional[str]) -> List[Tuple[str, List[Any]]]:
    columns = []
    for index, field in enumerate(fields):
        if field is None:
            continue
        array = rowset.arrays[index] if index < len(rowset.arrays) else None
        if array is None:
            if field in optional:
                columns.append((field, [None] * count))
                continue
            raise MarshallingError(
                f"engine reported {count} rows but array '{field}' is missing", operation=operation
            )
        values = list(array)
        if len(values) != count:
            raise MarshallingError(
                f"engine reported {count} rows but array '{field}' has {len(values)} items",
                operation=operation,
            )
        columns.append((field, values))
    return columns


def zip_rows(
    rowset: RowSet,
    record_type: Type[T],
    fields: Sequence[Optional[str]],
    optional: Sequence[str] = (),
    post_filter: Optional[RowFilter] = None,
    transform: Optional[RowTransform] = None,
    operation: Optional[str] = None,
) -> List[T]:
    """
    Build one `record_type` per row.

    `fields` names the record field fed by each array, in array order; a None entry
    skips that array. Fields in `optional` may be missing (every row gets None) but
    must have the row count when present. `transform` maps the raw field dict to
    constructor kwargs. `post_filter` runs on finished records and keeps their order.
    """
    count = _row_count(rowset, operation)
    if count == 0:
        return []

    columns = _columns(rowset, fields, optional, count, operation)
    records: List[T] = []
    for i in range(count):
        raw = {field: values[i] for field, values in columns}
        try:
            kwargs = transform(raw) if transform is not None else raw
            records.append(record_type(**kwargs))
        except EtabsError:
            raise
        except Exception as exc:
            raise MarshallingError(
                f"could not build {getattr(record_type, '__name__', record_type)} from row {i}: {exc}",
                operation=operation,
                cause=exc,
            ) from exc

    if post_filter is not None:
        try:
            records = [record for record in records if post_filter(record)]
        except Exception as exc:
            raise MarshallingError(f"row filter failed: {exc}", operation=operation, cause=exc) from exc

    log.debug("%s: zipped %d of %d rows into %s", operation or "zip_rows", len(records), count,
              getattr(record_type, "__name__", record_type))
    return records


def field_equals(field: str, expected: Optional[str]) -> Optional[RowFilter]:
    """Post-filter keeping records whose `field` equals `expected`; None when `expected` is blank."""
    if not expected:
        return None
    return lambda record: getattr(record, field) == expected


__all__ = ["RowSet", "RowTransform", "RowFilter", "zip_rows", "field_equals"]
