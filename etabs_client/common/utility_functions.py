#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Helpers for reading raw ETABS API returns.

Under pythonnet a call with ref/out parameters returns ``(ret, out_1, out_2, ...)``;
a call without them returns the bare ``int``.
"""

import math
from typing import Any, List, Optional, Sequence, Tuple

SUCCESS = 0


def split_return(ret_val: Any) -> Tuple[Any, Tuple[Any, ...]]:
    """Split a raw API return into ``(code, outputs)``."""
    if isinstance(ret_val, tuple):
        if not ret_val:
            return None, ()
        return ret_val[0], tuple(ret_val[1:])
    return ret_val, ()


def as_list(values: Optional[Sequence[Any]]) -> List[Any]:
    """Copy a .NET array (or any sequence) into a Python list; None becomes []."""
    if values is None:
        return []
    return list(values)


def enum_int(value: Any) -> int:
    """Integer value of an ETABS enum member or plain int."""
    if isinstance(value, int):
        return int(value)
    inner = getattr(value, "value__", None)
    if inner is not None:
        return int(inner)
    return int(value)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def finite_float(value: Any) -> Optional[float]:
    """`value` as a finite float, or None when it is not a number (bools count as not a number)."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


__all__ = ["SUCCESS", "split_return", "as_list", "enum_int", "is_blank", "finite_float"]
