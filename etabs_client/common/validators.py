#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pre-call input checks.

A validator is a zero-argument callable that returns ``None`` when the input is
acceptable and a message otherwise. The factories below return `Check` objects,
which also carry the parameter name and offending value for `InvalidArgumentError`.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence

from .utility_functions import finite_float, is_blank

Validator = Callable[[], Optional[str]]
Problem = Callable[[Any], Optional[str]]


@dataclass(frozen=True)
class Check:
    parameter: str
    value: Any
    problem: Problem

    def __call__(self) -> Optional[str]:
        return self.problem(self.value)


def _rule(predicate: Callable[[Any], bool], message: str) -> Problem:
    return lambda v: None if predicate(v) else message


def not_blank(parameter: str, value: Any) -> Check:
    return Check(parameter, value, _rule(lambda v: not is_blank(v), "cannot be null or empty"))


def all_not_blank(parameter: str, values: Optional[Iterable[Any]]) -> Check:
    return Check(
        parameter,
        values,
        _rule(lambda v: v is not None and all(not is_blank(item) for item in v),
              "must not contain null or empty names"),
    )


def min_length(parameter: str, values: Optional[Sequence[Any]], minimum: int) -> Check:
    return Check(
        parameter,
        values,
        _rule(lambda v: v is not None and len(v) >= minimum, f"requires at least {minimum} items"),
    )


def length_equals(parameter: str, values: Optional[Sequence[Any]], expected: int) -> Check:
    return Check(
        parameter,
        values,
        _rule(lambda v: v is not None and len(v) == expected, f"must contain exactly {expected} items"),
    )


def same_length(parameter: str, *sequences: Optional[Sequence[Any]]) -> Check:
    def _ok(seqs):
        return all(s is not None for s in seqs) and len({len(s) for s in seqs}) <= 1

    return Check(parameter, sequences, _rule(_ok, "arrays must have the same length"))


def finite(parameter: str, value: Any) -> Check:
    return Check(parameter, value, _rule(lambda v: finite_float(v) is not None, "must be a finite number"))


def all_finite(parameter: str, values: Optional[Iterable[Any]]) -> Check:
    def _ok(v):
        try:
            return v is not None and all(finite_float(item) is not None for item in v)
        except TypeError:
            return False

    return Check(parameter, values, _rule(_ok, "must contain only finite numbers"))


def positive(parameter: str, value: Any) -> Check:
    def _ok(v):
        number = finite_float(v)
        return number is not None and number > 0

    return Check(parameter, value, _rule(_ok, "must be greater than zero"))


def non_negative(parameter: str, value: Any) -> Check:
    def _ok(v):
        number = finite_float(v)
        return number is not None and number >= 0

    return Check(parameter, value, _rule(_ok, "cannot be negative"))


def in_range(parameter: str, value: Any, low: float, high: float) -> Check:
    def _ok(v):
        number = finite_float(v)
        return number is not None and low <= number <= high

    return Check(parameter, value, _rule(_ok, f"must be between {low} and {high}"))


def one_of(parameter: str, value: Any, choices: Iterable[Any]) -> Check:
    allowed = tuple(choices)
    return Check(parameter, value, _rule(lambda v: v in allowed, f"must be one of {list(allowed)}"))


def is_instance(parameter: str, value: Any, kind: type) -> Check:
    return Check(parameter, value, _rule(lambda v: isinstance(v, kind), f"must be a {kind.__name__}"))


def satisfies(parameter: str, value: Any, problem: Problem) -> Check:
    """Use a function that describes what is wrong with `value` (None when nothing is)."""
    return Check(parameter, value, problem)


__all__ = [
    "Validator",
    "Check",
    "not_blank",
    "all_not_blank",
    "min_length",
    "length_equals",
    "same_length",
    "finite",
    "all_finite",
    "positive",
    "non_negative",
    "in_range",
    "one_of",
    "is_instance",
    "satisfies",
]
