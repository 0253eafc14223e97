"""
Batch orchestration: run a scalar model over aligned input sequences.

Every array function in the package goes through :func:`map_aligned`, so the
business logic lives only in the scalar pipeline. Element ``i`` of the output
always belongs to element ``i`` of the inputs.

Example:
    columns, n = align_inputs(
        primary={"tdb": [25, 30], "tr": [25, 35]},
        secondary={"wme": 0},
    )
    results = map_aligned(model, columns, n)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import numpy as np

from .errors import InvalidInputError
from .progress import ProgressReporter

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _is_scalar(value: Any) -> bool:
    return isinstance(value, str) or np.ndim(value) == 0


def _to_list(value: Any) -> list:
    if isinstance(value, np.ndarray):
        return value.ravel().tolist()
    return list(value)


def broadcast(value: Any, length: int, name: str) -> list:
    """
    Stretch a parameter to ``length`` elements.

    Scalars are repeated. Sequences shorter than ``length`` are filled with
    their first element; sequences of the full length pass through unchanged.

    Raises:
        InvalidInputError: If the sequence is empty or longer than ``length``.
    """
    if _is_scalar(value):
        return [value] * length

    values = _to_list(value)
    if not values:
        raise InvalidInputError(name, value, "empty sequence")
    if len(values) > length:
        raise InvalidInputError(name, value, f"has {len(values)} elements, expected at most {length}")
    if len(values) < length:
        return [values[0]] * length
    return values


def align_inputs(
    primary: Mapping[str, Any],
    secondary: Mapping[str, Any] | None = None,
) -> tuple[dict[str, list], int]:
    """
    Align batch inputs to a common length.

    Primary parameters (the environmental and personal inputs) given as
    sequences must all have the same length; primary scalars are repeated.
    Secondary parameters are broadcast with :func:`broadcast`.

    Args:
        primary: Parameters that define the batch length.
        secondary: Parameters that may be scalars or under-length sequences.

    Returns:
        ``(columns, length)`` where every column is a list of ``length`` items.

    Raises:
        InvalidInputError: If primary sequences differ in length.
    """
    lengths = {name: len(_to_list(value)) for name, value in primary.items() if not _is_scalar(value)}
    distinct = set(lengths.values())
    if len(distinct) > 1:
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        first = next(iter(lengths))
        raise InvalidInputError(first, primary[first], f"input sequences must have the same length ({detail})")
    length = distinct.pop() if distinct else 1
    if length == 0:
        raise InvalidInputError(next(iter(lengths)), [], "empty sequence")

    columns = {name: broadcast(value, length, name) for name, value in primary.items()}
    for name, value in (secondary or {}).items():
        columns[name] = broadcast(value, length, name)
    return columns, length


def map_aligned(
    func: Callable[..., R],
    columns: Mapping[str, list],
    length: int,
    *,
    desc: str = "",
    progress: bool = False,
) -> list[R]:
    """
    Call ``func`` once per index with keyword arguments taken from ``columns``.

    Args:
        func: Scalar function.
        columns: Aligned argument lists, as returned by :func:`align_inputs`.
        length: Number of calls.
        desc: Progress bar label.
        progress: Show a tqdm progress bar.

    Returns:
        Results in input order.
    """
    logger.debug(f"Running {desc or getattr(func, '__name__', 'batch')} over {length} inputs")
    results = []
    reporter = ProgressReporter(total=length, desc=desc, disable=not progress)
    try:
        for i in range(length):
            results.append(func(**{name: column[i] for name, column in columns.items()}))
            reporter.update(1)
    finally:
        reporter.close()
    return results
