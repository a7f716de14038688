"""Work units: the operations timed by the harness.

A work unit is any zero-argument callable returning three values (two sums
and a line count), either directly or as an awaitable. Units are looked up
by registered name or by ``package.module:attribute`` import path.
"""

from __future__ import annotations

import importlib
import inspect
from collections.abc import Callable
from typing import Any

from pointbench.core.base import ResultTuple
from pointbench.core.errors import WorkUnitError

WorkUnit = Callable[[], Any]

WORK_UNITS: dict[str, WorkUnit] = {}


def register_work_unit(name: str) -> Callable[[WorkUnit], WorkUnit]:
    """Decorator registering a work unit under ``name``."""

    def decorator(func: WorkUnit) -> WorkUnit:
        if name in WORK_UNITS and WORK_UNITS[name] is not func:
            raise WorkUnitError(f"Work unit '{name}' is already registered")
        WORK_UNITS[name] = func
        return func

    return decorator


@register_work_unit("stub")
async def parse() -> list:
    """Placeholder parser; always returns zeros."""
    return [0.0, 0.0, 0]


def list_work_units() -> list[str]:
    """Return registered work unit names, sorted."""
    return sorted(WORK_UNITS)


def resolve_work_unit(ref: str | WorkUnit) -> WorkUnit:
    """Resolve a work unit reference.

    Args:
        ref: A callable, a registered name, or ``module:attribute``

    Returns:
        The work unit callable

    Raises:
        WorkUnitError: If the reference cannot be resolved to a callable
    """
    if callable(ref):
        return ref
    if ref in WORK_UNITS:
        return WORK_UNITS[ref]
    if ":" not in ref:
        known = ", ".join(list_work_units()) or "none"
        raise WorkUnitError(f"Unknown work unit '{ref}' (registered: {known}; or use module:attribute)")

    module_name, _, attr_path = ref.partition(":")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise WorkUnitError(f"Cannot import work unit module '{module_name}': {exc}") from exc
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as exc:
            raise WorkUnitError(f"Work unit '{ref}' not found") from exc
    if not callable(target):
        raise WorkUnitError(f"Work unit '{ref}' is not callable")
    return target


async def call_work_unit(unit: WorkUnit) -> ResultTuple:
    """Invoke a work unit, awaiting its result if needed."""
    raw = unit()
    if inspect.isawaitable(raw):
        raw = await raw
    return ResultTuple.from_raw(raw)
