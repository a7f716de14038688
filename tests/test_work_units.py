"""Tests for work unit registration, resolution and invocation."""

import asyncio

import numpy as np
import pytest

from pointbench.benchmarks import work_units
from pointbench.benchmarks.work_units import (
    call_work_unit,
    list_work_units,
    parse,
    register_work_unit,
    resolve_work_unit,
)
from pointbench.core import ResultTuple, WorkUnitError


@pytest.fixture
def registry(monkeypatch):
    """Isolated work unit registry seeded with the stub."""
    units = {"stub": parse}
    monkeypatch.setattr(work_units, "WORK_UNITS", units)
    return units


class TestStub:
    """Tests for the default stub."""

    def test_returns_zeros(self):
        """The stub resolves to zeros."""
        assert asyncio.run(parse()) == [0.0, 0.0, 0]

    def test_registered_as_stub(self):
        """The stub is available by name."""
        assert "stub" in list_work_units()
        assert resolve_work_unit("stub") is parse


class TestRegistry:
    """Tests for register_work_unit."""

    def test_register_and_resolve(self, registry):
        """Registered units resolve by name."""

        @register_work_unit("fixed")
        def fixed():
            return [1.0, 2.0, 3]

        assert resolve_work_unit("fixed") is fixed
        assert list_work_units() == ["fixed", "stub"]

    def test_duplicate_name_rejected(self, registry):
        """A second function cannot take an existing name."""
        with pytest.raises(WorkUnitError):
            register_work_unit("stub")(lambda: [0.0, 0.0, 0])

    def test_reregistering_same_function(self, registry):
        """Registering the same function twice is allowed."""
        assert register_work_unit("stub")(parse) is parse


class TestResolve:
    """Tests for resolve_work_unit."""

    def test_callable_passthrough(self):
        """Callables are returned unchanged."""

        def unit():
            return [0.0, 0.0, 0]

        assert resolve_work_unit(unit) is unit

    def test_import_path(self):
        """module:attribute references are imported."""
        assert resolve_work_unit("pointbench.benchmarks.work_units:parse") is parse

    def test_unknown_name(self):
        """Unknown names list the registered ones."""
        with pytest.raises(WorkUnitError, match="registered: .*stub"):
            resolve_work_unit("does-not-exist")

    def test_missing_module(self):
        """Unimportable modules raise WorkUnitError."""
        with pytest.raises(WorkUnitError, match="Cannot import"):
            resolve_work_unit("no_such_module_for_pointbench:parse")

    def test_missing_attribute(self):
        """Missing attributes raise WorkUnitError."""
        with pytest.raises(WorkUnitError, match="not found"):
            resolve_work_unit("os:no_such_attribute")

    def test_not_callable(self):
        """Non-callable attributes are rejected."""
        with pytest.raises(WorkUnitError, match="not callable"):
            resolve_work_unit("os:sep")


class TestCallWorkUnit:
    """Tests for call_work_unit and result normalization."""

    def test_async_unit(self):
        """Awaitable results are awaited."""

        async def unit():
            return (1.25, 2.5, 7)

        assert asyncio.run(call_work_unit(unit)) == ResultTuple(1.25, 2.5, 7)

    def test_sync_unit_numpy_values(self):
        """numpy arrays and scalars are normalized to Python types."""
        result = asyncio.run(call_work_unit(lambda: np.array([1.5, 2.5, 3.0])))
        assert result == ResultTuple(1.5, 2.5, 3)
        assert type(result.lines) is int

    @pytest.mark.parametrize("raw", [[1.0, 2.0], [1.0, 2.0, 3, 4], None, "abc", 5])
    def test_wrong_shape(self, raw):
        """Anything but three values raises WorkUnitError."""
        with pytest.raises(WorkUnitError):
            asyncio.run(call_work_unit(lambda: raw))

    def test_non_numeric(self):
        """Non-numeric values raise WorkUnitError."""
        with pytest.raises(WorkUnitError, match="non-numeric"):
            asyncio.run(call_work_unit(lambda: ["a", 2.0, 3]))

    @pytest.mark.parametrize("lines", [3.9, 2.5, float("nan"), float("inf"), True, "3"])
    def test_non_integral_line_count(self, lines):
        """Line counts must be whole numbers; nothing is truncated."""
        with pytest.raises(WorkUnitError, match="line count"):
            asyncio.run(call_work_unit(lambda: [1.5, 2.5, lines]))

    def test_integral_float_line_count(self):
        """A whole-valued float line count is accepted."""
        assert asyncio.run(call_work_unit(lambda: [1.5, 2.5, 3.0])).lines == 3

    def test_numpy_integer_line_count(self):
        """numpy integer line counts are accepted."""
        assert asyncio.run(call_work_unit(lambda: [1.5, 2.5, np.int64(7)])).lines == 7
