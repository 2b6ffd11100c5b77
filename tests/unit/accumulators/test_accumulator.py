from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import pytest

from evostat.accumulators.accumulator import (
    Accumulator,
    AccumulatorAdapter,
    MappableAccumulator,
)
from evostat.errors import InvalidArgumentError


class Recorder(MappableAccumulator[float]):
    """Counting accumulator which remembers every value it received."""

    def __init__(self) -> None:
        super().__init__()
        self.values: list[float] = []

    def accumulate(self, value: float) -> None:
        self.values.append(value)
        super().accumulate(value)


class Counter(MappableAccumulator[Any]):
    pass


class TestMappableAccumulator:
    def setup_method(self):
        self.accumulator = Recorder()

    def test_implements_accumulator_protocol(self):
        assert isinstance(self.accumulator, Accumulator)
        assert isinstance(self.accumulator.map(float), Accumulator)

    def test_starts_empty(self):
        assert self.accumulator.sample_count == 0

    def test_sample_count_counts_every_call(self):
        for value in (1, 2, 3):
            self.accumulator.accumulate(value)

        assert self.accumulator.sample_count == 3
        assert self.accumulator.values == [1, 2, 3]

    def test_sample_count_no_filtering(self):
        for value in (1.0, 1.0, None, float("nan")):
            self.accumulator.accumulate(value)  # type: ignore[arg-type]
        assert self.accumulator.sample_count == 4

    def test_sample_count_is_read_only(self):
        with pytest.raises(AttributeError):
            self.accumulator.sample_count = 10  # type: ignore[misc]

    def test_equality_by_type_and_count(self):
        first, second = Counter(), Counter()
        assert first == second
        assert hash(first) == hash(second)

        first.accumulate("x")
        assert first != second

        second.accumulate(42)
        assert first == second

    def test_different_types_not_equal(self):
        counter = Counter()
        recorder = Recorder()
        assert counter != recorder

    def test_repr(self):
        counter = Counter()
        counter.accumulate(1)
        assert repr(counter) == f"{__name__}.Counter[samples=1]"

    def test_copy_is_independent(self):
        counter = Counter()
        counter.accumulate(1)

        duplicate = counter.copy()
        assert duplicate == counter
        assert duplicate is not counter

        duplicate.accumulate(2)
        assert duplicate.sample_count == 2
        assert counter.sample_count == 1


class TestAccumulatorAdapter:
    def setup_method(self):
        self.accumulator = Recorder()
        for value in (1.0, 2.0, 3.0):
            self.accumulator.accumulate(value)

    def test_map_returns_adapter(self):
        view = self.accumulator.map(float)
        assert isinstance(view, AccumulatorAdapter)
        assert view.adoptee is self.accumulator
        assert view.converter is float

    def test_map_forwards_converted_value(self):
        view = self.accumulator.map(float)
        view.accumulate("4")

        assert self.accumulator.values[-1] == 4.0
        assert isinstance(self.accumulator.values[-1], float)
        assert self.accumulator.sample_count == 4
        assert view.sample_count == 1

    def test_both_counters_advance(self):
        view = self.accumulator.map(lambda s: float(s) * 2)
        for text in ("1", "2"):
            view.accumulate(text)

        assert view.sample_count == 2
        assert self.accumulator.sample_count == 5
        assert self.accumulator.values[-2:] == [2.0, 4.0]

    def test_chained_views(self):
        by_length = self.accumulator.map(float).map(len)
        by_length.accumulate("abcd")
        inner = by_length.adoptee

        assert self.accumulator.values[-1] == 4.0
        assert by_length.sample_count == 1
        assert inner.sample_count == 1
        assert self.accumulator.sample_count == 4

    def test_adoptee_is_shared_between_views(self):
        first = self.accumulator.map(float)
        second = self.accumulator.map(int)
        first.accumulate("1.5")
        second.accumulate("7")

        assert self.accumulator.values[-2:] == [1.5, 7]
        assert self.accumulator.sample_count == 5
        assert first.sample_count == second.sample_count == 1

    def test_failed_conversion_does_not_count(self):
        view = self.accumulator.map(float)
        with pytest.raises(ValueError):
            view.accumulate("not a number")

        assert view.sample_count == 0
        assert self.accumulator.sample_count == 3

    def test_map_none_converter(self):
        with pytest.raises(InvalidArgumentError, match="Converter must not be None"):
            self.accumulator.map(None)  # type: ignore[arg-type]

    def test_map_non_callable_converter(self):
        with pytest.raises(InvalidArgumentError, match="must be callable"):
            self.accumulator.map(42)  # type: ignore[arg-type]

    def test_none_adoptee(self):
        with pytest.raises(InvalidArgumentError, match="Adoptee must not be None"):
            AccumulatorAdapter(None, float)  # type: ignore[arg-type]

    def test_adapter_equality_ignores_adoptee_and_converter(self):
        first = self.accumulator.map(float)
        second = Counter().map(str)
        assert first == second

        first.accumulate("1")
        assert first != second

    def test_repr_exposes_adoptee_and_converter(self):
        view = Counter().map(float)
        assert repr(view) == (
            f"AccumulatorAdapter[a={__name__}.Counter[samples=0], c=<class 'float'>]"
        )

    def test_wraps_plain_protocol_implementation(self):
        class Total:
            def __init__(self) -> None:
                self.sample_count = 0
                self.total = 0

            def accumulate(self, value: int) -> None:
                self.total += value
                self.sample_count += 1

        total = Total()
        view = AccumulatorAdapter(total, int)
        for text in ("1", "2", "3"):
            view.accumulate(text)

        assert total.total == 6
        assert total.sample_count == view.sample_count == 3
