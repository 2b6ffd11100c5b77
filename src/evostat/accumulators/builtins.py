"""
Built-in accumulators and the :func:`accumulate` helper.

Contains running ``Min``, ``Max``, ``MinMax``, ``Mean`` and ``Variance``
statistics. All of them are single-pass and update their statistic in
constant time per value.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from evostat.accumulators.accumulator import MappableAccumulator
from evostat.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from evostat.accumulators.accumulator import Accumulator
    from evostat.types import OrderedNumber


def accumulate[T](values: Iterable[T], *accumulators: Accumulator[T]) -> None:
    """
    Feed every value of ``values`` into each of the given accumulators.

    Parameters
    ----------
    values : Iterable[T]
        Values to accumulate, consumed once.
    *accumulators : Accumulator[T]
        Accumulators receiving every value, in the given order.

    Raises
    ------
    InvalidArgumentError
        If no accumulator is given.

    Examples
    --------
    >>> minimum = Min[float]()
    >>> accumulate(["3", "1", "2"], minimum.map(float))
    >>> minimum.min
    1.0
    """
    if not accumulators:
        raise InvalidArgumentError("At least one accumulator is required.")
    for value in values:
        for accumulator in accumulators:
            accumulator.accumulate(value)


class Min[T: OrderedNumber](MappableAccumulator[T]):
    """Running minimum; ``None`` until the first sample."""

    def __init__(self) -> None:
        super().__init__()
        self._min: T | None = None

    @property
    def min(self) -> T | None:
        return self._min

    def accumulate(self, value: T) -> None:
        if self._min is None or value < self._min:
            self._min = value
        super().accumulate(value)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        return self._min == cast("Min[T]", other)._min

    def __hash__(self) -> int:
        return hash((super().__hash__(), self._min))

    def __repr__(self) -> str:
        return f"{type(self).__name__}[samples={self._samples}, min={self._min}]"


class Max[T: OrderedNumber](MappableAccumulator[T]):
    """Running maximum; ``None`` until the first sample."""

    def __init__(self) -> None:
        super().__init__()
        self._max: T | None = None

    @property
    def max(self) -> T | None:
        return self._max

    def accumulate(self, value: T) -> None:
        if self._max is None or self._max < value:
            self._max = value
        super().accumulate(value)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        return self._max == cast("Max[T]", other)._max

    def __hash__(self) -> int:
        return hash((super().__hash__(), self._max))

    def __repr__(self) -> str:
        return f"{type(self).__name__}[samples={self._samples}, max={self._max}]"


class MinMax[T: OrderedNumber](MappableAccumulator[T]):
    """Running minimum and maximum in one pass."""

    def __init__(self) -> None:
        super().__init__()
        self._min: T | None = None
        self._max: T | None = None

    @property
    def min(self) -> T | None:
        return self._min

    @property
    def max(self) -> T | None:
        return self._max

    def accumulate(self, value: T) -> None:
        if self._min is None or value < self._min:
            self._min = value
        if self._max is None or self._max < value:
            self._max = value
        super().accumulate(value)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        minmax = cast("MinMax[T]", other)
        return self._min == minmax._min and self._max == minmax._max

    def __hash__(self) -> int:
        return hash((super().__hash__(), self._min, self._max))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}[samples={self._samples}, min={self._min}, max={self._max}]"
        )


class Mean[T: OrderedNumber](MappableAccumulator[T]):
    """
    Running arithmetic mean.

    The mean is updated incrementally, ``m += (x - m)/n``, which avoids
    summing large totals. It is ``nan`` until the first sample.
    """

    def __init__(self) -> None:
        super().__init__()
        self._mean = 0.0

    @property
    def mean(self) -> float:
        return self._mean if self._samples > 0 else math.nan

    def accumulate(self, value: T) -> None:
        x = float(value)
        super().accumulate(value)
        self._mean += (x - self._mean) / self._samples

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        return self._mean == cast("Mean[T]", other)._mean

    def __hash__(self) -> int:
        return hash((super().__hash__(), self._mean))

    def __repr__(self) -> str:
        return f"{type(self).__name__}[samples={self._samples}, mean={self.mean}]"


class Variance[T: OrderedNumber](Mean[T]):
    """
    Running mean and unbiased sample variance.

    Uses Welford's online update. The variance is ``nan`` with fewer than
    two samples.

    Examples
    --------
    >>> var = Variance[int]()
    >>> accumulate([2, 4, 4, 4, 5, 5, 7, 9], var)
    >>> round(var.mean, 6), round(var.variance, 6)
    (5.0, 4.571429)
    """

    def __init__(self) -> None:
        super().__init__()
        self._m2 = 0.0

    @property
    def variance(self) -> float:
        if self._samples < 2:
            return math.nan
        return self._m2 / (self._samples - 1)

    def accumulate(self, value: T) -> None:
        x = float(value)
        delta = x - self._mean
        super().accumulate(value)
        self._m2 += delta * (x - self._mean)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        return self._m2 == cast("Variance[T]", other)._m2

    def __hash__(self) -> int:
        return hash((super().__hash__(), self._m2))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}[samples={self._samples}, "
            f"mean={self.mean}, variance={self.variance}]"
        )


__all__ = [
    "Max",
    "Mean",
    "Min",
    "MinMax",
    "Variance",
    "accumulate",
]
