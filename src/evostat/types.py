"""
Core Type Definitions
=====================

Fundamental types and data structures shared by the distribution and
accumulator packages.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Any, Protocol, Self, cast, overload, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from evostat.errors import InvalidArgumentError

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for arrays of evaluated probabilities and densities."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@runtime_checkable
class OrderedNumber(Protocol):
    """
    Minimal capability set of a domain value.

    A value must be totally ordered and convertible to a finite-precision
    floating value. ``int``, ``float``, ``fractions.Fraction``,
    ``decimal.Decimal`` and NumPy scalars all qualify.
    """

    def __float__(self) -> float: ...
    def __lt__(self, other: Self, /) -> bool: ...
    def __le__(self, other: Self, /) -> bool: ...


@dataclass(frozen=True, slots=True)
class Range[N: OrderedNumber]:
    """
    Closed interval ``[min, max]`` over an ordered numeric type.

    Parameters
    ----------
    min : N
        Lower bound of the interval (included).
    max : N
        Upper bound of the interval (included).

    Raises
    ------
    InvalidArgumentError
        If one of the bounds is ``None``.

    Notes
    -----
    The ordering of the bounds is not checked here. Consumers that need a
    non-empty interval (e.g. distributions) validate it themselves.
    """

    min: N
    max: N

    def __post_init__(self) -> None:
        if self.min is None:
            raise InvalidArgumentError("Range min must not be None.")
        if self.max is None:
            raise InvalidArgumentError("Range max must not be None.")

    @property
    def width(self) -> float:
        """Width ``max - min`` as a float."""
        return float(self.max) - float(self.min)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the closed interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within ``[min, max]``, False otherwise.
        """
        arr = np.asarray(x, dtype=float)
        result = (arr >= float(self.min)) & (arr <= float(self.max))

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """
        Check if a single point is in the interval.

        Raises
        ------
        InvalidArgumentError
            If ``x`` is an array; use :meth:`contains` for element-wise checks.
        """
        if np.ndim(x) != 0:
            raise InvalidArgumentError(
                "Membership test expects a scalar; use Range.contains for arrays."
            )
        return bool(self.contains(cast(Number, x)))

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"


__all__ = [
    "BoolArray",
    "FloatArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "OrderedNumber",
    "Range",
]
