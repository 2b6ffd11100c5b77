"""
Uniform Distribution
====================

Continuous uniform distribution over a closed domain ``[min, max]``.

Probability density function::

    f(x) = 1/(max - min)    for x in [min, max]
           0                otherwise

Cumulative distribution function::

    F(x) = 0                    for x < min
           (x - min)/(max - min) for x in [min, max]
           1                    for x > max

Both functions are built once, when the distribution is created, as immutable
function objects (:class:`UniformPDF`, :class:`UniformCDF`) which only capture
the domain bounds as floats.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast, overload

import numpy as np

from evostat.errors import ArithmeticDegenerateError, InvalidArgumentError
from evostat.types import Range

if TYPE_CHECKING:
    from evostat.types import FloatArray, Number, NumericArray, OrderedNumber

logger = logging.getLogger(__name__)


def _checked_width(lower: float, upper: float) -> float:
    """
    Return ``upper - lower`` after checking the bounds span a usable domain.

    Raises
    ------
    InvalidArgumentError
        If the width is not finite or the bounds are reversed.
    ArithmeticDegenerateError
        If the width is zero or so small that its reciprocal overflows.
    """
    width = upper - lower
    if math.isnan(width) or math.isinf(width):
        raise InvalidArgumentError(f"Domain [{lower}, {upper}] must have a finite width.")
    if width == 0.0:
        raise ArithmeticDegenerateError(
            f"Domain [{lower}, {upper}] has zero width; the density is undefined."
        )
    if width < 0.0:
        raise InvalidArgumentError(f"Domain [{lower}, {upper}] must satisfy min < max.")
    try:
        density = 1.0 / width
    except OverflowError:
        density = math.inf
    if not math.isfinite(density):
        raise ArithmeticDegenerateError(
            f"Domain [{lower}, {upper}] is too narrow; the density overflows."
        )
    return width


@dataclass(frozen=True, slots=True)
class UniformPDF:
    """
    Density of the uniform distribution.

    Parameters
    ----------
    min : float
        Lower bound of the domain.
    max : float
        Upper bound of the domain.

    Notes
    -----
    The density ``1/(max - min)`` is computed once in ``__post_init__``.
    Instances hold no mutable state and may be called concurrently.
    """

    min: float
    max: float
    density: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "density", 1.0 / _checked_width(self.min, self.max))

    @overload
    def __call__(self, value: OrderedNumber) -> float: ...
    @overload
    def __call__(self, value: NumericArray) -> FloatArray: ...

    def __call__(self, value: OrderedNumber | NumericArray) -> float | FloatArray:
        """
        Evaluate the density at ``value``.

        Parameters
        ----------
        value : OrderedNumber or NumericArray
            Point(s) at which to evaluate the density.

        Returns
        -------
        float or FloatArray
            ``1/(max - min)`` inside the domain, ``0.0`` elsewhere.
        """
        if np.ndim(value) == 0:
            x = float(cast("OrderedNumber", value))
            return self.density if self.min <= x <= self.max else 0.0

        arr = np.asarray(value, dtype=np.float64)
        return cast(
            "FloatArray", np.where((arr >= self.min) & (arr <= self.max), self.density, 0.0)
        )

    def __str__(self) -> str:
        return f"p(x) = {self.density}"


@dataclass(frozen=True, slots=True)
class UniformCDF:
    """
    Cumulative distribution function of the uniform distribution.

    Parameters
    ----------
    min : float
        Lower bound of the domain.
    max : float
        Upper bound of the domain.
    """

    min: float
    max: float
    divisor: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "divisor", _checked_width(self.min, self.max))

    @overload
    def __call__(self, value: OrderedNumber) -> float: ...
    @overload
    def __call__(self, value: NumericArray) -> FloatArray: ...

    def __call__(self, value: OrderedNumber | NumericArray) -> float | FloatArray:
        """
        Evaluate ``P(X <= value)``.

        Parameters
        ----------
        value : OrderedNumber or NumericArray
            Point(s) at which to evaluate the CDF.

        Returns
        -------
        float or FloatArray
            ``0.0`` below the domain, ``1.0`` above it and the linear ramp
            ``(x - min)/(max - min)`` inside.
        """
        if np.ndim(value) == 0:
            x = float(cast("OrderedNumber", value))
            if x < self.min:
                return 0.0
            if x > self.max:
                return 1.0
            return (x - self.min) / self.divisor

        arr = np.asarray(value, dtype=np.float64)
        return cast("FloatArray", np.clip((arr - self.min) / self.divisor, 0.0, 1.0))

    def __str__(self) -> str:
        return f"P(x) = (x - {self.min})/({self.max} - {self.min})"


class UniformDistribution[N: OrderedNumber]:
    """
    Uniform distribution over a closed domain.

    Parameters
    ----------
    domain : Range[N]
        Domain of the distribution. Alternatively the two bounds ``min`` and
        ``max`` may be passed positionally, in which case the range is built
        internally.

    Raises
    ------
    InvalidArgumentError
        If the domain (or one of its bounds) is ``None``, if ``min > max`` or
        if the domain width is not finite.
    ArithmeticDegenerateError
        If ``min == max``, i.e. the density would require a division by zero,
        or if the domain is so narrow that the density overflows.

    Examples
    --------
    >>> d = UniformDistribution(0.0, 10.0)
    >>> d.pdf()(5.0)
    0.1
    >>> d.cdf()(2.5)
    0.25
    """

    __slots__ = ("_cdf", "_domain", "_pdf")

    _domain: Range[N]
    _pdf: UniformPDF
    _cdf: UniformCDF

    @overload
    def __init__(self, domain: Range[N], /) -> None: ...
    @overload
    def __init__(self, min: N, max: N, /) -> None: ...

    def __init__(self, domain: Range[N] | N | None, max: N | None = None, /) -> None:
        if isinstance(domain, Range):
            if max is not None:
                raise InvalidArgumentError(
                    "Pass either a domain Range or the two bounds, not both."
                )
            self._domain = domain
        elif domain is None and max is None:
            raise InvalidArgumentError("Domain must not be None.")
        else:
            self._domain = Range(cast("N", domain), cast("N", max))

        lower = float(self._domain.min)
        upper = float(self._domain.max)
        self._pdf = UniformPDF(lower, upper)
        self._cdf = UniformCDF(lower, upper)

        logger.debug("Created uniform distribution over %s", self._domain)

    def domain(self) -> Range[N]:
        """Return the domain of the distribution."""
        return self._domain

    def pdf(self) -> UniformPDF:
        """
        Return the probability density function.

        The same immutable function object is returned on every call.
        """
        return self._pdf

    def cdf(self) -> UniformCDF:
        """
        Return the cumulative distribution function.

        The same immutable function object is returned on every call.
        """
        return self._cdf

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._domain == cast("UniformDistribution[N]", other)._domain

    def __hash__(self) -> int:
        return hash((type(self), self._domain))

    def __repr__(self) -> str:
        return f"UniformDistribution[{self._domain}]"


def uniform(min: Number, max: Number) -> UniformDistribution[Number]:
    """Factory used by the distribution register."""
    return UniformDistribution(min, max)


__all__ = [
    "UniformCDF",
    "UniformDistribution",
    "UniformPDF",
]
