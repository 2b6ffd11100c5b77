"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used throughout
the toolkit. A distribution exposes

- its **domain** as a closed :class:`~evostat.types.Range`;
- a **PDF** function object mapping a domain value to its density;
- a **CDF** function object mapping a domain value to ``P(X <= x)``.

Notes
-----
- The returned function objects are expected to be pure and immutable, so they
  may be stored and called concurrently by independent callers.
- Evaluation is ordinary double precision.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from evostat.types import OrderedNumber, Range


@runtime_checkable
class Distribution[N: OrderedNumber](Protocol):
    """Public distribution interface."""

    def domain(self) -> Range[N]:
        """Return the domain ``[min, max]`` of this distribution."""
        ...

    def pdf(self) -> Callable[[N], float]:
        """Return the probability density function."""
        ...

    def cdf(self) -> Callable[[N], float]:
        """Return the cumulative distribution function."""
        ...
