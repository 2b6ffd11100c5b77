"""
Accumulators subpackage

Streaming accumulators consuming values one at a time:

- accumulator protocol, mappable base class and adapter view
  (:mod:`.accumulator`);
- running ``Min``/``Max``/``MinMax``/``Mean``/``Variance`` statistics and the
  :func:`~.builtins.accumulate` helper (:mod:`.builtins`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .accumulator import Accumulator, AccumulatorAdapter, MappableAccumulator
from .builtins import Max, Mean, Min, MinMax, Variance, accumulate

__all__ = [
    # protocol and base
    "Accumulator",
    "MappableAccumulator",
    "AccumulatorAdapter",
    # builtins
    "Min",
    "Max",
    "MinMax",
    "Mean",
    "Variance",
    "accumulate",
]
