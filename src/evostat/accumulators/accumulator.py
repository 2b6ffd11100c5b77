"""
Accumulator Interfaces
======================

This module defines the streaming accumulator abstraction:

- :class:`Accumulator` protocol - consumes values one at a time and counts
  the accumulated samples.
- :class:`MappableAccumulator` - base class tracking ``sample_count`` which
  can produce a converting view of itself via :meth:`MappableAccumulator.map`.
- :class:`AccumulatorAdapter` - the view: converts each value and forwards it
  to the wrapped accumulator.

Notes
-----
- Accumulators are mutable and not synchronised. Concurrent ``accumulate``
  calls on one instance, or on an adapter and its adoptee, must be serialised
  by the caller.
- An adapter shares its adoptee, it does not own it. Every adapted call
  advances the sample count of the adapter **and** of the adoptee, so nested
  views each count the samples that went through them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import copy
import logging
from typing import TYPE_CHECKING, Protocol, Self, cast, runtime_checkable

from evostat.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@runtime_checkable
class Accumulator[T](Protocol):
    """Consumes a stream of values and maintains a running statistic."""

    @property
    def sample_count(self) -> int: ...

    def accumulate(self, value: T) -> None: ...


class MappableAccumulator[T]:
    """
    Base accumulator which counts the accumulated samples.

    Subclasses update their own statistic in :meth:`accumulate` and call
    ``super().accumulate(value)`` so the sample count advances by exactly one
    per value.

    Examples
    --------
    >>> class Sum(MappableAccumulator[float]):
    ...     def __init__(self) -> None:
    ...         super().__init__()
    ...         self.total = 0.0
    ...     def accumulate(self, value: float) -> None:
    ...         self.total += value
    ...         super().accumulate(value)
    >>> total = Sum()
    >>> view = total.map(float)
    >>> for text in ("1", "2.5"):
    ...     view.accumulate(text)
    >>> total.total, total.sample_count, view.sample_count
    (3.5, 2, 2)
    """

    def __init__(self) -> None:
        self._samples = 0

    @property
    def sample_count(self) -> int:
        """Number of samples accumulated so far."""
        return self._samples

    def accumulate(self, value: T) -> None:
        self._samples += 1

    def map[B](self, converter: Callable[[B], T]) -> MappableAccumulator[B]:
        """
        Return a view of this accumulator accepting values of type ``B``.

        Parameters
        ----------
        converter : Callable[[B], T]
            Converts the values given to the view into values this
            accumulator understands.

        Returns
        -------
        MappableAccumulator[B]
            Adapter forwarding converted values to ``self``. Views can be
            mapped again, each layer converting one step closer to ``T``.

        Raises
        ------
        InvalidArgumentError
            If ``converter`` is ``None`` or not callable.
        """
        adapter = AccumulatorAdapter(self, converter)
        logger.debug("Mapped %r with converter %r", self, converter)
        return adapter

    def copy(self) -> Self:
        """
        Return an independent duplicate of this accumulator.

        The duplicate starts with the current statistic and sample count;
        accumulating into one does not affect the other. Subclasses holding
        mutable containers must override this to copy them.
        """
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._samples == cast("MappableAccumulator[T]", other)._samples

    def __hash__(self) -> int:
        return hash((type(self), self._samples))

    def __repr__(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}[samples={self._samples}]"


class AccumulatorAdapter[A, B](MappableAccumulator[B]):
    """
    Adapts an accumulator of type ``A`` to values of type ``B``.

    Parameters
    ----------
    adoptee : Accumulator[A]
        The wrapped accumulator. It is shared, not copied.
    converter : Callable[[B], A]
        Converter applied to every value before forwarding it.

    Raises
    ------
    InvalidArgumentError
        If one of the arguments is ``None`` or the converter is not callable.

    Notes
    -----
    Equality and hashing are inherited: two adapters with the same sample
    count compare equal regardless of their adoptees and converters.
    """

    def __init__(self, adoptee: Accumulator[A], converter: Callable[[B], A]) -> None:
        super().__init__()
        if adoptee is None:
            raise InvalidArgumentError("Adoptee must not be None.")
        if converter is None:
            raise InvalidArgumentError("Converter must not be None.")
        if not callable(converter):
            raise InvalidArgumentError(f"Converter must be callable, got {converter!r}.")
        self._adoptee = adoptee
        self._converter = converter

    @property
    def adoptee(self) -> Accumulator[A]:
        return self._adoptee

    @property
    def converter(self) -> Callable[[B], A]:
        return self._converter

    def accumulate(self, value: B) -> None:
        self._adoptee.accumulate(self._converter(value))
        super().accumulate(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}[a={self._adoptee!r}, c={self._converter!r}]"


__all__ = [
    "Accumulator",
    "AccumulatorAdapter",
    "MappableAccumulator",
]
