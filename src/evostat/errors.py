"""
Error Types
===========

Exceptions raised eagerly by constructors and operations of the core.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidArgumentError(ValueError):
    """A required argument is missing or violates a precondition."""


class ArithmeticDegenerateError(InvalidArgumentError, ArithmeticError):
    """The arguments would force a division by zero (e.g. a zero-width domain)."""


__all__ = [
    "InvalidArgumentError",
    "ArithmeticDegenerateError",
]
