"""
Distributions subpackage

Interfaces and implementations of probability distributions:

- distribution protocol (:mod:`.distribution`);
- uniform distribution and its PDF/CDF function objects (:mod:`.uniform`);
- registry of distribution factories (:mod:`.registry`, :mod:`.configuration`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .configuration import configure_distributions_register, reset_distributions_register
from .distribution import Distribution
from .registry import DistributionRegister
from .uniform import UniformCDF, UniformDistribution, UniformPDF

__all__ = [
    # distribution
    "Distribution",
    "UniformDistribution",
    "UniformPDF",
    "UniformCDF",
    # registry
    "DistributionRegister",
    "configure_distributions_register",
    "reset_distributions_register",
]
