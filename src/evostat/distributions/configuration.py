"""
Distribution Register Configuration
===================================

This module registers the built-in distributions in the global
:class:`~evostat.distributions.registry.DistributionRegister`:

- ``"uniform"`` - :class:`~evostat.distributions.uniform.UniformDistribution`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from evostat.distributions.registry import DistributionRegister
from evostat.distributions.uniform import uniform


@lru_cache(maxsize=1)
def configure_distributions_register() -> DistributionRegister:
    """
    Register all built-in distributions in the global registry.

    Returns
    -------
    DistributionRegister
        The global registry of distribution factories.
    """
    DistributionRegister.register("uniform", uniform)
    return DistributionRegister()


def reset_distributions_register() -> None:
    """
    Reset the cached distributions registry.
    """
    configure_distributions_register.cache_clear()
    DistributionRegister._reset()
