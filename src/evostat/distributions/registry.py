"""
Global registry of distribution factories using the singleton pattern.

This module implements a centralized registry that maps distribution names
(e.g. ``"uniform"``) to factories building a distribution from its domain
bounds, so that callers can pick a distribution shape by name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import ClassVar

    from evostat.distributions.distribution import Distribution

    type DistributionFactory = Callable[..., Distribution[Any]]

logger = logging.getLogger(__name__)


class DistributionRegister:
    """
    Singleton registry for distribution factories.

    Maintains a global registry of all distribution factories, allowing
    them to be accessed by name.
    """

    _instance: ClassVar[DistributionRegister | None] = None
    _registered_factories: dict[str, DistributionFactory]

    def __new__(cls) -> DistributionRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_factories = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> DistributionFactory:
        """
        Retrieve a distribution factory by name.

        Parameters
        ----------
        name : str
            Name of the distribution.

        Returns
        -------
        DistributionFactory
            Callable building the distribution from its domain bounds.

        Raises
        ------
        ValueError
            If no distribution with the given name exists.
        """
        self = cls()
        if name not in self._registered_factories:
            raise ValueError(f"No distribution {name} found in register")
        return self._registered_factories[name]

    @classmethod
    def register(cls, name: str, factory: DistributionFactory) -> None:
        """
        Register a new distribution factory.

        Raises
        ------
        ValueError
            If a distribution with the same name is already registered.
        """
        self = cls()
        if name in self._registered_factories:
            raise ValueError(f"Distribution {name} already found in register")
        self._registered_factories[name] = factory
        logger.debug("Registered distribution factory %r", name)

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered distributions, sorted."""
        return sorted(cls()._registered_factories)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
