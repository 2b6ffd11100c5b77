"""
evostat
=======

Statistics core of an evolutionary-computation toolkit: probability
distributions over closed numeric domains and streaming accumulators that can
be adapted to other value types.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .accumulators import *
from .accumulators import __all__ as _accumulators_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("evostat")
__all__ = [
    "__version__",
    *_accumulators_all,
    *_distr_all,
    *_errors_all,
    *_types_all,
]

del _accumulators_all
del _distr_all
del _errors_all
del _types_all
