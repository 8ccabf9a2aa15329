"""
Shared compute infrastructure for PyMatrix.

Submodules:
    tolerances: TolerancePolicy and the default thresholds
    timing: Execution timing utilities
    numeric: Scalar helpers (sqrt, root, power)
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    TolerancePolicy,
    DEFAULT_POLICY,
    STRICT_POLICY,
    select_policy,
)
from pymatrix.core.compute.numeric import sqrt, root, power

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "TolerancePolicy",
    "DEFAULT_POLICY",
    "STRICT_POLICY",
    "select_policy",
    # Numeric helpers
    "sqrt",
    "root",
    "power",
]
