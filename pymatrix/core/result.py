"""
Generic result container for diagnostic algebra routines.

Plain operations (determinant, row_echelon, rank) return plain values.
Routines that also report how they got there (eliminate) wrap their
payload in a Result so metadata and timing travel with it.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, tolerance, shape)
    - timing is optional
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Routine-specific payload
        info: Structured metadata (method, tolerance, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EchelonParams(matrix=m, pivot_columns=(0, 1), row_swaps=(), rank=2),
        ...     info={'method': 'gauss_jordan', 'pivot_tol': 1e-5},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_elimination'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
