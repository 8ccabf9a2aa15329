"""
Tolerance policy for numerical decisions.

Every place the library decides "is this number zero?" reads its threshold
from a TolerancePolicy rather than a hidden constant:

- pivot_tol: elimination pivot search, pivot clamping and rank counting
- singular_tol: determinant threshold below which inverse() refuses
- rtol / atol: approximate equality in Matrix.allclose()

Operations accept a policy= keyword (DEFAULT_POLICY unless given) and
per-tolerance keyword overrides that win over the policy.
"""

from dataclasses import dataclass, replace

from pymatrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class TolerancePolicy:
    """Tolerance specification for numerical decisions."""
    pivot_tol: float
    singular_tol: float
    rtol: float
    atol: float
    name: str

    def __post_init__(self) -> None:
        for field_name in ('pivot_tol', 'singular_tol', 'rtol', 'atol'):
            value = getattr(self, field_name)
            if value < 0:
                raise ValidationError(
                    f"{field_name}: must be non-negative, got {value}"
                )

    def with_overrides(self, **changes: float) -> 'TolerancePolicy':
        """Return a copy of this policy with selected fields replaced."""
        return replace(self, **changes)


# Pivot search treats |x| <= 1e-5 as zero. Inverse only refuses an exactly
# zero determinant, so near-singular inputs still produce a (noisy) result.
DEFAULT_POLICY = TolerancePolicy(
    pivot_tol=1e-5,
    singular_tol=0.0,
    rtol=1e-9,
    atol=1e-12,
    name='default',
)

# Uses the pivot tolerance for the singularity check as well.
STRICT_POLICY = DEFAULT_POLICY.with_overrides(singular_tol=1e-5, name='strict')


def select_policy(strict: bool = False) -> TolerancePolicy:
    """Select the default or strict tolerance policy."""
    if strict:
        return STRICT_POLICY
    return DEFAULT_POLICY
