"""
Scalar numeric helpers.

Iterative approximations for square root and n-th root, plus exact
integer powers. These are general-purpose primitives; none of the matrix
algorithms depend on them for correctness.
"""

import math

from pymatrix.core.exceptions import (
    ConvergenceError,
    DivideByZeroError,
    ValidationError,
)


DEFAULT_TOL: float = 1e-12
DEFAULT_MAX_ITER: int = 100


def power(x: float, n: int) -> float:
    """
    Integer power by repeated squaring.

    Args:
        x: Base
        n: Integer exponent; negative exponents return the reciprocal

    Returns:
        x ** n (with power(0, 0) == 1)

    Raises:
        ValidationError: If n is not an integer
        DivideByZeroError: If x == 0 and n < 0
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValidationError(f"n: expected int exponent, got {type(n).__name__}")

    if n < 0:
        if x == 0:
            raise DivideByZeroError(f"0 cannot be raised to negative power {n}")
        return 1.0 / power(x, -n)

    result = 1.0
    base = float(x)
    while n:
        if n & 1:
            result *= base
        base *= base
        n >>= 1
    return result


def root(
    x: float,
    n: int,
    *,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> float:
    """
    Real n-th root by Newton iteration.

    Iterates y <- ((n - 1) * y + x / y^(n-1)) / n until successive iterates
    differ by at most tol * |y|.

    Args:
        x: Radicand
        n: Positive integer degree
        tol: Relative convergence threshold
        max_iter: Iteration cap

    Returns:
        The real n-th root. For odd n and negative x, the negative root.

    Raises:
        ValidationError: If n < 1, or x < 0 with even n
        ConvergenceError: If the iteration cap is reached
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValidationError(f"n: expected positive int degree, got {n!r}")
    if x < 0:
        if n % 2 == 0:
            raise ValidationError(
                f"x: even root (n={n}) of negative value {x} has no real solution"
            )
        return -root(-x, n, tol=tol, max_iter=max_iter)
    if x == 0 or n == 1:
        return float(x)

    # Seed from the logarithm; Newton then only polishes the last few bits,
    # so the iteration count does not grow with n.
    y = math.exp(math.log(x) / n)
    change = float('inf')
    for _ in range(max_iter):
        y_next = ((n - 1) * y + x / power(y, n - 1)) / n
        change = abs(y_next - y)
        y = y_next
        if change <= tol * abs(y):
            return y

    raise ConvergenceError(
        f"root(x={x}, n={n}) did not converge after {max_iter} iterations "
        f"(last change {change:.3e}, tol {tol:.3e})",
        iterations=max_iter,
        final_change=change,
        reason='max_iterations',
        threshold=tol,
    )


def sqrt(
    x: float,
    *,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> float:
    """Square root by Newton iteration; see root()."""
    if x < 0:
        raise ValidationError(f"x: square root of negative value {x}")
    return root(x, 2, tol=tol, max_iter=max_iter)
