"""Modular arithmetic on 256-bit unsigned integers."""

from __future__ import annotations

from .fp256 import Fp256
from .mont import MontContext


def _require_modulus(m: Fp256) -> int:
    if m.is_zero():
        raise ZeroDivisionError("modulus is zero")
    return m.value


def mod(a: Fp256, m: Fp256) -> Fp256:
    """a mod m."""
    return a.div(m).remainder


def mod_neg(a: Fp256, m: Fp256) -> Fp256:
    """m - (a mod m); gives m itself when a is a multiple of m."""
    return m.sub(mod(a, m))


def mod_add(a: Fp256, b: Fp256, m: Fp256) -> Fp256:
    """(a + b) mod m, with the carry out of 256 bits kept."""
    n = _require_modulus(m)
    return Fp256((a.value + b.value) % n)


def mod_sub(a: Fp256, b: Fp256, m: Fp256) -> Fp256:
    """(a - b) mod m, in the range [0, m)."""
    n = _require_modulus(m)
    if a.value >= b.value:
        return Fp256((a.value - b.value) % n)
    rem = (b.value - a.value) % n
    return Fp256(n - rem if rem else 0)


def mod_mul(a: Fp256, b: Fp256, m: Fp256) -> Fp256:
    """(a * b) mod m over the full 512-bit product."""
    n = _require_modulus(m)
    return Fp256(a.value * b.value % n)


def mod_sqr(a: Fp256, m: Fp256) -> Fp256:
    """a**2 mod m over the full 512-bit square."""
    n = _require_modulus(m)
    return Fp256(a.value * a.value % n)


def mod_inv(a: Fp256, m: Fp256) -> Fp256:
    """The inverse of a modulo m.

    Raises ValueError when a or m is zero or when a and m share a factor.
    """
    if a.is_zero() or m.is_zero():
        raise ValueError("cannot invert with a zero operand")
    try:
        return Fp256(pow(a.value, -1, m.value))
    except ValueError:
        raise ValueError("value is not invertible modulo m") from None


def mod_exp(a: Fp256, e: Fp256, m: Fp256) -> Fp256:
    """a**e mod m; Montgomery arithmetic is used for odd moduli."""
    n = _require_modulus(m)
    if m.is_odd():
        ctx = MontContext(m)
        base = mod(a, m) if a.value >= n else a
        result = ctx.exp(ctx.to_mont(base), e)
        return ctx.from_mont(result)
    return Fp256(pow(a.value, e.value, n))