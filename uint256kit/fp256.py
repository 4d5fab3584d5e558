"""Unsigned 256-bit integers made of four 64-bit limbs, with wrapping arithmetic."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import Iterable, NamedTuple

LIMB_BITS = 64
LIMB_MASK = (1 << LIMB_BITS) - 1
NUM_LIMBS = 4
BITS = LIMB_BITS * NUM_LIMBS
MASK = (1 << BITS) - 1

_HEX_DIGITS = frozenset(string.hexdigits)


def _check_limb(limb: int) -> int:
    if not 0 <= limb <= LIMB_MASK:
        raise ValueError(f"limb out of range for 64 bits: {limb!r}")
    return limb


def leading_zeros(limb: int) -> int:
    """Number of leading zero bits in a 64-bit limb (64 for zero)."""
    return LIMB_BITS - _check_limb(limb).bit_length()


def limb_bits(limb: int) -> int:
    """Number of significant bits in a 64-bit limb."""
    return _check_limb(limb).bit_length()


class DivResult(NamedTuple):
    """Quotient and remainder of a division."""

    quotient: "Fp256"
    remainder: "Fp256"


@dataclass(frozen=True, order=True)
class Fp256:
    """An unsigned integer in the range [0, 2**256)."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Fp256 value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= MASK:
            raise ValueError("value does not fit in 256 unsigned bits")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    # construction and conversion

    @classmethod
    def from_hex(cls, text: str | bytes) -> "Fp256":
        """Parse a big-endian hex string; an optional 0x prefix is accepted."""
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("ascii")
        digits = text.strip()
        if digits[:2].lower() == "0x":
            digits = digits[2:]
        if not digits:
            return cls(0)
        if not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"invalid hex string: {text!r}")
        value = int(digits, 16)
        if value > MASK:
            raise ValueError("hex value exceeds 256 bits")
        return cls(value)

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "Fp256":
        """Build from little-endian 64-bit limbs (at most four)."""
        parts = [_check_limb(limb) for limb in limbs]
        if len(parts) > NUM_LIMBS:
            raise ValueError(f"at most {NUM_LIMBS} limbs are allowed, got {len(parts)}")
        return cls(sum(limb << (LIMB_BITS * i) for i, limb in enumerate(parts)))

    def to_hex(self) -> str:
        """Lower-case hex without leading zeros ("0" for zero)."""
        return format(self.value, "x")

    def limbs(self) -> tuple[int, int, int, int]:
        """The four little-endian 64-bit limbs."""
        return tuple((self.value >> (LIMB_BITS * i)) & LIMB_MASK for i in range(NUM_LIMBS))

    def nlimbs(self) -> int:
        """Number of significant limbs."""
        return (self.value.bit_length() + LIMB_BITS - 1) // LIMB_BITS

    def num_bits(self) -> int:
        return self.value.bit_length()

    # predicates

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def is_odd(self) -> bool:
        return self.value & 1 == 1

    def is_even(self) -> bool:
        return self.value & 1 == 0

    # addition and subtraction, carry and borrow discarded

    def add(self, other: "Fp256") -> "Fp256":
        return Fp256((self.value + other.value) & MASK)

    def sub(self, other: "Fp256") -> "Fp256":
        return Fp256((self.value - other.value) & MASK)

    def add_limb(self, limb: int) -> "Fp256":
        return Fp256((self.value + _check_limb(limb)) & MASK)

    def sub_limb(self, limb: int) -> "Fp256":
        return Fp256((self.value - _check_limb(limb)) & MASK)

    def cmp(self, other: "Fp256") -> int:
        """1 if self > other, 0 if equal, -1 if self < other."""
        return (self.value > other.value) - (self.value < other.value)

    # multiplication

    def mullo(self, other: "Fp256") -> "Fp256":
        """Lower 256 bits of the product."""
        return Fp256((self.value * other.value) & MASK)

    def mulhi(self, other: "Fp256") -> "Fp256":
        """Upper 256 bits of the product."""
        return Fp256((self.value * other.value) >> BITS)

    def mul(self, other: "Fp256") -> tuple["Fp256", "Fp256"]:
        """Full product as (high, low) halves."""
        product = self.value * other.value
        return Fp256(product >> BITS), Fp256(product & MASK)

    def sqrlo(self) -> "Fp256":
        return self.mullo(self)

    def sqrhi(self) -> "Fp256":
        return self.mulhi(self)

    def sqr(self) -> tuple["Fp256", "Fp256"]:
        return self.mul(self)

    # division

    def div(self, divisor: "Fp256") -> DivResult:
        """Quotient and remainder; raises ZeroDivisionError for a zero divisor."""
        if divisor.is_zero():
            raise ZeroDivisionError("division by zero")
        quo, rem = divmod(self.value, divisor.value)
        return DivResult(Fp256(quo), Fp256(rem))

    def naive_div(self, divisor: "Fp256") -> DivResult:
        """Bit-by-bit restoring division; same results as div()."""
        d = divisor.value
        if d == 0:
            raise ZeroDivisionError("division by zero")
        quo = 0
        rem = 0
        for bit in reversed(range(self.value.bit_length())):
            rem = (rem << 1) | ((self.value >> bit) & 1)
            if rem >= d:
                rem -= d
                quo |= 1 << bit
        return DivResult(Fp256(quo), Fp256(rem))

    # number theory

    def gcd(self, other: "Fp256") -> "Fp256":
        """Greatest common divisor; zero when either operand is zero."""
        if self.is_zero() or other.is_zero():
            return Fp256(0)
        return Fp256(math.gcd(self.value, other.value))

    def is_coprime(self, other: "Fp256") -> bool:
        return self.gcd(other).is_one()