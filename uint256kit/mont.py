"""Montgomery arithmetic over an odd modulus of up to four limbs."""

from __future__ import annotations

from .fp256 import LIMB_BITS, LIMB_MASK, NUM_LIMBS, Fp256


def invert_limb(limb: int) -> int:
    """Return k0 with limb * k0 == -1 (mod 2**64); limb must be odd."""
    if not 0 <= limb <= LIMB_MASK:
        raise ValueError(f"limb out of range for 64 bits: {limb!r}")
    if limb & 1 == 0:
        raise ValueError("only odd limbs are invertible modulo 2**64")
    return -pow(limb, -1, 1 << LIMB_BITS) & LIMB_MASK


class MontContext:
    """Precomputed values for Montgomery arithmetic modulo an odd number.

    R is 2**(64 * w); rr holds R**2 mod N and k0 holds -N**-1 mod 2**64.
    """

    def __init__(self, modulus: Fp256, w: int = NUM_LIMBS) -> None:
        if not 1 <= w <= NUM_LIMBS:
            raise ValueError(f"limb width must be between 1 and {NUM_LIMBS}, got {w}")
        if modulus.is_even():
            raise ValueError("Montgomery modulus must be odd")
        self.modulus = modulus
        self.w = w
        n = modulus.value
        self._n = n
        self._r_inv = pow(1 << (LIMB_BITS * w), -1, n)
        self.rr = Fp256(pow(2, 2 * LIMB_BITS * w, n))
        self.k0 = invert_limb(modulus.limbs()[0])

    def __repr__(self) -> str:
        return f"MontContext(modulus=0x{self.modulus.to_hex()}, w={self.w})"

    def mul(self, a: Fp256, b: Fp256) -> Fp256:
        """a * b * R**-1 mod N."""
        return Fp256(a.value * b.value * self._r_inv % self._n)

    def sqr(self, a: Fp256) -> Fp256:
        """a * a * R**-1 mod N."""
        return self.mul(a, a)

    def to_mont(self, a: Fp256) -> Fp256:
        """a * R mod N."""
        return self.mul(a, self.rr)

    def from_mont(self, a: Fp256) -> Fp256:
        """a * R**-1 mod N."""
        return Fp256(a.value * self._r_inv % self._n)

    def exp(self, a: Fp256, e: Fp256) -> Fp256:
        """Raise a Montgomery-form value to the power e, result in Montgomery form."""
        plain = self.from_mont(a).value
        return self.to_mont(Fp256(pow(plain, e.value, self._n)))