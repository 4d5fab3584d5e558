# uint256kit

Arithmetic on unsigned 256-bit integers, viewed as four little-endian
64-bit limbs. It provides wrapping addition and subtraction, full and half
products, division, GCD, modular arithmetic, and Montgomery multiplication
for odd moduli. It has no dependencies outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `Fp256` type

`uint256kit.fp256.Fp256` is an immutable, ordered value in the range
`[0, 2**256)`. It is built from an `int` (anything else raises `TypeError`,
anything out of range raises `ValueError`) and converts back with `int()`.

```python
from uint256kit.fp256 import Fp256, leading_zeros, limb_bits

a = Fp256.from_hex("ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff")
b = Fp256.from_hex("ffffffff")

a.add(b)            # sum modulo 2**256; the carry is dropped
a.sub(b)            # difference modulo 2**256; the borrow is dropped
a.add_limb(1)       # add one 64-bit limb
a.sub_limb(1)
a.cmp(b)            # 1, 0 or -1

a.mullo(b)          # low 256 bits of the 512-bit product
a.mulhi(b)          # high 256 bits of the product
a.mul(b)            # (high, low)
a.sqrlo(), a.sqrhi(), a.sqr()

q, r = a.div(b)     # DivResult(quotient, remainder)
a.naive_div(b)      # the same result by bit-by-bit restoring division
a.gcd(b)            # zero when either operand is zero
a.is_coprime(b)

a.to_hex(), a.limbs(), a.nlimbs(), a.num_bits()
a.is_zero(), a.is_one(), a.is_odd(), a.is_even()

leading_zeros(0x1)  # 63
limb_bits(0x1)      # 1
```

`from_hex` takes a `str` or `bytes`, accepts an optional `0x` prefix, reads
an empty string as zero and raises `ValueError` for non-hex text or values
wider than 256 bits. `to_hex` gives lower-case hex without leading zeros.
`Fp256.from_limbs` builds a value from at most four little-endian 64-bit
limbs. `div` and `naive_div` raise `ZeroDivisionError` for a zero divisor.

## Modular arithmetic

`uint256kit.modarith` works with a modulus `m` given as an `Fp256`:

```python
from uint256kit.fp256 import Fp256
from uint256kit.modarith import mod, mod_neg, mod_add, mod_sub, mod_mul, mod_sqr, mod_inv, mod_exp

m = Fp256.from_hex("5")
mod_mul(Fp256.from_hex("2"), Fp256.from_hex("3"), m)   # Fp256(1)
```

- `mod(a, m)` — remainder of `a` by `m`.
- `mod_neg(a, m)` — `m - (a mod m)`; this is `m` itself when `m` divides `a`.
- `mod_add`, `mod_mul`, `mod_sqr` reduce the full sum or 512-bit product, so
  operands may be larger than the modulus.
- `mod_sub(a, b, m)` — `(a - b) mod m`, in `[0, m)`.
- `mod_inv(a, m)` — raises `ValueError` when `a` or `m` is zero or when the
  inverse does not exist.
- `mod_exp(a, e, m)` — uses Montgomery arithmetic for odd moduli and plain
  modular exponentiation for even ones.

A zero modulus raises `ZeroDivisionError`.

## Montgomery form

`uint256kit.mont.MontContext(modulus, w=4)` precomputes, for an odd modulus
`N` and a width `w` of 1 to 4 limbs, `rr = R**2 mod N` and
`k0 = -N**-1 mod 2**64`, where `R = 2**(64*w)`:

```python
from uint256kit.fp256 import Fp256
from uint256kit.mont import MontContext, invert_limb

ctx = MontContext(Fp256.from_hex("f"), 4)
A = ctx.to_mont(Fp256.from_hex("8"))
ctx.from_mont(ctx.mul(A, A))   # 8 * 8 mod 15
ctx.sqr(A)
ctx.exp(A, Fp256.from_hex("3"))   # result stays in Montgomery form
```

An even modulus or a width outside 1..4 raises `ValueError`.
`invert_limb(limb)` returns `k0` with `limb * k0 == -1 (mod 2**64)` for an
odd 64-bit limb.

## Benchmarks

The `uint256kit-bench` command times the operations on random operands and
prints, for each one, operations per second and nanoseconds per operation:

```
uint256kit-bench
uint256kit-bench fp256_div fp256_mod_exp -n 50000 -t 4
```

Positional names pick benchmarks (all by default), `-n/--iterations` sets
the operations per run (default 10000) and `-t/--threads` also runs each
benchmark in that many threads at once.

From Python, `uint256kit.bench.benchmarks()` lists the `Benchmark`s,
`run_benchmark` and `run_benchmark_threads` time one and return
`BenchResult`s, and `format_result` renders a result as text.

## What it does not do

There is no primality testing, no random-number service beyond the
benchmark operand generators, and no signed or wider-than-256-bit type.