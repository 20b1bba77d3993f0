"""This module provides the number theory used for elliptic curves over prime fields.

Quadratic residuosity is tested by means of Jacobi symbols, and square roots modulo
a prime p are computed directly for p = 3 (mod 4) and p = 5 (mod 8), falling back
to the Cipolla-Lehmer algorithm for the remaining primes p = 1 (mod 8).
"""

from eccore import gmpy as gmpy2


class NoSquareRootError(ValueError):
    """Raised if a square root is requested for a quadratic nonresidue."""


def order_len(n):
    """Return number of bytes needed to represent nonnegative integer n."""
    return (n.bit_length() + 7) >> 3


def is_sqr(a, p):
    """Return True if a is a square modulo prime p (zero included), else False."""
    if p == 2:
        return True

    return gmpy2.jacobi(a % p, p) != -1


def sqrt_mod_prime(a, p):
    """Return a square root of a modulo prime p.

    Raises NoSquareRootError if a is not a square modulo p.
    """
    a %= p
    if a == 0 or p == 2:
        return a

    if gmpy2.legendre(a, p) != 1:
        raise NoSquareRootError(f'{a} is not a square modulo {p}')

    if p&3 == 3:
        return int(gmpy2.powmod(a, (p+1) >> 2, p))

    if p&7 == 5:
        # Atkin's method: i = 2*a*v^2 is a square root of -1
        v = int(gmpy2.powmod(2*a, (p-5) >> 3, p))
        i = (2*a * v * v) % p
        return (a * v * (i - 1)) % p

    # 1 (mod 8) primes are covered using Cipolla-Lehmer's algorithm.
    # find b s.t. b^2 - 4*a is not a square
    b = 1
    while gmpy2.legendre(b * b - 4*a, p) != -1:
        b += 1

    # compute u*X + v = X^{(p+1)/2} mod f, for f = X^2 - b*X + a
    u, v = 0, 1
    e = (p+1) >> 1
    for i in range(e.bit_length() - 1, -1, -1):
        u2 = (u * u) % p
        u = ((u<<1) * v + b * u2) % p
        v = (v * v - a * u2) % p
        if (e >> i) & 1:
            u, v = (v + b * u) % p, (-a * u) % p
    return v
