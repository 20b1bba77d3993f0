"""This module provides a selection of built-in elliptic curves.

The following Weierstrass curves and Edwards curves are built-in:

    - 'secp256k1': Bitcoin's Koblitz curve from https://www.secg.org/sec2-v2.pdf
    - 'P-256': NIST curve, aka secp256r1, see FIPS 186-4, Appendix D.1.2.3
    - 'BN256': Barreto-Naehrig curve, https://eprint.iacr.org/2010/186
    - 'Ed25519': see https://en.wikipedia.org/wiki/EdDSA#Ed25519
    - 'Ed448': aka "Goldilocks", see https://en.wikipedia.org/wiki/Curve448

Each built-in curve comes with a generator of a large prime-order subgroup,
given as affine point (x, y, 1), and the order of this subgroup.
"""

import logging
import functools
from eccore import gmpy as gmpy2
from eccore.ntheory import sqrt_mod_prime
from eccore.curves import WeierstrassCurve, EdwardsCurve


def NamedCurve(curvename='Ed25519'):
    """Return curve object for one of the built-in curves.

    Curve objects are cached, so repeated calls return the same object.
    """
    return _NamedCurve(curvename)


@functools.cache
def _NamedCurve(curvename):
    if curvename.startswith('Ed'):
        if curvename == 'Ed25519':
            p = 2**255 - 19  # p = 5 (mod 8)
            a = p - 1  # twisted
            d = -121665 * int(gmpy2.invert(121666, p)) % p
            y = 4 * int(gmpy2.invert(5, p)) % p
            x = _edwards_x(p, a, d, y)
            x = x if x%2 == 0 else p - x  # enforce "positive" (even) x coordinate
            h = 8
            order = 2**252 + 27742317777372353535851937790883648493
        elif curvename == 'Ed448':
            p = 2**448 - 2**224 - 1  # p = 3 (mod 4)
            a = 1
            d = p - 39081
            y = 19
            x = _edwards_x(p, a, d, y)
            x = x if 2*x < p else p - x  # enforce principal root
            h = 4
            order = 2**446 - int('8335dc163bb124b65129c96fde933d8d723a70aadc873d6d54a7bb0d', 16)
        else:
            raise ValueError('invalid curvename')

        base = EdwardsCurve
        args = (p, a, d, h, order)
    elif curvename == 'BN256':
        u = 1868033**3
        p = 36*u**4 + 36*u**3 + 24*u**2 + 6*u + 1  # p = 3 (mod 4)
        a, b = 0, 3
        x, y = 1, p - 2
        order = p - 6*u**2
        base = WeierstrassCurve
        args = (p, a, b, 1)
    elif curvename == 'secp256k1':
        p = 2**256 - 2**32 - 2**9 - 2**8 - 2**7 - 2**6 - 2**4 - 1  # p = 3 (mod 4)
        a, b = 0, 7
        x = int('79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798', 16)
        y = int('483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8', 16)
        order = int('FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141', 16)
        base = WeierstrassCurve
        args = (p, a, b, 1)
    elif curvename == 'P-256':
        p = 2**256 - 2**224 + 2**192 + 2**96 - 1  # p = 3 (mod 4)
        a = p - 3
        b = int('5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B', 16)
        x = int('6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296', 16)
        y = int('4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5', 16)
        order = int('FFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551', 16)
        base = WeierstrassCurve
        args = (p, a, b, 1)
    else:
        raise ValueError('curve not supported')

    name = f'{base.__name__}({curvename})'
    EC = type(name, (base,), {'__slots__': ()})
    EC.curvename = curvename
    EC.generator = (x, y, 1)
    if base is WeierstrassCurve:
        EC.order = order  # NB: EdwardsCurve stores order per instance
    curve = EC(*args)
    assert gmpy2.is_prime(order)
    assert curve.contains_point(x, y)
    logging.debug(f'Create curve {name} over GF(p) with {p.bit_length()}-bit modulus p')
    return curve


def _edwards_x(p, a, d, y):
    """Return a square root x of (1 - y^2) / (a - d*y^2) modulo p."""
    y2 = y * y % p
    x2 = (1 - y2) * int(gmpy2.invert(a - d * y2, p)) % p
    return sqrt_mod_prime(x2, p)
