"""This module supports elliptic curves over prime fields.

Two families of curves are covered, both defined over a prime field GF(p):

    - short Weierstrass curves:  y^2 = x^3 + a*x + b
    - twisted Edwards curves:    a*x^2 + y^2 = 1 + d*x^2*y^2

A curve is an immutable record of its parameters, with equality and hashing
determined by these parameters only. Points are handed out as tuples (x, y, z)
of integers, using z=1 for points in affine form.

Both families implement the common interface given by class Curve, such that
higher layers can dispatch on the capabilities of a curve without knowing its
family. Operations that are not supported for a family raise NotImplementedError.
For instance, recovering Edwards points from x-coordinates is left to point
encoding layers, and key lengths for Weierstrass curves depend on the encoding
scheme in use.
"""

import operator
from eccore import gmpy as gmpy2
from eccore.ntheory import NoSquareRootError, order_len, is_sqr, sqrt_mod_prime


def _to_int(value, what):
    """Return value as Python int, accepting int-like types such as gmpy2's mpz."""
    if isinstance(value, bool):
        raise TypeError(f'{what} must be an integer')

    try:
        return int(operator.index(value))
    except TypeError:
        raise TypeError(f'{what} must be an integer') from None


def _check_modulus(p):
    p = _to_int(p, 'modulus')
    if p < 3 or not gmpy2.is_prime(p):
        raise ValueError('modulus must be an odd prime')

    return p


def _check_coefficient(c, p):
    return _to_int(c, 'curve coefficient') % p


class Curve:
    """Abstract base class for elliptic curves over prime fields.

    Attributes p and a are common to all curve families, next to the lengths
    baselen and verifying_key_length (in bytes) used by encoding layers.
    """

    __slots__ = ()

    curvename = None  # set for built-in curves, see module namedcurves
    generator = None
    order = None

    @property
    def p(self):
        """Prime field modulus."""
        return self._p

    @property
    def a(self):
        """Coefficient a of the curve equation."""
        return self._a

    @property
    def baselen(self):
        """Number of bytes to encode a field element (coordinate)."""
        raise NotImplementedError

    @property
    def verifying_key_length(self):
        """Number of bytes to encode a public (verifying) key."""
        raise NotImplementedError

    def cofactor(self):
        raise NotImplementedError

    def contains_point(self, x, y):
        """Test if (x, y) satisfies the curve equation."""
        raise NotImplementedError

    def is_x_coord(self, x):
        """Test if the curve has a point with x-coordinate x."""
        raise NotImplementedError

    def lift_x(self, x):
        """Return a point (x, y, 1) on the curve with x-coordinate x."""
        raise NotImplementedError

    def negate(self, pt):
        """Return additive inverse of point pt = (x, y, z)."""
        raise NotImplementedError

    def __setattr__(self, name, value):
        raise AttributeError('curve parameters are read-only')

    def __delattr__(self, name):
        raise AttributeError('curve parameters are read-only')

    def __reduce__(self):
        """Support copy and pickle, bypassing the read-only attributes."""
        if self.curvename is not None:
            from eccore.namedcurves import NamedCurve  # NB: avoid circular import
            return NamedCurve, (self.curvename,)

        return type(self), self._reduce_args()

    def _reduce_args(self):
        raise NotImplementedError


class WeierstrassCurve(Curve):
    """Short Weierstrass curve y^2 = x^3 + a*x + b over GF(p).

    The cofactor h is optional, None indicating that no cofactor is supplied.
    """

    __slots__ = ('_p', '_a', '_b', '_h')

    def __init__(self, p, a, b, h=None):
        p = _check_modulus(p)
        if h is not None:
            h = _to_int(h, 'cofactor')
            if h < 0:
                raise ValueError('cofactor must be nonnegative')

        object.__setattr__(self, '_p', p)
        object.__setattr__(self, '_a', _check_coefficient(a, p))
        object.__setattr__(self, '_b', _check_coefficient(b, p))
        object.__setattr__(self, '_h', h)

    @property
    def b(self):
        """Coefficient b of the curve equation."""
        return self._b

    @property
    def h(self):
        """Cofactor, or None if not supplied."""
        return self._h

    def cofactor(self):
        return self._h

    @property
    def baselen(self):
        return order_len(self._p)

    @property
    def verifying_key_length(self):
        # length of encoded keys is set by the point encoding (compressed or not)
        raise NotImplementedError

    def ysquared(self, x):
        """Return x^3 + a*x + b modulo p."""
        p = self._p
        return (int(gmpy2.powmod(x, 3, p)) + self._a * x + self._b) % p

    def contains_point(self, x, y):
        return (y * y - ((x * x + self._a) * x + self._b)) % self._p == 0

    def is_x_coord(self, x):
        return is_sqr(self.ysquared(x), self._p)

    def lift_x(self, x):
        """Return a point (x, y, 1) on the curve with x-coordinate x.

        Raises NoSquareRootError if no such point exists, that is, if is_x_coord(x)
        does not hold. Which of the (at most) two points is returned is unspecified,
        use negate() to obtain the other one.
        """
        try:
            y = sqrt_mod_prime(self.ysquared(x), self._p)
        except NoSquareRootError:
            raise NoSquareRootError(f'no point on curve with x-coordinate {x}') from None

        return x, y, 1

    def negate(self, pt):
        """Return additive inverse of point pt = (x, y, z), of the same sequence type as pt."""
        x, y, z = pt
        return type(pt)((x, (self._p - y) % self._p, z))

    def __eq__(self, other):
        if not isinstance(other, WeierstrassCurve):
            return NotImplemented

        return (self._p, self._a, self._b, self._h) == (other._p, other._a, other._b, other._h)

    def __hash__(self):
        return hash(('WeierstrassCurve', self._p, self._a, self._b, self._h))

    def _reduce_args(self):
        return self._p, self._a, self._b, self._h

    def __repr__(self):
        return f'WeierstrassCurve(p={self._p}, a={self._a}, b={self._b}, h={self._h})'


class EdwardsCurve(Curve):
    """Twisted Edwards curve a*x^2 + y^2 = 1 + d*x^2*y^2 over GF(p).

    The cofactor h is mandatory. The order of the (prime-order) subgroup used
    for cryptography is kept as attribute order, but does not take part in
    comparisons between curves.
    """

    __slots__ = ('_p', '_a', '_d', '_h', '_order')

    def __init__(self, p, a, d, h, order):
        p = _check_modulus(p)
        h = _to_int(h, 'cofactor')
        if h < 1:
            raise ValueError('cofactor must be positive')

        object.__setattr__(self, '_p', p)
        object.__setattr__(self, '_a', _check_coefficient(a, p))
        object.__setattr__(self, '_d', _check_coefficient(d, p))
        object.__setattr__(self, '_h', h)
        object.__setattr__(self, '_order', order)

    @property
    def d(self):
        """Coefficient d of the curve equation."""
        return self._d

    @property
    def h(self):
        """Cofactor."""
        return self._h

    @property
    def order(self):
        return self._order

    def cofactor(self):
        return self._h

    @property
    def baselen(self):
        # one extra bit for the sign of x, packed with the encoding of y
        return (self._p.bit_length() + 1 + 7) >> 3

    @property
    def verifying_key_length(self):
        return self.baselen

    def contains_point(self, x, y):
        x2, y2 = x * x, y * y
        return (self._a * x2 + y2 - 1 - self._d * x2 * y2) % self._p == 0

    def is_x_coord(self, x):
        raise NotImplementedError

    def lift_x(self, x):
        raise NotImplementedError

    def negate(self, pt):
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, EdwardsCurve):
            return NotImplemented

        return (self._p, self._a, self._d, self._h) == (other._p, other._a, other._d, other._h)

    def __hash__(self):
        return hash(('EdwardsCurve', self._p, self._a, self._d, self._h))

    def _reduce_args(self):
        return self._p, self._a, self._d, self._h, self._order

    def __repr__(self):
        return f'EdwardsCurve(p={self._p}, a={self._a}, d={self._d}, h={self._h})'
