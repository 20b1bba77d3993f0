"""Demo point decompression for Weierstrass curves.

A point (x, y) on a short Weierstrass curve is commonly compressed to its
x-coordinate together with the parity of y (see SEC 1, Section 2.3.3).
To decompress, the x-coordinate is lifted to a point (x, y, 1) on the curve,
and the point is negated if the parity of y does not match.

The demo compresses and decompresses the generator of a built-in curve and
a few more points obtained by lifting consecutive x-coordinates.
"""

import argparse
from eccore.ntheory import NoSquareRootError
from eccore.namedcurves import NamedCurve


def compress(E, pt):
    x, y, _ = pt
    return bytes([2 + (y & 1)]) + x.to_bytes(E.baselen, 'big')


def decompress(E, data):
    if len(data) != 1 + E.baselen or data[0] not in (2, 3):
        raise ValueError('invalid compressed point')

    x = int.from_bytes(data[1:], 'big')
    if x >= E.p or not E.is_x_coord(x):
        raise ValueError('no point on curve')

    pt = E.lift_x(x)
    if pt[1] == 0 and data[0] == 3:
        raise ValueError('invalid compressed point')  # y = 0 has even parity only

    if pt[1] & 1 != data[0] & 1:
        pt = E.negate(pt)
    return pt


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('-c', '--curve', type=str, metavar='C',
                        help='Weierstrass curve C=secp256k1/P-256/BN256')
    parser.add_argument('-n', '--number', type=int, metavar='N',
                        help='number N of x-coordinates to try')
    parser.set_defaults(curve='secp256k1', number=10)
    args, _ = parser.parse_known_args()

    E = NamedCurve(args.curve)
    print(f'Curve {E.curvename} with {E.baselen}-byte coordinates')
    g = E.generator
    data = compress(E, g)
    print(f'Compressed generator: {data.hex()}')
    assert decompress(E, data) == g

    for x in range(1, args.number + 1):
        try:
            pt = E.lift_x(x)
        except NoSquareRootError:
            print(f'x={x}: no point')
            continue

        for q in pt, E.negate(pt):
            assert decompress(E, compress(E, q)) == q
        print(f'x={x}: {compress(E, pt).hex()[:18]}...')


if __name__ == '__main__':
    main()
