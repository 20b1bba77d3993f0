"""eccore is a Python package providing the algebraic core for elliptic curve cryptography.

Two families of elliptic curves over prime fields GF(p) are supported behind one
common interface: short Weierstrass curves y^2 = x^3 + a*x + b and twisted Edwards
curves a*x^2 + y^2 = 1 + d*x^2*y^2. The curve records are immutable value objects
with structural equality, offering curve membership tests, tests for the existence
of points with a given x-coordinate, lifting of x-coordinates to points (using
modular square roots), and point negation.

Number theory needed for these operations, such as Jacobi symbols and square roots
modulo a prime, is available in the modules gmpy (backed by the gmpy2 package) and
ntheory. A small selection of named curves (secp256k1, P-256, BN256, Ed25519, Ed448)
is built-in, see module namedcurves.

Point arithmetic, point encodings, and signature schemes are left to higher layers.
"""

__version__ = '0.2.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments recognized by eccore."""
    parser = argparse.ArgumentParser(add_help=False)

    group = parser.add_argument_group('eccore logging')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level=os.getenv('ECCORE_LOGLEVEL', 'info'))
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        ch = (options.log_level or 'info')[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level
    del options
