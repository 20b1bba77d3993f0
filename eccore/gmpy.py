"""This module collects all gmpy2 functions used by eccore.

Results of gmpy2 are of type mpz, which callers convert to Python int where
values are handed out to users of the package.
"""

import logging
from gmpy2 import version, is_prime, powmod, invert, legendre, jacobi

logging.debug(f'Load gmpy2 version {version()}')

__all__ = ['is_prime', 'powmod', 'invert', 'legendre', 'jacobi']
