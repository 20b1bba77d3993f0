"""eccore setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import eccore

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='eccore',
    version=eccore.__version__,
    description='eccore -- Elliptic curves over prime fields, Weierstrass and Edwards',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['crypto', 'cryptography', 'elliptic curves', 'ECC',
              'Weierstrass curves', 'twisted Edwards curves', 'modular square roots'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Security :: Cryptography',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=eccore.__license__,
    packages=['eccore'],
    platforms=['any'],
    install_requires=['gmpy2'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.9'
)
