#!/usr/bin/env python3

"""procroute setup script"""

import sys

from setuptools import setup

if sys.version_info < (3,):
    print("""You are trying to install procroute on python {py}

procroute is not compatible with python 2, please upgrade to python 3.5 or newer."""
          .format(py='.'.join([str(v) for v in sys.version_info[:3]])), file=sys.stderr)
    sys.exit(1)

setup(
    name='procroute',
    version='0.1.0',
    description='Parser for procfs-style IPv6 routing table listings',
    packages=['procroute'],
    install_requires=['eventlet', 'PyYAML'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.5'
)
