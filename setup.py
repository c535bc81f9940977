#! /usr/bin/env python
# -*- coding: utf-8 -*-
"""
SEIZMO - seismic record handling in Python.

SEIZMO keeps collections of seismic records (SAC version 6 and SEIZMO binary
headers plus their samples) in memory. It builds records from plain x/y
arrays, validates the structure of record collections and moves record data
into matrices and back.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import inspect
import os
import re
import sys

from setuptools import find_packages, setup


# The minimum python version which can be used to run SEIZMO
MIN_PYTHON_VERSION = (3, 8)

# Fail fast if the user is on an unsupported version of python.
if sys.version_info < MIN_PYTHON_VERSION:
    msg = ("SEIZMO requires python version >= {}".format(MIN_PYTHON_VERSION) +
           " you are using python version {}".format(sys.version_info))
    print(msg, file=sys.stderr)
    sys.exit(1)

# Directory of the current file in the (hopefully) most reliable way
# possible
SETUP_DIRECTORY = os.path.dirname(os.path.abspath(inspect.getfile(
    inspect.currentframe())))

DOCSTRING = __doc__.split("\n")

# Hard dependencies needed to install/run SEIZMO.
INSTALL_REQUIRES = [
    'numpy>=1.20',
    'decorator',
]
# Extra dependencies
EXTRAS_REQUIRES = {
    'tests': [
        'pytest',
    ],
}
EXTRAS_REQUIRES['all'] = [dep for depl in EXTRAS_REQUIRES.values()
                          for dep in depl]

# package specific settings
KEYWORDS = [
    'header', 'record', 'SAC', 'seismogram', 'seismograms', 'seismology',
    'SEIZMO', 'validation', 'waveform']


def get_version():
    """
    Read the version string from the package without importing it.
    """
    path = os.path.join(SETUP_DIRECTORY, 'seizmo', '__init__.py')
    with open(path, 'r') as fh:
        match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", fh.read(),
                          re.MULTILINE)
    if match is None:
        raise RuntimeError("Unable to find version string in %s" % path)
    return match.group(1)


def setupPackage():
    # setup package
    setup(
        name='seizmo',
        version=get_version(),
        description=DOCSTRING[1],
        long_description="\n".join(DOCSTRING[3:]),
        author='The SEIZMO Development Team',
        license='GNU Lesser General Public License, Version 3 (LGPLv3)',
        platforms='OS Independent',
        classifiers=[
            'Development Status :: 3 - Alpha',
            'Intended Audience :: Science/Research',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: '
                'GNU Lesser General Public License v3 (LGPLv3)',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering',
            'Topic :: Scientific/Engineering :: Physics'],
        keywords=KEYWORDS,
        packages=find_packages(include=['seizmo', 'seizmo.*']),
        include_package_data=True,
        zip_safe=False,
        python_requires=f'>={MIN_PYTHON_VERSION[0]}.{MIN_PYTHON_VERSION[1]}',
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRES,
    )


if __name__ == '__main__':
    setupPackage()
