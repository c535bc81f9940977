# -*- coding: utf-8 -*-
"""
Base utilities and constants for SEIZMO.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import sys

import numpy as np


# preferred header version for newly built records (SAC version 6)
PREFERRED_VERSION = 6

# fields every record must carry
DEFAULT_REQUIRED_FIELDS = ('path', 'name', 'filetype', 'version',
                           'byteorder', 'hasdata', 'misc', 'head')

BYTEORDERS = ('big', 'little')
NATIVE_BYTEORDER = sys.byteorder

# maximum deviation of the observed from the nominal sample interval that is
# still considered evenly sampled
EVEN_SAMPLING_TOLERANCE = 10 * np.finfo(np.float64).eps

# values written into records created from raw arrays
BUILD_NETWORK = 'SEIZMO'
BUILD_FILETYPE = 'SAC Binary File'
BUILD_IFTYPE = 'General X vs Y file'
BUILD_PATH = '.'

# process-wide switches, see seizmo.core.checking
DEFAULT_SEIZMOCHECK_STATE = True
DEFAULT_CHECKHEADER_STATE = True

# closed set of sample storage classes, name -> numpy dtype
STORAGE_CLASSES = {
    'double': np.dtype(np.float64),
    'single': np.dtype(np.float32),
    'int64': np.dtype(np.int64),
    'int32': np.dtype(np.int32),
    'int16': np.dtype(np.int16),
    'int8': np.dtype(np.int8),
    'uint64': np.dtype(np.uint64),
    'uint32': np.dtype(np.uint32),
    'uint16': np.dtype(np.uint16),
    'uint8': np.dtype(np.uint8),
}


def cast_to_storage(values, storage):
    """
    Cast an array to one of the named sample storage classes.

    :type values: array_like
    :param values: Samples to cast.
    :type storage: str
    :param storage: One of the keys of :data:`STORAGE_CLASSES`, e.g.
        ``'double'`` or ``'int16'``.
    :rtype: :class:`numpy.ndarray`

    >>> cast_to_storage([1.5, 2.5], 'single').dtype
    dtype('float32')
    """
    try:
        dtype = STORAGE_CLASSES[storage]
    except (KeyError, TypeError):
        msg = "Unknown storage class '{}'. Use one of: {}".format(
            storage, ', '.join(STORAGE_CLASSES))
        raise ValueError(msg)
    return np.asarray(values).astype(dtype)


def storage_of(values):
    """
    Return the storage class name matching the dtype of an array.

    >>> storage_of(np.zeros(3, dtype=np.int16))
    'int16'
    """
    dtype = np.asarray(values).dtype
    for name, candidate in STORAGE_CLASSES.items():
        if dtype == candidate:
            return name
    msg = "No storage class for dtype '{}'".format(dtype)
    raise ValueError(msg)


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
