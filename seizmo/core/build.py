# -*- coding: utf-8 -*-
"""
Build SEIZMO records from x/y sample arrays.

.. rubric:: Example

Turn a square root function into a record, name it and check it:

>>> import numpy as np
>>> from seizmo.core.checking import validate
>>> x = np.linspace(0, 30, 1000)
>>> rec, = build(x, np.sqrt(x))
>>> rec.get_header('npts'), rec.get_header('iftype')
(1000, 'ixy')
>>> rec.name = 'sqrt.sac'
>>> validate(rec) is None
True

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging

import numpy as np

from .checkheader import nominal_delta
from .layout import blank, get_layout
from .record import Record
from .util.base import (BUILD_FILETYPE, BUILD_IFTYPE, BUILD_NETWORK,
                        BUILD_PATH, EVEN_SAMPLING_TOLERANCE, NATIVE_BYTEORDER,
                        PREFERRED_VERSION, STORAGE_CLASSES)
from .util.seizmo_types import InvalidSeriesError, MismatchedInputError


logger = logging.getLogger('seizmo.core.build')


def _as_series(values, label, pair):
    """
    Return ``values`` as a 1-D numeric array, accepting row and column
    vectors.  Dtypes without a storage class are cast to float64.
    """
    try:
        arr = np.array(values)
    except (TypeError, ValueError):
        arr = None
    if arr is None or arr.dtype.kind not in 'iuf':
        msg = "{} must be a numeric vector: pair {}".format(label, pair)
        raise InvalidSeriesError(msg, pair=pair)
    if arr.ndim == 2 and min(arr.shape) == 1:
        arr = arr.reshape(-1)
    if arr.ndim != 1 or arr.size == 0:
        msg = "{} must be a numeric vector: pair {}".format(label, pair)
        raise InvalidSeriesError(msg, pair=pair)
    if arr.dtype not in STORAGE_CLASSES.values():
        arr = arr.astype(np.float64)
    return arr


def _build_one(x, y, layout):
    npts = len(x)
    head = blank(layout)
    delta = nominal_delta(x[0], x[-1], npts)
    fields = (('delta', delta),
              ('b', x[0]),
              ('e', x[-1]),
              ('npts', npts),
              ('depmin', np.min(y)),
              ('depmax', np.max(y)),
              ('depmen', np.mean(y)),
              ('iftype', BUILD_IFTYPE),
              ('leven', True),
              ('lcalda', True),
              ('lovrok', True),
              ('lpspol', False),
              ('nvhdr', layout.version),
              ('knetwk', BUILD_NETWORK))
    for name, value in fields:
        layout.set_value(head, name, value)

    ind = None
    step = x[min(1, npts - 1)] - x[0]
    if abs(delta - step) > EVEN_SAMPLING_TOLERANCE:
        ind = x.copy()
        layout.set_value(head, 'leven', False)
        layout.set_value(head, 'odelta', step)

    return Record(path=BUILD_PATH, name='', filetype=BUILD_FILETYPE,
                  version=layout.version, byteorder=NATIVE_BYTEORDER,
                  hasdata=True, head=head, dep=y.reshape(-1, 1).copy(),
                  ind=ind, misc={})


def build(*xy):
    """
    Arrange x/y data into SEIZMO records, one record per x/y pair.

    :type xy: array_like
    :param xy: ``x1, y1, x2, y2, ...``: vectors of independent and
        dependent values of equal length.
    :rtype: list of :class:`~seizmo.core.record.Record`
    :raises: :class:`~seizmo.core.util.seizmo_types.MismatchedInputError`
        for an odd number of arguments,
        :class:`~seizmo.core.util.seizmo_types.InvalidSeriesError` if a
        pair is not made of numeric vectors of the same length.

    Records are equivalent to SAC version 6 'General X vs Y' files in the
    native byte order with ``path='.'``.  The name is left blank, so set it
    before writing the records anywhere.

    Sampling is checked automatically: if the first sample interval differs
    from the nominal one, ``(x[-1] - x[0]) / (npts - 1)``, the record keeps
    ``x`` as its independent data, ``leven`` is set False and ``odelta``
    holds the first interval.  A single point has a nominal interval of 0.
    Multiple components (x vs [y1 y2 ...]) are not supported.
    """
    if len(xy) % 2:
        raise MismatchedInputError("Unpaired x/y vectors!")

    layout = get_layout(PREFERRED_VERSION)
    records = []
    for i in range(0, len(xy), 2):
        pair = i // 2 + 1
        # x differences must not wrap around for unsigned input
        x = _as_series(xy[i], 'xarray', pair).astype(np.float64)
        y = _as_series(xy[i + 1], 'yarray', pair)
        if len(x) != len(y):
            msg = "x and y series are not the same length: pair {}".format(
                pair)
            raise InvalidSeriesError(msg, pair=pair)
        records.append(_build_one(x, y, layout))
    logger.debug("Built %d record(s) from x/y pairs", len(records))
    return records


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
