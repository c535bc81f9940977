# -*- coding: utf-8 -*-
"""
Keep header fields derived from the data consistent with the data.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging

import numpy as np

from .checking import as_record_list, assert_seizmo, get_checkheader_state


logger = logging.getLogger('seizmo.core.checkheader')


def nominal_delta(first, last, npts):
    """
    Nominal sample interval of ``npts`` samples spanning ``first`` to
    ``last``.  A single sample has an interval of 0.

    >>> nominal_delta(0.0, 10.0, 5)
    2.5
    >>> nominal_delta(3.0, 3.0, 1)
    0.0
    """
    if npts < 2:
        return 0.0
    return float(last - first) / (npts - 1)


def update_data_fields(record):
    """
    Rewrite the header fields that are functions of the record's data:
    ``npts``, ``depmin``, ``depmax``, ``depmen`` and ``b``, ``e``,
    ``delta``, ``odelta``, ``leven`` as far as they follow from the
    independent samples.
    """
    dep = np.asarray(record.dep)
    if dep.ndim == 1:
        dep = dep[:, np.newaxis]
    npts = dep.shape[0]
    record.set_header('npts', npts)
    if dep.size:
        record.set_header('depmin', np.min(dep))
        record.set_header('depmax', np.max(dep))
        record.set_header('depmen', np.mean(dep))
    else:
        for name in ('depmin', 'depmax', 'depmen'):
            record.set_header(name, None)

    ind = getattr(record, 'ind', None)
    if ind is not None and len(ind):
        ind = np.asarray(ind).reshape(-1)
        record.set_header('b', ind[0])
        record.set_header('e', ind[-1])
        record.set_header('delta', nominal_delta(ind[0], ind[-1], npts))
        step = ind[min(1, len(ind) - 1)] - ind[0]
        record.set_header('odelta', step)
        record.set_header('leven', False)
    elif record.get_header('leven') is not False:
        b = record.get_header('b')
        delta = record.get_header('delta')
        if b is not None and delta is not None and npts:
            record.set_header('e', b + (npts - 1) * delta)


def check_header(records):
    """
    Validate records and update their data-derived header fields in place.

    Does nothing if the checkheader switch is turned off (see
    :func:`~seizmo.core.checking.checkheader_state`).

    :raises: :class:`~seizmo.core.util.seizmo_types.SeizmoStructureError`
        if the records are not valid.
    :returns: The records.
    """
    if not get_checkheader_state():
        return records
    assert_seizmo(records)
    count = 0
    for record in as_record_list(records):
        if record.hasdata and getattr(record, 'dep', None) is not None:
            update_data_fields(record)
            count += 1
    logger.debug("Updated data headers of %d record(s)", count)
    return records


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
