# -*- coding: utf-8 -*-
"""
Dataset level helpers for SEIZMO records.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from seizmo.core.checking import as_record_list
from seizmo.core.header import SPECTRAL_IFTYPES
from seizmo.core.layout import get_layout
from seizmo.core.util.base import STORAGE_CLASSES
from seizmo.core.util.decorator import requires_records


@requires_records()
def version_info(records):
    """
    Return the header layout of every record.

    Records of the same version share one
    :class:`~seizmo.core.layout.HeaderLayout` instance.

    >>> from seizmo.core.record import Record
    >>> layouts = version_info([Record(name='a.sac'), Record(name='b.sac')])
    >>> layouts[0] is layouts[1]
    True
    """
    return [get_layout(rec.version) for rec in as_record_list(records)]


def _components(record):
    ncmp = 2 if record.get_header('iftype') in SPECTRAL_IFTYPES else 1
    if record.get_header('leven') is False:
        ncmp += 1
    return ncmp


@requires_records()
def disk_size(records):
    """
    Estimate the on-disk size in bytes of every record from its header.

    The size is the header (numeric slots in the header storage class plus
    one byte per character slot) and ``npts`` samples per component in the
    data storage class.  Spectral files have two components, unevenly
    sampled files carry their independent samples as an additional one.

    >>> import numpy as np
    >>> from seizmo.core.build import build
    >>> rec, = build(np.arange(100.), np.zeros(100))
    >>> rec.name = 'zeros.sac'
    >>> disk_size(rec)
    [1032]
    """
    sizes = []
    for rec in as_record_list(records):
        layout = get_layout(rec.version)
        head_bytes = STORAGE_CLASSES[layout.head_storage].itemsize
        data_bytes = STORAGE_CLASSES[layout.data_storage].itemsize
        npts = rec.get_header('npts') or 0
        size = layout.numeric_slots * head_bytes + layout.string_slots + \
            npts * _components(rec) * data_bytes
        sizes.append(size)
    return sizes


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
