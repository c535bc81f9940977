# -*- coding: utf-8 -*-
"""
Read and change header fields of many records at once.

>>> from seizmo.core.record import Record
>>> recs = [Record(name='a.sac'), Record(name='b.sac')]
>>> recs = change_header(recs, kstnm=['ANMO', 'KONO'], delta=0.025)
>>> get_header(recs, 'kstnm')
['ANMO', 'KONO']
>>> get_header(recs, 'delta', 'kcmpnm')
([0.025, 0.025], [None, None])

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import numpy as np

from .checking import as_record_list
from .util.decorator import requires_records


def _per_record(value, nrecs, name):
    """
    Expand a header value to one value per record.  Strings and bytes are
    always scalars.
    """
    if isinstance(value, (list, tuple, np.ndarray)):
        values = list(np.asarray(value, dtype=object).reshape(-1)) \
            if isinstance(value, np.ndarray) else list(value)
        if len(values) != nrecs:
            msg = "Header '{}' got {} values for {} records".format(
                name, len(values), nrecs)
            raise ValueError(msg)
        return values
    return [value] * nrecs


@requires_records()
def change_header(records, **fields):
    """
    Change header fields of records in place.

    :type fields: scalar or sequence
    :param fields: ``name=value`` pairs.  A scalar value is written to every
        record, a list/tuple/array must hold one value per record.  ``None``
        undefines a field.
    :returns: The records.
    :raises: :class:`~seizmo.core.util.seizmo_types.SeizmoHeaderError` for
        unknown fields, :class:`ValueError` for values that do not fit.

    All values are checked before any record is changed.
    """
    recs = as_record_list(records)
    expanded = [(name, _per_record(value, len(recs), name))
                for name, value in fields.items()]
    # trial run on copies, so a bad value leaves all records untouched
    heads = [rec.head.copy() for rec in recs]
    for name, values in expanded:
        for rec, head, value in zip(recs, heads, values):
            rec.layout.set_value(head, name, value)
    for rec, head in zip(recs, heads):
        rec.head[...] = head
    return records


@requires_records()
def get_header(records, *names):
    """
    Return header values of records.

    :type names: str
    :param names: Header field names.
    :returns: For a single name a list with one value per record, otherwise
        a tuple of such lists, in the order of ``names``.
    """
    recs = as_record_list(records)
    out = tuple([rec.get_header(name) for rec in recs] for name in names)
    if len(out) == 1:
        return out[0]
    return out


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
