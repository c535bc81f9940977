# -*- coding: utf-8 -*-
"""
Move record data into a matrix and back.

:func:`gather` collects the data of many records into one matrix (one column
per component), so they can be processed by code that knows nothing about
records.  :func:`scatter` distributes such a matrix back into the records:

>>> import numpy as np
>>> from seizmo.core.build import build
>>> recs = build(np.arange(5.), np.zeros(5), np.arange(3.), np.ones(3))
>>> for i, rec in enumerate(recs):
...     rec.name = 'rec%d.sac' % i
>>> dep, idx1, ind, idx2, store, npts = gather(recs)
>>> dep.shape
(5, 2)
>>> recs = scatter(recs, dep * 2, idx1, ind, idx2, store, npts)
>>> recs[1].dep.ravel().tolist()
[2.0, 2.0, 2.0]

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging

import numpy as np

from .checkheader import check_header
from .checking import (OWNERSHIP_MISMATCH, Diagnostic, as_record_list,
                       checkheader_state, seizmocheck_state)
from .util.base import cast_to_storage, storage_of
from .util.decorator import requires_records


logger = logging.getLogger('seizmo.core.matrix')


def _mismatch(msg):
    Diagnostic(OWNERSHIP_MISMATCH, msg).raise_()


def _owners(owner, matrix, label):
    owner = np.asarray(owner).reshape(-1)
    if matrix.ndim != 2:
        _mismatch("{} must be a 2-D matrix".format(label))
    if len(owner) != matrix.shape[1]:
        msg = "{} has {} columns but {} owner indices".format(
            label, matrix.shape[1], len(owner))
        _mismatch(msg)
    return owner


def _is_uneven(record):
    return record.get_header('leven') is False


def _count(value, i):
    """
    Return ``value`` as a non-negative number of points.
    """
    if isinstance(value, (bool, np.bool_)) or \
            not isinstance(value, (int, np.integer, float, np.floating)) or \
            not np.isfinite(value) or value != int(value):
        _mismatch("Record {} needs an integer npts (got {!r})".format(
            i, value))
    if value < 0:
        _mismatch("Record {} has a negative npts ({})".format(i, value))
    return int(value)


@requires_records()
def scatter(records, dep, dep_owner, ind, ind_owner, storage, npts):
    """
    Distribute a record matrix back into records.

    :type records: list of :class:`~seizmo.core.record.Record`
    :param records: Records to fill, updated in place.
    :type dep: :class:`numpy.ndarray`
    :param dep: Dependent components, one column each.
    :type dep_owner: array_like of int
    :param dep_owner: Record index (0-based) owning each column of ``dep``.
        Multiple columns of one record become its components, in matrix
        order.
    :type ind: :class:`numpy.ndarray` or None
    :param ind: Independent components, one column each, or None.
    :type ind_owner: array_like of int or None
    :param ind_owner: Record index owning each column of ``ind``.  A record
        may own at most one independent column.
    :type storage: list of str
    :param storage: Storage class per record, e.g. ``'double'``.
    :type npts: array_like of int
    :param npts: Number of points per record, a non-negative integer;
        longer columns are truncated.  Without ``ind`` a record keeps its
        own independent samples, truncated the same way.
    :rtype: list of :class:`~seizmo.core.record.Record`
    :raises: :class:`~seizmo.core.util.seizmo_types.OwnershipMismatchError`
        if the ownership inputs do not match the records or matrices.

    No record is modified unless all inputs are consistent.  Afterwards the
    data-derived header fields are updated by
    :func:`~seizmo.core.checkheader.check_header`, which runs regardless of
    the current switch states.
    """
    recs = as_record_list(records)
    nrecs = len(recs)
    if len(storage) != nrecs or len(npts) != nrecs:
        msg = "storage ({}) and npts ({}) need one entry per record " \
              "({})".format(len(storage), len(npts), nrecs)
        _mismatch(msg)

    dep = np.asarray(dep)
    dep_owner = _owners(dep_owner, dep, 'dep')
    has_ind = ind is not None and np.size(ind) > 0
    if has_ind:
        ind = np.asarray(ind)
        ind_owner = _owners(ind_owner, ind, 'ind')

    # build everything first, install afterwards
    new_data = []
    for i, rec in enumerate(recs):
        n = _count(npts[i], i)
        cols = np.flatnonzero(dep_owner == i)
        if not len(cols):
            _mismatch("Record {} owns no dependent column".format(i))
        if n > dep.shape[0]:
            msg = "Record {} needs {} points, dep has {} rows".format(
                i, n, dep.shape[0])
            _mismatch(msg)
        new_dep = cast_to_storage(dep[:n, cols], storage[i])
        new_ind = None
        old_ind = getattr(rec, 'ind', None)
        if not has_ind and old_ind is not None:
            # the kept independent samples follow the truncated data
            old_ind = np.asarray(old_ind).reshape(-1)
            if n > len(old_ind):
                msg = "Record {} needs {} points, its ind has {}".format(
                    i, n, len(old_ind))
                _mismatch(msg)
            new_ind = old_ind[:n].copy()
        elif has_ind:
            icols = np.flatnonzero(ind_owner == i)
            if len(icols) > 1:
                msg = "Record {} owns {} independent columns".format(
                    i, len(icols))
                _mismatch(msg)
            elif len(icols) == 1:
                if n > ind.shape[0]:
                    msg = "Record {} needs {} points, ind has {} rows".format(
                        i, n, ind.shape[0])
                    _mismatch(msg)
                new_ind = cast_to_storage(ind[:n, icols[0]], storage[i])
            elif _is_uneven(rec):
                msg = "Unevenly sampled record {} owns no independent " \
                      "column".format(i)
                _mismatch(msg)
        new_data.append((new_dep, new_ind))

    for rec, (new_dep, new_ind) in zip(recs, new_data):
        rec.dep = new_dep
        rec.ind = new_ind
        rec.hasdata = True
    logger.debug("Scattered %d column(s) into %d record(s)", dep.shape[1],
                 nrecs)

    with seizmocheck_state(True), checkheader_state(True):
        check_header(recs)
    return recs


@requires_records('dep')
def gather(records):
    """
    Collect the data of records into matrices, the inverse of
    :func:`scatter`.

    :rtype: tuple
    :returns: ``(dep, dep_owner, ind, ind_owner, storage, npts)``.  ``dep``
        is a float64 matrix padded with NaN, one column per component;
        ``ind`` holds one column per record with independent data, or is
        None if no record has any.
    """
    recs = as_record_list(records)
    deps = []
    for rec in recs:
        d = np.asarray(rec.dep)
        deps.append(d[:, np.newaxis] if d.ndim == 1 else d)
    npts = np.array([d.shape[0] for d in deps], dtype=np.int64)
    storage = [storage_of(d) for d in deps]
    rows = int(npts.max()) if len(npts) else 0

    ncols = sum(d.shape[1] for d in deps)
    dep = np.full((rows, ncols), np.nan, dtype=np.float64)
    dep_owner = np.empty(ncols, dtype=np.int64)
    col = 0
    for i, d in enumerate(deps):
        dep[:d.shape[0], col:col + d.shape[1]] = d
        dep_owner[col:col + d.shape[1]] = i
        col += d.shape[1]

    owners = [i for i, rec in enumerate(recs)
              if getattr(rec, 'ind', None) is not None]
    if owners:
        ind = np.full((rows, len(owners)), np.nan, dtype=np.float64)
        for col, i in enumerate(owners):
            values = np.asarray(recs[i].ind).reshape(-1)
            ind[:len(values), col] = values
        ind_owner = np.array(owners, dtype=np.int64)
    else:
        ind = ind_owner = None
    return dep, dep_owner, ind, ind_owner, storage, npts


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
