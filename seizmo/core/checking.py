# -*- coding: utf-8 -*-
"""
Structural validation of SEIZMO record collections.

:func:`validate` never raises on a malformed collection.  It returns a
:class:`Diagnostic` describing the first problem found (or ``None`` if the
collection is fine) and leaves the disposition to the caller:

>>> from seizmo.core.record import Record
>>> print(validate([]))
Empty: SEIZMO record collection must not be empty
>>> validate([Record(name='a.sac')]) is None
True

Use :meth:`Diagnostic.raise_` or :func:`assert_seizmo` to treat problems as
fatal, or ``warnings.warn(str(diagnostic))`` to treat them as advisory.

Two process-wide switches live here as well: one disabling
:func:`validate` entirely and one disabling
:func:`~seizmo.core.checkheader.check_header`.  Compound operations turn
them off to avoid repeated checks; always use the context managers
:func:`seizmocheck_state` and :func:`checkheader_state` for that, they
restore the previous value on every exit path.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import contextlib
import logging
import warnings
from collections import namedtuple
from collections.abc import Mapping

import numpy as np

from .layout import get_layout, is_valid_pair
from .util.base import (BYTEORDERS, DEFAULT_CHECKHEADER_STATE,
                        DEFAULT_REQUIRED_FIELDS, DEFAULT_SEIZMOCHECK_STATE)
from .util.seizmo_types import (BadFieldError, EmptyError,
                                MixedDatasetWarning, NeedDataError,
                                NotAStructureError, NotAVectorError,
                                OwnershipMismatchError,
                                ReqFieldNotFoundError)


logger = logging.getLogger('seizmo.core.checking')

# ------------ DIAGNOSTIC KINDS -----------------------------------------------
NOT_A_STRUCTURE = 'NotAStructure'
EMPTY = 'Empty'
NOT_A_VECTOR = 'NotAVector'
REQ_FIELD_NOT_FOUND = 'ReqFieldNotFound'
PATH_BAD = 'PathBad'
NAME_BAD = 'NameBad'
BYTEORDER_BAD = 'ByteorderBad'
HASDATA_BAD = 'HasdataBad'
VERSION_BAD = 'VersionBad'
HEADER_BAD = 'HeaderBad'
NEED_DATA = 'NeedData'
OWNERSHIP_MISMATCH = 'OwnershipMismatch'

_EXCEPTIONS = {
    NOT_A_STRUCTURE: NotAStructureError,
    EMPTY: EmptyError,
    NOT_A_VECTOR: NotAVectorError,
    REQ_FIELD_NOT_FOUND: ReqFieldNotFoundError,
    PATH_BAD: BadFieldError,
    NAME_BAD: BadFieldError,
    BYTEORDER_BAD: BadFieldError,
    HASDATA_BAD: BadFieldError,
    VERSION_BAD: BadFieldError,
    HEADER_BAD: BadFieldError,
    NEED_DATA: NeedDataError,
    OWNERSHIP_MISMATCH: OwnershipMismatchError,
}


class Diagnostic(namedtuple('Diagnostic', ['kind', 'message', 'field'])):
    """
    Result of a failed structural check.

    :var kind: One of the diagnostic kinds, e.g. ``'ReqFieldNotFound'``.
    :var message: Human readable description.
    :var field: Name of the offending field, if any.
    """
    __slots__ = ()

    def __new__(cls, kind, message, field=None):
        return super(Diagnostic, cls).__new__(cls, kind, message, field)

    def __str__(self):
        return "{}: {}".format(self.kind, self.message)

    def exception(self):
        """
        Return (not raise) the exception matching this diagnostic.
        """
        cls = _EXCEPTIONS[self.kind]
        return cls(str(self), diagnostic=self)

    def raise_(self):
        raise self.exception()


# ------------ PROCESS-WIDE SWITCHES ------------------------------------------
_STATE = {'seizmocheck': DEFAULT_SEIZMOCHECK_STATE,
          'checkheader': DEFAULT_CHECKHEADER_STATE}


def _set_state(key, state):
    if not isinstance(state, (bool, np.bool_)):
        msg = "{} state must be True or False (got {!r})".format(key, state)
        raise TypeError(msg)
    logger.debug("Setting %s state to %s", key, bool(state))
    _STATE[key] = bool(state)


def get_seizmocheck_state():
    """
    True if :func:`validate` is enabled.
    """
    return _STATE['seizmocheck']


def set_seizmocheck_state(state):
    """
    Turn :func:`validate` on (True) or off (False).

    Prefer the :func:`seizmocheck_state` context manager, which restores the
    previous state.
    """
    _set_state('seizmocheck', state)


def get_checkheader_state():
    """
    True if :func:`~seizmo.core.checkheader.check_header` is enabled.
    """
    return _STATE['checkheader']


def set_checkheader_state(state):
    """
    Turn :func:`~seizmo.core.checkheader.check_header` on (True) or off
    (False).
    """
    _set_state('checkheader', state)


@contextlib.contextmanager
def seizmocheck_state(enabled):
    """
    Context manager setting the :func:`validate` switch and restoring the
    previous value on exit, also if an exception was raised.

    >>> with seizmocheck_state(False):
    ...     print(validate('not records'))
    None
    >>> get_seizmocheck_state()
    True

    :returns: The previous state.
    """
    old = get_seizmocheck_state()
    set_seizmocheck_state(enabled)
    try:
        yield old
    finally:
        _STATE['seizmocheck'] = old


@contextlib.contextmanager
def checkheader_state(enabled):
    """
    Context manager setting the
    :func:`~seizmo.core.checkheader.check_header` switch and restoring the
    previous value on exit.
    """
    old = get_checkheader_state()
    set_checkheader_state(enabled)
    try:
        yield old
    finally:
        _STATE['checkheader'] = old


# ------------ HELPERS --------------------------------------------------------
def _is_record_like(obj):
    if isinstance(obj, Mapping):
        return True
    # anything carrying its fields as attributes, e.g. Record
    return hasattr(obj, '__dict__') and not isinstance(obj, type) and \
        not isinstance(obj, (list, tuple, np.ndarray, str, bytes))


def _fields_of(rec):
    if isinstance(rec, Mapping):
        return set(rec.keys())
    return set(vars(rec))


def _values(records, field):
    return [rec[field] if isinstance(rec, Mapping) else getattr(rec, field)
            for rec in records]


def _nested(obj):
    """
    Return ``(shape, leaves)`` of nested lists/tuples/arrays.  ``shape`` is
    None for ragged nesting.
    """
    if isinstance(obj, np.ndarray):
        obj = obj.tolist()
    if not isinstance(obj, (list, tuple)):
        return (), [obj]
    if not obj:
        return (0,), []
    shapes = []
    leaves = []
    for item in obj:
        shape, items = _nested(item)
        shapes.append(shape)
        leaves.extend(items)
    first = shapes[0]
    if first is None or any(shape != first for shape in shapes):
        return None, leaves
    return (len(obj),) + first, leaves


def _as_records(records):
    """
    Return ``(diagnostic, list of records)``, checking structure, emptiness
    and vector shape in that order.
    """
    if _is_record_like(records):
        return None, [records]
    if not isinstance(records, (list, tuple, np.ndarray)):
        msg = "SEIZMO records must be a record or a sequence of records " \
              "(got {})".format(type(records).__name__)
        return Diagnostic(NOT_A_STRUCTURE, msg), None
    shape, leaves = _nested(records)
    if not all(_is_record_like(leaf) for leaf in leaves):
        msg = "SEIZMO record collection holds non-record elements"
        return Diagnostic(NOT_A_STRUCTURE, msg), None
    if not leaves:
        msg = "SEIZMO record collection must not be empty"
        return Diagnostic(EMPTY, msg), None
    if shape is None or sum(dim != 1 for dim in shape) > 1:
        msg = "SEIZMO record collection must be a vector"
        return Diagnostic(NOT_A_VECTOR, msg), None
    return None, leaves


def _is_version_number(value):
    return isinstance(value, (int, np.integer)) and \
        not isinstance(value, (bool, np.bool_))


def _check_consistency(records):
    """
    Per-record checks of the default fields, first failure wins.
    """
    paths = _values(records, 'path')
    if not all(isinstance(p, str) and p for p in paths):
        return Diagnostic(PATH_BAD, "PATH field must be a nonempty string",
                          'path')
    names = _values(records, 'name')
    if not all(isinstance(n, str) and n for n in names):
        return Diagnostic(NAME_BAD, "NAME field must be a nonempty string",
                          'name')
    byteorders = _values(records, 'byteorder')
    if not all(isinstance(b, str) and b in BYTEORDERS for b in byteorders):
        msg = "BYTEORDER field must be one of {}".format(
            ', '.join(repr(b) for b in BYTEORDERS))
        return Diagnostic(BYTEORDER_BAD, msg, 'byteorder')
    hasdatas = _values(records, 'hasdata')
    if not all(isinstance(h, (bool, np.bool_)) for h in hasdatas):
        return Diagnostic(HASDATA_BAD, "HASDATA field must be a logical",
                          'hasdata')
    filetypes = _values(records, 'filetype')
    versions = _values(records, 'version')
    for filetype, version in zip(filetypes, versions):
        if not (isinstance(filetype, str) and _is_version_number(version)
                and is_valid_pair(filetype, version)):
            msg = "FILETYPE and VERSION fields must be valid " \
                  "(got {!r}, {!r})".format(filetype, version)
            return Diagnostic(VERSION_BAD, msg, 'version')
    for head, version in zip(_values(records, 'head'), versions):
        size = get_layout(version).size
        if not isinstance(head, np.ndarray) or head.shape != (size, 1):
            msg = "HEAD field must be a {}x1 array".format(size)
            return Diagnostic(HEADER_BAD, msg, 'head')
    return None


def _warn_mixed(records):
    for field, label in (('filetype', 'file types'),
                         ('version', 'file type versions'),
                         ('byteorder', 'byteorders')):
        unique = sorted(set(_values(records, field)), key=str)
        if len(unique) > 1:
            msg = "Dataset has multiple {}: {}".format(
                label, ' '.join(repr(u) for u in unique))
            warnings.warn(msg, MixedDatasetWarning)


# ------------ VALIDATION -----------------------------------------------------
def validate(records, *fields):
    """
    Check a record collection against the SEIZMO structural requirements.

    :type records: :class:`~seizmo.core.record.Record`, mapping or a
        sequence of those
    :param records: Records to check.  A single record is a one-element
        collection.
    :type fields: str
    :param fields: Additional required fields.  ``'dep'`` additionally
        requires every record to have its data read in (``hasdata``).
    :rtype: :class:`Diagnostic` or None
    :returns: None if the collection is valid or checking is turned off,
        otherwise a diagnostic describing the first problem found.

    Checks, first failure wins:

    1. a (non-empty, one-dimensional) collection of records
    2. all required fields present (``path``, ``name``, ``filetype``,
       ``version``, ``byteorder``, ``hasdata``, ``misc``, ``head``
       and the extra ``fields``)
    3. nonempty ``path`` and ``name``, legal ``byteorder``, logical
       ``hasdata``, registered ``filetype``/``version``, ``head`` of the
       layout's size
    4. ``hasdata`` is True for every record if ``'dep'`` is required

    Multiple filetypes, versions or byteorders in one collection only emit
    a :class:`~seizmo.core.util.seizmo_types.MixedDatasetWarning`.
    """
    if not get_seizmocheck_state():
        return None
    for field in fields:
        if not isinstance(field, str):
            msg = "Additional required fields must be strings (got {!r})"
            raise TypeError(msg.format(field))

    diagnostic, records = _as_records(records)
    if diagnostic is not None:
        return diagnostic

    required = sorted(set(DEFAULT_REQUIRED_FIELDS) | set(fields))
    for rec in records:
        missing = [f for f in required if f not in _fields_of(rec)]
        if missing:
            msg = "SEIZMO records must have field '{}'".format(missing[0])
            return Diagnostic(REQ_FIELD_NOT_FOUND, msg, missing[0])

    diagnostic = _check_consistency(records)
    if diagnostic is not None:
        return diagnostic

    _warn_mixed(records)

    if 'dep' in required and not all(_values(records, 'hasdata')):
        return Diagnostic(NEED_DATA, "All records must have data read in",
                          'hasdata')

    logger.debug("Validated %d record(s)", len(records))
    return None


def assert_seizmo(records, *fields):
    """
    Like :func:`validate`, but raise the exception matching the diagnostic.

    :raises: :class:`~seizmo.core.util.seizmo_types.SeizmoStructureError`
    """
    diagnostic = validate(records, *fields)
    if diagnostic is not None:
        diagnostic.raise_()


def is_seizmo(records, *fields):
    """
    True if ``records`` is a valid SEIZMO record collection, regardless of
    the :func:`validate` switch.
    """
    with seizmocheck_state(True):
        return validate(records, *fields) is None


def as_record_list(records):
    """
    Return a validated collection as a flat list of records.

    :raises: :class:`~seizmo.core.util.seizmo_types.SeizmoStructureError`
        if ``records`` is not a record collection at all.
    """
    diagnostic, out = _as_records(records)
    if diagnostic is not None:
        diagnostic.raise_()
    return out


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
