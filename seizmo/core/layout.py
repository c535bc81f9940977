# -*- coding: utf-8 -*-
"""
Per-version header layout table and the undefined-value initializer.

A :class:`HeaderLayout` maps every header field to an inclusive, 1-based
position range inside the flat header buffer of a record and knows how to
encode and decode the values of each field type:

============ ======================================================
Group        Encoding
============ ======================================================
``real``     floating point value
``int``      integer value
``enum``     integer id of an enumerated value, see ``ENUM_VALS``
``lgc``      logical, 1 (true) or 0 (false)
``char``     one character code per slot, padded with spaces
============ ======================================================

Undefined fields hold ``-12345`` (numeric) or ``'-12345'`` padded with
spaces (strings).  Layouts are built once at import and never modified.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import warnings
from collections import namedtuple

import numpy as np

from . import header as HD  # noqa
from .util.seizmo_types import (SeizmoHeaderError, SeizmoHeaderWarning,
                                UnknownVersionError)


class Field(namedtuple('Field', ['name', 'minpos', 'maxpos'])):
    """
    Inclusive, 1-based position range of a header field.
    """
    __slots__ = ()

    @property
    def width(self):
        return self.maxpos - self.minpos + 1

    @property
    def slice(self):
        # 0-based slice into the buffer
        return slice(self.minpos - 1, self.maxpos)


def _make_groups(groups, start):
    """
    Lay out named groups of fields one after another, starting at the
    1-based position ``start``.  Fields given as plain names take one slot.
    """
    out = []
    pos = start
    for group, fields in groups:
        group_fields = []
        for field in fields:
            if isinstance(field, tuple):
                name, width = field
            else:
                name, width = field, 1
            group_fields.append(Field(name, pos, pos + width - 1))
            pos += width
        out.append((group, tuple(group_fields)))
    return tuple(out), pos - 1


class HeaderLayout(object):
    """
    Immutable description of where every header field lives for one
    filetype/version.

    :type filetype: str
    :param filetype: Filetype the version belongs to.
    :type version: int
    :param version: Header version number.
    :type head_storage: str
    :param head_storage: On-disk storage class of the numeric header slots.
    :type data_storage: str
    :param data_storage: On-disk storage class of the data samples.
    """
    def __init__(self, filetype, version, head_storage, data_storage):
        numeric, last = _make_groups(HD.NUMERIC_GROUPS, 1)
        string, last = _make_groups(HD.STRING_GROUPS, last + 1)
        object.__setattr__(self, '_numeric', numeric)
        object.__setattr__(self, '_string', string)
        object.__setattr__(self, '_size', last)
        object.__setattr__(self, '_filetype', filetype)
        object.__setattr__(self, '_version', version)
        object.__setattr__(self, '_head_storage', head_storage)
        object.__setattr__(self, '_data_storage', data_storage)
        lookup = {}
        for group, fields in numeric + string:
            for field in fields:
                lookup[field.name] = (group, field)
        object.__setattr__(self, '_lookup', lookup)

    def __setattr__(self, name, value):
        raise AttributeError("HeaderLayout is read-only")

    def __repr__(self):
        return "HeaderLayout(filetype={!r}, version={!r}, size={!r})".format(
            self._filetype, self._version, self._size)

    @property
    def filetype(self):
        return self._filetype

    @property
    def version(self):
        return self._version

    @property
    def size(self):
        """Number of slots of the flat header buffer."""
        return self._size

    @property
    def head_storage(self):
        return self._head_storage

    @property
    def data_storage(self):
        return self._data_storage

    @property
    def numeric_groups(self):
        """Tuple of ``(group name, tuple of Field)`` for numeric fields."""
        return self._numeric

    @property
    def string_groups(self):
        """Tuple of ``(group name, tuple of Field)`` for string fields."""
        return self._string

    @property
    def undef_numeric(self):
        return HD.UNDEF_NUMERIC

    @property
    def undef_string(self):
        return HD.UNDEF_STRING

    @property
    def numeric_slots(self):
        return sum(f.width for _, fields in self._numeric for f in fields)

    @property
    def string_slots(self):
        return sum(f.width for _, fields in self._string for f in fields)

    def fields(self):
        """
        Return all field names in buffer order.
        """
        return [f.name for _, fields in self._numeric + self._string
                for f in fields]

    def __contains__(self, name):
        return isinstance(name, str) and name.lower() in self._lookup

    def field(self, name):
        """
        Return ``(group, Field)`` for a header field name.

        :raises: :class:`~seizmo.core.util.seizmo_types.SeizmoHeaderError`
            if the name is not a field of this layout.
        """
        try:
            return self._lookup[name.lower()]
        except (KeyError, AttributeError):
            msg = "Unknown header field '{}' for {} version {}".format(
                name, self._filetype, self._version)
            raise SeizmoHeaderError(msg)

    def describe(self, name):
        group, field = self.field(name)
        doc = HD.DOC.get(field.name, '')
        return "{:10s} {:5s} [{}-{}] {}".format(
            field.name, group, field.minpos, field.maxpos, doc).rstrip()

    # ------------ value access -----------------------------------------------
    def get_value(self, head, name):
        """
        Decode the value of a header field from a header buffer.

        Undefined fields are returned as ``None``.
        """
        group, field = self.field(name)
        slots = _column(np.asarray(head))[field.slice]
        if group == 'char':
            return _decode_string(field, slots)
        value = slots[0]
        if value == HD.UNDEF_NUMERIC:
            return None
        if group == 'real':
            return float(value)
        elif group == 'int':
            return int(value)
        elif group == 'lgc':
            if value in (0, 1):
                return bool(value)
            msg = "Unrecognized logical value {} for header '{}'"
            warnings.warn(msg.format(value, field.name), SeizmoHeaderWarning)
            return None
        # enum
        try:
            return HD.ENUM_NAMES[int(value)]
        except KeyError:
            msg = "Unrecognized enumerated value {} for header '{}'"
            warnings.warn(msg.format(value, field.name), SeizmoHeaderWarning)
            return None

    def set_value(self, head, name, value):
        """
        Encode a value into a header buffer in place.  ``None`` writes the
        undefined value of the field.
        """
        group, field = self.field(name)
        flat = _column(head)
        if group == 'char':
            flat[field.slice] = _encode_string(field, value)
        elif value is None:
            flat[field.slice] = HD.UNDEF_NUMERIC
        elif group == 'real':
            flat[field.slice] = float(value)
        elif group == 'int':
            flat[field.slice] = _encode_int(field, value)
        elif group == 'lgc':
            flat[field.slice] = _encode_logical(field, value)
        else:
            flat[field.slice] = _encode_enum(field, value)


def _column(head):
    # 1-D view on a (size, 1) or (size,) buffer, writes go through
    if head.ndim == 2:
        return head[:, 0]
    return head


def _encode_int(field, value):
    if value % 1:
        warnings.warn("Non-integers may be truncated. ({}: {})".format(
            field.name, value), SeizmoHeaderWarning)
    return int(value)


def _encode_logical(field, value):
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ('true', 'false'):
            return 1 if lowered == 'true' else 0
    elif value in (True, False, 1, 0):
        return 1 if value else 0
    msg = "Logical header '{}' must be one of True, False, 1, 0, " \
          "'true', 'false' (got {!r})".format(field.name, value)
    raise ValueError(msg)


def _encode_enum(field, value):
    if isinstance(value, str):
        key = value.strip().lower()
        if key in HD.ENUM_VALS:
            return HD.ENUM_VALS[key]
        if key in HD.ENUM_BY_DESC:
            return HD.ENUM_VALS[HD.ENUM_BY_DESC[key]]
        msg = 'Unrecognized enumerated value "{}" for header "{}"'
        raise ValueError(msg.format(value, field.name))
    if int(value) != value:
        msg = "Enumerated header '{}' needs an integer id (got {!r})"
        raise ValueError(msg.format(field.name, value))
    return int(value)


def _encode_string(field, value):
    if value is None:
        raw = HD.UNDEF_STRING
    else:
        if isinstance(value, bytes):
            raw = value
        else:
            try:
                raw = str(value).encode('ascii', 'strict')
            except UnicodeEncodeError:
                msg = "Header '{}' only holds ASCII text (got {!r})"
                raise SeizmoHeaderError(msg.format(field.name, value))
        if len(raw) > field.width:
            msg = ("Alphanumeric header '{}' longer than {} characters is "
                   "right-truncated.").format(field.name, field.width)
            warnings.warn(msg, SeizmoHeaderWarning)
            raw = raw[:field.width]
    codes = np.full(field.width, HD.PAD_CHAR, dtype=np.float64)
    codes[:len(raw)] = np.frombuffer(raw, dtype=np.uint8)
    return codes


def _decode_string(field, slots):
    if not (np.isfinite(slots).all() and (slots >= 0).all() and
            (slots <= 255).all()):
        msg = "Unrecognized character codes for header '{}'"
        warnings.warn(msg.format(field.name), SeizmoHeaderWarning)
        return None
    raw = bytes(bytearray(int(c) for c in slots))
    # the undefined value is compared padded, like it is written
    if raw.rstrip(b' ') == HD.UNDEF_STRING:
        return None
    null_term = raw.find(b'\x00')
    if null_term >= 0:
        raw = raw[:null_term]
    return raw.decode('ascii', 'replace').rstrip()


# ------------ LAYOUT TABLE ---------------------------------------------------
LAYOUTS = dict(
    (version, HeaderLayout(filetype, version, head, data))
    for filetype, versions in HD.VERSIONS.items()
    for version, (head, data) in versions.items())


def get_layout(version):
    """
    Return the header layout of a version.

    :type version: int
    :param version: Header version number, e.g. ``6``.
    :rtype: :class:`HeaderLayout`
    :raises: :class:`~seizmo.core.util.seizmo_types.UnknownVersionError`

    >>> get_layout(6).size
    302
    >>> get_layout(6).field('kevnm')
    ('char', Field(name='kevnm', minpos=119, maxpos=134))
    """
    try:
        return LAYOUTS[version]
    except (KeyError, TypeError):
        msg = "No header layout known for version {!r}".format(version)
        raise UnknownVersionError(msg, version=version)


def valid_versions(filetype):
    """
    Return the registered versions of a filetype, an empty tuple for unknown
    filetypes.

    >>> valid_versions('SEIZMO Binary File')
    (101, 200, 201)
    """
    try:
        return tuple(sorted(HD.VERSIONS[filetype]))
    except (KeyError, TypeError):
        return ()


def is_valid_pair(filetype, version):
    """
    True if the filetype/version pair is registered.
    """
    try:
        return version in valid_versions(filetype)
    except TypeError:
        return False


def blank(layout):
    """
    Return a new header buffer with every field set to its undefined value.

    Numeric slots receive ``layout.undef_numeric``.  String fields receive
    ``layout.undef_string`` left aligned, padded with spaces (ASCII 32) to
    the width of the field.

    :type layout: :class:`HeaderLayout`
    :rtype: :class:`numpy.ndarray` of shape ``(layout.size, 1)``
    """
    head = np.empty((layout.size, 1), dtype=np.float64)
    flat = head.reshape(-1)
    for _, fields in layout.numeric_groups:
        for field in fields:
            flat[field.slice] = layout.undef_numeric
    undef = np.frombuffer(layout.undef_string, dtype=np.uint8)
    for _, fields in layout.string_groups:
        for field in fields:
            codes = np.full(field.width, HD.PAD_CHAR, dtype=np.float64)
            codes[:len(undef)] = undef
            flat[field.slice] = codes
    return head


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
