# -*- coding: utf-8 -*-
"""
In-memory SEIZMO record.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import copy

import numpy as np

from .layout import blank, get_layout
from .util.base import (BUILD_FILETYPE, BUILD_PATH, NATIVE_BYTEORDER,
                        PREFERRED_VERSION)


class Record(object):
    """
    A single record: a flat header buffer plus optional data vectors.

    :type path: str
    :param path: Directory the record belongs to.
    :type name: str
    :param name: File name of the record.
    :type filetype: str
    :param filetype: Filetype, e.g. ``'SAC Binary File'``.
    :type version: int
    :param version: Header version, must be valid for ``filetype``.
    :type byteorder: str
    :param byteorder: ``'big'`` or ``'little'``.
    :type hasdata: bool
    :param hasdata: True once samples are held in ``dep``.
    :type head: :class:`numpy.ndarray`
    :param head: Header buffer of shape ``(size, 1)``.  A blank buffer of
        the version's layout is created if omitted.
    :type dep: :class:`numpy.ndarray`, optional
    :param dep: Dependent samples, one column per component.
    :type ind: :class:`numpy.ndarray`, optional
    :param ind: Independent samples of an unevenly sampled record.
    :type misc: dict, optional
    :param misc: Free-form auxiliary data, never validated.

    Structural fields are plain attributes, so a record can be made invalid
    (e.g. ``del record.name``); :func:`~seizmo.core.checking.validate`
    reports such records.

    .. rubric:: Example

    >>> rec = Record(name='test.sac')
    >>> rec.set_header('delta', 0.5)
    >>> rec.get_header('delta')
    0.5
    >>> print(rec.get_header('kstnm'))
    None
    """
    def __init__(self, path=BUILD_PATH, name='', filetype=BUILD_FILETYPE,
                 version=PREFERRED_VERSION, byteorder=NATIVE_BYTEORDER,
                 hasdata=False, head=None, dep=None, ind=None, misc=None):
        self.path = path
        self.name = name
        self.filetype = filetype
        self.version = version
        self.byteorder = byteorder
        self.hasdata = hasdata
        self.misc = {} if misc is None else misc
        if head is None:
            head = blank(get_layout(version))
        self.head = head
        self.dep = dep
        self.ind = ind

    def __repr__(self):
        return "<Record {!r} ({} v{}, {}{})>".format(
            getattr(self, 'name', None), getattr(self, 'filetype', None),
            getattr(self, 'version', None), getattr(self, 'byteorder', None),
            ', with data' if getattr(self, 'hasdata', False) else '')

    def __eq__(self, other):
        if not isinstance(other, Record):
            return False
        if set(vars(self)) != set(vars(other)):
            return False
        for key, value in vars(self).items():
            other_value = vars(other)[key]
            if isinstance(value, np.ndarray) or \
                    isinstance(other_value, np.ndarray):
                if value is None or other_value is None:
                    return False
                if not np.array_equal(value, other_value):
                    return False
            elif value != other_value:
                return False
        return True

    def __ne__(self, other):
        return not self.__eq__(other)

    # records are mutable
    __hash__ = None

    @property
    def layout(self):
        """
        Header layout of this record's version.
        """
        return get_layout(self.version)

    def get_header(self, name):
        """
        Return the value of a header field, ``None`` if undefined.
        """
        return self.layout.get_value(self.head, name)

    def set_header(self, name, value):
        """
        Write a value into a header field, ``None`` undefines it.
        """
        self.layout.set_value(self.head, name, value)

    def copy(self):
        """
        Return a deep copy of the record.
        """
        return copy.deepcopy(self)


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
