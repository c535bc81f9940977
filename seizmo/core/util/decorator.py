# -*- coding: utf-8 -*-
"""
Decorator used in SEIZMO.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import decorator

from seizmo.core.checking import assert_seizmo


def requires_records(*fields):
    """
    Validate the ``records`` argument of the decorated function before
    calling it.

    :type fields: str
    :param fields: Additional required fields, see
        :func:`~seizmo.core.checking.validate`.
    :raises: :class:`~seizmo.core.util.seizmo_types.SeizmoStructureError`
        from the decorated function if the records are not valid.
    """
    @decorator.decorator
    def _requires_records(func, *args, **kwargs):
        records = args[0] if args else kwargs['records']
        assert_seizmo(records, *fields)
        return func(*args, **kwargs)
    return _requires_records
