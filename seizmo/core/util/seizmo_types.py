# -*- coding: utf-8 -*-
"""
Exception and warning types used in SEIZMO.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""


class SeizmoException(Exception):
    pass


class SeizmoError(SeizmoException):
    """
    Raised if records or their inputs are corrupt or if necessary
    information is missing.
    """
    pass


class MismatchedInputError(SeizmoError, ValueError):
    """
    Raised if x/y inputs are not given as matched pairs.
    """
    pass


class InvalidSeriesError(SeizmoError, ValueError):
    """
    Raised if an x/y pair is not made of equal length numeric vectors.
    """
    def __init__(self, msg, pair=None):
        super(InvalidSeriesError, self).__init__(msg)
        self.pair = pair


class UnknownVersionError(SeizmoError, ValueError):
    """
    Raised if no header layout is known for a version.
    """
    def __init__(self, msg, version=None):
        super(UnknownVersionError, self).__init__(msg)
        self.version = version


class SeizmoHeaderError(SeizmoError, KeyError):
    """
    Raised if a header field is unknown or cannot hold the given value.
    """
    def __str__(self):
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ''


class SeizmoStructureError(SeizmoError):
    """
    Raised if a record collection fails structural validation.

    The :class:`~seizmo.core.checking.Diagnostic` that triggered it is
    available as ``.diagnostic``.
    """
    def __init__(self, msg, diagnostic=None):
        super(SeizmoStructureError, self).__init__(msg)
        self.diagnostic = diagnostic


class NotAStructureError(SeizmoStructureError, TypeError):
    pass


class EmptyError(SeizmoStructureError, ValueError):
    pass


class NotAVectorError(SeizmoStructureError, ValueError):
    pass


class ReqFieldNotFoundError(SeizmoStructureError, AttributeError):
    pass


class BadFieldError(SeizmoStructureError, ValueError):
    pass


class NeedDataError(SeizmoStructureError, ValueError):
    pass


class OwnershipMismatchError(SeizmoStructureError, ValueError):
    pass


class SeizmoWarning(UserWarning):
    pass


class MixedDatasetWarning(SeizmoWarning):
    """
    Emitted if a record collection mixes filetypes, versions or byteorders.
    """
    pass


class SeizmoHeaderWarning(SeizmoWarning):
    """
    Emitted if a header value had to be truncated.
    """
    pass
