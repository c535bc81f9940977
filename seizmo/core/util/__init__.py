# -*- coding: utf-8 -*-
"""
seizmo.core.util - Various utilities for SEIZMO
===============================================

.. note:: Helpers that depend on :mod:`seizmo.core.checking` (the
    ``requires_records`` decorator and the dataset helpers of
    :mod:`seizmo.core.util.misc`) are not imported here; import them from
    their modules.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
# import order matters - NumPy should be imported first
from seizmo.core.util.base import (BUILD_FILETYPE, BUILD_IFTYPE,  # NOQA
                                   BUILD_NETWORK, BUILD_PATH, BYTEORDERS,
                                   DEFAULT_CHECKHEADER_STATE,
                                   DEFAULT_REQUIRED_FIELDS,
                                   DEFAULT_SEIZMOCHECK_STATE,
                                   EVEN_SAMPLING_TOLERANCE, NATIVE_BYTEORDER,
                                   PREFERRED_VERSION, STORAGE_CLASSES,
                                   cast_to_storage, storage_of)
from seizmo.core.util.seizmo_types import (  # NOQA
    BadFieldError, EmptyError, InvalidSeriesError, MismatchedInputError,
    MixedDatasetWarning, NeedDataError, NotAStructureError, NotAVectorError,
    OwnershipMismatchError, ReqFieldNotFoundError, SeizmoError,
    SeizmoException, SeizmoHeaderError, SeizmoHeaderWarning,
    SeizmoStructureError, SeizmoWarning, UnknownVersionError)
