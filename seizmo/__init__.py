# -*- coding: utf-8 -*-
"""
SEIZMO: Seismic records in Python
=================================

SEIZMO handles collections of seismic records in memory: SAC version 6 and
SEIZMO binary headers, records built from plain x/y arrays, structural
validation of record collections and redistribution of record data to and
from matrices.

>>> import numpy as np
>>> import seizmo
>>> recs = seizmo.build(np.arange(10.), np.ones(10))
>>> recs[0].name = 'ones.sac'
>>> seizmo.validate(recs) is None
True

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
__version__ = '0.1.0'

# don't change order
from seizmo.core.layout import blank, get_layout  # NOQA
from seizmo.core.record import Record  # NOQA
from seizmo.core.checking import validate  # NOQA
from seizmo.core.build import build  # NOQA
from seizmo.core.matrix import gather, scatter  # NOQA
from seizmo.core.util.seizmo_types import (  # NOQA
    SeizmoError, SeizmoException)


__all__ = ["__version__", "Record", "blank", "build", "gather",
           "get_layout", "scatter", "validate", "SeizmoException",
           "SeizmoError"]
