# -*- coding: utf-8 -*-
"""
seizmo.core - Core classes and functions of SEIZMO
==================================================

This package holds the in-memory record model of SEIZMO and the functions
working on collections of records:

* header layouts per filetype/version and blank headers
  (:func:`~seizmo.core.layout.get_layout`,
  :func:`~seizmo.core.layout.blank`)
* building records from x/y arrays (:func:`~seizmo.core.build.build`)
* structural validation (:func:`~seizmo.core.checking.validate`)
* moving record data into a matrix and back
  (:func:`~seizmo.core.matrix.gather`, :func:`~seizmo.core.matrix.scatter`)

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from seizmo.core.layout import (HeaderLayout, blank, get_layout,  # NOQA
                                is_valid_pair, valid_versions)
from seizmo.core.record import Record  # NOQA
from seizmo.core.checking import (Diagnostic, assert_seizmo,  # NOQA
                                  checkheader_state, get_checkheader_state,
                                  get_seizmocheck_state, is_seizmo,
                                  seizmocheck_state, set_checkheader_state,
                                  set_seizmocheck_state, validate)
from seizmo.core.checkheader import check_header  # NOQA
from seizmo.core.build import build  # NOQA
from seizmo.core.matrix import gather, scatter  # NOQA
from seizmo.core.headeraccess import change_header, get_header  # NOQA
from seizmo.core.util.misc import disk_size, version_info  # NOQA
