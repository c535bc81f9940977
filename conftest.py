#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Make sure the SEIZMO doctests print arrays the same way across numpy
versions when using pytest.
"""
import numpy as np

np.set_printoptions(legacy='1.13')
