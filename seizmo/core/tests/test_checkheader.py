# -*- coding: utf-8 -*-
import numpy as np
import pytest

from seizmo.core.build import build
from seizmo.core.checkheader import (check_header, nominal_delta,
                                     update_data_fields)
from seizmo.core.checking import checkheader_state
from seizmo.core.record import Record
from seizmo.core.util.seizmo_types import EmptyError


class TestCheckHeader:
    """
    Test suite for seizmo.core.checkheader
    """
    def test_nominal_delta(self):
        assert nominal_delta(0.0, 10.0, 5) == 2.5
        assert nominal_delta(0, 3, 4) == 1.0
        assert nominal_delta(7.0, 7.0, 1) == 0.0
        assert nominal_delta(7.0, 7.0, 0) == 0.0

    def test_even_record(self):
        rec = Record(name='a.sac', hasdata=True,
                     dep=np.array([[1.], [-2.], [4.]]))
        rec.set_header('b', 10.0)
        rec.set_header('delta', 0.5)
        check_header(rec)
        assert rec.get_header('npts') == 3
        assert rec.get_header('depmin') == -2.0
        assert rec.get_header('depmax') == 4.0
        assert rec.get_header('depmen') == 1.0
        assert rec.get_header('e') == 11.0

    def test_uneven_record(self):
        rec = Record(name='a.sac', hasdata=True, dep=np.zeros((4, 1)),
                     ind=np.array([1., 2., 4., 8.]))
        check_header([rec])
        assert rec.get_header('b') == 1.0
        assert rec.get_header('e') == 8.0
        assert rec.get_header('delta') == pytest.approx(7.0 / 3)
        assert rec.get_header('odelta') == 1.0
        assert rec.get_header('leven') is False

    def test_records_without_data_are_skipped(self):
        rec = Record(name='a.sac')
        check_header(rec)
        assert rec.get_header('npts') is None

    def test_empty_data(self):
        rec = Record(name='a.sac', hasdata=True, dep=np.zeros((0, 1)))
        rec.set_header('depmax', 3.0)
        update_data_fields(rec)
        assert rec.get_header('npts') == 0
        assert rec.get_header('depmax') is None

    def test_disabled(self):
        rec = Record(name='a.sac', hasdata=True, dep=np.zeros((2, 1)))
        with checkheader_state(False):
            assert check_header(rec) is rec
            # not even validated
            check_header([])
        assert rec.get_header('npts') is None
        with pytest.raises(EmptyError):
            check_header([])

    def test_matches_builder(self):
        x = np.array([0., 1., 2., 3., 10.])
        rec, = build(x, np.arange(5.))
        rec.name = 'built.sac'
        expected = rec.head.copy()
        check_header(rec)
        np.testing.assert_array_equal(rec.head, expected)
