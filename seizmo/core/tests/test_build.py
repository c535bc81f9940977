# -*- coding: utf-8 -*-
import numpy as np
import pytest

from seizmo.core.build import build
from seizmo.core.checking import validate
from seizmo.core.util.base import NATIVE_BYTEORDER
from seizmo.core.util.seizmo_types import (InvalidSeriesError,
                                           MismatchedInputError)


class TestBuild:
    """
    Test suite for seizmo.core.build
    """
    def test_evenly_sampled(self):
        x = np.linspace(0, 30, 1000)
        y = np.sqrt(x)
        rec, = build(x, y)
        assert rec.path == '.'
        assert rec.name == ''
        assert rec.filetype == 'SAC Binary File'
        assert rec.version == 6
        assert rec.byteorder == NATIVE_BYTEORDER
        assert rec.hasdata is True
        assert rec.misc == {}
        assert rec.ind is None
        assert rec.dep.shape == (1000, 1)
        np.testing.assert_array_equal(rec.dep[:, 0], y)
        assert rec.get_header('npts') == 1000
        assert rec.get_header('b') == 0.0
        assert rec.get_header('e') == 30.0
        assert rec.get_header('delta') == pytest.approx(30.0 / 999)
        assert rec.get_header('depmin') == 0.0
        assert rec.get_header('depmax') == pytest.approx(np.sqrt(30))
        assert rec.get_header('depmen') == pytest.approx(np.mean(y))
        assert rec.get_header('iftype') == 'ixy'
        assert rec.get_header('leven') is True
        assert rec.get_header('lcalda') is True
        assert rec.get_header('lovrok') is True
        assert rec.get_header('lpspol') is False
        assert rec.get_header('nvhdr') == 6
        assert rec.get_header('knetwk') == 'SEIZMO'
        assert rec.get_header('odelta') is None

    def test_unevenly_sampled(self):
        """
        A first step differing from the nominal interval keeps x.
        """
        x = np.array([0., 1., 2., 3., 10.])
        rec, = build(x, np.zeros(5))
        assert rec.get_header('delta') == 2.5
        assert rec.get_header('odelta') == 1.0
        assert rec.get_header('leven') is False
        np.testing.assert_array_equal(rec.ind, x)
        # not a view on the input
        assert not np.shares_memory(rec.ind, x)

    def test_single_point(self):
        rec, = build([5.0], [2.0])
        assert rec.get_header('npts') == 1
        assert rec.get_header('delta') == 0.0
        assert rec.get_header('b') == 5.0
        assert rec.get_header('e') == 5.0
        assert rec.get_header('leven') is True
        assert rec.ind is None
        assert rec.get_header('odelta') is None

    def test_multiple_pairs(self):
        recs = build(np.arange(4.), np.ones(4), np.arange(8.), np.ones(8))
        assert len(recs) == 2
        assert [r.get_header('npts') for r in recs] == [4, 8]
        for i, rec in enumerate(recs):
            rec.name = 'rec%d.sac' % i
        assert validate(recs) is None

    def test_row_and_column_vectors(self):
        x = np.arange(5.)
        rec, = build(x[np.newaxis, :], x[:, np.newaxis] ** 2)
        assert rec.dep.shape == (5, 1)
        assert rec.get_header('depmax') == 16.0

    def test_integer_input(self):
        rec, = build([0, 1, 2], [3, 4, 5])
        assert rec.get_header('delta') == 1.0
        assert rec.get_header('depmen') == 4.0

    def test_unnamed_records_are_not_valid(self):
        rec, = build(np.arange(3.), np.arange(3.))
        assert validate(rec).kind == 'NameBad'

    def test_no_input(self):
        assert build() == []

    def test_unpaired(self):
        with pytest.raises(MismatchedInputError):
            build(np.arange(3.))
        with pytest.raises(ValueError):
            build(np.arange(3.), np.arange(3.), np.arange(3.))

    def test_invalid_series(self):
        with pytest.raises(InvalidSeriesError) as e:
            build(np.arange(3.), np.arange(3.), np.arange(3.), np.arange(4.))
        assert e.value.pair == 2
        with pytest.raises(InvalidSeriesError) as e:
            build(np.ones((2, 2)), np.ones((2, 2)))
        assert e.value.pair == 1
        with pytest.raises(InvalidSeriesError):
            build([], [])
        with pytest.raises(InvalidSeriesError):
            build(['a', 'b'], [1, 2])

    def test_decreasing_unsigned_x(self):
        """
        Unsigned x samples are differenced as floats.
        """
        x = np.array([3, 2, 1], dtype=np.uint8)
        rec, = build(x, np.zeros(3))
        assert rec.get_header('delta') == -1.0
        assert rec.get_header('b') == 3.0
        assert rec.get_header('e') == 1.0
        assert rec.get_header('leven') is True
        assert rec.get_header('odelta') is None
        assert rec.ind is None

    def test_uneven_unsigned_x(self):
        rec, = build(np.array([10, 9, 0], dtype=np.uint16), np.zeros(3))
        assert rec.get_header('delta') == -5.0
        assert rec.get_header('odelta') == -1.0
        assert rec.get_header('leven') is False
        assert rec.ind.dtype == np.float64
        np.testing.assert_array_equal(rec.ind, [10., 9., 0.])

    def test_y_without_storage_class(self):
        """
        y dtypes outside the storage classes are stored as double.
        """
        rec, = build(np.arange(3.), np.arange(3., dtype=np.float16))
        assert rec.dep.dtype == np.float64
        np.testing.assert_array_equal(rec.dep[:, 0], [0., 1., 2.])
        rec, = build(np.arange(3.), np.arange(3, dtype=np.int16))
        assert rec.dep.dtype == np.int16
