# -*- coding: utf-8 -*-
import numpy as np
import pytest

from seizmo.core.build import build
from seizmo.core.layout import get_layout
from seizmo.core.record import Record
from seizmo.core.util.base import (STORAGE_CLASSES, cast_to_storage,
                                   storage_of)
from seizmo.core.util.decorator import requires_records
from seizmo.core.util.misc import disk_size, version_info
from seizmo.core.util.seizmo_types import EmptyError, NeedDataError


class TestUtilBase:
    """
    Test suite for seizmo.core.util.base
    """
    def test_storage_classes(self):
        assert sorted(STORAGE_CLASSES) == sorted([
            'double', 'single', 'int64', 'int32', 'int16', 'int8', 'uint64',
            'uint32', 'uint16', 'uint8'])
        for name in STORAGE_CLASSES:
            values = cast_to_storage([1, 2, 3], name)
            assert storage_of(values) == name

    def test_cast_truncates_to_integers(self):
        values = cast_to_storage(np.array([1.7, -2.2]), 'int32')
        assert values.dtype == np.int32
        assert values.tolist() == [1, -2]

    def test_unknown_storage(self):
        with pytest.raises(ValueError):
            cast_to_storage([1.0], 'quad')
        with pytest.raises(ValueError):
            storage_of(np.array([1 + 1j]))


class TestUtilDecorator:
    def test_requires_records(self):
        @requires_records('dep')
        def count(records, scale=1):
            return len(records) * scale

        recs = build(np.arange(3.), np.arange(3.))
        recs[0].name = 'a.sac'
        assert count(recs) == 1
        assert count(recs, scale=2) == 2
        assert count(records=recs) == 1
        with pytest.raises(EmptyError):
            count([])
        recs[0].hasdata = False
        with pytest.raises(NeedDataError):
            count(recs)


class TestUtilMisc:
    """
    Test suite for seizmo.core.util.misc
    """
    def test_version_info(self):
        recs = [Record(name='a.sac'),
                Record(name='b.sac', filetype='SEIZMO Binary File',
                       version=200)]
        with pytest.warns(UserWarning):
            layouts = version_info(recs)
        assert layouts == [get_layout(6), get_layout(200)]

    def test_disk_size_sac(self):
        rec, = build(np.arange(100.), np.zeros(100))
        rec.name = 'a.sac'
        assert disk_size(rec) == [1032]

    def test_disk_size_uneven_and_spectral(self):
        rec, = build(np.array([0., 1., 3.]), np.zeros(3))
        rec.name = 'a.sac'
        # x and y samples
        assert disk_size(rec) == [632 + 2 * 3 * 4]
        rec.set_header('iftype', 'irlim')
        rec.set_header('leven', True)
        assert disk_size(rec) == [632 + 2 * 3 * 4]

    def test_disk_size_seizmo_versions(self):
        recs = [Record(name='a', filetype='SEIZMO Binary File', version=v)
                for v in (101, 200, 201)]
        for rec in recs:
            rec.set_header('npts', 10)
            rec.set_header('leven', True)
        with pytest.warns(UserWarning):
            sizes = disk_size(recs)
        assert sizes == [110 * 4 + 192 + 10 * 8,
                         110 * 8 + 192 + 10 * 4,
                         110 * 8 + 192 + 10 * 8]

    def test_disk_size_without_npts(self):
        assert disk_size(Record(name='a.sac')) == [632]
