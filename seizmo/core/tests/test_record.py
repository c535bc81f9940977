# -*- coding: utf-8 -*-
import numpy as np
import pytest

from seizmo.core.headeraccess import change_header, get_header
from seizmo.core.layout import blank, get_layout
from seizmo.core.record import Record
from seizmo.core.util.base import NATIVE_BYTEORDER
from seizmo.core.util.seizmo_types import BadFieldError, SeizmoHeaderError


class TestRecord:
    """
    Test suite for seizmo.core.record
    """
    def test_defaults(self):
        rec = Record(name='test.sac')
        assert rec.path == '.'
        assert rec.filetype == 'SAC Binary File'
        assert rec.version == 6
        assert rec.byteorder == NATIVE_BYTEORDER
        assert rec.hasdata is False
        assert rec.misc == {}
        assert rec.dep is None
        assert rec.ind is None
        np.testing.assert_array_equal(rec.head, blank(get_layout(6)))
        assert rec.layout is get_layout(6)

    def test_blank_head_per_version(self):
        rec = Record(name='x', filetype='SEIZMO Binary File', version=201)
        assert rec.head.shape == (302, 1)
        assert rec.layout.data_storage == 'double'

    def test_header_access(self):
        rec = Record(name='test.sac')
        rec.set_header('kcmpnm', 'BHZ')
        rec.set_header('evdp', 10.5)
        assert rec.get_header('kcmpnm') == 'BHZ'
        assert rec.get_header('EVDP') == 10.5
        rec.set_header('evdp', None)
        assert rec.get_header('evdp') is None
        with pytest.raises(SeizmoHeaderError):
            rec.get_header('kcmp')

    def test_equality_and_copy(self):
        rec = Record(name='test.sac', dep=np.arange(3.)[:, np.newaxis],
                     hasdata=True)
        other = rec.copy()
        assert rec == other
        assert other.head is not rec.head
        other.set_header('delta', 2.0)
        assert rec != other
        assert rec.get_header('delta') is None
        other = rec.copy()
        other.dep = None
        assert rec != other
        assert rec != 'test.sac'

    def test_records_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(Record(name='test.sac'))

    def test_repr(self):
        rec = Record(name='test.sac', byteorder='big')
        assert repr(rec) == "<Record 'test.sac' (SAC Binary File v6, big)>"


class TestHeaderAccess:
    """
    Test suite for seizmo.core.headeraccess
    """
    def setup_method(self):
        self.recs = [Record(name='a.sac'), Record(name='b.sac'),
                     Record(name='c.sac')]

    def test_scalar_to_all(self):
        out = change_header(self.recs, delta=0.1, kstnm='ANMO')
        assert out is self.recs
        assert get_header(self.recs, 'delta') == [0.1] * 3
        # strings are not split up
        assert get_header(self.recs, 'kstnm') == ['ANMO'] * 3

    def test_per_record_values(self):
        change_header(self.recs, b=[1.0, 2.0, 3.0],
                      iftype=np.array([1, 4, 4]))
        b, iftype = get_header(self.recs, 'b', 'iftype')
        assert b == [1.0, 2.0, 3.0]
        assert iftype == ['itime', 'ixy', 'ixy']

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            change_header(self.recs, b=[1.0, 2.0])
        assert get_header(self.recs, 'b') == [None] * 3

    def test_bad_value_changes_nothing(self):
        with pytest.raises(ValueError):
            change_header(self.recs, delta=1.0, leven=[True, False, 'x'])
        assert get_header(self.recs, 'delta') == [None] * 3
        assert get_header(self.recs, 'leven') == [None] * 3

    def test_unknown_field(self):
        with pytest.raises(SeizmoHeaderError):
            change_header(self.recs, nonsense=1)

    def test_single_record(self):
        rec = Record(name='a.sac')
        change_header(rec, user0=5.0)
        assert get_header(rec, 'user0') == [5.0]

    def test_invalid_records(self):
        self.recs[1].name = ''
        with pytest.raises(BadFieldError):
            change_header(self.recs, delta=1.0)
        with pytest.raises(BadFieldError):
            get_header(self.recs, 'delta')
