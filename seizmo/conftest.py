"""
SEIZMO's testing configuration file.
"""
import pytest

from seizmo.core import checking


# --- SEIZMO fixtures


@pytest.fixture(scope='function', autouse=True)
def restore_check_states():
    """
    Restore both process-wide check switches after every test.
    """
    seizmocheck = checking.get_seizmocheck_state()
    checkheader = checking.get_checkheader_state()
    yield
    checking.set_seizmocheck_state(seizmocheck)
    checking.set_checkheader_state(checkheader)
