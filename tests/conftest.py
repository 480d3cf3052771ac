# conftest.py - pytest configuration for fpgaregs tests

import pytest

from fpgaregs import log


SAMPLE_HEADER = """\
#define REG_A 0x1000
#define REG_B 100
#define REG_C 0x100000000
// #define REG_D 0x5
"""


@pytest.fixture(autouse=True)
def quiet_log():
    """Every test starts with diagnostics at the default level."""
    log.set_verbosity(0)
    yield
    log.set_verbosity(0)

@pytest.fixture
def write_file(tmp_path):
    """
    Returns a function that writes text to a file under tmp_path and
    returns its path as a string.
    """
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write

@pytest.fixture
def sample_header(write_file):
    """Fixture: path to the four-line example header."""
    return write_file("fpga_reg.h", SAMPLE_HEADER)
