# """
# tests/test_overlap.py
#
# Detection of registers sharing address space.
# """

from fpgaregs import log
from fpgaregs.overlap import find_overlaps, Overlap

def test_no_overlaps():
    assert find_overlaps({"A": 0x0, "B": 0x4, "C": 0x100}) == []

def test_aliased_and_straddling_registers():
    assert find_overlaps({"A": 0x10, "B": 0x10, "C": 0x12, "D": 0x14}) == [
        Overlap("A", 0x10, "B", 0x10),
        Overlap("A", 0x10, "C", 0x12),
        Overlap("B", 0x10, "C", 0x12),
        Overlap("C", 0x12, "D", 0x14),
    ]

def test_overlaps_logged_when_verbose(capsys):
    log.set_verbosity(1)
    find_overlaps({"A": 0x10, "B": 0x10})
    assert capsys.readouterr().err == "[VERBOSE] register B at 0x10 overlaps A at 0x10\n"

def test_overlaps_silent_by_default(capsys):
    find_overlaps({"A": 0x10, "B": 0x10})
    assert capsys.readouterr().err == ""
