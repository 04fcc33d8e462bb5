import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tintlog.core.levels import Severity, clamp_level, parse_level, level_label, gate
from tintlog.core.errors import InvalidLevelError

def test_labels_are_five_chars():
    assert Severity.INFO.label == " INFO"
    assert Severity.WARN.label == " WARN"
    assert Severity.DEBUG.label == "DEBUG"
    assert Severity.ERROR.label == "ERROR"
    assert Severity.FATAL.label == "FATAL"
    assert Severity.NONE.label == " NONE"
    assert all(len(s.label) == 5 for s in Severity)

def test_label_for_undefined_value():
    assert level_label(5) == "5"
    assert level_label(11) == " INFO"

def test_clamp_above_fatal_falls_back_to_info():
    assert clamp_level(99) is Severity.INFO
    assert clamp_level(15) is Severity.INFO
    assert clamp_level(14) is Severity.FATAL
    assert clamp_level(0) is Severity.NONE
    assert clamp_level(5) == 5

def test_clamp_rejects_non_integers():
    with pytest.raises(InvalidLevelError):
        clamp_level("INFO")
    with pytest.raises(InvalidLevelError):
        clamp_level(True)

def test_parse_level_names_and_numbers():
    assert parse_level("warn") is Severity.WARN
    assert parse_level("WARNING") is Severity.WARN
    assert parse_level(" error ") is Severity.ERROR
    assert parse_level("off") is Severity.NONE
    assert parse_level("13") is Severity.ERROR
    assert parse_level("99") is Severity.INFO
    with pytest.raises(InvalidLevelError):
        parse_level("loud")

@pytest.mark.parametrize("threshold", list(Severity))
@pytest.mark.parametrize("level", [s for s in Severity if s is not Severity.NONE])
def test_gate_monotonic(threshold, level):
    assert gate(level, threshold) == (threshold > 0 and level >= threshold)

def test_gate_none_suppresses_fatal():
    assert not gate(Severity.FATAL, Severity.NONE)

@pytest.mark.parametrize("text", ["--1", "²", "1-", "", "1.5"])
def test_parse_level_malformed_numbers_raise_invalid_level(text):
    with pytest.raises(InvalidLevelError):
        parse_level(text)

def test_parse_level_accepts_ints_and_rejects_other_types():
    assert parse_level(12) is Severity.WARN
    assert parse_level(99) is Severity.INFO
    assert parse_level("-1") == -1
    for bad in (None, True, 1.5, ["INFO"]):
        with pytest.raises(InvalidLevelError):
            parse_level(bad)
