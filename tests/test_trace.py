import pytest

from cachesim.trace import (
    Access,
    AccessKind,
    CacheConfig,
    parse_config,
    parse_trace,
    read_config,
    read_trace,
)


def test_parse_trace_kinds_and_addresses():
    accesses = list(parse_trace("I 100\nL 200\nS 300\n"))
    assert accesses == [
        Access(AccessKind.INSTRUCTION, 100),
        Access(AccessKind.LOAD, 200),
        Access(AccessKind.STORE, 300),
    ]


def test_parse_trace_skips_blank_lines_and_spaces():
    accesses = list(parse_trace("\n  I   8  \n\n\tL 12\n"))
    assert accesses == [Access(AccessKind.INSTRUCTION, 8), Access(AccessKind.LOAD, 12)]


def test_parse_trace_without_separator():
    assert list(parse_trace("I1234")) == [Access(AccessKind.INSTRUCTION, 1234)]


def test_parse_trace_empty():
    assert list(parse_trace("")) == []


@pytest.mark.parametrize("text", ["I", "I abc", "L 1 2", "X 10"])
def test_parse_trace_malformed(text):
    with pytest.raises(ValueError):
        list(parse_trace(text))


def test_instruction_flag_from_parsed_trace():
    flags = [access.kind.is_instruction for access in parse_trace("I 4\nL 8\nS 12\n")]
    assert flags == [True, False, False]


def test_read_trace(tmp_path):
    path = tmp_path / "trace.txt"
    path.write_text("I 4\nS 8\n")
    assert read_trace(path) == [
        Access(AccessKind.INSTRUCTION, 4),
        Access(AccessKind.STORE, 8),
    ]


def test_read_trace_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_trace(tmp_path / "absent.txt")


def test_parse_config_single():
    assert parse_config("8 2 4\n", 1) == [CacheConfig(8, 2, 4)]


def test_parse_config_several():
    configs = parse_config("8 2 4\n16 4 1\n32 1 2\n", 3)
    assert configs == [CacheConfig(8, 2, 4), CacheConfig(16, 4, 1), CacheConfig(32, 1, 2)]


def test_parse_config_ignores_extra_values():
    assert parse_config("8 2 4 99 99 99", 1) == [CacheConfig(8, 2, 4)]


def test_parse_config_too_few_values():
    with pytest.raises(ValueError):
        parse_config("8 2 4\n16 4", 2)


def test_parse_config_non_integer():
    with pytest.raises(ValueError):
        parse_config("8 two 4", 1)


def test_read_config(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("64 4 2\n128 8 4\n")
    assert read_config(path, 2) == [CacheConfig(64, 4, 2), CacheConfig(128, 8, 4)]


def test_read_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "absent.txt", 1)