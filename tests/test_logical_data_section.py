import pytest

from procmux.logical_data_section import LogicalDataSection


def test_new_section_is_empty():
    section = LogicalDataSection(4)
    assert not section.is_full()
    assert section.get_data("x") is None
    assert section.get_variable_address("x") is None


def test_inserted_variable_starts_at_zero():
    section = LogicalDataSection(4)
    assert section.insert_variable("x") is True
    assert section.get_data("x") == 0


def test_set_value_round_trip():
    section = LogicalDataSection(4)
    section.insert_variable("x")
    assert section.set_value("x", 1234) is True
    assert section.get_data("x") == 1234


def test_set_value_unknown_variable_fails():
    section = LogicalDataSection(4)
    assert section.set_value("missing", 1) is False
    assert section.get_data("missing") is None


def test_set_value_out_of_range_rejected():
    section = LogicalDataSection(2)
    section.insert_variable("x")
    with pytest.raises(ValueError):
        section.set_value("x", 70000)


def test_addresses_are_two_bytes_apart():
    section = LogicalDataSection(4)
    section.insert_variable("a")
    section.insert_variable("b")
    assert section.get_variable_address("a") == "00000"
    assert section.get_variable_address("b") == "00002"


def test_full_section_refuses_new_variable():
    section = LogicalDataSection(3)
    for name in ("a", "b", "c"):
        assert section.insert_variable(name) is True
    assert section.is_full()
    assert section.insert_variable("d") is False
    assert section.get_data("d") is None


def test_format_lists_every_slot():
    section = LogicalDataSection(3)
    section.insert_variable("x")
    section.set_value("x", 7)
    lines = section.format().splitlines()
    assert len(lines) == 3
    assert lines[0] == "00000 | x -> 7"
    assert lines[1] == "00002 | free"


def test_print_writes_format(capsys):
    section = LogicalDataSection(2)
    section.insert_variable("y")
    section.print()
    assert capsys.readouterr().out == section.format()