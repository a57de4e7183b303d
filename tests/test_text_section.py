import pytest

from procmux.instructions import DeclareInstruction, PrintInstruction, SleepInstruction
from procmux.text_section import TextSection


def test_new_section_has_no_instructions():
    section = TextSection()
    assert len(section) == 0
    assert section.instructions == ()


def test_instructions_keep_insertion_order():
    section = TextSection()
    first = DeclareInstruction("x", 3)
    second = PrintInstruction("hello")
    third = SleepInstruction(4)
    for instruction in (first, second, third):
        section.add_instruction(instruction)
    assert len(section) == 3
    assert section.instructions == (first, second, third)
    assert section.get_instruction(1) is second


def test_get_instruction_out_of_range():
    section = TextSection()
    section.add_instruction(SleepInstruction(1))
    with pytest.raises(IndexError):
        section.get_instruction(1)
    with pytest.raises(IndexError):
        section.get_instruction(-1)


def test_instructions_view_is_a_snapshot():
    section = TextSection()
    section.add_instruction(SleepInstruction(1))
    view = section.instructions
    section.add_instruction(SleepInstruction(2))
    assert len(view) == 1
    assert len(section.instructions) == 2