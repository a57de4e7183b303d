import pytest

from procmux.data import InstructionType, ParameterCombination
from procmux.instructions import (
    DeclareInstruction,
    ForInstruction,
    InstructionError,
    PrintInstruction,
    ReadInstruction,
    SleepInstruction,
    SubtractInstruction,
    WriteInstruction,
)


def test_declare_uninitialized():
    inst = DeclareInstruction("x")
    assert inst.name == "x"
    assert inst.data == 0
    assert inst.initialized is False
    assert inst.instruction_type is InstructionType.DECLARE


def test_declare_initialized():
    inst = DeclareInstruction("y", 42)
    assert inst.data == 42
    assert inst.initialized is True


@pytest.mark.parametrize("bad", [-1, 65536])
def test_declare_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        DeclareInstruction("z", bad)


def test_declare_clone_is_equal_and_independent():
    inst = DeclareInstruction("v", 7)
    copy = inst.clone()
    assert copy == inst
    copy.name = "w"
    assert inst.name == "v"


def test_print_without_variable():
    inst = PrintInstruction("hello")
    assert inst.message == "hello"
    assert inst.contains_variable() is False
    with pytest.raises(InstructionError):
        inst.variable_name


def test_print_with_variable():
    inst = PrintInstruction("value: ", "x")
    assert inst.contains_variable() is True
    assert inst.variable_name == "x"
    assert inst.instruction_type is InstructionType.PRINT
    assert inst.clone() == inst


def test_read_and_write():
    read = ReadInstruction("0x10", "dest")
    assert read.address == "0x10"
    assert read.destination == "dest"
    assert read.instruction_type is InstructionType.READ
    write = WriteInstruction("0x20", 99)
    assert write.address == "0x20"
    assert write.data == 99
    assert write.instruction_type is InstructionType.WRITE
    assert write.clone() == write


def test_write_rejects_out_of_range():
    with pytest.raises(ValueError):
        WriteInstruction("0x00", 70000)


def test_sleep_duration_limits():
    assert SleepInstruction(255).duration == 255
    assert SleepInstruction(3).instruction_type is InstructionType.SLEEP
    with pytest.raises(ValueError):
        SleepInstruction(256)


def test_subtract_variables():
    inst = SubtractInstruction("d", "a", "b")
    assert inst.combination is ParameterCombination.VARIABLE
    assert inst.destination == "d"
    assert inst.first_variable == "a"
    assert inst.second_variable == "b"
    with pytest.raises(InstructionError):
        inst.first_literal
    with pytest.raises(InstructionError):
        inst.second_literal


def test_subtract_literals():
    inst = SubtractInstruction("d", 10, 4)
    assert inst.combination is ParameterCombination.LITERAL
    assert inst.first_literal == 10
    assert inst.second_literal == 4
    with pytest.raises(InstructionError):
        inst.first_variable
    with pytest.raises(InstructionError):
        inst.second_variable


def test_subtract_mixed():
    inst = SubtractInstruction("d", "a", 5)
    assert inst.combination is ParameterCombination.MIXED
    assert inst.first_variable == "a"
    assert inst.second_literal == 5
    with pytest.raises(InstructionError):
        inst.first_literal
    with pytest.raises(InstructionError):
        inst.second_variable


def test_subtract_literal_then_variable_rejected():
    with pytest.raises(TypeError):
        SubtractInstruction("d", 5, "a")


def test_subtract_clone_keeps_combination():
    inst = SubtractInstruction("d", "a", 5)
    copy = inst.clone()
    assert copy == inst
    assert copy.combination is ParameterCombination.MIXED


def test_for_holds_body_and_repetitions():
    body = [PrintInstruction("hi"), SleepInstruction(1)]
    loop = ForInstruction(body, 3)
    assert loop.repetitions == 3
    assert loop.instructions == body
    assert loop.instruction_type is InstructionType.FOR


def test_for_clone_is_deep():
    inner = DeclareInstruction("x", 1)
    loop = ForInstruction([inner, ForInstruction([PrintInstruction("p")], 2)], 2)
    copy = loop.clone()
    assert copy == loop
    assert copy.instructions[0] is not inner
    copy.instructions[0].name = "changed"
    assert inner.name == "x"
    assert copy.instructions[1].instructions[0] is not loop.instructions[1].instructions[0]


def test_for_copies_input_list():
    body = [PrintInstruction("a")]
    loop = ForInstruction(body, 1)
    body.append(PrintInstruction("b"))
    assert len(loop.instructions) == 1