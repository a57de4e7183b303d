import pytest

from procmux.instructions import PrintInstruction
from procmux.pcb import PCB, ProcessState


@pytest.fixture
def pcb():
    return PCB(7, [PrintInstruction("hi")], priority=2, memory_required=64)


def test_defaults(pcb):
    assert pcb.state is ProcessState.NEW
    assert pcb.program_counter == 0
    assert pcb.name == "7"
    assert pcb.log == "Log:\n"


def test_fields_are_kept(pcb):
    assert pcb.process_id == 7
    assert pcb.priority == 2
    assert pcb.memory_required == 64


def test_process_is_built_from_instructions(pcb):
    assert pcb.process.process_id == 7
    assert pcb.process.text_section.get_instruction(0).message == "hi"


def test_append_log_adds_lines(pcb):
    pcb.append_log("first")
    pcb.append_log("second")
    assert pcb.log == "Log:\nfirst\nsecond\n"


def test_increment_program_counter(pcb):
    for _ in range(3):
        pcb.increment_program_counter()
    assert pcb.program_counter == 3


def test_state_and_name_can_change(pcb):
    pcb.state = ProcessState.TERMINATED
    pcb.name = "worker"
    assert pcb.state is ProcessState.TERMINATED
    assert pcb.name == "worker"


def test_program_counter_is_read_only(pcb):
    pcb.increment_program_counter()
    with pytest.raises(AttributeError):
        pcb.program_counter = 5
    assert pcb.program_counter == 1