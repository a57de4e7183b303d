# procmux

`procmux` emulates the moving parts of a small operating system's process
multiplexer in plain Python, with no third-party dependencies:

- **Instructions** (`procmux.instructions`): `DeclareInstruction`,
  `ForInstruction`, `PrintInstruction`, `ReadInstruction`, `SleepInstruction`,
  `SubtractInstruction` and `WriteInstruction`, all deriving from
  `Instruction` and copyable with `clone()`. Each class carries its
  `instruction_type` from `procmux.data.InstructionType`.
- **Process sections**: a `TextSection` holding instructions
  (`procmux.text_section`), a `LogicalDataSection` with a fixed number of
  variable slots (`procmux.logical_data_section`), and a call `Stack` of
  `StackFrame`s (`procmux.stack`).
- **Processes**: `Process` (`procmux.process`) and its control block `PCB`
  (`procmux.pcb`), with a `ProcessState`, a program counter and a running log.
- **Memory**: `PhysicalMemory` split into frames, backed by a file-based
  `BackingStore` (`procmux.physical_memory`), and an `MMU` (`procmux.mmu`)
  that keeps a `PageTable` of `Page`s per process, handles page faults with
  least-recently-used eviction, and translates process addresses into
  physical ones.
- **Helpers**: an `LruMap` of bounded size (`procmux.lru_map`), a
  `Configuration` dataclass of system defaults and the `ParameterCombination`
  enum (`procmux.data`), and command-line tokenizers (`procmux.tokens`).

## Instructions

```python
from procmux.instructions import DeclareInstruction, ForInstruction, PrintInstruction
from procmux.text_section import TextSection

text = TextSection()
text.add_instruction(DeclareInstruction("x", 5))
text.add_instruction(ForInstruction([PrintInstruction("x is ", "x")], 3))

loop = text.get_instruction(1)
copy = loop.clone()          # the nested instructions are cloned too
print(len(text))             # 2
```

Numeric operands are range-checked: 16-bit values for data, repetitions and
literals, 8-bit for sleep durations. `PrintInstruction.variable_name` and the
`first_literal`, `second_literal`, `first_variable` and `second_variable`
properties of `SubtractInstruction` raise `InstructionError` when the
instruction was built without that operand. A `SubtractInstruction` takes two
variable names, two literals, or a variable name followed by a literal.

## Process control blocks

```python
from procmux.pcb import PCB, ProcessState

pcb = PCB(7, [DeclareInstruction("x", 1)], priority=0, memory_required=64)
pcb.name                        # "7"
pcb.state = ProcessState.READY
pcb.append_log("started")
pcb.log                         # "Log:\nstarted\n"
pcb.increment_program_counter()
pcb.program_counter             # 1
```

Every `Process` has a logical data section of 32 variable slots.

## Data section

```python
from procmux.logical_data_section import LogicalDataSection

data = LogicalDataSection(32)
data.insert_variable("x")
data.set_value("x", 42)
data.get_data("x")               # 42
data.get_variable_address("x")   # "00000"
print(data.format())
```

Each slot sits two bytes after the previous one, addressed with five
upper-case hexadecimal digits. Inserting into a full section returns `False`;
`set_value` returns `False` for an undeclared variable.

## Memory

Memory sizes given to the `MMU` are powers of two, passed as exponents:
`MMU(6, 7, 6, 6)` means 64 bytes per process, 128 bytes overall and
64-byte frames. The fifth argument is an optional breaker (a
`threading.Event` or a callable returning a bool) that stops default page
creation early; the sixth is the `BackingStore` to use.

```python
from procmux.physical_memory import BackingStore
from procmux.mmu import MMU

store = BackingStore("backing-store.txt")
mmu = MMU(6, 7, 6, 6, None, store)

mmu.create_pages(1, 64)
mmu.protected_write(1, "01", "FF")
mmu.protected_read(1, "00", 2)    # "00FF"
mmu.print_master_table()
mmu.print_frames()
```

`protected_read` and `protected_write` take addresses in the process's own
address space and fault pages in as needed; `read` and `write` take physical
addresses and refuse access to frames the process does not own. Data written
is hexadecimal text using upper-case digits.

Frames that are created, evicted when dirty, or released with `remove` are
written to the backing store as one `<frame id> <hex data>` line per frame,
kept in ascending frame order. `pages_in` and `pages_out` count the traffic
between memory and the store, and `available_memory` the bytes not yet given
to a loaded frame.

## Tokenizing commands

```python
from procmux.tokens import get_tokens, split, split_command

split_command('screen -c p1 256 "DECLARE x 5; PRINT x"')
# ['screen', '-c', 'p1', '256', 'DECLARE x 5; PRINT x']

split("FOR [ADD x x 1, PRINT x] 3", " ")
# ['FOR', '[ADD x x 1, PRINT x]', '3']

get_tokens("screen  -ls", " ")
# ['screen', '', '-ls']
```

## What this package does not do

There is no interactive shell and no command to run: the package is a
library. It has no scheduler or CPU that executes instructions, runs
processes on cores or generates them; instructions, processes and control
blocks are data structures for such a component to use.