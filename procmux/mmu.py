"""Memory management unit: per-process page tables over paged physical memory."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Union

from procmux.physical_memory import BackingStore, PhysicalMemory

_ULL_MAX = 0xFFFFFFFFFFFFFFFF
_HEX_DIGITS = frozenset("0123456789ABCDEF")

Breaker = Union[Callable[[], bool], threading.Event, None]


class MMUError(RuntimeError):
    """Raised when the memory manager is asked about an unknown process or bad data."""


@dataclass
class Page:
    """One page of a process, mapped to a frame by id."""

    dirty: bool = False
    valid: bool = False
    frame_id: int = _ULL_MAX


@dataclass
class PageTable:
    """The pages of one process and the size of its address space."""

    pages: list = field(default_factory=list)
    limit: int = 0


class MMU:
    """Translates process addresses to physical memory and handles page faults.

    Memory sizes are given as powers of two (their exponents).
    """

    def __init__(
        self,
        maximum_memory_per_process: int,
        maximum_overall_memory: int,
        memory_per_frame: int,
        minimum_memory_per_process: int,
        breaker: Breaker = None,
        backing_store: Optional[BackingStore] = None,
    ) -> None:
        self.maximum_memory_per_process = 1 << maximum_memory_per_process
        self.maximum_overall_memory = 1 << maximum_overall_memory
        self.memory_per_frame = 1 << memory_per_frame
        self.minimum_memory_per_process = 1 << minimum_memory_per_process

        # Computed from the exponents, not from the sizes they stand for.
        self._frames_per_process = maximum_memory_per_process // memory_per_frame
        self._limit_high = maximum_memory_per_process

        self._breaker = breaker
        self._frames_created = 0
        self._available_memory = self.maximum_overall_memory
        self._pages_in = 0
        self._pages_out = 0
        self._placeholder = "00" * self.memory_per_frame
        self._master_table: dict[int, PageTable] = {}
        self._lock = threading.RLock()
        self.physical_memory = PhysicalMemory(
            self.memory_per_frame, self.maximum_overall_memory, backing_store
        )

    # ----- internal helpers -----

    def _should_break(self) -> bool:
        breaker = self._breaker
        if breaker is None:
            return False
        if isinstance(breaker, threading.Event):
            return breaker.is_set()
        return bool(breaker())

    @staticmethod
    def _data_format(raw: str) -> list[str]:
        if any(character not in _HEX_DIGITS for character in raw):
            raise MMUError("Invalid characters found in raw string")
        if len(raw) % 2:
            raw = "0" + raw
        return [raw[i : i + 2] for i in range(0, len(raw), 2)]

    def _get_page(self, frame_id: int) -> Optional[Page]:
        for table in self._master_table.values():
            for page in table.pages:
                if page.frame_id == frame_id:
                    return page
        return None

    def _page_index(self, frame_id: int) -> int:
        for table in self._master_table.values():
            for index, page in enumerate(table.pages):
                if page.frame_id == frame_id:
                    return index
        return 0

    def _table(self, process_id: int) -> PageTable:
        try:
            return self._master_table[process_id]
        except KeyError:
            raise MMUError("Process page table not contained") from None

    def _is_valid(self, process_id: int, frame_id: int) -> bool:
        table = self._master_table.get(process_id)
        if table is None:
            print("\nError: Process page table not contained", file=sys.stderr)
            return False
        return any(page.frame_id == frame_id and page.valid for page in table.pages)

    def _valid_access(self, process_id: int, location: int) -> bool:
        table = self._table(process_id)
        frame_id = self.physical_memory.get_frame_id(location)
        if frame_id is None:
            return False
        return any(page.frame_id == frame_id for page in table.pages)

    def _new_frame(self) -> int:
        frame_id = self._frames_created
        self.physical_memory.write_backing_store(frame_id, self._placeholder)
        self._frames_created += 1
        return frame_id

    # ----- counters -----

    @property
    def available_memory(self) -> int:
        """Bytes of physical memory not yet given to a loaded frame."""
        return self._available_memory

    @property
    def pages_in(self) -> int:
        """Number of pages loaded from the backing store."""
        return self._pages_in

    @property
    def pages_out(self) -> int:
        """Number of pages written out by eviction or removal."""
        return self._pages_out

    # ----- page tables -----

    def count_valid(self, process_id: int) -> int:
        """Number of the process's pages currently in physical memory."""
        with self._lock:
            return sum(1 for page in self._table(process_id).pages if page.valid)

    def create_pages(self, process_id: int, required_memory: Optional[int] = None) -> None:
        """Create a page table for a process, with frames in the backing store.

        Without ``required_memory`` the process gets the default number of
        frames and the default limit; creation stops early if the breaker
        is set. An existing table for the process is left untouched.
        """
        with self._lock:
            if required_memory is None:
                table = PageTable(
                    pages=[Page() for _ in range(self._frames_per_process)],
                    limit=self._limit_high,
                )
                for page in table.pages:
                    if self._should_break():
                        break
                    page.frame_id = self._new_frame()
            else:
                if required_memory <= self.memory_per_frame:
                    pages_required = 1
                else:
                    pages_required = required_memory // self.memory_per_frame
                table = PageTable(
                    pages=[Page() for _ in range(pages_required)],
                    limit=required_memory,
                )
                for page in table.pages:
                    page.frame_id = self._new_frame()
            self._master_table.setdefault(process_id, table)

    def handle_page_fault(self, process_id: int, requested_page: int) -> None:
        """Bring a page of a process into physical memory, evicting if full."""
        with self._lock:
            table = self._master_table.get(process_id)
            if table is None:
                raise MMUError("Process not in master table")
            if not 0 <= requested_page < len(table.pages):
                raise IndexError("Requested page index is out of range")
            page = table.pages[requested_page]
            memory = self.physical_memory

            free_key = memory.find_free_frame()
            if free_key is None:
                victim_key = memory.get_victim_key()
                victim_frame_id = memory.get_frame_id(victim_key)
                if victim_frame_id is None:
                    print("\nError: Victim Frame not in memory", file=sys.stderr)
                    return
                victim_page = self._get_page(victim_frame_id)
                if victim_page is not None:
                    if victim_page.dirty:
                        memory.overwrite_backing_store(victim_key)
                        victim_page.dirty = False
                    victim_page.valid = False
                memory.update_frame(page.frame_id, victim_key)
                page.valid = True
                self._pages_in += 1
                self._pages_out += 1
            elif memory.find(page.frame_id) is None:
                memory.update_frame(page.frame_id, free_key)
                page.valid = True
                self._available_memory -= self.memory_per_frame
                self._pages_in += 1

    def load_process(self, process_id: int) -> bool:
        """Load every page of a process; True if all end up resident."""
        with self._lock:
            table = self._master_table.get(process_id)
            if table is None:
                raise MMUError("Process page table not contained in master table")
            for page in table.pages:
                self.handle_page_fault(process_id, self._page_index(page.frame_id))
            return all(page.valid for page in table.pages)

    def remove(self, process_id: int) -> None:
        """Write out and unload every frame of a process."""
        with self._lock:
            table = self._master_table.get(process_id)
            if table is None:
                print("\nError: Process page table not contained", file=sys.stderr)
                return
            for page in table.pages:
                page.valid = False
            removed = self.physical_memory.remove(page.frame_id for page in table.pages)
            self._available_memory += removed * self.memory_per_frame
            self._pages_out += removed

    # ----- access through process addresses -----

    def _resident_address(self, process_id: int, address: str) -> Optional[str]:
        """Physical address for a process address, faulting the page in."""
        table = self._master_table.get(process_id)
        if table is None:
            print("\nError: Process page table not contained", file=sys.stderr)
            return None
        base = self.physical_memory.from_hex(address)
        if base >= table.limit:
            return None
        location, offset = divmod(base, self.memory_per_frame)
        requested_frame = table.pages[location].frame_id

        slot = self.physical_memory.find(requested_frame)
        if slot is None:
            if self._get_page(requested_frame) is None:
                raise MMUError("Page not in master table")
            self.handle_page_fault(process_id, self._page_index(requested_frame))
            slot = self.physical_memory.find(requested_frame)
            if slot is None:
                raise MMUError("Page could not be loaded into physical memory")
        return self.physical_memory.to_hex(slot * self.memory_per_frame + offset)

    def protected_read(
        self, process_id: int, address: str, bytes_to_read: int
    ) -> Optional[str]:
        """Read bytes at a process address; None if the access is not allowed."""
        with self._lock:
            physical = self._resident_address(process_id, address)
            if physical is None:
                return None
            return self.read(process_id, physical, bytes_to_read)

    def protected_write(self, process_id: int, address: str, data: str) -> bool:
        """Write hex data at a process address; False if not allowed."""
        with self._lock:
            physical = self._resident_address(process_id, address)
            if physical is None:
                return False
            return self.write(process_id, physical, data)

    # ----- access through physical addresses -----

    def read(self, process_id: int, address: str, bytes_to_read: int) -> Optional[str]:
        """Read bytes at a physical address the process owns, or None."""
        with self._lock:
            base = self.physical_memory.from_hex(address)
            location = base // self.memory_per_frame
            if not self._valid_access(process_id, location):
                return None
            if base + bytes_to_read - 1 > self.maximum_overall_memory:
                return None
            data = []
            for position in range(base, base + bytes_to_read):
                byte = self.physical_memory.read(self.physical_memory.to_hex(position))
                if byte is None:
                    return None
                data.append(byte)
            return "".join(data)

    def write(self, process_id: int, address: str, data: str) -> bool:
        """Write hex data at a physical address the process owns.

        The page holding the first byte is marked dirty.
        """
        with self._lock:
            base = self.physical_memory.from_hex(address)
            location = base // self.memory_per_frame
            if not self._valid_access(process_id, location):
                return False
            chunks = self._data_format(data)
            if base + len(chunks) - 1 > self.maximum_overall_memory:
                return False
            for position, chunk in enumerate(chunks, start=base):
                if not self.physical_memory.write(self.physical_memory.to_hex(position), chunk):
                    return False
            frame_id = self.physical_memory.get_frame_id(location)
            if frame_id is not None:
                page = self._get_page(frame_id)
                if page is not None:
                    page.dirty = True
            return True

    # ----- display -----

    def format_frames(self) -> str:
        """Listing of which frame each physical slot holds."""
        return self.physical_memory.format_frames()

    def print_frames(self) -> None:
        """Write the physical slot listing to standard output."""
        self.physical_memory.print_frames()

    def _master_table_lines(self) -> Iterator[str]:
        yield "---------- Master Table ----------\n"
        for process_id, table in self._master_table.items():
            yield f"Process ID: {process_id}\n"
            if not table.pages:
                yield "     (No pages)\n"
                continue
            for index, page in enumerate(table.pages):
                yield (
                    f"     Page[{index}] FrameID={page.frame_id}"
                    f" Valid={'true' if page.valid else 'false'}"
                    f" Dirty={'true' if page.dirty else 'false'}\n"
                )

    def format_master_table(self) -> str:
        """Listing of every process's page table."""
        with self._lock:
            return "".join(self._master_table_lines())

    def print_master_table(self) -> None:
        """Write the master table listing to standard output."""
        out = sys.stdout
        with self._lock:
            for line in self._master_table_lines():
                out.write(line)
        out.flush()