"""Paged physical memory backed by a plain-text backing store."""

from __future__ import annotations

import os
import re
import sys
import threading
from collections import deque
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

_ULL_MAX = 0xFFFFFFFFFFFFFFFF
_HEX_PREFIX = re.compile(r"\s*(0[xX])?([0-9A-Fa-f]+)")
_EMPTY_BYTE = "00"


class PhysicalMemoryError(RuntimeError):
    """Raised when physical memory or its backing store is misused."""


class BackingStore:
    """Text file holding one frame per line as ``<frame id> <hex data>``.

    Lines are kept ordered by frame id.
    """

    def __init__(self, path: Union[str, os.PathLike] = "backing-store.txt") -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    @staticmethod
    def _parse(line: str) -> Optional[tuple[int, str]]:
        parts = line.split()
        if len(parts) < 2 or not parts[0].isdigit():
            return None
        return int(parts[0]), parts[1]

    def read(self, frame_id: int) -> Optional[str]:
        """Stored data of a frame, or None if the frame is not stored."""
        with self._lock:
            try:
                with self.path.open("r", encoding="ascii") as stream:
                    for line in stream:
                        parsed = self._parse(line)
                        if parsed is not None and parsed[0] == frame_id:
                            return parsed[1]
            except OSError as error:
                raise PhysicalMemoryError(
                    f"Cannot open {self.path} for reading the backing store"
                ) from error
        return None

    def write(self, frame_id: int, data: str) -> None:
        """Store or replace a frame's data, keeping lines ordered by id."""
        with self._lock:
            try:
                with self.path.open("r", encoding="ascii") as stream:
                    existing = [line.rstrip("\n") for line in stream]
            except FileNotFoundError:
                existing = []

            entry = f"{frame_id} {data}"
            output: list[str] = []
            placed = False
            for line in existing:
                parsed = self._parse(line)
                if parsed is not None and parsed[0] == frame_id:
                    output.append(entry)
                    placed = True
                elif parsed is not None and not placed and parsed[0] > frame_id:
                    output.append(entry)
                    output.append(line)
                    placed = True
                else:
                    output.append(line)
            if not placed:
                output.append(entry)

            temp = self.path.with_suffix(".tmp")
            try:
                with temp.open("w", encoding="ascii") as stream:
                    stream.writelines(f"{line}\n" for line in output)
            except OSError as error:
                raise PhysicalMemoryError("cannot open temporary file for write") from error
            os.replace(temp, self.path)


class _Frame:
    """A frame resident in physical memory: an id and its bytes as hex pairs."""

    __slots__ = ("frame_id", "data")

    def __init__(self, frame_id: int, size: int) -> None:
        self.frame_id = frame_id
        self.data = [_EMPTY_BYTE] * size

    def compile(self) -> str:
        return "".join(self.data)


class PhysicalMemory:
    """Physical memory split into equally sized frames.

    Frames are loaded from and saved to a :class:`BackingStore`. A usage list
    records frame slots, most recently used first, to pick eviction victims.
    """

    def __init__(
        self,
        frame_size: int,
        overall_size: int,
        backing_store: Optional[BackingStore] = None,
    ) -> None:
        if frame_size < 1:
            raise ValueError("frame_size must be at least 1")
        self.frame_size = frame_size
        self.overall_size = overall_size
        self.num_frames = overall_size // frame_size
        self.backing_store = backing_store if backing_store is not None else BackingStore()
        self._frames: list[Optional[_Frame]] = [None] * self.num_frames
        self._usage: deque[int] = deque()
        self._lock = threading.RLock()

    # ----- address helpers -----

    @staticmethod
    def to_hex(value: int) -> str:
        """Upper-case hex string, zero-padded to at least five digits."""
        return f"{value:05X}"

    @staticmethod
    def from_hex(text: str) -> int:
        """Parse the leading hexadecimal number of ``text``."""
        match = _HEX_PREFIX.match(text)
        if match is None:
            raise PhysicalMemoryError(f"Invalid Hex String: {text}")
        value = int(match.group(2), 16)
        if value > _ULL_MAX:
            raise PhysicalMemoryError(f"Hex String out of range: {text}")
        return value

    def translate_address(self, address: str) -> tuple[int, int]:
        """Split a physical address into (frame slot, offset)."""
        base = self.from_hex(address)
        slot, offset = divmod(base, self.frame_size)
        if slot >= self.num_frames:
            raise IndexError("Invalid address")
        return slot, offset

    # ----- lookup -----

    def find(self, frame_id: int) -> Optional[int]:
        """Slot holding the frame, or None if it is not resident."""
        for index, frame in enumerate(self._frames):
            if frame is not None and frame.frame_id == frame_id:
                return index
        return None

    def locate_frame(self, frame_id: int) -> Optional[int]:
        """Slot holding the frame, or None if it is not resident."""
        return self.find(frame_id)

    def find_free_frame(self) -> Optional[int]:
        """First empty slot, or None if memory is full."""
        for index, frame in enumerate(self._frames):
            if frame is None:
                return index
        return None

    def get_frame_id(self, index: int) -> Optional[int]:
        """Id of the frame in a slot, or None if the slot is empty."""
        if not 0 <= index < self.num_frames:
            raise IndexError(f"physical memory index {index} out of range")
        frame = self._frames[index]
        return None if frame is None else frame.frame_id

    def get_victim_key(self) -> int:
        """Remove and return the least recently used slot."""
        with self._lock:
            if not self._usage:
                raise PhysicalMemoryError("No available frames to evict")
            return self._usage.pop()

    # ----- backing store -----

    def _parse_data(self, raw: str) -> list[str]:
        if len(raw) % 2:
            raise PhysicalMemoryError("Backing store data corrupted")
        if len(raw) // 2 > self.frame_size:
            raise PhysicalMemoryError("Backing store data exceeds allowable hex digits")
        return [raw[i : i + 2] for i in range(0, len(raw), 2)]

    def write_backing_store(self, frame_id: int, data: str) -> None:
        """Store a frame's data in the backing store."""
        self.backing_store.write(frame_id, data)

    def overwrite_backing_store(self, victim_key: int) -> None:
        """Save the frame held in ``victim_key`` to the backing store."""
        with self._lock:
            if not 0 <= victim_key < self.num_frames or self._frames[victim_key] is None:
                raise PhysicalMemoryError("Overwriting invalid physical memory index")
            frame = self._frames[victim_key]
            self.backing_store.write(frame.frame_id, frame.compile())

    def update_frame(self, frame_id: int, index: int) -> None:
        """Load a frame from the backing store into slot ``index``."""
        with self._lock:
            if not 0 <= index < self.num_frames:
                raise IndexError(f"physical memory index {index} out of range")
            frame = _Frame(frame_id, self.frame_size)
            self._frames[index] = frame
            stored = self.backing_store.read(frame_id)
            if stored is None:
                raise PhysicalMemoryError("Frame not in backing store")
            for offset, byte in enumerate(self._parse_data(stored)):
                frame.data[offset] = byte
            self._usage.appendleft(index)

    # ----- access -----

    def _touch(self, index: int) -> None:
        try:
            while True:
                self._usage.remove(index)
        except ValueError:
            pass
        self._usage.appendleft(index)

    def read(self, address: str) -> Optional[str]:
        """Byte at a physical address, or None if its frame is not loaded."""
        with self._lock:
            index, offset = self.translate_address(address)
            frame = self._frames[index]
            if frame is None:
                return None
            self._touch(index)
            return frame.data[offset]

    def write(self, address: str, data: str) -> bool:
        """Write one byte (two hex digits) at a physical address.

        Returns False if the data is larger than a byte or the frame is not
        loaded.
        """
        with self._lock:
            index, offset = self.translate_address(address)
            if len(data) > 2:
                print("\nERROR: Data is larger than 1 byte @PhysicalMemory::write\n")
                return False
            frame = self._frames[index]
            if frame is None:
                return False
            frame.data[offset] = data
            self._touch(index)
            return True

    def remove(self, frame_ids: Iterable[int]) -> int:
        """Save and unload the given frames; return how many were resident."""
        removed = 0
        with self._lock:
            for frame_id in frame_ids:
                slot = self.find(frame_id)
                if slot is not None:
                    self.overwrite_backing_store(slot)
                    self._frames[slot] = None
                    removed += 1
        return removed

    # ----- display -----

    def _frame_lines(self, location: int) -> Iterator[str]:
        frame = self._frames[location]
        if frame is None:
            yield "ERROR: Trying to access empty physical memory frame\n"
            return
        for offset, byte in enumerate(frame.data):
            yield f"{self.to_hex(offset)} | {byte}\n"

    def _slot_lines(self) -> Iterator[str]:
        for index, frame in enumerate(self._frames):
            label = f"Location [{index}]"
            if frame is None:
                yield f"{label:<20}stores no frame\n"
            else:
                yield f"{label:<20}stores frame {frame.frame_id}\n"

    def format_frame(self, location: int) -> str:
        """Listing of a loaded frame's bytes, one offset per line."""
        return "".join(self._frame_lines(location))

    def print_frame(self, location: int) -> None:
        """Write the listing of one frame to standard output."""
        out = sys.stdout
        for line in self._frame_lines(location):
            out.write(line)
        out.flush()

    def format_frames(self) -> str:
        """One line per slot naming the frame it stores, if any."""
        with self._lock:
            return "".join(self._slot_lines())

    def print_frames(self) -> None:
        """Write the slot listing to standard output."""
        out = sys.stdout
        with self._lock:
            for line in self._slot_lines():
                out.write(line)
        out.flush()