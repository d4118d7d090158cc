"""The program's own data kept in an unused part of the game's save."""

from __future__ import annotations

from gbtransfer.flash_save import FlashSave

SECTION_SIZE = 0x1000

TUTORIAL_FLAG = 0
DEFAULT_LANGUAGE = 1
CAUGHT_DATA = 2
DEX_SIZE = 252
CAUGHT_BYTES = (DEX_SIZE + 7) // 8
SAVE_DATA_SIZE = CAUGHT_DATA + CAUGHT_BYTES


class CustomSaveData:
    """Tutorial flag, default language and the Dream Dex caught bits."""

    def __init__(self, size: int = SAVE_DATA_SIZE) -> None:
        if size < SAVE_DATA_SIZE:
            raise ValueError(f"save data needs at least {SAVE_DATA_SIZE} bytes")
        if size > SECTION_SIZE:
            raise ValueError("save data does not fit in one save section")
        self.data = bytearray(size)

    def _caught_position(self, dex_num: int) -> tuple[int, int]:
        if not 0 <= dex_num < DEX_SIZE:
            raise IndexError(f"dex number out of range: {dex_num}")
        return CAUGHT_DATA + dex_num // 8, dex_num % 8

    def is_caught(self, dex_num: int) -> bool:
        index, bit = self._caught_position(dex_num)
        return bool(self.data[index] >> bit & 1)

    def set_caught(self, dex_num: int) -> None:
        index, bit = self._caught_position(dex_num)
        self.data[index] |= 1 << bit

    @property
    def language(self) -> int:
        return self.data[DEFAULT_LANGUAGE]

    @language.setter
    def language(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"language out of range: {value}")
        self.data[DEFAULT_LANGUAGE] = value

    @property
    def tutorial_complete(self) -> bool:
        return bool(self.data[TUTORIAL_FLAG])

    @tutorial_complete.setter
    def tutorial_complete(self, value: bool) -> None:
        self.data[TUTORIAL_FLAG] = 1 if value else 0

    def reset(self) -> None:
        """Clear everything and mark the tutorial as seen."""
        self.data[:] = bytes(len(self.data))
        self.tutorial_complete = True

    def dex_completion(self, gen: int, include_mythicals: bool = False) -> int:
        """Count caught species of generation 1 or 2, optionally with its mythical."""
        start, stop = (1, 151) if gen == 1 else (152, 251)
        return sum(
            self.is_caught(dex)
            for dex in range(start, stop + (1 if include_mythicals else 0))
        )

    def _check_offset(self, offset: int) -> None:
        if offset < 0 or offset + len(self.data) > SECTION_SIZE:
            raise ValueError("save data does not fit at that offset")

    def load(self, flash: FlashSave, address: int, offset: int) -> None:
        """Read the data from ``offset`` within the section at ``address``."""
        self._check_offset(offset)
        sector = flash.read(address, SECTION_SIZE)
        self.data[:] = sector[offset:offset + len(self.data)]

    def store(self, flash: FlashSave, address: int, offset: int) -> bytes:
        """Rewrite the section at ``address`` with the data placed at ``offset``.

        The rest of the section is kept; the section as written is returned.
        Its checksum is not updated.
        """
        self._check_offset(offset)
        sector = bytearray(flash.read(address, SECTION_SIZE))
        sector[offset:offset + len(self.data)] = self.data
        flash.erase_sector(address)
        flash.write(address, sector)
        return bytes(sector)