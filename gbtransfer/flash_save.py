"""A model of the cartridge's banked flash save memory."""

from __future__ import annotations

from typing import Iterator

CLOCK_SPEED = 16_777_216

SECTOR_SIZE_BITS = 12
SECTOR_SIZE = 1 << SECTOR_SIZE_BITS
BANK_SIZE = 0x10000
NUM_BANKS = 2
SAVE_SIZE = BANK_SIZE * NUM_BANKS
ERASED_BYTE = 0xFF

MACRONIX_MAN_ID = 0xC2
SANYO_MAN_ID = 0x62
DEFAULT_MAN_ID = 0


def clock_cycles_per_ms(ms: int) -> int:
    """CPU cycles in ``ms`` milliseconds, rounded up."""
    return (ms * CLOCK_SPEED + 999) // 1000


def clock_cycles_per_us(us: int) -> int:
    """CPU cycles in ``us`` microseconds, rounded up."""
    return (us * CLOCK_SPEED + 999_999) // 1_000_000


class FlashSave:
    """Two 64 KiB banks of flash; addresses wrap at the end of the chip.

    Accesses that run past the end of the chip are cut short there.
    """

    def __init__(self, manufacturer_id: int = MACRONIX_MAN_ID) -> None:
        self.manufacturer_id = manufacturer_id
        self.is_macronix = manufacturer_id in (
            MACRONIX_MAN_ID,
            SANYO_MAN_ID,
            DEFAULT_MAN_ID,
        )
        self.current_bank: int | None = None
        self._memory = bytearray([ERASED_BYTE]) * SAVE_SIZE

    @property
    def contents(self) -> bytes:
        """A copy of the whole chip."""
        return bytes(self._memory)

    def _chunks(self, address: int, size: int) -> Iterator[tuple[int, int]]:
        """Yield (absolute address, length) per bank, switching banks as needed."""
        if size < 0:
            raise ValueError("size must not be negative")
        address %= SAVE_SIZE
        size = min(size, SAVE_SIZE - address)
        while size > 0:
            bank, offset = divmod(address, BANK_SIZE)
            self.current_bank = bank
            length = min(size, BANK_SIZE - offset)
            yield address, length
            address += length
            size -= length

    def read(self, address: int, size: int) -> bytes:
        return b"".join(
            bytes(self._memory[start:start + length])
            for start, length in self._chunks(address, size)
        )

    def write(self, address: int, data: bytes) -> None:
        data = bytes(data)
        done = 0
        for start, length in self._chunks(address, len(data)):
            self._memory[start:start + length] = data[done:done + length]
            done += length

    def verify(self, address: int, data: bytes) -> bool:
        """Whether the save holds ``data`` at ``address`` (up to the chip's end)."""
        data = bytes(data)
        done = 0
        for start, length in self._chunks(address, len(data)):
            if self._memory[start:start + length] != data[done:done + length]:
                return False
            done += length
        return True

    def read_byte(self, address: int) -> int:
        address %= SAVE_SIZE
        self.current_bank = address // BANK_SIZE
        return self._memory[address]

    def write_byte(self, address: int, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte out of range: {value}")
        address %= SAVE_SIZE
        self.current_bank = address // BANK_SIZE
        self._memory[address] = value

    def _read_le(self, address: int, width: int) -> int:
        return int.from_bytes(self.read(address, width).ljust(width, b"\0"), "little")

    def read_short(self, address: int) -> int:
        return self._read_le(address, 2)

    def read_int(self, address: int) -> int:
        return self._read_le(address, 4)

    def write_short(self, address: int, value: int) -> None:
        self.write(address, (value & 0xFFFF).to_bytes(2, "little"))

    def write_int(self, address: int, value: int) -> None:
        self.write(address, (value & 0xFFFFFFFF).to_bytes(4, "little"))

    def erase_sector(self, address: int) -> None:
        """Erase the 4 KiB sector holding ``address`` back to 0xFF."""
        address %= SAVE_SIZE
        self.current_bank = address // BANK_SIZE
        start = address & ~(SECTOR_SIZE - 1)
        self._memory[start:start + SECTOR_SIZE] = bytes([ERASED_BYTE]) * SECTOR_SIZE