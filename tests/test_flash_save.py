import pytest

from gbtransfer.flash_save import (
    BANK_SIZE,
    CLOCK_SPEED,
    ERASED_BYTE,
    SAVE_SIZE,
    SECTOR_SIZE,
    FlashSave,
    clock_cycles_per_ms,
    clock_cycles_per_us,
)


def test_fresh_chip_is_erased():
    flash = FlashSave()
    assert flash.read(0, 16) == bytes([ERASED_BYTE]) * 16


def test_byte_round_trip():
    flash = FlashSave()
    flash.write_byte(0x1234, 0x5A)
    assert flash.read_byte(0x1234) == 0x5A


def test_short_is_little_endian():
    flash = FlashSave()
    flash.write_short(0x10, 0x1234)
    assert flash.read(0x10, 2) == bytes([0x34, 0x12])
    assert flash.read_short(0x10) == 0x1234


def test_int_across_bank_boundary():
    flash = FlashSave()
    flash.write_int(BANK_SIZE - 2, 0x11223344)
    assert flash.read_int(BANK_SIZE - 2) == 0x11223344
    assert flash.current_bank == 1


def test_address_wraps():
    flash = FlashSave()
    flash.write_byte(SAVE_SIZE + 5, 7)
    assert flash.read_byte(5) == 7


def test_read_is_cut_at_chip_end():
    flash = FlashSave()
    assert len(flash.read(SAVE_SIZE - 2, 4)) == 2


def test_read_int_at_chip_end_pads_with_zero():
    flash = FlashSave()
    flash.write(SAVE_SIZE - 2, bytes([0x01, 0x02]))
    assert flash.read_int(SAVE_SIZE - 2) == 0x0201


def test_write_round_trip_and_verify():
    flash = FlashSave()
    payload = bytes(range(40))
    flash.write(0x3000, payload)
    assert flash.read(0x3000, len(payload)) == payload
    assert flash.verify(0x3000, payload)
    assert not flash.verify(0x3000, bytes(40))


def test_erase_sector_clears_only_its_sector():
    flash = FlashSave()
    flash.write(SECTOR_SIZE, bytes(SECTOR_SIZE))
    flash.write_byte(2 * SECTOR_SIZE, 0)
    flash.erase_sector(2 * SECTOR_SIZE - 1)
    assert flash.read(SECTOR_SIZE, SECTOR_SIZE) == bytes([ERASED_BYTE]) * SECTOR_SIZE
    assert flash.read_byte(2 * SECTOR_SIZE) == 0


def test_manufacturer_detection():
    assert FlashSave(0xC2).is_macronix
    assert FlashSave(0x62).is_macronix
    assert not FlashSave(0x1F).is_macronix


def test_write_byte_out_of_range():
    with pytest.raises(ValueError):
        FlashSave().write_byte(0, 0x100)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FlashSave().read(0, -1)


def test_clock_cycles():
    assert clock_cycles_per_ms(1000) == CLOCK_SPEED
    assert clock_cycles_per_us(1_000_000) == CLOCK_SPEED
    assert clock_cycles_per_ms(1) * 1000 >= CLOCK_SPEED
    assert (clock_cycles_per_ms(1) - 1) * 1000 < CLOCK_SPEED