"""A small assembler for the Game Boy CPU with patchable variables and jumps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Z80AsmError(ValueError):
    """Raised for an instruction whose operands have no encoding."""


class Reg8(Enum):
    """8-bit registers, with (HL) in the slot the CPU gives it."""

    B = 0
    C = 1
    D = 2
    E = 3
    H = 4
    L = 5
    HL_PTR = 6
    A = 7


class Reg16(Enum):
    """16-bit register pairs. AF is only valid for PUSH and POP."""

    BC = 0
    DE = 1
    HL = 2
    SP = 3
    AF = 4


class RegPtr(Enum):
    """Register pairs used as pointers by LD (rr),A and LD A,(rr)."""

    BC = 0
    DE = 1
    HLI = 2
    HLD = 3


class Condition(Enum):
    """Branch conditions."""

    NZ = 0
    Z = 1
    NC = 2
    C = 3


@dataclass(frozen=True)
class U8:
    """An unsigned 8-bit immediate."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise Z80AsmError(f"u8 immediate out of range: {self.value}")


@dataclass(frozen=True)
class U16:
    """An unsigned 16-bit immediate or address."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise Z80AsmError(f"u16 immediate out of range: {self.value}")


@dataclass(frozen=True)
class I8:
    """A signed 8-bit immediate or relative distance."""

    value: int

    def __post_init__(self) -> None:
        if not -0x80 <= self.value <= 0x7F:
            raise Z80AsmError(f"i8 immediate out of range: {self.value}")


_ALU_OPCODES = {
    "ADD": (0x80, 0xC6),
    "ADC": (0x88, 0xCE),
    "SUB": (0x90, 0xD6),
    "SBC": (0x98, 0xDE),
    "AND": (0xA0, 0xE6),
    "XOR": (0xA8, 0xEE),
    "OR": (0xB0, 0xF6),
    "CP": (0xB8, 0xFE),
}


def _invalid(mnemonic: str, *operands: object) -> Z80AsmError:
    listed = ", ".join(repr(op) for op in operands)
    return Z80AsmError(f"Invalid Z80 {mnemonic} command: {listed}")


def _is_pair(reg: object) -> bool:
    return isinstance(reg, Reg16) and reg is not Reg16.AF


class Z80Assembler:
    """Writes instructions into a fixed-size buffer placed at ``memory_offset``."""

    def __init__(self, size: int, memory_offset: int) -> None:
        self.data = bytearray(size)
        self.index = 0
        self.memory_offset = memory_offset

    def add_byte(self, value: int) -> None:
        if self.index >= len(self.data):
            raise IndexError("assembler buffer is full")
        self.data[self.index] = value & 0xFF
        self.index += 1

    def add_bytes(self, *args: int) -> None:
        for value in args:
            self.add_byte(value)

    def _add_word(self, value: int) -> None:
        self.add_byte(value)
        self.add_byte(value >> 8)

    def generate_patchlist(self, source: "Z80Assembler") -> None:
        """Record every 0xFE byte of ``source`` as a patch entry and clear it to 0xFF."""
        past_limit = False
        for i, value in enumerate(source.data):
            if i - 19 == 0x100 and not past_limit:
                self.add_byte(0xFF)  # following entries are more than 0xFF away
                past_limit = True
            if value == 0xFE:
                self.add_byte(i - (0x19 + (0xFC if past_limit else 0)))
                source.data[i] = 0xFF
        self.add_byte(0xFF)

    def ld(self, destination, source) -> None:
        d, s = destination, source
        if _is_pair(d) and isinstance(s, U16):
            self.add_byte(0x01 | d.value << 4)
            self._add_word(s.value)
        elif isinstance(d, RegPtr) and s is Reg8.A:
            self.add_byte(0x02 | d.value << 4)
        elif isinstance(d, Reg8) and isinstance(s, U8):
            self.add_byte(0x06 | d.value << 3)
            self.add_byte(s.value)
        elif isinstance(d, U16) and s is Reg16.SP:
            self.add_byte(0x08)
        elif d is Reg8.A and isinstance(s, RegPtr):
            self.add_byte(0x0A | s.value << 4)
        elif (
            isinstance(d, Reg8)
            and isinstance(s, Reg8)
            and not (d is Reg8.HL_PTR and s is Reg8.HL_PTR)
        ):
            self.add_byte(0x40 | d.value << 3 | s.value)
        elif isinstance(d, U16) and s is Reg8.A:
            self.add_byte(0xEA)
            self._add_word(d.value)
        elif d is Reg8.A and isinstance(s, U16):
            self.add_byte(0xFA)
            self._add_word(s.value)
        elif d is Reg16.SP and s is Reg16.HL:
            self.add_byte(0xF9)
        else:
            raise _invalid("LD", destination, source)

    def halt(self) -> None:
        self.add_byte(0x76)

    def _alu(self, mnemonic: str, destination, source) -> None:
        register_op, immediate_op = _ALU_OPCODES[mnemonic]
        if destination is Reg8.A and isinstance(source, Reg8):
            self.add_byte(register_op | source.value)
        elif destination is Reg8.A and isinstance(source, U8):
            self.add_byte(immediate_op)
            self.add_byte(source.value)
        else:
            raise _invalid(mnemonic, destination, source)

    def add(self, destination, source) -> None:
        if destination is Reg16.HL and _is_pair(source):
            self.add_byte(0x09 | source.value << 4)
        elif destination is Reg16.SP and isinstance(source, I8):
            self.add_byte(0xE8)
            self.add_byte(source.value)
        else:
            self._alu("ADD", destination, source)

    def adc(self, destination, source) -> None:
        self._alu("ADC", destination, source)

    def sub(self, destination, source) -> None:
        self._alu("SUB", destination, source)

    def sbc(self, destination, source) -> None:
        self._alu("SBC", destination, source)

    def and_(self, destination, source) -> None:
        self._alu("AND", destination, source)

    def xor(self, destination, source) -> None:
        self._alu("XOR", destination, source)

    def or_(self, destination, source) -> None:
        self._alu("OR", destination, source)

    def cp(self, destination, source) -> None:
        self._alu("CP", destination, source)

    def nop(self) -> None:
        self.add_byte(0x00)

    def stop(self) -> None:
        self.add_byte(0x10)

    def inc(self, reg) -> None:
        if _is_pair(reg):
            self.add_byte(0x03 | reg.value << 4)
        elif isinstance(reg, Reg8):
            self.add_byte(0x04 | reg.value << 3)
        else:
            raise _invalid("INC", reg)

    def dec(self, reg) -> None:
        if _is_pair(reg):
            self.add_byte(0x0B | reg.value << 4)
        elif isinstance(reg, Reg8):
            self.add_byte(0x05 | reg.value << 3)
        else:
            raise _invalid("DEC", reg)

    def _rotate(self, reg, kind: int) -> None:
        if reg is Reg8.A:
            self.add_byte(0x07 | kind << 3)
        elif isinstance(reg, Reg8):
            self.add_byte(0xCB)
            self.add_byte(kind << 3 | reg.value)
        else:
            raise _invalid("ROT", reg)

    def rlc(self, reg) -> None:
        self._rotate(reg, 0x00)

    def rrc(self, reg) -> None:
        self._rotate(reg, 0x01)

    def rl(self, reg) -> None:
        self._rotate(reg, 0x02)

    def rr(self, reg) -> None:
        self._rotate(reg, 0x03)

    def jr(self, distance, condition=None) -> None:
        if not isinstance(distance, I8):
            raise _invalid("JR", condition, distance)
        if condition is None:
            self.add_byte(0x18)
        elif isinstance(condition, Condition):
            self.add_byte(0x20 | condition.value << 3)
        else:
            raise _invalid("JR", condition, distance)
        self.add_byte(distance.value)

    def daa(self) -> None:
        self.add_byte(0x27)

    def cpl(self) -> None:
        self.add_byte(0x2F)

    def scf(self) -> None:
        self.add_byte(0x37)

    def ccf(self) -> None:
        self.add_byte(0x3F)

    def ret(self, condition=None) -> None:
        if condition is None:
            self.add_byte(0xC9)
        elif isinstance(condition, Condition):
            self.add_byte(0xC0 | condition.value << 3)
        else:
            raise _invalid("RET", condition)

    def reti(self) -> None:
        self.add_byte(0xD9)

    @staticmethod
    def _stack_code(reg, mnemonic: str) -> int:
        if reg in (Reg16.BC, Reg16.DE, Reg16.HL):
            return reg.value
        if reg is Reg16.AF:
            return 3
        raise _invalid(mnemonic, reg)

    def push(self, source) -> None:
        self.add_byte(0xC5 | self._stack_code(source, "PUSH") << 4)

    def pop(self, destination) -> None:
        self.add_byte(0xC1 | self._stack_code(destination, "POP") << 4)

    def jp(self, destination, condition=None) -> None:
        if condition is None:
            if isinstance(destination, U16):
                self.add_byte(0xC3)
                self._add_word(destination.value)
            elif destination is Reg16.HL:
                self.add_byte(0xE9)
            else:
                raise _invalid("JP", destination)
        elif isinstance(condition, Condition) and isinstance(destination, U16):
            self.add_byte(0xC2 | condition.value << 3)
            self._add_word(destination.value)
        else:
            raise _invalid("JP", condition, destination)

    def call(self, destination, condition=None) -> None:
        if not isinstance(destination, U16):
            raise _invalid("CALL", condition, destination)
        if condition is None:
            self.add_byte(0xCD)
        elif isinstance(condition, Condition):
            self.add_byte(0xC4 | condition.value << 3)
        else:
            raise _invalid("CALL", condition, destination)
        self._add_word(destination.value)

    def rst(self, vector: int) -> None:
        if isinstance(vector, int) and 0 <= vector <= 0x38 and vector % 8 == 0:
            self.add_byte(0xC7 | vector)
        else:
            raise _invalid("RST", vector)

    def ldh(self, destination, source) -> None:
        if isinstance(destination, U8) and source is Reg8.A:
            self.add_byte(0xE0)
            self.add_byte(destination.value)
        elif destination is Reg8.C and source is Reg8.A:
            self.add_byte(0xE2)
        elif destination is Reg8.A and isinstance(source, U8):
            self.add_byte(0xF0)
            self.add_byte(source.value)
        elif destination is Reg8.A and source is Reg8.C:
            self.add_byte(0xE2)
        else:
            raise _invalid("LDH", destination, source)

    def di(self) -> None:
        self.add_byte(0xF3)

    def ei(self) -> None:
        self.add_byte(0xFB)

    def ldhl(self, offset) -> None:
        if not isinstance(offset, I8):
            raise _invalid("LDHL", offset)
        self.add_byte(0xF8)
        self.add_byte(offset.value)

    def _cb(self, mnemonic: str, base: int, reg) -> None:
        if not isinstance(reg, Reg8):
            raise _invalid(mnemonic, reg)
        self.add_byte(0xCB)
        self.add_byte(base | reg.value)

    def sla(self, reg) -> None:
        self._cb("SLA", 0x20, reg)

    def sra(self, reg) -> None:
        self._cb("SRA", 0x28, reg)

    def swap(self, reg) -> None:
        self._cb("SWAP", 0x30, reg)

    def srl(self, reg) -> None:
        self._cb("SRL", 0x38, reg)

    def _bit_op(self, mnemonic: str, base: int, bit: int, reg) -> None:
        if not (isinstance(bit, int) and 0 <= bit <= 7 and isinstance(reg, Reg8)):
            raise _invalid(mnemonic, bit, reg)
        self.add_byte(0xCB)
        self.add_byte(base | bit << 3 | reg.value)

    def bit(self, bit: int, reg) -> None:
        self._bit_op("BIT", 0x40, bit, reg)

    def res(self, bit: int, reg) -> None:
        self._bit_op("RES", 0x80, bit, reg)

    def set(self, bit: int, reg) -> None:
        self._bit_op("SET", 0xC0, bit, reg)


class Z80Variable:
    """A block of data placed in assembled code, with pointers to it patched later."""

    def __init__(self, registry: list, data: Iterable[int] | None = None) -> None:
        registry.append(self)
        self.data = bytes(value & 0xFF for value in data) if data is not None else b""
        self.location: int | None = None
        self._pointers: list[tuple[Z80Assembler, int]] = []

    def load_data(self, data: Iterable[int]) -> None:
        self.data = bytes(value & 0xFF for value in data)

    def insert_variable(self, assembler: Z80Assembler) -> None:
        self.location = (assembler.index - 1) + assembler.memory_offset
        for value in self.data:
            assembler.add_byte(value)

    def place_ptr(self, assembler: Z80Assembler) -> int:
        """Mark the operand of the next instruction as a pointer; returns a placeholder."""
        self._pointers.append((assembler, assembler.index + 1))
        return 0x0000

    def update_ptrs(self) -> None:
        if self.location is None:
            raise Z80AsmError("variable has not been inserted")
        for assembler, position in self._pointers:
            assembler.data[position] = self.location & 0xFF
            assembler.data[position + 1] = (self.location >> 8) & 0xFF


class Z80Jump:
    """A jump target whose direct and relative references are patched later."""

    def __init__(self, registry: list) -> None:
        registry.append(self)
        self.location: int | None = None
        self._references: list[tuple[Z80Assembler, int, bool]] = []

    def set_start(self, assembler: Z80Assembler) -> None:
        self.location = (assembler.index - 1) + assembler.memory_offset

    def place_direct_jump(self, assembler: Z80Assembler) -> int:
        self._references.append((assembler, assembler.index + 1, False))
        return 0x0000

    def place_relative_jump(self, assembler: Z80Assembler) -> int:
        self._references.append((assembler, assembler.index + 1, True))
        return 0x0000

    def place_pointer(self, assembler: Z80Assembler) -> int:
        """Mark the next two bytes written as a direct pointer to this target."""
        self._references.append((assembler, assembler.index, False))
        return 0x0000

    def update_jumps(self) -> None:
        if self.location is None:
            raise Z80AsmError("jump target has not been set")
        for assembler, position, relative in self._references:
            if relative:
                distance = self.location - (position + assembler.memory_offset)
                assembler.data[position] = distance & 0xFF
            else:
                assembler.data[position] = self.location & 0xFF
                assembler.data[position + 1] = (self.location >> 8) & 0xFF