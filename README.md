# gbtransfer

Building blocks for moving Pokémon between Game Boy and Game Boy Advance
games. The package needs nothing beyond the standard library.

## Modules

- `gbtransfer.z80_asm`: an assembler for the Game Boy CPU. `Z80Assembler`
  writes opcodes into a fixed-size buffer placed at a memory offset. Typed
  operands (`Reg8`, `Reg16`, `RegPtr`, `Condition`, `U8`, `U16`, `I8`) select
  the encoding. An operand combination with no encoding, or an immediate out of
  range, raises `Z80AsmError`. `Z80Variable` and `Z80Jump` record where
  pointers and jumps were placed and patch them with `update_ptrs()` and
  `update_jumps()` once the final addresses are known.
  `generate_patchlist(source)` writes a patch list for every 0xFE byte of
  another assembler's buffer and replaces those bytes with 0xFF.
- `gbtransfer.flash_save`: `FlashSave`, an in-memory model of a 128 KiB flash
  save made of two 64 KiB banks. It offers byte, 16-bit and 32-bit little-endian
  access, `read`, `write` and `verify` across bank boundaries, and
  `erase_sector` for 4 KiB sectors. Addresses wrap at the end of the chip, and
  accesses that run past the end are cut short. `clock_cycles_per_ms` and
  `clock_cycles_per_us` convert times into CPU cycles, rounded up.
- `gbtransfer.save_data`: `CustomSaveData` holds a tutorial flag, a default
  language and the caught bits for dex numbers 0 to 251. It provides
  `is_caught`, `set_caught`, `reset`, `dex_completion(gen, include_mythicals)`
  and the `language` and `tutorial_complete` properties. `load` and `store`
  read the data from, or write it to, an offset inside a 4 KiB section of a
  `FlashSave`. `store` keeps the rest of the section and does not update the
  section's checksum.
- `gbtransfer.menus`: `SelectMenu` is a list of options with a wrapping cursor.
  An option whose value is `None`, or a cancel when cancelling is enabled,
  raises `MenuCancelled`. `language_options()` and `game_options(language)`
  list the `LanguageId` and `GameId` choices offered for each language.
- `gbtransfer.dialogue`: the professor's lines (`Line`, `dialogue_text`), with
  pages split on `|` by `split_pages`. `TextPager` reveals a text one character
  at a time, or a whole page at once, and reports the speaking animation frame.
- `gbtransfer.script`: the transfer and event conversations as graphs of
  `ScriptStep`s, keyed by `Step` or `Line` (`build_transfer_script`,
  `build_event_script`). `walk` follows a graph from a start key, calling your
  function for each condition or command.

## Examples

```python
from gbtransfer.z80_asm import Z80Assembler, Reg8, U8

code = Z80Assembler(8, 0xC000)
code.ld(Reg8.A, U8(0x42))
code.ret()
assert bytes(code.data[:3]) == b"\x3e\x42\xc9"
```

```python
from gbtransfer.flash_save import FlashSave
from gbtransfer.save_data import CustomSaveData

flash = FlashSave(0xC2)
flash.write(0x1000, b"\x01\x02")
assert flash.read(0x1000, 2) == b"\x01\x02"

save = CustomSaveData()
save.set_caught(25)
save.store(flash, 0x2000, 0x100)
loaded = CustomSaveData()
loaded.load(flash, 0x2000, 0x100)
assert loaded.is_caught(25)
```

```python
from gbtransfer.menus import SelectMenu, LanguageId, GameId, game_options

menu = SelectMenu()
for label, value in game_options(LanguageId.KOREAN):
    menu.add_option(label, value)
menu.move_down()
assert menu.select() is GameId.SILVER
```

```python
from gbtransfer.dialogue import TextPager

pager = TextPager("Hi|there")
assert pager.advance(instant=True) == "Hi"
assert pager.next_page()
assert pager.advance(instant=True) == "there"
assert not pager.next_page()
```

```python
from gbtransfer.script import Step, build_transfer_script, walk

keys = list(walk(build_transfer_script(), Step.T_SCRIPT_START, lambda step: True, limit=5))
```

## What the package does not do

It does not talk to hardware. There is no link-cable trade, no real flash chip
and nothing drawn on a screen. `FlashSave` works in memory, and the menus,
pager and scripts are driven by calls that you make. It has no tables of
addresses for particular game versions, and it does not build the event
scripts that are placed in a save. The conditions and commands in a script are
only names (`Step` members). What running them does is up to the function you
pass to `walk`. The package has no command-line program.

## Tests

```
pip install -e .[test]
pytest
```