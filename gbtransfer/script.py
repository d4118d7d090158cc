"""The branching scripts that drive Professor Fennel's conversations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator, Mapping, Union

from gbtransfer.dialogue import Line, dialogue_text


class Step(Enum):
    """Script entries that are not dialogue: start points, conditions and commands."""

    T_SCRIPT_START = auto()
    E_SCRIPT_START = auto()

    COND_TUTORIAL_COMPLETE = auto()
    COND_BEAT_E4 = auto()
    COND_MG_ENABLED = auto()
    COND_IS_FRLGE = auto()
    COND_MG_OTHER_EVENT = auto()
    COND_PKMN_TO_COLLECT = auto()
    COND_GB_ROM_EXISTS = auto()
    COND_ERROR_TIMEOUT_ONE = auto()
    COND_ERROR_TIMEOUT_TWO = auto()
    COND_ERROR_COM_ENDED = auto()
    COND_ERROR_COLOSSEUM = auto()
    COND_ERROR_DISCONNECT = auto()
    COND_SOME_INVALID_PKMN = auto()
    COND_CHECK_MYTHIC = auto()
    COND_CHECK_MISSINGNO = auto()
    COND_NEW_POKEMON = auto()
    COND_IS_HOENN_RS = auto()
    COND_IS_HOENN_E = auto()
    COND_CHECK_DEX = auto()
    COND_CHECK_KANTO = auto()

    CMD_SHOW_PROF = auto()
    CMD_HIDE_PROF = auto()
    CMD_SET_TUTOR_TRUE = auto()
    CMD_END_SCRIPT = auto()
    CMD_GAME_MENU = auto()
    CMD_LANG_MENU = auto()
    CMD_SLIDE_PROF_LEFT = auto()
    CMD_SLIDE_PROF_RIGHT = auto()
    CMD_START_LINK = auto()
    CMD_LOAD_SIMP = auto()
    CMD_MYTHIC_MENU = auto()
    CMD_BOX_MENU = auto()
    CMD_IMPORT_POKEMON = auto()
    CMD_CONTINUE_LINK = auto()
    CMD_CANCEL_LINK = auto()
    CMD_END_MISSINGNO = auto()
    CMD_BACK_TO_MENU = auto()


Key = Union[Step, Line]
Script = Mapping[Key, "ScriptStep"]
RunConditional = Callable[[Step], bool]


@dataclass(frozen=True)
class ScriptStep:
    """One entry of a script.

    A step either shows ``text`` and moves on to ``if_true``, or runs
    ``condition`` and moves to ``if_true`` or ``if_false`` by its result.
    A target of None ends the script there.
    """

    if_true: Key | None
    if_false: Key | None = None
    condition: Step | None = None
    text: str = ""

    def next_index(self, run_conditional: RunConditional) -> Key | None:
        """Return the key of the step that follows, running the condition if there is one."""
        if self.condition is None:
            return self.if_true
        return self.if_true if run_conditional(self.condition) else self.if_false


def _say(line: Line, following: Key) -> ScriptStep:
    return ScriptStep(if_true=following, text=dialogue_text(line))


def _run(condition: Step, following: Key | None) -> ScriptStep:
    return ScriptStep(if_true=following, if_false=following, condition=condition)


def _branch(condition: Step, if_true: Key | None, if_false: Key | None) -> ScriptStep:
    return ScriptStep(if_true=if_true, if_false=if_false, condition=condition)


def build_transfer_script() -> dict[Key, ScriptStep]:
    """The conversation that checks the save and transfers a box of Pokémon."""
    S, L = Step, Line
    return {
        # Check that the conditions are set for the transfer
        S.T_SCRIPT_START: _run(S.CMD_SHOW_PROF, S.COND_TUTORIAL_COMPLETE),
        S.COND_TUTORIAL_COMPLETE: _branch(S.COND_TUTORIAL_COMPLETE, S.COND_BEAT_E4, L.OPEN),
        L.OPEN: _say(L.OPEN, S.CMD_SET_TUTOR_TRUE),
        S.CMD_SET_TUTOR_TRUE: _run(S.CMD_SET_TUTOR_TRUE, S.CMD_END_SCRIPT),
        S.COND_BEAT_E4: _branch(S.COND_BEAT_E4, S.COND_MG_ENABLED, L.E4),
        L.E4: _say(L.E4, S.CMD_END_SCRIPT),
        S.COND_MG_ENABLED: _branch(S.COND_MG_ENABLED, S.COND_MG_OTHER_EVENT, S.COND_IS_FRLGE),
        S.COND_IS_FRLGE: _branch(S.COND_IS_FRLGE, L.MG_FRLGE, L.MG_RS),
        L.MG_FRLGE: _say(L.MG_FRLGE, S.CMD_END_SCRIPT),
        L.MG_RS: _say(L.MG_RS, S.CMD_END_SCRIPT),
        S.COND_MG_OTHER_EVENT: _branch(
            S.COND_MG_OTHER_EVENT, L.MG_OTHER_EVENT, S.COND_PKMN_TO_COLLECT
        ),
        S.COND_PKMN_TO_COLLECT: _branch(S.COND_PKMN_TO_COLLECT, L.PKMN_TO_COLLECT, L.ASK_QUEST),
        L.MG_OTHER_EVENT: _say(L.MG_OTHER_EVENT, L.ASK_QUEST),
        L.PKMN_TO_COLLECT: _say(L.PKMN_TO_COLLECT, S.CMD_END_SCRIPT),
        # Ask the user what game and language they're using
        L.WHAT_GAME_TRANS: _say(L.WHAT_GAME_TRANS, S.CMD_GAME_MENU),
        S.CMD_GAME_MENU: _branch(S.CMD_GAME_MENU, S.COND_GB_ROM_EXISTS, L.WHAT_LANG_TRANS),
        L.WHAT_LANG_TRANS: _say(L.WHAT_LANG_TRANS, S.CMD_LANG_MENU),
        S.CMD_LANG_MENU: _branch(S.CMD_LANG_MENU, L.WHAT_GAME_TRANS, L.MENU_BACK),
        L.ASK_QUEST: _say(L.ASK_QUEST, S.CMD_SLIDE_PROF_LEFT),
        S.CMD_SLIDE_PROF_LEFT: _run(S.CMD_SLIDE_PROF_LEFT, L.WHAT_LANG_TRANS),
        S.CMD_SLIDE_PROF_RIGHT: _run(S.CMD_SLIDE_PROF_RIGHT, L.LETS_START),
        S.COND_GB_ROM_EXISTS: _branch(S.COND_GB_ROM_EXISTS, S.CMD_SLIDE_PROF_RIGHT, L.NO_GB_ROM),
        L.NO_GB_ROM: _say(L.NO_GB_ROM, L.WHAT_LANG_TRANS),
        L.MENU_BACK: _say(L.MENU_BACK, S.CMD_END_SCRIPT),
        # Initiate the transfer and check for errors
        L.LETS_START: _say(L.LETS_START, L.START),
        L.START: _say(L.START, S.CMD_START_LINK),
        S.CMD_START_LINK: _run(S.CMD_START_LINK, S.COND_ERROR_TIMEOUT_ONE),
        S.COND_ERROR_TIMEOUT_ONE: _branch(
            S.COND_ERROR_TIMEOUT_ONE, S.COND_ERROR_TIMEOUT_TWO, L.ERROR_TIME_ONE
        ),
        L.ERROR_TIME_ONE: _say(L.ERROR_TIME_ONE, L.START),
        S.COND_ERROR_TIMEOUT_TWO: _branch(
            S.COND_ERROR_TIMEOUT_TWO, S.COND_ERROR_COM_ENDED, L.ERROR_TIME_TWO
        ),
        L.ERROR_TIME_TWO: _say(L.ERROR_TIME_TWO, L.START),
        S.COND_ERROR_COM_ENDED: _branch(
            S.COND_ERROR_COM_ENDED, S.COND_ERROR_COLOSSEUM, L.ERROR_COM_ENDED
        ),
        L.ERROR_COM_ENDED: _say(L.ERROR_COM_ENDED, L.START),
        S.COND_ERROR_COLOSSEUM: _branch(
            S.COND_ERROR_COLOSSEUM, S.COND_ERROR_DISCONNECT, L.ERROR_COLOSSEUM
        ),
        L.ERROR_COLOSSEUM: _say(L.ERROR_COLOSSEUM, L.START),
        S.COND_ERROR_DISCONNECT: _branch(
            S.COND_ERROR_DISCONNECT, S.CMD_LOAD_SIMP, L.ERROR_DISCONNECT
        ),
        L.ERROR_DISCONNECT: _say(L.ERROR_DISCONNECT, L.START),
        # Pause the transfer and show the user their box data
        S.CMD_LOAD_SIMP: _branch(S.CMD_LOAD_SIMP, S.COND_SOME_INVALID_PKMN, L.NO_VALID_PKMN),
        L.NO_VALID_PKMN: _say(L.NO_VALID_PKMN, S.CMD_CANCEL_LINK),
        S.COND_SOME_INVALID_PKMN: _branch(
            S.COND_SOME_INVALID_PKMN, L.SOME_INVALID_PKMN, S.COND_CHECK_MYTHIC
        ),
        L.SOME_INVALID_PKMN: _say(L.SOME_INVALID_PKMN, S.COND_CHECK_MYTHIC),
        S.COND_CHECK_MYTHIC: _branch(S.COND_CHECK_MYTHIC, L.MYTHIC_CONVERT, S.COND_CHECK_MISSINGNO),
        L.MYTHIC_CONVERT: _say(L.MYTHIC_CONVERT, S.CMD_MYTHIC_MENU),
        S.CMD_MYTHIC_MENU: _run(S.CMD_MYTHIC_MENU, S.COND_CHECK_MISSINGNO),
        S.COND_CHECK_MISSINGNO: _branch(S.COND_CHECK_MISSINGNO, L.IS_MISSINGNO, L.IN_BOX),
        L.IS_MISSINGNO: _say(L.IS_MISSINGNO, L.IN_BOX),
        L.IN_BOX: _say(L.IN_BOX, S.CMD_BOX_MENU),
        S.CMD_BOX_MENU: _branch(S.CMD_BOX_MENU, S.CMD_IMPORT_POKEMON, L.CANCEL),
        L.CANCEL: _say(L.CANCEL, S.CMD_CANCEL_LINK),
        S.CMD_IMPORT_POKEMON: _run(S.CMD_IMPORT_POKEMON, S.CMD_CONTINUE_LINK),
        S.CMD_CONTINUE_LINK: _run(S.CMD_CONTINUE_LINK, S.CMD_END_MISSINGNO),
        S.CMD_CANCEL_LINK: _run(S.CMD_CANCEL_LINK, S.CMD_END_SCRIPT),
        S.CMD_END_MISSINGNO: _run(S.CMD_END_MISSINGNO, L.TRANS_GOOD),
        # Complete the transfer and give messages based on the transferred Pokémon
        L.TRANS_GOOD: _say(L.TRANS_GOOD, S.COND_NEW_POKEMON),
        S.COND_NEW_POKEMON: _branch(S.COND_NEW_POKEMON, L.NEW_DEX, L.NO_NEW_DEX),
        L.NEW_DEX: _say(L.NEW_DEX, S.COND_IS_HOENN_RS),
        L.NO_NEW_DEX: _say(L.NO_NEW_DEX, S.COND_IS_HOENN_RS),
        S.COND_IS_HOENN_RS: _branch(S.COND_IS_HOENN_RS, L.SEND_FRIEND_HOENN_RS, S.COND_IS_HOENN_E),
        S.COND_IS_HOENN_E: _branch(S.COND_IS_HOENN_E, L.SEND_FRIEND_HOENN_E, L.SEND_FRIEND_KANTO),
        L.SEND_FRIEND_HOENN_RS: _say(L.SEND_FRIEND_HOENN_RS, L.THANK),
        L.SEND_FRIEND_HOENN_E: _say(L.SEND_FRIEND_HOENN_E, L.THANK),
        L.SEND_FRIEND_KANTO: _say(L.SEND_FRIEND_KANTO, L.THANK),
        L.THANK: _say(L.THANK, S.CMD_END_SCRIPT),
        # Hide the dialogue and professor
        S.CMD_END_SCRIPT: _run(S.CMD_END_SCRIPT, S.CMD_BACK_TO_MENU),
        S.CMD_BACK_TO_MENU: _run(S.CMD_BACK_TO_MENU, S.T_SCRIPT_START),
    }


def build_event_script() -> dict[Key, ScriptStep]:
    """The conversation that checks the Pokédex before sending an event.

    A complete Pokédex leads to no further step, so a walk ends there.
    """
    S, L = Step, Line
    return {
        S.E_SCRIPT_START: _run(S.CMD_SHOW_PROF, L.ASK_QUEST),
        L.ASK_QUEST: _say(L.ASK_QUEST, S.CMD_SLIDE_PROF_LEFT),
        L.WHAT_GAME_EVENT: _say(L.WHAT_GAME_EVENT, S.CMD_GAME_MENU),
        S.CMD_GAME_MENU: _branch(S.CMD_GAME_MENU, S.COND_GB_ROM_EXISTS, L.WHAT_LANG_EVENT),
        L.WHAT_LANG_EVENT: _say(L.WHAT_LANG_EVENT, S.CMD_LANG_MENU),
        S.CMD_LANG_MENU: _run(S.CMD_LANG_MENU, L.WHAT_GAME_EVENT),
        S.CMD_SLIDE_PROF_LEFT: _run(S.CMD_SLIDE_PROF_LEFT, L.WHAT_LANG_EVENT),
        S.CMD_SLIDE_PROF_RIGHT: _run(S.CMD_SLIDE_PROF_RIGHT, S.COND_CHECK_DEX),
        S.COND_GB_ROM_EXISTS: _branch(S.COND_GB_ROM_EXISTS, S.CMD_SLIDE_PROF_RIGHT, L.NO_GB_ROM),
        L.NO_GB_ROM: _say(L.NO_GB_ROM, L.WHAT_LANG_EVENT),
        # Check the player's dex
        S.COND_CHECK_DEX: _branch(S.COND_CHECK_DEX, None, S.COND_CHECK_KANTO),
        S.COND_CHECK_KANTO: _branch(S.COND_CHECK_KANTO, L.K_DEX_NOT_FULL, L.J_DEX_NOT_FULL),
        L.K_DEX_NOT_FULL: _say(L.K_DEX_NOT_FULL, S.CMD_END_SCRIPT),
        L.J_DEX_NOT_FULL: _say(L.J_DEX_NOT_FULL, S.CMD_END_SCRIPT),
        # Hide the dialogue and professor
        S.CMD_END_SCRIPT: _run(S.CMD_END_SCRIPT, S.CMD_BACK_TO_MENU),
        S.CMD_BACK_TO_MENU: _run(S.CMD_BACK_TO_MENU, S.T_SCRIPT_START),
    }


def walk(
    script: Script,
    start: Key,
    run_conditional: RunConditional,
    limit: int | None = None,
) -> Iterator[Key]:
    """Yield the keys of the steps visited from ``start``.

    The walk ends after the back-to-menu command has run, at a step with no
    target, or after ``limit`` steps. A target missing from the script raises
    KeyError.
    """
    key: Key | None = start
    visited = 0
    while key is not None:
        if limit is not None and visited >= limit:
            return
        step = script[key]
        yield key
        visited += 1
        following = step.next_index(run_conditional)
        if step.condition is Step.CMD_BACK_TO_MENU:
            return
        key = following