import pytest

from gbtransfer.dialogue import Line, dialogue_text
from gbtransfer.script import (
    ScriptStep,
    Step,
    build_event_script,
    build_transfer_script,
    walk,
)


def answers(**overrides):
    """A conditional runner that answers True unless told otherwise, recording calls."""
    calls = []

    def run(condition):
        calls.append(condition)
        return overrides.get(condition.name, True)

    run.calls = calls
    return run


def never_called(condition):
    raise AssertionError(f"condition {condition} should not run")


def test_text_step_does_not_run_conditional():
    step = ScriptStep(if_true=Step.CMD_END_SCRIPT, text="hello")
    assert step.next_index(never_called) is Step.CMD_END_SCRIPT


def test_conditional_step_branches():
    step = ScriptStep(if_true=Line.E4, if_false=Line.OPEN, condition=Step.COND_BEAT_E4)
    assert step.next_index(lambda c: True) is Line.E4
    assert step.next_index(lambda c: False) is Line.OPEN


def test_conditional_receives_its_condition():
    script = build_transfer_script()
    run = answers()
    script[Step.COND_BEAT_E4].next_index(run)
    assert run.calls == [Step.COND_BEAT_E4]


def test_dialogue_steps_carry_their_text():
    for script in (build_transfer_script(), build_event_script()):
        for key, step in script.items():
            if isinstance(key, Line):
                assert step.text == dialogue_text(key)
                assert step.condition is None
            else:
                assert step.text == ""
                assert step.condition is not None


def test_transfer_targets_all_exist():
    script = build_transfer_script()
    for step in script.values():
        for target in (step.if_true, step.if_false):
            if target is not None:
                assert target in script


def test_event_targets_exist_except_return_to_transfer_start():
    script = build_event_script()
    for step in script.values():
        for target in (step.if_true, step.if_false):
            if target is not None and target is not Step.T_SCRIPT_START:
                assert target in script


def test_tutorial_path():
    run = answers(COND_TUTORIAL_COMPLETE=False)
    path = list(walk(build_transfer_script(), Step.T_SCRIPT_START, run))
    assert path == [
        Step.T_SCRIPT_START,
        Step.COND_TUTORIAL_COMPLETE,
        Line.OPEN,
        Step.CMD_SET_TUTOR_TRUE,
        Step.CMD_END_SCRIPT,
        Step.CMD_BACK_TO_MENU,
    ]
    assert run.calls[0] is Step.CMD_SHOW_PROF
    assert run.calls[-1] is Step.CMD_BACK_TO_MENU


def test_elite_four_not_beaten():
    run = answers(COND_BEAT_E4=False)
    path = list(walk(build_transfer_script(), Step.T_SCRIPT_START, run))
    assert Line.E4 in path
    assert path[-2:] == [Step.CMD_END_SCRIPT, Step.CMD_BACK_TO_MENU]


def test_mystery_gift_disabled_by_game():
    frlge = list(walk(build_transfer_script(), Step.T_SCRIPT_START,
                      answers(COND_MG_ENABLED=False)))
    rs = list(walk(build_transfer_script(), Step.T_SCRIPT_START,
                   answers(COND_MG_ENABLED=False, COND_IS_FRLGE=False)))
    assert Line.MG_FRLGE in frlge and Line.MG_RS not in frlge
    assert Line.MG_RS in rs and Line.MG_FRLGE not in rs


def test_full_transfer_path():
    run = answers(
        COND_MG_OTHER_EVENT=False,
        COND_PKMN_TO_COLLECT=False,
        COND_SOME_INVALID_PKMN=False,
        COND_CHECK_MYTHIC=False,
        COND_CHECK_MISSINGNO=False,
        COND_IS_HOENN_RS=False,
        COND_IS_HOENN_E=False,
    )
    path = list(walk(build_transfer_script(), Step.T_SCRIPT_START, run))
    assert path == [
        Step.T_SCRIPT_START,
        Step.COND_TUTORIAL_COMPLETE,
        Step.COND_BEAT_E4,
        Step.COND_MG_ENABLED,
        Step.COND_MG_OTHER_EVENT,
        Step.COND_PKMN_TO_COLLECT,
        Line.ASK_QUEST,
        Step.CMD_SLIDE_PROF_LEFT,
        Line.WHAT_LANG_TRANS,
        Step.CMD_LANG_MENU,
        Line.WHAT_GAME_TRANS,
        Step.CMD_GAME_MENU,
        Step.COND_GB_ROM_EXISTS,
        Step.CMD_SLIDE_PROF_RIGHT,
        Line.LETS_START,
        Line.START,
        Step.CMD_START_LINK,
        Step.COND_ERROR_TIMEOUT_ONE,
        Step.COND_ERROR_TIMEOUT_TWO,
        Step.COND_ERROR_COM_ENDED,
        Step.COND_ERROR_COLOSSEUM,
        Step.COND_ERROR_DISCONNECT,
        Step.CMD_LOAD_SIMP,
        Step.COND_SOME_INVALID_PKMN,
        Step.COND_CHECK_MYTHIC,
        Step.COND_CHECK_MISSINGNO,
        Line.IN_BOX,
        Step.CMD_BOX_MENU,
        Step.CMD_IMPORT_POKEMON,
        Step.CMD_CONTINUE_LINK,
        Step.CMD_END_MISSINGNO,
        Line.TRANS_GOOD,
        Step.COND_NEW_POKEMON,
        Line.NEW_DEX,
        Step.COND_IS_HOENN_RS,
        Step.COND_IS_HOENN_E,
        Line.SEND_FRIEND_KANTO,
        Line.THANK,
        Step.CMD_END_SCRIPT,
        Step.CMD_BACK_TO_MENU,
    ]


def test_emerald_friend_line():
    run = answers(
        COND_MG_OTHER_EVENT=False,
        COND_PKMN_TO_COLLECT=False,
        COND_IS_HOENN_RS=False,
        COND_NEW_POKEMON=False,
    )
    path = list(walk(build_transfer_script(), Step.T_SCRIPT_START, run))
    assert Line.SEND_FRIEND_HOENN_E in path
    assert Line.NO_NEW_DEX in path
    assert Line.SEND_FRIEND_KANTO not in path


def test_cancelled_box_cancels_link():
    run = answers(COND_MG_OTHER_EVENT=False, COND_PKMN_TO_COLLECT=False, CMD_BOX_MENU=False)
    path = list(walk(build_transfer_script(), Step.T_SCRIPT_START, run))
    assert path[-4:] == [Line.CANCEL, Step.CMD_CANCEL_LINK,
                         Step.CMD_END_SCRIPT, Step.CMD_BACK_TO_MENU]
    assert Step.CMD_IMPORT_POKEMON not in path


def test_retry_loop_respects_limit():
    run = answers(COND_MG_OTHER_EVENT=False, COND_PKMN_TO_COLLECT=False,
                  COND_ERROR_TIMEOUT_ONE=False)
    path = list(walk(build_transfer_script(), Step.T_SCRIPT_START, run, limit=40))
    assert len(path) == 40
    assert path.count(Line.ERROR_TIME_ONE) >= 2
    first = path.index(Line.ERROR_TIME_ONE)
    assert path[first + 1] is Line.START


def test_zero_limit_yields_nothing():
    assert list(walk(build_transfer_script(), Step.T_SCRIPT_START, never_called, limit=0)) == []


def test_event_path_with_incomplete_kanto_dex():
    run = answers(COND_CHECK_DEX=False)
    path = list(walk(build_event_script(), Step.E_SCRIPT_START, run))
    assert path == [
        Step.E_SCRIPT_START,
        Line.ASK_QUEST,
        Step.CMD_SLIDE_PROF_LEFT,
        Line.WHAT_LANG_EVENT,
        Step.CMD_LANG_MENU,
        Line.WHAT_GAME_EVENT,
        Step.CMD_GAME_MENU,
        Step.COND_GB_ROM_EXISTS,
        Step.CMD_SLIDE_PROF_RIGHT,
        Step.COND_CHECK_DEX,
        Step.COND_CHECK_KANTO,
        Line.K_DEX_NOT_FULL,
        Step.CMD_END_SCRIPT,
        Step.CMD_BACK_TO_MENU,
    ]


def test_event_path_with_incomplete_johto_dex():
    run = answers(COND_CHECK_DEX=False, COND_CHECK_KANTO=False)
    path = list(walk(build_event_script(), Step.E_SCRIPT_START, run))
    assert Line.J_DEX_NOT_FULL in path
    assert Line.K_DEX_NOT_FULL not in path


def test_event_path_with_complete_dex_ends_at_check():
    path = list(walk(build_event_script(), Step.E_SCRIPT_START, answers()))
    assert path[-1] is Step.COND_CHECK_DEX


def test_unsupported_rom_asks_language_again():
    run = answers(COND_GB_ROM_EXISTS=False)
    path = list(walk(build_event_script(), Step.E_SCRIPT_START, run, limit=12))
    position = path.index(Line.NO_GB_ROM)
    assert path[position + 1] is Line.WHAT_LANG_EVENT


def test_missing_step_raises_key_error():
    script = {Step.T_SCRIPT_START: ScriptStep(if_true=Line.OPEN, condition=Step.CMD_SHOW_PROF,
                                              if_false=Line.OPEN)}
    walker = walk(script, Step.T_SCRIPT_START, lambda c: True)
    assert next(walker) is Step.T_SCRIPT_START
    with pytest.raises(KeyError):
        next(walker)