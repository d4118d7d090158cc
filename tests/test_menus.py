import pytest

from gbtransfer.menus import (
    GameId,
    LanguageId,
    MenuCancelled,
    SelectMenu,
    game_options,
    language_options,
)


def _menu(options, cancel_enabled=False):
    menu = SelectMenu(cancel_enabled)
    for label, value in options:
        menu.add_option(label, value)
    return menu


def test_language_options_order():
    labels = [label for label, _ in language_options()]
    assert labels == [
        "English", "Japanese", "Spanish", "French", "German", "Italian", "Korean", "Cancel",
    ]


def test_japanese_games_include_green():
    values = [value for _, value in game_options(LanguageId.JAPANESE)]
    assert values == [
        GameId.RED, GameId.GREEN, GameId.BLUE, GameId.YELLOW,
        GameId.GOLD, GameId.SILVER, GameId.CRYSTAL, None,
    ]


def test_korean_games():
    labels = [label for label, _ in game_options(LanguageId.KOREAN)]
    assert labels == ["Gold", "Silver", "Cancel"]


def test_other_languages_exclude_green():
    values = [value for _, value in game_options(LanguageId.ITALIAN)]
    assert GameId.GREEN not in values
    assert values[0] is GameId.RED
    assert values[-1] is None


def test_cursor_wraps():
    menu = _menu(game_options(LanguageId.KOREAN))
    menu.move_up()
    assert menu.current == ("Cancel", None)
    menu.move_down()
    assert menu.current == ("Gold", GameId.GOLD)


def test_select_returns_value_and_clears():
    menu = _menu(game_options(LanguageId.KOREAN))
    menu.move_down()
    assert menu.select() is GameId.SILVER
    assert menu.options == []
    assert menu.selection == 0


def test_selecting_cancel_entry_raises():
    menu = _menu(game_options(LanguageId.KOREAN))
    menu.move_up()
    with pytest.raises(MenuCancelled):
        menu.select()
    assert menu.options == []


def test_cancel_when_enabled():
    menu = _menu(language_options(), cancel_enabled=True)
    with pytest.raises(MenuCancelled):
        menu.cancel()
    assert menu.options == []


def test_cancel_ignored_when_disabled():
    menu = _menu(language_options())
    menu.cancel()
    assert menu.select() is LanguageId.ENGLISH


def test_select_empty_menu_raises():
    with pytest.raises(IndexError):
        SelectMenu().select()