"""Option menus for choosing the language and game to transfer from."""

from __future__ import annotations

from enum import Enum
from typing import Hashable


class GameId(Enum):
    """Game Boy games that can be transferred from."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"
    GOLD = "Gold"
    SILVER = "Silver"
    CRYSTAL = "Crystal"


class LanguageId(Enum):
    """Languages of the Game Boy games."""

    ENGLISH = "English"
    JAPANESE = "Japanese"
    SPANISH = "Spanish"
    FRENCH = "French"
    GERMAN = "German"
    ITALIAN = "Italian"
    KOREAN = "Korean"


class MenuCancelled(Exception):
    """Raised when the user backs out of a menu."""


Option = tuple[str, "Hashable | None"]


class SelectMenu:
    """A vertical list of options with a wrapping cursor.

    An option whose value is None is a cancel entry: choosing it cancels.
    Choosing or cancelling closes the menu and clears its options.
    """

    def __init__(self, cancel_enabled: bool = False) -> None:
        self.cancel_enabled = cancel_enabled
        self.options: list[Option] = []
        self.selection = 0

    def add_option(self, label: str, value: Hashable | None) -> None:
        self.options.append((label, value))

    def clear(self) -> None:
        self.options.clear()
        self.selection = 0

    @property
    def current(self) -> Option:
        return self.options[self.selection]

    def move_down(self) -> None:
        if self.options:
            self.selection = (self.selection + 1) % len(self.options)

    def move_up(self) -> None:
        if self.options:
            self.selection = (self.selection - 1) % len(self.options)

    def select(self) -> Hashable:
        """Return the value under the cursor and close the menu."""
        if not self.options:
            raise IndexError("menu has no options")
        _, value = self.current
        self.clear()
        if value is None:
            raise MenuCancelled()
        return value

    def cancel(self) -> None:
        """Close the menu by cancelling; ignored when cancelling is disabled."""
        if self.cancel_enabled:
            self.clear()
            raise MenuCancelled()


def language_options() -> list[Option]:
    return [(lang.value, lang) for lang in LanguageId] + [("Cancel", None)]


def game_options(language: LanguageId) -> list[Option]:
    if language is LanguageId.JAPANESE:
        games = list(GameId)
    elif language is LanguageId.KOREAN:
        games = [GameId.GOLD, GameId.SILVER]
    else:
        games = [game for game in GameId if game is not GameId.GREEN]
    return [(game.value, game) for game in games] + [("Cancel", None)]