"""Display strings for headings and status messages.

Usage::

    from dotline.game.text import t, set_language

    set_language("Russian")
    print(t().heading_game_over)       # "Игра окончена"
    print(message_for(NodeStatus.GAME_OVER, Player.TWO))
"""

from __future__ import annotations

from dataclasses import dataclass

from dotline.core.enums import NodeStatus, Player


@dataclass(frozen=True)
class Strings:
    heading_player: str  # "Player {player}"
    heading_game_over: str

    msg_valid_start: str
    msg_valid_end: str  # "Awaiting Player {player}'s Move"
    msg_invalid_start: str
    msg_invalid_end: str
    msg_game_over: str  # "Player {player} wins!"
    msg_idle: str


_EN = Strings(
    heading_player="Player {player}",
    heading_game_over="Game Over",
    msg_valid_start="Select a second node to complete the line.",
    msg_valid_end="Awaiting Player {player}'s Move",
    msg_invalid_start="Not a valid starting position.",
    msg_invalid_end="Invalid move!",
    msg_game_over="Player {player} wins!",
    msg_idle="Are you asleep?",
)

_RU = Strings(
    heading_player="Игрок {player}",
    heading_game_over="Игра окончена",
    msg_valid_start="Выберите вторую точку, чтобы завершить линию.",
    msg_valid_end="Ход игрока {player}",
    msg_invalid_start="Отсюда нельзя начать линию.",
    msg_invalid_end="Недопустимый ход!",
    msg_game_over="Игрок {player} победил!",
    msg_idle="Вы там не уснули?",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN

_MESSAGE_FIELDS: dict[NodeStatus, str] = {
    NodeStatus.VALID_START_NODE: "msg_valid_start",
    NodeStatus.VALID_END_NODE: "msg_valid_end",
    NodeStatus.INVALID_START_NODE: "msg_invalid_start",
    NodeStatus.INVALID_END_NODE: "msg_invalid_end",
    NodeStatus.GAME_OVER: "msg_game_over",
}


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


def heading_for(status: NodeStatus | None, player: Player) -> str:
    if status == NodeStatus.GAME_OVER:
        return t().heading_game_over
    return t().heading_player.format(player=int(player))


def message_for(status: NodeStatus | None, player: Player) -> str | None:
    """Status message, or ``None`` for statuses without one."""
    field_name = _MESSAGE_FIELDS.get(status) if status is not None else None
    if field_name is None:
        return None
    return getattr(t(), field_name).format(player=int(player))


def idle_message() -> str:
    return t().msg_idle
