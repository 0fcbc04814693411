"""
Per-tick input snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Action(str, Enum):
    """Things the player can ask for, independent of the key bound to it."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    FIRE = "fire"
    CONFIRM = "confirm"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Intent:
    """
    What the player wants during one tick.

    ``confirm`` is edge-triggered (true once per press); the others are
    level-triggered (true while held).
    """

    move_left: bool = False
    move_right: bool = False
    fire: bool = False
    confirm: bool = False
    cancel: bool = False


@dataclass
class InputState:
    """
    Held actions plus a "confirm pressed since last consumed" flag.

    The window feeds :meth:`press` / :meth:`release` from key events; the
    engine reads one :meth:`snapshot` per tick.
    """

    held: set[Action] = field(default_factory=set)
    confirm_pending: bool = False

    def press(self, action: Action) -> None:
        # key repeat must not re-arm the edge
        if action is Action.CONFIRM and action not in self.held:
            self.confirm_pending = True
        self.held.add(action)

    def release(self, action: Action) -> None:
        self.held.discard(action)

    def clear(self) -> None:
        """Forget everything, e.g. when the window loses focus."""
        self.held.clear()
        self.confirm_pending = False

    def is_held(self, action: Action) -> bool:
        return action in self.held

    def consume_confirm(self) -> bool:
        """Return the confirm edge and reset it."""
        pending = self.confirm_pending
        self.confirm_pending = False
        return pending

    def snapshot(self) -> Intent:
        """
        Freeze the current state into an :class:`Intent`.

        Consumes the confirm edge, so call it exactly once per tick.
        """
        return Intent(
            move_left=Action.MOVE_LEFT in self.held,
            move_right=Action.MOVE_RIGHT in self.held,
            fire=Action.FIRE in self.held,
            confirm=self.consume_confirm(),
            cancel=Action.CANCEL in self.held,
        )
