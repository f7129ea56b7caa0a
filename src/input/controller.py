"""
Controller input handling for Archive Browser.
Turns keyboard and joystick events into browser commands.
"""

import pygame
from typing import Dict, Any, Optional, List

from browser.archive import BrowserCommand
from constants import (
    LONG_PRESS_MS,
    NAVIGATION_INITIAL_DELAY,
    NAVIGATION_START_RATE,
    NAVIGATION_MAX_RATE,
    NAVIGATION_ACCELERATION,
)

# Default keyboard keys for each action
KEYBOARD_MAP: Dict[str, int] = {
    "select": pygame.K_RETURN,
    "back": pygame.K_ESCAPE,
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
}

HAT_DIRECTIONS = {
    (0, 1): "up",
    (0, -1): "down",
    (-1, 0): "left",
    (1, 0): "right",
}

DIRECT_COMMANDS = {
    "up": BrowserCommand.UP,
    "down": BrowserCommand.DOWN,
    "left": BrowserCommand.LEFT,
    "right": BrowserCommand.RIGHT,
    "back": BrowserCommand.BACK,
}

# Actions that repeat while held
REPEATING = ("up", "down")


class ControllerHandler:
    """
    Maps raw input to BrowserCommand values.

    Directions and back fire on press. Select fires OK on release, or
    OK_LONG once when held past LONG_PRESS_MS (and then nothing on release).
    Held up/down repeat with the same acceleration as list scrolling.
    """

    ACTIONS = ("select", "back", "up", "down", "left", "right")

    def __init__(self, mapping: Optional[Dict[str, Any]] = None):
        """
        Initialize controller handler.

        Args:
            mapping: Optional joystick button mapping (action -> button index)
        """
        self._mapping: Dict[str, Any] = mapping or {}
        self._pressed_at: Dict[str, int] = {}
        self._last_repeat: Dict[str, int] = {}
        self._velocity: Dict[str, float] = {}
        self._long_fired = False

    def _action_for_event(self, event: pygame.event.Event) -> Optional[str]:
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            for action, key in KEYBOARD_MAP.items():
                if event.key == key:
                    return action
        elif event.type in (pygame.JOYBUTTONDOWN, pygame.JOYBUTTONUP):
            for action in self.ACTIONS:
                button = self._mapping.get(action)
                if isinstance(button, int) and event.button == button:
                    return action
        return None

    def handle_event(
        self, event: pygame.event.Event, now: int
    ) -> Optional[BrowserCommand]:
        """
        Process one pygame event.

        Args:
            event: Pygame event
            now: Current time in ms

        Returns:
            The command triggered by this event, if any
        """
        if event.type == pygame.JOYHATMOTION:
            return self._handle_hat(event.value, now)

        action = self._action_for_event(event)
        if action is None:
            return None

        if event.type in (pygame.KEYDOWN, pygame.JOYBUTTONDOWN):
            return self._press(action, now)
        return self._release(action)

    def _handle_hat(self, value, now: int) -> Optional[BrowserCommand]:
        direction = HAT_DIRECTIONS.get(tuple(value))
        # Centered hat releases every direction
        for held in list(self._pressed_at):
            if held in HAT_DIRECTIONS.values() and held != direction:
                self._release(held)
        if direction is None or direction in self._pressed_at:
            return None
        return self._press(direction, now)

    def _press(self, action: str, now: int) -> Optional[BrowserCommand]:
        self._pressed_at[action] = now
        self._last_repeat[action] = now
        self._velocity[action] = NAVIGATION_START_RATE

        if action == "select":
            self._long_fired = False
            return None
        return DIRECT_COMMANDS.get(action)

    def _release(self, action: str) -> Optional[BrowserCommand]:
        was_pressed = self._pressed_at.pop(action, None) is not None
        self._last_repeat.pop(action, None)
        self._velocity.pop(action, None)

        if action == "select" and was_pressed:
            if self._long_fired:
                self._long_fired = False
                return None
            return BrowserCommand.OK
        return None

    def poll(self, now: int, repeat: bool = True) -> List[BrowserCommand]:
        """
        Produce time-based commands for held inputs.

        Should be called once per frame.

        Args:
            now: Current time in ms
            repeat: Whether held up/down may repeat (the file menu only
                moves on discrete presses)

        Returns:
            Commands triggered by long presses and repeats
        """
        commands: List[BrowserCommand] = []

        select_at = self._pressed_at.get("select")
        if select_at is not None and not self._long_fired:
            if now - select_at >= LONG_PRESS_MS:
                self._long_fired = True
                commands.append(BrowserCommand.OK_LONG)

        for action in REPEATING:
            if not repeat or action not in self._pressed_at:
                continue
            if now - self._pressed_at[action] < NAVIGATION_INITIAL_DELAY:
                continue
            velocity = self._velocity[action]
            if now - self._last_repeat[action] >= velocity:
                self._last_repeat[action] = now
                # Accelerate for next repeat (but don't go below minimum rate)
                self._velocity[action] = max(
                    velocity * NAVIGATION_ACCELERATION, NAVIGATION_MAX_RATE
                )
                commands.append(DIRECT_COMMANDS[action])

        return commands

    def reset(self) -> None:
        """Forget all held inputs."""
        self._pressed_at.clear()
        self._last_repeat.clear()
        self._velocity.clear()
        self._long_fired = False
