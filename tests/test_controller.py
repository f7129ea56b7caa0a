"""Tests for turning pygame input events into browser commands."""

import os
import sys

import pygame

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from browser.archive import BrowserCommand
from constants import LONG_PRESS_MS, NAVIGATION_INITIAL_DELAY, NAVIGATION_START_RATE
from input.controller import ControllerHandler


def key(event_type, key_code):
    return pygame.event.Event(event_type, key=key_code)


def test_directions_fire_on_press():
    handler = ControllerHandler()
    assert handler.handle_event(key(pygame.KEYDOWN, pygame.K_UP), 0) is BrowserCommand.UP
    assert handler.handle_event(key(pygame.KEYDOWN, pygame.K_LEFT), 0) is BrowserCommand.LEFT
    assert handler.handle_event(key(pygame.KEYDOWN, pygame.K_ESCAPE), 0) is BrowserCommand.BACK
    assert handler.handle_event(key(pygame.KEYUP, pygame.K_UP), 10) is None


def test_short_select_fires_ok_on_release():
    handler = ControllerHandler()
    assert handler.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN), 0) is None
    assert handler.poll(100) == []
    assert handler.handle_event(key(pygame.KEYUP, pygame.K_RETURN), 120) is BrowserCommand.OK


def test_long_select_fires_once_and_swallows_release():
    handler = ControllerHandler()
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN), 0)

    assert handler.poll(LONG_PRESS_MS) == [BrowserCommand.OK_LONG]
    assert handler.poll(LONG_PRESS_MS + 200) == []
    assert handler.handle_event(key(pygame.KEYUP, pygame.K_RETURN), LONG_PRESS_MS + 300) is None


def test_held_direction_repeats_after_delay():
    handler = ControllerHandler()
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_DOWN), 0)

    assert handler.poll(NAVIGATION_INITIAL_DELAY - 1) == []
    first = NAVIGATION_INITIAL_DELAY + NAVIGATION_START_RATE
    assert handler.poll(first) == [BrowserCommand.DOWN]
    assert handler.poll(first + 1) == []

    handler.handle_event(key(pygame.KEYUP, pygame.K_DOWN), first + 10)
    assert handler.poll(first + 5000) == []


def test_tab_directions_do_not_repeat():
    handler = ControllerHandler()
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_RIGHT), 0)
    assert handler.poll(5000) == []


def test_joystick_buttons_use_mapping():
    handler = ControllerHandler({"select": 0, "back": 1})

    down = pygame.event.Event(pygame.JOYBUTTONDOWN, button=1)
    assert handler.handle_event(down, 0) is BrowserCommand.BACK

    handler.handle_event(pygame.event.Event(pygame.JOYBUTTONDOWN, button=0), 0)
    up = pygame.event.Event(pygame.JOYBUTTONUP, button=0)
    assert handler.handle_event(up, 50) is BrowserCommand.OK

    unmapped = pygame.event.Event(pygame.JOYBUTTONDOWN, button=7)
    assert handler.handle_event(unmapped, 0) is None


def test_hat_motion_presses_and_releases():
    handler = ControllerHandler()

    hat = pygame.event.Event(pygame.JOYHATMOTION, value=(0, -1))
    assert handler.handle_event(hat, 0) is BrowserCommand.DOWN
    assert handler.handle_event(hat, 10) is None

    centered = pygame.event.Event(pygame.JOYHATMOTION, value=(0, 0))
    assert handler.handle_event(centered, 20) is None
    assert handler.poll(5000) == []


def test_reset_forgets_held_inputs():
    handler = ControllerHandler()
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN), 0)
    handler.reset()

    assert handler.poll(LONG_PRESS_MS * 2) == []
    assert handler.handle_event(key(pygame.KEYUP, pygame.K_RETURN), 10) is None


def test_repeat_can_be_suppressed_while_long_press_still_fires():
    handler = ControllerHandler()
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_DOWN), 0)
    handler.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN), 0)

    assert handler.poll(5000, repeat=False) == [BrowserCommand.OK_LONG]
