"""
Pytest configuration and shared fixtures for menuclip tests.

This module provides common fixtures and utilities used across all test modules.
"""

from typing import List

import pytest
from loguru import logger

from menuclip.config import settings
from menuclip.menu.model import MenuOption, MenuState, Phase


class ClipboardRecorder:
    """Stand-in for the clipboard collaborator that records every write."""

    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.writes: List[str] = []

    def __call__(self, text: str) -> bool:
        self.writes.append(text)
        return self.succeed


class FakeDisplay:
    """Display that keeps every frame instead of painting it."""

    def __init__(self) -> None:
        self.frames = []

    def show(self, block) -> None:
        self.frames.append(block)


@pytest.fixture(autouse=True)
def quiet_logger():
    """Drop loguru's default stderr sink so navigation logs stay out of test output."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts from the built-in settings."""
    settings.reset_settings()
    yield
    settings.reset_settings()


# ==============================================================================
# Menu State Fixtures
# ==============================================================================


@pytest.fixture
def initial_state() -> MenuState:
    return MenuState()


@pytest.fixture
def submenu_state() -> MenuState:
    """CRAFT submenu with the third entry highlighted."""
    return MenuState(
        top_cursor=1,
        sub_cursor=2,
        phase=Phase.SUBMENU,
        selected_option=MenuOption.CRAFT,
    )


@pytest.fixture
def detail_state() -> MenuState:
    return MenuState(
        top_cursor=0,
        sub_cursor=3,
        phase=Phase.DETAIL,
        selected_option=MenuOption.OCOR,
    )


# ==============================================================================
# Collaborator Fixtures
# ==============================================================================


@pytest.fixture
def clipboard() -> ClipboardRecorder:
    return ClipboardRecorder()


@pytest.fixture
def broken_clipboard() -> ClipboardRecorder:
    return ClipboardRecorder(succeed=False)


@pytest.fixture
def fake_display() -> FakeDisplay:
    return FakeDisplay()
