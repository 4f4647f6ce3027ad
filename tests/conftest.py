"""
Pytest configuration and fixtures for Pixel Palace tests.

This module sets up pygame mocking to allow testing the renderer, input
handling and audio without a display or sound device.
"""

import random
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


class MockPygameError(RuntimeError):
    """Stand-in for pygame.error so except clauses still work."""


def create_mock_pygame():
    """Create a comprehensive mock of the pygame module."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None
    mock_pygame.error = MockPygameError

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 800
    mock_surface.get_height.return_value = 600
    mock_surface.fill.return_value = None
    mock_surface.blit.return_value = None
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_font.size.return_value = (100, 30)  # (width, height)
    mock_pygame.font.Font.return_value = mock_font
    mock_pygame.font.SysFont.return_value = mock_font
    mock_pygame.font.init.return_value = None

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.MOUSEBUTTONDOWN = 1025
    mock_pygame.MOUSEBUTTONUP = 1026
    mock_pygame.MOUSEMOTION = 1024
    mock_pygame.FINGERDOWN = 1792
    mock_pygame.FINGERUP = 1793
    mock_pygame.FINGERMOTION = 1794
    mock_pygame.SRCALPHA = 65536
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_RETURN = 13
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_m = 109
    mock_pygame.K_p = 112
    mock_pygame.K_r = 114

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    # Surface creation
    mock_pygame.Surface.return_value = mock_surface

    # Mixer
    mock_pygame.mixer.get_init.return_value = None
    mock_pygame.sndarray.make_sound.side_effect = lambda array: MagicMock()

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before any pygame-facing modules are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def game():
    """A fresh game with a seeded random source."""
    from pixel_palace.games.space_invaders.game import SpaceInvadersGame

    return SpaceInvadersGame(rng=random.Random(1234))


@pytest.fixture
def intent():
    """An idle input intent."""
    from pixel_palace.games.space_invaders.game import InputIntent

    return InputIntent()


@pytest.fixture
def mock_screen(mock_pygame_module):
    """Provide a mock pygame screen surface."""
    screen = MagicMock()
    screen.get_width.return_value = 800
    screen.get_height.return_value = 600
    return screen
