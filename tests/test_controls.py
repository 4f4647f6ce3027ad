"""
Tests for keyboard and touch input collection.
"""

from types import SimpleNamespace

import pytest


def key_down(pygame, key):
    return SimpleNamespace(type=pygame.KEYDOWN, key=key)


def key_up(pygame, key):
    return SimpleNamespace(type=pygame.KEYUP, key=key)


@pytest.fixture
def collector(mock_pygame_module):
    from pixel_palace.games.space_invaders.controls import IntentCollector

    return IntentCollector()


class TestKeyboard:
    """Tests for keyboard events."""

    def test_arrows_move(self, collector, mock_pygame_module):
        pg = mock_pygame_module
        collector.handle_event(key_down(pg, pg.K_LEFT), 0)
        assert collector.intent.move_left is True

        collector.handle_event(key_up(pg, pg.K_LEFT), 0)
        assert collector.intent.move_left is False

        collector.handle_event(key_down(pg, pg.K_RIGHT), 0)
        assert collector.intent.move_right is True

    def test_wasd_move(self, collector, mock_pygame_module):
        pg = mock_pygame_module
        collector.handle_event(key_down(pg, pg.K_a), 0)
        collector.handle_event(key_down(pg, pg.K_d), 0)

        assert collector.intent.move_left is True
        assert collector.intent.move_right is True

        collector.handle_event(key_up(pg, pg.K_d), 0)
        assert collector.intent.move_right is False

    def test_space_fires(self, collector, mock_pygame_module):
        pg = mock_pygame_module
        result = collector.handle_event(key_down(pg, pg.K_SPACE), 0)

        assert result is None
        assert collector.intent.fire is True

    def test_press_and_release_in_one_frame_fires(self, collector, mock_pygame_module, game):
        """Test a Space tap handled entirely before the next tick still shoots once."""
        pg = mock_pygame_module
        collector.handle_event(key_down(pg, pg.K_SPACE), 0)
        collector.handle_event(key_up(pg, pg.K_SPACE), 0)

        game.step(collector.intent, 500.0)
        game.step(collector.intent, 1000.0)

        assert len(game.player_bullets) == 1

    def test_hotkeys_return_commands(self, collector, mock_pygame_module):
        from pixel_palace.games.space_invaders.controls import ControlCommand

        pg = mock_pygame_module
        assert collector.handle_event(key_down(pg, pg.K_p), 0) is ControlCommand.PAUSE
        assert collector.handle_event(key_down(pg, pg.K_m), 0) is ControlCommand.MUTE
        assert collector.handle_event(key_down(pg, pg.K_r), 0) is ControlCommand.RESTART
        assert collector.handle_event(key_down(pg, pg.K_ESCAPE), 0) is ControlCommand.QUIT

    def test_unrelated_key_ignored(self, collector, mock_pygame_module):
        pg = mock_pygame_module
        from pixel_palace.games.space_invaders.game import InputIntent

        assert collector.handle_event(key_down(pg, pg.K_w), 0) is None
        assert collector.intent == InputIntent()

    def test_release_all(self, collector, mock_pygame_module):
        pg = mock_pygame_module
        collector.handle_event(key_down(pg, pg.K_LEFT), 0)
        collector.handle_event(key_down(pg, pg.K_SPACE), 0)

        collector.release_all()

        assert collector.intent.move_left is False
        assert collector.intent.fire is False


class TestTouch:
    """Tests for tap-to-fire and drag-to-move."""

    def test_tap_fires(self, collector, mock_pygame_module):
        pg = mock_pygame_module
        collector.handle_event(SimpleNamespace(type=pg.FINGERDOWN), 1000)

        assert collector.intent.fire is True
        assert collector.touching is True

    def test_tap_debounce(self, collector, mock_pygame_module):
        """Test taps within 250ms of the last accepted tap do not fire."""
        pg = mock_pygame_module
        collector.handle_event(SimpleNamespace(type=pg.FINGERDOWN), 1000)
        collector.intent.fire = False

        collector.handle_event(SimpleNamespace(type=pg.FINGERDOWN), 1200)
        assert collector.intent.fire is False

        collector.handle_event(SimpleNamespace(type=pg.FINGERDOWN), 1251)
        assert collector.intent.fire is True

    def test_drag_accumulates_scaled_displacement(self, collector, mock_pygame_module):
        """Test normalized finger deltas become playfield pixels times 0.8."""
        pg = mock_pygame_module
        collector.handle_event(SimpleNamespace(type=pg.FINGERDOWN), 0)
        collector.handle_event(SimpleNamespace(type=pg.FINGERMOTION, dx=0.05), 10)
        collector.handle_event(SimpleNamespace(type=pg.FINGERMOTION, dx=-0.025), 20)

        assert collector.intent.drag_dx == pytest.approx((0.05 - 0.025) * 800 * 0.8)

    def test_motion_without_touch_ignored(self, collector, mock_pygame_module):
        pg = mock_pygame_module
        collector.handle_event(SimpleNamespace(type=pg.FINGERMOTION, dx=0.5), 0)

        assert collector.intent.drag_dx == 0.0

    def test_finger_up_stops_drag(self, collector, mock_pygame_module):
        pg = mock_pygame_module
        collector.handle_event(SimpleNamespace(type=pg.FINGERDOWN), 0)
        collector.handle_event(SimpleNamespace(type=pg.FINGERUP), 10)
        collector.handle_event(SimpleNamespace(type=pg.FINGERMOTION, dx=0.5), 20)

        assert collector.touching is False
        assert collector.intent.drag_dx == 0.0

    def test_drag_moves_ship_through_game(self, collector, mock_pygame_module, game):
        """Test a drag is applied by the next tick and then consumed."""
        pg = mock_pygame_module
        collector.handle_event(SimpleNamespace(type=pg.FINGERDOWN), 0)
        collector.intent.fire = False
        collector.handle_event(SimpleNamespace(type=pg.FINGERMOTION, dx=0.05), 10)

        game.step(collector.intent, 0.0)

        assert game.player.x == pytest.approx(376 + 32)
        assert collector.intent.drag_dx == 0.0
