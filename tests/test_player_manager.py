"""Unit tests for PlayerManager movement, clamping and animation."""

import random
import unittest
from unittest.mock import MagicMock

from roomwalk.conf import settings
from roomwalk.systems.input import MovementFlags
from roomwalk.systems.player import PlayerManager
from roomwalk.types import Direction, PlayerState

IDLE = MovementFlags()
UP = MovementFlags(up=True)
DOWN = MovementFlags(down=True)
LEFT = MovementFlags(left=True)
RIGHT = MovementFlags(right=True)

# 800 - 64 - 20 and 400 - 64 - 60 with the test settings
MAX_X = 716.0
MAX_Y = 276.0


class PlayerManagerTestCase(unittest.TestCase):
    """Shared setup: a PlayerManager at the start position with a mock context."""

    def setUp(self) -> None:
        """Set up PlayerManager and mock context."""
        self.manager = PlayerManager()
        self.mock_context = MagicMock()
        self.manager.setup(self.mock_context)
        self.player = self.manager.get_player()

    def step_many(self, flags: MovementFlags, ticks: int) -> None:
        """Run several ticks with the same flags."""
        for _ in range(ticks):
            self.manager.step(flags)


class TestPlayerMovement(PlayerManagerTestCase):
    """Test movement from the input flags."""

    def test_starts_idle_facing_down_at_start_position(self) -> None:
        """Test the default player state after setup."""
        assert (self.player.x, self.player.y) == (368.0, 268.0)
        assert self.player.state is PlayerState.IDLE
        assert self.player.current_direction is Direction.DOWN
        assert self.player.last_moving_direction is Direction.DOWN

    def test_no_flags_leaves_position_and_state(self) -> None:
        """Test that idle ticks never move the player."""
        self.step_many(IDLE, 7)

        assert (self.player.x, self.player.y) == (368.0, 268.0)
        assert self.player.state is PlayerState.IDLE

    def test_single_flag_moves_by_speed_on_its_axis(self) -> None:
        """Test each direction moves exactly PLAYER_SPEED along its axis."""
        cases = [
            (UP, Direction.UP, (368.0, 263.0)),
            (DOWN, Direction.DOWN, (368.0, 273.0)),
            (LEFT, Direction.LEFT, (363.0, 268.0)),
            (RIGHT, Direction.RIGHT, (373.0, 268.0)),
        ]
        for flags, direction, expected in cases:
            with self.subTest(direction=direction):
                self.manager.setup(self.mock_context)
                player = self.manager.get_player()

                self.manager.step(flags)

                assert (player.x, player.y) == expected
                assert player.state is PlayerState.MOVING
                assert player.current_direction is direction
                assert player.last_moving_direction is direction

    def test_hold_right_for_ten_ticks(self) -> None:
        """Test holding Right for 10 ticks from the start moves to x=418."""
        self.step_many(RIGHT, 10)

        assert self.player.x == 418.0
        assert self.player.y == 268.0
        assert self.player.last_moving_direction is Direction.RIGHT

    def test_up_and_down_cancel_and_face_down(self) -> None:
        """Test opposing vertical keys cancel out while Down wins the facing."""
        self.manager.step(MovementFlags(up=True, down=True))

        assert self.player.y == 268.0
        assert self.player.state is PlayerState.MOVING
        assert self.player.current_direction is Direction.DOWN
        assert self.player.last_moving_direction is Direction.DOWN

    def test_left_and_right_cancel_and_face_right(self) -> None:
        """Test opposing horizontal keys cancel out while Right wins the facing."""
        self.manager.step(MovementFlags(left=True, right=True))

        assert self.player.x == 368.0
        assert self.player.current_direction is Direction.RIGHT

    def test_diagonal_moves_both_axes_and_faces_horizontal(self) -> None:
        """Test Up+Right moves on both axes and faces the later-evaluated Right."""
        self.manager.step(MovementFlags(up=True, right=True))

        assert (self.player.x, self.player.y) == (373.0, 263.0)
        assert self.player.current_direction is Direction.RIGHT

    def test_release_keeps_direction_fields(self) -> None:
        """Test that stopping keeps the last direction for the idle pose."""
        self.manager.step(LEFT)
        self.manager.step(IDLE)

        assert self.player.state is PlayerState.IDLE
        assert self.player.current_direction is Direction.LEFT
        assert self.player.last_moving_direction is Direction.LEFT
        assert self.player.active_direction is Direction.LEFT


class TestPlayerClamping(PlayerManagerTestCase):
    """Test clamping to the canvas bounds."""

    def test_left_at_zero_stays_at_zero(self) -> None:
        """Test that holding Left at x=0 never goes negative."""
        self.manager.set_player_position(0.0, 100.0)

        self.step_many(LEFT, 3)

        assert self.player.x == 0.0

    def test_right_edge_reserves_margin(self) -> None:
        """Test that x stops at canvas width - sprite width - 20."""
        self.step_many(RIGHT, 200)

        assert self.player.x == MAX_X

    def test_bottom_edge_reserves_margin(self) -> None:
        """Test that y stops at canvas height - sprite height - 60."""
        self.step_many(DOWN, 5)

        assert self.player.y == MAX_Y

    def test_top_edge(self) -> None:
        """Test that y never goes above 0."""
        self.step_many(UP, 100)

        assert self.player.y == 0.0

    def test_set_player_position_is_clamped(self) -> None:
        """Test that teleporting outside the canvas lands on the edge."""
        self.manager.set_player_position(-50.0, 9999.0)

        assert (self.player.x, self.player.y) == (0.0, MAX_Y)

    def test_random_input_stays_in_bounds(self) -> None:
        """Test any sequence of flag states keeps the position within bounds."""
        rng = random.Random(1234)
        for _ in range(2000):
            flags = MovementFlags(
                up=rng.random() < 0.5,
                down=rng.random() < 0.5,
                left=rng.random() < 0.5,
                right=rng.random() < 0.5,
            )
            self.manager.step(flags)

            assert 0.0 <= self.player.x <= MAX_X
            assert 0.0 <= self.player.y <= MAX_Y


class TestPlayerAnimation(PlayerManagerTestCase):
    """Test animation frame selection and cadence."""

    def test_moving_advances_every_tick_and_wraps(self) -> None:
        """Test the frame index advances each moving tick modulo the frame count."""
        self.manager.set_animation_set({Direction.RIGHT: ["r0", "r1", "r2"]})

        shown = []
        for _ in range(4):
            self.manager.step(RIGHT)
            shown.append(self.manager.get_displayed_frame())

        assert shown == ["r1", "r2", "r0", "r1"]

    def test_single_frame_is_always_frame_zero(self) -> None:
        """Test a one-frame direction always shows frame 0."""
        self.manager.set_animation_set({Direction.UP: ["u0"]})

        for _ in range(6):
            self.manager.step(UP)

            assert self.player.sprite_index == 0
            assert self.manager.get_displayed_frame() == "u0"

    def test_empty_direction_is_a_no_op(self) -> None:
        """Test a direction with no frames keeps the last displayed frame."""
        self.manager.set_animation_set({Direction.DOWN: ["d0", "d1"], Direction.LEFT: []})

        self.step_many(LEFT, 3)

        assert self.manager.get_displayed_frame() == "d0"
        assert self.player.x == 353.0

    def test_empty_animation_set(self) -> None:
        """Test ticks before assets arrive still move and update the debug text."""
        self.manager.step(RIGHT)

        assert self.manager.get_displayed_frame() is None
        assert self.player.x == 373.0
        assert self.manager.get_debug_text() == "State: Moving | Direction: Right | Position: (373, 268)"

    def test_set_animation_set_shows_first_resting_frame(self) -> None:
        """Test the idle pose appears as soon as frames are handed over."""
        self.manager.set_animation_set({Direction.DOWN: ["d0", "d1"]})

        assert self.manager.get_displayed_frame() == "d0"
        assert self.player.sprite_index == 0

    def test_idle_advances_every_fifth_tick(self) -> None:
        """Test the idle animation changes frame once per IDLE_FRAME_TICKS ticks."""
        self.manager.set_animation_set({Direction.DOWN: ["d0", "d1", "d2"]})

        shown = []
        for _ in range(10):
            self.manager.step(IDLE)
            shown.append(self.manager.get_displayed_frame())

        assert shown == ["d0", "d0", "d0", "d0", "d1", "d1", "d1", "d1", "d1", "d2"]

    def test_idle_uses_last_moving_direction(self) -> None:
        """Test that the idle animation plays the direction last walked."""
        self.manager.set_animation_set({Direction.DOWN: ["d0"], Direction.LEFT: ["l0", "l1"]})

        self.manager.step(LEFT)
        self.manager.step(IDLE)

        assert self.manager.get_displayed_frame() in {"l0", "l1"}

    def test_idle_cadence_slower_than_moving(self) -> None:
        """Test idle frames change less often than moving frames over the same ticks."""
        frames = {Direction.DOWN: ["d0", "d1", "d2", "d3"]}

        def count_changes(flags: MovementFlags) -> int:
            self.manager.setup(self.mock_context)
            self.manager.set_animation_set(frames)
            changes = 0
            previous = self.player_index()
            for _ in range(20):
                self.manager.step(flags)
                if self.player_index() != previous:
                    changes += 1
                previous = self.player_index()
            return changes

        moving = count_changes(DOWN)
        idle = count_changes(IDLE)

        assert moving == 20
        assert idle == 4
        assert idle < moving

    def test_stale_index_from_longer_list_is_wrapped(self) -> None:
        """Test an index left over from a longer frame list never goes out of range."""
        self.manager.set_animation_set({Direction.DOWN: ["d0", "d1", "d2"]})
        self.player.sprite_index = 7

        self.manager.step(IDLE)

        assert self.player.sprite_index == 1
        assert self.manager.get_displayed_frame() == "d1"

    def test_moving_resets_idle_accumulator(self) -> None:
        """Test that walking restarts the idle countdown."""
        self.manager.set_animation_set({Direction.DOWN: ["d0", "d1"]})
        self.step_many(IDLE, 3)

        self.manager.step(DOWN)

        assert self.player.idle_ticks == 0

    def player_index(self) -> int:
        """Current sprite index of the (possibly recreated) player."""
        return self.manager.get_player().sprite_index


class TestPlayerDebugText(PlayerManagerTestCase):
    """Test the debug status line."""

    def test_idle_text(self) -> None:
        """Test the status line of a fresh idle player."""
        self.manager.step(IDLE)

        assert self.manager.get_debug_text() == "State: Idle | Direction: Down | Position: (368, 268)"

    def test_position_is_rounded(self) -> None:
        """Test the position is shown as rounded integers."""
        self.manager.set_player_position(10.4, 20.6)
        self.manager.step(IDLE)

        assert self.manager.get_debug_text().endswith("Position: (10, 21)")


class TestPlayerTicking(PlayerManagerTestCase):
    """Test the fixed tick driven by update()."""

    def setUp(self) -> None:
        """Set up the manager with an input latch holding Right."""
        super().setUp()
        self.mock_context.input_manager.snapshot.return_value = RIGHT

    def test_update_waits_for_a_full_tick(self) -> None:
        """Test that less than TICK_INTERVAL of time runs no tick."""
        self.manager.update(0.05, self.mock_context)

        assert self.manager.tick_count == 0
        assert self.player.x == 368.0

        self.manager.update(0.05, self.mock_context)

        assert self.manager.tick_count == 1
        assert self.player.x == 373.0

    def test_update_runs_several_ticks(self) -> None:
        """Test that a long frame runs one tick per elapsed interval."""
        self.manager.update(0.25, self.mock_context)

        assert self.manager.tick_count == 3
        assert self.player.x == 383.0

    def test_update_caps_catch_up(self) -> None:
        """Test that a stalled frame runs at most MAX_TICKS_PER_UPDATE ticks."""
        self.manager.update(1.0, self.mock_context)
        self.manager.update(0.0, self.mock_context)

        assert self.manager.tick_count == 5
        assert self.player.x == 393.0

    def test_tick_reads_latch_once(self) -> None:
        """Test that each tick takes exactly one snapshot of the input latch."""
        self.manager.tick(self.mock_context)

        self.mock_context.input_manager.snapshot.assert_called_once_with()

    def test_failing_tick_is_logged_not_raised(self) -> None:
        """Test that an error inside a tick is logged and the loop continues."""
        self.mock_context.input_manager.snapshot.side_effect = RuntimeError("latch broke")

        with self.assertLogs("roomwalk.systems.player.manager", level="ERROR") as logs:
            self.manager.update(0.16, self.mock_context)

        assert self.manager.tick_count == 2
        assert "failed" in logs.output[0]

    def test_cleanup_resets_player_and_frames(self) -> None:
        """Test that cleanup drops frames and returns to the start position."""
        self.manager.set_animation_set({Direction.DOWN: ["d0"]})
        self.manager.update(0.08, self.mock_context)

        self.manager.cleanup()

        assert self.manager.get_displayed_frame() is None
        assert self.manager.animation_set == {}
        assert (self.manager.get_player().x, self.manager.get_player().y) == (368.0, 268.0)

    def test_non_positive_tick_interval_falls_back_to_default(self) -> None:
        """Test that a zero TICK_INTERVAL is replaced instead of breaking update()."""
        settings.configure(TICK_INTERVAL=0)

        with self.assertLogs("roomwalk.systems.player.manager", level="WARNING") as logs:
            self.manager.setup(self.mock_context)

        assert self.manager.tick_interval == 0.08
        assert "TICK_INTERVAL must be positive" in logs.output[0]

        self.manager.update(0.1, self.mock_context)

        assert self.manager.tick_count == 1
        assert self.manager.get_player().x == 373.0
