"""Player movement and animation on a fixed tick.

This module provides the PlayerManager class. Arcade calls update() once per
rendered frame with a variable delta; the manager accumulates that time and
runs one tick per elapsed TICK_INTERVAL. Each tick is a single pass:

1. Read the input latch once and move the player by PLAYER_SPEED for every
   held direction, in the fixed order up, down, left, right.
2. Clamp the position to the canvas bounds.
3. Advance the animation frame: every tick while moving, every
   IDLE_FRAME_TICKS ticks while idle.
4. Refresh the debug status line.

Because every held direction is applied in that fixed order, opposing keys
cancel out in displacement while the facing goes to the one applied last
(down beats up, right beats left).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

import arcade

from roomwalk.conf import global_settings, settings
from roomwalk.systems.player.base import AnimationSet, CanvasBounds, PlayerBaseManager, PlayerEntity
from roomwalk.systems.registry import SystemRegistry
from roomwalk.types import Direction, PlayerState

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from roomwalk.systems.game_context import GameContext
    from roomwalk.systems.input.base import MovementFlags

logger = logging.getLogger(__name__)

# Evaluation order matters: later entries win the facing direction.
MOVEMENT_STEPS: tuple[tuple[Direction, float, float], ...] = (
    (Direction.UP, 0.0, -1.0),
    (Direction.DOWN, 0.0, 1.0),
    (Direction.LEFT, -1.0, 0.0),
    (Direction.RIGHT, 1.0, 0.0),
)


@SystemRegistry.register
class PlayerManager(PlayerBaseManager):
    """Owns the player entity and runs the fixed-period frame stepper.

    Responsibilities:
    - Convert frame deltas into fixed ticks
    - Move the player from the input latch and clamp it to the canvas
    - Pick and advance the animation frame
    - Keep the debug status line current
    - Draw the current frame at the player's position

    Attributes:
        player: The player entity.
        animation_set: Frames per direction. Empty until assets are handed over.
        displayed_frame: Frame currently shown, or None before the first one.
        debug_text: Status line refreshed every tick.
        tick_count: Number of ticks run so far.
    """

    name: ClassVar[str] = "player"
    dependencies: ClassVar[list[str]] = ["input", "assets"]

    def __init__(self) -> None:
        """Initialize the player manager with default state and no frames."""
        self.player = PlayerEntity()
        self.animation_set: AnimationSet = {}
        self.displayed_frame: Any = None
        self.debug_text: str = ""
        self.tick_count: int = 0
        self._elapsed: float = 0.0
        self._configure()

    def setup(self, context: GameContext) -> None:
        """Read settings and place the player at the start position."""
        self._configure()
        self.player = PlayerEntity(x=settings.PLAYER_START_X, y=settings.PLAYER_START_Y)
        self._elapsed = 0.0
        self.tick_count = 0
        self.debug_text = self._compose_debug_text()
        logger.debug("Player placed at (%.1f, %.1f)", self.player.x, self.player.y)

    def _configure(self) -> None:
        self.speed = float(settings.PLAYER_SPEED)
        self.tick_interval = float(settings.TICK_INTERVAL)
        if self.tick_interval <= 0:
            logger.warning(
                "TICK_INTERVAL must be positive, got %r; using %r",
                settings.TICK_INTERVAL,
                global_settings.TICK_INTERVAL,
            )
            self.tick_interval = global_settings.TICK_INTERVAL
        self.max_ticks_per_update = max(1, int(settings.MAX_TICKS_PER_UPDATE))
        self.idle_frame_ticks = max(1, int(settings.IDLE_FRAME_TICKS))
        self.bounds = CanvasBounds(
            canvas_width=settings.SCREEN_WIDTH,
            canvas_height=settings.SCREEN_HEIGHT,
            sprite_width=settings.SPRITE_WIDTH,
            sprite_height=settings.SPRITE_HEIGHT,
            right_margin=settings.CANVAS_RIGHT_MARGIN,
            bottom_margin=settings.CANVAS_BOTTOM_MARGIN,
        )

    def get_player(self) -> PlayerEntity:
        """Get the player entity."""
        return self.player

    def get_displayed_frame(self) -> Any:  # noqa: ANN401
        """Get the frame currently shown, or None."""
        return self.displayed_frame

    def get_debug_text(self) -> str:
        """Get the status line describing the player."""
        return self.debug_text

    def set_player_position(self, player_x: float, player_y: float) -> None:
        """Move the player, clamped to the canvas bounds."""
        self.player.x, self.player.y = self.bounds.clamp(player_x, player_y)

    def set_animation_set(self, animation_set: Mapping[Direction, Sequence[Any]]) -> None:
        """Replace the per-direction frames in one assignment.

        The resting direction's first frame is shown right away when it exists.
        """
        self.animation_set = {direction: list(frames) for direction, frames in animation_set.items()}
        frames = self.animation_set.get(self.player.active_direction)
        if frames:
            self.player.sprite_index = 0
            self.displayed_frame = frames[0]

    def update(self, delta_time: float, context: GameContext) -> None:
        """Run as many fixed ticks as the accumulated time allows."""
        self._elapsed += delta_time
        ticks = 0
        while self._elapsed >= self.tick_interval and ticks < self.max_ticks_per_update:
            self._elapsed -= self.tick_interval
            self.tick(context)
            ticks += 1

        if self._elapsed >= self.tick_interval:
            logger.debug("Dropping %.3fs of tick backlog", self._elapsed)
            self._elapsed %= self.tick_interval

    def tick(self, context: GameContext) -> None:
        """Run one tick against the current input latch.

        A failing tick is logged and otherwise ignored so the loop keeps running.
        """
        try:
            self.step(context.input_manager.snapshot())
        except Exception:
            logger.exception("Player tick %d failed", self.tick_count)
        finally:
            self.tick_count += 1

    def step(self, flags: MovementFlags) -> None:
        """Apply one tick of movement, clamping, animation and debug text."""
        player = self.player
        x, y = player.x, player.y

        player.state = PlayerState.IDLE
        for direction, dx, dy in MOVEMENT_STEPS:
            if flags.is_held(direction):
                x += dx * self.speed
                y += dy * self.speed
                player.state = PlayerState.MOVING
                player.current_direction = direction
                player.last_moving_direction = direction

        player.x, player.y = self.bounds.clamp(x, y)
        self._advance_animation()
        self.debug_text = self._compose_debug_text()

    def _advance_animation(self) -> None:
        player = self.player
        frames = self.animation_set.get(player.active_direction)
        if not frames:
            return

        count = len(frames)
        if player.state is PlayerState.MOVING:
            player.idle_ticks = 0
            player.sprite_index = (player.sprite_index + 1) % count
        else:
            player.idle_ticks += 1
            if player.idle_ticks >= self.idle_frame_ticks:
                player.idle_ticks = 0
                player.sprite_index = (player.sprite_index + 1) % count
            else:
                # Another direction may have had more frames
                player.sprite_index %= count

        self.displayed_frame = frames[player.sprite_index]

    def _compose_debug_text(self) -> str:
        player = self.player
        return (
            f"State: {player.state.label} | "
            f"Direction: {player.current_direction.label} | "
            f"Position: ({round(player.x)}, {round(player.y)})"
        )

    def on_draw(self, context: GameContext) -> None:
        """Draw the current frame at the player's position."""
        if self.displayed_frame is None:
            return
        # Canvas y grows downward, arcade's grows upward
        bottom = self.bounds.canvas_height - self.player.y - self.bounds.sprite_height
        arcade.draw_texture_rect(
            self.displayed_frame,
            arcade.LBWH(self.player.x, bottom, self.bounds.sprite_width, self.bounds.sprite_height),
        )

    def cleanup(self) -> None:
        """Drop frames and reset the player for the next game."""
        self.animation_set = {}
        self.displayed_frame = None
        self.player = PlayerEntity(x=settings.PLAYER_START_X, y=settings.PLAYER_START_Y)
        self._elapsed = 0.0
