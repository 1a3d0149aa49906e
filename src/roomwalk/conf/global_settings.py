"""Default settings for roomwalk.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    SPRITES_PATH = "materials/idle_sprites"
    ROOMS_PATH = "materials/rooms"
    LOG_LEVEL = "INFO"
"""

# Window settings
SCREEN_WIDTH = 800
"""Width of the game window (and canvas) in pixels."""

SCREEN_HEIGHT = 400
"""Height of the game window (and canvas) in pixels."""

WINDOW_TITLE = "Room Walk"
"""Title displayed in the window title bar."""

LOG_LEVEL = "INFO"
"""Root logging level installed by setup_logging()."""

# Player settings
PLAYER_SPEED = 5.0
"""Player movement speed in pixels per tick."""

PLAYER_START_X = 368.0
"""Initial player x position (left edge, canvas coordinates)."""

PLAYER_START_Y = 268.0
"""Initial player y position (top edge, canvas coordinates, y grows downward)."""

SPRITE_WIDTH = 64
"""Width every player frame is decoded to, in pixels."""

SPRITE_HEIGHT = 64
"""Height every player frame is decoded to, in pixels."""

CANVAS_RIGHT_MARGIN = 20
"""Pixels reserved at the right edge of the canvas for UI chrome."""

CANVAS_BOTTOM_MARGIN = 60
"""Pixels reserved at the bottom edge of the canvas for UI chrome."""

# Timing settings
TICK_INTERVAL = 0.08
"""Seconds between two movement/animation ticks."""

MAX_TICKS_PER_UPDATE = 5
"""Upper bound on catch-up ticks run in a single frame."""

IDLE_FRAME_TICKS = 5
"""Number of idle ticks between two idle animation frames."""

# Asset settings
SPRITES_PATH = "materials/idle_sprites"
"""Folder holding one subfolder of frames per direction."""

ROOMS_PATH = "materials/rooms"
"""Folder holding numbered room background images (1.jpg, 2.jpg, ...)."""

DIRECTION_FOLDERS = {
    "UP": "forward",
    "DOWN": "back",
    "LEFT": "left",
    "RIGHT": "right",
}
"""Direction name to frame subfolder name."""

SPRITE_EXTENSION = ".png"
"""File extension of player frames."""

ROOM_EXTENSION = ".jpg"
"""File extension of room backgrounds."""

# Room settings
INITIAL_ROOM = 1
"""Room shown at startup."""

DOOR_AREA = (20, 20, 60, 80)
"""Door trigger area as (x, y, width, height) in canvas coordinates."""

FALLBACK_BACKGROUND_COLOR = (200, 200, 255)
"""Flat background colour used when no room background is available."""

# Notice settings
NOTICE_DURATION = 4.0
"""Seconds a notice stays on screen."""

NOTICE_MAX_VISIBLE = 4
"""Maximum number of notices drawn at once."""

# Installed systems
INSTALLED_SYSTEMS = [
    "roomwalk.systems.input",
    "roomwalk.systems.assets",
    "roomwalk.systems.room",
    "roomwalk.systems.player",
    "roomwalk.systems.notice",
    "roomwalk.systems.debug",
]
"""List of module paths to import for system registration.

Custom systems can be added by extending this list in settings.py:

Example:
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "mydemo.systems.footsteps",
    ]
"""
