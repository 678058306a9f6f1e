"""
Swimmer Configuration Settings

All configuration constants for the swimmer demo.
Modify these values to change demo behavior.
"""

import math
from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
SHADERS_DIR = ASSETS_DIR / "shaders"
MODELS_DIR = ASSETS_DIR / "models"
DEFAULT_MODEL_PATH = MODELS_DIR / "Masculine_TPose.glb"

# ============================================================================
# Window Configuration
# ============================================================================

WINDOW_SIZE = (1280, 720)  # Width, Height
ASPECT_RATIO = None        # Follow the window size
WINDOW_TITLE = "Swimmer"
RESIZABLE = True

# OpenGL version (4.1 is max for macOS)
GL_VERSION = (3, 3)

# Background clear color (R, G, B) - dark water-ish 0x202533
CLEAR_COLOR = (0x20 / 255.0, 0x25 / 255.0, 0x33 / 255.0)

# ============================================================================
# Camera Settings
# ============================================================================

# Watch from the side
CAMERA_POSITION = (5.0, 2.0, 0.0)
CAMERA_TARGET = (0.0, 0.0, 0.0)

DEFAULT_FOV = 60.0   # Degrees
NEAR_PLANE = 0.1
FAR_PLANE = 1000.0

# Orbit auto-rotation, 0.5 = one full orbit every 120 seconds
ORBIT_AUTO_ROTATE = True
ORBIT_AUTO_ROTATE_SPEED = 0.5

# ============================================================================
# Model Placement
# ============================================================================

MODEL_ROTATION = (math.pi / 2, 0.0, 0.0)  # Roll the body forward so it faces down
MODEL_POSITION = (0.0, 1.0, 0.0)          # Lift a bit above origin

# ============================================================================
# Animation Settings
# ============================================================================

SPEED = 1.5                   # Global speed multiplier (<= 1 = slo-mo)
FIXED_FRAME_DELTA = 1.0 / 60.0  # Root drift step per rendered frame
DEFAULT_STROKE_PRESET = "freestyle"

# Loader worker threads (asset loading runs off the frame loop)
ASSET_LOADER_WORKERS = 1

# ============================================================================
# Skeleton Overlay (stick-figure debug view)
# ============================================================================

SKELETON_OVERLAY_OPACITY = 0.4
SKELETON_OVERLAY_COLOR = (0.55, 0.85, 1.0)
SKELETON_OVERLAY_LINE_WIDTH = 2.0

# The demo has no skinned mesh renderer, so it shows the overlay at startup
SHOW_SKELETON_OVERLAY = True

# ============================================================================
# Debug Panel
# ============================================================================

DEBUG_PANEL_ENABLED = True
DEBUG_PANEL_POSITION = (10, 10)
DEBUG_PANEL_WIDTH = 320
DEBUG_FRAME_SAMPLES = 60  # Average frame time over this many frames

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
