"""
transition_settings.py
----------------------
Centralized default constants for the transition pipeline and demo runtime.

Values here are the fallbacks used when config/transition.yaml is missing
or omits a key.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Demo window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Scene Transition Demo"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Update timing for the demo loop."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Transition Pipeline
# ===========================================================

class Transition:
    """Scheduler behaviour toggles."""
    CONTROL_TIME_SCALE: bool = True
    CONFIG_FILE: str = "transition.yaml"


# ===========================================================
# Scene Loading
# ===========================================================

class Loading:
    """Simulated load provider and loading screen timing."""
    # Load progress stalls here until activation is requested
    ACTIVATION_THRESHOLD: float = 0.9
    LOAD_DURATION: float = 1.0
    UNLOAD_DURATION: float = 0.25
    MIN_LOADING_TIME: float = 3.0


# ===========================================================
# Fade Overlay
# ===========================================================

class Fade:
    """Loading screen overlay defaults."""
    COLOR: tuple = (0, 0, 0)
    MAX_ALPHA: int = 255
    SPEED: float = 500.0  # alpha units per second

