"""
Central Configuration
All simulation constants and window settings in one place
"""

# === FLOCK ===
FLOCK_SIZE = 100

# Per-boid limits (units per frame)
MAX_SPEED = 2.0
MAX_FORCE = 0.03

# Perception radii (strict <)
ALIGN_RADIUS = 50.0
COHESION_RADIUS = 50.0
SEPARATION_RADIUS = 24.0

# Initial velocity components are drawn from [lo, hi)
INITIAL_SPEED_RANGE = (-1.0, 1.0)

# === FRAME LOOP ===
FRAME_INTERVAL_MS = 16   # ~60 fps, no catch-up on missed frames
LOG_EVERY_N_FRAMES = 300  # debug summary cadence

# === WINDOW ===
WINDOW_TITLE = "Boids"
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
