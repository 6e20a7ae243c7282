"""Gameplay and tuning constants.

Centralizes the numeric tuning values so update code carries no magic
numbers. ``blobworld.config.SimConfig`` reads its defaults from here.
"""

# Scene layout
SCENE_WIDTH = 520
SCENE_HEIGHT = 320
FLOOR_OFFSET = 40  # floor sits this far above the bottom edge

# Blob shape
BLOB_RADIUS = 26  # base radius
BLOB_POINTS = 48  # silhouette sample count
BLOB_WOBBLE = 7  # max radius deformation from noise
BLOB_WOBBLE_FREQ = 0.9  # noise sampling radius (smoothness)
BLOB_T_SPEED = 0.01  # noise time advance per frame
NOISE_OFFSET = 100  # keeps silhouette noise samples away from the lattice origin

# Blob movement
ACCEL = 0.5  # horizontal acceleration per frame of held input
MAX_RUN = 4.0  # horizontal speed clamp
GRAVITY = 0.35  # downward acceleration per frame
JUMP_V = -12.5  # vertical velocity set by a jump
FRICTION_GROUND = 0.88
FRICTION_AIR = 0.995
IDLE_EASE_GROUND = 0.15  # lerp factor toward vx=0 with no input, grounded
IDLE_EASE_AIR = 0.05  # same, airborne

# Landing / settling
LANDING_EASE_SPEED = 0.12  # squash/stretch relaxation factor
LANDING_SPEED_CAP = 10  # impact speed at which intensity saturates
LANDING_INTENSITY_MIN = 0.3
LANDING_INTENSITY_MAX = 0.6
LANDING_STRETCH_RATIO = 0.4  # horizontal stretch per unit of intensity
LANDING_REBOUND = 0.2  # fraction of impact speed returned upward
GROUND_DAMPING = 0.3  # vy multiplier while resting on the floor
GROUND_REST_EPSILON = 0.1
SETTLE_DAMPING = 0.5  # extra vy multiplier once grounded
SETTLE_EPSILON = 0.05

# Bob (presentational)
BOB_SPEED = 0.08
BOB_AMOUNT = 1.5

# Velocity squash-and-stretch mapping (presentational)
VELOCITY_SCALE_RANGE = 15  # vy is clamped to [-15, 15]
VELOCITY_SCALE_LOW = 0.85
VELOCITY_SCALE_HIGH = 1.15

# Clouds
CLOUD_COUNT = 4
CLOUD_SPEED = 0.3  # base leftward drift
CLOUD_DAMPING = 0.95
CLOUD_DRIFT_FORCE = 0.01  # lerp factor back toward calm drift
CLOUD_SIZE_RANGE = (40, 70)
CLOUD_MIN_Y = 20  # top of the soft vertical bound
CLOUD_FLOOR_MARGIN = 60  # bottom bound is floor_y minus this
CLOUD_SPAWN_MIN_Y = 40  # spawn / wrap band top
CLOUD_SPAWN_FLOOR_MARGIN = 80  # spawn / wrap band bottom is floor_y minus this
CLOUD_BOUNCE = -0.3  # vy restitution at the vertical bound

# Blob / cloud interaction
PUSH_STRENGTH = 0.15
SEPARATION_FORCE = 0.05
CLOUD_RADIUS_RATIO = 0.5  # cloud size to collision radius

# Sparkles
SPARKLE_COUNT = 8
SPARKLE_SPEED_RANGE = (1.5, 3)
SPARKLE_SIZE_RANGE = (3, 6)
SPARKLE_FADE_RANGE = (0.02, 0.04)
SPARKLE_GRAVITY = 0.1

__all__ = [name for name in globals().keys() if name.isupper()]
