# constants.py

"""
Animation Constants

Fixed values shared by the scene controller and the renderer. Anything a
player might reasonably want to tweak per run lives in ``config.json``
instead.

Units are pixels and radians per frame unless noted otherwise.
"""

import math

FULL_TURN = 2.0 * math.pi

# Particle drift
PARTICLE_DRIFT_X = 0.1
PARTICLE_DRIFT_Y_RANGE = (0.0, 5.0)
PARTICLE_ROTATION_STEP_RANGE = (0.0, 0.05)
PARTICLE_SPRITE_SIZE = 32

# Focal image
FOCAL_ROTATION_STEP = 0.025
FOCAL_VERTICAL_OFFSET = 150.0
FOCAL_TINT = (1.0, 1.0, 1.0, 1.0)

# Caption
CAPTION_Y_OFFSET = 150.0
CAPTION_LINE_SPACING = 10.0
CAPTION_OUTLINE_OFFSET = (5.0, 5.0)
FONT_SWITCH_CHANCE = 0.03
