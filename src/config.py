WIDTH = 1000
HEIGHT = 800
TITLE = "Tile Sprite Demo"
# Atlas chips are 16x16 and drawn at 4x on screen
CHIP_SIZE = 16
DISPLAY_SCALE = 4
ATLAS_COLUMNS = 4
# Actors wrap this far outside the visible canvas
WRAP_MARGIN = 48
# Blocking pause after each presented frame (milliseconds)
FRAME_DELAY_MS = 10
CLEAR_COLOR = (0, 0, 0)
# Jump bob: z = |sin(frame / JUMP_PERIOD)| * JUMP_HEIGHT
JUMP_HEIGHT = 16
JUMP_PERIOD = 10
# Walk cycle flips pose every ANIM_PHASE_FRAMES frames
ANIM_PHASE_FRAMES = 20
# Velocity = distance to pointer / STEER_DIVISOR
STEER_DIVISOR = 100
# Collision against obstacle tiles is off by default
COLLISION_ENABLED = False
# Actors steered alongside the controlled one (each gets its own shadow)
EXTRA_ACTORS = 0
SEED = None
DEBUG_TIMING = False
