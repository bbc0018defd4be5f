# Screen settings
SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 600
# Frames per second; the loop sleeps to hold this rate (10 ms per frame)
FPS = 100
WINDOW_TITLE = "Wall-Segment Raycaster"

# Map settings
# Map size in map units; also the pixel size of the top-down view at scale 1
MAP_WIDTH = 320
MAP_HEIGHT = 240
# Number of randomly placed walls inside the boundary
NUM_INTERIOR_WALLS = 6

# Player settings
# Rays cast per frame (one wall slice each in the 3D view)
NUM_RAYS = 320
# Field of view angle (in degrees)
FOV_DEGREES = 60.0
# Rotation per frame while a turn key is held (degrees)
ROT_STEP = 0.5
# Movement per frame while a move key is held (map units)
MOVE_STEP = 0.5

# Colors
BACKGROUND_COLOR = (0, 0, 0)
BORDER_COLOR = (0, 50, 100)
WALL_COLOR = (255, 255, 255)
# Brightness of ray lines in the top-down view (percent gray)
RAY_GRAY = 33
