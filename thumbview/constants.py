"""Default style values and preview presets for the thumb outline.

Lengths are in view points unless noted.
"""

# Thumb extrusion
THUMB_RADIUS = 30.0               # extrusion circle radius
THUMB_CIRCLE_OFFSET = 0.0         # center offset below the top edge; -radius puts half the circle above

# Rectangle body
CORNER_RADIUS = 0.0               # 0 gives sharp corners
Y_OFFSET = 30.0                   # room above the top edge for the thumb
WIDTH_INSET = 1.0                 # side padding so the stroke is not clipped
HEIGHT_INSET = 1.0                # top/bottom padding so the stroke is not clipped
CIRCLE_X_OFFSET = 0.0             # thumb center shift from width/2, negative is left

# Paint
STROKE_WIDTH = 1.0
FILL_COLOR = "#ffffff"            # white
STROKE_COLOR = "#555555"          # dark gray (1/3 white)

# Preview
PREVIEW_WIDTH = 320.0
PREVIEW_HEIGHT = 200.0
ARC_SAMPLES = 20                  # polyline steps per arc when flattening
