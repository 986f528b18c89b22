BACKGROUND_COLOR = "#ffffff"
AXIS_COLOR = "black"
LABEL_COLOR = "black"
LABEL_FONT = ("TkDefaultFont", 9)
LABEL_FONT_SIZE_PT = 9

# Fraction of the scene extent added around it so content never touches the edge
VIEW_MARGIN = 0.1
# Model units added around a scene that is a single point or a flat line
DEGENERATE_PADDING = 1.0

# Approximate on-screen distance between two ticks
TICK_SPACING_PX = 40.0
TICK_LENGTH_PX = 5.0
# Distance from the axis to the near side of a label
TICK_LABEL_GAP_PX = 10.0
# Baseline offset for labels under a horizontal axis
TICK_LABEL_BELOW_PX = 20.0

MARKER_RADIUS_PX = 5.0
# Corners within this many screen pixels of the pointer are picked
PICK_RADIUS_PX = 10.0

# Bit 0 of the buttons mask is the primary button
PRIMARY_BUTTON = 1

EXPORT_DPI = 100
