# Apollonian gasket defaults

# Recursion stops at circles with a radius below this
DEFAULT_THRESHOLD = 0.01

# Tolerance used when checking that two circles touch
TANGENCY_TOL = 1e-9

# sqrt treats negative reals within this fraction of their scale as 0
SQRT_ROUNDING_TOL = 1e-12

# Worker processes used when the four trees are walked in parallel
PARALLEL_WORKERS = 4

# Rendering: stroke width as a fraction of the largest circle radius
LINE_WIDTH_SCALE = 0.003
