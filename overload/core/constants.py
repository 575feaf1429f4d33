"""Application constants."""

# 1RM formula: each rep and each set beyond the first adds 2.5%
ONE_RM_STEP = 0.025
ONE_RM_PRECISION = 2

# Suggestion search window, as fractions of the current 1RM
SEARCH_WEIGHT_LOW = 0.7
SEARCH_WEIGHT_HIGH = 1.3

# Accepted suggestions must land in (current, current * ceiling]
SUGGESTION_CEILING = 1.05
MAX_SUGGESTIONS = 10

# Trend regression looks at this many most recent logs
ONE_RM_HISTORY_SIZE = 5

# Slopes closer to zero than this are reported as stable
TREND_SLOPE_TOLERANCE = 1e-9

# Automatic (timer-driven) workout logs need at least this many sets
MIN_AUTOMATIC_SETS = 3

# Upper bounds on user-supplied search inputs; the suggestion grid is
# (sets x reps) combinations for every weight step in the 1RM band
MAX_SETS = 10
MAX_REPS = 30
MAX_ONE_RM_INPUT = 1000.0
MIN_WEIGHT_INCREMENT = 0.5
