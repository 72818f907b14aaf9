# Difficulty knobs. Compiled in, there is no config file.

INITIAL_TIME_BUDGET = 20   # seconds for the first rounds
TIME_BUDGET_DECREMENT = 2  # seconds removed at each difficulty step
MIN_TIME_BUDGET = 2        # the budget never goes below this
STREAK_STEP = 5            # consecutive successes per difficulty step

TICK_INTERVAL_SECONDS = 1.0

# Feedback kinds, also used to pick the label colour
SUCCESS = "success"
ERROR = "error"
