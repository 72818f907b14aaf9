from common import utils
from common.constants import (
    INITIAL_TIME_BUDGET, TIME_BUDGET_DECREMENT, MIN_TIME_BUDGET, STREAK_STEP
)

logger = utils.setup_logger("GameState")


class GameState:
    """Level, streak of consecutive successes and time budget of a session."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._level = 1
        self._consecutive_correct = 0
        self._time_budget = INITIAL_TIME_BUDGET

    def advance(self):
        """
        Called once per correct submission.
        Every STREAK_STEP consecutive successes the budget shrinks, never below MIN_TIME_BUDGET.
        """
        self._level += 1
        self._consecutive_correct += 1

        # Modulus on the post-increment streak: steps land on 5, 10, 15...
        if self._consecutive_correct % STREAK_STEP == 0 and self._time_budget > MIN_TIME_BUDGET:
            self._time_budget = max(MIN_TIME_BUDGET, self._time_budget - TIME_BUDGET_DECREMENT)
            logger.info(f"Difficulty step at level {self._level}: {self._time_budget}s per round")

    def reset_streak(self):
        # Failure keeps the level and the current budget
        self._consecutive_correct = 0

    @property
    def consecutive_correct(self):
        return self._consecutive_correct

    def current_level(self):
        return self._level

    def current_time_budget(self):
        return self._time_budget
