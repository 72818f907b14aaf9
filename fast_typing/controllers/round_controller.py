"""
Round controller - drives the phrase / countdown / submit cycle.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from common import messages, utils
from common.constants import SUCCESS, ERROR
from fast_typing.controllers.countdown import Countdown
from fast_typing.models.game_state import GameState
from fast_typing.models.phrase_source import PhraseSource

logger = utils.setup_logger("RoundController")


class RoundState(Enum):
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Feedback:
    kind: str  # SUCCESS or ERROR
    message: str


@dataclass(frozen=True)
class RoundResult:
    phrase: str
    attempt: str
    matched: bool
    timed_out: bool
    level: int


def normalize_attempt(text: Optional[str]) -> str:
    """Missing input counts as empty, surrounding whitespace is ignored."""
    return (text or "").strip()


def is_match(text: Optional[str], phrase: str) -> bool:
    return normalize_attempt(text) == phrase


class RoundController:
    """Runs rounds against a GameState and a PhraseSource."""

    def __init__(
        self,
        game: GameState,
        phrases: PhraseSource,
        countdown: Optional[Countdown] = None
    ):
        self.game = game
        self.phrases = phrases
        self.countdown = countdown or Countdown()

        self.state = RoundState.IDLE
        self.phrase = ""
        self.budget = 0
        self.remaining = 0
        self.staged_input = ""
        self.feedback: Optional[Feedback] = None
        self.last_result: Optional[RoundResult] = None

        # Callbacks
        self.on_round_started: Optional[Callable[["RoundController"], None]] = None
        self.on_tick: Optional[Callable[["RoundController"], None]] = None
        self.on_resolved: Optional[Callable[["RoundController", RoundResult], None]] = None

    def start_round(self):
        """Loads a new phrase and (re)starts the countdown for the current level."""
        self.countdown.cancel()

        self.phrase = self.phrases.random_phrase()
        self.budget = self.game.current_time_budget()
        self.remaining = self.budget
        self.staged_input = ""
        self.state = RoundState.AWAITING_INPUT
        logger.debug(f"Round started: level={self.game.current_level()} budget={self.budget}s")

        self.countdown.start(self.tick)
        if self.on_round_started:
            self.on_round_started(self)

    def stage_input(self, text: Optional[str]):
        # What the timeout will validate if the player never submits
        self.staged_input = text or ""

    def submit(self, text: Optional[str] = None) -> Optional[RoundResult]:
        """Explicit submit (button or Enter). Ignored unless a round is waiting for input."""
        if self.state != RoundState.AWAITING_INPUT:
            return None
        if text is not None:
            self.stage_input(text)
        return self._resolve(timed_out=False)

    def tick(self) -> Optional[RoundResult]:
        if self.state != RoundState.AWAITING_INPUT:
            return None

        self.remaining -= 1
        if self.remaining <= 0:
            self.remaining = 0
            return self._resolve(timed_out=True)

        if self.on_tick:
            self.on_tick(self)
        return None

    def restart(self):
        self.countdown.cancel()
        self.game.reset()
        self.feedback = None
        self.last_result = None
        self.state = RoundState.IDLE
        logger.info("Game restarted")
        self.start_round()

    def progress(self) -> float:
        value = max(self.remaining, 0) / max(self.budget, 1)
        return min(1.0, max(0.0, value))

    def _resolve(self, timed_out: bool) -> RoundResult:
        self.countdown.cancel()
        self.state = RoundState.RESOLVED

        attempt = normalize_attempt(self.staged_input)
        matched = is_match(self.staged_input, self.phrase)

        if matched:
            self.game.advance()
            message = messages.CORRECT_AT_TIMEOUT if timed_out else messages.CORRECT
            self.feedback = Feedback(SUCCESS, message)
        else:
            self.game.reset_streak()
            message = messages.TIMEOUT if timed_out else messages.INCORRECT
            self.feedback = Feedback(ERROR, message)

        result = RoundResult(
            phrase=self.phrase,
            attempt=attempt,
            matched=matched,
            timed_out=timed_out,
            level=self.game.current_level()
        )
        self.last_result = result
        logger.info(
            f"Round resolved: matched={matched} timed_out={timed_out} "
            f"level={result.level} streak={self.game.consecutive_correct}"
        )

        if self.on_resolved:
            self.on_resolved(self, result)

        # The game never ends on failure
        self.start_round()
        return result
