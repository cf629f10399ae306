import os
from dataclasses import dataclass
from typing import Optional

DEBUG_MODE = os.getenv("DEBUG", "0") == "1"
OUTPUT_DIR: str = os.environ.get("FINN_QUIZ_OUTPUT_DIR", ".")

MAX_ATTEMPTS = 2
DEFAULT_DISTRACTORS = 2


@dataclass(frozen=True)
class QuizConfig:
    """Options for one run, built once by the command line."""

    lenient_umlauts: bool = False
    match_game: bool = False
    requested_count: Optional[str] = None
    distractor_count: int = DEFAULT_DISTRACTORS
    seed: Optional[int] = None
    output_dir: str = OUTPUT_DIR

    @property
    def mode_label(self) -> str:
        return "match-game" if self.match_game else "typing"
