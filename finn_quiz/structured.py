from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


MATCH_EXACT = "exact"
MATCH_UMLAUT_LENIENT = "umlaut_lenient"
MATCH_NONE = "no_match"

ANSWERED_CORRECTLY = "answered_correctly"
EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class WordEntry:
    en: str
    fi: Tuple[str, ...]
    phon: str = ""

    def to_record(self) -> Dict[str, Any]:
        """Return the entry in the shape word files use."""
        return {"en": self.en, "fi": list(self.fi), "phon": self.phon}


@dataclass
class SessionStats:
    total: int
    correct_first_attempt: int = 0
    correct_second_attempt: int = 0
    failed: int = 0

    def record_success(self, attempt: int) -> None:
        if attempt == 1:
            self.correct_first_attempt += 1
        elif attempt == 2:
            self.correct_second_attempt += 1
        else:
            raise ValueError(f"No counter for attempt {attempt}")

    def record_failure(self) -> None:
        self.failed += 1

    def is_complete(self) -> bool:
        answered = self.correct_first_attempt + self.correct_second_attempt + self.failed
        return answered == self.total

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "correct_first_attempt": self.correct_first_attempt,
            "correct_second_attempt": self.correct_second_attempt,
            "failed": self.failed,
        }


@dataclass(frozen=True)
class RunMetadata:
    generated_at: str
    source_file: str
    lenient_umlauts: bool
    match_game: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "source_file": self.source_file,
            "lenient_umlauts": self.lenient_umlauts,
            "match_game": self.match_game,
        }


@dataclass(frozen=True)
class MatchResult:
    kind: str
    correct: bool
    matched: Optional[str] = None


@dataclass
class QuestionResult:
    entry: WordEntry
    outcome: str
    attempt: Optional[int] = None
    answers: List[str] = field(default_factory=list)
