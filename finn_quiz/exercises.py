import logging
import random
from typing import List, Optional, Sequence

from .config import DEFAULT_DISTRACTORS
from .errors import InsufficientPoolError
from .structured import WordEntry

logger = logging.getLogger(__name__)


def distractor_candidates(pool: Sequence[WordEntry], correct: Sequence[str]) -> List[str]:
    """Every Finnish term in the pool, deduplicated, minus the accepted answers."""
    excluded = set(correct)
    seen = set()
    candidates: List[str] = []
    for word in pool:
        for term in word.fi:
            if term in excluded or term in seen:
                continue
            seen.add(term)
            candidates.append(term)
    return candidates


def pick_distractors(
    pool: Sequence[WordEntry],
    correct: Sequence[str],
    n: int = DEFAULT_DISTRACTORS,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Get ``n`` wrong options for a multiple-choice question.

    Raises InsufficientPoolError when the pool cannot supply ``n`` distinct
    terms outside the accepted answers.
    """
    rng = rng or random.Random()
    candidates = distractor_candidates(pool, correct)
    if len(candidates) < n:
        raise InsufficientPoolError(
            f"Not enough distractors: need {n}, only {len(candidates)} other translation(s) in the word list."
        )
    selected = rng.sample(candidates, n)
    logger.debug("Distractors for %s: %s", list(correct), selected)
    return selected


def build_options(
    word: WordEntry,
    pool: Sequence[WordEntry],
    n: int = DEFAULT_DISTRACTORS,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """One accepted translation plus ``n`` distractors, shuffled."""
    rng = rng or random.Random()
    shown_correct = rng.choice(word.fi)
    options = [shown_correct] + pick_distractors(pool, word.fi, n=n, rng=rng)
    rng.shuffle(options)
    return options
