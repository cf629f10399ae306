from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from . import exercises
from .config import MAX_ATTEMPTS, QuizConfig
from .console import Ask, Say, echo, prompt_answer
from .matching import match_answer
from .structured import (
    ANSWERED_CORRECTLY,
    EXHAUSTED,
    MATCH_UMLAUT_LENIENT,
    QuestionResult,
    SessionStats,
    WordEntry,
)

logger = logging.getLogger(__name__)


def _phonetic_suffix(word: WordEntry) -> str:
    return f" ({word.phon})" if word.phon else ""


def ask_word(
    word: WordEntry,
    pool: Sequence[WordEntry],
    config: QuizConfig,
    rng: random.Random,
    ask: Ask = prompt_answer,
    say: Say = echo,
) -> QuestionResult:
    """Run one question for up to MAX_ATTEMPTS tries."""
    result = QuestionResult(entry=word, outcome=EXHAUSTED)

    for attempt in range(1, MAX_ATTEMPTS + 1):
        if config.match_game:
            options = exercises.build_options(word, pool, n=config.distractor_count, rng=rng)
            say("Options:")
            for opt in options:
                say(f"  - {opt}")
            answer = ask("Type the Finnish word: ")
        else:
            answer = ask("Finnish: ")
        result.answers.append(answer)

        match = match_answer(answer, word.fi, lenient=config.lenient_umlauts)
        if match.correct:
            if match.kind == MATCH_UMLAUT_LENIENT:
                say("✅ Hyvä! Muista: ä ja ö ovat tärkeitä 😉")
            else:
                say("✅ Oikein!")

            others = [t for t in word.fi if t != match.matched]
            if others:
                say(f"   Also accepted: {' / '.join(others)}")
            if word.phon:
                say(f"   (phonetic: {word.phon})")

            result.outcome = ANSWERED_CORRECTLY
            result.attempt = attempt
            return result

        if attempt < MAX_ATTEMPTS:
            say("Yritä uudelleen.")

    say(f"❌ Oikea sana: {' / '.join(word.fi)}{_phonetic_suffix(word)}")
    return result


def run_quiz(
    selected: Sequence[WordEntry],
    pool: Sequence[WordEntry],
    config: QuizConfig,
    rng: Optional[random.Random] = None,
    ask: Ask = prompt_answer,
    say: Say = echo,
) -> Tuple[SessionStats, List[WordEntry]]:
    """Quiz every selected word in order.

    Returns the session stats and the words missed on both attempts, in quiz
    order.
    """
    rng = rng or random.Random(config.seed)
    stats = SessionStats(total=len(selected))
    missed: List[WordEntry] = []

    say("")
    say(f"Finnish Quiz: {stats.total} word(s) (mode: {config.mode_label})")
    say("-" * 50)

    for idx, word in enumerate(selected, start=1):
        say("")
        say(f"[{idx}/{stats.total}] English: {word.en}")
        result = ask_word(word, pool, config, rng, ask=ask, say=say)

        if result.outcome == ANSWERED_CORRECTLY and result.attempt is not None:
            stats.record_success(result.attempt)
        else:
            stats.record_failure()
            missed.append(word)
        logger.debug("%s -> %s (answers: %s)", word.en, result.outcome, result.answers)

    return stats, missed
