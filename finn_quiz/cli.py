import logging
import random
from typing import Optional

import click

from . import quiz, report, words
from .config import DEBUG_MODE, DEFAULT_DISTRACTORS, OUTPUT_DIR, QuizConfig
from .errors import ArgumentError, QuizError

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = DEBUG_MODE) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run(word_file: str, config: QuizConfig) -> Optional[str]:
    """Load, select, quiz and report. Returns the missed-words file, if written."""
    rng = random.Random(config.seed)
    pool = words.load_words(word_file)
    selected = words.choose_words(pool, config.requested_count, rng=rng)
    stats, missed = quiz.run_quiz(selected, pool, config, rng=rng)
    return report.finish(word_file, stats, missed, config)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("word_file", type=click.Path())
@click.argument("count", required=False)
@click.option("--lenient-umlauts", is_flag=True, help="Allow a for ä and o for ö")
@click.option("--match-game", is_flag=True, help="Enable multiple choice mode")
@click.option("--distractors", type=click.IntRange(min=1), default=DEFAULT_DISTRACTORS, show_default=True,
              help="Wrong options shown per question in match-game mode")
@click.option("--seed", type=int, default=None, help="Seed the shuffle for a repeatable session")
@click.option("--output-dir", default=OUTPUT_DIR, show_default=True,
              help="Where the missed-words file is written (env: FINN_QUIZ_OUTPUT_DIR)")
def main(
    word_file: str,
    count: Optional[str],
    lenient_umlauts: bool,
    match_game: bool,
    distractors: int,
    seed: Optional[int],
    output_dir: str,
) -> None:
    """Drill Finnish vocabulary from WORD_FILE (YAML or JSON).

    COUNT is the number of words to ask, or "all" (the default).
    """
    setup_logging()
    config = QuizConfig(
        lenient_umlauts=lenient_umlauts,
        match_game=match_game,
        requested_count=count,
        distractor_count=distractors,
        seed=seed,
        output_dir=output_dir,
    )
    try:
        run(word_file, config)
    except ArgumentError as e:
        logger.debug("Bad argument: %s", e)
        raise click.UsageError(str(e), ctx=click.get_current_context())
    except QuizError as e:
        logger.debug("Quiz aborted: %s", e)
        raise click.ClickException(str(e))


if __name__ == "__main__":
    main()
