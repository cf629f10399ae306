import datetime
import logging
import os
from typing import List, Optional

from . import words
from .config import QuizConfig
from .console import Say, echo
from .structured import RunMetadata, SessionStats, WordEntry

logger = logging.getLogger(__name__)


def pct(part: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return (float(part) / float(total)) * 100.0


def summary_lines(stats: SessionStats) -> List[str]:
    total = stats.total
    return [
        "Results",
        f"Total: {total}",
        f"Correct 1st: {stats.correct_first_attempt} ({pct(stats.correct_first_attempt, total):.1f}%)",
        f"Correct 2nd: {stats.correct_second_attempt} ({pct(stats.correct_second_attempt, total):.1f}%)",
        f"Failed: {stats.failed} ({pct(stats.failed, total):.1f}%)",
    ]


def print_summary(stats: SessionStats, say: Say = echo) -> None:
    say("")
    say("-" * 50)
    for line in summary_lines(stats):
        say(line)


def missed_filename(input_path: str, now: datetime.datetime) -> str:
    """``<base>_missed_<YYYYmmdd_HHMMSS><ext>``, keeping the input's extension."""
    base, ext = os.path.splitext(os.path.basename(input_path))
    return f"{base}_missed_{now.strftime('%Y%m%d_%H%M%S')}{ext or '.yaml'}"


def write_missed_file(
    input_path: str,
    stats: SessionStats,
    missed: List[WordEntry],
    config: QuizConfig,
    now: Optional[datetime.datetime] = None,
) -> str:
    """Write stats and missed words next to run metadata. Returns the new path.

    Two runs finishing within the same second write the same file name; the
    later one wins.
    """
    now = now or datetime.datetime.now().astimezone()
    meta = RunMetadata(
        generated_at=now.isoformat(timespec="seconds"),
        source_file=os.path.abspath(input_path),
        lenient_umlauts=config.lenient_umlauts,
        match_game=config.match_game,
    )
    payload = {
        "meta": meta.to_dict(),
        "stats": stats.to_dict(),
        "missed": [w.to_record() for w in missed],
    }

    path = os.path.join(config.output_dir, missed_filename(input_path, now))
    words.write_document(path, payload)
    logger.debug("Wrote %d missed word(s) to %s", len(missed), path)
    return path


def finish(
    input_path: str,
    stats: SessionStats,
    missed: List[WordEntry],
    config: QuizConfig,
    say: Say = echo,
) -> Optional[str]:
    """Print the summary and export missed words, if any."""
    print_summary(stats, say=say)
    say("")
    if not missed:
        say("😊 Ei virheitä, hienoa työtä!")
        return None

    outfile = write_missed_file(input_path, stats, missed, config)
    say(f"Missed words saved to: {outfile}")
    return outfile
