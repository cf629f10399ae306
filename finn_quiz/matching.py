import unicodedata
from typing import Optional, Sequence

from .structured import MATCH_EXACT, MATCH_NONE, MATCH_UMLAUT_LENIENT, MatchResult

_UMLAUTS = str.maketrans("äö", "ao")


def normalize_basic(s: Optional[str]) -> str:
    if s is None:
        return ""
    return unicodedata.normalize("NFC", str(s)).strip().lower()


def normalize_lenient_umlauts(s: Optional[str]) -> str:
    return normalize_basic(s).translate(_UMLAUTS)


def match_answer(user: Optional[str], expected: Sequence[str], lenient: bool = False) -> MatchResult:
    """
    Compare a typed answer against every accepted translation.

    Tiers are tried in order and the first hit wins:
      1. exact          – trimmed, lowercased comparison
      2. umlaut_lenient – same, with ä -> a and ö -> o on both sides
                          (only when ``lenient`` is set)

    ``matched`` is the accepted term as written in the word file, so callers
    can list the remaining alternatives.
    """
    user_n = normalize_basic(user)
    for term in expected:
        if normalize_basic(term) == user_n:
            return MatchResult(MATCH_EXACT, True, term)

    if not lenient:
        return MatchResult(MATCH_NONE, False)

    user_l = normalize_lenient_umlauts(user)
    for term in expected:
        if normalize_lenient_umlauts(term) == user_l:
            return MatchResult(MATCH_UMLAUT_LENIENT, True, term)

    return MatchResult(MATCH_NONE, False)
