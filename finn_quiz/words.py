from __future__ import annotations

import json
import logging
import os
import random
from typing import Any, Dict, List, Optional

import yaml

from .errors import ArgumentError, FileError, LoadError, ParseError
from .structured import WordEntry

logger = logging.getLogger(__name__)

JSON_EXTENSIONS = (".json",)


# ----------------------------------------------------------------------
# Document codec
# ----------------------------------------------------------------------

def is_json_path(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in JSON_EXTENSIONS


def read_document(path: str) -> Any:
    """Read and parse a word file. JSON by extension, YAML otherwise."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise FileError(f"Cannot read word file {path}: {e.strerror or e}") from e

    try:
        if is_json_path(path):
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ParseError(f"Cannot parse {path}: {e}") from e


def write_document(path: str, data: Any) -> None:
    """Write ``data`` in the format implied by the extension of ``path``."""
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            if is_json_path(path):
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.write("\n")
            else:
                yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
    except OSError as e:
        raise FileError(f"Cannot write {path}: {e.strerror or e}") from e


# ----------------------------------------------------------------------
# Word Store Loader
# ----------------------------------------------------------------------

def _field(record: Dict[Any, Any], key: str) -> Any:
    # Older exports carry symbol-style keys such as ":fi".
    if key in record:
        return record[key]
    return record.get(f":{key}")


def _is_missed_export(data: Dict[Any, Any]) -> bool:
    return isinstance(_field(data, "missed"), list) and isinstance(_field(data, "meta"), dict)


def _records_from_mapping(data: Dict[Any, Any]) -> List[Any]:
    """Values may be records, or a bare translation / list as an accepted shorthand."""
    records: List[Any] = []
    for en, value in data.items():
        if value is None:
            value = {}
        if isinstance(value, dict):
            records.append({"en": en, "fi": _field(value, "fi"), "phon": _field(value, "phon")})
        else:
            # Shorthand: "dog: koira" or "dog: [koira, hauva]"
            records.append({"en": en, "fi": value, "phon": None})
    return records


def _target_terms(fi: Any) -> List[str]:
    if fi is None:
        return []
    if isinstance(fi, (list, tuple)):
        terms = [str(x).strip() for x in fi if x is not None]
    else:
        terms = [str(fi).strip()]
    return [t for t in terms if t]


def build_entry(record: Any) -> WordEntry:
    """Validate one raw record and turn it into a WordEntry."""
    if not isinstance(record, dict):
        raise LoadError(f"Invalid word entry: {record!r}")

    en = _field(record, "en")
    en_text = "" if en is None else str(en).strip()
    if not en_text:
        raise LoadError(f"Invalid word entry (missing English term): {record!r}")

    fi_terms = _target_terms(_field(record, "fi"))
    if not fi_terms:
        raise LoadError(f"Invalid word entry (no Finnish translation): {record!r}")

    phon = _field(record, "phon")
    phon_text = "" if phon is None else str(phon).strip()
    return WordEntry(en=en_text, fi=tuple(fi_terms), phon=phon_text)


def parse_words(data: Any) -> List[WordEntry]:
    """Normalise either supported document shape into a list of entries."""
    if isinstance(data, list):
        records = data
    elif isinstance(data, dict):
        if _is_missed_export(data):
            records = _field(data, "missed")
        else:
            records = _records_from_mapping(data)
    else:
        raise LoadError(
            f"Unsupported word file structure: expected a list or a mapping, got {type(data).__name__}"
        )
    return [build_entry(r) for r in records]


def load_words(path: str) -> List[WordEntry]:
    """Load and validate every entry of a word file."""
    words = parse_words(read_document(path))
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


# ----------------------------------------------------------------------
# Selector
# ----------------------------------------------------------------------

def parse_count(count: Optional[str]) -> Optional[int]:
    """Return None for "all" or no count, else a positive integer."""
    if count is None:
        return None
    text = str(count).strip()
    if text.lower() == "all":
        return None
    try:
        n = int(text)
    except ValueError:
        raise ArgumentError(f"Count must be a positive integer or 'all', got {count!r}") from None
    if n <= 0:
        raise ArgumentError(f"Count must be a positive integer or 'all', got {count!r}")
    return n


def choose_words(
    words: List[WordEntry], count: Optional[str], rng: Optional[random.Random] = None
) -> List[WordEntry]:
    """Shuffle the list and keep the first ``count`` words (or all of them)."""
    rng = rng or random.Random()
    n = parse_count(count)
    if n is None:
        selected = list(words)
        rng.shuffle(selected)
    else:
        selected = rng.sample(words, min(n, len(words)))
    logger.debug("Selected %d of %d words", len(selected), len(words))
    return selected
