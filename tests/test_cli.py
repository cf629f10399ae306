"""
End-to-end runs of the finn-quiz command through click's test runner.
"""

import glob
import os
from typing import Any

import pytest
import yaml
from click.testing import CliRunner

from finn_quiz.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def one_word(tmp_path: Any) -> str:
    path = tmp_path / "words.yaml"
    path.write_text("- en: cat\n  fi: [kissa]\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def out_dir(tmp_path: Any) -> str:
    return str(tmp_path / "out")


def test_correct_answer_writes_no_file(runner: CliRunner, one_word: str, out_dir: str) -> None:
    result = runner.invoke(main, [one_word, "--output-dir", out_dir], input="kissa\n")
    assert result.exit_code == 0, result.output
    assert "Correct 1st: 1 (100.0%)" in result.output
    assert "Failed: 0 (0.0%)" in result.output
    assert "Ei virheitä" in result.output
    assert not os.path.exists(out_dir)


def test_wrong_twice_writes_missed_file(runner: CliRunner, one_word: str, out_dir: str) -> None:
    result = runner.invoke(main, [one_word, "all", "--output-dir", out_dir], input="koira\nhauva\n")
    assert result.exit_code == 0, result.output
    assert "Failed: 1 (100.0%)" in result.output

    files = glob.glob(os.path.join(out_dir, "words_missed_*.yaml"))
    assert len(files) == 1
    assert f"Missed words saved to: {files[0]}" in result.output
    with open(files[0], encoding="utf-8") as f:
        data = yaml.safe_load(f)
    assert data["stats"] == {"total": 1, "correct_first_attempt": 0, "correct_second_attempt": 0, "failed": 1}
    assert data["missed"] == [{"en": "cat", "fi": ["kissa"], "phon": ""}]
    assert data["meta"]["source_file"] == os.path.abspath(one_word)


def test_end_of_input_counts_as_wrong(runner: CliRunner, one_word: str, out_dir: str) -> None:
    result = runner.invoke(main, [one_word, "--output-dir", out_dir], input="")
    assert result.exit_code == 0, result.output
    assert "Failed: 1 (100.0%)" in result.output


def test_lenient_flag(runner: CliRunner, tmp_path: Any, out_dir: str) -> None:
    path = tmp_path / "words.yaml"
    path.write_text("weather:\n  fi: sää\n", encoding="utf-8")
    result = runner.invoke(main, [str(path), "--lenient-umlauts", "--output-dir", out_dir], input="saa\n")
    assert result.exit_code == 0, result.output
    assert "Correct 1st: 1" in result.output


def test_count_limits_questions(runner: CliRunner, tmp_path: Any, out_dir: str) -> None:
    path = tmp_path / "words.yaml"
    path.write_text("dog: koira\ncat: kissa\nnight: yö\n", encoding="utf-8")
    result = runner.invoke(main, [str(path), "2", "--seed", "1", "--output-dir", out_dir], input="x\nx\nx\nx\n")
    assert result.exit_code == 0, result.output
    assert "Total: 2" in result.output


def test_match_game_runs(runner: CliRunner, tmp_path: Any, out_dir: str) -> None:
    path = tmp_path / "words.json"
    path.write_text('[{"en": "dog", "fi": "koira"}, {"en": "cat", "fi": "kissa"}, {"en": "night", "fi": "yö"}]',
                    encoding="utf-8")
    result = runner.invoke(main, [str(path), "1", "--match-game", "--output-dir", out_dir], input="x\nx\n")
    assert result.exit_code == 0, result.output
    assert "Options:" in result.output
    assert "mode: match-game" in result.output
    assert len(glob.glob(os.path.join(out_dir, "words_missed_*.json"))) == 1


def test_missing_word_file_prints_usage(runner: CliRunner) -> None:
    result = runner.invoke(main, [])
    assert result.exit_code == 2
    assert "Usage:" in result.output


def test_nonexistent_word_file(runner: CliRunner, tmp_path: Any) -> None:
    result = runner.invoke(main, [str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "Cannot read word file" in result.output


def test_bad_count_is_a_usage_error(runner: CliRunner, one_word: str) -> None:
    result = runner.invoke(main, [one_word, "lots"])
    assert result.exit_code == 2
    assert "positive integer" in result.output


def test_invalid_entry(runner: CliRunner, tmp_path: Any) -> None:
    path = tmp_path / "words.yaml"
    path.write_text("- en: cat\n", encoding="utf-8")
    result = runner.invoke(main, [str(path)])
    assert result.exit_code == 1
    assert "Invalid word entry" in result.output


def test_match_game_with_too_few_words(runner: CliRunner, one_word: str, out_dir: str) -> None:
    result = runner.invoke(main, [one_word, "--match-game", "--output-dir", out_dir])
    assert result.exit_code == 1
    assert "Not enough distractors" in result.output
    assert not os.path.exists(out_dir)


def test_unwritable_output_dir_is_reported(runner: CliRunner, one_word: str, tmp_path: Any) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    result = runner.invoke(main, [one_word, "--output-dir", str(blocker / "sub")], input="x\nx\n")
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot write" in result.output
