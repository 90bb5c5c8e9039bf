"""Tests for the click command-line interface."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from caw.cli import main

KEY_ARGS = ["--seed", "0x45", "--date", "2024-03-05"]


def _don(runner: CliRunner, dictionary_file: Path, payload: bytes, *extra: str):
    return runner.invoke(
        main,
        ["--log-level", "ERROR", "don", *KEY_ARGS, "--dictionary", str(dictionary_file), *extra],
        input=payload,
    )


def test_don_then_doff_round_trip(dictionary_file: Path, tmp_path: Path) -> None:
    runner = CliRunner()
    payload = "Armored text, 2024!".encode("utf-8") + b"\x00\xff"

    armored = _don(runner, dictionary_file, payload, "--limit", "40")
    assert armored.exit_code == 0, armored.output
    lines = [line for line in armored.stdout.splitlines() if line.strip()]
    assert len(lines) > 1

    output = tmp_path / "recovered.bin"
    recovered = runner.invoke(
        main,
        [
            "--log-level",
            "ERROR",
            "doff",
            *KEY_ARGS,
            "--dictionary",
            str(dictionary_file),
            "--output",
            str(output),
        ],
        input="\n".join(reversed(lines)) + "\n",
    )
    assert recovered.exit_code == 0, recovered.output
    assert output.read_bytes() == payload


def test_odd_length_needs_pad_flag(dictionary_file: Path) -> None:
    runner = CliRunner()
    rejected = _don(runner, dictionary_file, b"odd")
    assert rejected.exit_code != 0
    padded = _don(runner, dictionary_file, b"odd", "--pad")
    assert padded.exit_code == 0


def test_invalid_seed(dictionary_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["don", "--seed", "bogus", "--dictionary", str(dictionary_file)],
        input=b"ab",
    )
    assert result.exit_code == 2


def test_doctor_reports_dictionary(dictionary_file: Path) -> None:
    result = CliRunner().invoke(main, ["doctor", "--dictionary", str(dictionary_file)])
    assert result.exit_code == 0
    assert "65600 words" in result.output


def test_doctor_rejects_short_dictionary(tmp_path: Path) -> None:
    path = tmp_path / "short.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")
    result = CliRunner().invoke(main, ["doctor", "--dictionary", str(path)])
    assert result.exit_code == 1
    assert "at least 65551" in result.output
