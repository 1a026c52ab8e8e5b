"""Tests for the command-line driver."""

import pytest

from invasion.cli import (
    EXIT_BAD_ALIEN_COUNT,
    EXIT_INVASION_INVALID,
    EXIT_STDIN_FAILED,
    EXIT_WORLD_READ_FAILED,
    EXIT_WORLD_WRITE_FAILED,
    main,
    parse_args,
    run_cli,
)
from invasion.config import Config

WORLD_TEXT = (
    "Foo north=Bar west=Baz south=Qu-ux\n"
    "Bar south=Foo west=Bee\n"
    "Baz east=Foo\n"
    "Qu-ux north=Foo\n"
    "Bee east=Bar\n"
)


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setattr(Config, "NO_COLOR", True)
    monkeypatch.setattr(Config, "SEED", None)


@pytest.fixture
def world_file(tmp_path):
    path = tmp_path / "world.txt"
    path.write_text(WORLD_TEXT, encoding="utf-8")
    return path


def no_prompt(text: str) -> str:  # pragma: no cover - must not be called
    raise AssertionError(f"unexpected prompt: {text}")


def test_parse_args_defaults():
    args = parse_args(["7"])
    assert args.aliens == "7"
    assert args.interactive is False
    assert args.seed is None
    assert args.world_in is None


def test_zero_aliens_means_no_invasion(capsys):
    assert run_cli(parse_args(["0"]), prompt=no_prompt) == 0
    assert "Zero 👽 aliens => no invasion! 🎉" in capsys.readouterr().out


def test_unreadable_alien_count(capsys):
    assert run_cli(parse_args(["many"]), prompt=no_prompt) == EXIT_BAD_ALIEN_COUNT
    assert "Failed to read the number of 👽 aliens" in capsys.readouterr().out


def test_missing_world_file(tmp_path):
    args = parse_args(["3", "--world-in", str(tmp_path / "missing.txt")])
    assert run_cli(args, prompt=no_prompt) == EXIT_WORLD_READ_FAILED


def test_malformed_world_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("Foo up=Bar\n", encoding="utf-8")
    assert run_cli(parse_args(["3", "--world-in", str(path)]), prompt=no_prompt) == EXIT_WORLD_READ_FAILED


def test_negative_alien_count(world_file, capsys):
    args = parse_args(["--world-in", str(world_file), "--", "-2"])
    assert run_cli(args, prompt=no_prompt) == EXIT_INVASION_INVALID
    assert "number of aliens must be greater than zero" in capsys.readouterr().out


def test_full_run_writes_world(world_file, tmp_path, capsys):
    out = tmp_path / "after.txt"
    args = parse_args(["4", "--seed", "7", "--world-in", str(world_file), "--world-out", str(out)])

    assert run_cli(args, prompt=no_prompt) == 0

    output = capsys.readouterr().out
    assert "Interactive mode: 🔴OFF" in output
    assert "Aliens landed!" in output
    assert "Invasion " in output
    assert output.rstrip().endswith("🏁 The End.")
    remaining = out.read_text(encoding="utf-8").splitlines()
    names = [line.split()[0] for line in remaining]
    assert names == [name for name in ["Foo", "Bar", "Baz", "Qu-ux", "Bee"] if name in names]


def test_alien_count_is_prompted_for(world_file, tmp_path):
    prompts = []

    def prompt(text: str) -> str:
        prompts.append(text)
        return "1"

    args = parse_args(["--world-in", str(world_file), "--world-out", str(tmp_path / "out.txt")])
    assert run_cli(args, prompt=prompt) == 0
    assert prompts == ["Please specify the number of 👽 aliens: "]


def test_interactive_mode_waits_after_each_event(world_file, tmp_path):
    prompts = []

    def prompt(text: str) -> str:
        prompts.append(text)
        return ""

    args = parse_args(["-i", "1", "--world-in", str(world_file), "--world-out", str(tmp_path / "out.txt")])
    assert run_cli(args, prompt=prompt) == 0
    # One alien: the landing event and the completion summary.
    assert prompts == ["↵ Press 'Enter' to continue ..."] * 2


def test_interactive_mode_without_stdin(world_file, tmp_path):
    def prompt(text: str) -> str:
        raise EOFError("closed")

    args = parse_args(["-i", "2", "--world-in", str(world_file), "--world-out", str(tmp_path / "out.txt")])
    assert run_cli(args, prompt=prompt) == EXIT_STDIN_FAILED


def test_unwritable_output(world_file, tmp_path):
    args = parse_args(["1", "--world-in", str(world_file), "--world-out", str(tmp_path)])
    assert run_cli(args, prompt=no_prompt) == EXIT_WORLD_WRITE_FAILED


def test_main_exits_with_code(world_file):
    with pytest.raises(SystemExit) as excinfo:
        main(["0", "--world-in", str(world_file)])
    assert excinfo.value.code == 0


def test_show_config(capsys):
    assert run_cli(parse_args(["--show-config"]), prompt=no_prompt) == 0
    assert "Invasion Configuration:" in capsys.readouterr().out
