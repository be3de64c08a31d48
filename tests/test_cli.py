"""End-to-end tests for the interactive command."""

from pathlib import Path

from click.testing import CliRunner
import pytest

from batchrename import __version__
from batchrename.cli import main, parse_selection


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("BATCH_RENAME_CONFIG", raising=False)
    return CliRunner()


def _answers(*lines: str) -> str:
    return "\n".join(lines) + "\n"


def _file_names(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir() if p.is_file())


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_short_version(runner):
    result = runner.invoke(main, ["-v"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help(runner):
    result = runner.invoke(main, ["-h"])

    assert result.exit_code == 0
    assert "Usage" in result.output


def test_too_many_arguments_exits_zero(runner):
    result = runner.invoke(main, [".", "other"])

    assert result.exit_code == 0
    assert "Invalid arguments" in result.output


@pytest.mark.parametrize("argument", ["somewhere", "--foo"])
def test_unknown_argument_exits_one(runner, argument):
    result = runner.invoke(main, [argument])

    assert result.exit_code == 1
    assert "Invalid argument" in result.output


def test_numbering_in_current_directory(runner, mixed_dir, monkeypatch):
    monkeypatch.chdir(mixed_dir)

    result = runner.invoke(
        main, ["."], input=_answers("files", "n", "all", "numbering")
    )

    assert result.exit_code == 0, result.output
    assert _file_names(mixed_dir) == ["1.txt", "2.txt", "3.txt"]
    assert "Renamed 3 of 3 files" in result.output


def test_prompted_directory_and_custom_order(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    work = tmp_path / "work"
    work.mkdir()
    for name in ("a.txt", "b.txt", "c.txt"):
        (work / name).write_text(name)

    result = runner.invoke(
        main,
        input=_answers(str(work), "files", "y", "name", "3,1,2", "numbering"),
    )

    assert result.exit_code == 0, result.output
    assert (work / "1.txt").read_text() == "c.txt"
    assert (work / "2.txt").read_text() == "a.txt"
    assert (work / "3.txt").read_text() == "b.txt"


def test_prefix_on_folders(runner, mixed_dir, monkeypatch):
    monkeypatch.chdir(mixed_dir)

    result = runner.invoke(
        main, ["."], input=_answers("folders", "y", "name", "1", "prefix", "old_")
    )

    assert result.exit_code == 0, result.output
    assert (mixed_dir / "old_docs").is_dir()
    assert (mixed_dir / "images").is_dir()
    assert _file_names(mixed_dir) == ["a.txt", "b.txt", "c.txt"]


def test_suffix(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "photo.png").write_text("")

    result = runner.invoke(
        main, ["."], input=_answers("files", "n", "all", "suffix", "_v2")
    )

    assert result.exit_code == 0, result.output
    assert _file_names(tmp_path) == ["photo_v2.png"]


def test_no_files_exits_zero_without_renaming(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "folder").mkdir()

    result = runner.invoke(main, ["."], input=_answers("files"))

    assert result.exit_code == 0
    assert "No files found" in result.output
    assert (tmp_path / "folder").is_dir()


def test_missing_directory_exits_one(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(main, input=_answers(str(tmp_path / "missing")))

    assert result.exit_code == 1
    assert "Not a directory" in result.output


def test_invalid_selection_reprompts(runner, mixed_dir, monkeypatch):
    monkeypatch.chdir(mixed_dir)

    result = runner.invoke(
        main,
        ["."],
        input=_answers("files", "y", "name", "9", "abc", "1", "suffix", "_x"),
    )

    assert result.exit_code == 0, result.output
    assert result.output.count("Invalid selection") == 2
    assert _file_names(mixed_dir) == ["a_x.txt", "b.txt", "c.txt"]


def test_collision_can_be_declined(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_text("new")
    (tmp_path / "final_a.txt").write_text("keep me")

    result = runner.invoke(
        main, ["."], input=_answers("files", "y", "name", "1", "prefix", "final_", "n")
    )

    assert result.exit_code == 0, result.output
    assert "already taken" in result.output
    assert "Operation cancelled" in result.output
    assert (tmp_path / "final_a.txt").read_text() == "keep me"
    assert (tmp_path / "a.txt").exists()


def test_collision_check_can_be_disabled(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "settings" / "rename.yaml"
    config.parent.mkdir()
    config.write_text("prevent_collisions: false\n")
    (tmp_path / "a.txt").write_text("new")
    (tmp_path / "final_a.txt").write_text("old")

    result = runner.invoke(
        main,
        [".", "--config", str(config)],
        input=_answers("files", "y", "name", "1", "prefix", "final_"),
    )

    assert result.exit_code == 0, result.output
    assert "already taken" not in result.output
    assert _file_names(tmp_path) == ["final_a.txt"]
    assert (tmp_path / "final_a.txt").read_text() == "new"


def test_parse_selection_keeps_typed_order():
    options = ["a", "b", "c", "d"]

    assert parse_selection("3,1", options) == ["c", "a"]
    assert parse_selection("2-4", options) == ["b", "c", "d"]
    assert parse_selection("4-3, 1", options) == ["d", "c", "a"]
    assert parse_selection("all", options) == options
    assert parse_selection("1,1,2", options) == ["a", "b"]


@pytest.mark.parametrize("text", ["", "0", "5", "x", "1-9", " , "])
def test_parse_selection_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_selection(text, ["a", "b", "c", "d"])


def test_term_with_path_separator_reprompts(runner, tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    (work / "a.txt").write_text("")
    monkeypatch.chdir(work)

    result = runner.invoke(
        main, ["."], input=_answers("files", "n", "all", "prefix", "../", "new_")
    )

    assert result.exit_code == 0, result.output
    assert "Invalid term" in result.output
    assert _file_names(work) == ["new_a.txt"]
    assert _file_names(tmp_path) == []
