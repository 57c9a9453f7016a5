from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lawmaker.cli import build_parser, main


def test_parser_requires_path():
    parser = build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["new"])
    assert excinfo.value.code == 2


def test_cli_new_creates_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    project_dir = tmp_path / "hello_world"

    exit_code = main(["new", str(project_dir), "--elixir-version", "1.6.0"])

    assert exit_code == 0
    assert (project_dir / "lib" / "hello_world.ex").exists()
    assert 'elixir: "~> 1.6"' in (project_dir / "mix.exs").read_text(encoding="utf-8")
    captured = capsys.readouterr()
    assert "Your Mix project was created successfully." in captured.out
    assert f"cd {project_dir}\n    mix test" in captured.out
    assert "* creating lib/hello_world.ex" in captured.err


def test_cli_new_supervised_with_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    project_dir = tmp_path / "shop"
    project_dir.mkdir()
    monkeypatch.chdir(project_dir)

    exit_code = main(["new", ".", "--module", "Shop.Core", "--sup"])

    assert exit_code == 0
    assert (project_dir / "lib" / "shop" / "application.ex").exists()


def test_cli_reports_invalid_names(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["new", str(tmp_path / "Bad-Name")])

    assert exit_code == 1
    assert "--app APP" in capsys.readouterr().err
    assert not (tmp_path / "Bad-Name").exists()


def test_cli_reports_taken_module(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["new", str(tmp_path / "demo"), "--module", "Enum"])

    assert exit_code == 1
    assert "already taken" in capsys.readouterr().err


def test_cli_declined_overwrite(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    project_dir = tmp_path / "demo"
    project_dir.mkdir()
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    exit_code = main(["new", str(project_dir)])

    assert exit_code == 1
    assert "Please select another directory" in capsys.readouterr().err
    assert list(project_dir.iterdir()) == []


def test_cli_yes_skips_prompt(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    project_dir = tmp_path / "demo"
    project_dir.mkdir()
    monkeypatch.setattr("builtins.input", lambda prompt: pytest.fail("prompted"))

    assert main(["new", str(project_dir), "--yes"]) == 0
    assert (project_dir / "mix.exs").exists()


def test_cli_umbrella(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["new", str(tmp_path / "platform"), "--umbrella"])

    assert exit_code == 0
    assert (tmp_path / "platform" / "apps").is_dir()
    assert "mix new my_app" in capsys.readouterr().out


def test_cli_install_hook(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["install-hook", "--project-root", str(tmp_path)]) == 1
    assert "git init" in capsys.readouterr().err

    (tmp_path / ".git" / "hooks").mkdir(parents=True)
    assert main(["install-hook", "--project-root", str(tmp_path)]) == 0
    assert (tmp_path / ".git" / "hooks" / "pre-commit").is_symlink()


@pytest.mark.parametrize("position", ["before", "after"])
def test_verbose_flag_on_either_side_of_command(tmp_path: Path, position: str):
    project_dir = tmp_path / "demo"
    argv = ["new", str(project_dir)]
    argv = ["-v", *argv] if position == "before" else [*argv, "--verbose"]

    assert main(argv) == 0
    assert logging.getLogger("lawmaker").level == logging.DEBUG


def test_verbose_flag_after_install_hook(tmp_path: Path):
    (tmp_path / ".git" / "hooks").mkdir(parents=True)

    assert main(["install-hook", "--project-root", str(tmp_path), "-v"]) == 0
    assert logging.getLogger("lawmaker").level == logging.DEBUG


def test_verbose_defaults_to_info(tmp_path: Path):
    assert main(["new", str(tmp_path / "demo")]) == 0
    assert logging.getLogger("lawmaker").level == logging.INFO


def test_cli_rejects_empty_path(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["new", ""])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert err.startswith("error: path:")
    assert "Traceback" not in err


def test_cli_lists_files_written_before_a_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    project_dir = tmp_path / "demo"
    project_dir.mkdir()
    (project_dir / "lib").write_text("not a directory\n", encoding="utf-8")

    exit_code = main(["new", str(project_dir), "--yes"])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "error: could not write lib" in err
    assert "files created before the failure:" in err
    assert "  README.md" in err
    assert "  config/config.exs" in err
    assert "lib/demo.ex" not in err
    assert (project_dir / "README.md").exists()
    assert not (project_dir / "test").exists()
