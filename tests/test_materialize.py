from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lawmaker.errors import DirectoryConflict, WriteFailure
from lawmaker.materialize import Materializer
from lawmaker.plan import ActionKind, FileAction


def _file(path: str, content: str = "content\n") -> FileAction:
    return FileAction(path, ActionKind.CREATE_FILE, rendered_content=content)


def _dir(path: str) -> FileAction:
    return FileAction(path, ActionKind.CREATE_DIR)


def _refuse(prompt: str) -> bool:
    raise AssertionError(f"unexpected prompt: {prompt}")


def _snapshot(root: Path) -> dict[str, str]:
    return {
        str(path.relative_to(root)): path.read_text(encoding="utf-8") if path.is_file() else "<dir>"
        for path in sorted(root.rglob("*"))
    }


def test_materialize_writes_plan_in_order(tmp_path: Path):
    root = tmp_path / "demo"
    actions = [_file("README.md", "# Demo\n"), _dir("lib"), _file("lib/demo.ex"), _dir("lib/demo/nested")]

    result = Materializer(root, cwd=tmp_path).materialize(actions, _refuse)

    assert result.files_created == ["README.md", "lib/demo.ex"]
    assert result.warnings == []
    assert result.test_command == "mix test"
    assert (root / "README.md").read_text(encoding="utf-8") == "# Demo\n"
    assert (root / "lib" / "demo" / "nested").is_dir()


def test_existing_directory_declined_performs_no_writes(tmp_path: Path):
    root = tmp_path / "demo"
    root.mkdir()
    (root / "keep.txt").write_text("mine", encoding="utf-8")
    before = _snapshot(root)
    prompts: list[str] = []

    def decline(prompt: str) -> bool:
        prompts.append(prompt)
        return False

    with pytest.raises(DirectoryConflict):
        Materializer(root, cwd=tmp_path).materialize([_dir("lib"), _file("README.md")], decline)

    assert _snapshot(root) == before
    assert len(prompts) == 1
    assert "already exists" in prompts[0]


def test_existing_directory_accepted_overwrites_with_warning(tmp_path: Path):
    root = tmp_path / "demo"
    root.mkdir()
    (root / "README.md").write_text("old", encoding="utf-8")

    result = Materializer(root, cwd=tmp_path).materialize([_file("README.md", "new\n")], lambda prompt: True)

    assert (root / "README.md").read_text(encoding="utf-8") == "new\n"
    assert result.files_created == ["README.md"]
    assert result.warnings == ["overwrote existing file README.md"]


def test_current_directory_is_not_confirmed(tmp_path: Path):
    result = Materializer(tmp_path, cwd=tmp_path).materialize([_file("README.md")], _refuse)

    assert result.files_created == ["README.md"]


def test_missing_directory_is_not_confirmed(tmp_path: Path):
    root = tmp_path / "a" / "b"

    Materializer(root, cwd=tmp_path).materialize([_file("mix.exs")], _refuse)

    assert (root / "mix.exs").is_file()


def test_write_failure_stops_the_plan(tmp_path: Path):
    root = tmp_path / "demo"
    actions = [
        _file("blocker"),
        _file("blocker/inside.txt"),
        _file("after.txt"),
    ]

    with pytest.raises(WriteFailure) as excinfo:
        Materializer(root, cwd=tmp_path).materialize(actions, _refuse)

    assert excinfo.value.files_created == ("blocker",)
    assert "blocker/inside.txt" in str(excinfo.value)
    assert (root / "blocker").is_file()
    assert not (root / "after.txt").exists()


def test_created_paths_are_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="lawmaker.materialize")

    Materializer(tmp_path / "demo", cwd=tmp_path).materialize([_dir("lib"), _file("lib/demo.ex")], _refuse)

    assert [record.getMessage() for record in caplog.records] == [
        "* creating lib",
        "* creating lib/demo.ex",
    ]


def test_existing_directories_are_not_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    root = tmp_path / "demo"
    (root / "lib").mkdir(parents=True)
    caplog.set_level(logging.INFO, logger="lawmaker.materialize")

    result = Materializer(root, cwd=tmp_path).materialize(
        [_dir("lib"), _file("lib/demo.ex"), _dir("test")], lambda prompt: True
    )

    assert [record.getMessage() for record in caplog.records] == [
        "* creating lib/demo.ex",
        "* creating test",
    ]
    assert result.files_created == ["lib/demo.ex"]
