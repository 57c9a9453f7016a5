"""Write a planned project tree to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from .config import GenerationResult
from .errors import DirectoryConflict, WriteFailure
from .plan import ActionKind, FileAction

__all__ = ["ConfirmOverwrite", "Materializer"]


LOGGER = logging.getLogger(__name__)

ConfirmOverwrite = Callable[[str], bool]


class Materializer:
    """Apply :class:`~lawmaker.plan.FileAction` steps below ``root``.

    Files are written one at a time. When a write fails the remaining actions
    are abandoned and files already written are left in place.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        cwd: str | Path | None = None,
        test_command: str = "mix test",
    ) -> None:
        self.root = Path(root).expanduser()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.test_command = test_command

    def _is_current_directory(self) -> bool:
        return self.root.resolve() == self.cwd.resolve()

    def check_target(self, confirm_overwrite: ConfirmOverwrite) -> None:
        """Ask before reusing an existing directory other than the current one."""

        if self._is_current_directory() or not self.root.is_dir():
            return
        prompt = f"The directory {str(self.root)!r} already exists. Are you sure you want to continue?"
        if not confirm_overwrite(prompt):
            raise DirectoryConflict("Please select another directory for installation")

    def materialize(
        self,
        actions: Iterable[FileAction],
        confirm_overwrite: ConfirmOverwrite,
    ) -> GenerationResult:
        """Create every directory and file in ``actions``."""

        self.check_target(confirm_overwrite)

        created: list[str] = []
        warnings: list[str] = []

        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteFailure(f"could not create {self.root}: {exc}", created) from exc

        for action in actions:
            destination = self.root / action.relative_path
            try:
                if action.kind is ActionKind.CREATE_DIR:
                    if not destination.is_dir():
                        destination.mkdir(parents=True, exist_ok=True)
                        LOGGER.info("* creating %s", action.relative_path)
                    continue

                if destination.exists():
                    warnings.append(f"overwrote existing file {action.relative_path}")
                destination.write_text(action.rendered_content or "", encoding="utf-8")
            except OSError as exc:
                raise WriteFailure(
                    f"could not write {action.relative_path}: {exc}", created
                ) from exc

            created.append(action.relative_path)
            LOGGER.info("* creating %s", action.relative_path)

        return GenerationResult(
            files_created=created,
            warnings=warnings,
            test_command=self.test_command,
        )
