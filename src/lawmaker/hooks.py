"""Install the project's pre-commit script as a git hook."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = ["HookInstallError", "HookInstallResult", "HookStatus", "install_pre_commit_hook"]


LOGGER = logging.getLogger(__name__)

HOOK_NAME = "pre-commit"


class HookInstallError(RuntimeError):
    """Raised when the pre-commit hook cannot be linked."""


class HookStatus(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True, slots=True)
class HookInstallResult:
    hook_path: Path
    script_path: Path
    status: HookStatus


def install_pre_commit_hook(project_root: str | Path) -> HookInstallResult:
    """Symlink ``<project_root>/pre-commit`` into ``.git/hooks``.

    An existing hook is left untouched. The project must already be a git
    repository.
    """

    root = Path(project_root).expanduser().resolve()
    hooks_dir = root / ".git" / "hooks"
    if not hooks_dir.is_dir():
        raise HookInstallError(
            f"It seems path {hooks_dir} does not exist.\n"
            "To keep the law, your Elixir project should be in a git repository.\n"
            "If you just want to experiment with code locally, you can init a repo "
            "using the command 'git init'"
        )

    hook_path = hooks_dir / HOOK_NAME
    script_path = root / HOOK_NAME
    try:
        hook_path.symlink_to(script_path)
    except FileExistsError:
        LOGGER.info("pre-commit hook %s already exists, do nothing", hook_path)
        return HookInstallResult(hook_path, script_path, HookStatus.ALREADY_EXISTS)
    except OSError as exc:
        raise HookInstallError(
            f"Can not create symbolic link for pre-commit hook {hook_path} "
            f"because of error {exc}"
        ) from exc

    LOGGER.info("pre-commit hook %s created", hook_path)
    return HookInstallResult(hook_path, script_path, HookStatus.CREATED)
