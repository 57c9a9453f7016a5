"""Default lookup telling whether a module alias is already defined."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Iterable

__all__ = ["STANDARD_MODULES", "ElixirNamespace"]


LOGGER = logging.getLogger(__name__)

STANDARD_MODULES = frozenset(
    {
        "Access",
        "Agent",
        "Application",
        "Atom",
        "Base",
        "Behaviour",
        "Bitwise",
        "Calendar",
        "Code",
        "Collectable",
        "Config",
        "Date",
        "DateTime",
        "Dict",
        "DynamicSupervisor",
        "EEx",
        "Enum",
        "Enumerable",
        "Exception",
        "ExUnit",
        "File",
        "Float",
        "Function",
        "GenEvent",
        "GenServer",
        "HashDict",
        "HashSet",
        "IEx",
        "IO",
        "Inspect",
        "Integer",
        "Kernel",
        "Keyword",
        "List",
        "List.Chars",
        "Logger",
        "Macro",
        "Map",
        "MapSet",
        "Mix",
        "Mix.Project",
        "Mix.Task",
        "Module",
        "NaiveDateTime",
        "Node",
        "OptionParser",
        "Path",
        "Port",
        "Process",
        "Protocol",
        "Range",
        "Record",
        "Regex",
        "Registry",
        "Set",
        "Stream",
        "String",
        "String.Chars",
        "StringIO",
        "Supervisor",
        "Supervisor.Spec",
        "System",
        "Task",
        "Task.Supervisor",
        "Time",
        "Tuple",
        "URI",
        "Version",
    }
)


class ElixirNamespace:
    """Callable namespace lookup for Elixir module aliases.

    Names from the standard library are known up front. With ``use_runtime``
    set and an ``elixir`` executable on ``PATH`` the runtime is asked as well,
    which also catches modules from installed archives.
    """

    def __init__(self, extra: Iterable[str] = (), *, use_runtime: bool = True) -> None:
        self.known = STANDARD_MODULES | frozenset(extra)
        self.use_runtime = use_runtime

    def __call__(self, name: str) -> bool:
        if name in self.known:
            return True
        if not self.use_runtime:
            return False
        return self._ask_runtime(name)

    def _ask_runtime(self, name: str) -> bool:
        executable = shutil.which("elixir")
        if executable is None:
            return False
        try:
            result = subprocess.run(
                [executable, "-e", f"IO.puts Code.ensure_loaded?({name})"],
                capture_output=True,
                check=True,
                text=True,
                timeout=30,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError):
            LOGGER.debug("could not ask the Elixir runtime about %s", name, exc_info=True)
            return False
        return result.stdout.strip().endswith("true")
