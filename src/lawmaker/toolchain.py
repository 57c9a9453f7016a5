"""Detect the Elixir version stamped into generated manifests."""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import Mapping

__all__ = [
    "DEFAULT_ELIXIR_VERSION",
    "VERSION_ENV_VAR",
    "ToolVersion",
    "detect_elixir_version",
]


LOGGER = logging.getLogger(__name__)

VERSION_ENV_VAR = "LAWMAKER_ELIXIR_VERSION"
DEFAULT_ELIXIR_VERSION = "1.5.0"

_VERSION_PATTERN = re.compile(
    r"(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?"
)
_ELIXIR_BANNER = re.compile(r"Elixir\s+(?P<version>\S+)")


@dataclass(frozen=True, slots=True)
class ToolVersion:
    """Major, minor and pre-release tag of the target toolchain."""

    major: int
    minor: int
    pre: str | None = None

    @classmethod
    def parse(cls, value: str) -> "ToolVersion":
        """Parse a semantic version such as ``1.6.0-rc.1``.

        Only the first dot-separated identifier of the pre-release part is
        kept, so ``1.6.0-rc.1`` yields the tag ``rc``.
        """

        match = _VERSION_PATTERN.fullmatch(value.strip())
        if match is None:
            raise ValueError(f"invalid version {value!r}")
        pre = match.group("pre")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            pre=pre.split(".")[0] if pre else None,
        )

    @property
    def requirement(self) -> str:
        """Version string used in ``elixir: "~> ..."`` requirements."""

        base = f"{self.major}.{self.minor}"
        return f"{base}-{self.pre}" if self.pre else base


def _query_elixir() -> str | None:
    executable = shutil.which("elixir")
    if executable is None:
        return None
    try:
        result = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            check=True,
            text=True,
            timeout=30,
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError):
        LOGGER.debug("failed to query %s --version", executable, exc_info=True)
        return None
    match = _ELIXIR_BANNER.search(result.stdout)
    return match.group("version") if match else None


def detect_elixir_version(
    environ: Mapping[str, str] | None = None,
) -> tuple[ToolVersion, list[str]]:
    """Return the Elixir version to target and any warnings raised on the way.

    The ``LAWMAKER_ELIXIR_VERSION`` environment variable wins, then the
    ``elixir`` executable on ``PATH``. When neither is usable the default
    version is returned together with a warning.
    """

    env = os.environ if environ is None else environ
    warnings: list[str] = []

    configured = env.get(VERSION_ENV_VAR)
    if configured:
        try:
            return ToolVersion.parse(configured), warnings
        except ValueError:
            warnings.append(f"ignoring {VERSION_ENV_VAR}={configured!r}: not a version")

    reported = _query_elixir()
    if reported:
        try:
            return ToolVersion.parse(reported), warnings
        except ValueError:
            warnings.append(f"could not parse Elixir version {reported!r}")

    warnings.append(
        f"Elixir version could not be detected, assuming {DEFAULT_ELIXIR_VERSION}"
    )
    return ToolVersion.parse(DEFAULT_ELIXIR_VERSION), warnings
