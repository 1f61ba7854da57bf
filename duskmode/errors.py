"""Named failures raised by the dark-mode pipeline."""

from __future__ import annotations

from pathlib import Path


class DuskmodeError(Exception):
    """Base class for errors raised by duskmode."""


class ProjectNotFoundError(DuskmodeError, FileNotFoundError):
    """Raised when the project root to scan does not exist."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Project directory does not exist: {root}")
        self.root = root


class MissingConfigTargetError(DuskmodeError):
    """Raised when no Tailwind config or entry stylesheet can be patched."""

    def __init__(self, root: Path | None, detail: str = "") -> None:
        message = "No Tailwind config file or stylesheet found to enable dark mode"
        if root is not None:
            message = f"{message} in {root}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.root = root


class AlternateModeConflictError(DuskmodeError):
    """Raised when dark mode is already enabled in the Tailwind setup."""

    def __init__(self, location: Path | None, detected_mid_run: bool = False) -> None:
        where = str(location) if location is not None else "project config"
        when = "changed during the run" if detected_mid_run else "already enabled"
        super().__init__(f"Dark mode {when} in {where}")
        self.location = location
        self.detected_mid_run = detected_mid_run


class UnknownThemeError(DuskmodeError, KeyError):
    """Raised when a theme preset id is not part of the catalog."""

    def __init__(self, theme_id: str) -> None:
        super().__init__(theme_id)
        self.theme_id = theme_id

    def __str__(self) -> str:
        return f"Unknown theme preset: {self.theme_id}"
