"""Shared state handed to every command, and the command outcome signal."""

from dataclasses import dataclass
from enum import Enum


class CommandExec(Enum):
    """What the calling menu should do after a command returns."""

    PROCESS = "process"
    GO_BACK = "go_back"


@dataclass
class ScillaContext:
    """Application state shared by commands.

    Config commands only pass it through; it exists so every command
    has the same call signature.
    """

    log_level: str = "WARNING"
    log_path: str | None = None
