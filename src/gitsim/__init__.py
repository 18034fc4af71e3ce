"""Interactive git command simulator for teaching version control."""

from gitsim.commands.base import CommandResult
from gitsim.interpreter import CommandInterpreter
from gitsim.model import Commit, FileStatus, Identity, RepositoryModel, StashEntry
from gitsim.session import SimulatorSession

__all__ = [
    "CommandInterpreter",
    "CommandResult",
    "Commit",
    "FileStatus",
    "Identity",
    "RepositoryModel",
    "SimulatorSession",
    "StashEntry",
]
