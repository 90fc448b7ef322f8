"""Tournament roster manager."""

from .timing import timed
from .tournament_manager import TeamNotFoundError, TournamentManager

__all__ = ["TournamentManager", "TeamNotFoundError", "timed"]
