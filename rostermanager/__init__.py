"""Tournament Roster Manager - in-memory registry of teams and players."""

from .manager import TeamNotFoundError, TournamentManager
from .models import Player, Team

__version__ = "1.0.0"
__all__ = ["TournamentManager", "TeamNotFoundError", "Player", "Team"]
