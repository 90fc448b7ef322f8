"""Roster data models."""

from .demo_data import DEMO_ROSTERS, DEMO_TOURNAMENT_NAME, seed_demo_manager
from .roster import Player, Team

__all__ = [
    "Player",
    "Team",
    "DEMO_ROSTERS",
    "DEMO_TOURNAMENT_NAME",
    "seed_demo_manager",
]
