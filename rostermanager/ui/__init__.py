"""Terminal UI for browsing tournament rosters."""

from .roster_display import RosterDisplay

__all__ = ["RosterDisplay"]
