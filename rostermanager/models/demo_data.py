"""Sample rosters used by the console demo and the TUI demo mode."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..manager import TournamentManager

DEMO_TOURNAMENT_NAME = "Torneo de Fútbol"

# Team name -> (player name, position), in insertion order
DEMO_ROSTERS: dict[str, list[tuple[str, str]]] = {
    "Imparables": [
        ("Juan Perez", "Delantero"),
        ("Carlos Ruiz", "Mediocampista"),
    ],
    "Solo Panas": [
        ("Miguel Soto", "Defensa"),
        ("Juan Perez", "Delantero"),  # same name, different id
    ],
}


def seed_demo_manager(manager: "TournamentManager") -> list[int]:
    """Create the demo teams and players, returning team ids in creation order"""
    team_ids = [manager.add_team(team_name) for team_name in DEMO_ROSTERS]
    for team_id, roster in zip(team_ids, DEMO_ROSTERS.values()):
        for player_name, position in roster:
            manager.add_player_to_team(team_id, player_name, position)
    return team_ids
