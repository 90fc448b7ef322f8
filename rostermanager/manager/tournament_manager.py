"""In-memory registry of teams and players for one tournament session."""

from ..models.roster import Player, Team
from ..utils.logging import log
from .timing import timed

REPORT_HEADER = "--- REPORTE DEL TORNEO ---"


class TeamNotFoundError(ValueError):
    """Raised when an operation targets a team id that was never issued"""

    def __init__(self, team_id: int):
        self.team_id = team_id
        super().__init__(f"Equipo no existe: {team_id}")


class TournamentManager:
    """Owns every team, allocates ids and keeps the registered player set.

    Invariant: ``_registered_player_ids`` always equals the union of the
    player map keys of every team in ``_teams``.
    """

    def __init__(self, timing_enabled: bool = True):
        self._teams: dict[int, Team] = {}
        self._registered_player_ids: set[int] = set()
        self._next_team_id: int = 1
        self._next_player_id: int = 1
        self.timing_enabled: bool = timing_enabled

    @property
    def registered_player_ids(self) -> frozenset[int]:
        """Snapshot of every player id currently on a roster"""
        return frozenset(self._registered_player_ids)

    # Mutations

    @timed("AddTeam")
    def add_team(self, name: str) -> int:
        team_id = self._next_team_id
        self._next_team_id += 1
        self._teams[team_id] = Team(id=team_id, name=name)
        log(f"➕ Team added: [{team_id}] {name}")
        return team_id

    @timed("AddPlayerToTeam")
    def add_player_to_team(self, team_id: int, name: str, position: str) -> int:
        """Register a new player on an existing team.

        Raises:
            TeamNotFoundError: if ``team_id`` is unknown. Nothing is mutated
                and no player id is consumed in that case.
        """
        team = self._teams.get(team_id)
        if team is None:
            raise TeamNotFoundError(team_id)

        player_id = self._next_player_id
        self._next_player_id += 1
        team.players[player_id] = Player(id=player_id, name=name, position=position)
        self._registered_player_ids.add(player_id)
        log(f"➕ Player added: [{player_id}] {name} -> team {team_id}")
        return player_id

    @timed("RemovePlayerFromTeam")
    def remove_player_from_team(self, team_id: int, player_id: int) -> bool:
        """Remove a player from its team; False if the team or player is absent"""
        team = self._teams.get(team_id)
        if team is None:
            return False

        removed = team.players.pop(player_id, None) is not None
        if removed:
            self._registered_player_ids.discard(player_id)
            log(f"➖ Player removed: {player_id} from team {team_id}")
        return removed

    # Queries

    def get_team(self, team_id: int) -> Team | None:
        team = self._teams.get(team_id)
        return team.model_copy(deep=True) if team is not None else None

    @timed("ListTeams")
    def list_teams(self) -> list[Team]:
        """Copies of all teams in creation order"""
        return [team.model_copy(deep=True) for team in self._teams.values()]

    def _iter_players(self):
        for team in self._teams.values():
            yield from team.players.values()

    @timed("ListAllPlayers")
    def list_all_players(self) -> list[Player]:
        """All players, by team creation order then roster order"""
        return list(self._iter_players())

    @timed("SearchPlayerByName")
    def search_player_by_name(self, name: str) -> Player | None:
        """First player whose name matches ``name`` ignoring case.

        Linear scan in ``list_all_players`` order; no name index is kept.
        """
        wanted = name.casefold()
        for player in self._iter_players():
            if player.name.casefold() == wanted:
                return player
        return None

    def union_players_between_teams(self, team_a_id: int, team_b_id: int) -> list[Player]:
        """Players on either team, each id once.

        Empty when either team is unknown. Team A's roster comes first, then
        team B's players not already included.
        """
        team_a = self._teams.get(team_a_id)
        team_b = self._teams.get(team_b_id)
        if team_a is None or team_b is None:
            return []

        union_ids = set(team_a.players) | set(team_b.players)
        result: dict[int, Player] = {}
        for team in (team_a, team_b):
            for player_id, player in team.players.items():
                if player_id in union_ids and player_id not in result:
                    result[player_id] = player
        return list(result.values())

    def generate_report(self) -> str:
        lines = [REPORT_HEADER, f"Equipos registrados: {len(self._teams)}"]
        for team in self._teams.values():
            lines.append(str(team))
            for player in team.players.values():
                lines.append(f"  - {player}")
        lines.append(
            f"Total jugadores únicos (conjunto): {len(self._registered_player_ids)}"
        )
        return "\n".join(lines)
