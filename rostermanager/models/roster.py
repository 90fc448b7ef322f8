"""Player and team data models."""

from pydantic import BaseModel, Field


class Player(BaseModel):
    """A single athlete. Immutable once created."""

    id: int
    name: str
    position: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} - {self.position}"


class Team(BaseModel):
    """Named team owning its roster, keyed by player id"""

    id: int
    name: str
    players: dict[int, Player] = Field(default_factory=dict)

    @property
    def player_count(self) -> int:
        return len(self.players)

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} (Jugadores: {self.player_count})"
