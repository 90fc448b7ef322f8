"""Roster viewer TUI application."""

from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import BindingType
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.reactive import reactive
from textual.widgets import DataTable, Footer, Header, Static

from ..manager import TournamentManager
from ..models import DEMO_TOURNAMENT_NAME, Team
from ..utils.logging import log, set_console_logging


class RosterDisplay(App[None]):
    """Shows every team of a TournamentManager with its roster"""

    CSS: ClassVar[
        str
    ] = """
    Screen {
        layout: vertical;
    }

    Header {
        dock: top;
        height: 1;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-1;
    }

    #summary {
        height: 1;
        padding: 0 1;
        background: $panel;
    }

    #main-container {
        height: 1fr;
        overflow-y: auto;
    }

    #teams-container {
        width: 1fr;
        height: auto;
    }

    .team-section {
        margin: 0 0 1 0;
        padding: 0;
        border: solid $primary;
        height: auto;
        width: 1fr;
    }

    .team-title {
        background: $primary;
        color: $text;
        padding: 0 1;
        text-align: center;
        height: 1;
    }

    .team-table {
        height: auto;
        min-height: 3;
        border: none;
        margin: 0;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("r", "refresh", "Refresh"),
        ("q", "quit", "Quit"),
    ]

    # Reactive variables
    team_count: reactive[int] = reactive(0)
    player_count: reactive[int] = reactive(0)

    def __init__(self, manager: TournamentManager | None = None, poll_interval: float = 5.0):
        super().__init__()
        self.manager: TournamentManager = (
            manager if manager is not None else TournamentManager(timing_enabled=False)
        )
        self.teams: list[Team] = []
        self.poll_interval: float = poll_interval
        self.title = DEMO_TOURNAMENT_NAME
        log(f"🎯 RosterDisplay initialized, poll_interval: {poll_interval}")

    def compose(self) -> ComposeResult:
        """Create the UI layout"""
        yield Header()
        yield Static("", id="summary")
        yield ScrollableContainer(Horizontal(id="teams-container"), id="main-container")
        yield Footer()

    def on_mount(self) -> None:
        """Initialize the app"""
        # The TUI owns the terminal from here on
        set_console_logging(False)
        log("🏁 on_mount() called")

        self.refresh_rosters()
        self.set_interval(self.poll_interval, self.refresh_rosters)

    def refresh_rosters(self) -> None:
        """Take a fresh snapshot from the manager and redraw"""
        try:
            self.teams = self.manager.list_teams()
        except Exception as e:
            log(f"❌ Exception in refresh_rosters: {type(e).__name__}: {e}")
            # Keep showing the last successful snapshot
            return

        self.team_count = len(self.teams)
        self.player_count = len(self.manager.registered_player_ids)
        self.query_one("#summary", Static).update(
            f"Equipos registrados: {self.team_count} | "
            f"Total jugadores únicos: {self.player_count}"
        )
        self.update_tables()

    def update_tables(self) -> None:
        """Rebuild one section per team"""
        log(f"🔄 update_tables() called with {len(self.teams)} teams")
        container = self.query_one("#main-container", ScrollableContainer)
        teams_container = container.query_one("#teams-container", Horizontal)
        teams_container.remove_children()

        if not self.teams:
            teams_container.mount(
                Vertical(
                    Static("No teams registered", classes="team-title"),
                    Static("Add a team to see its roster here.", id="no-teams"),
                    classes="team-section",
                )
            )
            return

        for team in self.teams:
            table: DataTable[str] = DataTable(classes="team-table")
            table.add_column("ID", width=5)
            table.add_column("Jugador", width=24)
            table.add_column("Posición", width=16)
            table.cursor_type = "row"
            for player in team.players.values():
                table.add_row(str(player.id), player.name, player.position, key=str(player.id))

            teams_container.mount(
                Vertical(
                    Static(str(team), classes="team-title"),
                    table,
                    classes="team-section",
                )
            )
        log(f"✅ Rendered {len(self.teams)} team sections")

    def action_refresh(self) -> None:
        """Manually refresh rosters"""
        log("🔄 Manual refresh triggered")
        self.refresh_rosters()
        self.notify("Rosters refreshed")

    def on_unmount(self) -> None:
        """Clean up when app is unmounted"""
        self._cleanup_terminal()
        set_console_logging(True)

    def _cleanup_terminal(self) -> None:
        """Ensure terminal state is properly restored"""
        try:
            import sys

            # Force disable mouse tracking and restore cursor
            sys.stdout.write(
                "\033[?1000l\033[?1003l\033[?1015l\033[?1006l\033[?25h\033[?1004l"
            )
            sys.stdout.flush()
        except OSError:
            pass

    async def action_quit(self):
        """Quit the application"""
        self._cleanup_terminal()
        self.exit()
