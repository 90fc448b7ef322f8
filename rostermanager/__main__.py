"""Main entry point for the roster manager console demo and TUI."""

import argparse
import sys

from .manager import TeamNotFoundError, TournamentManager
from .models import DEMO_TOURNAMENT_NAME, seed_demo_manager
from .ui import RosterDisplay
from .utils.logging import log, set_console_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tournament roster manager")
    parser.add_argument(
        "--search",
        default="Juan Perez",
        help="Player name to look up (case-insensitive)",
    )
    parser.add_argument(
        "--union",
        nargs=2,
        type=int,
        metavar=("TEAM_A", "TEAM_B"),
        help="Team ids whose rosters are merged (default: first two teams)",
    )
    parser.add_argument(
        "--add-player",
        nargs=3,
        action="append",
        default=[],
        metavar=("TEAM_ID", "NAME", "POSITION"),
        help="Add a player after seeding; may be repeated",
    )
    parser.add_argument(
        "--remove-player",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("TEAM_ID", "PLAYER_ID"),
        help="Remove a player after seeding; may be repeated",
    )
    parser.add_argument(
        "--no-demo-data", action="store_true", help="Start with an empty tournament"
    )
    parser.add_argument(
        "--no-timing", action="store_true", help="Disable operation timing logs"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log to file, not to the console"
    )
    parser.add_argument(
        "--tui", action="store_true", help="Open the interactive roster viewer"
    )
    return parser


def apply_changes(manager: TournamentManager, args: argparse.Namespace) -> None:
    """Apply --add-player / --remove-player requests in order"""
    for team_id, name, position in args.add_player:
        try:
            parsed_team_id = int(team_id)
        except ValueError:
            raise TeamNotFoundError(team_id) from None
        player_id = manager.add_player_to_team(parsed_team_id, name, position)
        print(f"Jugador agregado: [{player_id}] {name} -> equipo {parsed_team_id}")

    for team_id, player_id in args.remove_player:
        if manager.remove_player_from_team(team_id, player_id):
            print(f"Jugador eliminado: {player_id} del equipo {team_id}")
        else:
            print(f"No encontrado: jugador {player_id} en equipo {team_id}")


def run_console_demo(
    manager: TournamentManager, team_ids: list[int], args: argparse.Namespace
) -> None:
    """Print the report, the name search and the roster union"""
    print()
    print(manager.generate_report())

    print()
    print(f"Buscar jugador: '{args.search}'")
    found = manager.search_player_by_name(args.search)
    print(str(found) if found is not None else "No encontrado")

    if args.union:
        team_a, team_b = args.union
    elif len(team_ids) >= 2:
        team_a, team_b = team_ids[0], team_ids[1]
    else:
        team_a = team_b = None

    print()
    if team_a is None:
        print("No hay suficientes equipos para la unión")
    else:
        print(f"Ejemplo: Unión de jugadores entre equipos {team_a} y {team_b}")
        union = manager.union_players_between_teams(team_a, team_b)
        if not union:
            print("No encontrado")
        for player in union:
            print(player)

    print()
    print("Fin de la demo.")


def main():
    """Main entry point"""
    args = build_parser().parse_args()

    if args.quiet:
        set_console_logging(False)

    log("🔍 Command line args:")
    log(f"   Search: {args.search}")
    log(f"   Union: {args.union}")
    log(f"   Demo data: {not args.no_demo_data}")
    log(f"   Timing: {not args.no_timing}")
    log(f"   TUI: {args.tui}")

    manager = TournamentManager(timing_enabled=not args.no_timing)

    if not args.tui:
        print(f"{DEMO_TOURNAMENT_NAME} - Demo (Consola)")

    team_ids: list[int] = []
    if not args.no_demo_data:
        team_ids = seed_demo_manager(manager)

    try:
        apply_changes(manager, args)
    except TeamNotFoundError as e:
        log(f"❌ {e}")
        sys.exit(1)

    if not args.tui:
        run_console_demo(manager, team_ids, args)
        return

    app = RosterDisplay(manager=manager)

    def cleanup_terminal():
        """Cleanup terminal state to prevent mouse tracking issues"""
        try:
            sys.stdout.write(
                "\033[?1000l\033[?1003l\033[?1015l\033[?1006l\033[?25h\033[?1004l"
            )
            sys.stdout.flush()
        except OSError:
            pass

    try:
        log("🏁 Starting Textual app...")
        app.run()
        log("🏁 Textual app finished")
    except KeyboardInterrupt:
        log("\n👋 Roster display stopped")
    finally:
        # Always clean up terminal state regardless of how app exits
        cleanup_terminal()


if __name__ == "__main__":
    main()
