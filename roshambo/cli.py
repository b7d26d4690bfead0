"""
Roshambo CLI - Command-line interface for the engine.

Usage:
    roshambo init --owner NAME               Record contract version in the store
    roshambo start HOST OPPONENT MOVE        Host starts a game
    roshambo move HOST OPPONENT MOVE         Opponent answers a game
    roshambo games [--host HOST]             List games
    roshambo schema --out-dir DIR            Export JSON schemas
    roshambo serve [--host H] [--port P]     Run the HTTP API

Every command accepts --store PATH (default: $ROSHAMBO_STORE_PATH).
Without a store path the CLI works on an in-memory store, which is only
useful for trying commands out.
"""

import argparse
import sys

from .config import Settings
from .engine_core.errors import GameError
from .engine_core.identifiers import validate_identifier
from .engine_core.state import Move
from .observability import configure_logging
from .storage import StoreCorrupted


def main(argv=None):
    """Main CLI entry point."""
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(
        description="Roshambo - Rock/Paper/Scissors session engine",
        prog="roshambo",
    )
    parser.add_argument("--store", default=settings.store_path, help="Path to the JSON game store")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    init_parser = subparsers.add_parser("init", help="Record contract version in the store")
    init_parser.add_argument("--owner", default=settings.owner, help="Owner identifier")

    start_parser = subparsers.add_parser("start", help="Start a game")
    start_parser.add_argument("host", help="Host identifier (the caller)")
    start_parser.add_argument("opponent", help="Opponent identifier")
    start_parser.add_argument("move", help="rock, paper or scissors")

    move_parser = subparsers.add_parser("move", help="Answer a game as the opponent")
    move_parser.add_argument("host", help="Host identifier")
    move_parser.add_argument("opponent", help="Opponent identifier (the caller)")
    move_parser.add_argument("move", help="rock, paper or scissors")

    games_parser = subparsers.add_parser("games", help="List games")
    games_parser.add_argument("--host", help="Only games hosted by this identifier")

    schema_parser = subparsers.add_parser("schema", help="Export JSON schemas")
    schema_parser.add_argument("--out-dir", default="schema", help="Output directory")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    commands = {
        "init": cmd_init,
        "start": cmd_start,
        "move": cmd_move,
        "games": cmd_games,
        "schema": cmd_schema,
        "serve": cmd_serve,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    try:
        command(args, settings)
    except GameError as e:
        print(f"Error [{e.error_code}]: {e.message}")
        sys.exit(1)
    except StoreCorrupted as e:
        print(f"Error: {e}")
        sys.exit(1)


def _open(args):
    from .storage import SessionStore, open_store
    return SessionStore(open_store(args.store))


def _parse_move(text: str) -> Move:
    try:
        return Move.parse(text)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_init(args, settings):
    """Record contract name and version."""
    from .session import GameManager

    event = GameManager(_open(args)).instantiate(args.owner)
    print(f"{event.method}: owner={event.attributes['owner']}")


def cmd_start(args, settings):
    """Start a game."""
    from .session import GameManager

    host = validate_identifier(args.host)
    move = _parse_move(args.move)
    event = GameManager(_open(args)).start_game(host, args.opponent, move)
    print(f"{event.method}: {host} vs {event.attributes['opponent']}")


def cmd_move(args, settings):
    """Answer a game."""
    from .session import GameManager

    opponent = validate_identifier(args.opponent)
    move = _parse_move(args.move)
    event = GameManager(_open(args)).submit_opponent_move(args.host, opponent, move)
    session = event.session
    print(f"{event.method}: {session.host_move.value} vs {session.opponent_move.value}")
    print(f"Result: {event.attributes['result']}")


def cmd_games(args, settings):
    """List games."""
    from .session import GameQueries

    queries = GameQueries(_open(args))
    if args.host:
        records = queries.query_host_games(args.host)
    else:
        records = queries.query_all_games()

    if not records:
        print("No games")
        return

    for record in records:
        session = record.session
        print(
            f"{record.key.host_id:<20} {record.key.opponent_id:<20} "
            f"{session.host_move.value:<9} {session.opponent_move.value:<9} "
            f"{session.result.value}"
        )


def cmd_schema(args, settings):
    """Export JSON schemas."""
    from .api.schema_export import export_schemas

    for path in export_schemas(args.out_dir):
        print(f"Wrote {path}")


def cmd_serve(args, settings):
    """Run the HTTP API."""
    import uvicorn
    from dataclasses import replace
    from .api.app import create_app

    app = create_app(settings=replace(settings, store_path=args.store))
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
