"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import logging

from weatherdash.app import DashboardApp
from weatherdash.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherdash.config.schema import DashboardConfig
from weatherdash.models.common import ClientMode, SearchState
from weatherdash.presentation.console import ConsoleAdapter
from weatherdash.presentation.formatters import format_recent_searches
from weatherdash.storage.database import open_store
from weatherdash.storage.recent_repo import RecentSearchRepo

DEFAULT_CONFIG = "config/weatherdash.yaml"

INTERACTIVE_HELP = """\
Type a city name to see suggestions. Commands:
  :go [CITY]    search (defaults to the last typed text)
  :pick N       search suggestion N
  :recent N     search recent city N
  :rm CITY      remove CITY from recent searches
  :clear        dismiss suggestions
  :fav          toggle favorite on the displayed city
  :retry        dismiss the error panel
  :key KEY      set an OpenWeatherMap API key (live mode)
  :help         show this help
  :quit         exit"""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Weather dashboard: current conditions and 5-day forecast",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")
    parser.add_argument(
        "--api-key", default=None, help="OpenWeatherMap API key (enables live mode)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log at INFO level"
    )

    sub = parser.add_subparsers(dest="command")

    search_p = sub.add_parser("search", help="Show weather and forecast for a city")
    search_p.add_argument("city", nargs="+", help="City name")

    suggest_p = sub.add_parser("suggest", help="List city name suggestions")
    suggest_p.add_argument("query", nargs="+", help="Partial city name")

    recent_p = sub.add_parser("recent", help="Recent search operations")
    recent_sub = recent_p.add_subparsers(dest="recent_command")
    recent_sub.add_parser("list", help="Show recent searches")
    rm_p = recent_sub.add_parser("remove", help="Remove a city from recent searches")
    rm_p.add_argument("city", nargs="+", help="City name")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    sub.add_parser("interactive", help="Interactive search prompt")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _apply_overrides(load_config(args.config), args)

    if args.command == "search":
        return asyncio.run(_cmd_search(config, " ".join(args.city)))
    elif args.command == "suggest":
        return asyncio.run(_cmd_suggest(config, " ".join(args.query)))
    elif args.command == "recent":
        return _cmd_recent(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "interactive":
        return asyncio.run(_cmd_interactive(config))
    else:
        parser.print_help()
        return 1


def _apply_overrides(config: DashboardConfig, args) -> DashboardConfig:
    if args.db:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db})}
        )
    if args.api_key:
        config = config.model_copy(
            update={
                "api": config.api.model_copy(
                    update={"api_key": args.api_key, "mode": ClientMode.LIVE}
                )
            }
        )
    return config


async def _cmd_search(config: DashboardConfig, city: str) -> int:
    app = DashboardApp(config, ConsoleAdapter())
    try:
        state = await app.controller.submit_search(city)
    finally:
        await app.aclose()
    return 0 if state == SearchState.SUCCESS else 1


async def _cmd_suggest(config: DashboardConfig, query: str) -> int:
    ui = ConsoleAdapter()
    app = DashboardApp(config, ui)
    try:
        app.controller.on_query_changed(query)
        await app.controller.wait_pending()
    finally:
        await app.aclose()
    if not ui.suggestions:
        print("No matching cities")
        return 1
    return 0


def _cmd_recent(config: DashboardConfig, args) -> int:
    if args.recent_command == "list":
        conn = open_store(config.storage.db_path)
        repo = RecentSearchRepo(
            conn, config.storage.recent_searches_key, config.storage.visited_key
        )
        print(format_recent_searches(repo.load()))
        conn.close()
        return 0
    elif args.recent_command == "remove":
        return asyncio.run(_cmd_recent_remove(config, " ".join(args.city)))
    else:
        print("Use: recent list | recent remove CITY")
        return 1


async def _cmd_recent_remove(config: DashboardConfig, city: str) -> int:
    app = DashboardApp(config, ConsoleAdapter())
    try:
        app.controller.remove_recent_search(city)
    finally:
        await app.aclose()
    return 0


def _cmd_config(config: DashboardConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
            print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


async def _cmd_interactive(config: DashboardConfig) -> int:
    ui = ConsoleAdapter()
    app = DashboardApp(config, ui)
    print(INTERACTIVE_HELP)
    try:
        app.controller.start()
        while True:
            try:
                line = await asyncio.to_thread(input, "> ")
            except EOFError:
                break
            if not await _handle_line(app, ui, line.strip()):
                break
    finally:
        await app.aclose()
    return 0


async def _handle_line(app: DashboardApp, ui: ConsoleAdapter, line: str) -> bool:
    """Dispatch one prompt line. Returns False when the session should end."""
    ctl = app.controller
    if not line.startswith(":"):
        ui.set_search_value(line)
        ctl.on_query_changed(line)
        return True

    command, _, arg = line[1:].partition(" ")
    arg = arg.strip()
    if command in ("quit", "q", "exit"):
        return False
    elif command == "go":
        if arg:
            ui.set_search_value(arg)
        await ctl.submit_search()
    elif command in ("pick", "recent"):
        choices = [c.name for c in ui.suggestions] if command == "pick" else ui.recent
        index = _parse_index(arg, len(choices))
        if index is None:
            print(f"Choose a number between 1 and {len(choices)}" if choices else "Nothing to choose from")
        elif command == "pick":
            await ctl.select_suggestion(choices[index])
        else:
            await ctl.select_recent_search(choices[index])
    elif command == "rm" and arg:
        ctl.remove_recent_search(arg)
    elif command == "clear":
        ctl.dismiss_suggestions()
    elif command == "fav":
        if ctl.toggle_favorite() is None:
            print("Search for a city first")
    elif command == "retry":
        ctl.retry()
    elif command == "key" and arg:
        await app.set_credential(arg)
    else:
        print(INTERACTIVE_HELP)
    return True


def _parse_index(arg: str, count: int) -> int | None:
    try:
        index = int(arg) - 1
    except ValueError:
        return None
    if 0 <= index < count:
        return index
    return None
