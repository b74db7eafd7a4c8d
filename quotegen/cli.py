from __future__ import annotations

import shlex
from typing import List, Optional

import typer

from .config import AppConfig
from .dispatch import UIDispatcher
from .errors import NothingToShare
from .models import CreatorFilter, LengthFilter
from .quote_store import QuoteStore
from .saul_client import SaulClient
from .screens import HomeScreen, SaulScreen
from .settings import SettingsStore
from .share import format_share_text


app = typer.Typer(help="Inspirational quote generator CLI")


LENGTH_OPTION = typer.Option(LengthFilter.ALL, "--length", "-l", help="Length bucket", case_sensitive=False)
CREATOR_OPTION = typer.Option(CreatorFilter.ALL, "--creator", "-c", help="Creator category", case_sensitive=False)
NAME_OPTION = typer.Option("", "--name", "-n", help="Case-insensitive creator name substring")
ADD_OPTION = typer.Option(
    None,
    "--add",
    help="Add a quote before filtering, as 'TEXT|CATEGORY|CREATOR NAME'. Repeatable.",
)


def _load_components() -> tuple[AppConfig, SaulClient, SettingsStore]:
	config = AppConfig.load()
	return config, SaulClient(config), SettingsStore.from_config(config)


def _parse_added(raw: str) -> tuple[str, CreatorFilter, str]:
    parts = raw.split("|")
    if len(parts) != 3:
        raise typer.BadParameter(f"expected TEXT|CATEGORY|CREATOR NAME, got: {raw!r}")
    text, category, name = parts
    try:
        creator = CreatorFilter(category.strip().lower())
    except ValueError:
        choices = ", ".join(c.value for c in CreatorFilter)
        raise typer.BadParameter(f"category must be one of: {choices}")
    return text, creator, name.strip()


def _build_home(
    length: LengthFilter,
    creator: CreatorFilter,
    name: str,
    added: Optional[List[str]],
) -> HomeScreen:
    home = HomeScreen(QuoteStore())
    for raw in added or []:
        home.add_quote(*_parse_added(raw))
    home.length = length
    home.creator = creator
    home.creator_name = name
    return home


def _print_home(home: HomeScreen) -> None:
    if home.name_message:
        print(f"[!] {home.name_message}")
    print(home.display_text())
    if home.error_message:
        print(f"[!] {home.error_message}")


@app.command("list")
def list_quotes(
    length: LengthFilter = LENGTH_OPTION,
    creator: CreatorFilter = CREATOR_OPTION,
    name: str = NAME_OPTION,
    add: Optional[List[str]] = ADD_OPTION,
):
    """Print every quote matching the filters, in catalog order."""
    home = _build_home(length, creator, name, add)
    for q in home.matches:
        print(f"- {format_share_text(q)} [{q.creator.value}]")
    if home.name_message:
        print(f"[!] {home.name_message}")
    elif not home.matches:
        print("[!] No quotes match the selected filters.")


@app.command()
def generate(
    length: LengthFilter = LENGTH_OPTION,
    creator: CreatorFilter = CREATOR_OPTION,
    name: str = NAME_OPTION,
    add: Optional[List[str]] = ADD_OPTION,
):
    """Pick a random quote matching the filters and print it."""
    home = _build_home(length, creator, name, add)
    home.generate()
    _print_home(home)


@app.command()
def share(
    length: LengthFilter = LENGTH_OPTION,
    creator: CreatorFilter = CREATOR_OPTION,
    name: str = NAME_OPTION,
    add: Optional[List[str]] = ADD_OPTION,
):
    """Generate a quote and print it in share format."""
    home = _build_home(length, creator, name, add)
    home.generate()
    try:
        print(home.share())
    except NothingToShare:
        _print_home(home)


def _run_saul_fetch(screen: SaulScreen, dispatcher: UIDispatcher) -> None:
    future = screen.fetch()
    dispatcher.wait_and_drain(future)
    for line in screen.display_lines():
        print(line)
    if screen.error_message:
        print(f"[!] {screen.error_message}")


@app.command()
def saul():
    """Fetch one Better Call Saul quote from the quotes API."""
    _, client, _ = _load_components()
    dispatcher = UIDispatcher()
    screen = SaulScreen(client, dispatcher)
    try:
        _run_saul_fetch(screen, dispatcher)
    finally:
        screen.close()
        client.close()


@app.command("dark-mode")
def dark_mode(
    enable: Optional[bool] = typer.Option(
        None,
        "--on/--off",
        help="Set the dark mode preference. Without a flag, show the current value.",
    ),
):
    """Show or change the dark mode preference."""
    _, _, settings = _load_components()
    if enable is not None:
        settings.dark_mode = enable
    print(f"dark mode: {'on' if settings.dark_mode else 'off'}")


@app.command()
def health():
	"""Print the effective configuration."""
	config, _, _ = _load_components()
	print(f"saul_quotes_url: {config.saul_quotes_url}")
	print(f"saul_timeout_s: {config.saul_timeout_s}")
	print(f"settings_path: {config.settings_path}")


SHELL_HELP = """Commands:
  length all|short|medium|large
  creator all|poet|engineer|artist|other
  name [TEXT]                  (no TEXT clears the name filter)
  add "TEXT" CATEGORY "NAME"
  generate | share | list | saul
  dark on|off
  help | quit"""


def _shell_step(
    home: HomeScreen,
    saul_screen: SaulScreen,
    dispatcher: UIDispatcher,
    settings: SettingsStore,
    cmd: str,
    args: List[str],
) -> None:
    if cmd == "length":
        home.length = LengthFilter((args or ["all"])[0].lower())
        print(f"{len(home.matches)} matching quote(s)")
    elif cmd == "creator":
        home.creator = CreatorFilter((args or ["all"])[0].lower())
        print(f"{len(home.matches)} matching quote(s)")
    elif cmd == "name":
        home.creator_name = " ".join(args)
        if home.name_message:
            print(f"[!] {home.name_message}")
        else:
            print(f"{len(home.matches)} matching quote(s)")
    elif cmd == "add":
        if len(args) != 3:
            print('[!] usage: add "TEXT" CATEGORY "NAME"')
            return
        text, category, name = args
        home.add_quote(text, CreatorFilter(category.lower()), name)
        print(f"added; catalog has {home.store.count()} quote(s)")
    elif cmd == "generate":
        home.generate()
        _print_home(home)
    elif cmd == "share":
        try:
            print(home.share())
        except NothingToShare as e:
            print(f"[!] {e}")
    elif cmd == "list":
        for q in home.matches:
            print(f"- {format_share_text(q)} [{q.creator.value}]")
    elif cmd == "saul":
        _run_saul_fetch(saul_screen, dispatcher)
    elif cmd == "dark":
        settings.dark_mode = (args or ["off"])[0].lower() == "on"
        print(f"dark mode: {'on' if settings.dark_mode else 'off'}")
    elif cmd == "help":
        print(SHELL_HELP)
    else:
        print(f"[!] unknown command: {cmd} (try 'help')")


@app.command()
def shell():
    """Interactive session; added quotes live until you quit."""
    _, client, settings = _load_components()
    dispatcher = UIDispatcher()
    home = HomeScreen(QuoteStore())
    saul_screen = SaulScreen(client, dispatcher)
    print(SHELL_HELP)
    try:
        while True:
            try:
                line = input("quotegen> ")
            except EOFError:
                break
            try:
                tokens = shlex.split(line)
            except ValueError as e:
                print(f"[!] {e}")
                continue
            if not tokens:
                continue
            cmd, args = tokens[0].lower(), tokens[1:]
            if cmd in {"quit", "exit"}:
                break
            try:
                _shell_step(home, saul_screen, dispatcher, settings, cmd, args)
            except ValueError as e:
                print(f"[!] {e}")
    finally:
        saul_screen.close()
        client.close()


def run():
	app()


if __name__ == "__main__":
	run()
