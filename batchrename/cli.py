"""Command-line interface for the batch rename tool."""

import asyncio
import locale
import os
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table
import yaml

from . import __version__
from .constants import (
    DEFAULT_CONFIG_FILE,
    ENV_CONFIG_FILE,
    EXIT_ERROR,
    EXIT_OK,
    ITEM_TYPE_CHOICES,
    MSG_LIST_ERROR,
    PATTERN_CHOICES,
    SELECT_ALL,
    SORT_CHOICES,
)
from .core import (
    Config,
    ConfigError,
    ItemType,
    OrderedSelection,
    OutcomeStatus,
    PatternKind,
    PatternSpec,
    RenameOp,
    SortKey,
)
from .executor import apply_renames, summarize
from .lister import list_items
from .patterns import check_term, generate_renames
from .safety import find_collisions
from .sorter import sort_items

# Load environment variables from .env file
load_dotenv()

console = Console()


def parse_selection(text: str, options: list[str]) -> list[str]:
    """Turn input like ``3,1-2`` or ``all`` into names, in the order typed.

    Raises ValueError for anything that does not pick at least one option.
    """
    text = text.strip()
    if text.lower() == SELECT_ALL:
        return list(options)

    picked: list[str] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            if "-" in part:
                start_text, end_text = part.split("-", 1)
                start, end = int(start_text), int(end_text)
            else:
                start = end = int(part)
        except ValueError:
            raise ValueError(f"'{part}' is not a number or range") from None

        step = 1 if end >= start else -1
        for index in range(start, end + step, step):
            if not 1 <= index <= len(options):
                raise ValueError(f"{index} is out of range (1-{len(options)})")
            name = options[index - 1]
            if name not in picked:
                picked.append(name)

    if not picked:
        raise ValueError("Select at least one item")
    return picked


class BatchRenameTool:
    """Interactive batch rename session."""

    def __init__(self, config: Config):
        self.config = config

    def ask_working_dir(self) -> Path:
        """Ask for the directory holding the items."""
        while True:
            answer = Prompt.ask("Which directory the items are stored? (e.g. ~/)")
            if answer.strip():
                return Path(os.path.expanduser(answer.strip()))
            console.print("[red]Value is required![/red]")

    def ask_item_type(self) -> ItemType:
        answer = Prompt.ask("Pick item type", choices=ITEM_TYPE_CHOICES)
        return ItemType(answer)

    def ask_sort_key(self) -> SortKey | None:
        if not Confirm.ask(
            "Would you like to sort the items?", default=self.config.sort_by_default
        ):
            return None
        answer = Prompt.ask("Sort the items by", choices=SORT_CHOICES)
        return SortKey(answer)

    def ask_selection(self, names: list[str], item_type: ItemType) -> OrderedSelection:
        """Show the listing and let the user pick items in their own order."""
        table = Table(title=f"Available {item_type.value}")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Name")
        for i, name in enumerate(names, 1):
            table.add_row(str(i), escape(name))
        console.print(table)

        while True:
            answer = Prompt.ask(
                f"Select {item_type.value} (e.g. 3,1,2 or 1-4 or {SELECT_ALL})"
            )
            try:
                return OrderedSelection.of(parse_selection(answer, names))
            except ValueError as e:
                console.print(f"[red]Invalid selection: {escape(str(e))}[/red]")

    def ask_pattern(self) -> PatternSpec:
        kind = PatternKind(Prompt.ask("Pick a pattern type", choices=PATTERN_CHOICES))
        pattern = PatternSpec(kind=kind)
        while pattern.needs_term:
            term = Prompt.ask(f"Enter {kind.value} term", default="", show_default=False)
            try:
                check_term(term)
            except ValueError as e:
                console.print(f"[red]Invalid term: {escape(str(e))}[/red]")
                continue
            pattern.term = term
            break
        return pattern

    def confirm_collisions(self, working_dir: Path, ops: list[RenameOp]) -> bool:
        """Report colliding targets and ask whether to go ahead anyway."""
        if not self.config.prevent_collisions:
            return True

        collisions = find_collisions(ops, os.listdir(working_dir))
        if not collisions:
            return True

        console.print("[yellow]Some new names are already taken:[/yellow]")
        for collision in collisions:
            console.print(
                f"  [yellow]{escape(collision.op.old_name)} → "
                f"{escape(collision.op.new_name)} ({collision.reason})[/yellow]",
                highlight=False,
            )
        return Confirm.ask("Rename anyway?", default=False)

    def run(self, working_dir: Path | None) -> int:
        """Run the whole session and return the exit code."""
        if working_dir is None:
            working_dir = self.ask_working_dir()
            if not working_dir.is_dir():
                raise click.ClickException(f"Not a directory: {working_dir}")
            console.print(
                f"[green]Using working directory: {escape(str(working_dir.resolve()))}"
                "[/green]",
                highlight=False,
            )
        else:
            console.print(
                f"[green]Staying in current directory: {escape(os.getcwd())}[/green]",
                highlight=False,
            )

        item_type = self.ask_item_type()
        listing = list_items(
            working_dir, item_type, include_hidden=self.config.include_hidden
        )
        if listing.status is OutcomeStatus.EMPTY:
            console.print(f"[yellow]{listing.message}[/yellow]")
            return EXIT_OK
        if listing.status is OutcomeStatus.FATAL:
            raise click.ClickException(MSG_LIST_ERROR.format(error=listing.message))

        sort_key = self.ask_sort_key()
        names = sort_items(sort_key, listing.names, working_dir)

        selection = self.ask_selection(names, item_type)
        pattern = self.ask_pattern()

        plan = generate_renames(selection, pattern)
        if plan.status is OutcomeStatus.FATAL:
            raise click.ClickException(plan.message)
        if plan.status is OutcomeStatus.EMPTY:
            console.print(f"[yellow]{plan.message}[/yellow]")
            return EXIT_OK

        if not self.confirm_collisions(working_dir, plan.ops):
            console.print("Operation cancelled")
            return EXIT_OK

        results = asyncio.run(apply_renames(working_dir, plan.ops))
        succeeded, failed = summarize(results)
        colour = "green" if not failed else "yellow"
        console.print(
            f"[{colour}]Renamed {succeeded} of {len(results)} {item_type.value}"
            f"[/{colour}]"
        )
        return EXIT_OK


def load_config(config_path: str) -> Config:
    """Load the config file, falling back to defaults."""
    if not Path(config_path).exists():
        return Config()
    try:
        return Config.from_file(config_path)
    except (OSError, ConfigError, yaml.YAMLError) as e:
        console.print(
            f"[yellow]Warning: Could not load config from {escape(config_path)}: "
            f"{escape(str(e))}[/yellow]"
        )
        return Config()


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
@click.argument("args", nargs=-1)
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.option(
    "--config",
    default=lambda: os.getenv(ENV_CONFIG_FILE, DEFAULT_CONFIG_FILE),
    show_default=f"${ENV_CONFIG_FILE} or {DEFAULT_CONFIG_FILE}",
    help="Configuration file path",
)
@click.pass_context
def main(ctx, args, config):
    """Batch rename files or folders with a prefix, a suffix or numbering.

    Run without arguments to be asked for the directory, or pass "." to
    work in the current directory.
    """
    if len(args) > 1:
        console.print("[red]Invalid arguments[/red]")
        ctx.exit(EXIT_OK)

    working_dir = None
    if args:
        if args[0] != ".":
            console.print("[red]Invalid argument[/red]")
            ctx.exit(EXIT_ERROR)
        working_dir = Path(".")

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        console.print("[yellow]Warning: Using default collation for sorting[/yellow]")

    tool = BatchRenameTool(load_config(config))
    try:
        ctx.exit(tool.run(working_dir))
    except (click.ClickException, click.exceptions.Exit, click.Abort, EOFError):
        # Re-raise click exceptions without modification
        raise
    except Exception as e:
        raise click.ClickException(str(e)) from e
