"""
passvault CLI - Command Line Interface for the passvault credential vault.

The vault lives in memory only: each invocation starts empty, and the
``shell`` command keeps one vault alive across many commands.
"""
import logging
import shlex
import sys
from typing import Optional

import click
from rich.logging import RichHandler
from rich.markup import escape

from . import VaultCLI, console, print_entry, print_entry_table

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("passvault")

EXIT_WORDS = ("quit", "exit")


@click.group(invoke_without_command=True)
@click.option(
    "--debug/--no-debug",
    default=False,
    envvar="PASSVAULT_DEBUG",
    help="Enable debug output",
    show_default=True
)
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """passvault - keep account passwords in an in-memory vault."""
    # Commands dispatched from the shell reuse its session
    if ctx.obj is None:
        ctx.obj = VaultCLI(debug=debug)
    elif debug:
        ctx.obj.debug = True
        logging.getLogger().setLevel(logging.DEBUG)

    # If no command is provided, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("account")
@click.option(
    "--password",
    "-p",
    help="Password (prompt if not provided)"
)
@click.pass_obj
def add(vc: VaultCLI, account: str, password: Optional[str]) -> None:
    """Add a new vault entry."""
    if password is None:
        password = click.prompt("Password", hide_input=True, confirmation_prompt=True)

    entry = vc.add_entry(account, password)
    console.print(f"[green]✓[/] Added entry for [bold]{escape(entry.account_name)}[/bold]")


@cli.command()
@click.argument("account")
@click.pass_obj
def show(vc: VaultCLI, account: str) -> None:
    """Show the entry for an account."""
    print_entry(vc.get_entry(account))


@cli.command(name="list")
@click.option(
    "--reveal",
    is_flag=True,
    default=False,
    help="Show passwords instead of masking them"
)
@click.pass_obj
def list_(vc: VaultCLI, reveal: bool) -> None:
    """List all vault entries."""
    print_entry_table(vc.list_entries(), reveal=reveal)


@cli.command()
@click.argument("account")
@click.option(
    "--password",
    "-p",
    help="New password (prompt if not provided)"
)
@click.pass_obj
def update(vc: VaultCLI, account: str, password: Optional[str]) -> None:
    """Change the password of an existing entry."""
    vc.get_entry(account)
    if password is None:
        password = click.prompt("New password", hide_input=True, confirmation_prompt=True)

    vc.update_entry(account, password)
    console.print(f"[green]✓[/] Updated password for [bold]{escape(account)}[/bold]")


@cli.command()
@click.argument("account")
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not ask for confirmation")
@click.pass_obj
def delete(vc: VaultCLI, account: str, yes: bool) -> None:
    """Delete the entry for an account."""
    vc.get_entry(account)
    if not yes and not click.confirm(f"Are you sure you want to delete the entry for {account}?"):
        console.print("[yellow]Cancelled.[/]")
        return

    vc.delete_entry(account)
    console.print(f"[green]✓[/] Deleted entry for [bold]{escape(account)}[/bold]")


@cli.command()
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not ask for confirmation")
@click.pass_obj
def clear(vc: VaultCLI, yes: bool) -> None:
    """Remove every entry from the vault."""
    if not yes and not click.confirm("Are you sure you want to remove all entries?"):
        console.print("[yellow]Cancelled.[/]")
        return

    count = vc.clear()
    console.print(f"[green]✓[/] Removed {count} entries")


@cli.command()
@click.argument("account")
@click.pass_context
def exists(ctx: click.Context, account: str) -> None:
    """Check whether an account is stored. Exits with 1 if it is not."""
    vc: VaultCLI = ctx.obj
    if vc.vm.contains_account(account):
        console.print(f"[green]✓[/] {escape(account)} is in the vault")
        return
    console.print(f"[yellow]{escape(account)} is not in the vault[/]")
    ctx.exit(1)


@cli.command()
@click.pass_obj
def stats(vc: VaultCLI) -> None:
    """Show how many entries the vault holds."""
    console.print(f"[bold]Entries:[/bold] {vc.vm.size()}")
    console.print(f"[bold]Empty:[/bold] {'yes' if vc.vm.is_empty() else 'no'}")


@cli.command()
@click.pass_obj
def shell(vc: VaultCLI) -> None:
    """Start an interactive session that keeps one vault across commands."""
    if vc.in_shell:
        raise click.ClickException("Already in an interactive session")

    vc.in_shell = True
    console.print("passvault interactive shell. Type 'help' for commands, 'quit' to leave.")
    try:
        while True:
            try:
                line = click.prompt("passvault", prompt_suffix="> ", default="", show_default=False)
            except click.Abort:
                break

            try:
                args = shlex.split(line)
            except ValueError as e:
                console.print(f"[red]✗[/] Could not parse command: {e}")
                continue

            if not args:
                continue
            if args[0] in EXIT_WORDS:
                break
            if args[0] == "help":
                args = ["--help"]

            try:
                cli.main(args=args, prog_name="passvault", standalone_mode=False, obj=vc)
            except click.ClickException as e:
                e.show()
            except click.Abort:
                console.print("[yellow]Aborted.[/]")
            except Exception as e:
                console.print(f"[red]✗[/] {e}")
                if vc.debug:
                    logger.exception("Error running shell command")
    finally:
        vc.in_shell = False


def main() -> None:
    """Entry point for the passvault CLI."""
    try:
        cli()
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.debug("Unhandled error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
