"""
passvault CLI - Command Line Interface for the passvault credential vault.
"""
from typing import List
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import VaultEntry
from ..core.vault_manager import VaultManager

logger = logging.getLogger(__name__)

# Create console for rich output
console = Console()

MASK = "*" * 12


class VaultCLI:
    """Session object holding one in-memory vault for the CLI."""

    def __init__(self, debug: bool = False):
        """Initialize the CLI."""
        self.debug = debug
        self.vm = VaultManager()
        self.in_shell = False

        if debug:
            logging.getLogger().setLevel(logging.DEBUG)
            logger.debug("Debug mode enabled")

    def add_entry(self, account_name: str, password: str) -> VaultEntry:
        """Add a new entry."""
        if self.vm.contains_account(account_name):
            raise click.ClickException(f"An entry for '{account_name}' already exists")
        if not self.vm.create_entry(account_name, password):
            raise click.ClickException(f"Failed to add entry for '{account_name}'")
        return self.vm.read_entry(account_name)

    def get_entry(self, account_name: str) -> VaultEntry:
        """Get the entry for an account."""
        entry = self.vm.read_entry(account_name)
        if entry is None:
            raise click.ClickException(f"No entry found for account: {account_name}")
        return entry

    def update_entry(self, account_name: str, password: str) -> VaultEntry:
        """Change the password of an existing entry."""
        entry = self.get_entry(account_name)
        if not self.vm.update_entry(account_name, password):
            raise click.ClickException(f"Failed to update password for '{account_name}'")
        return entry

    def delete_entry(self, account_name: str) -> None:
        """Delete an entry."""
        if not self.vm.delete_entry(account_name):
            raise click.ClickException(f"No entry found for account: {account_name}")

    def list_entries(self) -> List[VaultEntry]:
        """List entries sorted by account name."""
        return self.vm.list_entries()

    def clear(self) -> int:
        """Empty the vault, returning how many entries were removed."""
        count = self.vm.size()
        self.vm.clear_vault()
        return count


def print_entry_table(entries: List[VaultEntry], reveal: bool = False) -> None:
    """Print a table of vault entries."""
    if not entries:
        console.print("[yellow]No entries found.[/]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Account")
    table.add_column("Password", style="dim")

    for entry in entries:
        table.add_row(
            escape(entry.account_name),
            escape(entry.password) if reveal else MASK,
        )

    console.print(table)


def print_entry(entry: VaultEntry) -> None:
    """Print an entry in its fixed-width display format."""
    console.print(escape(entry.format()), highlight=False, soft_wrap=True)
