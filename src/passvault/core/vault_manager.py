import logging
from typing import Dict, Iterator, List, Optional

from .models import VaultEntry
from .result import Err

logger = logging.getLogger(__name__)


class VaultManager:
    """In-memory store of vault entries keyed by account name.

    Public methods never raise on bad input: validation failures are logged
    and reported as False, and a rejected call leaves the vault unchanged.
    """

    def __init__(self):
        self._vault: Dict[str, VaultEntry] = {}

    def _lookup(self, account_name) -> Optional[VaultEntry]:
        # Keys are always str; anything else, hashable or not, is absent
        if not isinstance(account_name, str):
            return None
        return self._vault.get(account_name)

    def create_entry(self, account_name: str, password: str) -> bool:
        """Add a new entry.

        Args:
            account_name: Account name, used as the key
            password: Password for the account

        Returns:
            bool: True if the entry was added, False if the account already
            exists or the fields are invalid
        """
        if self._lookup(account_name) is not None:
            logger.warning(f"Entry already exists for account: {account_name}")
            return False

        result = VaultEntry.create(account_name, password)
        if isinstance(result, Err):
            logger.error(f"Error creating entry: {result.error}")
            return False

        self._vault[account_name] = result.value
        logger.debug(f"Created entry for account: {account_name}")
        return True

    def read_entry(self, account_name: str) -> Optional[VaultEntry]:
        """Get the stored entry for an account, or None if there is none."""
        return self._lookup(account_name)

    def read_all_entries(self) -> Dict[str, VaultEntry]:
        """Return a shallow copy of the account-to-entry mapping."""
        return dict(self._vault)

    def list_entries(self) -> List[VaultEntry]:
        """List all entries sorted by account name."""
        return sorted(self._vault.values(), key=lambda e: e.account_name)

    def update_entry(self, account_name: str, new_password: str) -> bool:
        """Change the password of an existing entry.

        Returns:
            bool: True if the password was changed, False if the account does
            not exist or the new password is invalid
        """
        entry = self._lookup(account_name)
        if entry is None:
            logger.warning(f"No entry found for account: {account_name}")
            return False

        result = entry.change_password(new_password)
        if isinstance(result, Err):
            logger.error(f"Error updating password: {result.error}")
            return False

        logger.debug(f"Updated password for account: {account_name}")
        return True

    def delete_entry(self, account_name: str) -> bool:
        """Remove an entry, returning True if one was removed."""
        if self._lookup(account_name) is None:
            return False
        del self._vault[account_name]
        logger.debug(f"Deleted entry for account: {account_name}")
        return True

    def is_empty(self) -> bool:
        return not self._vault

    def size(self) -> int:
        return len(self._vault)

    def contains_account(self, account_name: str) -> bool:
        return self._lookup(account_name) is not None

    def clear_vault(self) -> None:
        """Remove every entry."""
        count = len(self._vault)
        self._vault.clear()
        logger.debug(f"Cleared vault ({count} entries removed)")

    # ---- Container protocol ----
    def __len__(self) -> int:
        return self.size()

    def __contains__(self, account_name: object) -> bool:
        return self.contains_account(account_name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vault))
