from enum import Enum
from typing import Any, Optional

from .result import Err, Ok, Result

MIN_PASSWORD_LENGTH = 5
ACCOUNT_COLUMN_WIDTH = 20


class VaultError(Exception):
    """Base exception for vault-related errors."""
    pass


class ValidationErrorKind(str, Enum):
    INVALID_ACCOUNT_NAME = "invalid_account_name"
    INVALID_PASSWORD = "invalid_password"


class ValidationError(VaultError):
    """Raised when an account name or password fails validation."""

    def __init__(self, kind: ValidationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def validate_account_name(account_name: Optional[str]) -> None:
    """Raise ValidationError unless the name has non-whitespace content.

    Only the emptiness check uses the stripped value; callers store the
    original string.
    """
    if not isinstance(account_name, str) or not account_name.strip():
        raise ValidationError(
            ValidationErrorKind.INVALID_ACCOUNT_NAME,
            "Account name cannot be empty",
        )


def validate_password(password: Optional[str]) -> None:
    """Raise ValidationError unless the password is long enough."""
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            ValidationErrorKind.INVALID_PASSWORD,
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        )


class VaultEntry:
    """A single validated account/password pair.

    Both fields are validated on every assignment, so an entry can never
    hold an invalid value. Equality and hashing use the account name only.
    """

    __slots__ = ("_account_name", "_password")

    def __init__(self, account_name: str, password: str):
        """Create an entry.

        Args:
            account_name: Name of the account, must not be blank
            password: Password, at least MIN_PASSWORD_LENGTH characters

        Raises:
            ValidationError: If either field is invalid
        """
        self.account_name = account_name
        self.password = password

    @classmethod
    def create(cls, account_name: str, password: str) -> "Result[VaultEntry, ValidationError]":
        """Build an entry without raising.

        Returns:
            Ok wrapping the new entry, or Err wrapping the ValidationError
        """
        try:
            return Ok(cls(account_name, password))
        except ValidationError as e:
            return Err(e)

    @property
    def account_name(self) -> str:
        return self._account_name

    @account_name.setter
    def account_name(self, value: str) -> None:
        validate_account_name(value)
        self._account_name = value

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, value: str) -> None:
        validate_password(value)
        self._password = value

    def change_password(self, password: str) -> "Result[VaultEntry, ValidationError]":
        """Set a new password, returning Err and keeping the old one on failure."""
        try:
            self.password = password
        except ValidationError as e:
            return Err(e)
        return Ok(self)

    def format(self) -> str:
        """Display string with the account name padded to a fixed column."""
        return f"Account: {self._account_name:<{ACCOUNT_COLUMN_WIDTH}} | Password: {self._password}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"VaultEntry(account_name={self._account_name!r})"

    def __eq__(self, other: Any):
        if self is other:
            return True
        if not isinstance(other, VaultEntry):
            return NotImplemented
        return self._account_name == other._account_name

    def __hash__(self) -> int:
        return hash(self._account_name)
