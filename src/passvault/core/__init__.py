"""passvault core - in-memory vault entries and the store that manages them."""

from .models import (
    ACCOUNT_COLUMN_WIDTH,
    MIN_PASSWORD_LENGTH,
    ValidationError,
    ValidationErrorKind,
    VaultEntry,
    VaultError,
)
from .result import Err, Ok, Result
from .vault_manager import VaultManager

__all__ = [
    'ACCOUNT_COLUMN_WIDTH',
    'MIN_PASSWORD_LENGTH',
    'Err',
    'Ok',
    'Result',
    'ValidationError',
    'ValidationErrorKind',
    'VaultEntry',
    'VaultError',
    'VaultManager',
]
