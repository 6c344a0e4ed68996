"""
Unit tests for vault entries.

Tests:
- Account name and password validation
- Rejected assignments keep the previous value
- Equality and hashing by account name
- Fixed-width display format
- Ok/Err results from the non-raising constructors
"""

import pytest

from passvault.core.models import (
    MIN_PASSWORD_LENGTH, ValidationError, ValidationErrorKind, VaultEntry, VaultError
)
from passvault.core.result import Err, Ok


class TestValidation:
    """Construction and assignment validation."""

    def test_valid_entry(self):
        """Valid fields should construct an entry."""
        entry = VaultEntry("alice", "secret1")
        assert entry.account_name == "alice"
        assert entry.password == "secret1"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_blank_account_name_rejected(self, name):
        """Blank or missing account names should be rejected."""
        with pytest.raises(ValidationError) as exc:
            VaultEntry(name, "validpass")
        assert exc.value.kind == ValidationErrorKind.INVALID_ACCOUNT_NAME
        assert "Account name cannot be empty" in str(exc.value)

    def test_account_name_stored_untrimmed(self):
        """Whitespace is only used for the emptiness check."""
        entry = VaultEntry("  bob  ", "validpass")
        assert entry.account_name == "  bob  "

    @pytest.mark.parametrize("password", ["", "1234", None])
    def test_short_password_rejected(self, password):
        """Passwords under the minimum length should be rejected."""
        with pytest.raises(ValidationError) as exc:
            VaultEntry("bob", password)
        assert exc.value.kind == ValidationErrorKind.INVALID_PASSWORD
        assert "Password must be at least 5 characters" in str(exc.value)

    def test_minimum_length_password_accepted(self):
        """A password of exactly the minimum length is valid."""
        entry = VaultEntry("bob", "x" * MIN_PASSWORD_LENGTH)
        assert len(entry.password) == MIN_PASSWORD_LENGTH

    def test_non_string_rejected(self):
        """Non-string values are invalid."""
        with pytest.raises(ValidationError):
            VaultEntry(12345, "validpass")
        with pytest.raises(ValidationError):
            VaultEntry("bob", 1234567)

    def test_validation_error_is_vault_error(self):
        """ValidationError should be catchable as VaultError."""
        with pytest.raises(VaultError):
            VaultEntry("", "validpass")


class TestMutation:
    """Setters keep the entry valid."""

    def test_set_password(self):
        entry = VaultEntry("alice", "secret1")
        entry.password = "newpass2"
        assert entry.password == "newpass2"

    def test_invalid_password_keeps_previous(self):
        """A rejected password must not replace the old one."""
        entry = VaultEntry("alice", "secret1")
        with pytest.raises(ValidationError):
            entry.password = "abc"
        assert entry.password == "secret1"

    def test_invalid_account_name_keeps_previous(self):
        entry = VaultEntry("alice", "secret1")
        with pytest.raises(ValidationError):
            entry.account_name = "  "
        assert entry.account_name == "alice"

    def test_set_account_name(self):
        """A valid new name replaces the old one."""
        entry = VaultEntry("alice", "secret1")
        entry.account_name = "carol"
        assert entry.account_name == "carol"
        assert entry.password == "secret1"

    def test_identity_follows_new_name(self):
        """Equality and hash use the current account name."""
        entry = VaultEntry("alice", "secret1")
        entry.account_name = "carol"
        assert entry == VaultEntry("carol", "other123")
        assert entry != VaultEntry("alice", "secret1")
        assert hash(entry) == hash(VaultEntry("carol", "other123"))

    def test_reassigning_accepted_values(self):
        """Values that were accepted once are always accepted again."""
        entry = VaultEntry("alice", "secret1")
        entry.account_name = entry.account_name
        entry.password = entry.password
        assert VaultEntry(entry.account_name, entry.password) == entry


class TestIdentity:
    """Equality and hashing."""

    def test_equal_by_account_name(self):
        """Password is not part of identity."""
        assert VaultEntry("alice", "secret1") == VaultEntry("alice", "other123")

    def test_different_names_not_equal(self):
        assert VaultEntry("alice", "secret1") != VaultEntry("Alice", "secret1")

    def test_hash_consistent_with_equality(self):
        a = VaultEntry("alice", "secret1")
        b = VaultEntry("alice", "other123")
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_not_equal_to_other_types(self):
        assert VaultEntry("alice", "secret1") != "alice"

    def test_repr_hides_password(self):
        assert "secret1" not in repr(VaultEntry("alice", "secret1"))


class TestFormat:
    """Display string."""

    def test_format_pads_account_name(self):
        entry = VaultEntry("alice", "secret1")
        assert entry.format() == "Account: alice                | Password: secret1"

    def test_format_name_at_column_width(self):
        """A name exactly as wide as the column gets no padding."""
        name = "a" * 20
        entry = VaultEntry(name, "secret1")
        assert entry.format() == "Account: " + name + " | Password: secret1"

    def test_format_does_not_truncate(self):
        name = "a" * 25
        entry = VaultEntry(name, "secret1")
        assert entry.format() == f"Account: {name} | Password: secret1"

    def test_str_matches_format(self):
        entry = VaultEntry("alice", "secret1")
        assert str(entry) == entry.format()


class TestResults:
    """Non-raising constructors."""

    def test_create_ok(self):
        result = VaultEntry.create("alice", "secret1")
        assert isinstance(result, Ok)
        assert result.ok
        assert result.value.account_name == "alice"

    def test_create_err(self):
        result = VaultEntry.create("alice", "123")
        assert isinstance(result, Err)
        assert not result.ok
        assert result.error.kind == ValidationErrorKind.INVALID_PASSWORD

    def test_change_password_err_keeps_previous(self):
        entry = VaultEntry("alice", "secret1")
        result = entry.change_password("no")
        assert isinstance(result, Err)
        assert entry.password == "secret1"

    def test_change_password_ok(self):
        entry = VaultEntry("alice", "secret1")
        result = entry.change_password("newpass2")
        assert isinstance(result, Ok)
        assert result.value is entry
        assert entry.password == "newpass2"
