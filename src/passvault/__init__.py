# Avoid importing the CLI stack at top-level; core objects load on first access
__all__ = ["VaultManager", "VaultEntry", "ValidationError"]

def __getattr__(name):
    if name == "VaultManager":
        from .core.vault_manager import VaultManager
        return VaultManager
    if name == "VaultEntry":
        from .core.models import VaultEntry
        return VaultEntry
    if name == "ValidationError":
        from .core.models import ValidationError
        return ValidationError
    raise AttributeError(name)
