"""Terminal student portal: member storage, login, sign-up, main menu and friends list."""

__version__ = "0.1.0"
__all__ = ["records", "store", "layout", "app"]