"""Service logic for a user-script hosting site: gray release, access, templates and helpers."""

__version__ = "1.0.0"

__all__ = [
    "access",
    "category",
    "fetch",
    "gray_control",
    "script_code",
    "statistics",
    "templates",
    "versions",
    "webhook",
]