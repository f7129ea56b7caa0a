"""
Formatting utilities for Archive Browser.
Provides helpers for device paths, entry names and display text.
"""


def join_path(directory: str, name: str) -> str:
    """
    Join a device directory and an entry name with a single separator.

    Args:
        directory: Absolute device path (e.g. "/ext/nfc")
        name: Entry name without path

    Returns:
        The combined device path
    """
    return f"{directory.rstrip('/')}/{name}"


def truncate_at_last_separator(path: str) -> str:
    """Drop the last path component ("/ext/nfc/cards" -> "/ext/nfc")."""
    pos = path.rfind("/")
    if pos < 0:
        return path
    return path[:pos]


def trim_extension(name: str, extension: str = "") -> str:
    """
    Strip a file extension from a name.

    Removes the given extension when the name ends with it; without one,
    removes everything from the last dot, unless the dot starts the name.

    Args:
        name: Entry name
        extension: Known extension to strip (e.g. ".nfc")

    Returns:
        The name without its extension
    """
    if extension:
        if name.endswith(extension) and len(name) > len(extension):
            return name[: -len(extension)]
        return name

    pos = name.rfind(".")
    if pos > 0:
        return name[:pos]
    return name


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length, adding suffix if truncated.

    Args:
        text: The text to truncate
        max_length: Maximum allowed length
        suffix: Suffix to add if truncated (default: "...")

    Returns:
        Truncated text with suffix if needed
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix
