"""Public helper functions for entry keys and property values."""


def _extension_index(path: str) -> int:
    """Index of the extension dot, or -1 when the last segment has none."""
    dot = path.rfind(".")
    if dot == -1 or path.find("/", dot + 1) != -1:
        return -1
    return dot


def strip_filename_extension(path: str) -> str:
    """Return *path* without its extension (``application.yml`` → ``application``)."""
    dot = _extension_index(path)
    return path if dot == -1 else path[:dot]


def get_filename_extension(path: str) -> str | None:
    """Return the text after the last dot, or None when there is no extension."""
    dot = _extension_index(path)
    return None if dot == -1 else path[dot + 1:]


def stringify(value) -> str:
    """Render a scalar the way Java would print it in a property value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
