"""
Utilities for handling file paths, drawing file names, and URL parsing.
"""

from pathlib import PurePath

from pathvalidate import sanitize_filename

_REMOTE_SCHEMES = ("http://", "https://")

# Marker of the drawings collection endpoint, which always serves DXF
_DRAWINGS_MARKER = "drawings/"

DEFAULT_DRAWING_STEM = "temp_drawing"


def is_remote_url(path_or_url: str) -> bool:
    """Returns True when the input should be downloaded rather than opened."""
    return path_or_url.strip().lower().startswith(_REMOTE_SCHEMES)


def normalize_extension(extension: str) -> str:
    """Lowercases an extension and makes sure it carries a leading dot."""
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    return extension


def file_extension(path: str | PurePath) -> str:
    """
    Returns the lowercase extension of a local path with its leading dot,
    or an empty string when the file name has none.
    """
    return normalize_extension(PurePath(path).suffix)


def infer_extension_from_url(url: str) -> str:
    """
    Guesses the drawing extension (without a dot) from anywhere in the URL,
    so `download?file=part.dwg` counts as DWG.

    The drawings endpoint and explicit `.dxf` names win over `.dwg`; anything
    else defaults to DXF, which is what the drawing service serves. Strip the
    access token first so its value cannot sway the guess.
    """
    url = url.lower()
    if ".dxf" in url or _DRAWINGS_MARKER in url:
        return "dxf"
    if ".dwg" in url:
        return "dwg"
    return "dxf"


def drawing_filename(drawing_id: int | None, extension: str) -> str:
    """Builds the temp file name for a downloaded drawing."""
    extension = extension.lstrip(".")
    if drawing_id is not None:
        return f"drawing_{drawing_id}.{extension}"
    return f"{DEFAULT_DRAWING_STEM}.{extension}"


def safe_filename(filename: str) -> str:
    """Strips directory components and characters that are invalid on any OS."""
    return sanitize_filename(PurePath(filename.replace("\\", "/")).name, platform="universal")
