"""Small helpers for file paths and strings."""

from __future__ import annotations


def file_extension(path: str) -> str:
    """Return the text after the last dot, or the whole path if there is none."""
    _, dot, extension = path.rpartition(".")
    return extension if dot else path


def file_stem(path: str) -> str:
    """Return the file name after the last slash, without its last extension."""
    name = path.rpartition("/")[2]
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def replace_char(text: str, replaced: str, replaced_with: str) -> str:
    """Replace every occurrence of one character with another."""
    if len(replaced) != 1 or len(replaced_with) != 1:
        raise ValueError("replace_char expects single characters")
    return text.replace(replaced, replaced_with)