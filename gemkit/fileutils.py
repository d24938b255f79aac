"""Helpers to load, save, remove and inspect files and paths."""

from __future__ import annotations

import fnmatch
import os
from typing import Union

from .errors import GemError
from .mathutils import IMG_FORMATS
from .printer import Printable, Printer

PathLike = Union[str, "os.PathLike[str]"]


def _text(path: PathLike) -> str:
    return os.fspath(path)


def _name(path: PathLike) -> str:
    return os.path.basename(_text(path))


def load(filename: PathLike) -> str:
    """Return the whole text content of a file."""
    try:
        with open(filename, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise GemError(
            f'The file "{_text(filename)}" cannot be opened : {exc.strerror or exc}'
        ) from exc


def save(content: Union[str, Printable], filename: PathLike, append: bool = False) -> None:
    """Write a string, or the printed form of a Printable, to a file."""
    if isinstance(content, Printable):
        printer = Printer()
        content.print_to(printer)
        content = printer.content
    mode = "a" if append else "w"
    try:
        with open(filename, mode, encoding="utf-8") as handle:
            handle.write(content)
    except OSError as exc:
        raise GemError(
            f'The file "{_text(filename)}" cannot be opened : {exc.strerror or exc}'
        ) from exc


def remove(filename: PathLike) -> bool:
    """Delete a file; return whether it was removed."""
    try:
        os.remove(filename)
    except OSError:
        return False
    return True


def get_extension(filename: PathLike) -> str:
    """Return the part of the file name after its last dot, or an empty string."""
    name = _name(filename)
    return name.rsplit(".", 1)[1] if "." in name else ""


def check_extension(filename: PathLike, extension: str) -> None:
    """Raise GemError unless the file has the given extension (case-insensitive)."""
    if get_extension(filename).lower() != extension.lower():
        raise GemError(f'The file "{_text(filename)}" is not a *.{extension} file.')


def remove_extension(filename: PathLike) -> str:
    """Strip everything from the first dot of the file name onward."""
    base = _name(filename).split(".", 1)[0]
    return slashed(parent_path(filename), base)


def change_extension(filename: PathLike, extension: str) -> str:
    """Replace the whole extension of a file name."""
    return f"{remove_extension(filename)}.{extension}"


def exists(path: PathLike) -> bool:
    return os.path.exists(path)


def check_exists(path: PathLike) -> None:
    """Raise GemError if the file does not exist."""
    if not exists(path):
        raise GemError(f'The file "{_text(path)}" does not exist.')


def check_dir_exists(path: PathLike) -> None:
    """Raise GemError if the directory does not exist."""
    if not os.path.isdir(path):
        raise GemError(f'The directory "{_text(path)}" does not exist.')


def is_valid(filename: PathLike) -> bool:
    return bool(_text(filename))


def check_valid(filename: PathLike) -> None:
    """Raise GemError if the file name is empty."""
    if not is_valid(filename):
        raise GemError("The given filename is empty.")


def slashed(parent: PathLike, path: PathLike) -> str:
    """Join a parent and a relative path; absolute paths and a '.' parent leave path as is."""
    parent, path = _text(parent), _text(path)
    if is_absolute(path) or parent == ".":
        return path
    return f"{parent}/{path}"


def parent_path(filepath: PathLike) -> str:
    """Return the directory part of a path, '.' when there is none."""
    return os.path.dirname(_text(filepath)) or "."


def filename(filepath: PathLike) -> str:
    """Return the file name without its directory."""
    return _name(filepath)


def is_absolute(path: PathLike) -> bool:
    return os.path.isabs(_text(path))


def contains_images(directory: PathLike) -> bool:
    """Tell whether a directory holds at least one file with an image extension."""
    patterns = IMG_FORMATS.split(" ")
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return False
    return any(
        entry.is_file() and any(fnmatch.fnmatchcase(entry.name, p) for p in patterns)
        for entry in entries
    )


def create_path(parent: PathLike, path: PathLike) -> bool:
    """Create path (relative to parent) recursively; return whether it now exists."""
    try:
        os.makedirs(os.path.join(_text(parent), _text(path)), exist_ok=True)
    except OSError:
        return False
    return True


def check_created_path_exists(parent: PathLike, path: PathLike) -> str:
    """Create a path and return it, raising GemError if it could not be created."""
    full = slashed(parent, path)
    if not create_path(parent, path):
        raise GemError(f'Could not create path "{full}"')
    return full