from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from fastalens.core.config import DEFAULT_EXTENSIONS
from fastalens.core.errors import CatalogReadError


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    cleaned = (str(ext).strip().lstrip(".").casefold() for ext in extensions)
    return frozenset(ext for ext in cleaned if ext)


def has_sequence_extension(name: str, extensions: frozenset[str]) -> bool:
    suffix = Path(name).suffix.lstrip(".").casefold()
    return bool(suffix) and suffix in extensions


def _safe_is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=True)
    except OSError:
        return False


def _safe_is_file(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_file(follow_symlinks=True)
    except OSError:
        return False


def _real_directory(path: Path) -> Path | None:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def _walk(
    directory: Path,
    extensions: frozenset[str],
    ancestors: frozenset[Path],
) -> Iterator[Path]:
    real = _real_directory(directory)
    if real is None or real in ancestors:
        return
    ancestors = ancestors | {real}
    try:
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError:
        return

    for entry in entries:
        if _safe_is_dir(entry):
            yield from _walk(Path(entry.path), extensions, ancestors)
        elif _safe_is_file(entry) and has_sequence_extension(entry.name, extensions):
            yield Path(entry.path)


def discover_sequence_files(
    root: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[Path]:
    """
    Recursively list sequence files under ``root``, following symbolic links.

    A link back to one of its own ancestor directories is not followed, so
    symlink cycles terminate.
    Subdirectories that cannot be listed are skipped; an unusable root raises
    CatalogReadError.
    """
    if not root.exists():
        raise CatalogReadError(message="Directory not found", detail=str(root))
    if not root.is_dir():
        raise CatalogReadError(message="Not a directory", detail=str(root))
    try:
        with os.scandir(root):
            pass
    except OSError as exc:
        raise CatalogReadError(message="Unable to read directory", detail=str(exc)) from exc

    wanted = normalize_extensions(extensions)
    return sorted(_walk(root, wanted, frozenset()))
