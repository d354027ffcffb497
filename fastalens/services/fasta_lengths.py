from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO

from Bio import SeqIO

from fastalens.core.errors import CatalogReadError, SequenceParseError


def read_record_lengths(stream: BinaryIO, *, source: str = "<stream>") -> tuple[int, ...]:
    """Return the residue count of every FASTA record in ``stream``, in order."""
    handle = io.TextIOWrapper(stream, encoding="utf-8", newline=None)
    try:
        return tuple(len(record.seq) for record in SeqIO.parse(handle, "fasta"))
    except (ValueError, UnicodeDecodeError) as exc:
        raise SequenceParseError(
            message=f"Malformed FASTA content in {source}",
            detail=str(exc),
        ) from exc
    finally:
        handle.detach()


def load_file_lengths(path: Path) -> tuple[int, ...]:
    try:
        stream = path.open("rb")
    except OSError as exc:
        raise CatalogReadError(
            message=f"Unable to open {path}",
            detail=str(exc),
        ) from exc
    with stream:
        try:
            return read_record_lengths(stream, source=str(path))
        except OSError as exc:
            raise CatalogReadError(
                message=f"Unable to read {path}",
                detail=str(exc),
            ) from exc
