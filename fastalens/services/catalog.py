from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Iterable

from fastalens.core.config import DEFAULT_EXTENSIONS
from fastalens.core.errors import FastaLensError
from fastalens.core.logging import get_logger, log_event
from fastalens.domain.sequences import Catalog, SequenceFile
from fastalens.services.fasta_lengths import load_file_lengths
from fastalens.services.file_discovery import discover_sequence_files

logger = get_logger("fastalens.catalog")


def build_catalog(
    root: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    load_lengths: Callable[[Path], tuple[int, ...]] = load_file_lengths,
) -> Catalog:
    """
    Discover and parse every sequence file under ``root``.

    The first unreadable or malformed file aborts the build; no partial
    catalog is ever returned.
    """
    started = time.perf_counter()
    log_event(logger, "catalog_build_started", root=str(root))
    files: list[SequenceFile] = []
    try:
        for path in discover_sequence_files(root, extensions=extensions):
            lengths = load_lengths(path)
            files.append(SequenceFile(path=path, raw_lengths=tuple(lengths)))
            log_event(logger, "catalog_file_loaded", path=str(path), records=len(lengths))
    except FastaLensError as exc:
        log_event(
            logger,
            "catalog_build_failed",
            root=str(root),
            code=exc.code,
            error=str(exc),
        )
        raise

    catalog = Catalog.from_files(files)
    log_event(
        logger,
        "catalog_build_finished",
        root=str(root),
        files=len(catalog),
        elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return catalog
