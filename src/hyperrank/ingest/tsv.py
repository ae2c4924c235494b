from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterator, Tuple, Union

from ..core.exceptions import IngestError

logger = logging.getLogger(__name__)

SOURCE_COLUMN = "SOURCE_SUBREDDIT"
TARGET_COLUMN = "TARGET_SUBREDDIT"


def read_edges(
    path: Union[str, Path],
    source_column: str = SOURCE_COLUMN,
    target_column: str = TARGET_COLUMN,
    delimiter: str = "\t",
) -> Iterator[Tuple[str, str]]:
    """Yield ``(source, target)`` pairs from a delimited hyperlink file, in file order.

    The first row is the header. Every other column is ignored.
    """
    path = Path(path)
    try:
        f = open(path, "r", encoding="utf-8", newline="")
    except OSError as e:
        raise IngestError(f"Cannot open {path}: {e}") from e

    with f:
        reader = csv.DictReader(f, delimiter=delimiter)
        try:
            header = reader.fieldnames or []
        except (UnicodeDecodeError, csv.Error) as e:
            raise IngestError(f"{path}:{reader.line_num}: {e}") from e
        missing = [c for c in (source_column, target_column) if c not in header]
        if missing:
            raise IngestError(f"{path}: missing column(s) {', '.join(missing)}")

        count = 0
        try:
            for row in reader:
                source = (row.get(source_column) or "").strip()
                target = (row.get(target_column) or "").strip()
                if not source or not target:
                    raise IngestError(f"{path}:{reader.line_num}: empty source or target")
                count += 1
                yield source, target
        except (UnicodeDecodeError, csv.Error) as e:
            raise IngestError(f"{path}:{reader.line_num}: {e}") from e

    logger.info("Read %d edges from %s", count, path)
