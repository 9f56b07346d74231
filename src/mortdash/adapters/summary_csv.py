"""Adapter that reads the weekly mortality summary CSV."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from mortdash.adapters.base import DataAdapter
from mortdash.models import RawRecord

logger = logging.getLogger(__name__)


class SummaryCsvAdapter(DataAdapter):
    """Read ``datos_summary.csv`` into raw rows.

    Every column is read as text with NA detection disabled, so the record
    parser sees the cells exactly as written in the file.
    """

    name = "summary_csv"

    def __init__(
        self,
        *,
        csv_path: str | Path,
        delimiter: str = ",",
        encoding: str = "utf-8",
        chunksize: int = 50_000,
    ) -> None:
        self.csv_path = Path(csv_path)
        self.delimiter = delimiter
        self.encoding = encoding
        self.chunksize = chunksize

    def read(self) -> Iterable[RawRecord]:
        if not self.csv_path.exists():
            logger.error("Mortality CSV not found: %s", self.csv_path)
            raise FileNotFoundError(f"Mortality CSV not found: {self.csv_path}")

        try:
            frame_iter = pd.read_csv(
                self.csv_path,
                sep=self.delimiter,
                dtype=str,
                keep_default_na=False,
                encoding=self.encoding,
                chunksize=self.chunksize,
            )
            rows = 0
            for frame in frame_iter:
                for row in frame.to_dict(orient="records"):
                    rows += 1
                    yield row
        except pd.errors.EmptyDataError:
            logger.warning("Mortality CSV is empty: %s", self.csv_path)
            return
        except (pd.errors.ParserError, UnicodeDecodeError) as exc:
            logger.error("Failed to read mortality CSV %s: %s", self.csv_path, exc)
            raise ValueError(f"Failed to load CSV data file {self.csv_path}: {exc}") from exc

        logger.info("Read %d rows from %s", rows, self.csv_path)
