"""
File loading for the command line entry point.
Decoding is left entirely to pandas; the profiling engine itself only ever
receives rows.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from .config import CSV_READ_PARAMS, EXCEL_PARAMS, JSON_PARAMS, SUPPORTED_FORMATS
from .exceptions import FileCorruptionError, FileHandlingError, UnsupportedFileFormatError


class FileHandler:
    """
    Validate a data file and read it into a DataFrame of raw cell values.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def _validate_file(self, file_path: Path) -> None:
        """
        Validate file exists and has a supported format.

        Args:
            file_path: Path to the file to validate

        Raises:
            FileHandlingError: If file doesn't exist or is inaccessible
            UnsupportedFileFormatError: If file format is not supported
        """
        if not file_path.exists():
            raise FileHandlingError("File not found", str(file_path))

        if not file_path.is_file():
            raise FileHandlingError("Path is not a file", str(file_path))

        file_extension = file_path.suffix.lower()
        if file_extension not in SUPPORTED_FORMATS:
            raise UnsupportedFileFormatError(
                f"Unsupported file format: {file_extension}. "
                f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}",
                str(file_path)
            )

    def read_file(self, file_path: Union[str, Path]) -> pd.DataFrame:
        """
        Read a CSV, Excel or JSON file.

        CSV and Excel cells are kept as text (empty cells stay empty strings)
        so the profiler does its own type inference.

        Raises:
            FileCorruptionError: If pandas cannot read the file
        """
        file_path = Path(file_path)
        self._validate_file(file_path)

        size_mb = file_path.stat().st_size / (1024 ** 2)
        self.logger.info(f"Reading {file_path.name} ({size_mb:.2f} MB)")

        file_extension = file_path.suffix.lower()
        try:
            if file_extension == '.csv':
                return pd.read_csv(file_path, **CSV_READ_PARAMS)
            elif file_extension == '.xlsx':
                return pd.read_excel(file_path, **EXCEL_PARAMS)
            else:
                return pd.read_json(file_path, **JSON_PARAMS)
        except Exception as e:
            raise FileCorruptionError(
                f"Failed to read file - file may be corrupted: {str(e)}",
                str(file_path)
            ) from e
