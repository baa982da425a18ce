"""Custom exceptions for the tabular profiling engine."""

from typing import Optional


class DataProfilingError(Exception):
    """Base exception for all profiling operations."""
    pass


class ProfilingError(DataProfilingError):
    """Exception raised during data profiling operations."""
    pass


class InvalidTableError(ProfilingError):
    """Exception raised when the input is not a table of records."""

    def __init__(self, message: str, row_index: Optional[int] = None):
        self.row_index = row_index
        if row_index is not None:
            message = f"{message} (Row: {row_index})"
        super().__init__(message)


class FileHandlingError(DataProfilingError):
    """Exception raised for file handling operations."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        self.file_path = file_path
        if file_path:
            message = f"{message} (File: {file_path})"
        super().__init__(message)


class UnsupportedFileFormatError(FileHandlingError):
    """Exception raised when file format is not supported."""
    pass


class FileCorruptionError(FileHandlingError):
    """Exception raised when file appears to be corrupted."""
    pass
