"""Custom exceptions for measurement file ingestion"""


class IngestionError(Exception):
    """Base exception for file ingestion errors"""
    pass


class FileReadError(IngestionError):
    """Raised when a measurement file can not be opened or decoded"""
    pass


class EmptyFileError(IngestionError):
    """Raised when file is empty"""
    pass
