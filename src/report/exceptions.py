"""Custom exceptions for the report generator."""


class ReportError(Exception):
    """Base exception for fatal report generation failures."""
    pass


class ResultsNotFoundError(ReportError):
    """Exception raised when no results directory or results file exists."""
    pass


class SnapshotReadError(ReportError):
    """Exception raised when a results file cannot be read."""
    pass


class SnapshotParseError(ReportError):
    """Exception raised when a results file does not match the snapshot schema."""
    pass


class ReportWriteError(ReportError):
    """Exception raised when the report cannot be written."""
    pass
