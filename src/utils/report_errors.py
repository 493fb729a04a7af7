"""
Exceptions raised when a report file cannot be parsed at all.

Per-row data problems never raise; only structural failures do, and their
messages are shown to end users unchanged.
"""
from typing import Any, Dict, Optional


class ReportFormatError(ValueError):
    """Base exception for report files whose structure cannot be understood"""
    def __init__(self, message: str, error_details: Optional[Dict[str, Any]] = None):
        self.error_details = error_details or {}
        super().__init__(message)


class ReportTooShortError(ReportFormatError):
    """The file has fewer non-blank lines than any real report"""
    def __init__(self, line_count: int, min_lines: int):
        super().__init__(
            "File appears to be empty or too short",
            {"line_count": line_count, "min_lines": min_lines}
        )


class HeaderNotFoundError(ReportFormatError):
    """No transaction header line was found near the top of the file"""
    def __init__(self, scanned_lines: int):
        super().__init__(
            "Invalid report format: could not find data headers",
            {"scanned_lines": scanned_lines}
        )
