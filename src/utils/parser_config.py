"""
Report parser configuration settings.

This module contains the scan windows and thresholds used to find the
regions of an App Store financial report. These values can be adjusted
without code changes when Apple changes the export layout.
"""
import os
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class ParserConfig:
    """Configuration class for report layout detection."""

    # Delimiter and metadata detection
    delimiter_sample_lines: int = 5  # Physical lines inspected for tab/comma counts
    metadata_scan_lines: int = 5  # Non-blank lines inspected for key/value metadata

    # Region location
    header_scan_window: int = 10  # The transaction header must appear within these lines
    summary_max_columns: int = 5  # Summary header is narrower than the transaction header

    # Structural validation
    min_report_lines: int = 5  # Non-blank lines required for a usable report

    # Row filtering
    sale_code: str = "S"  # 'Sale or Return' value of retained rows

    @classmethod
    def from_environment(cls) -> 'ParserConfig':
        """
        Create configuration from environment variables with fallback to defaults.

        Environment variables:
        - APPSTORE_REPORT_DELIMITER_SAMPLE_LINES
        - APPSTORE_REPORT_METADATA_SCAN_LINES
        - APPSTORE_REPORT_HEADER_SCAN_WINDOW
        - APPSTORE_REPORT_SUMMARY_MAX_COLUMNS
        - APPSTORE_REPORT_MIN_LINES
        - APPSTORE_REPORT_SALE_CODE
        """
        return cls(
            delimiter_sample_lines=int(os.getenv('APPSTORE_REPORT_DELIMITER_SAMPLE_LINES', 5)),
            metadata_scan_lines=int(os.getenv('APPSTORE_REPORT_METADATA_SCAN_LINES', 5)),
            header_scan_window=int(os.getenv('APPSTORE_REPORT_HEADER_SCAN_WINDOW', 10)),
            summary_max_columns=int(os.getenv('APPSTORE_REPORT_SUMMARY_MAX_COLUMNS', 5)),
            min_report_lines=int(os.getenv('APPSTORE_REPORT_MIN_LINES', 5)),
            sale_code=os.getenv('APPSTORE_REPORT_SALE_CODE', 'S')
        )


# Global configuration instance
parser_config = ParserConfig.from_environment()


def get_parser_config() -> ParserConfig:
    """Get the global parser configuration instance."""
    return parser_config


def update_config_from_dict(config_dict: Dict[str, Any]) -> None:
    """
    Update configuration from a dictionary (useful for testing).

    Args:
        config_dict: Dictionary with configuration values
    """
    global parser_config

    # Create a new config instance with updated values
    current_values = {
        field.name: getattr(parser_config, field.name)
        for field in parser_config.__dataclass_fields__.values()
    }
    current_values.update(config_dict)

    parser_config = ParserConfig(**current_values)


def reset_config() -> None:
    """Reload the configuration from the environment."""
    global parser_config
    parser_config = ParserConfig.from_environment()
