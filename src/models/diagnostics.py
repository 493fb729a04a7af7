"""
Data-quality counters collected while decoding report rows.
"""
from typing import List

from pydantic import BaseModel, Field, ConfigDict


class ParseDiagnostics(BaseModel):
    """
    Counts of the per-row issues that were normalized instead of raised.

    Unparseable numbers are replaced by zero so a report is always produced;
    these counters make those silent substitutions visible to the host.
    """
    numeric_fallbacks: int = Field(default=0, alias="numericFallbacks")
    rows_missing_required_fields: int = Field(default=0, alias="rowsMissingRequiredFields")
    returns_discarded: int = Field(default=0, alias="returnsDiscarded")
    data_rows: int = Field(default=0, alias="dataRows")

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True
    )

    def warning_messages(self) -> List[str]:
        messages = []
        if self.numeric_fallbacks:
            messages.append(
                f"{self.numeric_fallbacks} numeric value(s) could not be read and were treated as 0"
            )
        if self.rows_missing_required_fields:
            messages.append(
                f"{self.rows_missing_required_fields} row(s) without a country or currency were skipped"
            )
        return messages
