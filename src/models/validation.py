"""
Result of the structural pre-check of a report file.
"""
from typing import List

from pydantic import BaseModel, Field, ConfigDict


class ValidationResult(BaseModel):
    """
    Errors are fatal and make the file unusable; warnings are informational
    and parsing can still proceed. Messages are shown to end users as-is.
    """
    valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        frozen=True
    )

    @classmethod
    def from_messages(cls, errors: List[str], warnings: List[str]) -> "ValidationResult":
        return cls(valid=len(errors) == 0, errors=list(errors), warnings=list(warnings))
