# src/playbook/settings.py
"""Settings for playbook analytics."""
from pydantic import BaseModel, Field, field_validator


class PlaybookSettings(BaseModel):
    """Configuration settings for breakdown trees and tag analytics.

    Attributes:
        undefined_label: Bucket for trades with no value for a grouping key.
        tag_separator: Separator of the free-text tag list.
        tag_combo_joiner: Joiner of sorted tags in a tag-combination key.
    """

    undefined_label: str = Field(default="undefined", min_length=1)
    tag_separator: str = ","
    tag_combo_joiner: str = " + "

    @field_validator("tag_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Reject whitespace-only separators, which trimming would erase."""
        if not v.strip():
            raise ValueError("tag_separator must contain a non-whitespace character")
        return v
