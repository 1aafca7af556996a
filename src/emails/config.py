"""
Configuration for the EventMail content engine.

Centralizes generation settings: the public base URL used for CTA links
and the hard length limits applied to the subject and preheader slots.
"""

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Configuration for email content generation."""

    # Links
    base_url: str = "https://example.com"

    # Slot length limits (truncation, not rejection)
    subject_max_length: int = 55
    preheader_max_length: int = 70

    # Only checked by the extended validation rules
    preheader_min_length: int = 35
