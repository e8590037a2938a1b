"""
Paper format table: margins, base font size and description per page size.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .errors import InvalidFormatError


@dataclass(frozen=True)
class PaperFormatConfig:
    """Read-only settings for one supported page size."""

    name: str
    margin: str
    font_size: str
    description: str
    compact: bool = False

    @property
    def slug(self) -> str:
        return self.name.lower()

    def margins(self) -> Dict[str, str]:
        """Uniform margin mapping in the shape Playwright's page.pdf() expects."""
        return {
            'top': self.margin,
            'right': self.margin,
            'bottom': self.margin,
            'left': self.margin,
        }


FORMAT_CONFIGS: Dict[str, PaperFormatConfig] = {
    "A2": PaperFormatConfig("A2", "25mm", "14px", "A2 (420×594 mm) - Extra large"),
    "A3": PaperFormatConfig("A3", "20mm", "13px", "A3 (297×420 mm) - Large"),
    "A4": PaperFormatConfig("A4", "20mm", "12px", "A4 (210×297 mm) - Standard"),
    "A5": PaperFormatConfig("A5", "15mm", "11px", "A5 (148×210 mm) - Compact", compact=True),
}

DEFAULT_FORMAT = "A4"

# Interactive prompt options, in the order they are listed
PROMPT_CHOICES = {str(i): name for i, name in enumerate(FORMAT_CONFIGS, start=1)}
DEFAULT_CHOICE = "3"


def available_formats() -> str:
    return ", ".join(FORMAT_CONFIGS)


def get_format(name: str) -> PaperFormatConfig:
    """Look up a format by name, ignoring case."""
    key = (name or "").strip().upper()
    if key not in FORMAT_CONFIGS:
        raise InvalidFormatError(
            f"Invalid format '{name}'. Available formats: {available_formats()}"
        )
    return FORMAT_CONFIGS[key]


def format_from_choice(choice: str) -> Optional[PaperFormatConfig]:
    """Map a prompt answer (1-4, blank for default) to a format, or None if invalid."""
    choice = choice.strip() or DEFAULT_CHOICE
    name = PROMPT_CHOICES.get(choice)
    return FORMAT_CONFIGS[name] if name else None
