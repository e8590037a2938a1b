"""
Markdown to paginated PDF (A2-A5) through a headless browser.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

from .converter import ConversionResult, ConversionSummary, MarkdownToPDFConverter
from .formats import FORMAT_CONFIGS, PaperFormatConfig, get_format
from .images import inline_images
from .renderer import PdfRenderer
from .template import compose_html

__all__ = [
    "ConversionResult",
    "ConversionSummary",
    "FORMAT_CONFIGS",
    "MarkdownToPDFConverter",
    "PaperFormatConfig",
    "PdfRenderer",
    "compose_html",
    "get_format",
    "inline_images",
]

__version__ = "1.0.0"
