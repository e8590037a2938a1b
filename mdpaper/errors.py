"""
Exception types raised by the markdown to PDF pipeline.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""


class MdPaperError(Exception):
    """Base class for all conversion errors."""


class InvalidFormatError(MdPaperError, ValueError):
    """Requested paper format is not one of the supported sizes."""


class InputDirectoryError(MdPaperError):
    """Source directory is missing or cannot be listed."""


class MissingInputFileError(MdPaperError):
    """A markdown file disappeared before its conversion started."""


class ImageReadError(MdPaperError):
    """A referenced local image could not be read."""


class RenderError(MdPaperError):
    """Browser failed to launch, load the HTML or print the PDF."""


class CleanupError(MdPaperError):
    """A previously generated PDF could not be removed."""
