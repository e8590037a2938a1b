"""
Input discovery, output naming and the pre-run sweep of old PDFs.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .console import ConsoleLogger
from .errors import CleanupError, InputDirectoryError
from .formats import PaperFormatConfig

MARKDOWN_SUFFIX = ".md"
PDF_SUFFIX = ".pdf"


@dataclass
class CleanupReport:
    created: bool = False
    removed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


def output_filename(md_file: Path, paper_format: PaperFormatConfig) -> str:
    """``notes.md`` + A4 -> ``notes.a4.pdf``."""
    return f"{Path(md_file).stem}.{paper_format.slug}{PDF_SUFFIX}"


def discover_markdown_files(source_dir: Path) -> List[Path]:
    """Return the markdown files directly inside ``source_dir``, sorted by name."""
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        raise InputDirectoryError(f"Source directory not found: {source_dir}")
    try:
        entries = list(source_dir.iterdir())
    except OSError as e:
        raise InputDirectoryError(f"Cannot read source directory {source_dir}: {e}") from e
    return sorted(p for p in entries if p.suffix == MARKDOWN_SUFFIX and p.is_file())


def _remove_pdf(pdf_file: Path) -> None:
    try:
        pdf_file.unlink()
    except OSError as e:
        raise CleanupError(f"Failed to remove {pdf_file.name}: {e}") from e


def clean_output_dir(output_dir: Path, logger: ConsoleLogger) -> CleanupReport:
    """Create ``output_dir`` if needed, otherwise delete every PDF in it."""
    output_dir = Path(output_dir)
    report = CleanupReport()

    if not output_dir.exists():
        output_dir.mkdir(parents=True, exist_ok=True)
        report.created = True
        logger.info(f"Output directory created: {output_dir}")
        return report

    pdf_files = sorted(p for p in output_dir.iterdir() if p.suffix == PDF_SUFFIX and p.is_file())
    if not pdf_files:
        logger.info("Output directory already clean (no PDF found)")
        return report

    for pdf_file in pdf_files:
        try:
            _remove_pdf(pdf_file)
        except CleanupError as e:
            report.failed.append(pdf_file.name)
            logger.error(str(e))
            continue
        report.removed.append(pdf_file.name)
        logger.debug(f"Removed: {pdf_file.name}")

    logger.info(f"Cleanup complete: {len(report.removed)} PDF file(s) removed")
    if report.failed:
        logger.warning(f"{len(report.failed)} PDF file(s) could not be removed")
    return report
