#!/usr/bin/env python3
"""
Markdown to PDF converter using Puppeteer approach (inspired by vscode-markdown-pdf).
This uses Playwright (Python equivalent of Puppeteer) for better PDF generation control.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import markdown
from tqdm import tqdm

from .console import ConsoleLogger
from .errors import MissingInputFileError, RenderError
from .formats import PaperFormatConfig
from .images import inline_images
from .output import clean_output_dir, discover_markdown_files, output_filename
from .renderer import PdfRenderer
from .template import compose_html, extract_title

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]

CONVERTED = "converted"
FAILED = "failed"


@dataclass
class ConversionResult:
    source: Path
    output: Optional[Path] = None
    status: str = FAILED
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == CONVERTED


@dataclass
class ConversionSummary:
    results: List[ConversionResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def converted(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    @property
    def ok(self) -> bool:
        return self.failed == 0 and not self.aborted


def markdown_to_html(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


class MarkdownToPDFConverter:
    """Markdown to PDF converter using Playwright (Puppeteer approach)."""

    def __init__(self, source_dir, output_dir, paper_format: PaperFormatConfig,
                 logger: Optional[ConsoleLogger] = None, renderer=None, save_html: bool = False):
        """Initialize the converter.

        Args:
            renderer: object with an async ``render(html, output_pdf, paper_format)``;
                defaults to a Playwright-backed ``PdfRenderer``
            save_html: If True, save the intermediate HTML alongside the PDF
        """
        self.source_dir = Path(source_dir)
        self.output_dir = Path(output_dir)
        self.paper_format = paper_format
        self.logger = logger or ConsoleLogger()
        self.renderer = renderer or PdfRenderer(self.logger)
        self.save_html = save_html

    def build_html(self, md_file: Path) -> str:
        """Read a markdown file, inline its images and return the styled HTML."""
        if not md_file.is_file():
            raise MissingInputFileError(f"File not found: {md_file}")

        content = md_file.read_text(encoding='utf-8')
        processed = inline_images(content, md_file.parent, self.logger)
        body = markdown_to_html(processed)
        return compose_html(body, self.paper_format, extract_title(md_file, content))

    def convert_file(self, md_file: Path, loop: asyncio.AbstractEventLoop) -> ConversionResult:
        """Convert one markdown file; failures are reported, never raised."""
        md_file = Path(md_file)
        output_pdf = self.output_dir / output_filename(md_file, self.paper_format)
        result = ConversionResult(source=md_file)

        try:
            html = self.build_html(md_file)
            if self.save_html:
                output_html = output_pdf.with_suffix(".html")
                output_html.write_text(html, encoding='utf-8')
                self.logger.debug(f"Saved HTML to {output_html}")

            self.logger.debug(f"Rendering {md_file.name} as {self.paper_format.name} "
                              f"with margin {self.paper_format.margin}")
            loop.run_until_complete(self.renderer.render(html, output_pdf, self.paper_format))
        except MissingInputFileError as e:
            result.error = str(e)
            self.logger.error(str(e))
            return result
        except RenderError as e:
            result.error = str(e)
            self.logger.error(f"Failed to convert {md_file.name}: {e}")
            return result
        except (OSError, UnicodeDecodeError) as e:
            result.error = str(e)
            self.logger.error(f"Error converting {md_file.name}: {e}")
            return result
        except Exception as e:
            result.error = f"{type(e).__name__}: {e}"
            self.logger.error(f"Error processing {md_file.name}: {result.error}")
            return result

        result.output = output_pdf
        result.status = CONVERTED
        self.logger.success(f"PDF generated in {self.paper_format.name} format: {output_pdf}")
        return result

    def convert_all(self, fail_fast: bool = False) -> ConversionSummary:
        """Clean the output directory, then convert every markdown file in turn."""
        summary = ConversionSummary()

        self.logger.info("Step 1: Cleaning output directory")
        clean_output_dir(self.output_dir, self.logger)

        self.logger.info("Step 2: Searching for markdown files")
        md_files = discover_markdown_files(self.source_dir)
        if not md_files:
            self.logger.info(f"No .md files found to convert in {self.source_dir}")
            return summary

        self.logger.info(f"Found {len(md_files)} file(s) to convert: {[f.name for f in md_files]}")

        self.logger.info("Step 3: Converting files")
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        try:
            for md_file in tqdm(md_files, desc="Converting files", unit="file"):
                self.logger.info(f"Processing: {md_file.name}")
                result = self.convert_file(md_file, loop)
                summary.results.append(result)
                if not result.ok and fail_fast:
                    summary.aborted = True
                    self.logger.error(f"Stopping after failure in {md_file.name}")
                    break
        finally:
            loop.close()
            asyncio.set_event_loop(None)

        self.logger.success(f"Conversion complete: {summary.converted} files converted, "
                            f"{summary.failed} files failed ({len(summary.results)}/{len(md_files)} total)")
        self.logger.info(f"PDF files saved to: {self.output_dir.absolute()}")
        return summary
