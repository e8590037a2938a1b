"""
Print composed HTML to PDF with a headless Chromium driven by Playwright.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

from pathlib import Path

from playwright.async_api import async_playwright, Error as PlaywrightError

from .console import ConsoleLogger
from .errors import RenderError
from .formats import PaperFormatConfig


class PdfRenderer:
    """Launches a fresh browser for every document and always closes it."""

    LAUNCH_ARGS = [
        '--no-sandbox',
        '--disable-setuid-sandbox',
        '--disable-dev-shm-usage',  # Use /tmp instead of /dev/shm (prevents OOM crashes)
        '--disable-gpu',
    ]

    def __init__(self, logger: ConsoleLogger, headless: bool = True):
        self.logger = logger
        self.headless = headless

    async def render(self, html: str, output_pdf: Path, paper_format: PaperFormatConfig) -> Path:
        """Load ``html`` into a new page and print it to ``output_pdf``."""
        playwright = browser = page = None
        try:
            playwright = await async_playwright().start()
            browser = await playwright.chromium.launch(headless=self.headless, args=self.LAUNCH_ARGS)
            page = await browser.new_page()

            # Data URIs only, but still wait until the page is quiet
            await page.set_content(html, wait_until='networkidle')

            await page.pdf(
                path=str(output_pdf),
                format=paper_format.name,
                landscape=False,
                print_background=True,
                margin=paper_format.margins(),
                # @page in the stylesheet wins; explicit margins are the fallback
                prefer_css_page_size=True,
                display_header_footer=False,
            )
            return Path(output_pdf)
        except (PlaywrightError, OSError) as e:
            raise RenderError(f"Failed to render {Path(output_pdf).name}: {e}") from e
        finally:
            await self._close(page, browser, playwright)

    async def _close(self, page, browser, playwright) -> None:
        """Close page, browser and driver; close errors never mask a render error."""
        try:
            if page is not None and not page.is_closed():
                await page.close()
        except PlaywrightError as e:
            self.logger.debug(f"Page close failed: {e}")
        try:
            if browser is not None:
                await browser.close()
        except PlaywrightError as e:
            self.logger.debug(f"Browser close failed: {e}")
        try:
            if playwright is not None:
                await playwright.stop()
        except PlaywrightError as e:
            self.logger.debug(f"Playwright stop failed: {e}")

        self.logger.debug("Browser instance closed and cleaned up")
