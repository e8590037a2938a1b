"""
Command line entry point: pick a paper format and convert the markdown folder.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import argparse
import sys
from typing import List, Optional

from .config import Config
from .console import ConsoleLogger
from .converter import MarkdownToPDFConverter
from .dependencies import install_browsers
from .errors import InputDirectoryError, InvalidFormatError
from .formats import (
    DEFAULT_CHOICE,
    DEFAULT_FORMAT,
    FORMAT_CONFIGS,
    PROMPT_CHOICES,
    PaperFormatConfig,
    available_formats,
    format_from_choice,
    get_format,
)

EXIT_OK = 0
EXIT_CONVERSION_FAILED = 1
EXIT_INPUT_DIR_UNREADABLE = 3
EXIT_BROWSER_INSTALL_FAILED = 4


def _help_epilog() -> str:
    lines = ["Available formats:"]
    lines += [f"  {name}    {cfg.description}" for name, cfg in FORMAT_CONFIGS.items()]
    lines += [
        "",
        "Examples:",
        "  mdpaper                  # Interactive prompt",
        "  mdpaper --format=A4      # A4 directly",
        "  mdpaper --format=A2      # A2 directly",
    ]
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdpaper",
        description="Convert markdown files to paginated PDF files (A2, A3, A4 or A5)",
        epilog=_help_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--format", default=None, help=f"Paper format: {available_formats()} (default: interactive prompt)")
    parser.add_argument("--source", default=None, help="Source directory (default: from env/markdown)")
    parser.add_argument("--output-dir", default=None, help="Output directory (default: from env/output)")
    parser.add_argument("--save-html", action="store_true", help="Save the intermediate HTML files alongside PDFs")
    parser.add_argument("--fail-fast", action="store_true", help="Stop the batch at the first document that fails")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging for detailed output")
    parser.add_argument("--install-browsers", action="store_true", help="Install the Chromium build used by Playwright and exit")
    return parser


def prompt_for_format(logger: ConsoleLogger) -> PaperFormatConfig:
    """Ask for a format on stdin; invalid or missing answers fall back to A4."""
    print("\nChoose the paper format:")
    for choice, name in PROMPT_CHOICES.items():
        print(f"{choice}. {FORMAT_CONFIGS[name].description}")
    print()

    try:
        answer = input(f"Enter the option number (1-{len(PROMPT_CHOICES)}) [default: {DEFAULT_CHOICE}]: ")
    except EOFError:
        logger.warning(f"No input available. Using {DEFAULT_FORMAT} as default.")
        return FORMAT_CONFIGS[DEFAULT_FORMAT]

    paper_format = format_from_choice(answer)
    if paper_format is None:
        logger.warning(f"Invalid option '{answer.strip()}'. Using {DEFAULT_FORMAT} as default.")
        return FORMAT_CONFIGS[DEFAULT_FORMAT]
    return paper_format


def resolve_format(requested: Optional[str], logger: ConsoleLogger) -> PaperFormatConfig:
    if requested:
        try:
            return get_format(requested)
        except InvalidFormatError:
            logger.warning(f"Format '{requested}' is invalid. Available formats: {available_formats()}")
    return prompt_for_format(logger)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logger = ConsoleLogger(debug=args.debug)

    if args.install_browsers:
        return EXIT_OK if install_browsers(logger) else EXIT_BROWSER_INSTALL_FAILED

    config = Config({
        "source_dir": args.source,
        "output_dir": args.output_dir,
        "format": args.format,
    })

    logger.info("Markdown to PDF converter")
    paper_format = resolve_format(config.get_format(), logger)
    logger.info(f"Selected format: {paper_format.name} ({paper_format.description})")

    converter = MarkdownToPDFConverter(
        config.get_source_dir(),
        config.get_output_dir(),
        paper_format,
        logger,
        save_html=args.save_html,
    )
    try:
        summary = converter.convert_all(fail_fast=args.fail_fast)
    except InputDirectoryError as e:
        logger.error(str(e))
        return EXIT_INPUT_DIR_UNREADABLE

    return EXIT_OK if summary.ok else EXIT_CONVERSION_FAILED


if __name__ == "__main__":
    sys.exit(main())
