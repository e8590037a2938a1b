"""
Install the Chromium build Playwright drives.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import subprocess
import sys

from .console import ConsoleLogger


def run_command(cmd: list, description: str, logger: ConsoleLogger) -> bool:
    """Run a command and return success status."""
    logger.info(f"Installing {description}...")
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        logger.error(f"Failed to install {description}: {e.stderr}")
        return False
    except FileNotFoundError as e:
        logger.error(f"Failed to install {description}: {e}")
        return False
    logger.success(f"{description} installed successfully")
    return True


def install_browsers(logger: ConsoleLogger) -> bool:
    return run_command(
        [sys.executable, "-m", "playwright", "install", "chromium"],
        "Playwright Chromium",
        logger,
    )
