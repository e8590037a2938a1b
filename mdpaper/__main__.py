"""
Allow ``python -m mdpaper``.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import sys

from .cli import main

sys.exit(main())
