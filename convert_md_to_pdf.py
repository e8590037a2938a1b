#!/usr/bin/env python3
"""
Convert every markdown file in ./markdown to PDF in ./output.

Run without installing the package: python convert_md_to_pdf.py --format=A4
"""

import sys

from mdpaper.cli import main

if __name__ == "__main__":
    sys.exit(main())
