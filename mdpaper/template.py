"""
HTML document template with print styling per paper format.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import html
import re
from pathlib import Path

from .formats import PaperFormatConfig


def extract_title(md_file: Path, content: str) -> str:
    """Extract the document title from markdown content.

    Preference order:
    1) First ATX H1 heading starting with '# '
    2) Setext H1 style (line followed by '===')
    3) Humanized filename stem
    """
    lines = content.splitlines()

    for line in lines:
        stripped = line.strip()
        if stripped.startswith('# '):
            heading_text = stripped[2:].strip()
            if heading_text:
                return heading_text

    for i in range(len(lines) - 1):
        current_line = lines[i].strip()
        if current_line and re.fullmatch(r"={3,}", lines[i + 1].strip()):
            return current_line

    stem = md_file.stem.replace('_', ' ').replace('-', ' ').strip()
    return stem.title() if stem else md_file.stem


def compose_html(body_html: str, paper_format: PaperFormatConfig, title: str = "") -> str:
    """Wrap rendered markdown in a complete, print-styled HTML document."""
    name = paper_format.name
    base_font_size = paper_format.font_size

    # Compact pages get smaller code and table text
    if paper_format.compact:
        pre_font_size = "10px"
        code_font_size = "10px"
        table_font_size = "10px"
        th_font_size = "11px"
        cell_padding = "8px 10px"
    else:
        pre_font_size = "12px"
        code_font_size = "11px"
        table_font_size = "11px"
        th_font_size = "12px"
        cell_padding = "12px 15px"

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>
        /* {name} portrait */
        @page {{
            size: {name} portrait;
            margin: {paper_format.margin};
        }}

        body {{
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            line-height: 1.6;
            color: #333;
            font-size: {base_font_size};
            padding: 0;
            margin: 0;
            max-width: none;
        }}

        h1, h2, h3, h4, h5, h6 {{
            page-break-after: avoid;
            break-after: avoid;
            color: #2c3e50;
            margin-top: 1.5em;
            margin-bottom: 0.8em;
            line-height: 1.3;
        }}

        h1 {{
            font-size: 2.8em;
            border-bottom: 3px solid #3498db;
            padding-bottom: 10px;
            margin-bottom: 1.2em;
        }}

        h2 {{
            font-size: 2.2em;
            color: #3498db;
            border-bottom: 2px solid #ecf0f1;
            padding-bottom: 8px;
            page-break-before: avoid;
        }}

        h3 {{
            font-size: 1.8em;
            color: #34495e;
            page-break-before: avoid;
        }}

        h4 {{
            font-size: 1.4em;
            color: #7f8c8d;
        }}

        h5 {{
            font-size: 1.2em;
        }}

        h6 {{
            font-size: 1.1em;
        }}

        /* Every top-level heading opens a new page, except the first */
        h1 {{
            page-break-before: always;
        }}

        h1:first-child {{
            page-break-before: avoid;
        }}

        p {{
            margin: 1em 0;
            text-align: justify;
            orphans: 3;
            widows: 3;
        }}

        pre {{
            background: #2c3e50;
            color: #ecf0f1;
            padding: 20px;
            overflow-x: auto;
            border-radius: 5px;
            margin: 1.5em 0;
            font-family: 'Courier New', Monaco, monospace;
            font-size: {pre_font_size};
            line-height: 1.4;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
        }}

        code {{
            background: #ecf0f1;
            padding: 3px 6px;
            border-radius: 3px;
            font-family: 'Courier New', Monaco, monospace;
            color: #e74c3c;
            font-size: {code_font_size};
        }}

        pre code {{
            background: none;
            color: #ecf0f1;
            padding: 0;
            font-size: {pre_font_size};
        }}

        img {{
            max-width: 100%;
            height: auto;
            display: block;
            margin: 1.5em auto;
            box-shadow: 0 4px 12px rgba(0,0,0,0.15);
            border-radius: 8px;
        }}

        blockquote {{
            border-left: 4px solid #3498db;
            margin: 1.5em 0;
            font-style: italic;
            background: #f8f9fa;
            padding: 20px;
            border-radius: 0 8px 8px 0;
            font-size: {base_font_size};
            box-shadow: 0 2px 6px rgba(0,0,0,0.1);
        }}

        table {{
            border-collapse: collapse;
            width: 100%;
            margin: 1.5em 0;
            font-size: {table_font_size};
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
        }}

        table th, table td {{
            border: 1px solid #ddd;
            padding: {cell_padding};
            text-align: left;
            vertical-align: top;
        }}

        table th {{
            background: linear-gradient(135deg, #3498db, #2980b9);
            color: white;
            font-weight: bold;
            font-size: {th_font_size};
        }}

        table tr:nth-child(even) {{
            background-color: #f8f9fa;
        }}

        ul, ol {{
            margin: 1em 0;
            padding-left: 2em;
        }}

        li {{
            margin: 0.5em 0;
            font-size: {base_font_size};
        }}

        a {{
            color: #3498db;
            text-decoration: none;
            font-weight: 500;
        }}

        hr {{
            border: none;
            height: 2px;
            background: linear-gradient(to right, #3498db, #2980b9);
            margin: 2em 0;
            page-break-after: avoid;
        }}

        /* Prevent large elements from breaking across pages */
        pre, blockquote, table, img {{
            page-break-inside: avoid;
            break-inside: avoid;
        }}
    </style>
</head>
<body>
{body_html}
</body>
</html>
"""
