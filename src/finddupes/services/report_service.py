"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Serializes duplicate groups as JSON or as a standalone HTML page.
"""
import html
import json
import os
from typing import List, TextIO

from finddupes.core.models import ContentGroup, OutputFormat


HTML_TOP = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>Results</title>
    <style>
        html {
            font-family: sans-serif;
        }

        table {
            border-collapse: collapse;
            border: 1px solid black;
            margin: 1em;
        }

        th, td {
            padding: 0.5em 1em;
            border: 1px solid black;
        }
    </style>
  </head>
  <body>
    <table>
      <thead>
        <tr><th>Files</th><th>Size</th></tr>
      </thead>
      <tbody>"""

HTML_BOTTOM = """</tbody>
    </table>
  </body>
</html>"""


class ReportService:
    """Renders the final list of duplicate groups."""

    @staticmethod
    def to_json(groups: List[ContentGroup]) -> str:
        """Array of groups, each an array of {paths, size, device, inode, nlink} objects."""
        return json.dumps([group.to_list() for group in groups])

    @staticmethod
    def display_path(path: str) -> str:
        """Printable form of a path; undecodable bytes become U+FFFD."""
        return os.fsencode(path).decode("utf-8", "replace")

    @classmethod
    def group_to_html_row(cls, group: ContentGroup) -> str:
        """One table row: every record's links on its own line, then the size."""
        cells = "".join(
            "<p><code>{}</code></p>".format(
                "</code>, <code>".join(html.escape(cls.display_path(path)) for path in record.paths)
            )
            for record in group.records
        )
        return f"    <tr><td>{cells}</td><td>{group.size}</td></tr>"

    @classmethod
    def to_html(cls, groups: List[ContentGroup]) -> str:
        lines = [HTML_TOP]
        lines.extend(cls.group_to_html_row(group) for group in groups)
        lines.append(HTML_BOTTOM)
        return "\n".join(lines)

    @classmethod
    def render(cls, groups: List[ContentGroup], output_format: OutputFormat) -> str:
        if output_format == OutputFormat.HTML:
            return cls.to_html(groups)
        return cls.to_json(groups)

    @classmethod
    def write(cls, dest: TextIO, groups: List[ContentGroup], output_format: OutputFormat) -> None:
        dest.write(cls.render(groups, output_format))
        dest.write("\n")
