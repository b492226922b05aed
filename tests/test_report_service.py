"""
Tests for JSON and HTML report rendering.
"""
import io
import json
import os
import pytest
from finddupes.services.report_service import ReportService
from finddupes.core.models import ContentGroup, FileRecord, OutputFormat


def sample_groups():
    return [
        ContentGroup(size=500, records=[
            FileRecord(paths=["/data/a.bin", "/data/a_link.bin"], size=500, device=1, inode=10, nlink=2),
            FileRecord(paths=["/backup/a.bin"], size=500, device=1, inode=11, nlink=1),
        ]),
    ]


class TestJsonReport:
    def test_array_of_arrays_of_records(self):
        data = json.loads(ReportService.to_json(sample_groups()))
        assert data == [[
            {"paths": ["/data/a.bin", "/data/a_link.bin"], "size": 500, "device": 1, "inode": 10, "nlink": 2},
            {"paths": ["/backup/a.bin"], "size": 500, "device": 1, "inode": 11, "nlink": 1},
        ]]

    def test_empty_result(self):
        assert ReportService.to_json([]) == "[]"


class TestHtmlReport:
    def test_one_row_per_group(self):
        page = ReportService.to_html(sample_groups())
        assert page.startswith("<!doctype html>")
        assert page.rstrip().endswith("</html>")
        assert page.count("<tr><td>") == 1
        assert "<p><code>/data/a.bin</code>, <code>/data/a_link.bin</code></p>" in page
        assert "<td>500</td>" in page

    def test_paths_are_escaped(self):
        group = ContentGroup(size=1, records=[
            FileRecord(paths=["/tmp/<b>&.txt"], size=1, device=1, inode=1),
            FileRecord(paths=["/tmp/plain.txt"], size=1, device=1, inode=2),
        ])
        page = ReportService.to_html([group])
        assert "/tmp/&lt;b&gt;&amp;.txt" in page
        assert "<b>" not in page

    @pytest.mark.skipif(os.name == "nt", reason="POSIX file name encoding")
    def test_undecodable_names_render_lossily(self):
        bad_name = os.fsdecode(b"/data/a\xff.bin")
        group = ContentGroup(size=1, records=[
            FileRecord(paths=[bad_name], size=1, device=1, inode=1),
            FileRecord(paths=["/data/b.bin"], size=1, device=1, inode=2),
        ])
        page = ReportService.to_html([group])
        assert "/data/a\ufffd.bin" in page
        page.encode("utf-8")

    def test_display_path_keeps_valid_names(self):
        assert ReportService.display_path("/data/caf\u00e9.txt") == "/data/caf\u00e9.txt"

    def test_empty_result_still_renders_table(self):
        page = ReportService.to_html([])
        assert "<tbody>" in page and "</tbody>" in page


class TestWrite:
    def test_write_selects_format(self):
        buffer = io.StringIO()
        ReportService.write(buffer, sample_groups(), OutputFormat.HTML)
        assert buffer.getvalue().startswith("<!doctype html>")

        buffer = io.StringIO()
        ReportService.write(buffer, sample_groups(), OutputFormat.JSON)
        assert json.loads(buffer.getvalue())[0][0]["inode"] == 10
