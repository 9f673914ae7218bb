#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""Tests for the command line interface."""

from SVGPlotter import __main__
from tests.conftest import RECT_SVG

def write(tmp_path, content, name="image.svg"):
	file_name = tmp_path / name
	file_name.write_text(content)
	return str(file_name)

def test_moves(tmp_path, capsys):
	assert __main__.main([write(tmp_path, RECT_SVG)]) == 0
	output = capsys.readouterr().out.splitlines()
	assert output == [
		"Move To (10.0000, 10.0000)",
		"Line To (10.0000, 20.0000)",
		"Line To (20.0000, 20.0000)",
		"Line To (20.0000, 10.0000)",
		"Line To (10.0000, 10.0000)"
	]

def test_gcode_to_file(tmp_path, capsys):
	output_file = tmp_path / "image.gcode"
	assert __main__.main([write(tmp_path, RECT_SVG), "--gcode", "--unit", "mm", "--output", str(output_file)]) == 0
	assert capsys.readouterr().out == ""
	assert "G21" in output_file.read_text().splitlines()

def test_options(tmp_path, capsys):
	assert __main__.main([write(tmp_path, '<svg width="100" height="100" viewBox="0 0 100 100"><circle cx="50" cy="50" r="10"/></svg>'), "--curve-vertices", "3", "--unit", "mm", "--verbose"]) == 0
	assert len(capsys.readouterr().out.splitlines()) == 3 * 4 + 1

def test_missing_file(tmp_path):
	assert __main__.main([str(tmp_path / "missing.svg")]) == 1

def test_invalid_document(tmp_path):
	assert __main__.main([write(tmp_path, "<svg>")]) == 1

def test_invalid_vertex_count(tmp_path):
	assert __main__.main([write(tmp_path, RECT_SVG), "--curve-vertices", "0"]) == 1
