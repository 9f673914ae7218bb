#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""Tests for the document model."""

import xml.etree.ElementTree

import pytest

from SVGPlotter import Document

class TestNode:
	def test_namespace_is_stripped(self):
		document = Document.parse_string('<svg xmlns="http://www.w3.org/2000/svg"><circle/></svg>')
		assert document.node_type == "svg"
		assert document.children[0].node_type == "circle"

	def test_children_and_parents(self):
		document = Document.parse_string("<svg><g><rect/><!-- comment --><circle/></g></svg>")
		group = document.children[0]
		assert [child.node_type for child in group] == ["rect", "circle"]
		assert group.children[1].parent is group
		assert document.parent is None

	def test_attributes(self):
		node = Document.parse_string('<rect width=" 5 "/>')
		assert node.get_value("width") == "5"
		assert node.get_value("height") == ""

	def test_namespaced_attribute(self):
		node = Document.parse_string('<use xmlns:xlink="http://www.w3.org/1999/xlink" xlink:href="#a"/>')
		assert node.get_value("href") == "#a"

	def test_style(self):
		node = Document.parse_string('<rect style="Display: none; fill:red;broken"/>')
		assert node.get_style("display") == "none"
		assert node.get_style("fill") == "red"
		assert node.get_style("stroke") == ""

class TestFiles:
	def test_parse_file(self, tmp_path):
		file_name = tmp_path / "image.svg"
		file_name.write_text("<svg><rect/></svg>")
		assert Document.parse_file(str(file_name)).children[0].node_type == "rect"

	def test_missing_file(self, tmp_path):
		with pytest.raises(OSError):
			Document.parse_file(str(tmp_path / "missing.svg"))

	def test_invalid_xml(self):
		with pytest.raises(xml.etree.ElementTree.ParseError):
			Document.parse_string("<svg>")
