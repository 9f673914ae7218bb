#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""Shared sample documents and fixtures."""

import pytest

from SVGPlotter import Configuration
from SVGPlotter import Document
from SVGPlotter import ImageContext
from SVGPlotter import Parser

#A circle in a 20x20 view box, shown at 100x100 pixels (scale 5).
CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 20 20">
	<circle cx="10" cy="10" r="5"/>
</svg>'''

#Two squares at scale 1. The second one starts at its far corner.
TWO_SQUARES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
	<polygon points="0,0 10,0 10,10 0,10"/>
	<polygon points="60,60 50,60 50,50 60,50"/>
</svg>'''

RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
	<rect x="10" y="10" width="10" height="10"/>
</svg>'''

CLOSED_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
	<path d="M10 10 L20 10 L20 20 Z"/>
</svg>'''

HIDDEN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
	<g style="display: none">
		<circle cx="50" cy="50" r="10"/>
		<rect x="10" y="10" width="10" height="10" display="inline"/>
	</g>
	<defs>
		<circle id="unused" cx="50" cy="50" r="10"/>
	</defs>
</svg>'''

FONT_SIZE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" style="font-size: 16px">
	<g font-size="10px">
		<rect id="inner"/>
	</g>
</svg>'''

@pytest.fixture
def configuration() -> Configuration.Configuration:
	return Configuration.Configuration()

@pytest.fixture
def parser(configuration) -> Parser.Parser:
	return Parser.Parser(configuration)

@pytest.fixture
def image() -> ImageContext.ImageContext:
	"""An image of 200 by 100 pixels, in pixel units."""
	result = ImageContext.ImageContext(curve_vertex_count=50, system_unit="px")
	result.image_w = 200.0
	result.image_h = 100.0
	return result

def find(document, node_type, index=0):
	"""Finds the n-th element of a certain type in a document, depth first."""
	found = []
	def visit(node):
		if node.node_type == node_type:
			found.append(node)
		for child in node:
			visit(child)
	visit(document)
	return found[index]

def parse(text):
	return Document.parse_string(text)
