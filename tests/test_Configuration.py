#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""Tests for the conversion settings."""

import pytest

from SVGPlotter import Configuration

def test_defaults():
	configuration = Configuration.Configuration()
	assert configuration.curve_vertex_count == 50
	assert configuration.system_unit == "px"
	assert configuration.pen_up_height == 5.0
	assert configuration.pen_down_height == 0.0

def test_needs_vertices():
	with pytest.raises(ValueError):
		Configuration.Configuration(curve_vertex_count=0)

def test_vertex_count_is_whole():
	assert Configuration.Configuration(curve_vertex_count=7.9).curve_vertex_count == 7

def test_repr():
	assert repr(Configuration.Configuration(curve_vertex_count=3, system_unit="mm")) == "Configuration(curve_vertex_count=3, system_unit='mm')"
