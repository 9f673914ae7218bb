#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

from . import Configuration
from . import Parser

def convert_file(file_name, configuration=None):
	"""
	Reads an SVG file and converts it into a sequence of plot points.
	:param file_name: The path to the SVG file.
	:param configuration: The settings to convert with, or ``None`` for the
	defaults.
	:return: The converted image. Its ``plot_points`` are the toolpath.
	"""
	return Parser.Parser(configuration).parse_file(file_name)
