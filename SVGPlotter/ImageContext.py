#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import typing

from . import PlotPoint
from . import Units

class ImageContext:
	"""
	The state of converting one document.

	The walker fills in the geometry of the image when it encounters the root
	element, and appends the vertices of every shape to ``plot_points``.
	"""

	def __init__(self, curve_vertex_count=50, system_unit="px", converter=None) -> None:
		"""
		Initialises defaults for all fields.
		:param curve_vertex_count: How many vertices to generate for each curve.
		:param system_unit: The length unit that shape coordinates are
		converted to.
		:param converter: The unit table to resolve values with. If ``None``,
		the default table is used.
		"""
		self.image_w = 0.0 #Size of the image in pixels.
		self.image_h = 0.0
		self.viewbox_x = 0.0 #Origin of the view box, in the system unit.
		self.viewbox_y = 0.0
		self.scale_x = 0.0 #Image size divided by view box size.
		self.scale_y = 0.0
		self.curve_vertex_count = curve_vertex_count
		self.system_unit = system_unit
		self.converter = converter if converter is not None else Units.default_converter
		self.plot_points = [] #type: typing.List[PlotPoint.PlotPoint]

	def __repr__(self) -> str:
		return "<ImageContext {w}x{h}, {count} points>".format(w=self.image_w, h=self.image_h, count=len(self.plot_points))
