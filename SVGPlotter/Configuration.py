#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

class Configuration:
	"""
	The settings with which a document is converted into a toolpath.

	The defaults give a reasonably smooth result in the units of the document
	itself.
	"""

	def __init__(self, curve_vertex_count=50, system_unit="px", pen_up_height=5.0, pen_down_height=0.0, travel_speed=3000.0, draw_speed=1200.0) -> None:
		"""
		Creates a configuration.
		:param curve_vertex_count: How many vertices to generate for each curve
		of a path. Circles and ellipses get four times as many.
		:param system_unit: The length unit that coordinates are expressed in,
		before they are scaled to the size of the image. Any length unit can be
		used, e.g. "mm" to plot in millimetres.
		:param pen_up_height: The Z coordinate of the pen while travelling, in
		millimetres. Only used when writing g-code.
		:param pen_down_height: The Z coordinate of the pen while drawing, in
		millimetres. Only used when writing g-code.
		:param travel_speed: How fast to move while the pen is up, in mm/min.
		:param draw_speed: How fast to move while drawing, in mm/min.
		"""
		if curve_vertex_count < 1:
			raise ValueError("The curve vertex count must be at least 1, but it was {count}.".format(count=curve_vertex_count))
		self.curve_vertex_count = int(curve_vertex_count)
		self.system_unit = system_unit
		self.pen_up_height = pen_up_height
		self.pen_down_height = pen_down_height
		self.travel_speed = travel_speed
		self.draw_speed = draw_speed

	def __repr__(self) -> str:
		return "Configuration(curve_vertex_count={count}, system_unit={unit!r})".format(count=self.curve_vertex_count, unit=self.system_unit)
