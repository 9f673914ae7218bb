#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import math #For the corner angles of rounded rectangles.
import typing

from . import Geometry
from . import PlotPoint

def ellipse(cx, cy, rx, ry, curve_vertex_count) -> typing.List[PlotPoint.PlotPoint]:
	"""
	Creates the outline of an ellipse (or a circle, if the radii are equal).

	Ellipses are sampled four times as densely as the curves of paths, since
	they're four quarter-curves long.
	:param cx: The X coordinate of the centre.
	:param cy: The Y coordinate of the centre.
	:param rx: The horizontal radius.
	:param ry: The vertical radius.
	:param curve_vertex_count: How many vertices to generate for each curve.
	:return: A vertex loop around the ellipse, or an empty list if one of
	the radii is not positive.
	"""
	if rx <= 0 or ry <= 0:
		return []
	return PlotPoint.from_points(Geometry.ellipse_vertices((cx, cy), rx, ry, 0, curve_vertex_count * 4))

def line(x1, y1, x2, y2) -> typing.List[PlotPoint.PlotPoint]:
	return [PlotPoint.PlotPoint(x1, y1, PlotPoint.PenState.up), PlotPoint.PlotPoint(x2, y2, PlotPoint.PenState.down)]

def polygon(points) -> typing.List[PlotPoint.PlotPoint]:
	return PlotPoint.from_points(list(points))

class RoundedRectangle:
	"""
	A rectangle with optionally rounded corners.

	The corner radii are corrected upon construction: a missing radius takes
	the value of the other one, and neither may exceed half of the side it's
	on.
	"""

	def __init__(self, x, y, width, height, rx=0, ry=0) -> None:
		"""
		Creates a rectangle.
		:param x: The left side.
		:param y: The top side.
		:param width: The horizontal size.
		:param height: The vertical size.
		:param rx: The horizontal radius of the corners. Zero if not given.
		:param ry: The vertical radius of the corners. Zero if not given.
		"""
		self.x = x
		self.y = y
		self.width = width
		self.height = height
		rx = max(0, rx)
		ry = max(0, ry)
		if rx != 0 or ry != 0:
			rx = min(rx, width / 2)
			ry = min(ry, height / 2)
			if rx == 0: #Only one radius was given. Mirror it to the other axis.
				rx = min(ry, width / 2)
			elif ry == 0:
				ry = min(rx, height / 2)
		self.rx = rx
		self.ry = ry

	@property
	def centre(self) -> Geometry.Point:
		return self.x + self.width / 2, self.y + self.height / 2

	@property
	def rounded(self) -> bool:
		return self.rx > 0 and self.ry > 0

	def corners(self) -> typing.List[Geometry.Point]:
		"""
		Gets the corners of the rectangle, ignoring the rounding.
		:return: The top-left, bottom-left, bottom-right and top-right corners.
		"""
		left = self.x
		top = self.y
		right = self.x + self.width
		bottom = self.y + self.height
		return [(left, top), (left, bottom), (right, bottom), (right, top)]

	def vertices(self, curve_vertex_count) -> typing.List[PlotPoint.PlotPoint]:
		"""
		Creates the outline of this rectangle.

		Each rounded corner is a quarter of an ellipse, going around counter-
		clockwise (on the screen) from the top-left corner.
		:param curve_vertex_count: How many vertices to generate for each curve.
		The corners get a quarter of that each.
		:return: A vertex loop around the rectangle.
		"""
		corner_vertex_count = curve_vertex_count // 4
		if not self.rounded or corner_vertex_count == 0:
			return PlotPoint.from_points(self.corners())
		left = self.x + self.rx
		top = self.y + self.ry
		right = self.x + self.width - self.rx
		bottom = self.y + self.height - self.ry
		quarter = -math.pi / 2
		points = []
		for centre, start_angle in (((left, top), math.pi * 1.5), ((left, bottom), math.pi), ((right, bottom), math.pi / 2), ((right, top), 0.0)):
			points.extend(Geometry.ellipse_vertices(centre, self.rx, self.ry, 0, corner_vertex_count, start_angle, quarter))
		return PlotPoint.from_points(points)

	def __repr__(self) -> str:
		return "RoundedRectangle({x}, {y}, {width}, {height}, rx={rx}, ry={ry})".format(x=self.x, y=self.y, width=self.width, height=self.height, rx=self.rx, ry=self.ry)
