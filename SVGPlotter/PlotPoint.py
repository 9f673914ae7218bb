#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import enum
import typing

class PenState(enum.Enum):
	"""
	Whether the pen draws while moving towards a point.
	"""
	up = "up" #Move without drawing.
	down = "down" #Draw a line to the point.

class PlotPoint:
	"""
	Data structure that represents a movement of the pen to a certain spot,
	either drawing or not.

	Such intermediary data structures are necessary in order to perform the
	transformations on SVG elements correctly.
	"""

	def __init__(self, x=0, y=0, pen_state=PenState.down):
		"""
		Initialises defaults for all fields.
		:param x: The X position to move to.
		:param y: The Y position to move to.
		:param pen_state: Whether to draw while moving there.
		"""
		self.x = float(x)
		self.y = float(y)
		self.pen_state = pen_state

	@property
	def position(self) -> typing.Tuple[float, float]:
		return self.x, self.y

	@property
	def pen_down(self) -> bool:
		return self.pen_state == PenState.down

	def copy(self) -> "PlotPoint":
		return PlotPoint(self.x, self.y, self.pen_state)

	def __eq__(self, other) -> bool:
		if not isinstance(other, PlotPoint):
			return NotImplemented
		return self.x == other.x and self.y == other.y and self.pen_state == other.pen_state

	def __repr__(self) -> str:
		return "PlotPoint({x}, {y}, {pen_state})".format(x=self.x, y=self.y, pen_state=self.pen_state.name)

def from_points(points) -> typing.List[PlotPoint]:
	"""
	Turns a list of coordinates into a vertex loop.

	The first vertex is a travel move to the start of the loop, and the rest
	draw lines.
	:param points: A list of X,Y pairs.
	:return: A list of plot points.
	"""
	return [PlotPoint(x, y, PenState.up if index == 0 else PenState.down) for index, (x, y) in enumerate(points)]
