#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import logging
import math #Arc sweeps.
import typing

from . import Geometry
from . import PlotPoint

logger = logging.getLogger(__name__)

class FlattenState:
	"""
	The state that carries over from one path command to the next.
	"""

	def __init__(self, cursor=(0.0, 0.0)):
		"""
		Initialises defaults for all fields.
		:param cursor: Where the pen is.
		"""
		self.cursor = cursor
		self.previous_control_c = None #Second handle of the previous C or S command, for mirroring in S. This is always absolute!
		self.previous_control_q = None #Handle of the previous Q or T command, for mirroring in T.

def get_vertices(commands, curve_vertex_count) -> typing.List[PlotPoint.PlotPoint]:
	"""
	Flattens a list of absolute path commands into straight line segments.

	All commands must be absolute already (see ``PathNormaliser``). If any
	command is still relative, nothing can be produced.
	:param commands: The absolute commands of a path.
	:param curve_vertex_count: How many vertices to generate for each curve.
	:return: A list of plot points that follow the path.
	"""
	if any(command.is_relative for command in commands):
		logger.warning("Path contains relative commands. Convert it to absolute coordinates before flattening.")
		return []

	result = []
	state = FlattenState()
	for command in commands:
		letter = command.letter
		if letter != "C" and letter != "S":
			state.previous_control_c = None
		if letter != "Q" and letter != "T":
			state.previous_control_q = None
		handler = _handlers.get(letter)
		if handler is None:
			continue
		handler(command.parameters, state, result, curve_vertex_count)
	return result

def _move(parameters, state, result, curve_vertex_count) -> None:
	state.cursor = (parameters[0], parameters[1])
	result.append(PlotPoint.PlotPoint(parameters[0], parameters[1], PlotPoint.PenState.up))

def _line(parameters, state, result, curve_vertex_count) -> None:
	state.cursor = (parameters[0], parameters[1])
	result.append(PlotPoint.PlotPoint(parameters[0], parameters[1], PlotPoint.PenState.down))

def _horizontal(parameters, state, result, curve_vertex_count) -> None:
	state.cursor = (parameters[0], state.cursor[1])
	result.append(PlotPoint.PlotPoint(state.cursor[0], state.cursor[1], PlotPoint.PenState.down))

def _vertical(parameters, state, result, curve_vertex_count) -> None:
	state.cursor = (state.cursor[0], parameters[0])
	result.append(PlotPoint.PlotPoint(state.cursor[0], state.cursor[1], PlotPoint.PenState.down))

def _draw(points, end, state, result) -> None:
	for x, y in points:
		result.append(PlotPoint.PlotPoint(x, y, PlotPoint.PenState.down))
	state.cursor = end

def _cubic(parameters, state, result, curve_vertex_count) -> None:
	handle1 = (parameters[0], parameters[1])
	handle2 = (parameters[2], parameters[3])
	end = (parameters[4], parameters[5])
	_draw(Geometry.cubic_bezier_points(state.cursor, handle1, handle2, end, curve_vertex_count), end, state, result)
	state.previous_control_c = handle2

def _smooth_cubic(parameters, state, result, curve_vertex_count) -> None:
	x, y = state.cursor
	previous_x, previous_y = state.previous_control_c if state.previous_control_c is not None else state.cursor
	handle1 = (x + (x - previous_x), y + (y - previous_y)) #Mirror the handle around the current position.
	handle2 = (parameters[0], parameters[1])
	end = (parameters[2], parameters[3])
	_draw(Geometry.cubic_bezier_points(state.cursor, handle1, handle2, end, curve_vertex_count), end, state, result)
	state.previous_control_c = handle2

def _quadratic(parameters, state, result, curve_vertex_count) -> None:
	handle = (parameters[0], parameters[1])
	end = (parameters[2], parameters[3])
	_draw(Geometry.quadratic_bezier_points(state.cursor, handle, end, curve_vertex_count), end, state, result)
	state.previous_control_q = handle

def _smooth_quadratic(parameters, state, result, curve_vertex_count) -> None:
	x, y = state.cursor
	previous_x, previous_y = state.previous_control_q if state.previous_control_q is not None else state.cursor
	handle = (x + (x - previous_x), y + (y - previous_y)) #Mirror the handle around the current position.
	end = (parameters[0], parameters[1])
	_draw(Geometry.quadratic_bezier_points(state.cursor, handle, end, curve_vertex_count), end, state, result)
	state.previous_control_q = handle

def arc_sweep(start_angle, end_angle, large_arc, sweep_flag) -> float:
	"""
	Computes how far to go around an ellipse to follow an arc.
	:param start_angle: The angle of the start of the arc, in radians.
	:param end_angle: The angle of the end of the arc, in radians.
	:param large_arc: Whether the arc should be the longer way around.
	:param sweep_flag: Whether the arc goes towards increasing angles.
	:return: The signed sweep angle, in radians. Zero if the endpoints are at
	the same angle.
	"""
	difference = end_angle - start_angle
	if difference > math.pi: #Normalise to the short way around first.
		difference -= 2 * math.pi
	elif difference <= -math.pi:
		difference += 2 * math.pi
	if difference == 0:
		return 0.0
	if large_arc and abs(difference) < math.pi: #Need the long way around instead.
		difference += -2 * math.pi if difference > 0 else 2 * math.pi
	if sweep_flag and difference < 0:
		difference += 2 * math.pi
	elif not sweep_flag and difference > 0:
		difference -= 2 * math.pi
	return difference

def _arc(parameters, state, result, curve_vertex_count) -> None:
	start = state.cursor
	end = (parameters[5], parameters[6])
	rotation = math.radians(parameters[2])
	large_arc = parameters[3] != 0
	sweep_flag = parameters[4] != 0
	rx, ry = Geometry.correct_arc_radii(parameters[0], parameters[1], rotation, start, end)
	centre = Geometry.arc_centre(rx, ry, rotation, start, end, large_arc != sweep_flag)
	if centre is not None:
		start_angle = Geometry.ellipse_angle(centre, rx, ry, rotation, start)
		end_angle = Geometry.ellipse_angle(centre, rx, ry, rotation, end)
		sweep = arc_sweep(start_angle, end_angle, large_arc, sweep_flag)
		if sweep != 0:
			for x, y in Geometry.ellipse_vertices(centre, rx, ry, rotation, curve_vertex_count, start_angle, sweep):
				result.append(PlotPoint.PlotPoint(x, y, PlotPoint.PenState.down))
	#Always end exactly on the endpoint, even if the arc couldn't be drawn.
	state.cursor = end
	result.append(PlotPoint.PlotPoint(end[0], end[1], PlotPoint.PenState.down))

def _close(parameters, state, result, curve_vertex_count) -> None:
	if not result:
		return
	first = result[0]
	state.cursor = (first.x, first.y)
	result.append(PlotPoint.PlotPoint(first.x, first.y, PlotPoint.PenState.down))

_handlers = {
	"A": _arc,
	"C": _cubic,
	"H": _horizontal,
	"L": _line,
	"M": _move,
	"Q": _quadratic,
	"S": _smooth_cubic,
	"T": _smooth_quadratic,
	"V": _vertical,
	"Z": _close
}
