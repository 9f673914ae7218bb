#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import time #To get today's date for the g-code headers.

from . import PlotPoint #To differentiate between the pen states.

_unit_commands = {
	"mm": "G21",
	"in": "G20"
}
"""
The g-code commands that put the plotter in the unit of the coordinates. Other
units have no g-code command.
"""

def write_gcode(configuration, plot_points) -> str:
	"""
	Converts a sequence of plot points into g-code for a pen plotter.

	The pen is lifted to travel to points with the pen up, and lowered to draw
	towards points with the pen down.
	:param configuration: The settings to plot with.
	:param plot_points: The sequence of plot points to write.
	:return: A g-code string that would plot the points.
	"""
	if plot_points:
		min_x = min(point.x for point in plot_points)
		max_x = max(point.x for point in plot_points)
		min_y = min(point.y for point in plot_points)
		max_y = max(point.y for point in plot_points)
	else:
		min_x = max_x = min_y = max_y = 0

	gcodes = [get_start_gcode(configuration, min_x, min_y, max_x, max_y)]
	x = 0
	y = 0
	is_down = False
	travel_feedrate = "F{f:.6f}".format(f=configuration.travel_speed)
	draw_feedrate = "F{f:.6f}".format(f=configuration.draw_speed)
	for point in plot_points:
		#Since SVG has positive Y going down but g-code has positive Y going up, we need to invert the Y axis.
		point_x = point.x
		point_y = max_y - point.y + min_y
		if point.pen_state == PlotPoint.PenState.up:
			if is_down:
				gcodes.append("G0 Z{z:.6f}".format(z=configuration.pen_up_height))
				is_down = False
			if point_x == x and point_y == y:
				continue #Travel move wouldn't have any effect.
			gcodes.append(_move("G0", x, y, point_x, point_y, travel_feedrate))
		else:
			if not is_down:
				gcodes.append("G1 Z{z:.6f}".format(z=configuration.pen_down_height))
				is_down = True
			if point_x == x and point_y == y:
				continue
			gcodes.append(_move("G1", x, y, point_x, point_y, draw_feedrate))
		x = point_x
		y = point_y

	gcodes.append("G0 Z{z:.6f}".format(z=configuration.pen_up_height)) #Lift the pen and go home.
	gcodes.append("G0 X0 Y0 {feedrate}".format(feedrate=travel_feedrate))
	return "\n".join(gcodes) + "\n"

def _move(command, x, y, target_x, target_y, feedrate) -> str:
	gcode = command
	if target_x != x:
		gcode += " X{x:.6f}".format(x=target_x)
	if target_y != y:
		gcode += " Y{y:.6f}".format(y=target_y)
	return gcode + " " + feedrate

def get_start_gcode(configuration, min_x, min_y, max_x, max_y) -> str:
	"""
	Returns the starting g-code for the plotter.

	This includes a header describing the plot, and the commands to put the
	plotter in a known state.
	:param configuration: The settings to plot with.
	:param min_x: The minimum X coordinate that we're moving to.
	:param min_y: The minimum Y coordinate that we're moving to.
	:param max_x: The maximum X coordinate that we're moving to.
	:param max_y: The maximum Y coordinate that we're moving to.
	:return: The starting g-code.
	"""
	result = """;GENERATOR.NAME:SVGPlotter
;GENERATOR.BUILD_DATE:{today}
;PRINT.SIZE.MIN.X:{min_x}
;PRINT.SIZE.MIN.Y:{min_y}
;PRINT.SIZE.MAX.X:{max_x}
;PRINT.SIZE.MAX.Y:{max_y}
;UNIT:{unit}
""".format(today=time.strftime("%Y-%m-%d"),
           min_x=min_x,
           min_y=min_y,
           max_x=max_x,
           max_y=max_y,
           unit=configuration.system_unit)
	unit_command = _unit_commands.get(configuration.system_unit.lower())
	if unit_command is not None:
		result += unit_command + "\n"
	else:
		result += ";Coordinates are in {unit}, which the plotter has no unit for.\n".format(unit=configuration.system_unit)
	result += "G90\n" #Absolute positioning.
	result += "G0 Z{z:.6f}".format(z=configuration.pen_up_height) #Start with the pen up.
	return result
