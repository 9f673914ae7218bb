#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import typing

from . import PathCommand

_coordinate_indices = { #For each command, which parameters are X coordinates and which are Y coordinates.
	"A": ((5,), (6,)), #The radii, rotation and flags are not coordinates.
	"C": ((0, 2, 4), (1, 3, 5)),
	"H": ((0,), ()),
	"L": ((0,), (1,)),
	"M": ((0,), (1,)),
	"Q": ((0, 2), (1, 3)),
	"S": ((0, 2), (1, 3)),
	"T": ((0,), (1,)),
	"V": ((), (0,)),
	"Z": ((), ())
}

def convert_to_absolute(commands, location=(0, 0)) -> typing.List[PathCommand.PathCommand]:
	"""
	Rewrites a list of path commands so that they all use absolute
	coordinates.

	The first command is always taken as absolute if it's a move, regardless
	of where the pen was. The original commands are not modified.
	:param commands: The commands of a path, as parsed.
	:param location: The position of the pen before the path starts.
	:return: A new list of commands, with only upper case letters.
	"""
	x, y = location
	result = []
	for index, original in enumerate(commands):
		command = original.copy()
		result.append(command)
		if index == 0 and command.letter == "m":
			command.letter = "M"

		x_indices, y_indices = _coordinate_indices[command.letter.upper()]
		if command.is_relative:
			for x_index in x_indices:
				command.parameters[x_index] += x
			for y_index in y_indices:
				command.parameters[y_index] += y
			command.letter = command.letter.upper()

		#Move the cursor to the end of the command.
		if x_indices:
			x = command.parameters[x_indices[-1]]
		if y_indices:
			y = command.parameters[y_indices[-1]]
	return result
