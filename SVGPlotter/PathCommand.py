#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

arity = { #How many parameters each command of the D attribute of a path takes.
	"A": 7, #rx, ry, rotation, large arc flag, sweep flag, x, y
	"C": 6, #x1, y1, x2, y2, x, y
	"H": 1, #x
	"L": 2, #x, y
	"M": 2, #x, y
	"Q": 4, #x1, y1, x, y
	"S": 4, #x2, y2, x, y
	"T": 2, #x, y
	"V": 1, #y
	"Z": 0
}

class PathCommand:
	"""
	Data structure that represents one command in the D attribute of a path.

	Upper case letters use absolute coordinates, lower case letters are
	relative to the end of the previous command.
	"""

	def __init__(self, letter, parameters=None):
		"""
		Initialises defaults for all fields.
		:param letter: The command letter, e.g. "M" or "c".
		:param parameters: The numbers that follow the command letter.
		"""
		self.letter = letter
		self.parameters = list(parameters) if parameters is not None else []

	@property
	def arity(self) -> int:
		return arity[self.letter.upper()]

	@property
	def is_relative(self) -> bool:
		return self.letter.islower()

	@property
	def is_complete(self) -> bool:
		return len(self.parameters) == self.arity

	def copy(self) -> "PathCommand":
		return PathCommand(self.letter, self.parameters)

	def __eq__(self, other) -> bool:
		if not isinstance(other, PathCommand):
			return NotImplemented
		return self.letter == other.letter and self.parameters == other.parameters

	def __repr__(self) -> str:
		return "{letter}{parameters}".format(letter=self.letter, parameters=self.parameters)
