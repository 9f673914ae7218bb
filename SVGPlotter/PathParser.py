#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import enum
import logging
import re #Tokenising the D attribute.
import typing

from . import PathCommand

logger = logging.getLogger(__name__)

_token = re.compile(r"(?P<letter>[AaCcHhLlMmQqSsTtVvZz])|(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")

class _State(enum.Enum):
	awaiting_command = 0 #After a Z, or at the very start.
	awaiting_parameter = 1 #Collecting numbers for the current command.

def _successor(letter) -> str:
	"""
	Gets the command that is implied by extra parameters after a command.

	Coordinates after a move are lines, in the same absolute or relative mode.
	Any other command simply repeats.
	"""
	if letter == "M":
		return "L"
	if letter == "m":
		return "l"
	return letter

def parse(d) -> typing.List[PathCommand.PathCommand]:
	"""
	Parses the D attribute of a path into a list of commands.

	Anything that is not a command letter or a number is skipped. If there
	are more numbers than the current command takes, the command is repeated
	(or for moves, continued with lines). A path starting with numbers gets an
	implicit relative move. Commands that end up with too few parameters are
	dropped.
	:param d: The D attribute of a path.
	:return: A list of commands with their raw (possibly relative) parameters.
	"""
	result = []
	state = _State.awaiting_command
	command = None
	for match in _token.finditer(d or ""):
		letter = match.group("letter")
		if letter is not None:
			command = PathCommand.PathCommand(letter)
			result.append(command)
			state = _State.awaiting_command if command.arity == 0 else _State.awaiting_parameter
			continue

		number = float(match.group("number"))
		if state == _State.awaiting_command:
			if command is not None: #Numbers after a Z.
				logger.warning("Ignoring parameter {number} after close path command.".format(number=match.group("number")))
				continue
			command = PathCommand.PathCommand("m") #Bare leading coordinates are an implicit move.
			result.append(command)
			state = _State.awaiting_parameter
		elif len(command.parameters) >= command.arity:
			command = PathCommand.PathCommand(_successor(command.letter))
			result.append(command)
		command.parameters.append(number)

	complete = []
	for command in result:
		if not command.is_complete:
			logger.warning("Path command {letter} needs {arity} parameters, but got {count}. Skipping it.".format(letter=command.letter, arity=command.arity, count=len(command.parameters)))
			continue
		complete.append(command)
	return complete
