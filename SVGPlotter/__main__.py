#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import argparse #To parse the command line.
import logging
import sys #To write the output and exit with a status code.
import xml.etree.ElementTree #To catch parse errors.

from . import Configuration
from . import Parser
from . import PlotPoint
from . import WriteGCode

logger = logging.getLogger("SVGPlotter")

def format_plot_points(plot_points) -> str:
	"""
	Lists the plot points in a human-readable form.
	:param plot_points: The points to list.
	:return: One line per point, with the pen state.
	"""
	lines = []
	for point in plot_points:
		action = "Move To" if point.pen_state == PlotPoint.PenState.up else "Line To"
		lines.append("{action} ({x:.4f}, {y:.4f})".format(action=action, x=point.x, y=point.y))
	return "\n".join(lines) + "\n" if lines else ""

def create_argument_parser() -> argparse.ArgumentParser:
	argument_parser = argparse.ArgumentParser(prog="SVGPlotter", description="Convert an SVG document into a plotter toolpath.")
	argument_parser.add_argument("file", help="The SVG file to convert.")
	argument_parser.add_argument("--curve-vertices", type=int, default=50, help="How many vertices to generate for each curve (default: %(default)s).")
	argument_parser.add_argument("--unit", default="px", help="The length unit to plot in, e.g. px or mm (default: %(default)s).")
	argument_parser.add_argument("--gcode", action="store_true", help="Write g-code instead of a list of moves.")
	argument_parser.add_argument("--output", help="The file to write to. Standard output if omitted.")
	argument_parser.add_argument("--verbose", action="store_true", help="Log debug information.")
	return argument_parser

def main(argv=None) -> int:
	"""
	Runs the command line interface.
	:param argv: The command line arguments, without the program name. If
	``None``, the arguments of the process are used.
	:return: The exit status.
	"""
	arguments = create_argument_parser().parse_args(argv)
	logging.basicConfig(level=logging.DEBUG if arguments.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

	try:
		configuration = Configuration.Configuration(curve_vertex_count=arguments.curve_vertices, system_unit=arguments.unit)
	except ValueError as e:
		logger.error(str(e))
		return 1
	try:
		image = Parser.Parser(configuration).parse_file(arguments.file)
	except (OSError, xml.etree.ElementTree.ParseError) as e:
		logger.error("Unable to read {file}: {error}".format(file=arguments.file, error=e))
		return 1

	if arguments.gcode:
		result = WriteGCode.write_gcode(configuration, image.plot_points)
	else:
		result = format_plot_points(image.plot_points)
	if arguments.output:
		with open(arguments.output, "w") as f:
			f.write(result)
	else:
		sys.stdout.write(result)
	return 0

if __name__ == "__main__":
	sys.exit(main())
