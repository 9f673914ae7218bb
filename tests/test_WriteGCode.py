#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""Tests for writing plot points as g-code."""

from SVGPlotter import Configuration
from SVGPlotter import PlotPoint
from SVGPlotter import WriteGCode

def lines(configuration, plot_points):
	return WriteGCode.write_gcode(configuration, plot_points).splitlines()

def test_header(configuration):
	gcode = lines(configuration, [])
	assert "G21" not in gcode #Pixels are not millimetres.
	assert ";Coordinates are in px, which the plotter has no unit for." in gcode
	assert "G90" in gcode
	assert ";GENERATOR.NAME:SVGPlotter" in gcode
	assert gcode[-2:] == ["G0 Z5.000000", "G0 X0 Y0 F3000.000000"]

def test_drawing(configuration):
	"""Y is inverted, so the top of the image ends up at the far side of the plotter."""
	gcode = lines(configuration, [
		PlotPoint.PlotPoint(0, 10, PlotPoint.PenState.up),
		PlotPoint.PlotPoint(10, 10, PlotPoint.PenState.down),
		PlotPoint.PlotPoint(10, 0, PlotPoint.PenState.down)
	])
	body = gcode[gcode.index("G90") + 2:]
	assert body == [
		"G1 Z0.000000",
		"G1 X10.000000 F1200.000000",
		"G1 Y10.000000 F1200.000000",
		"G0 Z5.000000",
		"G0 X0 Y0 F3000.000000"
	]

def test_travel_lifts_pen(configuration):
	gcode = lines(configuration, [
		PlotPoint.PlotPoint(5, 5, PlotPoint.PenState.down),
		PlotPoint.PlotPoint(8, 5, PlotPoint.PenState.up),
		PlotPoint.PlotPoint(8, 5, PlotPoint.PenState.down)
	])
	body = gcode[gcode.index("G90") + 2:]
	assert body == [
		"G1 Z0.000000",
		"G1 X5.000000 Y5.000000 F1200.000000",
		"G0 Z5.000000",
		"G0 X8.000000 F3000.000000",
		"G1 Z0.000000",
		"G0 Z5.000000",
		"G0 X0 Y0 F3000.000000"
	]

def test_millimetres():
	gcode = lines(Configuration.Configuration(system_unit="mm"), [])
	assert "G21" in gcode
	assert "G20" not in gcode

def test_inches():
	gcode = lines(Configuration.Configuration(system_unit="IN"), [])
	assert "G20" in gcode
	assert "G21" not in gcode
