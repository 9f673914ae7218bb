#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""Tests for the table-driven unit converter."""

import math

import pytest

from SVGPlotter import Units

converter = Units.default_converter

class TestDomains:
	def test_find_domain(self):
		assert converter.find_domain("mm").name == "Length"
		assert converter.find_domain("deg").name == "Angle"
		assert converter.find_domain("furlong") is None
		assert converter.find_domain("") is None

	def test_case_insensitive(self):
		assert converter.find_unit("MM").name == "mm"
		assert converter.find_unit("Q").name == "q"
		assert "PX" in converter.find_domain("px")

	def test_aliases(self):
		assert converter.find_unit("degrees").name == "deg"
		assert converter.convert(1, "turns", "deg") == pytest.approx(360)

	def test_context_dependent_units(self):
		assert converter.find_unit("rem").context == "FontSize"
		assert converter.find_unit("vmin").context == "ViewSize"
		assert converter.find_unit("cm").context is None

class TestConvert:
	def test_lengths(self):
		assert converter.convert(1, "in", "px") == pytest.approx(96)
		assert converter.convert(96, "px", "in") == pytest.approx(1)
		assert converter.convert(1, "pc", "px") == pytest.approx(16)
		assert converter.convert(4, "Q", "mm") == pytest.approx(1)
		assert converter.convert(1, "cm", "mm") == pytest.approx(10)

	def test_angles(self):
		assert converter.convert(180, "deg", "turn") == pytest.approx(0.5)
		assert converter.convert(1, "turn", "rad") == pytest.approx(2 * math.pi)
		assert converter.convert(100, "grad", "deg") == pytest.approx(90)

	def test_unknown_unit_is_unchanged(self):
		assert converter.convert(5, "furlong", "px") == 5
		assert converter.convert(5, "px", "furlong") == 5

	def test_different_domains_are_unchanged(self):
		assert converter.convert(5, "deg", "px") == 5

	def test_factor_override(self):
		"""Overrides apply to one conversion only."""
		assert converter.convert(2, "em", "px", {"em": 10}) == pytest.approx(20)
		assert converter.convert(1, "em", "px") == pytest.approx(15.9996)

	def test_custom_domain(self):
		custom = Units.UnitConverter([Units.UnitDomain("Time", "s", [
			Units.UnitDefinition("s", 1.0, ("seconds",), None),
			Units.UnitDefinition("min", 60.0, ("minutes",), None)
		])])
		assert custom.convert(2, "minutes", "s") == pytest.approx(120)
