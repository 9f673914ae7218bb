#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""Tests for composing and applying transformations."""

import math

import pytest

from SVGPlotter import PlotPoint
from SVGPlotter import Transform
from tests.conftest import find, parse

def transform(image, document, point, anchor=(0, 0), node_type="rect"):
	"""Transforms a single point as if it belonged to the first element of a type."""
	points = [PlotPoint.PlotPoint(point[0], point[1])]
	Transform.apply_transforms(image, find(document, node_type), anchor, points)
	return points[0].position

class TestFunctions:
	def test_translate(self, image):
		assert transform(image, parse('<rect transform="translate(10, 5)"/>'), (1, 1)) == pytest.approx((11, 6))

	def test_translate_single_parameter_moves_both_axes(self, image):
		assert transform(image, parse('<rect transform="translate(10)"/>'), (0, 0)) == pytest.approx((10, 10))

	def test_translate_ignores_anchor(self, image):
		assert transform(image, parse('<rect transform="translate(10)"/>'), (0, 0), anchor=(50, 50)) == pytest.approx((10, 10))

	def test_scale_around_anchor(self, image):
		assert transform(image, parse('<rect transform="scale(2)"/>'), (6, 5), anchor=(5, 5)) == pytest.approx((7, 5))
		assert transform(image, parse('<rect transform="scale(2, 3)"/>'), (6, 6), anchor=(5, 5)) == pytest.approx((7, 8))

	def test_rotate_around_anchor(self, image):
		assert transform(image, parse('<rect transform="rotate(90)"/>'), (1, 0)) == pytest.approx((0, 1))
		assert transform(image, parse('<rect transform="rotate(90)"/>'), (11, 0), anchor=(10, 0)) == pytest.approx((10, 1))

	def test_rotate_around_given_centre(self, image):
		assert transform(image, parse('<rect transform="rotate(90, 10, 0)"/>'), (11, 0), anchor=(100, 100)) == pytest.approx((10, 1))

	def test_rotate_with_unit(self, image):
		assert transform(image, parse('<rect transform="rotate(0.5turn)"/>'), (1, 0)) == pytest.approx((-1, 0))

	def test_skew(self, image):
		assert transform(image, parse('<rect transform="skew(45, 0)"/>'), (0, 1)) == pytest.approx((1, 1))
		assert transform(image, parse('<rect transform="skew(45)"/>'), (1, 0)) == pytest.approx((1, 1))

	def test_matrix(self, image):
		assert transform(image, parse('<rect transform="matrix(1, 0, 0, 1, 5, 6)"/>'), (0, 0)) == pytest.approx((5, 6))
		assert transform(image, parse('<rect transform="matrix(0 1 -1 0 0 0)"/>'), (1, 0)) == pytest.approx((0, 1))

	def test_lengths_in_system_unit(self, image):
		image.system_unit = "mm"
		assert transform(image, parse('<rect transform="translate(1in, 0)"/>'), (0, 0)) == pytest.approx((25.4, 0), rel=1e-3)

class TestComposition:
	def test_functions_apply_in_order(self, image):
		assert transform(image, parse('<rect transform="translate(10, 0) scale(2)"/>'), (1, 0)) == pytest.approx((22, 0))

	def test_ancestors_apply_first(self, image):
		document = parse('<svg><g transform="translate(10, 0)"><rect transform="scale(2)"/></g></svg>')
		assert transform(image, document, (1, 0)) == pytest.approx((22, 0))

	def test_collect_transforms(self):
		document = parse('<svg transform="scale(2)"><g><rect style="transform: rotate(5)"/></g></svg>')
		transforms = [transform for transform, owner in Transform.collect_transforms(find(document, "rect"))]
		assert transforms == ["scale(2)", "rotate(5)"]

	def test_parameters_do_not_leak(self, image):
		functions = Transform.parse_functions(image, "rotate(90, 1, 2) scale(3)")
		assert functions[0].parameters == pytest.approx([math.pi / 2, 1, 2])
		assert functions[1].parameters == [3]

class TestInvalid:
	def test_unknown_function_is_ignored(self, image, caplog):
		assert transform(image, parse('<rect transform="perspective(10) translate(1, 1)"/>'), (0, 0)) == pytest.approx((1, 1))
		assert "Unsupported transformation function" in caplog.text

	def test_wrong_parameter_count_is_ignored(self, image, caplog):
		assert transform(image, parse('<rect transform="matrix(1, 2)"/>'), (3, 4)) == pytest.approx((3, 4))
		assert "Wrong number of parameters" in caplog.text

	def test_none(self, image, caplog):
		assert transform(image, parse('<rect transform="none"/>'), (3, 4)) == pytest.approx((3, 4))
		assert caplog.text == ""

	def test_ill_formed(self, image, caplog):
		assert transform(image, parse('<rect transform="translate(1, 1) bogus"/>'), (0, 0)) == pytest.approx((1, 1))
		assert "Ill-formed transformation" in caplog.text
