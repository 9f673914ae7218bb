#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""
Primitive 2D geometry used by the path compiler.

Points are plain ``(x, y)`` tuples. Transformations are 3x3 affine matrices
in Numpy, the same way the transformation attribute of an element was always
turned into a matrix.
"""

import math #Angles and square roots.
import numpy #Transformation matrices and curve sampling.
import typing

Point = typing.Tuple[float, float]

_samples_per_vertex = 16 #How densely to sample a curve before redistributing the vertices along its length.
_degenerate_length = 1e-9 #Curves shorter than this are considered to be a single point.

def distance(point1, point2) -> float:
	return math.hypot(point2[0] - point1[0], point2[1] - point1[1])

def line_angle(centre, point) -> float:
	"""
	Gets the angle of the line from a centre to a point.
	:param centre: The start of the line.
	:param point: The end of the line.
	:return: The angle in radians, from -pi to pi, measured from the positive X
	axis towards the positive Y axis.
	"""
	return math.atan2(point[1] - centre[1], point[0] - centre[0])

def centroid(points) -> Point:
	"""
	Gets the average position of a list of points.

	If there are no points, the origin is returned.
	:param points: The points to average.
	:return: The average X and Y coordinates.
	"""
	if not points:
		return 0.0, 0.0
	array = numpy.array(points, dtype=float)
	mean = array.mean(axis=0)
	return float(mean[0]), float(mean[1])

def closest_point_index(location, points) -> int:
	"""
	Finds the point that is closest to a certain location.

	When multiple points are equally close, the first one is chosen.
	:param location: The location to measure the distance from.
	:param points: A list of points to choose from.
	:return: The index of the closest point, or -1 if there are no points.
	"""
	if not points:
		return -1
	array = numpy.array(points, dtype=float)
	distances = numpy.hypot(array[:, 0] - location[0], array[:, 1] - location[1])
	return int(numpy.argmin(distances))

def identity() -> numpy.ndarray:
	return numpy.identity(3)

def translation_matrix(dx, dy) -> numpy.ndarray:
	return numpy.array(((1, 0, dx), (0, 1, dy), (0, 0, 1)), dtype=float)

def scale_matrix(sx, sy) -> numpy.ndarray:
	return numpy.array(((sx, 0, 0), (0, sy, 0), (0, 0, 1)), dtype=float)

def rotation_matrix(angle) -> numpy.ndarray:
	"""
	Creates a matrix that rotates around the origin.
	:param angle: The angle to rotate by, in radians. Positive angles rotate
	from the positive X axis towards the positive Y axis.
	:return: A 3x3 affine transformation matrix.
	"""
	cos_angle = math.cos(angle)
	sin_angle = math.sin(angle)
	return numpy.array(((cos_angle, -sin_angle, 0), (sin_angle, cos_angle, 0), (0, 0, 1)), dtype=float)

def linear_matrix(a, b, c, d, tx=0, ty=0) -> numpy.ndarray:
	"""
	Creates an affine matrix from the six numbers of a 2D matrix.

	The numbers are in the order of the CSS ``matrix()`` function, so the
	linear part is ``((a, c), (b, d))`` and the translation is ``(tx, ty)``.
	"""
	return numpy.array(((a, c, tx), (b, d, ty), (0, 0, 1)), dtype=float)

def about(matrix, anchor) -> numpy.ndarray:
	"""
	Makes a transformation act around an anchor point rather than the origin.
	:param matrix: The transformation to anchor.
	:param anchor: The point that should stay in place.
	:return: A matrix that moves the anchor to the origin, applies the
	transformation, and moves the anchor back.
	"""
	return numpy.matmul(translation_matrix(anchor[0], anchor[1]), numpy.matmul(matrix, translation_matrix(-anchor[0], -anchor[1])))

def apply_transformation(points, transformation) -> numpy.ndarray:
	"""
	Apply a transformation matrix on a list of coordinates.
	:param points: A list of X,Y pairs.
	:param transformation: A 3x3 affine transformation matrix.
	:return: An Nx2 array with the transformed coordinates.
	"""
	array = numpy.array(points, dtype=float).reshape((-1, 2))
	homogeneous = numpy.hstack((array, numpy.ones((array.shape[0], 1))))
	return numpy.matmul(homogeneous, transformation.T)[:, :2]

def ellipse_vertices(centre, rx, ry, rotation, count, start_angle=0.0, sweep_angle=2 * math.pi) -> typing.List[Point]:
	"""
	Samples points along the edge of an ellipse.

	For a full ellipse, the points are evenly spaced in angle and the starting
	point is not repeated at the end. For a partial arc, both the starting and
	the ending point of the arc are included.
	:param centre: The centre of the ellipse.
	:param rx: The radius along the (unrotated) X axis.
	:param ry: The radius along the (unrotated) Y axis.
	:param rotation: The rotation of the ellipse in radians.
	:param count: How many points to generate.
	:param start_angle: The parametric angle to start at, in radians.
	:param sweep_angle: How far to go around, in radians. Negative values go
	around in the other direction.
	:return: A list of points on the ellipse.
	"""
	if count <= 0:
		return []
	if count == 1:
		angles = numpy.array([start_angle])
	else:
		full_turn = abs(sweep_angle) >= 2 * math.pi
		angles = numpy.linspace(start_angle, start_angle + sweep_angle, count, endpoint=not full_turn)
	x = numpy.cos(angles) * rx
	y = numpy.sin(angles) * ry
	cos_rotation = math.cos(rotation)
	sin_rotation = math.sin(rotation)
	result_x = cos_rotation * x - sin_rotation * y + centre[0]
	result_y = sin_rotation * x + cos_rotation * y + centre[1]
	return list(zip(result_x.tolist(), result_y.tolist()))

def ellipse_angle(centre, rx, ry, rotation, point) -> float:
	"""
	Gets the parametric angle of a point on an ellipse.

	The point is moved into the frame of an unrotated unit circle first, so
	that the angle can be fed back into ``ellipse_vertices``.
	:param centre: The centre of the ellipse.
	:param rx: The radius along the (unrotated) X axis.
	:param ry: The radius along the (unrotated) Y axis.
	:param rotation: The rotation of the ellipse in radians.
	:param point: A point on the ellipse.
	:return: The angle in radians.
	"""
	dx = point[0] - centre[0]
	dy = point[1] - centre[1]
	cos_rotation = math.cos(rotation)
	sin_rotation = math.sin(rotation)
	local_x = (cos_rotation * dx + sin_rotation * dy) / rx
	local_y = (-sin_rotation * dx + cos_rotation * dy) / ry
	return line_angle((0, 0), (local_x, local_y))

def correct_arc_radii(rx, ry, rotation, start, end) -> typing.Tuple[float, float]:
	"""
	Scales up the radii of an arc if they are too small to span its endpoints.

	Implementation of https://www.w3.org/TR/SVG/implnote.html#ArcCorrectionOutOfRangeRadii
	:param rx: The X radius of the ellipse.
	:param ry: The Y radius of the ellipse.
	:param rotation: The rotation of the ellipse in radians.
	:param start: The start of the arc.
	:param end: The end of the arc.
	:return: The corrected (positive) X and Y radii.
	"""
	rx = abs(rx)
	ry = abs(ry)
	if rx == 0 or ry == 0:
		return rx, ry
	x1, y1 = _arc_midpoint_offset(rotation, start, end)
	lambda_multiplier = (x1 * x1) / (rx * rx) + (y1 * y1) / (ry * ry)
	if lambda_multiplier > 1:
		rx *= math.sqrt(lambda_multiplier)
		ry *= math.sqrt(lambda_multiplier)
	return rx, ry

def arc_centre(rx, ry, rotation, start, end, use_complement_arc) -> typing.Optional[Point]:
	"""
	Finds the centre of the ellipse that an endpoint-parameterised arc is on.

	Implementation of https://www.w3.org/TR/SVG/implnote.html#ArcConversionEndpointToCenter
	There are two ellipses with the given radii that pass through both points.
	Which one is chosen depends on the flags of the arc.
	:param rx: The X radius of the ellipse. Must be large enough to span the
	endpoints (see ``correct_arc_radii``).
	:param ry: The Y radius of the ellipse.
	:param rotation: The rotation of the ellipse in radians.
	:param start: The start of the arc.
	:param end: The end of the arc.
	:param use_complement_arc: Whether to take the centre on the other side of
	the chord. This is the case when the large-arc flag and the sweep flag of
	the arc differ.
	:return: The centre of the ellipse, or ``None`` if there is no ellipse
	(zero radius, or coinciding endpoints).
	"""
	rx = abs(rx)
	ry = abs(ry)
	if rx == 0 or ry == 0:
		return None
	if start[0] == end[0] and start[1] == end[1]:
		return None
	x1, y1 = _arc_midpoint_offset(rotation, start, end)
	sum_squares = rx * rx * y1 * y1 + ry * ry * x1 * x1
	if sum_squares == 0:
		return None
	coefficient = math.sqrt(max(0.0, (rx * rx * ry * ry - sum_squares) / sum_squares))
	if not use_complement_arc:
		coefficient = -coefficient
	cx_original = coefficient * rx * y1 / ry
	cy_original = -coefficient * ry * x1 / rx
	cos_rotation = math.cos(rotation)
	sin_rotation = math.sin(rotation)
	cx = cos_rotation * cx_original - sin_rotation * cy_original + (start[0] + end[0]) / 2.0
	cy = sin_rotation * cx_original + cos_rotation * cy_original + (start[1] + end[1]) / 2.0
	return cx, cy

def _arc_midpoint_offset(rotation, start, end) -> Point:
	cos_rotation = math.cos(rotation)
	sin_rotation = math.sin(rotation)
	half_dx = (start[0] - end[0]) / 2.0
	half_dy = (start[1] - end[1]) / 2.0
	return cos_rotation * half_dx + sin_rotation * half_dy, -sin_rotation * half_dx + cos_rotation * half_dy

def cubic_bezier_points(start, handle1, handle2, end, count) -> typing.List[Point]:
	"""
	Samples points along a cubic Bézier curve at equal distances along the
	curve.

	The first point is the start of the curve and the last point is the end.
	:param start: Where the curve starts.
	:param handle1: The first control point.
	:param handle2: The second control point.
	:param end: Where the curve ends.
	:param count: How many points to generate.
	:return: A list of points along the curve.
	"""
	control = numpy.array((start, handle1, handle2, end), dtype=float)
	def evaluate(p):
		p = p[:, numpy.newaxis]
		q = 1 - p
		return q * q * q * control[0] + 3 * q * q * p * control[1] + 3 * q * p * p * control[2] + p * p * p * control[3]
	return _equidistant(evaluate, count)

def quadratic_bezier_points(start, handle, end, count) -> typing.List[Point]:
	"""
	Samples points along a quadratic Bézier curve at equal distances along the
	curve.

	The first point is the start of the curve and the last point is the end.
	:param start: Where the curve starts.
	:param handle: The control point.
	:param end: Where the curve ends.
	:param count: How many points to generate.
	:return: A list of points along the curve.
	"""
	control = numpy.array((start, handle, end), dtype=float)
	def evaluate(p):
		p = p[:, numpy.newaxis]
		q = 1 - p
		return q * q * control[0] + 2 * q * p * control[1] + p * p * control[2]
	return _equidistant(evaluate, count)

def _equidistant(evaluate, count) -> typing.List[Point]:
	"""
	Redistributes samples of a parametric curve to be equally far apart along
	the curve.
	:param evaluate: A function that takes an array of parameters between 0
	and 1 and returns an Nx2 array of positions.
	:param count: How many points to generate.
	:return: A list of points along the curve, including both ends.
	"""
	if count <= 0:
		return []
	if count == 1:
		end = evaluate(numpy.array([1.0]))[0]
		return [(float(end[0]), float(end[1]))]
	parameters = numpy.linspace(0, 1, max(count * _samples_per_vertex, 2))
	dense = evaluate(parameters)
	segment_lengths = numpy.hypot(numpy.diff(dense[:, 0]), numpy.diff(dense[:, 1]))
	cumulative = numpy.concatenate(([0.0], numpy.cumsum(segment_lengths)))
	if cumulative[-1] < _degenerate_length: #Degenerate curve. All points are the same.
		start = dense[0]
		return [(float(start[0]), float(start[1]))] * count
	targets = numpy.interp(numpy.linspace(0, cumulative[-1], count), cumulative, parameters)
	result = evaluate(targets)
	return [(float(x), float(y)) for x, y in result]
