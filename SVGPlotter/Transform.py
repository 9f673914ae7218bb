#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import collections #For the named tuple.
import logging
import math #For the tangent of skew angles.
import numpy #For composing transformation matrices.
import re #For parsing the transformation functions.
import typing

from . import CSS
from . import Geometry

logger = logging.getLogger(__name__)

TransformFunction = collections.namedtuple("TransformFunction", [
	"name",  #The name of the function, in lower case.
	"parameters",  #The resolved parameters. Lengths are in the system unit, angles in radians.
])

function_pattern = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)")

def collect_transforms(node) -> typing.List[typing.Tuple[str, typing.Any]]:
	"""
	Finds all transformations that apply to an element.
	:param node: The element to find the transformations of.
	:return: The transform properties of the element and its ancestors, each
	with the element that declares it, the outermost ancestor first.
	"""
	result = []
	while node is not None:
		transform = CSS.get_property(node, "transform")
		if transform:
			result.append((transform, node))
		node = node.parent
	result.reverse()
	return result

def parse_functions(image, transform, node=None) -> typing.List[TransformFunction]:
	"""
	Parses a transformation property into a list of functions.

	Functions that are ill-formed or not supported are skipped.
	:param image: The image that is being converted.
	:param transform: A series of transformation functions.
	:param node: The element that the transformation belongs to.
	:return: The functions with their parameters resolved.
	"""
	result = []
	leftover = function_pattern.sub("", transform).replace(",", " ").strip()
	if leftover and leftover.lower() != "none":
		logger.warning("Ill-formed transformation: {transform}".format(transform=transform))
	for match in function_pattern.finditer(transform):
		name = match.group(1).lower()
		arguments = match.group(2).replace(",", " ").split()
		if name == "rotate":
			parameters = [CSS.get_angle(image, argument, node) for argument in arguments[:1]]
			parameters += [CSS.to_system_unit(image, CSS.get_pixel_value(image, argument, node)) for argument in arguments[1:]]
		elif name == "skew":
			parameters = [CSS.get_angle(image, argument, node) for argument in arguments]
		elif name == "translate":
			parameters = [CSS.to_system_unit(image, CSS.get_pixel_value(image, argument, node)) for argument in arguments]
		elif name == "scale":
			parameters = [CSS.get_float_value(image, argument, node) for argument in arguments]
		elif name == "matrix":
			parameters = [CSS.get_float_value(image, argument, node) for argument in arguments[:4]]
			parameters += [CSS.to_system_unit(image, CSS.get_pixel_value(image, argument, node)) for argument in arguments[4:]]
		else:
			logger.warning("Unsupported transformation function: {name}".format(name=match.group(1)))
			continue
		result.append(TransformFunction(name, parameters))
	return result

def function_matrix(function, anchor) -> typing.Optional[numpy.ndarray]:
	"""
	Creates the transformation matrix for a single transformation function.

	Everything except translations happens around the anchor.
	:param function: The function to get the matrix of.
	:param anchor: The point to rotate, scale and skew around.
	:return: A 3x3 affine transformation matrix, or ``None`` if the function
	has the wrong number of parameters.
	"""
	parameters = function.parameters
	if function.name == "translate":
		if len(parameters) == 1:
			return Geometry.translation_matrix(parameters[0], parameters[0]) #Y defaults to X, like for scale.
		if len(parameters) == 2:
			return Geometry.translation_matrix(parameters[0], parameters[1])
	elif function.name == "scale":
		if len(parameters) == 1:
			return Geometry.about(Geometry.scale_matrix(parameters[0], parameters[0]), anchor)
		if len(parameters) == 2:
			return Geometry.about(Geometry.scale_matrix(parameters[0], parameters[1]), anchor)
	elif function.name == "rotate":
		if len(parameters) == 1:
			return Geometry.about(Geometry.rotation_matrix(parameters[0]), anchor)
		if len(parameters) == 3:
			return Geometry.about(Geometry.rotation_matrix(parameters[0]), (parameters[1], parameters[2]))
	elif function.name == "skew":
		if len(parameters) == 1:
			parameters = [parameters[0], parameters[0]]
		if len(parameters) == 2:
			return Geometry.about(Geometry.linear_matrix(1, math.tan(parameters[1]), math.tan(parameters[0]), 1), anchor)
	elif function.name == "matrix":
		if len(parameters) == 6:
			return Geometry.about(Geometry.linear_matrix(*parameters), anchor)
	logger.warning("Wrong number of parameters for {name}: {parameters}".format(name=function.name, parameters=parameters))
	return None

def compose(functions, anchor) -> numpy.ndarray:
	"""
	Composes a list of transformation functions into one matrix.

	The functions are applied in order: the first function of the list is
	applied first.
	:param functions: The functions to compose.
	:param anchor: The point to rotate, scale and skew around.
	:return: A 3x3 affine transformation matrix.
	"""
	transformation = Geometry.identity()
	for function in functions:
		matrix = function_matrix(function, anchor)
		if matrix is not None:
			transformation = numpy.matmul(matrix, transformation)
	return transformation

def get_transformation(image, node, anchor) -> numpy.ndarray:
	"""
	Gets the combined transformation of an element and all of its ancestors.
	:param image: The image that is being converted.
	:param node: The element to get the transformation of.
	:param anchor: The point to rotate, scale and skew around.
	:return: A 3x3 affine transformation matrix.
	"""
	functions = []
	for transform, owner in collect_transforms(node): #Resolve each transformation in the context of the element that declares it.
		functions.extend(parse_functions(image, transform, owner))
	return compose(functions, anchor)

def apply_transforms(image, node, anchor, plot_points) -> None:
	"""
	Transforms the vertices of a shape in place.
	:param image: The image that is being converted.
	:param node: The element that the vertices were generated for.
	:param anchor: The point to rotate, scale and skew around.
	:param plot_points: The vertices of the shape.
	"""
	if not plot_points:
		return
	transformation = get_transformation(image, node, anchor)
	if numpy.array_equal(transformation, Geometry.identity()):
		return
	transformed = Geometry.apply_transformation([point.position for point in plot_points], transformation)
	for point, (x, y) in zip(plot_points, transformed):
		point.x = float(x)
		point.y = float(y)
