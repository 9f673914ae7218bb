#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import logging

from . import Configuration
from . import CSS
from . import Document
from . import Geometry
from . import ImageContext
from . import PathFlattener
from . import PathNormaliser
from . import PathParser
from . import PlotPoint
from . import Shapes
from . import Transform

logger = logging.getLogger(__name__)

_ignored_elements = {"defs", "desc", "metadata", "style", "switch", "symbol", "text", "title", "use"}
"""
Elements that are known, but don't produce anything to plot.
"""

class Parser:
	"""
	Parses an SVG document into a sequence of plot points.
	"""

	def __init__(self, configuration=None):
		"""
		Creates a parser.
		:param configuration: The settings to convert documents with. If
		``None``, the default settings are used.
		"""
		self.configuration = configuration if configuration is not None else Configuration.Configuration()

	def parse_file(self, file_name) -> ImageContext.ImageContext:
		"""
		Reads an SVG file and converts it.

		Errors reading the file or parsing the XML are not caught here.
		:param file_name: The path to the SVG file.
		:return: The converted image, with the plot points.
		"""
		return self.parse(Document.parse_file(file_name))

	def parse(self, document) -> ImageContext.ImageContext:
		"""
		Converts an SVG document into a sequence of plot points.
		:param document: The root node of the document.
		:return: The converted image, with the plot points.
		"""
		if document is None:
			raise ValueError("Can't parse without a document.")
		image = ImageContext.ImageContext(self.configuration.curve_vertex_count, self.configuration.system_unit)
		self.parse_node(image, document)
		logger.debug("Plotted {count} points.".format(count=len(image.plot_points)))
		return image

	def parse_node(self, image, node) -> None:
		"""
		Parses an element and adds what needs to be plotted for it to the image.

		This function delegates the parsing to the correct specialist function.
		:param image: The image that is being converted.
		:param node: The element to plot.
		"""
		if not CSS.is_visible(node):
			return
		tag = node.node_type.lower()
		if tag == "svg":
			self.parse_svg(image, node)
		elif tag == "a" or tag == "g":
			self.parse_g(image, node)
		elif tag == "circle":
			self.parse_circle(image, node)
		elif tag == "ellipse":
			self.parse_ellipse(image, node)
		elif tag == "line":
			self.parse_line(image, node)
		elif tag == "path":
			self.parse_path(image, node)
		elif tag == "polygon" or tag == "polyline":
			self.parse_polygon(image, node)
		elif tag == "rect":
			self.parse_rect(image, node)
		elif tag in _ignored_elements:
			logger.debug("Skipping {tag} element.".format(tag=tag))
		else:
			logger.warning("Unknown element {tag}.".format(tag=tag))
			#SVG specifies that you should ignore any unknown elements.

	def parse_svg(self, image, node) -> None:
		"""
		Parses the SVG element.

		The root element defines the size of the image and its view box. Nested
		SVG elements are treated as groups.
		:param image: The image that is being converted.
		:param node: The SVG element.
		"""
		if node.parent is None:
			viewbox_w = 0.0
			viewbox_h = 0.0
			parts = CSS.get_property(node, "viewBox").replace(",", " ").split()
			if len(parts) == 4:
				image.viewbox_x = CSS.to_system_unit(image, CSS.to_float(parts[0]))
				image.viewbox_y = CSS.to_system_unit(image, CSS.to_float(parts[1]))
				viewbox_w = CSS.to_float(parts[2])
				viewbox_h = CSS.to_float(parts[3])
			else:
				logger.warning("Document has no valid view box: {viewbox}".format(viewbox=" ".join(parts)))
			image.image_w = CSS.get_pixel_value(image, CSS.get_property(node, "width"), node)
			image.image_h = CSS.get_pixel_value(image, CSS.get_property(node, "height"), node)
			image.scale_x = image.image_w / viewbox_w if viewbox_w != 0 else 0.0
			image.scale_y = image.image_h / viewbox_h if viewbox_h != 0 else 0.0
			logger.debug("Image size {w}x{h}px, scale {scale_x}x{scale_y}.".format(w=image.image_w, h=image.image_h, scale_x=image.scale_x, scale_y=image.scale_y))
		self.parse_g(image, node)

	def parse_g(self, image, node) -> None:
		"""
		Parses a group element, which simply plots all of its children.
		:param image: The image that is being converted.
		:param node: The group element.
		"""
		for child in node:
			self.parse_node(image, child)

	def parse_circle(self, image, node) -> None:
		cx = CSS.get_system_value(image, node, "cx")
		cy = CSS.get_system_value(image, node, "cy")
		r = CSS.get_system_value(image, node, "r")
		self.plot_loop(image, node, Shapes.ellipse(cx, cy, r, r, image.curve_vertex_count), (cx, cy))

	def parse_ellipse(self, image, node) -> None:
		cx = CSS.get_system_value(image, node, "cx")
		cy = CSS.get_system_value(image, node, "cy")
		rx = CSS.get_system_value(image, node, "rx")
		ry = CSS.get_system_value(image, node, "ry")
		self.plot_loop(image, node, Shapes.ellipse(cx, cy, rx, ry, image.curve_vertex_count), (cx, cy))

	def parse_line(self, image, node) -> None:
		"""
		Parses the Line element.

		Contrary to the other shapes, a line is not a loop. It is plotted from
		whichever end is closest to the pen.
		:param image: The image that is being converted.
		:param node: The Line element.
		"""
		x1 = CSS.get_system_value(image, node, "x1")
		y1 = CSS.get_system_value(image, node, "y1")
		x2 = CSS.get_system_value(image, node, "x2")
		y2 = CSS.get_system_value(image, node, "y2")
		points = Shapes.line(x1, y1, x2, y2)
		Transform.apply_transforms(image, node, (x1, y1), points)
		self.apply_scale(image, points)
		stitch_segment(image.plot_points, points)

	def parse_path(self, image, node) -> None:
		"""
		Parses the Path element.

		The path data is parsed into commands, made absolute and then flattened
		into line segments.
		:param image: The image that is being converted.
		:param node: The Path element.
		"""
		commands = PathParser.parse(CSS.get_property(node, "d"))
		commands = PathNormaliser.convert_to_absolute(commands, self.document_location(image))
		points = PathFlattener.get_vertices(commands, image.curve_vertex_count)
		for point in points: #Path coordinates are in user units (pixels).
			point.x = CSS.to_system_unit(image, point.x)
			point.y = CSS.to_system_unit(image, point.y)
		self.plot_loop(image, node, points, Geometry.centroid([point.position for point in points]))

	def parse_polygon(self, image, node) -> None:
		"""
		Parses the Polygon and Polyline elements.
		:param image: The image that is being converted.
		:param node: The Polygon or Polyline element.
		"""
		coordinates = [(CSS.to_system_unit(image, x), CSS.to_system_unit(image, y)) for x, y in CSS.convert_points(CSS.get_property(node, "points"))]
		self.plot_loop(image, node, Shapes.polygon(coordinates), Geometry.centroid(coordinates))

	def parse_rect(self, image, node) -> None:
		"""
		Parses the Rect element, with optionally rounded corners.
		:param image: The image that is being converted.
		:param node: The Rect element.
		"""
		rectangle = Shapes.RoundedRectangle(
			CSS.get_system_value(image, node, "x"),
			CSS.get_system_value(image, node, "y"),
			CSS.get_system_value(image, node, "width"),
			CSS.get_system_value(image, node, "height"),
			CSS.get_system_value(image, node, "rx"),
			CSS.get_system_value(image, node, "ry"))
		if rectangle.width <= 0 or rectangle.height <= 0:
			return #No surface, nothing to plot.
		self.plot_loop(image, node, rectangle.vertices(image.curve_vertex_count), rectangle.centre)

	def plot_loop(self, image, node, points, anchor) -> None:
		"""
		Transforms, scales and adds the vertex loop of a shape to the image.
		:param image: The image that is being converted.
		:param node: The element that the vertices were generated for.
		:param points: The vertex loop of the shape.
		:param anchor: The point to rotate, scale and skew the shape around.
		"""
		if not points:
			return
		Transform.apply_transforms(image, node, anchor, points)
		self.apply_scale(image, points)
		stitch(image.plot_points, points)

	def document_location(self, image) -> Geometry.Point:
		"""
		Gets where the pen currently is, in the coordinates of the document.

		This undoes the global scaling and the conversion to the system unit,
		but not the transformations of the shape that was plotted last.
		:param image: The image that is being converted.
		:return: The location of the pen in pixels of the view box. The origin if
		the image has no scale.
		"""
		if image.scale_x == 0 or image.scale_y == 0:
			return 0.0, 0.0
		x, y = _current_location(image.plot_points)
		x = x / image.scale_x + image.viewbox_x
		y = y / image.scale_y + image.viewbox_y
		return CSS.from_system_unit(image, x), CSS.from_system_unit(image, y)

	def apply_scale(self, image, points) -> None:
		"""
		Scales vertices from the view box to the size of the image, in place.
		:param image: The image that is being converted.
		:param points: The vertices to scale.
		"""
		for point in points:
			point.x = (point.x - image.viewbox_x) * image.scale_x
			point.y = (point.y - image.viewbox_y) * image.scale_y

def _current_location(plot_points) -> Geometry.Point:
	if not plot_points:
		return 0.0, 0.0
	return plot_points[-1].position

def stitch(plot_points, loop) -> None:
	"""
	Appends a vertex loop to the plot points, starting where the pen is.

	The loop is entered at the vertex closest to the current location of the
	pen. If that's not the current location itself, the pen travels there
	first. Then the whole loop is drawn, ending where it started.

	A loop that starts with a travel move and returns to that point at the end
	doesn't need the travel move, so it's dropped. If the loop doesn't return
	there, the travel move becomes part of the loop.
	:param plot_points: The plot points so far. They are appended to.
	:param loop: The vertex loop to append.
	"""
	loop = [point.copy() for point in loop]
	#Only a loop that returns to its first vertex can lose it. Circles, rectangles and polygons don't repeat their first vertex, so dropping it would cut off a corner (a rectangle would become a triangle).
	if loop and loop[0].pen_state == PlotPoint.PenState.up:
		if len(loop) > 1 and loop[-1].position == loop[0].position:
			loop = loop[1:]
		else:
			loop[0].pen_state = PlotPoint.PenState.down
	location = _current_location(plot_points)
	closest = Geometry.closest_point_index(location, [point.position for point in loop])
	if closest < 0:
		return
	entry = loop[closest]
	if entry.position != location:
		plot_points.append(PlotPoint.PlotPoint(entry.x, entry.y, PlotPoint.PenState.up))
	plot_points.extend(loop[closest + 1:])
	plot_points.extend(loop[:closest + 1])

def stitch_segment(plot_points, segment) -> None:
	"""
	Appends an open line segment to the plot points.

	The segment is drawn from whichever end is closest to the current location
	of the pen.
	:param plot_points: The plot points so far. They are appended to.
	:param segment: The two ends of the segment.
	"""
	if len(segment) != 2:
		return
	location = _current_location(plot_points)
	start, end = segment
	if Geometry.distance(location, end.position) < Geometry.distance(location, start.position):
		start, end = end, start
	if start.position != location:
		plot_points.append(PlotPoint.PlotPoint(start.x, start.y, PlotPoint.PenState.up))
	plot_points.append(PlotPoint.PlotPoint(end.x, end.y, PlotPoint.PenState.down))
