#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import logging
import math #To convert turns to radians.
import re #For parsing the CSS values.
import typing

logger = logging.getLogger(__name__)

number_pattern = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
"""
Regular expression for a numeric literal in CSS or SVG.
"""

default_font_size = 15.9996
"""
The font size in pixels when no element defines one (12pt).
"""

def to_float(text, default=0.0) -> float:
	"""
	Parses a number, if possible.

	If impossible or missing, this returns the default.
	:param text: The serialised number.
	:param default: The value to return if the text is not a number.
	:return: The number in the text, or the default.
	"""
	try:
		return float(text)
	except (ValueError, TypeError): #Not parsable as float.
		return default

def split_value(text) -> typing.Tuple[float, str]:
	"""
	Splits a CSS dimension in its number and its unit.

	If the value doesn't start with a number, the number is 0.
	:param text: A CSS dimension, like "2.5mm".
	:return: The number and the unit (which may be empty).
	"""
	text = text.strip() if text else ""
	match = number_pattern.match(text)
	if not match:
		return 0.0, ""
	return to_float(match.group(0)), text[match.end():].strip()

def get_property(node, name) -> str:
	"""
	Gets a property of an element.

	The inline style takes precedence over the attributes of the element.
	:param node: The element to get the property of.
	:param name: The name of the property.
	:return: The value of the property, or an empty string if it's not set.
	"""
	if node is None:
		raise ValueError("Can't get property {name} without an element.".format(name=name))
	value = node.get_style(name)
	if value:
		return value
	return node.get_value(name)

def is_visible(node) -> bool:
	"""
	Checks whether an element would be displayed.

	The ``display`` property is inherited from the closest element that
	declares it.
	:param node: The element to check.
	:return: ``False`` if the element is hidden with ``display: none``.
	"""
	while node is not None:
		display = get_property(node, "display")
		if display:
			return display.strip().lower() != "none"
		node = node.parent
	return True

def current_font_size(image, node) -> float:
	"""
	Gets the font size that font-relative units (em, ex, ch) are relative to.

	This is the font size of the closest element that defines one.
	:param image: The image that is being converted.
	:param node: The element to get the font size for.
	:return: The font size in pixels.
	"""
	while node is not None:
		font_size = get_property(node, "font-size")
		if font_size:
			return get_pixel_value(image, font_size, node.parent) #Relative to the font size of its parent.
		node = node.parent
	return default_font_size

def document_font_size(image, node) -> float:
	"""
	Gets the font size that root-relative units (rem) are relative to.

	Every element up to the root of the document may define a font size. The
	definition closest to the root wins.
	:param image: The image that is being converted.
	:param node: The element to get the font size for.
	:return: The font size in pixels.
	"""
	result = default_font_size
	while node is not None:
		font_size = get_property(node, "font-size")
		if font_size:
			result = get_pixel_value(image, font_size, node.parent)
		node = node.parent
	return result

def _context_factors(image, definition, node) -> typing.Dict[str, float]:
	"""
	Computes the factor of a unit that depends on the context it's used in.
	:param image: The image that is being converted.
	:param definition: The unit to compute the factor for.
	:param node: The element that the value belongs to.
	:return: A dictionary of factor overrides for the unit converter.
	"""
	name = definition.name
	if definition.context == "FontSize":
		if name == "rem":
			return {name: document_font_size(image, node)}
		font_size = current_font_size(image, node)
		if name == "em":
			return {name: font_size}
		return {name: font_size / 2} #ex and ch are approximated as half a font size.
	if definition.context == "ViewSize":
		if name == "vw":
			return {name: image.image_w / 100}
		if name == "vh":
			return {name: image.image_h / 100}
		if name == "vmin":
			return {name: min(image.image_w, image.image_h) / 100}
		return {name: max(image.image_w, image.image_h) / 100}
	return {}

def get_pixel_value(image, text, node=None) -> float:
	"""
	Converts a CSS length to pixels.

	Values without unit are already in pixels. Percentages are not supported;
	their number is returned as-is.
	:param image: The image that is being converted.
	:param text: A CSS length, like "2rem".
	:param node: The element that the length belongs to, for font-relative
	units.
	:return: The length in pixels.
	"""
	if image is None:
		raise ValueError("Can't resolve a length without an image.")
	number, unit = split_value(text)
	if not unit:
		return number
	if unit == "%":
		logger.warning("Percentages are not supported: {text}".format(text=text))
		return number
	definition = image.converter.find_unit(unit)
	if definition is None or "px" not in image.converter.find_domain(unit):
		logger.warning("Unknown length unit {unit} in {text}".format(unit=unit, text=text))
		return number
	return image.converter.convert(number, unit, "px", _context_factors(image, definition, node))

def get_float_value(image, text, node=None) -> float:
	"""
	Converts a CSS value to the base unit of its domain.

	Lengths are converted to pixels, angles to turns.
	:param image: The image that is being converted.
	:param text: A CSS value with or without unit.
	:param node: The element that the value belongs to.
	:return: The value in the base unit.
	"""
	if image is None:
		raise ValueError("Can't resolve a value without an image.")
	number, unit = split_value(text)
	if not unit:
		return number
	domain = image.converter.find_domain(unit)
	if domain is None or "px" in domain:
		return get_pixel_value(image, text, node)
	return image.converter.convert(number, unit, domain.base)

def get_angle(image, text, node=None) -> float:
	"""
	Converts a CSS angle to radians.

	Angles without unit are in degrees, as in the ``transform`` attribute of
	SVG.
	:param image: The image that is being converted.
	:param text: A CSS angle, like "90deg" or "0.25turn".
	:param node: The element that the angle belongs to.
	:return: The angle in radians.
	"""
	number, unit = split_value(text)
	if not unit:
		return math.radians(number)
	if unit not in image.converter.find_domain("turn"):
		logger.warning("Unknown angle unit {unit} in {text}".format(unit=unit, text=text))
		return math.radians(number)
	return get_float_value(image, text, node) * 2 * math.pi

def to_system_unit(image, pixels) -> float:
	"""
	Converts a length in pixels to the unit the image is plotted in.
	"""
	return image.converter.convert(pixels, "px", image.system_unit)

def from_system_unit(image, length) -> float:
	"""
	Converts a length in the unit the image is plotted in back to pixels.
	"""
	return image.converter.convert(length, image.system_unit, "px")

def get_system_value(image, node, name) -> float:
	"""
	Gets a length property of an element in the unit the image is plotted in.
	:param image: The image that is being converted.
	:param node: The element to get the property of.
	:param name: The name of the property, e.g. "cx".
	:return: The length in the system unit. 0 if the property is missing.
	"""
	return to_system_unit(image, get_pixel_value(image, get_property(node, name), node))

def convert_points(points) -> typing.Generator[typing.Tuple[float, float], None, None]:
	"""
	Parses a points attribute, turning it into a list of coordinate pairs.

	If there is a syntax error, that part of the points will get ignored.
	Other parts might still be included.
	:param points: A series of points.
	:return: A list of x,y pairs.
	"""
	points = points.replace(",", " ")
	points = points.split()
	if len(points) % 2 != 0: #If we have an odd number of points, leave out the last.
		points = points[:-1]

	for x, y in (points[i:i + 2] for i in range(0, len(points), 2)):
		try:
			yield float(x), float(y)
		except ValueError: #Not properly formatted floats.
			continue
