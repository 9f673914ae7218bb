#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import typing
import xml.etree.ElementTree #To read SVG files.

class Node:
	"""
	An element of an SVG document, with access to its attributes, its inline
	style, its children and its parent.
	"""

	def __init__(self, element, parent=None) -> None:
		"""
		Wraps an element of an element tree, recursively.
		:param element: The ElementTree element to wrap.
		:param parent: The node that contains this node, if any.
		"""
		self.element = element
		self.parent = parent
		self.node_type = strip_namespace(element.tag)
		self._style = None #Parsed lazily.
		self.children = [Node(child, self) for child in element if isinstance(child.tag, str)] #Skip comments and processing instructions.

	def get_value(self, name) -> str:
		"""
		Gets the value of an attribute of this element.
		:param name: The name of the attribute.
		:return: The value, or an empty string if the attribute is missing.
		"""
		value = self.element.attrib.get(name)
		if value is None: #Try again for namespaced attributes, like xlink:href.
			for key, candidate in self.element.attrib.items():
				if strip_namespace(key) == name:
					return candidate.strip()
			return ""
		return value.strip()

	def get_style(self, name) -> str:
		"""
		Gets the value of a property in the inline style of this element.
		:param name: The name of the CSS property.
		:return: The value, or an empty string if the style doesn't have it.
		"""
		if self._style is None:
			self._style = parse_style(self.element.attrib.get("style", ""))
		return self._style.get(name.lower(), "")

	def __iter__(self) -> typing.Iterator["Node"]:
		return iter(self.children)

	def __repr__(self) -> str:
		return "<Node {node_type}>".format(node_type=self.node_type)

def strip_namespace(tag) -> str:
	"""
	Removes the namespace prefix of a tag or attribute name, as ElementTree
	writes it, e.g. ``{http://www.w3.org/2000/svg}rect`` becomes ``rect``.
	"""
	if tag.startswith("{"):
		return tag[tag.find("}") + 1:]
	return tag

def parse_style(style) -> typing.Dict[str, str]:
	"""
	Parses the properties of a ``style`` attribute.

	Ill-formed pieces without a colon are ignored.
	:param style: The serialised CSS of the attribute.
	:return: A dictionary of property names (lower case) to values.
	"""
	result = {}
	for piece in style.split(";"):
		if ":" not in piece:
			continue
		name, value = piece.split(":", 1)
		name = name.strip().lower()
		if name:
			result[name] = value.strip()
	return result

def parse_string(text) -> Node:
	"""
	Parses a serialised SVG document.
	:param text: The XML source of the document.
	:return: The root node of the document.
	"""
	return Node(xml.etree.ElementTree.fromstring(text))

def parse_file(file_name) -> Node:
	"""
	Reads an SVG document from a file.
	:param file_name: The path to the file to read.
	:return: The root node of the document.
	"""
	return Node(xml.etree.ElementTree.parse(file_name).getroot())
