#Library to convert SVG documents into plotter toolpaths.
#Copyright (C) 2019 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import collections #For the named tuple.
import logging
import math #To define the radian.
import types #For read-only mappings.
import typing

logger = logging.getLogger(__name__)

UnitDefinition = collections.namedtuple("UnitDefinition", [
	"name",  #The canonical name of the unit.
	"factor",  #How many base units one of this unit is.
	"aliases",  #Other names by which the unit can be referred to.
	"context",  #None for fixed units, or the name of the context the factor depends on ("FontSize" or "ViewSize").
])

class UnitDomain:
	"""
	A group of units that can be converted into each other.

	All units of a domain convert through the base unit of the domain. The
	domain is immutable once created.
	"""

	def __init__(self, name, base, definitions) -> None:
		"""
		Creates a new domain of units.
		:param name: The name of the domain, e.g. "Length".
		:param base: The name of the base unit. One of the definitions must
		have this name and a factor of 1.
		:param definitions: The units in this domain.
		"""
		self.name = name
		self.base = base
		lookup = {}
		for definition in definitions:
			lookup[definition.name.lower()] = definition
			for alias in definition.aliases:
				lookup[alias.lower()] = definition
		self._lookup = types.MappingProxyType(lookup)
		self.definitions = tuple(definitions)

	def find(self, unit) -> typing.Optional[UnitDefinition]:
		"""
		Finds a unit in this domain by its name or one of its aliases.

		The search is case-insensitive.
		:param unit: The name of the unit.
		:return: The definition of the unit, or ``None`` if it's not in this
		domain.
		"""
		return self._lookup.get(unit.strip().lower())

	def __contains__(self, unit) -> bool:
		return self.find(unit) is not None

class UnitConverter:
	"""
	Converts values between units of the same domain.

	Some units don't have a fixed factor but depend on the context they're
	used in (the font size, the size of the image). For those, the caller
	computes the factor and passes it along with the conversion, so that the
	table itself never changes.
	"""

	def __init__(self, domains) -> None:
		self.domains = tuple(domains)

	def find_domain(self, unit) -> typing.Optional[UnitDomain]:
		"""
		Finds the domain that a unit belongs to.
		:param unit: The name of the unit.
		:return: The domain, or ``None`` if no domain has such a unit.
		"""
		if not unit:
			return None
		for domain in self.domains:
			if unit in domain:
				return domain
		return None

	def find_unit(self, unit) -> typing.Optional[UnitDefinition]:
		domain = self.find_domain(unit)
		if domain is None:
			return None
		return domain.find(unit)

	def convert(self, value, from_unit, to_unit, factors=None) -> float:
		"""
		Converts a value from one unit to another.

		If the units are unknown or in different domains, the value is returned
		unchanged.
		:param value: The value to convert.
		:param from_unit: The unit the value is currently in.
		:param to_unit: The unit to convert to.
		:param factors: Optional overrides of unit factors for this conversion
		only, indexed by the canonical unit name. Used for context-dependent
		units.
		:return: The converted value.
		"""
		domain = self.find_domain(from_unit)
		if domain is None or to_unit not in domain:
			logger.debug("Can't convert from {from_unit} to {to_unit}.".format(from_unit=from_unit, to_unit=to_unit))
			return value
		factors = factors or {}
		source = domain.find(from_unit)
		target = domain.find(to_unit)
		source_factor = factors.get(source.name, source.factor)
		target_factor = factors.get(target.name, target.factor)
		if target_factor == 0:
			return 0.0
		return value * source_factor / target_factor

def create_converter() -> UnitConverter:
	"""
	Creates the table of units that SVG documents can be expressed in.

	Lengths are based on CSS pixels at 96 dots per inch. The factors of the
	font-relative units are the defaults for a 12pt font, and those of the
	viewport-relative units are placeholders. They are replaced with the real
	value when converting.
	:return: A converter with an Angle domain and a Length domain.
	"""
	angles = UnitDomain("Angle", "turn", (
		UnitDefinition("turn", 1.0, ("turns",), None),
		UnitDefinition("deg", 1 / 360.0, ("degrees",), None),
		UnitDefinition("rad", 1 / (2 * math.pi), ("radians",), None),
		UnitDefinition("grad", 1 / 400.0, ("grads",), None),
	))
	lengths = UnitDomain("Length", "px", (
		UnitDefinition("px", 1.0, (), None),
		UnitDefinition("ch", 7.9998, (), "FontSize"),
		UnitDefinition("cm", 37.795, (), None),
		UnitDefinition("em", 15.9996, (), "FontSize"),
		UnitDefinition("ex", 7.9998, (), "FontSize"),
		UnitDefinition("in", 96.0, (), None),
		UnitDefinition("mm", 3.7795, (), None),
		UnitDefinition("pc", 16.0, (), None),
		UnitDefinition("pt", 1.3333, (), None),
		UnitDefinition("q", 3.7795 / 4, (), None),
		UnitDefinition("rem", 15.9996, (), "FontSize"),
		UnitDefinition("vh", 1.0, (), "ViewSize"),
		UnitDefinition("vmax", 1.0, (), "ViewSize"),
		UnitDefinition("vmin", 1.0, (), "ViewSize"),
		UnitDefinition("vw", 1.0, (), "ViewSize"),
	))
	return UnitConverter((angles, lengths))

default_converter = create_converter()
"""
The unit table shared by all images. It never changes after being created.
"""
