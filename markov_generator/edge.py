"""
Edges: directed, weighted connections between node ids.
"""

import dataclasses
import typing

import markov_generator.errors
import markov_generator.serialization


@dataclasses.dataclass(order=True)
class Edge:

	"""
	A directed connection from ``source`` to ``target``.

	The weight sets the relative probability of following this edge when
	the chain leaves ``source``.  It is stored as given: sign and finiteness
	are not checked, and neither end has to name a node in any chain.

	Edges compare and sort by ``(source, target, weight)``.  In the serialized
	form ``source`` and ``target`` are written as ``from`` and ``to``.
	"""

	source: int
	target: int
	weight: float

	def __post_init__ (self) -> None:

		markov_generator.serialization.validate_id(self.source, "Edge source")
		markov_generator.serialization.validate_id(self.target, "Edge target")

		if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
			raise ValueError(f"Edge weight must be a number, got {self.weight!r}")

		self.weight = float(self.weight)

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the serialized form of this edge."""

		return {"from": self.source, "to": self.target, "weight": self.weight}

	def to_json (self, indent: typing.Optional[int] = None) -> str:

		"""Return this edge as JSON text."""

		return markov_generator.serialization.dumps(self.to_dict(), indent=indent)

	@classmethod
	def from_dict (cls, data: typing.Any) -> "Edge":

		"""Build an edge from its serialized form, raising ``ParseError`` if the shape is wrong."""

		data = markov_generator.serialization.require_mapping(data, "edge")
		source = markov_generator.serialization.require_id(data, "from", "edge")
		target = markov_generator.serialization.require_id(data, "to", "edge")
		weight = markov_generator.serialization.require_key(data, "weight", "edge")

		if isinstance(weight, bool) or not isinstance(weight, (int, float)):
			raise markov_generator.errors.ParseError(f"Field 'weight' in edge must be a number, got {weight!r}")

		return cls(source, target, weight)

	@classmethod
	def from_json (cls, text: typing.Union[str, bytes]) -> "Edge":

		"""Parse an edge from JSON text."""

		return cls.from_dict(markov_generator.serialization.loads_object(text, "edge"))
