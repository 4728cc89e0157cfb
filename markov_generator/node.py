"""
Nodes: identified vertices that own a list of actions.
"""

import dataclasses
import typing

import markov_generator.action
import markov_generator.serialization


@dataclasses.dataclass
class Node:

	"""
	A vertex in the chain.

	Attributes:
		id: Unsigned 32-bit identifier used as the lookup key.
		actions: Actions attached to this node, in insertion order.  Passing
			``None`` (or omitting it) gives an empty list.  The list is copied
			so the node never aliases the caller's sequence.
	"""

	id: int
	actions: typing.List[markov_generator.action.Action] = dataclasses.field(default_factory=list)

	def __post_init__ (self) -> None:

		markov_generator.serialization.validate_id(self.id, "Node id")

		self.actions = list(self.actions) if self.actions is not None else []

		for action in self.actions:
			if not isinstance(action, markov_generator.action.Action):
				raise ValueError(f"Node actions must be Action instances, got {type(action).__name__}")

	def copy (self) -> "Node":

		"""Return a node with the same id and its own copy of the action list."""

		return Node(self.id, self.actions)

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the serialized form of this node."""

		return {"id": self.id, "actions": [action.to_dict() for action in self.actions]}

	def to_json (self, indent: typing.Optional[int] = None) -> str:

		"""Return this node as JSON text."""

		return markov_generator.serialization.dumps(self.to_dict(), indent=indent)

	@classmethod
	def from_dict (cls, data: typing.Any) -> "Node":

		"""Build a node from its serialized form, raising ``ParseError`` if the shape is wrong."""

		data = markov_generator.serialization.require_mapping(data, "node")
		node_id = markov_generator.serialization.require_id(data, "id", "node")
		actions = markov_generator.serialization.require_list(data, "actions", "node")

		return cls(node_id, [markov_generator.action.Action.from_dict(item) for item in actions])

	@classmethod
	def from_json (cls, text: typing.Union[str, bytes]) -> "Node":

		"""Parse a node from JSON text."""

		return cls.from_dict(markov_generator.serialization.loads_object(text, "node"))
