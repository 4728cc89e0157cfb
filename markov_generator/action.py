"""
Actions: identified payloads attached to nodes.

An action carries side information to emit when the chain visits the node
that owns it.  The payload is any structured value that survives a JSON
round trip unchanged.
"""

import dataclasses
import typing

import markov_generator.errors
import markov_generator.serialization


JsonValue = markov_generator.serialization.JsonValue


@dataclasses.dataclass(frozen=True)
class Action:

	"""
	An identified, immutable payload attached to a node.

	Attributes:
		id: Unsigned 32-bit identifier.  Uniqueness is not enforced.
		value: Structured data (``None``, ``bool``, numbers, ``str``, and
			nested ``list`` / ``dict`` with string keys).  Defaults to
			``None``, which serializes as JSON ``null``.

	Actions compare by value but are unhashable, since the payload may be a
	list or dict.

	Example:
		```python
		action = Action(200, {"note": 60, "velocity": 100})
		assert Action.from_json(action.to_json()) == action
		```
	"""

	id: int
	value: JsonValue = None

	__hash__ = None  # type: ignore[assignment]

	def __post_init__ (self) -> None:
		markov_generator.serialization.validate_id(self.id, "Action id")
		markov_generator.serialization.validate_value(self.value)

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the serialized form of this action."""

		return {"id": self.id, "value": self.value}

	def to_json (self, indent: typing.Optional[int] = None) -> str:

		"""Return this action as JSON text."""

		return markov_generator.serialization.dumps(self.to_dict(), indent=indent)

	@classmethod
	def from_dict (cls, data: typing.Any) -> "Action":

		"""
		Build an action from its serialized form.

		Both ``id`` and ``value`` must be present (``value`` may be ``null``).
		Raises ``ParseError`` if the shape is wrong.
		"""

		data = markov_generator.serialization.require_mapping(data, "action")
		action_id = markov_generator.serialization.require_id(data, "id", "action")
		value = markov_generator.serialization.require_key(data, "value", "action")

		try:
			return cls(action_id, value)
		except ValueError as exc:
			raise markov_generator.errors.ParseError(f"Invalid action: {exc}") from exc

	@classmethod
	def from_json (cls, text: typing.Union[str, bytes]) -> "Action":

		"""Parse an action from JSON text, raising ``ParseError`` if it is malformed."""

		return cls.from_dict(markov_generator.serialization.loads_object(text, "action"))
