import pytest

import markov_generator.action
import markov_generator.errors


def test_value_defaults_to_none () -> None:

	"""An action built without a value carries None and serializes it as null."""

	action = markov_generator.action.Action(7)

	assert action.value is None
	assert action.to_json() == '{"id":7,"value":null}'


def test_to_dict_field_order () -> None:

	"""The serialized form lists id before value."""

	action = markov_generator.action.Action(200, 200.5)

	assert list(action.to_dict().keys()) == ["id", "value"]
	assert action.to_json() == '{"id":200,"value":200.5}'


def test_nested_value_round_trip () -> None:

	"""A nested payload survives serialization unchanged."""

	value = {"notes": [60, 64, 67], "meta": {"loud": True, "gain": 0.5, "tag": None}, "name": "triad"}
	action = markov_generator.action.Action(3, value)

	assert markov_generator.action.Action.from_json(action.to_json()) == action


def test_from_json_with_whitespace () -> None:

	"""Parsing does not depend on formatting."""

	action = markov_generator.action.Action.from_json('{\n  "id": 12,\n  "value": [1, "two", false]\n}')

	assert action == markov_generator.action.Action(12, [1, "two", False])


def test_actions_are_immutable () -> None:

	"""Action fields cannot be reassigned."""

	action = markov_generator.action.Action(1, "a")

	with pytest.raises(AttributeError):
		action.id = 2  # type: ignore[misc]


@pytest.mark.parametrize("text", [
	"not json",
	"",
	"[1, 2]",
	'{"id": 5}',
	'{"value": 5}',
	'{"id": -1, "value": 5}',
	'{"id": 4294967296, "value": 5}',
	'{"id": "5", "value": 5}',
	'{"id": true, "value": 5}',
	'{"id": 5, "value": NaN}',
])
def test_from_json_rejects_malformed_input (text: str) -> None:

	"""Malformed text or the wrong shape raises ParseError."""

	with pytest.raises(markov_generator.errors.ParseError):
		markov_generator.action.Action.from_json(text)


def test_parse_error_is_a_value_error () -> None:

	"""ParseError can be caught as ValueError."""

	with pytest.raises(ValueError):
		markov_generator.action.Action.from_json("{")


@pytest.mark.parametrize("action_id", [-1, 2 ** 32, True, 1.0, "1"])
def test_invalid_id_raises (action_id: object) -> None:

	"""Ids outside the unsigned 32-bit range are rejected."""

	with pytest.raises(ValueError):
		markov_generator.action.Action(action_id)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [float("nan"), float("inf"), (1, 2), {1: "a"}, object(), [set()]])
def test_unstructured_value_raises (value: object) -> None:

	"""Values that cannot be represented as structured data are rejected."""

	with pytest.raises(ValueError):
		markov_generator.action.Action(1, value)  # type: ignore[arg-type]


def test_largest_id_is_accepted () -> None:

	"""The maximum unsigned 32-bit id is valid."""

	assert markov_generator.action.Action(2 ** 32 - 1).id == 4294967295


@pytest.mark.parametrize("value", [None, 1.5, [1, 2], {"a": 1}])
def test_actions_are_unhashable (value: object) -> None:

	"""Actions compare by value but cannot be hashed, whatever the payload."""

	action = markov_generator.action.Action(1, value)

	assert action == markov_generator.action.Action(1, value)

	with pytest.raises(TypeError):
		hash(action)
