"""
Shared helpers for the JSON document format.

Every entity serializes to a plain ``dict`` whose keys appear in a fixed
order (``id``/``value`` for actions, ``id``/``actions`` for nodes,
``from``/``to``/``weight`` for edges, and ``nodes``/``edges``/``current_node``
for a chain).  The helpers here validate identifiers and payload values and
turn JSON text into those dicts, raising :class:`~markov_generator.errors.ParseError`
for anything malformed.
"""

import json
import math
import typing

import markov_generator.errors


# Identifiers are unsigned 32-bit integers.
MAX_ID = 2 ** 32 - 1

# Compact output, one line per document.
COMPACT_SEPARATORS = (",", ":")

JsonValue = typing.Union[
	None,
	bool,
	int,
	float,
	str,
	typing.List["JsonValue"],
	typing.Dict[str, "JsonValue"],
]


def is_valid_id (value: typing.Any) -> bool:

	"""Return True if ``value`` is an int in the unsigned 32-bit range."""

	# bool is an int subclass but never a valid id.
	if isinstance(value, bool) or not isinstance(value, int):
		return False

	return 0 <= value <= MAX_ID


def validate_id (value: typing.Any, name: str = "id") -> int:

	"""
	Return ``value`` unchanged if it is a valid identifier.

	Raises ``ValueError`` otherwise.
	"""

	if not is_valid_id(value):
		raise ValueError(f"{name} must be an integer between 0 and {MAX_ID}, got {value!r}")

	return value


def validate_value (value: typing.Any, path: str = "value") -> JsonValue:

	"""
	Check that ``value`` is a tree of structured data and return it.

	Accepted leaves are ``None``, ``bool``, ``int``, finite ``float`` and
	``str``; containers are ``list`` and ``dict`` with ``str`` keys.  Anything
	else raises ``ValueError`` naming the offending position.
	"""

	if value is None or isinstance(value, (bool, int, str)):
		return value

	if isinstance(value, float):
		if not math.isfinite(value):
			raise ValueError(f"{path} must be a finite number, got {value!r}")
		return value

	if isinstance(value, list):
		for index, item in enumerate(value):
			validate_value(item, f"{path}[{index}]")
		return value

	if isinstance(value, dict):
		for key, item in value.items():
			if not isinstance(key, str):
				raise ValueError(f"{path} keys must be strings, got {key!r}")
			validate_value(item, f"{path}[{key!r}]")
		return value

	raise ValueError(f"{path} is not structured data: {type(value).__name__}")


def _reject_constant (name: str) -> typing.NoReturn:

	raise ValueError(f"{name} is not valid JSON")


def loads_object (text: typing.Union[str, bytes], what: str) -> typing.Dict[str, typing.Any]:

	"""
	Decode JSON text that must contain an object.

	Parameters:
		text: The JSON document.
		what: Name of the expected entity, used in error messages.

	Raises ``ParseError`` if the text is not JSON or the top level is not
	an object.
	"""

	try:
		data = json.loads(text, parse_constant=_reject_constant)
	except (ValueError, TypeError) as exc:
		raise markov_generator.errors.ParseError(f"Invalid {what} JSON: {exc}") from exc

	return require_mapping(data, what)


def dumps (data: typing.Dict[str, typing.Any], indent: typing.Optional[int] = None) -> str:

	"""
	Encode a serialized entity as JSON text.

	Compact separators are used unless ``indent`` is given.  Non-finite
	numbers raise ``ValueError`` since JSON cannot represent them.
	"""

	if indent is None:
		return json.dumps(data, separators=COMPACT_SEPARATORS, allow_nan=False)

	return json.dumps(data, indent=indent, allow_nan=False)


def require_mapping (data: typing.Any, what: str) -> typing.Dict[str, typing.Any]:

	"""Raise ``ParseError`` unless ``data`` is a dict."""

	if not isinstance(data, dict):
		raise markov_generator.errors.ParseError(f"Expected a JSON object for {what}, got {type(data).__name__}")

	return data


def require_key (data: typing.Dict[str, typing.Any], key: str, what: str) -> typing.Any:

	"""Return ``data[key]``, raising ``ParseError`` if the key is missing."""

	if key not in data:
		raise markov_generator.errors.ParseError(f"Missing field {key!r} in {what}")

	return data[key]


def require_id (data: typing.Dict[str, typing.Any], key: str, what: str) -> int:

	"""Return the identifier stored under ``key``, raising ``ParseError`` if it is missing or invalid."""

	value = require_key(data, key, what)

	if not is_valid_id(value):
		raise markov_generator.errors.ParseError(f"Field {key!r} in {what} must be an integer between 0 and {MAX_ID}, got {value!r}")

	return value


def require_list (data: typing.Dict[str, typing.Any], key: str, what: str) -> typing.List[typing.Any]:

	"""Return the list stored under ``key``, raising ``ParseError`` if it is missing or not a list."""

	value = require_key(data, key, what)

	if not isinstance(value, list):
		raise markov_generator.errors.ParseError(f"Field {key!r} in {what} must be a list, got {type(value).__name__}")

	return value
