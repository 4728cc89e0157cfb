"""
Exceptions raised by Markov chain operations.

Simple lookups (``get_node``, ``get_edge``, ``get_node_actions``,
``get_node_action``) return ``None`` when nothing matches; the classes here
are reserved for operations that require something to exist.
"""


class MarkovChainError (Exception):

	"""Base class for all Markov chain errors."""


class NodeDoesNotExistError (MarkovChainError):

	"""A node id was referenced where the node must exist."""


class EdgeDoesNotExistError (MarkovChainError):

	"""An edge was referenced where the edge must exist."""


class ActionDoesNotExistError (MarkovChainError):

	"""An action was referenced where the action must exist."""


class NodeHasNoEdgesError (MarkovChainError):

	"""The current node has no outgoing edges to transition along."""


class TransitionFailedError (MarkovChainError):

	"""Weighted selection did not pick any outgoing edge."""


class StuckError (MarkovChainError):

	"""The chain cannot make progress from its current position."""


class DuplicateNodeError (MarkovChainError):

	"""A node id is already present in the chain."""


class ParseError (MarkovChainError, ValueError):

	"""Serialized input is not well-formed or does not have the expected shape."""
