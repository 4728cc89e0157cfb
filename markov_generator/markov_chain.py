"""
The Markov chain: nodes, weighted edges, and a current position.

:class:`MarkovChain` owns an ordered list of :class:`~markov_generator.node.Node`
and an ordered list of :class:`~markov_generator.edge.Edge`.  Once a current
node is set, :meth:`MarkovChain.next` moves it along one outgoing edge,
chosen with probability proportional to the edge weight.

Lookups scan the lists in insertion order and return the first match, so
serialized output always lists entities in the order they were added.
"""

import logging
import random
import typing

import markov_generator.action
import markov_generator.edge
import markov_generator.errors
import markov_generator.node
import markov_generator.serialization


logger = logging.getLogger(__name__)


class RandomSource (typing.Protocol):

	"""Anything that produces uniform floats in ``[0.0, 1.0)``, such as ``random.Random``."""

	def random (self) -> float:
		...


def choose_weighted_edge (edges: typing.Sequence[markov_generator.edge.Edge], rng: RandomSource) -> markov_generator.edge.Edge:

	"""
	Choose one edge with probability proportional to its weight.

	Draws ``roll`` uniformly from ``[0, total_weight)`` and walks the edges in
	order, subtracting each weight from the roll until it falls inside an
	edge.

	Raises ``NodeHasNoEdgesError`` if ``edges`` is empty and
	``TransitionFailedError`` if no edge is selected, which happens when the
	total weight is zero or floating-point rounding pushes the roll past the
	last edge.
	"""

	if not edges:
		raise markov_generator.errors.NodeHasNoEdgesError("No edges to choose from")

	total_weight = 0.0

	for edge in edges:
		total_weight += edge.weight

	roll = rng.random() * total_weight

	for edge in edges:
		if roll < edge.weight:
			return edge
		roll -= edge.weight

	raise markov_generator.errors.TransitionFailedError(
		f"Weighted selection over {len(edges)} edges (total weight {total_weight}) did not pick an edge"
	)


class MarkovChain:

	"""
	A weighted directed graph with a current position.

	Node ids are unique within a chain.  Edges are free-form: several edges
	may share a ``(source, target)`` pair, and edges may name nodes that are
	not (or no longer) in the chain.

	Example:
		```python
		chain = MarkovChain()
		chain.add_nodes([Node(1), Node(2)])
		chain.add_edge(Edge(1, 2, 1.0))
		chain.set_current_node(1)
		chain.next()   # -> 2
		```
	"""

	def __init__ (
		self,
		nodes: typing.Optional[typing.Iterable[markov_generator.node.Node]] = None,
		edges: typing.Optional[typing.Iterable[markov_generator.edge.Edge]] = None,
		rng: typing.Optional[RandomSource] = None
	) -> None:

		"""
		Initialize the chain with optional nodes and edges.

		Parameters:
			nodes: Initial nodes.  Raises ``DuplicateNodeError`` if two share an id.
			edges: Initial edges.
			rng: Default random source for :meth:`next`.  A fresh
				``random.Random()`` is used when omitted.
		"""

		self._nodes: typing.List[markov_generator.node.Node] = []
		self._edges: typing.List[markov_generator.edge.Edge] = []
		self._current_node: typing.Optional[int] = None
		self.rng: RandomSource = rng if rng is not None else random.Random()

		if nodes is not None:
			self.add_nodes(nodes)

		if edges is not None:
			for edge in edges:
				self.add_edge(edge)

	@property
	def nodes (self) -> typing.Tuple[markov_generator.node.Node, ...]:

		"""All nodes in insertion order."""

		return tuple(self._nodes)

	@property
	def edges (self) -> typing.Tuple[markov_generator.edge.Edge, ...]:

		"""All edges in insertion order."""

		return tuple(self._edges)

	def add_node (self, node: markov_generator.node.Node) -> None:

		"""
		Append a node.

		The chain stores its own copy, so later changes to ``node`` do not
		reach the chain.  Raises ``DuplicateNodeError`` if the id is taken.
		"""

		self.add_nodes([node])

	def add_nodes (self, nodes: typing.Iterable[markov_generator.node.Node]) -> None:

		"""
		Append several nodes in order.

		Either every node is added or, if any id is already present (in the
		chain or earlier in ``nodes``), none are and ``DuplicateNodeError`` is
		raised.
		"""

		pending = [node.copy() for node in nodes]
		seen = {node.id for node in self._nodes}

		for node in pending:
			if node.id in seen:
				raise markov_generator.errors.DuplicateNodeError(f"Node {node.id} already exists")
			seen.add(node.id)

		self._nodes.extend(pending)

		logger.debug(f"Added nodes: {[node.id for node in pending]}")

	def add_edge (self, edge: markov_generator.edge.Edge) -> None:

		"""Append a copy of an edge."""

		self._edges.append(markov_generator.edge.Edge(edge.source, edge.target, edge.weight))

		logger.debug(f"Added edge {edge.source} → {edge.target} ({edge.weight})")

	def remove_node (self, node_id: int) -> None:

		"""
		Remove the node with this id.  Does nothing if it is absent.

		Edges that reference the node are kept.  If the node was the current
		position, the current position is cleared.
		"""

		count = len(self._nodes)
		self._nodes = [node for node in self._nodes if node.id != node_id]

		logger.debug(f"Removed node {node_id} ({count - len(self._nodes)} matched)")

		if self._current_node == node_id:
			self._current_node = None
			logger.info(f"Current node {node_id} removed; current position cleared")

	def remove_edge (self, source: int, target: int) -> None:

		"""Remove every edge from ``source`` to ``target``.  Does nothing if there are none."""

		count = len(self._edges)
		self._edges = [edge for edge in self._edges if not (edge.source == source and edge.target == target)]

		logger.debug(f"Removed edge {source} → {target} ({count - len(self._edges)} matched)")

	def get_node (self, node_id: int) -> typing.Optional[markov_generator.node.Node]:

		"""Return the node with this id, or ``None``."""

		for node in self._nodes:
			if node.id == node_id:
				return node

		return None

	def get_edge (self, source: int, target: int) -> typing.Optional[markov_generator.edge.Edge]:

		"""Return the first edge from ``source`` to ``target``, or ``None``."""

		for edge in self._edges:
			if edge.source == source and edge.target == target:
				return edge

		return None

	def get_edge_from (self, node_id: int) -> typing.Optional[markov_generator.edge.Edge]:

		"""Return the first edge leaving ``node_id``, or ``None``."""

		for edge in self._edges:
			if edge.source == node_id:
				return edge

		return None

	def get_edge_to (self, node_id: int) -> typing.Optional[markov_generator.edge.Edge]:

		"""Return the first edge entering ``node_id``, or ``None``."""

		for edge in self._edges:
			if edge.target == node_id:
				return edge

		return None

	def add_node_actions (self, node_id: int, actions: typing.Iterable[markov_generator.action.Action]) -> None:

		"""Append actions to a node.  Does nothing if the node is absent."""

		node = self.get_node(node_id)

		if node is None:
			logger.debug(f"Ignoring actions for missing node {node_id}")
			return

		actions = list(actions)

		for action in actions:
			if not isinstance(action, markov_generator.action.Action):
				raise ValueError(f"Node actions must be Action instances, got {type(action).__name__}")

		node.actions.extend(actions)

	def get_node_actions (self, node_id: int) -> typing.Optional[typing.List[markov_generator.action.Action]]:

		"""Return the actions of a node, or ``None`` if the node is absent."""

		node = self.get_node(node_id)

		if node is None:
			return None

		return node.actions

	def get_node_action (self, node_id: int, action_id: int) -> typing.Optional[markov_generator.action.Action]:

		"""Return the first action with ``action_id`` on a node, or ``None`` if either is absent."""

		actions = self.get_node_actions(node_id)

		if actions is None:
			return None

		for action in actions:
			if action.id == action_id:
				return action

		return None

	def get_node_edges (self, node_id: int) -> typing.List[markov_generator.edge.Edge]:

		"""
		Return every edge leaving a node, in insertion order.

		Raises ``NodeDoesNotExistError`` if the node is absent.
		"""

		if not self.node_exists(node_id):
			raise markov_generator.errors.NodeDoesNotExistError(f"Node {node_id} does not exist")

		return [edge for edge in self._edges if edge.source == node_id]

	def node_exists (self, node_id: int) -> bool:

		"""Return True if a node with this id is present."""

		return any(node.id == node_id for node in self._nodes)

	def edge_exists (self, source: int, target: int) -> bool:

		"""Return True if at least one edge runs from ``source`` to ``target``."""

		return any(edge.source == source and edge.target == target for edge in self._edges)

	def set_current_node (self, node_id: int) -> None:

		"""
		Set the current position.

		Raises ``NodeDoesNotExistError`` (leaving the position unchanged) if
		the node is absent.
		"""

		if not self.node_exists(node_id):
			raise markov_generator.errors.NodeDoesNotExistError(f"Node {node_id} does not exist")

		self._current_node = node_id

	def get_current_node (self) -> typing.Optional[int]:

		"""Return the current position, or ``None`` if it is not set."""

		return self._current_node

	def next (self, rng: typing.Optional[RandomSource] = None) -> int:

		"""
		Move to a neighbour of the current node and return its id.

		The outgoing edge is chosen with probability ``weight / total_weight``.
		On failure the current position is unchanged.

		Parameters:
			rng: Random source for this call only.  Defaults to ``self.rng``.

		Raises:
			NodeDoesNotExistError: No current position is set, or it names a
				node that is not in the chain (an edge target outside it).
			NodeHasNoEdgesError: The current node has no outgoing edges.
			TransitionFailedError: Weighted selection picked no edge.
		"""

		if self._current_node is None:
			raise markov_generator.errors.NodeDoesNotExistError("No current node is set")

		edges = self.get_node_edges(self._current_node)

		if not edges:
			raise markov_generator.errors.NodeHasNoEdgesError(f"Node {self._current_node} has no outgoing edges")

		edge = choose_weighted_edge(edges, rng if rng is not None else self.rng)

		logger.debug(f"Transition {edge.source} → {edge.target}")

		self._current_node = edge.target

		return self._current_node

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the serialized form of the chain."""

		return {
			"nodes": [node.to_dict() for node in self._nodes],
			"edges": [edge.to_dict() for edge in self._edges],
			"current_node": self._current_node,
		}

	def to_json (self, indent: typing.Optional[int] = None) -> str:

		"""
		Return the chain as JSON text.

		Raises ``ValueError`` if an edge weight is not finite, since JSON has
		no representation for it.
		"""

		return markov_generator.serialization.dumps(self.to_dict(), indent=indent)

	@classmethod
	def from_dict (cls, data: typing.Any, rng: typing.Optional[RandomSource] = None) -> "MarkovChain":

		"""
		Build a chain from its serialized form.

		Raises ``ParseError`` if the shape is wrong or if two nodes share an id.
		``current_node`` is restored as written, even when it is an edge target
		that is not one of the nodes, since :meth:`next` can leave the chain there.
		"""

		data = markov_generator.serialization.require_mapping(data, "chain")
		nodes = [markov_generator.node.Node.from_dict(item) for item in markov_generator.serialization.require_list(data, "nodes", "chain")]
		edges = [markov_generator.edge.Edge.from_dict(item) for item in markov_generator.serialization.require_list(data, "edges", "chain")]

		try:
			chain = cls(nodes, edges, rng=rng)
		except markov_generator.errors.DuplicateNodeError as exc:
			raise markov_generator.errors.ParseError(f"Invalid chain: {exc}") from exc

		# An absent current_node reads as null.
		current_node = data.get("current_node")

		if current_node is not None:

			if not markov_generator.serialization.is_valid_id(current_node):
				raise markov_generator.errors.ParseError(f"Field 'current_node' in chain must be a node id or null, got {current_node!r}")

			chain._current_node = current_node

		return chain

	@classmethod
	def from_json (cls, text: typing.Union[str, bytes], rng: typing.Optional[RandomSource] = None) -> "MarkovChain":

		"""Parse a chain from JSON text, raising ``ParseError`` if it is malformed."""

		return cls.from_dict(markov_generator.serialization.loads_object(text, "chain"), rng=rng)
