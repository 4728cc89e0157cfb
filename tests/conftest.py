import typing

import pytest

import markov_generator.action
import markov_generator.edge
import markov_generator.markov_chain
import markov_generator.node


class FakeRandom:

	"""Random source that replays a fixed list of draws."""

	def __init__ (self, values: typing.Sequence[float]) -> None:

		"""Store the draws to return, in order."""

		self.values = list(values)
		self.calls = 0

	def random (self) -> float:

		"""Return the next scripted draw."""

		value = self.values[self.calls % len(self.values)]
		self.calls += 1
		return value


@pytest.fixture
def fake_random () -> typing.Callable[..., FakeRandom]:

	"""Factory for scripted random sources."""

	def _make (*values: float) -> FakeRandom:
		return FakeRandom(values)

	return _make


@pytest.fixture
def test_nodes () -> typing.List[markov_generator.node.Node]:

	"""Three empty nodes with ids 1, 2 and 3."""

	return [markov_generator.node.Node(1), markov_generator.node.Node(2), markov_generator.node.Node(3)]


@pytest.fixture
def test_edges () -> typing.List[markov_generator.edge.Edge]:

	"""Node 1 branches evenly to 2 and 3; node 2 leads to 3."""

	return [
		markov_generator.edge.Edge(1, 2, 1.0),
		markov_generator.edge.Edge(1, 3, 1.0),
		markov_generator.edge.Edge(2, 3, 1.0),
	]


@pytest.fixture
def sample_chain () -> markov_generator.markov_chain.MarkovChain:

	"""The three-node chain printed by the sample program."""

	chain = markov_generator.markov_chain.MarkovChain()
	chain.add_nodes([markov_generator.node.Node(1), markov_generator.node.Node(2), markov_generator.node.Node(3)])

	chain.add_node_actions(1, [markov_generator.action.Action(100, 100.5)])
	chain.add_node_actions(2, [markov_generator.action.Action(200, 200.5), markov_generator.action.Action(300, 300.5)])

	chain.add_edge(markov_generator.edge.Edge(1, 2, 0.2))
	chain.add_edge(markov_generator.edge.Edge(2, 3, 0.4))
	chain.add_edge(markov_generator.edge.Edge(3, 1, 0.8))
	chain.add_edge(markov_generator.edge.Edge(3, 2, 0.4))

	return chain
