import argparse
import logging
import typing

import markov_generator.action
import markov_generator.config
import markov_generator.edge
import markov_generator.errors
import markov_generator.markov_chain
import markov_generator.node


logger = logging.getLogger(__name__)


def build_sample_chain (rng: typing.Optional[markov_generator.markov_chain.RandomSource] = None) -> markov_generator.markov_chain.MarkovChain:

	"""
	Build the three-node sample chain.

	Node 1 carries action 100 and node 2 carries actions 200 and 300.  Node 3
	branches back to 1 (weight 0.8) or to 2 (weight 0.4).
	"""

	chain = markov_generator.markov_chain.MarkovChain(rng=rng)

	chain.add_nodes([
		markov_generator.node.Node(1),
		markov_generator.node.Node(2),
		markov_generator.node.Node(3),
	])

	chain.add_node_actions(1, [markov_generator.action.Action(100, 100.5)])
	chain.add_node_actions(2, [markov_generator.action.Action(200, 200.5), markov_generator.action.Action(300, 300.5)])

	chain.add_edge(markov_generator.edge.Edge(1, 2, 0.2))
	chain.add_edge(markov_generator.edge.Edge(2, 3, 0.4))
	chain.add_edge(markov_generator.edge.Edge(3, 1, 0.8))
	chain.add_edge(markov_generator.edge.Edge(3, 2, 0.4))

	return chain


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Build the sample chain, optionally advance it, and print it as JSON.
	"""

	parser = argparse.ArgumentParser(description="Print the sample Markov chain as JSON")
	parser.add_argument("--config", default=markov_generator.config.DEFAULT_CONFIG_PATH, help="YAML config file (default: config.yaml)")
	parser.add_argument("--start", type=int, default=None, help="Node id to set as the current node")
	parser.add_argument("--steps", type=int, default=0, help="Number of transitions to take from --start (default: 0)")
	args = parser.parse_args(argv)

	if args.steps < 0:
		parser.error("--steps must not be negative")

	if args.steps and args.start is None:
		parser.error("--steps requires --start")

	settings = markov_generator.config.load_config(args.config)
	markov_generator.config.configure_logging(settings)

	chain = build_sample_chain(rng=settings.make_rng())

	try:
		if args.start is not None:
			chain.set_current_node(args.start)

		for _ in range(args.steps):
			node_id = chain.next()
			actions = chain.get_node_actions(node_id) or []
			logger.info(f"Visited node {node_id}: {[action.value for action in actions]}")

	except markov_generator.errors.MarkovChainError as exc:
		logger.error(f"Transition failed: {exc}")
		return 1

	print(chain.to_json(indent=settings.indent))

	return 0


if __name__ == "__main__":
	raise SystemExit(main())
