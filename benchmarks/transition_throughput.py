"""Markov chain transition benchmark.

Builds a random chain and times repeated ``next()`` calls, reporting
per-transition latency and how closely the observed transition frequencies
from one node match its edge weights.

Usage:
    python benchmarks/transition_throughput.py [--nodes N] [--fanout K]
                                               [--steps S] [--seed SEED]

Options:
    --nodes N       Number of nodes in the chain (default: 200)
    --fanout K      Outgoing edges per node (default: 8)
    --steps S       Transitions to time (default: 20000)
    --seed SEED     Seed for graph construction and sampling (default: 1)
"""

import argparse
import logging
import random
import statistics
import time

# Keep transition logging out of the timings.
logging.basicConfig(level=logging.ERROR)

import markov_generator


def _build_chain (nodes: int, fanout: int, rng: random.Random) -> markov_generator.MarkovChain:

	"""Build a chain where every node has *fanout* weighted edges to random nodes."""

	chain = markov_generator.MarkovChain(rng=rng)
	chain.add_nodes(markov_generator.Node(node_id) for node_id in range(nodes))

	for node_id in range(nodes):
		for target in rng.sample(range(nodes), min(fanout, nodes)):
			chain.add_edge(markov_generator.Edge(node_id, target, rng.uniform(0.1, 1.0)))

	return chain


def _run_benchmark (chain: markov_generator.MarkovChain, steps: int) -> list[float]:

	"""Walk the chain for *steps* transitions and return per-call latency (seconds)."""

	timings: list[float] = []
	chain.set_current_node(0)

	for _ in range(steps):
		start = time.perf_counter()
		chain.next()
		timings.append(time.perf_counter() - start)

	return timings


def _frequency_error (chain: markov_generator.MarkovChain, samples: int) -> float:

	"""Return the largest gap between observed and expected transition frequency from node 0."""

	edges = chain.get_node_edges(0)
	total_weight = sum(edge.weight for edge in edges)

	expected: dict[int, float] = {}
	for edge in edges:
		expected[edge.target] = expected.get(edge.target, 0.0) + edge.weight / total_weight

	observed: dict[int, int] = {}
	for _ in range(samples):
		chain.set_current_node(0)
		target = chain.next()
		observed[target] = observed.get(target, 0) + 1

	return max(abs(observed.get(target, 0) / samples - share) for target, share in expected.items())


def _print_report (timings: list[float], error: float, nodes: int, fanout: int) -> None:

	us = [t * 1e6 for t in timings]

	print(f"\nTransition Benchmark — {nodes} nodes, {fanout} edges per node")
	print(f"{'─' * 62}")
	print(f"  Transitions     : {len(us)}")
	print(f"  Mean latency    : {statistics.mean(us):>8.2f} μs")
	print(f"  Median latency  : {statistics.median(us):>8.2f} μs")
	print(f"  P99 latency     : {sorted(us)[int(len(us) * 0.99)]:>8.2f} μs")
	print(f"  Max latency     : {max(us):>8.2f} μs")
	print(f"{'─' * 62}")
	print(f"  Max frequency error from node 0 : {error:.4f}")
	print()


def main () -> None:

	parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("--nodes",  type=int, default=200,   help="Number of nodes (default: 200)")
	parser.add_argument("--fanout", type=int, default=8,     help="Outgoing edges per node (default: 8)")
	parser.add_argument("--steps",  type=int, default=20000, help="Transitions to time (default: 20000)")
	parser.add_argument("--seed",   type=int, default=1,     help="Random seed (default: 1)")
	args = parser.parse_args()

	rng = random.Random(args.seed)
	chain = _build_chain(args.nodes, args.fanout, rng)

	timings = _run_benchmark(chain, args.steps)
	error = _frequency_error(chain, args.steps)

	_print_report(timings, error, args.nodes, args.fanout)


if __name__ == "__main__":
	main()
