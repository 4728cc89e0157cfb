import logging
import random

import markov_generator

logging.basicConfig(level=logging.INFO)

SUNNY = 1
CLOUDY = 2
RAINY = 3

chain = markov_generator.MarkovChain(rng=random.Random(2024))

chain.add_nodes([
	markov_generator.Node(SUNNY, [markov_generator.Action(10, {"forecast": "sunny", "umbrella": False})]),
	markov_generator.Node(CLOUDY, [markov_generator.Action(20, {"forecast": "cloudy", "umbrella": False})]),
	markov_generator.Node(RAINY, [markov_generator.Action(30, {"forecast": "rain", "umbrella": True})]),
])

# Weather tends to persist from one day to the next.
chain.add_edge(markov_generator.Edge(SUNNY, SUNNY, 0.7))
chain.add_edge(markov_generator.Edge(SUNNY, CLOUDY, 0.3))
chain.add_edge(markov_generator.Edge(CLOUDY, SUNNY, 0.3))
chain.add_edge(markov_generator.Edge(CLOUDY, CLOUDY, 0.3))
chain.add_edge(markov_generator.Edge(CLOUDY, RAINY, 0.4))
chain.add_edge(markov_generator.Edge(RAINY, CLOUDY, 0.5))
chain.add_edge(markov_generator.Edge(RAINY, RAINY, 0.5))

chain.set_current_node(SUNNY)

for day in range(1, 8):
	node_id = chain.next()
	forecast = chain.get_node_action(node_id, node_id * 10)
	logging.info(f"Day {day}: {forecast.value['forecast']} (umbrella: {forecast.value['umbrella']})")

print(chain.to_json(indent=2))
