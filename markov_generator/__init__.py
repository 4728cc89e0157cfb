"""
markov_generator - weighted Markov chains with per-node actions.

A chain is a directed graph: nodes carry lists of actions (arbitrary
structured payloads), and edges carry weights.  Set a current node, then
call ``next()`` to follow one outgoing edge, picked with probability
proportional to its weight.

- **Plain data.** ``Node``, ``Edge`` and ``Action`` are dataclasses that
  serialize to and from a fixed JSON layout.
- **Injectable randomness.** Any object with a ``random()`` method can drive
  transitions, so tests can script every choice.
- **Distinct failures.** A missing node, a dead end, and a failed draw each
  raise their own exception; lookups that find nothing return ``None``.

Minimal example:

    ```python
    import markov_generator

    chain = markov_generator.MarkovChain()
    chain.add_nodes([markov_generator.Node(1), markov_generator.Node(2)])
    chain.add_node_actions(2, [markov_generator.Action(10, {"say": "hello"})])
    chain.add_edge(markov_generator.Edge(1, 2, 1.0))

    chain.set_current_node(1)
    node_id = chain.next()
    print(chain.get_node_actions(node_id))
    print(chain.to_json())
    ```

Run ``python -m markov_generator`` to print the built-in sample chain.

Package-level exports: ``MarkovChain``, ``Node``, ``Edge``, ``Action`` and
the exceptions from :mod:`markov_generator.errors`.
"""

import markov_generator.action
import markov_generator.edge
import markov_generator.errors
import markov_generator.markov_chain
import markov_generator.node


Action = markov_generator.action.Action
Edge = markov_generator.edge.Edge
Node = markov_generator.node.Node
MarkovChain = markov_generator.markov_chain.MarkovChain

MarkovChainError = markov_generator.errors.MarkovChainError
NodeDoesNotExistError = markov_generator.errors.NodeDoesNotExistError
EdgeDoesNotExistError = markov_generator.errors.EdgeDoesNotExistError
ActionDoesNotExistError = markov_generator.errors.ActionDoesNotExistError
NodeHasNoEdgesError = markov_generator.errors.NodeHasNoEdgesError
TransitionFailedError = markov_generator.errors.TransitionFailedError
StuckError = markov_generator.errors.StuckError
DuplicateNodeError = markov_generator.errors.DuplicateNodeError
ParseError = markov_generator.errors.ParseError
