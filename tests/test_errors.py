import pytest

import markov_generator
import markov_generator.errors


@pytest.mark.parametrize("error_class", [
	markov_generator.errors.NodeDoesNotExistError,
	markov_generator.errors.EdgeDoesNotExistError,
	markov_generator.errors.ActionDoesNotExistError,
	markov_generator.errors.NodeHasNoEdgesError,
	markov_generator.errors.TransitionFailedError,
	markov_generator.errors.StuckError,
	markov_generator.errors.DuplicateNodeError,
	markov_generator.errors.ParseError,
])
def test_errors_share_a_base (error_class: type) -> None:

	"""Every chain error can be caught as MarkovChainError."""

	assert issubclass(error_class, markov_generator.errors.MarkovChainError)


def test_errors_are_distinct () -> None:

	"""A missing node and a dead end are different failures."""

	assert not issubclass(markov_generator.errors.NodeDoesNotExistError, markov_generator.errors.NodeHasNoEdgesError)
	assert not issubclass(markov_generator.errors.NodeHasNoEdgesError, markov_generator.errors.NodeDoesNotExistError)


def test_package_exports () -> None:

	"""The main types are available from the package root."""

	assert markov_generator.MarkovChain is markov_generator.markov_chain.MarkovChain
	assert markov_generator.ParseError is markov_generator.errors.ParseError
	assert markov_generator.Action(1).value is None
