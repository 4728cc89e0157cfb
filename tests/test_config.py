import logging
import os
import random

import pytest

import markov_generator.config


def _write (tmp_path, text: str) -> str:

	"""Write a config file and return its path."""

	path = os.path.join(tmp_path, "config.yaml")

	with open(path, "w") as f:
		f.write(text)

	return path


def test_missing_file_uses_defaults (tmp_path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing config file falls back to defaults with a warning."""

	with caplog.at_level(logging.WARNING):
		settings = markov_generator.config.load_config(os.path.join(tmp_path, "absent.yaml"))

	assert settings == markov_generator.config.Settings()
	assert "not found" in caplog.text


def test_empty_file_uses_defaults (tmp_path) -> None:

	"""An empty YAML document gives the defaults."""

	settings = markov_generator.config.load_config(_write(tmp_path, ""))

	assert settings.log_level == "INFO"
	assert settings.indent is None
	assert settings.seed is None


def test_values_are_read (tmp_path) -> None:

	"""All recognised keys are read; unknown keys are ignored."""

	path = _write(tmp_path, "logging:\n  level: debug\noutput:\n  indent: 2\nrandom:\n  seed: 42\nextra: true\n")
	settings = markov_generator.config.load_config(path)

	assert settings.log_level == "DEBUG"
	assert settings.indent == 2
	assert settings.seed == 42


def test_seeded_rng_is_repeatable () -> None:

	"""A configured seed gives the same draws as random.Random with that seed."""

	settings = markov_generator.config.Settings(seed=7)

	assert settings.make_rng().random() == random.Random(7).random()


@pytest.mark.parametrize("text", [
	"- a\n- b\n",
	"logging: loud\n",
	"logging:\n  level: SHOUTING\n",
	"output:\n  indent: -1\n",
	"output:\n  indent: wide\n",
	"random:\n  seed: 1.5\n",
])
def test_invalid_config_raises (tmp_path, text: str) -> None:

	"""Malformed sections or values raise ValueError."""

	with pytest.raises(ValueError):
		markov_generator.config.load_config(_write(tmp_path, text))
