"""
Configuration for the sample program.

Settings are read from a YAML file.  A missing file is not an error: the
defaults are used and a warning is logged.
"""

import dataclasses
import logging
import os
import random
import typing

import yaml


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config.yaml"


@dataclasses.dataclass
class Settings:

	"""
	Parsed configuration values.

	Attributes:
		log_level: Name of the logging level (``"DEBUG"``, ``"INFO"``, ...).
		indent: JSON indent for printed output, or ``None`` for one line.
		seed: Seed for a repeatable random source, or ``None`` for entropy.
	"""

	log_level: str = "INFO"
	indent: typing.Optional[int] = None
	seed: typing.Optional[int] = None

	def __post_init__ (self) -> None:

		if not isinstance(logging.getLevelName(self.log_level.upper()), int):
			raise ValueError(f"Unknown log level: {self.log_level!r}")

		self.log_level = self.log_level.upper()

		if self.indent is not None and (isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0):
			raise ValueError(f"output.indent must be a non-negative integer or null, got {self.indent!r}")

		if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
			raise ValueError(f"random.seed must be an integer or null, got {self.seed!r}")

	def make_rng (self) -> random.Random:

		"""Return a random source, seeded when a seed is configured."""

		return random.Random(self.seed)

	@classmethod
	def from_dict (cls, config: typing.Optional[typing.Dict[str, typing.Any]]) -> "Settings":

		"""
		Build settings from a loaded YAML document.

		Unknown keys are ignored.  Raises ``ValueError`` if a section is not a
		mapping or a value is invalid.
		"""

		if config is None:
			return cls()

		if not isinstance(config, dict):
			raise ValueError(f"Configuration must be a mapping, got {type(config).__name__}")

		logging_section = _section(config, "logging")
		output_section = _section(config, "output")
		random_section = _section(config, "random")

		return cls(
			log_level=str(logging_section.get("level", "INFO")),
			indent=output_section.get("indent"),
			seed=random_section.get("seed"),
		)


def _section (config: typing.Dict[str, typing.Any], name: str) -> typing.Dict[str, typing.Any]:

	"""Return a top-level section, treating an absent or empty one as ``{}``."""

	section = config.get(name)

	if section is None:
		return {}

	if not isinstance(section, dict):
		raise ValueError(f"Configuration section {name!r} must be a mapping")

	return section


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> Settings:

	"""
	Load settings from a YAML file, falling back to defaults if it does not exist.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return Settings()

	with open(config_path, 'r') as f:
		return Settings.from_dict(yaml.safe_load(f))


def configure_logging (settings: Settings) -> None:

	"""Configure the root logger at the configured level."""

	logging.basicConfig(level=settings.log_level)
