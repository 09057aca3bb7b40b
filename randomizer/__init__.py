"""Randomizer — scatter elements across a layout without overlap.

Modules:

  placer      the placement core (geometry, sampling, retry engine)
  config      defaults and the JSON config file
  controller  enable / resize / disable lifecycle around a live layout
  web         HTTP API over the placer
"""

from randomizer.config import DEFAULT_CONFIG, RandomizerConfig, load_config
from randomizer.controller import Randomizer

__all__ = ["DEFAULT_CONFIG", "RandomizerConfig", "load_config", "Randomizer"]
