"""Reproducible population sampling."""

from .config import SamplerConfig, load_config
from .engine import SamplingEngine, SamplingError, sample_int

__version__ = "0.1.0"

__all__ = ["SamplerConfig", "SamplingEngine", "SamplingError", "load_config", "sample_int"]
