"""Config loading and schema."""

from .loader import ConfigLoadError, load_config
from .schema import SamplerConfig

__all__ = ["ConfigLoadError", "SamplerConfig", "load_config"]
