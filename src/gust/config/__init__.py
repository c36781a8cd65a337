from gust.config.loader import load_config, read_config
from gust.config.resolver import ConfigResolver, check_config, resolve_config

__all__ = ["ConfigResolver", "check_config", "load_config", "read_config", "resolve_config"]
