from .config import SimulationConfig, ConfigResolver, ConfigError, resolve

__version__ = "0.1.0"
