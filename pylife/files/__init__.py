from .default_configs import DEFAULTS
