from .errors import ConfigError, InvalidValue, UnknownColor, OutOfRange
from .colors import COLOR_TABLE, resolve_color, normalize_color_name
from .simulation_config import Color, SimulationConfig
from .resolver import ConfigResolver, FLAGS, resolve
