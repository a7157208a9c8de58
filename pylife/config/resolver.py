import logging
import math
from pathlib import Path

from ..files import DEFAULTS
from .colors import resolve_color
from .errors import InvalidValue, OutOfRange
from .simulation_config import SimulationConfig

logger = logging.getLogger(__name__)

FLAGS = ("file", "steps", "rate", "height", "width", "alive", "dead", "grid")

# Order matters: the first failing flag is the one reported
NUMERIC_FLAGS = {
    "steps": int,
    "rate": float,
    "height": int,
    "width": int,
}
COLOR_FLAGS = ("alive", "dead")


class ConfigResolver:
    """
    Turns raw command line values into a validated SimulationConfig.

    Raw values are strings (or None when the flag is absent), except for
    'grid' which is presence-only and is read as a boolean. Resolution
    stops at the first error, which is raised as a ConfigError subclass.
    """

    def __init__(self, defaults=None):
        """
        Params :
        defaults : dict, optional overrides of pylife.files.DEFAULTS, in raw (textual) form
        """
        self.defaults = dict(DEFAULTS)
        if defaults is not None:
            self._check_flags(defaults)
            self.defaults.update(defaults)

    def resolve(self, raw_args) -> SimulationConfig:
        """
        Params :
        raw_args : mapping flag name -> raw value (str, or None if absent)

        Returns SimulationConfig, raises InvalidValue, UnknownColor or OutOfRange.
        """
        self._check_flags(raw_args)
        raw = self._with_defaults(raw_args)

        numbers = {flag: self._parse_number(flag, raw[flag], kind) for flag, kind in NUMERIC_FLAGS.items()}
        colors = {flag: resolve_color(str(raw[flag]), flag) for flag in COLOR_FLAGS}
        self._check_ranges(numbers)

        file_raw = raw["file"]
        file_path = Path(file_raw) if file_raw else None

        return SimulationConfig(
            file_path=file_path,
            steps=numbers["steps"],
            rate_seconds=numbers["rate"],
            height_px=numbers["height"],
            width_px=numbers["width"],
            alive_color=colors["alive"],
            dead_color=colors["dead"],
            show_grid=bool(raw["grid"]),
        )

    def _check_flags(self, mapping):
        for flag in mapping:
            if flag not in FLAGS:
                raise InvalidValue(flag, mapping[flag], "unknown flag")

    def _with_defaults(self, raw_args):
        raw = {}
        for flag in FLAGS:
            value = raw_args.get(flag)
            if value is None or (flag == "grid" and not value):
                value = self.defaults[flag]
                logger.debug("--%s not given, using default %r", flag, value)
            raw[flag] = value
        return raw

    @staticmethod
    def _parse_number(flag, value, kind):
        if isinstance(value, bool):
            raise InvalidValue(flag, value, f"expected {kind.__name__}")
        if not isinstance(value, str):
            value = str(value)
        try:
            return kind(value.strip())
        except ValueError:
            raise InvalidValue(flag, value, f"expected {'an integer' if kind is int else 'a number'}") from None

    @staticmethod
    def _check_ranges(numbers):
        if numbers["steps"] < 0:
            raise OutOfRange("steps", numbers["steps"], "must be 0 or more, 0 runs forever")
        rate = numbers["rate"]
        if not (math.isfinite(rate) and rate > 0):
            raise OutOfRange("rate", rate, "must be a positive number of seconds")
        for flag in ("height", "width"):
            if numbers[flag] <= 0:
                raise OutOfRange(flag, numbers[flag], "must be a positive number of pixels")


def resolve(raw_args, defaults=None) -> SimulationConfig:
    """Shorthand for ConfigResolver(defaults).resolve(raw_args)."""
    return ConfigResolver(defaults).resolve(raw_args)
