class ConfigError(ValueError):
    """
    Base class for every error raised while turning command line
    input into a SimulationConfig.

    Attributes:
    flag : str, name of the offending flag (e.g. 'rate')
    value : the offending raw text or parsed value
    """

    def __init__(self, flag, value, reason=None):
        self.flag = flag
        self.value = value
        self.reason = reason
        super().__init__(self._message())

    def _message(self):
        msg = f"invalid value {self.value!r} for --{self.flag}"
        if self.reason:
            msg += f": {self.reason}"
        return msg


class InvalidValue(ConfigError):
    """Raw text of a flag could not be parsed to the expected type."""


class UnknownColor(ConfigError):
    """Color name is not in the named-color table."""

    def _message(self):
        return f"unknown color {self.value!r} for --{self.flag} (see --list-colors)"


class OutOfRange(ConfigError):
    """Parsed value violates a domain constraint, e.g. a non-positive rate."""

    def _message(self):
        msg = f"value {self.value!r} for --{self.flag} is out of range"
        if self.reason:
            msg += f" ({self.reason})"
        return msg
