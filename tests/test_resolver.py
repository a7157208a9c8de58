from pathlib import Path

import pytest

from pylife.config import (
    ConfigResolver,
    InvalidValue,
    OutOfRange,
    UnknownColor,
    resolve,
)


def test_defaults_when_no_flags():
    config = resolve({})

    assert config.height_px == 768
    assert config.width_px == 1024
    assert config.steps == 0
    assert config.rate_seconds == 1.0
    assert config.show_grid is False
    assert config.file_path is None
    assert config.alive_color.name == "black"
    assert config.dead_color.name == "white"
    assert config.unbounded


def test_none_values_count_as_absent():
    config = resolve({flag: None for flag in ("file", "steps", "rate", "height", "width", "alive", "dead", "grid")})

    assert config == resolve({})


def test_height_width_grid_scenario():
    config = resolve({"height": "600", "width": "800", "grid": True})

    assert config.height_px == 600
    assert config.width_px == 800
    assert config.show_grid is True
    assert config.steps == 0
    assert config.rate_seconds == 1.0
    assert config.file_path is None
    assert config.window_size == (800, 600)


@pytest.mark.parametrize("flag, raw, attr, expected", [
    ("steps", "25", "steps", 25),
    ("steps", " 7 ", "steps", 7),
    ("rate", "0.25", "rate_seconds", 0.25),
    ("rate", "3", "rate_seconds", 3.0),
    ("height", "1", "height_px", 1),
    ("width", "1920", "width_px", 1920),
])
def test_numeric_values_are_kept_exactly(flag, raw, attr, expected):
    config = resolve({flag: raw})

    assert getattr(config, attr) == expected


@pytest.mark.parametrize("flag", ["steps", "rate", "height", "width"])
@pytest.mark.parametrize("raw", ["abc", "", "1e", "twelve"])
def test_non_numeric_is_invalid_value(flag, raw):
    with pytest.raises(InvalidValue) as exc_info:
        resolve({flag: raw})

    assert exc_info.value.flag == flag
    assert exc_info.value.value == raw
    assert f"--{flag}" in str(exc_info.value)


@pytest.mark.parametrize("flag", ["steps", "height", "width"])
def test_integer_flags_reject_decimals(flag):
    with pytest.raises(InvalidValue) as exc_info:
        resolve({flag: "600.5"})

    assert exc_info.value.flag == flag


@pytest.mark.parametrize("raw", ["0", "-1", "-0.5", "nan", "inf"])
def test_bad_rate_is_out_of_range(raw):
    with pytest.raises(OutOfRange) as exc_info:
        resolve({"rate": raw})

    assert exc_info.value.flag == "rate"


def test_negative_steps_is_out_of_range():
    with pytest.raises(OutOfRange) as exc_info:
        resolve({"steps": "-1"})

    assert exc_info.value.flag == "steps"
    assert exc_info.value.value == -1


@pytest.mark.parametrize("flag", ["height", "width"])
@pytest.mark.parametrize("raw", ["0", "-10"])
def test_non_positive_dimensions_are_out_of_range(flag, raw):
    with pytest.raises(OutOfRange) as exc_info:
        resolve({flag: raw})

    assert exc_info.value.flag == flag


@pytest.mark.parametrize("flag", ["alive", "dead"])
def test_unknown_color(flag):
    with pytest.raises(UnknownColor) as exc_info:
        resolve({flag: "notacolor"})

    assert exc_info.value.flag == flag
    assert exc_info.value.value == "notacolor"


def test_colors_are_resolved_to_rgb():
    config = resolve({"alive": "RED", "dead": "Dark Green"})

    assert config.alive_color.name == "red"
    assert config.alive_color.rgb == (255, 0, 0)
    assert config.dead_color.name == "darkgreen"
    assert config.dead_color.rgb == (0, 100, 0)


def test_file_path():
    config = resolve({"file": "patterns/glider.txt"})

    assert config.file_path == Path("patterns/glider.txt")


def test_empty_file_means_default_pattern():
    assert resolve({"file": ""}).file_path is None


def test_first_error_wins():
    # steps is parsed before width, colors come after all numbers
    with pytest.raises(InvalidValue) as exc_info:
        resolve({"width": "wide", "steps": "many", "alive": "nope"})
    assert exc_info.value.flag == "steps"

    with pytest.raises(UnknownColor):
        resolve({"alive": "nope", "rate": "0"})


def test_unknown_flag_is_rejected():
    with pytest.raises(InvalidValue) as exc_info:
        resolve({"hieght": "600"})

    assert exc_info.value.flag == "hieght"


def test_custom_defaults():
    resolver = ConfigResolver(defaults={"rate": "0.1", "alive": "green"})
    config = resolver.resolve({})

    assert config.rate_seconds == 0.1
    assert config.alive_color.name == "green"
    assert config.width_px == 1024


def test_invalid_custom_default_is_reported():
    with pytest.raises(OutOfRange):
        ConfigResolver(defaults={"rate": "0"}).resolve({})
