import pytest

from symposium.config import Config, ConfigError, parse_config


def test_parse_four_arguments():
    config = parse_config(["5", "800", "200", "200"])
    assert config == Config(5, 800, 200, 200, None)


def test_parse_with_rounds():
    config = parse_config(["4", "410", "200", "200", "7"])
    assert config.rounds == 7
    assert config.philosophers == 4


def test_minus_one_rounds_means_unlimited():
    config = parse_config(["4", "410", "200", "200", "-1"])
    assert config.rounds is None


def test_zero_eat_and_sleep_allowed():
    config = parse_config(["2", "100", "0", "0"])
    assert (config.time_to_eat, config.time_to_sleep) == (0, 0)


def test_lenient_number_parsing():
    config = parse_config([" +3x", "300", "100", "100"])
    assert config.philosophers == 3


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
    ],
)
def test_wrong_argument_count(args):
    with pytest.raises(ConfigError):
        parse_config(args)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["-2", "800", "200", "200"],
        ["abc", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "-1", "200"],
        ["5", "800", "200", "-1"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "200", "-2"],
    ],
)
def test_invalid_values(args):
    with pytest.raises(ConfigError):
        parse_config(args)


def test_config_validates_directly():
    with pytest.raises(ConfigError):
        Config(1, 100, 10, 10, rounds=0)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        Config(0, 100, 10, 10)