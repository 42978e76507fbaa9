import dataclasses

import pytest

from philosophers.config import (
    PHILO_MAX,
    ConfigError,
    Settings,
    is_valid_number,
    parse_settings,
)


@pytest.mark.parametrize("text", ["0", "5", "200", "007", ""])
def test_is_valid_number_accepts_digits(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", ["-1", "+1", "1.5", " 3", "12a", "٣"])
def test_is_valid_number_rejects_non_digits(text):
    assert is_valid_number(text) is False


def test_parse_settings_four_arguments():
    settings = parse_settings(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_settings_with_meal_limit():
    settings = parse_settings(["4", "410", "200", "100", "7"])
    assert settings.number_of_philosophers == 4
    assert settings.time_to_die == 410
    assert settings.time_to_eat == 200
    assert settings.time_to_sleep == 100
    assert settings.meals_required == 7


def test_meal_limit_zero_is_allowed():
    assert parse_settings(["2", "100", "50", "50", "0"]).meals_required == 0


def test_philosopher_limit_is_inclusive():
    settings = parse_settings([str(PHILO_MAX), "100", "50", "50"])
    assert settings.number_of_philosophers == PHILO_MAX


def test_philosopher_limit_exceeded():
    with pytest.raises(ConfigError, match="Invalid number of philosophers"):
        parse_settings([str(PHILO_MAX + 1), "100", "50", "50"])


@pytest.mark.parametrize("count", ["0", "-3", "abc", "", "1x"])
def test_invalid_philosopher_count(count):
    with pytest.raises(ConfigError, match="Invalid number of philosophers"):
        parse_settings([count, "100", "50", "50"])


@pytest.mark.parametrize(
    "args, message",
    [
        (["2", "0", "50", "50"], "Invalid time to die"),
        (["2", "x", "50", "50"], "Invalid time to die"),
        (["2", "100", "0", "50"], "Invalid time to eat"),
        (["2", "100", "-5", "50"], "Invalid time to eat"),
        (["2", "100", "50", "0"], "Invalid time to sleep"),
        (["2", "100", "50", "5.5"], "Invalid time to sleep"),
        (["2", "100", "50", "50", "-1"], "Invalid meal limit"),
        (["2", "100", "50", "50", "many"], "Invalid meal limit"),
    ],
)
def test_invalid_values(args, message):
    with pytest.raises(ConfigError, match=message):
        parse_settings(args)


def test_first_invalid_argument_is_reported():
    with pytest.raises(ConfigError, match="Invalid number of philosophers"):
        parse_settings(["0", "0", "0", "0"])


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(args):
    with pytest.raises(ConfigError, match="Wrong argument count"):
        parse_settings(args)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        parse_settings(["1"])


def test_settings_are_immutable():
    settings = parse_settings(["3", "100", "50", "50"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.time_to_die = 1
    assert settings.time_to_die == 100