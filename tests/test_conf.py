import pytest
from django.core.exceptions import ImproperlyConfigured

from calculator.conf import calculator_settings


def test_defaults(settings):
    settings.CALCULATOR = None
    assert calculator_settings.INTEGER_BITS is None
    assert calculator_settings.SHOW_BANNER is True


def test_overrides(settings):
    settings.CALCULATOR = {"INTEGER_BITS": "16", "SHOW_BANNER": False}
    assert calculator_settings.INTEGER_BITS == 16
    assert calculator_settings.SHOW_BANNER is False


@pytest.mark.parametrize("bits", [0, -8, "many"])
def test_bad_integer_bits(settings, bits):
    settings.CALCULATOR = {"INTEGER_BITS": bits}
    with pytest.raises(ImproperlyConfigured):
        calculator_settings.INTEGER_BITS


def test_unknown_setting(settings):
    settings.CALCULATOR = {"PRECISION": 2}
    with pytest.raises(ImproperlyConfigured):
        calculator_settings.SHOW_BANNER


def test_invalid_attribute():
    with pytest.raises(AttributeError):
        calculator_settings.PRECISION
