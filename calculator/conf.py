"""
Calculator settings, read from the ``CALCULATOR`` dict in Django settings.
"""
from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS: Dict[str, Any] = {
    # None keeps Python's unbounded integers; 32 mimics machine ints
    "INTEGER_BITS": None,
    "SHOW_BANNER": True,
}


class CalculatorSettings:
    """Lazy view over ``settings.CALCULATOR`` with defaults filled in."""

    def __init__(self, defaults=None):
        self.defaults = defaults or DEFAULTS

    @property
    def user_settings(self) -> Dict[str, Any]:
        configured = getattr(settings, "CALCULATOR", None) or {}
        unknown = set(configured) - set(self.defaults)
        if unknown:
            raise ImproperlyConfigured(
                f"Unknown CALCULATOR setting(s): {', '.join(sorted(unknown))}"
            )
        return configured

    def __getattr__(self, attr):
        if attr not in self.defaults:
            raise AttributeError(f"Invalid calculator setting: '{attr}'")
        value = self.user_settings.get(attr, self.defaults[attr])
        if attr == "INTEGER_BITS":
            value = self._check_integer_bits(value)
        return value

    @staticmethod
    def _check_integer_bits(value):
        if value is None:
            return None
        try:
            bits = int(value)
        except (TypeError, ValueError):
            raise ImproperlyConfigured(f"CALCULATOR['INTEGER_BITS'] must be an integer, got {value!r}")
        if bits <= 0:
            raise ImproperlyConfigured("CALCULATOR['INTEGER_BITS'] must be positive")
        return bits


calculator_settings = CalculatorSettings()
