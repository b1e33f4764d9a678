"""
The property bag applied to a menu node.

Configuration reaches the menu as plain mappings (static entries, module
contributions, parsed config sections). ``MenuProperties`` is the validated
form of such a mapping: exactly four optional fields, checked against an
allow-list when the mapping is converted.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields

from .exceptions import ConfigurationError

PROPERTY_KEYS = ("url", "icon", "priority", "title")


def coerce_priority(value):
    """Return *value* as an int, raising ``ConfigurationError`` if it is not one."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            "priority", f'Menu got invalid priority "{value}"'
        ) from None


@dataclass(frozen=True)
class MenuProperties:
    """Optional url, icon, priority and title of a menu node."""
    url: str = None
    icon: str = None
    priority: int = None
    title: str = None

    def __post_init__(self):
        if self.priority is not None:
            object.__setattr__(self, "priority", coerce_priority(self.priority))

    @classmethod
    def from_mapping(cls, props=None):
        """
        Build a property bag from *props*.

        *props* may be ``None``, an existing ``MenuProperties`` (returned
        as is) or any mapping. Keys are matched case-insensitively; a key
        outside ``PROPERTY_KEYS`` raises ``ConfigurationError``.
        """
        if props is None:
            return cls()
        if isinstance(props, cls):
            return props
        if not isinstance(props, Mapping):
            props = dict(props)

        values = {}
        for key, value in props.items():
            name = str(key).lower()
            if name not in PROPERTY_KEYS:
                raise ConfigurationError(key)
            values[name] = value
        return cls(**values)

    def as_dict(self):
        """Return the fields that are set, in ``PROPERTY_KEYS`` order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


__all__ = [
    "MenuProperties",
    "PROPERTY_KEYS",
    "coerce_priority",
]
