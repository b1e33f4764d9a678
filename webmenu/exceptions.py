"""
Exceptions raised while building the menu tree.
"""

from django.core.exceptions import ImproperlyConfigured


class ConfigurationError(ImproperlyConfigured):
    """A property bag handed to a menu node contains an unknown key or value."""

    def __init__(self, key, message=None):
        self.key = key
        super().__init__(message or f'Menu got invalid property "{key}"')


class ProgrammingError(Exception):
    """
    A caller asked for a sub menu that does not exist.

    Callers are expected to check ``has_sub_menu()`` first, so this always
    points at a bug rather than at bad configuration.
    """

    def __init__(self, menu_id):
        self.menu_id = menu_id
        super().__init__(f'Tried to get invalid sub menu "{menu_id}"')
