"""
Menu contributions from modules.

A module is any object with a ``get_menu_items()`` method returning the
``MenuNode`` trees it wants merged into the main menu. Inside a Django
project the loaded modules are the installed apps whose ``AppConfig``
defines that method::

    class MonitoringConfig(AppConfig):
        name = "monitoring"

        def get_menu_items(self):
            overview = MenuNode("Monitoring", {"priority": 50})
            overview.add("Services", {"url": "monitoring/services"})
            return [overview]
"""

import logging

from django.apps import apps

logger = logging.getLogger(__name__)


def module_name(module):
    return getattr(module, "label", None) or getattr(module, "name", None) or repr(module)


def get_loaded_modules():
    """Return the app configs contributing menu items, in INSTALLED_APPS order."""
    return [
        app_config
        for app_config in apps.get_app_configs()
        if callable(getattr(app_config, "get_menu_items", None))
    ]


def get_module_menu_items(module):
    """Return the menu trees contributed by *module* as a list."""
    items = list(module.get_menu_items() or ())
    logger.debug("Module %s contributes %d menu item(s)", module_name(module), len(items))
    return items


__all__ = [
    "get_loaded_modules",
    "get_module_menu_items",
    "module_name",
]
