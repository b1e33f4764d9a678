"""
Assembly of the complete menu.

``load()`` is what a request ends up calling: it creates the root node, adds
the static main menu entries, merges in whatever the loaded modules
contribute and sorts the result.

``from_config()`` builds a menu from already parsed configuration sections
instead (``{"system.preferences": {"url": "preference"}, ...}``), one
mapping per source. It does not consult modules and does not sort.
"""

import logging

from django.conf import settings
from django.utils.translation import gettext

from .menu import MenuNode
from .modules import get_loaded_modules, get_module_menu_items, module_name
from .navigation import MAIN_MENU_ITEMS

logger = logging.getLogger(__name__)

ROOT_ID = "menu"
DUPLICATE_SUFFIX = "_dup"


def get_main_menu_items():
    """Return ``settings.MENU_MAIN_ITEMS`` unless it is None, else the built-in entries."""
    items = getattr(settings, "MENU_MAIN_ITEMS", None)
    if items is None:
        return MAIN_MENU_ITEMS
    return items


def _add_item(parent, item, translate):
    node = parent.add(translate(item.label), item.as_dict())
    for sub_item in item.items:
        _add_item(node, sub_item, translate)
    return node


def add_main_menu_items(menu, translate=None, items=None):
    """
    Add the static entries (Dashboard, System, Logout, ...) to *menu*.

    Labels are passed through *translate* (``gettext`` by default) and
    the result is used as node id.
    """
    translate = translate or gettext
    if items is None:
        items = get_main_menu_items()
    for item in items:
        _add_item(menu, item, translate)
    return menu


def load(modules=None, translate=None):
    """
    Build the main menu.

    Args:
        modules: Objects providing ``get_menu_items()``, merged in the given
                 order. Defaults to ``get_loaded_modules()``.
        translate: Label translation function, ``gettext`` by default.

    Returns:
        The ordered root ``MenuNode``.
    """
    menu = MenuNode(ROOT_ID)
    add_main_menu_items(menu, translate)

    if modules is None:
        modules = get_loaded_modules()

    for module in modules:
        items = get_module_menu_items(module)
        logger.debug("Merging menu items of module %s", module_name(module))
        menu.merge_sub_menus(items)

    return menu.order()


# ---------------------------------------------------------------------------
# Config based menus
# ---------------------------------------------------------------------------


def flatten_configs(configs):
    """
    Combine several ``{section: properties}`` mappings into one.

    A section id that was already seen gets ``_dup`` appended until it is
    unique, so later sources never overwrite earlier ones.
    """
    flattened = {}
    for menu_config in configs:
        for section, item_config in menu_config.items():
            original = section
            while section in flattened:
                section += DUPLICATE_SUFFIX
            if section != original:
                logger.info("Duplicate menu section %r renamed to %r", original, section)
            flattened[section] = item_config
    return flattened


def load_sub_menus(menu, menus):
    """Add every ``{id: properties}`` entry of *menus* to *menu*."""
    for menu_id, menu_config in menus.items():
        menu.add_sub_menu(menu_id, menu_config)
    return menu


def from_config(configs, root_id=ROOT_ID):
    """Build a menu from a sequence of parsed menu configurations."""
    menu = MenuNode(root_id)
    return load_sub_menus(menu, flatten_configs(configs))


__all__ = [
    "ROOT_ID",
    "add_main_menu_items",
    "flatten_configs",
    "from_config",
    "get_main_menu_items",
    "load",
    "load_sub_menus",
]
