"""
The menu tree.

A ``MenuNode`` is one entry of the dashboard navigation. It owns its sub
menus in an insertion-ordered dict keyed by id, so building the tree,
merging contributions from modules into it and sorting it are all plain
dict operations. Traversal state is kept outside the tree, see
``webmenu.iterator``.

Typical use::

    menu = MenuNode("menu")
    system = menu.add("System", {"priority": 200})
    system.add("Preferences", {"url": "preference"})
    menu.merge_sub_menus(module_items)
    menu.order()
"""

import copy
import logging
import re

from .exceptions import ProgrammingError
from .properties import MenuProperties, coerce_priority

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 100
PATH_SEPARATOR = "."

_NUMERIC_SUFFIX = re.compile(r"_(\d+)$")


def conflict_rename(name, taken):
    """
    Return the first variant of *name* that is not in *taken*.

    A trailing ``_<n>`` is incremented; a name without one gets ``_2``.
    ``dashboard`` becomes ``dashboard_2``, then ``dashboard_3``, ...
    """
    while name in taken:
        match = _NUMERIC_SUFFIX.search(name)
        if match:
            name = f"{name[:match.start()]}_{int(match.group(1)) + 1}"
        else:
            name = f"{name}_2"
    return name


class MenuNode:
    """A menu entry with optional url, icon and title, and its sub menus."""

    def __init__(self, id, properties=None):
        self.id = id
        self.url = None
        self.icon = None
        self._title = None
        self._priority = DEFAULT_PRIORITY
        self.children = {}
        self.set_properties(properties)

    def __repr__(self):
        return f"MenuNode({self.id!r}, {self.get_properties()!r})"

    def __iter__(self):
        return iter(list(self.children.values()))

    def __contains__(self, id):
        return self.has_sub_menu(id)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def title(self):
        """The explicit title, or the id when no title is set."""
        return self._title if self._title else self.id

    @title.setter
    def title(self, value):
        self._title = value

    @property
    def priority(self):
        return self._priority

    @priority.setter
    def priority(self, value):
        self._priority = DEFAULT_PRIORITY if value is None else coerce_priority(value)

    def set_id(self, id):
        self.id = id
        return self

    def set_title(self, title):
        self.title = title
        return self

    def set_priority(self, priority):
        self.priority = priority
        return self

    def set_url(self, url):
        self.url = url
        return self

    def set_icon(self, icon):
        self.icon = icon
        return self

    def set_properties(self, props=None):
        """
        Apply a property bag (mapping or ``MenuProperties``).

        Only fields carrying a value are applied; unknown keys raise
        ``ConfigurationError``.
        """
        for key, value in MenuProperties.from_mapping(props).as_dict().items():
            setattr(self, key, value)
        return self

    def get_properties(self):
        """
        Return the properties that have a value as a dict.

        ``priority`` is always included (100 unless set otherwise), the
        title only when set explicitly. This is what gets copied onto an
        existing node when two nodes with the same id are merged.
        """
        return MenuProperties(
            url=self.url,
            icon=self.icon,
            priority=self.priority,
            title=self._title,
        ).as_dict()

    def conflicts_with(self, other):
        """Whether both nodes have a url and the urls differ."""
        if self.url is None or other.url is None:
            return False
        return self.url != other.url

    # ------------------------------------------------------------------
    # Sub menus
    # ------------------------------------------------------------------

    def has_sub_menus(self):
        return bool(self.children)

    def has_sub_menu(self, id):
        return id in self.children

    def get_sub_menu(self, id):
        """
        Return the direct sub menu *id*.

        Raises ``ProgrammingError`` when there is no such sub menu.
        """
        if not self.has_sub_menu(id):
            raise ProgrammingError(id)
        return self.children[id]

    def add_sub_menu(self, id, config=None):
        """
        Add a sub menu and return it.

        A dotted *id* (``"system.preferences"``) walks down the tree,
        creating missing intermediate entries, and the returned node is the
        last segment. *config* only applies to that node. An existing sub
        menu with the same id is replaced.
        """
        if PATH_SEPARATOR not in id:
            sub_menu = MenuNode(id, config)
            self.children[id] = sub_menu
            return sub_menu

        parent_id, rest = id.split(PATH_SEPARATOR, 1)
        if self.has_sub_menu(parent_id):
            parent = self.get_sub_menu(parent_id)
        else:
            parent = self.add_sub_menu(parent_id)
        return parent.add_sub_menu(rest, config)

    def add(self, name, props=None):
        """Shortcut for ``add_sub_menu`` taking a plain property dict."""
        return self.add_sub_menu(name, MenuProperties.from_mapping(props))

    def merge_sub_menu(self, menu):
        """
        Fold *menu* (and its sub menus) into this node's sub menus.

        When no sub menu has the same id, a copy of *menu* is added. When one
        does and both have different urls, the copy is stored next to it
        under a renamed id (``name_2``, ``name_3``, ...). Otherwise the
        properties of *menu* are copied onto the existing sub menu and its
        children are merged level by level.

        *menu* itself is never modified or attached to this tree.

        Returns the node stored under the final id.
        """
        name = menu.id
        current = self.children.get(name)

        if current is None:
            self.children[name] = copy.deepcopy(menu)
        elif current.conflicts_with(menu):
            name = conflict_rename(name, self.children)
            logger.info(
                "Menu entry %r (%s) conflicts with %r (%s), adding it as %r",
                menu.id, menu.url, current.id, current.url, name,
            )
            self.children[name] = copy.deepcopy(menu).set_id(name)
        else:
            current.set_properties(menu.get_properties())
            for child in menu:
                current.merge_sub_menu(child)

        return self.children[name]

    def merge_sub_menus(self, menus):
        """Merge every node of *menus*, in order."""
        for menu in menus:
            self.merge_sub_menu(menu)
        return self

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def order(self):
        """Sort sub menus by priority, then title, at every level."""
        ordered = sorted(
            self.children.items(),
            key=lambda item: (item[1].priority, str(item[1].title)),
        )
        self.children = dict(ordered)
        for sub_menu in self.children.values():
            sub_menu.order()
        return self


__all__ = [
    "DEFAULT_PRIORITY",
    "MenuNode",
    "conflict_rename",
]
