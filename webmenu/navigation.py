"""
Static main menu entries.

These are the entries every dashboard has, regardless of which modules are
loaded. Each entry is a ``MainMenuItem`` whose ``label`` is translated at
build time and becomes the node id. Projects can replace the whole set
through the ``MENU_MAIN_ITEMS`` setting, using the same shape.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MainMenuItem:
    """A static menu entry, with optional nested entries."""
    label: str
    url: str = None
    icon: str = None
    priority: int = None
    items: tuple = field(default_factory=tuple)

    def as_dict(self):
        """Return the property bag for this entry (without ``items``)."""
        props = {
            "url": self.url,
            "icon": self.icon,
            "priority": self.priority,
        }
        return {key: value for key, value in props.items() if value is not None}


MAIN_MENU_ITEMS = (
    MainMenuItem(label="Dashboard", url="dashboard", icon="img/icons/dashboard.png", priority=10),
    MainMenuItem(
        label="System",
        icon="img/icons/configuration.png",
        priority=200,
        items=(
            MainMenuItem(label="Preferences", url="preference", priority=200),
            MainMenuItem(label="Configuration", url="config", priority=300),
            MainMenuItem(label="Modules", url="config/modules", priority=400),
            MainMenuItem(label="ApplicationLog", url="list/applicationlog", priority=500),
        ),
    ),
    MainMenuItem(label="Logout", url="authentication/logout", icon="img/icons/logout.png", priority=300),
)


__all__ = [
    "MainMenuItem",
    "MAIN_MENU_ITEMS",
]
