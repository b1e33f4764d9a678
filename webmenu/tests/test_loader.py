"""
Tests for menu assembly.

Covers:
- Static main menu entries and their order
- Label translation
- MENU_MAIN_ITEMS override
- Merging module contributions in load order
- Config based menus (flatten_configs / from_config)
"""

from unittest.mock import patch

from django.test import SimpleTestCase, override_settings

from webmenu.exceptions import ConfigurationError
from webmenu.loader import (
    ROOT_ID,
    add_main_menu_items,
    flatten_configs,
    from_config,
    load,
)
from webmenu.menu import MenuNode
from webmenu.navigation import MainMenuItem


class FakeModule:
    """Stands in for an app config contributing menu items."""

    def __init__(self, name, items):
        self.name = name
        self.items = items

    def get_menu_items(self):
        return self.items


def _ids(menu):
    return list(menu.children)


# ======================================================================
# Static main menu
# ======================================================================


class MainMenuTests(SimpleTestCase):

    def test_static_menu_order(self):
        menu = load(modules=[])
        self.assertEqual(menu.id, ROOT_ID)
        self.assertEqual(_ids(menu), ["Dashboard", "System", "Logout"])
        self.assertEqual(
            _ids(menu.get_sub_menu("System")),
            ["Preferences", "Configuration", "Modules", "ApplicationLog"],
        )

    def test_static_menu_properties(self):
        menu = load(modules=[])
        dashboard = menu.get_sub_menu("Dashboard")
        self.assertEqual(dashboard.get_properties(), {
            "url": "dashboard",
            "icon": "img/icons/dashboard.png",
            "priority": 10,
        })
        system = menu.get_sub_menu("System")
        self.assertIsNone(system.url)
        self.assertEqual(system.icon, "img/icons/configuration.png")
        self.assertEqual(system.priority, 200)
        self.assertEqual(system.get_sub_menu("ApplicationLog").url, "list/applicationlog")
        self.assertEqual(menu.get_sub_menu("Logout").url, "authentication/logout")

    def test_labels_are_translated(self):
        menu = MenuNode("menu")
        add_main_menu_items(menu, translate=str.upper)
        self.assertEqual(_ids(menu), ["DASHBOARD", "SYSTEM", "LOGOUT"])
        self.assertTrue(menu.get_sub_menu("SYSTEM").has_sub_menu("PREFERENCES"))

    @override_settings(MENU_MAIN_ITEMS=(
        MainMenuItem(label="Home", url="home", priority=1),
        MainMenuItem(label="Help", url="help", priority=2),
    ))
    def test_main_items_setting_replaces_builtin_entries(self):
        menu = load(modules=[])
        self.assertEqual(_ids(menu), ["Home", "Help"])

    def test_explicit_items(self):
        menu = MenuNode("menu")
        add_main_menu_items(menu, items=(MainMenuItem(label="Only"),))
        self.assertEqual(_ids(menu), ["Only"])
        self.assertEqual(menu.get_sub_menu("Only").get_properties(), {"priority": 100})

    @override_settings(MENU_MAIN_ITEMS=())
    def test_empty_main_items_setting_disables_builtin_entries(self):
        menu = load(modules=[])
        self.assertFalse(menu.has_sub_menus())


# ======================================================================
# Module contributions
# ======================================================================


class LoadWithModulesTests(SimpleTestCase):

    def test_module_items_merged_and_ordered(self):
        monitoring = MenuNode("Monitoring", {"url": "monitoring", "priority": 50})
        module = FakeModule("monitoring", [monitoring])

        menu = load(modules=[module])

        self.assertEqual(_ids(menu), ["Dashboard", "Monitoring", "System", "Logout"])

    def test_module_extends_system_section(self):
        """The merged System entry takes the default priority of the incoming node."""
        system = MenuNode("System")
        system.add("Monitoring", {"url": "monitoring/config", "priority": 250})

        menu = load(modules=[FakeModule("monitoring", [system])])

        self.assertEqual(menu.get_sub_menu("System").priority, 100)
        self.assertEqual(_ids(menu), ["Dashboard", "System", "Logout"])
        self.assertEqual(
            _ids(menu.get_sub_menu("System")),
            ["Preferences", "Monitoring", "Configuration", "Modules", "ApplicationLog"],
        )

    def test_module_keeps_system_priority_by_repeating_it(self):
        system = MenuNode("System", {"priority": 200})
        system.add("Monitoring", {"url": "monitoring/config"})

        menu = load(modules=[FakeModule("monitoring", [system])])

        self.assertEqual(menu.get_sub_menu("System").priority, 200)

    def test_conflicting_module_entry_is_renamed(self):
        menu = load(modules=[
            FakeModule("reporting", [MenuNode("Dashboard", {"url": "reporting/dashboard"})]),
        ])
        self.assertEqual(menu.get_sub_menu("Dashboard").url, "dashboard")
        renamed = menu.get_sub_menu("Dashboard_2")
        self.assertEqual(renamed.url, "reporting/dashboard")
        self.assertEqual(renamed.priority, 100)

    def test_modules_merged_in_load_order(self):
        first = FakeModule("first", [MenuNode("Docs", {"url": "first/docs"})])
        second = FakeModule("second", [MenuNode("Docs", {"url": "second/docs"})])

        menu = load(modules=[first, second])

        self.assertEqual(menu.get_sub_menu("Docs").url, "first/docs")
        self.assertEqual(menu.get_sub_menu("Docs_2").url, "second/docs")

    def test_module_items_are_not_modified(self):
        items = [MenuNode("Dashboard", {"url": "other"})]
        module = FakeModule("other", items)
        load(modules=[module])
        load(modules=[module])
        self.assertEqual(items[0].id, "Dashboard")
        self.assertFalse(items[0].has_sub_menus())

    def test_module_without_items(self):
        menu = load(modules=[FakeModule("empty", None)])
        self.assertEqual(_ids(menu), ["Dashboard", "System", "Logout"])

    def test_defaults_to_loaded_modules(self):
        module = FakeModule("patched", [MenuNode("Extra", {"priority": 1})])
        with patch("webmenu.loader.get_loaded_modules", return_value=[module]) as mocked:
            menu = load()
        mocked.assert_called_once_with()
        self.assertEqual(_ids(menu)[0], "Extra")


# ======================================================================
# Config based menus
# ======================================================================


class FromConfigTests(SimpleTestCase):

    def test_flatten_appends_dup_suffix(self):
        flattened = flatten_configs([
            {"dashboard": {"url": "dashboard"}},
            {"dashboard": {"url": "other"}, "reports": {}},
            {"dashboard": {"url": "third"}},
        ])
        self.assertEqual(
            list(flattened),
            ["dashboard", "dashboard_dup", "reports", "dashboard_dup_dup"],
        )
        self.assertEqual(flattened["dashboard_dup_dup"], {"url": "third"})

    def test_from_config_builds_nested_menu(self):
        menu = from_config([
            {"system": {"priority": 200}},
            {"system.preferences": {"url": "preference"}},
        ])
        self.assertEqual(menu.id, ROOT_ID)
        system = menu.get_sub_menu("system")
        self.assertEqual(system.priority, 200)
        self.assertEqual(system.get_sub_menu("preferences").url, "preference")

    def test_from_config_custom_root(self):
        self.assertEqual(from_config([], root_id="sidebar").id, "sidebar")

    def test_from_config_rejects_unknown_keys(self):
        with self.assertRaises(ConfigurationError):
            from_config([{"dashboard": {"link": "dashboard"}}])
