"""
show_menu — print the assembled navigation menu.

Usage:
    python manage.py show_menu                # static entries + all modules
    python manage.py show_menu --static-only  # static entries only
    python manage.py show_menu --urls         # include each entry's url
"""

from django.core.management.base import BaseCommand

from webmenu.iterator import walk
from webmenu.loader import load
from webmenu.modules import get_loaded_modules, module_name


class Command(BaseCommand):
    help = "Print the navigation menu as an indented outline."

    def add_arguments(self, parser):
        parser.add_argument(
            "--static-only",
            action="store_true",
            help="Skip menu items contributed by modules.",
        )
        parser.add_argument(
            "--urls",
            action="store_true",
            help="Append the url of every entry.",
        )

    def handle(self, *args, **options):
        modules = [] if options["static_only"] else get_loaded_modules()
        if modules:
            names = ", ".join(module_name(module) for module in modules)
            self.stdout.write(f"Modules: {names}")

        menu = load(modules=modules)
        for depth, node in walk(menu):
            line = f"{'  ' * depth}{node.title} [{node.priority}]"
            if options["urls"] and node.url:
                line += f" -> {node.url}"
            self.stdout.write(line)
