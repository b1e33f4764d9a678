from django import template
from django.conf import settings
from django.templatetags.static import static
import re

from webmenu.iterator import walk
from webmenu.menu import MenuNode

register = template.Library()


@register.simple_tag(takes_context=True)
def menu_entries(context, menu=None):
    """
    Return the menu as a flat, pre-order list of entries.

    Each entry is a dict with ``depth``, ``key``, ``node`` and
    ``has_children``, so a template can render the nested menu with a
    single ``{% for %}`` loop. Without an argument the ``menu`` context
    variable is used.
    """
    if menu is None:
        menu = context.get("menu")
    if menu is None:
        return []
    return [
        {
            "depth": depth,
            "key": node.id,
            "node": node,
            "has_children": node.has_sub_menus(),
        }
        for depth, node in walk(menu)
    ]


@register.filter
def menu_url(node):
    """Return the url of *node* as an absolute path ("" when it has none)."""
    url = node.url if isinstance(node, MenuNode) else node
    if not url:
        return ""
    if "://" in url or url.startswith("/"):
        return url
    return "/" + url


@register.filter
def menu_icon(node):
    """Resolve the icon of *node* to a static file URL ("" when it has none)."""
    if not node.icon:
        return ""
    prefix = getattr(settings, "MENU_ICON_PREFIX", "")
    return static(prefix + node.icon)


@register.simple_tag(takes_context=True)
def active_path(context, base):
    """
    Return "active" when the current request path matches `base`.

    Supported forms for `base`:
      - A menu node: its url (see `menu_url`)
      - Single path: "/config/"
      - Comma-separated list: "/config/,/preference/"
      - Regex: "r/REGEX" (e.g. r/^/config/.*$/)

    Matching behaviour:
      - If a path ends with a slash ("/foo/") it matches any path that starts with that prefix.
      - If a path does not end with a slash ("/foo") it matches either exact equality or a prefix followed by "/" (to avoid false positives like "/foo-old/").
      - Regex is applied via re.search against request.path.
    """
    request = context.get('request')
    if not request:
        return ""

    path = request.path or ""

    if isinstance(base, MenuNode):
        base = menu_url(base)
        if not base:
            return ""

    # Regex mode: base starts with "r/"
    if isinstance(base, str) and base.startswith('r/'):
        pattern = base[2:]
        try:
            if re.search(pattern, path):
                return "active"
        except re.error:
            # An invalid regex never matches
            return ""
        return ""

    for part in (p.strip() for p in str(base).split(',')):
        if not part:
            continue

        if part.endswith('/'):
            if path.startswith(part):
                return "active"
        else:
            # Exact path or path segment prefix (not "/config-old/")
            if path == part or path.startswith(part + '/'):
                return "active"

    return ""
