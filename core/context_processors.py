"""
Context processors for webmenu.

Exposes the navigation menu to templates so it can be rendered with the
``menu_tags`` library.
"""

from webmenu.loader import load


def menu(request):
    """
    Add the navigation menu to the template context.

    Returns a dictionary with a ``menu`` key holding the ordered root
    ``MenuNode``. The tree attached by ``MenuMiddleware`` is reused when
    present; otherwise one is built for this request.
    """
    menu = getattr(request, "menu", None)
    if menu is None:
        menu = load()
    return {
        "menu": menu,
    }
