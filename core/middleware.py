from django.utils.functional import SimpleLazyObject

from webmenu.loader import load


class MenuMiddleware:
    """
    Attaches the navigation menu to every request as ``request.menu``.

    The menu is built on first access and thrown away with the request, so
    it always reflects the modules that are loaded right now. Requests that
    never render a menu never build one.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.menu = SimpleLazyObject(load)
        return self.get_response(request)
