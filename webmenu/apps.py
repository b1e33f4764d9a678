from django.apps import AppConfig


class WebmenuConfig(AppConfig):
    name = "webmenu"
    verbose_name = "Navigation menu"
