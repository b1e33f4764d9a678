"""
Depth-first traversal of a menu tree.

``MenuIterator`` is a cursor over the sub menus of one node. It only borrows
the node, so any number of iterators can walk the same tree at once. The
tree must not be modified while a traversal is in progress.

Rendering a nested menu with it looks like::

    def render(it, depth=0):
        it.rewind()
        while it.valid():
            emit(depth, it.key(), it.current())
            if it.has_children():
                render(it.get_children(), depth + 1)
            it.next()

``walk()`` does exactly that and yields ``(depth, node)`` pairs.
"""


class MenuIterator:
    """A cursor over the sub menus of ``menu``, in their current order."""

    def __init__(self, menu):
        self.menu = menu
        self._keys = ()
        self._position = 0
        self.rewind()

    def rewind(self):
        """Move back to the first sub menu."""
        self._keys = tuple(self.menu.children)
        self._position = 0

    def valid(self):
        return self._position < len(self._keys)

    def key(self):
        if not self.valid():
            return None
        return self._keys[self._position]

    def current(self):
        if not self.valid():
            return None
        return self.menu.children[self._keys[self._position]]

    def next(self):
        if self.valid():
            self._position += 1

    def has_children(self):
        current = self.current()
        return current is not None and current.has_sub_menus()

    def get_children(self):
        """Return a new iterator over the sub menus of the current entry."""
        current = self.current()
        if current is None:
            return None
        return MenuIterator(current)


def walk(menu, depth=0):
    """Yield ``(depth, node)`` for every node below *menu*, pre-order."""
    it = MenuIterator(menu)
    while it.valid():
        node = it.current()
        yield depth, node
        if it.has_children():
            yield from walk(node, depth + 1)
        it.next()


__all__ = [
    "MenuIterator",
    "walk",
]
