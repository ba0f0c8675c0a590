# structures.py
# Small container types shared by the key generators


class SymbolSet:
    """Unordered collection of distinct symbols.

    Used while building keys to remember which letters are still free and
    which homophonic tokens were already handed out. Iteration order is
    not guaranteed; sort the result if order matters.
    """

    def __init__(self, items=()):
        self._items = {}
        for item in items:
            self.add(item)

    def add(self, item):
        self._items[item] = True

    def remove(self, item):
        # missing items are ignored, same as discarding
        self._items.pop(item, None)

    def __contains__(self, item):
        return item in self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def __repr__(self):
        return f"SymbolSet({sorted(self._items, key=str)!r})"
