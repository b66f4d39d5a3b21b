"""Filter collection owned by a media object."""

from collections.abc import Iterator

from ffdriver.filters.base import Filter


class FiltersCollection:
    """Filters of a media object, iterated in registration order."""

    def __init__(self) -> None:
        self._filters: list[Filter] = []

    def add(self, filter: Filter) -> "FiltersCollection":
        self._filters.append(filter)
        return self

    def __iter__(self) -> Iterator[Filter]:
        return iter(list(self._filters))

    def __len__(self) -> int:
        return len(self._filters)
