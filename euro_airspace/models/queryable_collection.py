"""
Queryable collection classes for fluent, composable queries.

Chainable filtering over in-memory lists of parsed airspaces.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Union
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Examples:
        # Basic filtering
        collection.filter(lambda a: a.radio != '').all()

        # Attribute matching
        collection.where(name='EDDF CTR').first()

        # Chaining and grouping
        collection.filter(lambda a: a.shape == 'circle').group_by(lambda a: a.airspace_class.name)
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items
        """
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic).

        Examples:
            airspaces.where(name='TEST', radio='123.450')
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def last(self) -> Optional[T]:
        """Return the last item or None if collection is empty."""
        return self._items[-1] if self._items else None

    def all(self) -> List[T]:
        """Return all items as a list."""
        return self._items

    def count(self) -> int:
        return len(self._items)

    def exists(self) -> bool:
        return len(self._items) > 0

    def group_by(self, key_func: Callable[[T], str]) -> Dict[str, List[T]]:
        """
        Group items by a key function.

        Args:
            key_func: Function that returns a grouping key for each item

        Returns:
            Dictionary mapping keys to lists of items, in first-seen order
        """
        result: Dict[str, List[T]] = {}
        for item in self._items:
            key = key_func(item)
            if key not in result:
                result[key] = []
            result[key].append(item)
        return result

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """
        Sort items by a key function.

        Args:
            key_func: Function that returns a sort key for each item
            reverse: If True, sort in descending order

        Returns:
            New collection with sorted items
        """
        return self.__class__(sorted(self._items, key=key_func, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        return self.__class__(self._items[:n])

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        """Class name, preview of the first names and total count."""
        class_name = self.__class__.__name__
        count = len(self._items)

        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'name'):
                preview_items.append(repr(item.name))
            else:
                preview_items.append(f"<{type(item).__name__}>")

        if count > 3:
            preview_items.append('...')

        preview = '[' + ', '.join(preview_items) + ']'
        return f"{class_name}({preview}, count={count})"

    def __or__(self, other: 'QueryableCollection[T]') -> 'QueryableCollection[T]':
        """
        Union operator (|) - combine two collections, removing duplicates.

        Examples:
            danger_or_restricted = airspaces.by_class(AirspaceClass.DANGER) | airspaces.by_class(AirspaceClass.RESTRICT)
        """
        seen = set()
        result = []
        for item in self._items + other._items:
            item_id = id(item)
            if item_id not in seen:
                seen.add(item_id)
                result.append(item)
        return self.__class__(result)
