"""
Specialized queryable collection for Airspace objects.
"""

from datetime import date
from typing import Union, TYPE_CHECKING

from .queryable_collection import QueryableCollection
from .airspace import AirspaceClass

if TYPE_CHECKING:
    from .airspace import Airspace


class AirspaceCollection(QueryableCollection['Airspace']):
    """
    Collection for querying airspaces with domain-specific filters.

    Examples:
        collection.by_class(AirspaceClass.CTR).circles().count()
        collection.active_on(date(2024, 6, 1)).by_name_contains("TMA")
    """

    def by_class(self, *classes: Union[AirspaceClass, str]) -> 'AirspaceCollection':
        """
        Filter airspaces by classification.

        Args:
            classes: AirspaceClass members or their names (e.g. 'CTR', 'RESTRICT')
        """
        wanted = {c if isinstance(c, AirspaceClass) else AirspaceClass[c.upper()] for c in classes}
        return AirspaceCollection([a for a in self._items if a.airspace_class in wanted])

    def by_name_contains(self, text: str) -> 'AirspaceCollection':
        """Filter airspaces whose name contains text, case-insensitive."""
        needle = text.upper()
        return AirspaceCollection([a for a in self._items if needle in a.name.upper()])

    def polygons(self) -> 'AirspaceCollection':
        return AirspaceCollection([a for a in self._items if a.shape == 'polygon'])

    def circles(self) -> 'AirspaceCollection':
        return AirspaceCollection([a for a in self._items if a.shape == 'circle'])

    def active_on(self, day: date) -> 'AirspaceCollection':
        """Filter airspaces active on the given day of the week."""
        return AirspaceCollection([a for a in self._items if a.days_of_operation.is_active(day)])

    def with_radio(self) -> 'AirspaceCollection':
        return AirspaceCollection([a for a in self._items if a.radio])

    def group_by_class(self):
        """Group airspaces by class name."""
        return self.group_by(lambda a: a.airspace_class.name)

