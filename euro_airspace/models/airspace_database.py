from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
import json
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from .airspace import Airspace
from .airspace_collection import AirspaceCollection

logger = logging.getLogger(__name__)


class AirspaceSink(ABC):
    """Receives finished airspaces from the parsers, one at a time, in file order."""

    @abstractmethod
    def insert(self, airspace: Airspace) -> None:
        pass


@dataclass
class AirspaceDatabase(AirspaceSink):
    """
    In-memory store of parsed airspaces.

    The parsers insert finished airspaces one at a time, in file order.
    The store keeps them in that order and offers queries and exports;
    it does not build any spatial index.
    """

    _airspaces: List[Airspace] = field(default_factory=list)

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def insert(self, airspace: Airspace) -> None:
        """
        Add a finished airspace.

        Args:
            airspace: The airspace; ownership passes to the database
        """
        self._airspaces.append(airspace)
        self.updated_at = datetime.now()
        logger.debug(f"Inserted {airspace!r}")

    def clear(self) -> None:
        self._airspaces.clear()
        self.updated_at = datetime.now()

    @property
    def airspaces(self) -> AirspaceCollection:
        """
        Get queryable collection of all airspaces.

        Examples:
            ctrs = database.airspaces.by_class(AirspaceClass.CTR).all()
            weekend = database.airspaces.active_on(date(2024, 6, 1)).count()
        """
        return AirspaceCollection(list(self._airspaces))

    def __len__(self) -> int:
        return len(self._airspaces)

    def __iter__(self):
        return iter(self._airspaces)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'airspaces': [a.to_dict() for a in self._airspaces],
            'count': len(self._airspaces),
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }

    def save_to_json(self, file_path: Union[str, Path]) -> None:
        """Save all airspaces to a JSON file."""
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved {len(self._airspaces)} airspaces to {file_path}")

    def to_dataframe(self) -> pd.DataFrame:
        """
        One row per airspace, with altitudes flattened.

        Returns:
            DataFrame with columns name, class, shape, radio, base, top,
            base_reference, top_reference, active, vertices, radius_m
        """
        rows = []
        for airspace in self._airspaces:
            rows.append({
                'name': airspace.name,
                'class': airspace.airspace_class.value,
                'shape': airspace.shape,
                'radio': airspace.radio,
                'base': airspace.base.to_text(),
                'top': airspace.top.to_text(),
                'base_reference': airspace.base.reference.value,
                'top_reference': airspace.top.reference.value,
                'active': str(airspace.days_of_operation),
                'vertices': len(getattr(airspace, 'points', ())),
                'radius_m': getattr(airspace, 'radius', None),
            })
        columns = ['name', 'class', 'shape', 'radio', 'base', 'top',
                   'base_reference', 'top_reference', 'active', 'vertices', 'radius_m']
        return pd.DataFrame(rows, columns=columns)
