"""
Accessor mixins for entities that embed attribute groups.

The mixins only expose read access and setters over a group the entity
already owns (self._notes, self._cost_rating, ...).  Which fields a
temporal or address group carries is fixed by the group class the
entity embeds, and the entity declares one setter per field.
"""
from dataclasses import replace
from decimal import Decimal
from typing import Any, Dict, Optional

from .attributes import CostRating, Notes


class NotesMixin:

    _notes : Notes

    @property
    def notes(self) -> Notes:
        return replace( self._notes )

    @property
    def details(self) -> Optional[str]:
        return self._notes.details

    @property
    def pros(self) -> Optional[str]:
        return self._notes.pros

    @property
    def cons(self) -> Optional[str]:
        return self._notes.cons

    @property
    def details_html(self) -> str:
        return self._notes.details_html

    @property
    def pros_html(self) -> str:
        return self._notes.pros_html

    @property
    def cons_html(self) -> str:
        return self._notes.cons_html

    def set_details( self, details : Optional[str] ):
        self._notes.details = details
        return

    def set_pros( self, pros : Optional[str] ):
        self._notes.pros = pros
        return

    def set_cons( self, cons : Optional[str] ):
        self._notes.cons = cons
        return


class CostableMixin:

    _cost_rating : CostRating

    @property
    def cost(self) -> Optional[Decimal]:
        return self._cost_rating.cost

    @property
    def rating(self) -> Optional[float]:
        return self._cost_rating.rating

    def set_cost( self, cost : Optional[Decimal] ):
        self._cost_rating.cost = cost
        return

    def set_rating( self, rating : Optional[float] ):
        self._cost_rating.rating = rating
        return


class TemporalMixin:

    _temporal = None

    @property
    def temporal_details(self) -> Dict[str, Any]:
        """Snapshot of this entity's date/time fields, keyed by field name."""
        return self._temporal.to_dict()


class AddressableMixin:

    _addresses = None

    @property
    def addressable_details(self) -> Dict[str, Optional[str]]:
        """Snapshot of this entity's address fields, keyed by field name."""
        return self._addresses.to_dict()


class FileAttachmentMixin:

    _path_to_file : Optional[str] = None

    @property
    def path_to_file(self) -> Optional[str]:
        return self._path_to_file

    def add_path_to_file( self, path : Optional[str] ):
        """Attach an opaque file reference; nothing checks the file exists."""
        self._path_to_file = path
        return
