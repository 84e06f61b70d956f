"""
Attribute groups shared across the journey entities.

Each group is a small mutable value container embedded in the entity
that owns it.  The temporal and address groups are per entity type so
that every type carries exactly the date/time and address fields that
apply to it, e.g. a Visa has entry/exit dates and nothing else.
Instants are stored exactly as given (no parsing or validation here).
"""
from dataclasses import dataclass, fields
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from tp.apps.common.markdown_utils import render_markdown_html


@dataclass
class AttributeGroup:

    @classmethod
    def field_names(cls) -> List[str]:
        return [ x.name for x in fields(cls) ]

    @classmethod
    def from_dict( cls, data : Dict[str, Any] ) -> 'AttributeGroup':
        """Build from a mapping, ignoring keys the group does not carry."""
        data = data or {}
        return cls( **{ name: data.get( name ) for name in cls.field_names() } )

    def to_dict(self) -> Dict[str, Any]:
        return { name: getattr( self, name ) for name in self.field_names() }

    @property
    def is_empty(self) -> bool:
        return all( value is None for value in self.to_dict().values() )


@dataclass
class Notes( AttributeGroup ):
    """Free-text notes; each rendered from markdown on demand."""

    details  : Optional[str]  = None
    pros     : Optional[str]  = None
    cons     : Optional[str]  = None

    @property
    def details_html(self) -> str:
        return render_markdown_html( self.details )

    @property
    def pros_html(self) -> str:
        return render_markdown_html( self.pros )

    @property
    def cons_html(self) -> str:
        return render_markdown_html( self.cons )


@dataclass
class CostRating( AttributeGroup ):

    cost    : Optional[Decimal]  = None
    rating  : Optional[float]    = None


# -----------------------------------------------------------------------------
# Temporal groups
# -----------------------------------------------------------------------------

@dataclass
class LocationDates( AttributeGroup ):

    arrival_date    : Optional[date]  = None
    departure_date  : Optional[date]  = None


@dataclass
class AccommodationTimes( AttributeGroup ):

    arrival_date    : Optional[date]      = None
    departure_date  : Optional[date]      = None
    check_in_time   : Optional[datetime]  = None
    check_out_time  : Optional[datetime]  = None


@dataclass
class ActivityTimes( AttributeGroup ):

    starting_time  : Optional[datetime]  = None
    ending_time    : Optional[datetime]  = None


@dataclass
class TicketTimes( AttributeGroup ):

    departure_time  : Optional[datetime]  = None
    arrival_time    : Optional[datetime]  = None


@dataclass
class VisaDates( AttributeGroup ):

    entry_date  : Optional[date]  = None
    exit_date   : Optional[date]  = None


# -----------------------------------------------------------------------------
# Address groups
# -----------------------------------------------------------------------------

@dataclass
class AccommodationAddress( AttributeGroup ):

    address  : Optional[str]  = None


@dataclass
class ActivityAddresses( AttributeGroup ):

    starting_address  : Optional[str]  = None
    ending_address    : Optional[str]  = None


@dataclass
class TicketAddresses( AttributeGroup ):

    departure_address  : Optional[str]  = None
    arrival_address    : Optional[str]  = None
