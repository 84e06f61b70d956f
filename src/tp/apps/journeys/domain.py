"""
The journey tree: Journey > Country > Location > {Activity,
Accommodation, DepartureTicket}, with an optional Visa per Country.

Children are appended through their parent's add_* methods, which
allocate the child's id from the ids of its current siblings.  Lists
keep insertion order, which is also treated as travel order.  Nothing
here touches storage: see services.JourneyStore for load/save.
"""
import logging
import re
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from .attributes import LocationDates, Notes
from .entities import Accommodation, Activity, DepartureTicket, IdentifiedEntity, Visa
from .enums import VisaStatus
from .identifiers import find_by_id, next_free_id
from .mixins import TemporalMixin

logger = logging.getLogger(__name__)


class Location( TemporalMixin, IdentifiedEntity ):
    """
    A city or place stayed at within a country.
    """

    def __init__( self,
                  location_id       : int,
                  name              : str,
                  dates             : Optional[LocationDates]            = None,
                  notes             : Optional[Notes]                    = None,
                  departure_ticket  : Optional[DepartureTicket]          = None,
                  accommodations    : Optional[Iterable[Accommodation]]  = None,
                  activities        : Optional[Iterable[Activity]]       = None,
                  photos            : Optional[Iterable[str]]            = None ):
        super().__init__( location_id, name, notes = notes )
        self._temporal = dates or LocationDates()
        self._departure_ticket = departure_ticket
        self._accommodations = list( accommodations or [] )
        self._activities = list( activities or [] )
        self._photos = list( photos or [] )
        return

    @property
    def arrival_date(self) -> Optional[date]:
        return self._temporal.arrival_date

    @property
    def departure_date(self) -> Optional[date]:
        return self._temporal.departure_date

    @property
    def departure_ticket(self) -> Optional[DepartureTicket]:
        return self._departure_ticket

    @property
    def accommodations(self) -> Tuple[Accommodation, ...]:
        return tuple( self._accommodations )

    @property
    def activities(self) -> Tuple[Activity, ...]:
        return tuple( self._activities )

    @property
    def photos(self) -> Tuple[str, ...]:
        return tuple( self._photos )

    def set_arrival_date( self, arrival_date : Optional[date] ):
        self._temporal.arrival_date = arrival_date
        return

    def set_departure_date( self, departure_date : Optional[date] ):
        self._temporal.departure_date = departure_date
        return

    def add_accommodation( self, name : str ) -> Accommodation:
        accommodation_id = next_free_id( x.id for x in self._accommodations )
        accommodation = Accommodation( accommodation_id, name )
        self._accommodations.append( accommodation )
        return accommodation

    def add_activity( self, name : str ) -> Activity:
        activity_id = next_free_id( x.id for x in self._activities )
        activity = Activity( activity_id, name )
        self._activities.append( activity )
        return activity

    def set_departure_ticket(self) -> DepartureTicket:
        """Create the departure ticket, replacing any existing one."""
        self._departure_ticket = DepartureTicket()
        return self._departure_ticket

    def add_photo( self, path : str ):
        self._photos.append( path )
        return

    def find_accommodation( self, accommodation_id : int ) -> Optional[Accommodation]:
        return find_by_id( self._accommodations, accommodation_id )

    def find_activity( self, activity_id : int ) -> Optional[Activity]:
        return find_by_id( self._activities, activity_id )


class Country( IdentifiedEntity ):

    def __init__( self,
                  country_id   : int,
                  name         : str,
                  notes        : Optional[Notes]               = None,
                  locations    : Optional[Iterable[Location]]  = None,
                  visa_status  : VisaStatus                    = VisaStatus.UNSET,
                  visa         : Optional[Visa]                = None ):
        super().__init__( country_id, name, notes = notes )
        self._locations = list( locations or [] )
        if visa is not None:
            visa_status = VisaStatus.REQUIRED
        self._visa_status = visa_status
        self._visa = visa
        return

    @property
    def locations(self) -> Tuple[Location, ...]:
        return tuple( self._locations )

    @property
    def visa(self) -> Optional[Visa]:
        """The visa being tracked, or None when unset or not needed."""
        return self._visa

    @property
    def visa_status(self) -> VisaStatus:
        return self._visa_status

    @property
    def length_of_stay(self) -> int:
        """
        Whole days from the first location's arrival to the last
        location's departure.  First and last are by list position
        (insertion order), not by date.
        """
        if not self._locations:
            raise ValueError( f'Country {self} has no locations to measure a stay from' )

        arrival_date = self._locations[0].arrival_date
        departure_date = self._locations[-1].departure_date
        if arrival_date is None:
            raise ValueError( f'Location {self._locations[0]} has no arrival date' )
        if departure_date is None:
            raise ValueError( f'Location {self._locations[-1]} has no departure date' )
        return ( departure_date - arrival_date ).days

    def add_location( self, name : str ) -> Location:
        location_id = next_free_id( x.id for x in self._locations )
        location = Location( location_id, name )
        self._locations.append( location )
        return location

    def set_visa( self, needed : bool ) -> Optional[Visa]:
        """
        Record whether a visa is needed.  When it is, a fresh Visa is
        attached (replacing any previous one) and returned.
        """
        if needed:
            self._visa = Visa()
            self._visa_status = VisaStatus.REQUIRED
        else:
            self._visa = None
            self._visa_status = VisaStatus.NOT_NEEDED
        return self._visa

    def find_location( self, location_id : int ) -> Optional[Location]:
        return find_by_id( self._locations, location_id )


class Journey( IdentifiedEntity ):
    """
    Root of the tree.  Unlike everything below it, a journey's id is
    unique across the whole load-set of journeys, so new journeys are
    created through Journey.create() with that load-set in hand.
    """

    def __init__( self,
                  journey_id  : int,
                  name        : str,
                  notes       : Optional[Notes]              = None,
                  countries   : Optional[Iterable[Country]]  = None ):
        super().__init__( journey_id, name, notes = notes )
        self._countries = list( countries or [] )
        return

    @classmethod
    def create( cls, name : str, journeys : Sequence['Journey'] ) -> 'Journey':
        """
        New journey whose id is free across the given load-set.  Name
        collisions are the caller's concern (see camel_casify).
        """
        journey_id = next_free_id( x.id for x in journeys )
        logger.debug( f'Creating journey "{name}" with id {journey_id}' )
        return cls( journey_id, name )

    @staticmethod
    def camel_casify( name : str ) -> str:
        return camel_casify( name )

    @property
    def camel_case_name(self) -> str:
        return camel_casify( self.name )

    @property
    def countries(self) -> Tuple[Country, ...]:
        return tuple( self._countries )

    def add_country( self, name : str ) -> Country:
        country_id = next_free_id( x.id for x in self._countries )
        country = Country( country_id, name )
        self._countries.append( country )
        return country

    def find_country( self, country_id : int ) -> Optional[Country]:
        return find_by_id( self._countries, country_id )


def camel_casify( name : str ) -> str:
    """
    Canonical slug of a journey name: lowercased, trimmed, with each run
    of whitespace replaced by a single underscore.  So "Foo Vacation",
    " foo  vacation " and "FOO\\tVacation" all map to "foo_vacation".
    """
    return re.sub( r'\s+', '_', name.strip().lower() )


def find_journey( journeys : Sequence[Journey], journey_id : int ) -> Optional[Journey]:
    return find_by_id( journeys, journey_id )


def journey_names( journeys : Sequence[Journey] ) -> List[str]:
    return [ x.name for x in journeys ]


def is_name_in_use( name : str, journeys : Sequence[Journey] ) -> bool:
    slug = camel_casify( name )
    return any( x.camel_case_name == slug for x in journeys )
