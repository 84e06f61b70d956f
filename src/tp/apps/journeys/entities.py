"""
Leaf entities of a journey: the things that hang off a Location
(activities, accommodations, the departure ticket) or a Country (visa).

All fields start unset.  Mutation is only through the named setters,
each a plain assignment; values are trusted to be already parsed and
validated by the caller.
"""
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Tuple

from .attributes import (
    AccommodationAddress,
    AccommodationTimes,
    ActivityAddresses,
    ActivityTimes,
    CostRating,
    Notes,
    TicketAddresses,
    TicketTimes,
    VisaDates,
)
from .enums import TransportMode
from .mixins import (
    AddressableMixin,
    CostableMixin,
    FileAttachmentMixin,
    NotesMixin,
    TemporalMixin,
)


class Entity( NotesMixin ):
    """
    Base of everything in a journey tree.  Entities are exclusively owned
    by their parent, so they refuse to be copied: a copy would be a
    second object claiming the same place in the tree.
    """

    def __init__( self, notes : Optional[Notes] = None ):
        self._notes = notes or Notes()
        return

    def __copy__(self):
        raise TypeError( f'{self.__class__.__name__} cannot be copied' )

    def __deepcopy__( self, memo ):
        raise TypeError( f'{self.__class__.__name__} cannot be copied' )


class IdentifiedEntity( Entity ):
    """
    Entity with a display name and an id unique among its siblings.
    Two entities are equal when they are the same type with the same id.
    """

    def __init__( self,
                  entity_id  : int,
                  name       : str,
                  notes      : Optional[Notes] = None ):
        super().__init__( notes = notes )
        self._id = entity_id
        self._name = name
        return

    def __repr__(self):
        return f'{self.name} [{self.id}]'

    def __str__(self):
        return f'{self.name} [{self.id}]'

    def __eq__( self, other ):
        if type( other ) is not type( self ):
            return False
        return bool( self._id == other._id )

    def __hash__(self):
        return hash( ( self.__class__.__name__, self._id ) )

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    def set_name( self, name : str ):
        self._name = name
        return


class Activity( TemporalMixin, AddressableMixin, CostableMixin, IdentifiedEntity ):

    def __init__( self,
                  activity_id  : int,
                  name         : str,
                  times        : Optional[ActivityTimes]      = None,
                  addresses    : Optional[ActivityAddresses]  = None,
                  cost_rating  : Optional[CostRating]         = None,
                  notes        : Optional[Notes]              = None,
                  to_bring     : Optional[Iterable[str]]      = None ):
        super().__init__( activity_id, name, notes = notes )
        self._temporal = times or ActivityTimes()
        self._addresses = addresses or ActivityAddresses()
        self._cost_rating = cost_rating or CostRating()
        self._to_bring = list( to_bring or [] )
        return

    @property
    def starting_time(self) -> Optional[datetime]:
        return self._temporal.starting_time

    @property
    def ending_time(self) -> Optional[datetime]:
        return self._temporal.ending_time

    @property
    def starting_address(self) -> Optional[str]:
        return self._addresses.starting_address

    @property
    def ending_address(self) -> Optional[str]:
        return self._addresses.ending_address

    @property
    def to_bring(self) -> Tuple[str, ...]:
        return tuple( self._to_bring )

    def set_starting_time( self, starting_time : Optional[datetime] ):
        self._temporal.starting_time = starting_time
        return

    def set_ending_time( self, ending_time : Optional[datetime] ):
        self._temporal.ending_time = ending_time
        return

    def set_starting_address( self, address : Optional[str] ):
        self._addresses.starting_address = address
        return

    def set_ending_address( self, address : Optional[str] ):
        self._addresses.ending_address = address
        return

    def add_item_to_bring( self, item : str ):
        self._to_bring.append( item )
        return


class Accommodation( TemporalMixin, AddressableMixin, CostableMixin, IdentifiedEntity ):
    """
    Somewhere to stay at a location: a hostel bed for a night or a
    rented apartment for a month.
    """

    def __init__( self,
                  accommodation_id  : int,
                  name              : str,
                  times             : Optional[AccommodationTimes]    = None,
                  address           : Optional[AccommodationAddress]  = None,
                  cost_rating       : Optional[CostRating]            = None,
                  notes             : Optional[Notes]                 = None,
                  booking_service   : Optional[str]                   = None ):
        super().__init__( accommodation_id, name, notes = notes )
        self._temporal = times or AccommodationTimes()
        self._addresses = address or AccommodationAddress()
        self._cost_rating = cost_rating or CostRating()
        self._booking_service = booking_service
        return

    @property
    def arrival_date(self) -> Optional[date]:
        return self._temporal.arrival_date

    @property
    def departure_date(self) -> Optional[date]:
        return self._temporal.departure_date

    @property
    def check_in_time(self) -> Optional[datetime]:
        return self._temporal.check_in_time

    @property
    def check_out_time(self) -> Optional[datetime]:
        return self._temporal.check_out_time

    @property
    def address(self) -> Optional[str]:
        return self._addresses.address

    @property
    def booking_service(self) -> Optional[str]:
        return self._booking_service

    def set_arrival_date( self, arrival_date : Optional[date] ):
        self._temporal.arrival_date = arrival_date
        return

    def set_departure_date( self, departure_date : Optional[date] ):
        self._temporal.departure_date = departure_date
        return

    def set_check_in_time( self, check_in_time : Optional[datetime] ):
        self._temporal.check_in_time = check_in_time
        return

    def set_check_out_time( self, check_out_time : Optional[datetime] ):
        self._temporal.check_out_time = check_out_time
        return

    def set_address( self, address : Optional[str] ):
        self._addresses.address = address
        return

    def set_booking_service( self, service : Optional[str] ):
        self._booking_service = service
        return


class DepartureTicket( TemporalMixin, AddressableMixin, CostableMixin, FileAttachmentMixin, Entity ):
    """
    The ticket out of a location.  A location has at most one, so it
    carries no id.
    """

    def __init__( self,
                  times               : Optional[TicketTimes]      = None,
                  addresses           : Optional[TicketAddresses]  = None,
                  cost_rating         : Optional[CostRating]       = None,
                  notes               : Optional[Notes]            = None,
                  transport_mode      : Optional[TransportMode]    = None,
                  transport_provider  : Optional[str]              = None,
                  ticket_number       : Optional[str]              = None,
                  path_to_file        : Optional[str]              = None ):
        super().__init__( notes = notes )
        self._temporal = times or TicketTimes()
        self._addresses = addresses or TicketAddresses()
        self._cost_rating = cost_rating or CostRating()
        self._transport_mode = transport_mode
        self._transport_provider = transport_provider
        self._ticket_number = ticket_number
        self._path_to_file = path_to_file
        return

    def __repr__(self):
        return f'DepartureTicket [{self._transport_mode} {self._ticket_number}]'

    @property
    def departure_time(self) -> Optional[datetime]:
        return self._temporal.departure_time

    @property
    def arrival_time(self) -> Optional[datetime]:
        return self._temporal.arrival_time

    @property
    def departure_address(self) -> Optional[str]:
        return self._addresses.departure_address

    @property
    def arrival_address(self) -> Optional[str]:
        return self._addresses.arrival_address

    @property
    def transport_mode(self) -> Optional[TransportMode]:
        return self._transport_mode

    @property
    def transport_provider(self) -> Optional[str]:
        return self._transport_provider

    @property
    def ticket_number(self) -> Optional[str]:
        return self._ticket_number

    @property
    def trip_duration(self) -> timedelta:
        """
        Time from departure to arrival.  Both times must be set, and since
        they are full instants an overnight trip is simply one whose
        arrival falls on a later date.  An arrival before the departure
        is rejected rather than reported as a negative duration.
        """
        departure_time = self._temporal.departure_time
        arrival_time = self._temporal.arrival_time
        if departure_time is None or arrival_time is None:
            raise ValueError( 'Trip duration needs both a departure time and an arrival time' )

        duration = arrival_time - departure_time
        if duration < timedelta( 0 ):
            raise ValueError( f'Arrival time {arrival_time} precedes departure time {departure_time}' )
        return duration

    def set_departure_time( self, departure_time : Optional[datetime] ):
        self._temporal.departure_time = departure_time
        return

    def set_arrival_time( self, arrival_time : Optional[datetime] ):
        self._temporal.arrival_time = arrival_time
        return

    def set_departure_address( self, address : Optional[str] ):
        self._addresses.departure_address = address
        return

    def set_arrival_address( self, address : Optional[str] ):
        self._addresses.arrival_address = address
        return

    def set_transport_mode( self, mode : Optional[TransportMode] ):
        self._transport_mode = mode
        return

    def set_transport_provider( self, provider : Optional[str] ):
        self._transport_provider = provider
        return

    def set_ticket_number( self, number : Optional[str] ):
        self._ticket_number = number
        return


class Visa( TemporalMixin, CostableMixin, FileAttachmentMixin, Entity ):

    def __init__( self,
                  dates         : Optional[VisaDates]   = None,
                  cost_rating   : Optional[CostRating]  = None,
                  notes         : Optional[Notes]       = None,
                  visa_type     : Optional[str]         = None,
                  visa_number   : Optional[str]         = None,
                  information   : Optional[str]         = None,
                  path_to_file  : Optional[str]         = None ):
        super().__init__( notes = notes )
        self._temporal = dates or VisaDates()
        self._cost_rating = cost_rating or CostRating()
        self._visa_type = visa_type
        self._visa_number = visa_number
        self._information = information
        self._path_to_file = path_to_file
        return

    def __repr__(self):
        return f'Visa [{self._visa_type} {self._visa_number}]'

    @property
    def entry_date(self) -> Optional[date]:
        return self._temporal.entry_date

    @property
    def exit_date(self) -> Optional[date]:
        return self._temporal.exit_date

    @property
    def visa_type(self) -> Optional[str]:
        return self._visa_type

    @property
    def visa_number(self) -> Optional[str]:
        return self._visa_number

    @property
    def information(self) -> Optional[str]:
        return self._information

    def set_entry_date( self, entry_date : Optional[date] ):
        self._temporal.entry_date = entry_date
        return

    def set_exit_date( self, exit_date : Optional[date] ):
        self._temporal.exit_date = exit_date
        return

    def set_visa_type( self, visa_type : Optional[str] ):
        self._visa_type = visa_type
        return

    def set_visa_number( self, number : Optional[str] ):
        self._visa_number = number
        return

    def set_information( self, information : Optional[str] ):
        self._information = information
        return
