from enum import Enum

from tp.apps.common.enums import LabeledEnum


class PathCategory(str, Enum):
    """Keywords used in the URL-like paths that address journey entities."""

    JOURNEYS          = 'journeys'
    COUNTRIES         = 'countries'
    LOCATIONS         = 'locations'
    ACCOMMODATIONS    = 'accommodations'
    ACTIVITIES        = 'activities'
    VISA              = 'visa'
    DEPARTURE_TICKET  = 'departure_ticket'

    @property
    def is_singleton(self) -> bool:
        """Singleton categories address a single child and take no id segment."""
        return bool( self in [ PathCategory.VISA, PathCategory.DEPARTURE_TICKET ])


class TransportMode( LabeledEnum ):

    FLIGHT  = ( 'Flight', '' )
    RAIL    = ( 'Rail', '' )
    BUS     = ( 'Bus/Shuttle', '' )
    BOAT    = ( 'Boat', '' )
    FERRY   = ( 'Ferry', '' )
    CAR     = ( 'Car', '' )
    OTHER   = ( 'Other', '' )


class VisaStatus( LabeledEnum ):

    UNSET       = ( 'Unset', 'Visa requirement has not been recorded' )
    NOT_NEEDED  = ( 'Not needed', 'No visa is needed for this country' )
    REQUIRED    = ( 'Required', 'A visa is needed and its details are tracked' )
