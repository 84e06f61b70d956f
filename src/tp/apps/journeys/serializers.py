"""
Serializers for journey documents: one JSON document per journey
holding the full tree.

Explicit serializers with manual field mapping, as for the API: the
declared fields validate a document being loaded, to_representation
writes one, and to_instance rebuilds the domain objects with their
original ids and ordering.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from django.utils.dateparse import parse_datetime
from rest_framework import serializers

from .attributes import (
    AccommodationAddress,
    AccommodationTimes,
    ActivityAddresses,
    ActivityTimes,
    AttributeGroup,
    CostRating,
    LocationDates,
    Notes,
    TicketAddresses,
    TicketTimes,
    VisaDates,
)
from .constants import DOCUMENT_VERSION, DocumentFields as F
from .domain import Country, Journey, Location
from .entities import Accommodation, Activity, DepartureTicket, Visa
from .enums import TransportMode, VisaStatus


def represent_decimal( value : Optional[Decimal] ) -> Optional[str]:
    if value is None:
        return None
    return '{:f}'.format( value )


def assert_unique_ids( items : List[Mapping[str, Any]], label : str ):
    seen_ids = set()
    for item in items:
        item_id = item.get( F.ID )
        if item_id in seen_ids:
            raise serializers.ValidationError( f'Duplicate {label} id {item_id}' )
        seen_ids.add( item_id )
        continue
    return


class InstantField( serializers.Field ):
    """
    ISO-8601 datetime kept exactly as given: a naive value stays naive
    and an aware value keeps its offset (no USE_TZ coercion).
    """
    default_error_messages = {
        'invalid': 'Instant has wrong format. Use an ISO-8601 datetime.',
    }

    def to_representation( self, value : datetime ) -> str:
        return value.isoformat()

    def to_internal_value( self, data ) -> datetime:
        if isinstance( data, datetime ):
            return data
        if not isinstance( data, str ):
            self.fail( 'invalid' )
        try:
            value = parse_datetime( data )
        except ValueError:
            value = None
        if value is None:
            self.fail( 'invalid' )
        return value


def optional_char_field():
    return serializers.CharField(
        required = False,
        allow_null = True,
        allow_blank = True,
        trim_whitespace = False,
    )


def optional_date_field():
    return serializers.DateField( required = False, allow_null = True )


def optional_instant_field():
    return InstantField( required = False, allow_null = True )


# =============================================================================
# Attribute groups
# =============================================================================

class AttributeGroupSerializer( serializers.Serializer ):
    """
    Serializer for one attribute group.  Subclasses declare one field per
    group field; values are represented through those declared fields.
    """
    group_class = AttributeGroup

    def to_representation( self, instance : Mapping[str, Any] ) -> Dict[str, Any]:
        representation = dict()
        for name in self.group_class.field_names():
            value = instance.get( name )
            if value is None:
                representation[name] = None
            else:
                representation[name] = self.fields[name].to_representation( value )
            continue
        return representation

    @classmethod
    def to_instance( cls, data : Optional[Mapping[str, Any]] ) -> AttributeGroup:
        return cls.group_class.from_dict( data )


class NotesSerializer( AttributeGroupSerializer ):
    group_class = Notes

    details = optional_char_field()
    pros = optional_char_field()
    cons = optional_char_field()


class LocationDatesSerializer( AttributeGroupSerializer ):
    group_class = LocationDates

    arrival_date = optional_date_field()
    departure_date = optional_date_field()


class AccommodationTimesSerializer( AttributeGroupSerializer ):
    group_class = AccommodationTimes

    arrival_date = optional_date_field()
    departure_date = optional_date_field()
    check_in_time = optional_instant_field()
    check_out_time = optional_instant_field()


class ActivityTimesSerializer( AttributeGroupSerializer ):
    group_class = ActivityTimes

    starting_time = optional_instant_field()
    ending_time = optional_instant_field()


class TicketTimesSerializer( AttributeGroupSerializer ):
    group_class = TicketTimes

    departure_time = optional_instant_field()
    arrival_time = optional_instant_field()


class VisaDatesSerializer( AttributeGroupSerializer ):
    group_class = VisaDates

    entry_date = optional_date_field()
    exit_date = optional_date_field()


class AccommodationAddressSerializer( AttributeGroupSerializer ):
    group_class = AccommodationAddress

    address = optional_char_field()


class ActivityAddressesSerializer( AttributeGroupSerializer ):
    group_class = ActivityAddresses

    starting_address = optional_char_field()
    ending_address = optional_char_field()


class TicketAddressesSerializer( AttributeGroupSerializer ):
    group_class = TicketAddresses

    departure_address = optional_char_field()
    arrival_address = optional_char_field()


# =============================================================================
# Leaf entities
# =============================================================================

class CostableEntitySerializer( serializers.Serializer ):
    """
    Fields shared by every leaf entity: notes plus cost and rating.
    """
    notes = NotesSerializer( required = False )
    cost = serializers.DecimalField(
        max_digits = None,
        decimal_places = None,
        required = False,
        allow_null = True,
    )
    rating = serializers.FloatField( required = False, allow_null = True )

    @staticmethod
    def common_representation( instance ) -> Dict[str, Any]:
        return {
            F.NOTES: NotesSerializer().to_representation( instance.notes.to_dict() ),
            F.COST: represent_decimal( instance.cost ),
            F.RATING: float( instance.rating ) if instance.rating is not None else None,
        }

    @staticmethod
    def notes_and_cost( data : Mapping[str, Any] ) -> Dict[str, Any]:
        return {
            'notes': NotesSerializer.to_instance( data.get( F.NOTES )),
            'cost_rating': CostRating(
                cost = data.get( F.COST ),
                rating = data.get( F.RATING ),
            ),
        }


class ActivitySerializer( CostableEntitySerializer ):

    id = serializers.IntegerField( min_value = 1 )
    name = serializers.CharField( allow_blank = True, trim_whitespace = False )
    temporal_details = ActivityTimesSerializer( required = False )
    addressable_details = ActivityAddressesSerializer( required = False )
    to_bring = serializers.ListField(
        child = serializers.CharField( allow_blank = True, trim_whitespace = False ),
        required = False,
    )

    def to_representation( self, instance : Activity ) -> Dict[str, Any]:
        representation = {
            F.ID: instance.id,
            F.NAME: instance.name,
            F.TEMPORAL_DETAILS: ActivityTimesSerializer().to_representation( instance.temporal_details ),
            F.ADDRESSABLE_DETAILS: ActivityAddressesSerializer().to_representation( instance.addressable_details ),
            F.TO_BRING: list( instance.to_bring ),
        }
        representation.update( self.common_representation( instance ))
        return representation

    @classmethod
    def to_instance( cls, data : Mapping[str, Any] ) -> Activity:
        return Activity(
            data[F.ID],
            data[F.NAME],
            times = ActivityTimesSerializer.to_instance( data.get( F.TEMPORAL_DETAILS )),
            addresses = ActivityAddressesSerializer.to_instance( data.get( F.ADDRESSABLE_DETAILS )),
            to_bring = data.get( F.TO_BRING ),
            **cls.notes_and_cost( data ),
        )


class AccommodationSerializer( CostableEntitySerializer ):

    id = serializers.IntegerField( min_value = 1 )
    name = serializers.CharField( allow_blank = True, trim_whitespace = False )
    booking_service = optional_char_field()
    temporal_details = AccommodationTimesSerializer( required = False )
    addressable_details = AccommodationAddressSerializer( required = False )

    def to_representation( self, instance : Accommodation ) -> Dict[str, Any]:
        representation = {
            F.ID: instance.id,
            F.NAME: instance.name,
            F.BOOKING_SERVICE: instance.booking_service,
            F.TEMPORAL_DETAILS: AccommodationTimesSerializer().to_representation( instance.temporal_details ),
            F.ADDRESSABLE_DETAILS: AccommodationAddressSerializer().to_representation( instance.addressable_details ),
        }
        representation.update( self.common_representation( instance ))
        return representation

    @classmethod
    def to_instance( cls, data : Mapping[str, Any] ) -> Accommodation:
        return Accommodation(
            data[F.ID],
            data[F.NAME],
            times = AccommodationTimesSerializer.to_instance( data.get( F.TEMPORAL_DETAILS )),
            address = AccommodationAddressSerializer.to_instance( data.get( F.ADDRESSABLE_DETAILS )),
            booking_service = data.get( F.BOOKING_SERVICE ),
            **cls.notes_and_cost( data ),
        )


class DepartureTicketSerializer( CostableEntitySerializer ):

    transport_mode = serializers.ChoiceField(
        choices = TransportMode.choices(),
        required = False,
        allow_null = True,
    )
    transport_provider = optional_char_field()
    ticket_number = optional_char_field()
    path_to_file = optional_char_field()
    temporal_details = TicketTimesSerializer( required = False )
    addressable_details = TicketAddressesSerializer( required = False )

    def to_representation( self, instance : DepartureTicket ) -> Dict[str, Any]:
        representation = {
            F.TRANSPORT_MODE: str( instance.transport_mode ) if instance.transport_mode else None,
            F.TRANSPORT_PROVIDER: instance.transport_provider,
            F.TICKET_NUMBER: instance.ticket_number,
            F.PATH_TO_FILE: instance.path_to_file,
            F.TEMPORAL_DETAILS: TicketTimesSerializer().to_representation( instance.temporal_details ),
            F.ADDRESSABLE_DETAILS: TicketAddressesSerializer().to_representation( instance.addressable_details ),
        }
        representation.update( self.common_representation( instance ))
        return representation

    @classmethod
    def to_instance( cls, data : Mapping[str, Any] ) -> DepartureTicket:
        transport_mode = data.get( F.TRANSPORT_MODE )
        return DepartureTicket(
            times = TicketTimesSerializer.to_instance( data.get( F.TEMPORAL_DETAILS )),
            addresses = TicketAddressesSerializer.to_instance( data.get( F.ADDRESSABLE_DETAILS )),
            transport_mode = TransportMode.from_name( transport_mode ) if transport_mode else None,
            transport_provider = data.get( F.TRANSPORT_PROVIDER ),
            ticket_number = data.get( F.TICKET_NUMBER ),
            path_to_file = data.get( F.PATH_TO_FILE ),
            **cls.notes_and_cost( data ),
        )


class VisaSerializer( CostableEntitySerializer ):

    visa_type = optional_char_field()
    visa_number = optional_char_field()
    information = optional_char_field()
    path_to_file = optional_char_field()
    temporal_details = VisaDatesSerializer( required = False )

    def to_representation( self, instance : Visa ) -> Dict[str, Any]:
        representation = {
            F.VISA_TYPE: instance.visa_type,
            F.VISA_NUMBER: instance.visa_number,
            F.INFORMATION: instance.information,
            F.PATH_TO_FILE: instance.path_to_file,
            F.TEMPORAL_DETAILS: VisaDatesSerializer().to_representation( instance.temporal_details ),
        }
        representation.update( self.common_representation( instance ))
        return representation

    @classmethod
    def to_instance( cls, data : Mapping[str, Any] ) -> Visa:
        return Visa(
            dates = VisaDatesSerializer.to_instance( data.get( F.TEMPORAL_DETAILS )),
            visa_type = data.get( F.VISA_TYPE ),
            visa_number = data.get( F.VISA_NUMBER ),
            information = data.get( F.INFORMATION ),
            path_to_file = data.get( F.PATH_TO_FILE ),
            **cls.notes_and_cost( data ),
        )


# =============================================================================
# Containers
# =============================================================================

class LocationSerializer( serializers.Serializer ):

    id = serializers.IntegerField( min_value = 1 )
    name = serializers.CharField( allow_blank = True, trim_whitespace = False )
    notes = NotesSerializer( required = False )
    temporal_details = LocationDatesSerializer( required = False )
    departure_ticket = DepartureTicketSerializer( required = False, allow_null = True )
    accommodations = AccommodationSerializer( many = True, required = False )
    activities = ActivitySerializer( many = True, required = False )
    photos = serializers.ListField(
        child = serializers.CharField( allow_blank = True, trim_whitespace = False ),
        required = False,
    )

    def validate_accommodations( self, value ):
        assert_unique_ids( value, 'accommodation' )
        return value

    def validate_activities( self, value ):
        assert_unique_ids( value, 'activity' )
        return value

    def to_representation( self, instance : Location ) -> Dict[str, Any]:
        accommodations = [ AccommodationSerializer().to_representation( x )
                           for x in instance.accommodations ]
        activities = [ ActivitySerializer().to_representation( x )
                       for x in instance.activities ]
        if instance.departure_ticket:
            departure_ticket = DepartureTicketSerializer().to_representation( instance.departure_ticket )
        else:
            departure_ticket = None

        return {
            F.ID: instance.id,
            F.NAME: instance.name,
            F.NOTES: NotesSerializer().to_representation( instance.notes.to_dict() ),
            F.TEMPORAL_DETAILS: LocationDatesSerializer().to_representation( instance.temporal_details ),
            F.DEPARTURE_TICKET: departure_ticket,
            F.ACCOMMODATIONS: accommodations,
            F.ACTIVITIES: activities,
            F.PHOTOS: list( instance.photos ),
        }

    @classmethod
    def to_instance( cls, data : Mapping[str, Any] ) -> Location:
        departure_ticket_data = data.get( F.DEPARTURE_TICKET )
        if departure_ticket_data is not None:
            departure_ticket = DepartureTicketSerializer.to_instance( departure_ticket_data )
        else:
            departure_ticket = None

        return Location(
            data[F.ID],
            data[F.NAME],
            dates = LocationDatesSerializer.to_instance( data.get( F.TEMPORAL_DETAILS )),
            notes = NotesSerializer.to_instance( data.get( F.NOTES )),
            departure_ticket = departure_ticket,
            accommodations = [ AccommodationSerializer.to_instance( x )
                               for x in data.get( F.ACCOMMODATIONS, [] ) ],
            activities = [ ActivitySerializer.to_instance( x )
                           for x in data.get( F.ACTIVITIES, [] ) ],
            photos = data.get( F.PHOTOS ),
        )


class CountrySerializer( serializers.Serializer ):

    id = serializers.IntegerField( min_value = 1 )
    name = serializers.CharField( allow_blank = True, trim_whitespace = False )
    notes = NotesSerializer( required = False )
    visa_status = serializers.ChoiceField(
        choices = VisaStatus.choices(),
        required = False,
    )
    visa = VisaSerializer( required = False, allow_null = True )
    locations = LocationSerializer( many = True, required = False )

    def validate_locations( self, value ):
        assert_unique_ids( value, 'location' )
        return value

    def validate( self, attrs ):
        visa_status = attrs.get( F.VISA_STATUS, str( VisaStatus.UNSET ))
        has_visa = bool( attrs.get( F.VISA ) is not None )
        if has_visa != ( visa_status == str( VisaStatus.REQUIRED )):
            raise serializers.ValidationError(
                f'Visa status "{visa_status}" does not match the visa details present'
            )
        return attrs

    def to_representation( self, instance : Country ) -> Dict[str, Any]:
        locations = [ LocationSerializer().to_representation( x )
                      for x in instance.locations ]
        if instance.visa:
            visa = VisaSerializer().to_representation( instance.visa )
        else:
            visa = None

        return {
            F.ID: instance.id,
            F.NAME: instance.name,
            F.NOTES: NotesSerializer().to_representation( instance.notes.to_dict() ),
            F.VISA_STATUS: str( instance.visa_status ),
            F.VISA: visa,
            F.LOCATIONS: locations,
        }

    @classmethod
    def to_instance( cls, data : Mapping[str, Any] ) -> Country:
        visa_data = data.get( F.VISA )
        return Country(
            data[F.ID],
            data[F.NAME],
            notes = NotesSerializer.to_instance( data.get( F.NOTES )),
            locations = [ LocationSerializer.to_instance( x )
                          for x in data.get( F.LOCATIONS, [] ) ],
            visa_status = VisaStatus.from_name( data.get( F.VISA_STATUS, str( VisaStatus.UNSET ))),
            visa = VisaSerializer.to_instance( visa_data ) if visa_data is not None else None,
        )


class JourneyDocumentSerializer( serializers.Serializer ):
    """
    A whole journey as one document.  Loading is

        serializer = JourneyDocumentSerializer( data = document )
        serializer.is_valid( raise_exception = True )
        journey = serializer.save()

    and writing is JourneyDocumentSerializer( journey ).data.
    """
    document_version = serializers.IntegerField()
    id = serializers.IntegerField( min_value = 1 )
    name = serializers.CharField( allow_blank = True, trim_whitespace = False )
    notes = NotesSerializer( required = False )
    countries = CountrySerializer( many = True, required = False )

    def validate_document_version( self, value ):
        if value != DOCUMENT_VERSION:
            raise serializers.ValidationError( f'Unsupported document version {value}' )
        return value

    def validate_countries( self, value ):
        assert_unique_ids( value, 'country' )
        return value

    def to_representation( self, instance : Journey ) -> Dict[str, Any]:
        countries = [ CountrySerializer().to_representation( x )
                      for x in instance.countries ]
        return {
            F.DOCUMENT_VERSION: DOCUMENT_VERSION,
            F.ID: instance.id,
            F.NAME: instance.name,
            F.NOTES: NotesSerializer().to_representation( instance.notes.to_dict() ),
            F.COUNTRIES: countries,
        }

    def create( self, validated_data ) -> Journey:
        return self.to_instance( validated_data )

    @classmethod
    def to_instance( cls, data : Mapping[str, Any] ) -> Journey:
        return Journey(
            data[F.ID],
            data[F.NAME],
            notes = NotesSerializer.to_instance( data.get( F.NOTES )),
            countries = [ CountrySerializer.to_instance( x )
                          for x in data.get( F.COUNTRIES, [] ) ],
        )
