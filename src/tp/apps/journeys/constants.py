"""
Field name constants for serialized journey documents.

These define the JSON keys written by the journey document serializers
and read back when loading.  Check here first before adding a new field.
"""

DOCUMENT_VERSION = 1


class DocumentFields:
    """
    Key names used in journey documents.
    """

    # -------------------------------------------------------------------------
    # Common fields
    # -------------------------------------------------------------------------
    DOCUMENT_VERSION = 'document_version'
    ID = 'id'
    NAME = 'name'
    NOTES = 'notes'
    DETAILS = 'details'
    PROS = 'pros'
    CONS = 'cons'
    COST = 'cost'
    RATING = 'rating'
    PATH_TO_FILE = 'path_to_file'
    TEMPORAL_DETAILS = 'temporal_details'
    ADDRESSABLE_DETAILS = 'addressable_details'

    # -------------------------------------------------------------------------
    # Journeys / countries
    # -------------------------------------------------------------------------
    COUNTRIES = 'countries'
    LOCATIONS = 'locations'
    VISA_STATUS = 'visa_status'
    VISA = 'visa'

    # -------------------------------------------------------------------------
    # Locations
    # -------------------------------------------------------------------------
    DEPARTURE_TICKET = 'departure_ticket'
    ACCOMMODATIONS = 'accommodations'
    ACTIVITIES = 'activities'
    PHOTOS = 'photos'

    # -------------------------------------------------------------------------
    # Leaf entities
    # -------------------------------------------------------------------------
    TO_BRING = 'to_bring'
    BOOKING_SERVICE = 'booking_service'
    TRANSPORT_MODE = 'transport_mode'
    TRANSPORT_PROVIDER = 'transport_provider'
    TICKET_NUMBER = 'ticket_number'
    VISA_TYPE = 'visa_type'
    VISA_NUMBER = 'visa_number'
    INFORMATION = 'information'
