import json
import logging
import os
import re
import tempfile
from datetime import date, datetime
from typing import List, Optional, Sequence

from django.conf import settings

from tp.apps.common.utils import is_blank, strip_or_none

from .constants import DocumentFields as F
from .domain import Country, Journey, Location, find_journey, is_name_in_use, journey_names
from .exceptions import JourneyDocumentError, JourneyInputError
from .serializers import JourneyDocumentSerializer

logger = logging.getLogger(__name__)


class JourneyService:
    """
    Orchestrates creating journeys and their first countries/locations
    from raw user input.  Does the presence and format checks the domain
    model leaves to its callers; raises JourneyInputError with a message
    fit for the user when a check fails.
    """

    JOURNEY_NAME_PATTERN = re.compile( r'\A[a-z0-9 _-]+\Z', re.IGNORECASE )

    EMPTY_NAME_MESSAGE = 'A name for the journey must be supplied.'
    INVALID_NAME_CHARS_MESSAGE = ( 'Journey name must be constructed with alphanumerics, whitespace,'
                                   ' hyphens, and underscores only.' )
    NAME_IN_USE_MESSAGE = 'That name is already in use for another journey, please choose another.'
    EMPTY_FIELD_MESSAGE = 'Please make sure an entry has been supplied in each field.'
    INVALID_DATE_MESSAGE = 'Invalid date: Please be sure to follow the specified format: {display_format}'

    @classmethod
    def validate_journey_name( cls,
                               name      : str,
                               journeys  : Sequence[Journey] ) -> str:
        """
        Returns the stripped name, or raises JourneyInputError.
        """
        name = strip_or_none( name ) or ''
        if not name:
            raise JourneyInputError( cls.EMPTY_NAME_MESSAGE, value = name )
        if not cls.JOURNEY_NAME_PATTERN.match( name ):
            raise JourneyInputError( cls.INVALID_NAME_CHARS_MESSAGE, value = name )
        if is_name_in_use( name, journeys ):
            raise JourneyInputError( cls.NAME_IN_USE_MESSAGE, value = name )
        return name

    @classmethod
    def create_journey( cls,
                        name      : str,
                        journeys  : Sequence[Journey] ) -> Journey:
        name = cls.validate_journey_name( name, journeys )
        journey = Journey.create( name, journeys )
        logger.info( f'Created journey {journey}' )
        return journey

    @classmethod
    def add_country( cls,
                     journey        : Journey,
                     country_name   : str,
                     location_name  : str,
                     arrival_date   : str ) -> Country:
        """
        Adds a country together with the first location visited there.
        """
        country_name, location_name, arrival_date = cls._require_all(
            country_name, location_name, arrival_date,
        )
        parsed_date = cls.parse_date( arrival_date )

        country = journey.add_country( country_name )
        location = country.add_location( location_name )
        location.set_arrival_date( parsed_date )
        logger.info( f'Added country {country} to journey {journey}' )
        return country

    @classmethod
    def add_location( cls,
                      country        : Country,
                      location_name  : str,
                      arrival_date   : str ) -> Location:
        location_name, arrival_date = cls._require_all( location_name, arrival_date )
        parsed_date = cls.parse_date( arrival_date )

        location = country.add_location( location_name )
        location.set_arrival_date( parsed_date )
        logger.info( f'Added location {location} to country {country}' )
        return location

    @classmethod
    def parse_date( cls,
                    value           : str,
                    date_format     : str  = None,
                    display_format  : str  = None ) -> date:
        """
        An explicit date_format is shown as-is in the error message unless
        a display_format for it is also given.
        """
        if date_format is None:
            date_format = settings.JOURNEY_DATE_INPUT_FORMAT
            if display_format is None:
                display_format = settings.JOURNEY_DATE_INPUT_FORMAT_DISPLAY
        elif display_format is None:
            display_format = date_format
        try:
            return datetime.strptime( value.strip(), date_format ).date()
        except ValueError:
            message = cls.INVALID_DATE_MESSAGE.format( display_format = display_format )
            raise JourneyInputError( message, value = value )

    @classmethod
    def _require_all( cls, *values : str ) -> List[str]:
        if any( is_blank( x ) for x in values ):
            raise JourneyInputError( cls.EMPTY_FIELD_MESSAGE )
        return [ x.strip() for x in values ]


class JourneyStore:
    """
    A directory holding one JSON document per journey, named from the
    journey's canonical slug.

    Nothing is cached: every load reads the directory afresh and every
    save overwrites the journey's whole document, so of two overlapping
    load/modify/save cycles on the same journey the last save wins.
    """

    def __init__( self,
                  data_path  : str = None,
                  extension  : str = None ):
        self._data_path = data_path or settings.JOURNEY_DATA_PATH
        self._extension = extension or settings.JOURNEY_DOCUMENT_EXTENSION
        return

    @property
    def data_path(self) -> str:
        return self._data_path

    def document_path( self, journey : Journey ) -> str:
        return os.path.join( self._data_path, f'{journey.camel_case_name}{self._extension}' )

    def load_journeys(self) -> List[Journey]:
        """
        The full load-set, ordered by journey id.
        """
        journeys = [ self.load_document( x ) for x in self._document_paths() ]
        journeys.sort( key = lambda x: x.id )
        return journeys

    def load_journey( self, journey_id : int ) -> Optional[Journey]:
        return find_journey( self.load_journeys(), journey_id )

    def journey_names(self) -> List[str]:
        return journey_names( self.load_journeys() )

    def load_document( self, path : str ) -> Journey:
        try:
            with open( path, 'r', encoding = 'utf-8' ) as fp:
                document = json.load( fp )
        except ( OSError, ValueError ) as e:
            logger.warning( f'Unreadable journey document {path}: {e}' )
            raise JourneyDocumentError( 'Unreadable journey document', path = path, detail = str(e) ) from e

        serializer = JourneyDocumentSerializer( data = document )
        if not serializer.is_valid():
            logger.warning( f'Invalid journey document {path}: {serializer.errors}' )
            raise JourneyDocumentError( 'Invalid journey document', path = path, detail = serializer.errors )
        return serializer.save()

    def save_journey( self, journey : Journey ) -> str:
        """
        Write the journey's whole document, replacing any previous one.
        Returns the document path.  Raises JourneyInputError, writing
        nothing, when the journey's name maps onto the document of a
        different stored journey.
        """
        os.makedirs( self._data_path, exist_ok = True )
        path = self.document_path( journey )
        if os.path.exists( path ):
            stored_id = self._stored_journey_id( path )
            if stored_id is not None and stored_id != journey.id:
                logger.warning( f'Refusing to overwrite journey {stored_id} at {path} with {journey}' )
                raise JourneyInputError( JourneyService.NAME_IN_USE_MESSAGE, value = journey.name )
        document = JourneyDocumentSerializer( journey ).data

        fd, temp_path = tempfile.mkstemp( dir = self._data_path, suffix = '.tmp' )
        try:
            with os.fdopen( fd, 'w', encoding = 'utf-8' ) as fp:
                json.dump( document, fp, indent = 2 )
            os.replace( temp_path, path )
        except Exception:
            if os.path.exists( temp_path ):
                os.remove( temp_path )
            raise

        self._remove_stale_documents( journey, path )
        logger.info( f'Saved journey {journey} to {path}' )
        return path

    def create_journey( self, name : str ) -> Journey:
        """
        Validate the name against the stored journeys, then create and
        save the new journey.
        """
        journey = JourneyService.create_journey( name, self.load_journeys() )
        self.save_journey( journey )
        return journey

    def _document_paths(self) -> List[str]:
        if not os.path.isdir( self._data_path ):
            return []
        return sorted( os.path.join( self._data_path, x )
                       for x in os.listdir( self._data_path )
                       if x.endswith( self._extension ) )

    def _stored_journey_id( self, path : str ) -> Optional[int]:
        """Id held by a stored document, None when it cannot be read."""
        try:
            with open( path, 'r', encoding = 'utf-8' ) as fp:
                return json.load( fp ).get( F.ID )
        except ( OSError, ValueError, AttributeError ) as e:
            logger.warning( f'Skipping unreadable journey document {path}: {e}' )
            return None

    def _remove_stale_documents( self, journey : Journey, current_path : str ):
        """
        A renamed journey gets a new document path; drop any other
        document still holding the same journey id.
        """
        for path in self._document_paths():
            if path == current_path:
                continue
            if self._stored_journey_id( path ) == journey.id:
                logger.info( f'Removing stale document {path} for journey {journey}' )
                os.remove( path )
            continue
        return
