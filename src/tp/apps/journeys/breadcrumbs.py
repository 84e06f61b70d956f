"""
Resolution of URL-like paths into the chain of journey entities they
address, and the breadcrumb trail for that chain.

A path alternates category keywords and numeric ids, e.g.

    /journeys/1/countries/2/locations/3/activities/4

Singleton categories (visa, departure_ticket) take no id.  A segment
starting with "add_" marks a page creating a new child: it ends the
ancestry, and a number following it is the id the new child is going
to get, so it is not looked up.  Paths may stop at any depth.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

from .domain import Country, Journey, Location, find_journey
from .entities import IdentifiedEntity
from .enums import PathCategory
from .exceptions import MalformedPathError

logger = logging.getLogger(__name__)

ADD_ACTION_PREFIX = 'add_'

CHILD_CATEGORIES = {
    None: [ PathCategory.JOURNEYS ],
    PathCategory.JOURNEYS: [ PathCategory.COUNTRIES ],
    PathCategory.COUNTRIES: [ PathCategory.LOCATIONS, PathCategory.VISA ],
    PathCategory.LOCATIONS: [ PathCategory.ACCOMMODATIONS,
                              PathCategory.ACTIVITIES,
                              PathCategory.DEPARTURE_TICKET ],
    PathCategory.ACCOMMODATIONS: [],
    PathCategory.ACTIVITIES: [],
    PathCategory.VISA: [],
    PathCategory.DEPARTURE_TICKET: [],
}

SINGLETON_DISPLAY_NAMES = {
    PathCategory.VISA: 'Visa',
    PathCategory.DEPARTURE_TICKET: 'Departure ticket',
}


@dataclass
class PathSegment:

    category  : PathCategory
    raw_id    : Optional[str]
    path      : str

    @property
    def entity_id(self) -> Optional[int]:
        """Numeric id of the segment, None when absent or not a number."""
        if self.raw_id is None or not self.raw_id.isdecimal():
            return None
        return int( self.raw_id )


@dataclass
class ParsedPath:

    segments        : List[PathSegment]
    pending_action  : Optional[str]  = None
    pending_id      : Optional[int]  = None


@dataclass
class Breadcrumb:

    name  : str
    path  : str


@dataclass
class NotFoundSegment:
    """The first path segment that does not match a live entity."""

    category      : PathCategory
    requested_id  : Optional[str]
    path          : str


@dataclass
class ResolvedPath:

    entities        : List[object]                       = field( default_factory = list )
    breadcrumbs     : List[Breadcrumb]                   = field( default_factory = list )
    not_found       : Optional[NotFoundSegment]          = None
    pending_action  : Optional[str]                      = None
    pending_id      : Optional[int]                      = None
    by_category     : Dict[PathCategory, object]         = field( default_factory = dict )

    @property
    def is_found(self) -> bool:
        return bool( self.not_found is None )

    @property
    def leaf(self):
        if not self.entities:
            return None
        return self.entities[-1]

    @property
    def journey(self) -> Optional[Journey]:
        return self.by_category.get( PathCategory.JOURNEYS )

    @property
    def country(self) -> Optional[Country]:
        return self.by_category.get( PathCategory.COUNTRIES )

    @property
    def location(self) -> Optional[Location]:
        return self.by_category.get( PathCategory.LOCATIONS )


class PathParser:

    @classmethod
    def parse( cls, path : Union[str, Sequence[str]] ) -> ParsedPath:
        """
        Split a path into category/id segments.  Raises MalformedPathError
        for unknown keywords or keywords out of hierarchy order.
        """
        tokens = cls._tokenize( path )
        parsed = ParsedPath( segments = [] )

        parent_category = None
        index = 0
        while index < len( tokens ):
            token = tokens[index]
            if token.startswith( ADD_ACTION_PREFIX ):
                cls._set_pending( parsed, tokens, index )
                break

            category = cls._to_category( token )
            if category not in CHILD_CATEGORIES[parent_category]:
                raise MalformedPathError(
                    f'"{token}" cannot follow "{parent_category.value if parent_category else "/"}"'
                )

            if category.is_singleton:
                index += 1
                parsed.segments.append( PathSegment(
                    category = category,
                    raw_id = None,
                    path = cls._join( tokens[0:index] ),
                ))
            else:
                if index + 1 >= len( tokens ):
                    # A trailing collection keyword (e.g. /journeys/1/countries)
                    # addresses no particular entity.
                    break
                id_token = tokens[index + 1]
                if id_token.startswith( ADD_ACTION_PREFIX ):
                    cls._set_pending( parsed, tokens, index + 1 )
                    break
                index += 2
                parsed.segments.append( PathSegment(
                    category = category,
                    raw_id = id_token,
                    path = cls._join( tokens[0:index] ),
                ))
            parent_category = category
            continue

        return parsed

    @classmethod
    def _tokenize( cls, path : Union[str, Sequence[str]] ) -> List[str]:
        if isinstance( path, str ):
            raw_tokens = path.split( '/' )
        else:
            raw_tokens = [ str( x ) for x in path ]
        return [ x.strip() for x in raw_tokens if x and x.strip() ]

    @classmethod
    def _to_category( cls, token : str ) -> PathCategory:
        try:
            return PathCategory( token )
        except ValueError:
            raise MalformedPathError( f'Unknown path category "{token}"' )

    @classmethod
    def _set_pending( cls, parsed : ParsedPath, tokens : List[str], index : int ):
        parsed.pending_action = tokens[index]
        if index + 1 < len( tokens ) and tokens[index + 1].isdecimal():
            parsed.pending_id = int( tokens[index + 1] )
        return

    @staticmethod
    def _join( tokens : List[str] ) -> str:
        return '/' + '/'.join( tokens )


class BreadcrumbResolver:
    """
    Walks a parsed path down the journey tree by parent-scoped id lookup,
    starting from the explicit load-set of journeys.
    """

    @classmethod
    def resolve( cls,
                 journeys  : Sequence[Journey],
                 path      : Union[str, Sequence[str]] ) -> ResolvedPath:
        parsed = PathParser.parse( path )
        resolved = ResolvedPath(
            pending_action = parsed.pending_action,
            pending_id = parsed.pending_id,
        )

        parent = None
        for segment in parsed.segments:
            entity = cls._find_child( journeys, parent, segment )
            if entity is None:
                logger.info( f'Path segment not found: {segment.path}' )
                resolved.not_found = NotFoundSegment(
                    category = segment.category,
                    requested_id = segment.raw_id,
                    path = segment.path,
                )
                break

            resolved.entities.append( entity )
            resolved.by_category[segment.category] = entity
            resolved.breadcrumbs.append( Breadcrumb(
                name = cls.display_name( entity, segment.category ),
                path = segment.path,
            ))
            parent = entity
            continue

        logger.debug( f'Resolved {len(resolved.entities)} of {len(parsed.segments)} path segments' )
        return resolved

    @classmethod
    def display_name( cls, entity, category : PathCategory ) -> str:
        if isinstance( entity, IdentifiedEntity ):
            return entity.name
        return SINGLETON_DISPLAY_NAMES[category]

    @classmethod
    def _find_child( cls, journeys : Sequence[Journey], parent, segment : PathSegment ):
        category = segment.category
        entity_id = segment.entity_id

        if category == PathCategory.JOURNEYS:
            return find_journey( journeys, entity_id )
        if category == PathCategory.COUNTRIES:
            return parent.find_country( entity_id )
        if category == PathCategory.LOCATIONS:
            return parent.find_location( entity_id )
        if category == PathCategory.ACCOMMODATIONS:
            return parent.find_accommodation( entity_id )
        if category == PathCategory.ACTIVITIES:
            return parent.find_activity( entity_id )
        if category == PathCategory.VISA:
            return parent.visa
        if category == PathCategory.DEPARTURE_TICKET:
            return parent.departure_ticket
        raise MalformedPathError( f'No lookup for path category "{category.value}"' )
