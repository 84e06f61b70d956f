"""
Tests for resolving journey paths into entity chains and breadcrumbs.
"""
import logging

from django.test import TestCase

from tp.apps.journeys.breadcrumbs import BreadcrumbResolver, PathParser
from tp.apps.journeys.enums import PathCategory
from tp.apps.journeys.exceptions import MalformedPathError

from .synthetic_data import JourneySyntheticData

logging.disable(logging.CRITICAL)


class PathParserTestCase(TestCase):

    def test_segments(self):
        parsed = PathParser.parse( '/journeys/1/countries/2/locations/3' )
        self.assertEqual( [ PathCategory.JOURNEYS, PathCategory.COUNTRIES, PathCategory.LOCATIONS ],
                          [ x.category for x in parsed.segments ] )
        self.assertEqual( [ 1, 2, 3 ], [ x.entity_id for x in parsed.segments ] )
        self.assertEqual( '/journeys/1/countries/2', parsed.segments[1].path )
        self.assertIsNone( parsed.pending_action )
        return

    def test_sequence_input(self):
        parsed = PathParser.parse( [ 'journeys', 1, 'countries', '2' ] )
        self.assertEqual( [ 1, 2 ], [ x.entity_id for x in parsed.segments ] )
        return

    def test_add_marker_with_pending_id(self):
        parsed = PathParser.parse( '/journeys/1/countries/2/add_location/4' )
        self.assertEqual( 2, len( parsed.segments ))
        self.assertEqual( 'add_location', parsed.pending_action )
        self.assertEqual( 4, parsed.pending_id )
        return

    def test_add_marker_in_id_position(self):
        parsed = PathParser.parse( '/journeys/1/countries/add_country' )
        self.assertEqual( 1, len( parsed.segments ))
        self.assertEqual( 'add_country', parsed.pending_action )
        self.assertIsNone( parsed.pending_id )
        return

    def test_non_numeric_id_kept_raw(self):
        parsed = PathParser.parse( '/journeys/abc' )
        self.assertEqual( 'abc', parsed.segments[0].raw_id )
        self.assertIsNone( parsed.segments[0].entity_id )
        return

    def test_malformed_paths(self):
        for path in [ '/countries/1',
                      '/journeys/1/locations/2',
                      '/journeys/1/countries/2/visa/locations/1',
                      '/journeys/1/bogus/2' ]:
            with self.assertRaises( MalformedPathError, msg = path ):
                PathParser.parse( path )
            continue
        return


class BreadcrumbResolverTestCase(TestCase):

    def setUp(self):
        self.journey = JourneySyntheticData.create_populated_journey()
        self.other_journey = JourneySyntheticData.create_test_journey(
            name = 'Other Trip',
            journeys = [ self.journey ],
            country_names = [ 'Peru' ],
        )
        self.journeys = [ self.journey, self.other_journey ]
        return

    def test_full_chain(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries/2/locations/3' )
        self.assertTrue( resolved.is_found )
        self.assertEqual( [ 'Foo Vacation', 'New Zealand', 'Queenstown' ],
                          [ x.name for x in resolved.entities ] )
        self.assertIs( self.journey, resolved.journey )
        self.assertEqual( 2, resolved.country.id )
        self.assertEqual( 3, resolved.location.id )
        self.assertIs( resolved.location, resolved.leaf )
        return

    def test_breadcrumb_trail(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries/2/locations/2/activities/1' )
        self.assertEqual( [ ( 'Foo Vacation', '/journeys/1' ),
                            ( 'New Zealand', '/journeys/1/countries/2' ),
                            ( 'Auckland', '/journeys/1/countries/2/locations/2' ),
                            ( 'Harbour sailing', '/journeys/1/countries/2/locations/2/activities/1' ) ],
                          [ ( x.name, x.path ) for x in resolved.breadcrumbs ] )
        return

    def test_partial_chain(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/2' )
        self.assertEqual( [ self.other_journey ], resolved.entities )
        self.assertIsNone( resolved.country )
        return

    def test_trailing_collection_keyword(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries' )
        self.assertTrue( resolved.is_found )
        self.assertEqual( [ self.journey ], resolved.entities )
        return

    def test_empty_path(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/' )
        self.assertTrue( resolved.is_found )
        self.assertEqual( [], resolved.entities )
        self.assertIsNone( resolved.leaf )
        return

    def test_missing_country(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries/99' )
        self.assertFalse( resolved.is_found )
        self.assertEqual( PathCategory.COUNTRIES, resolved.not_found.category )
        self.assertEqual( '99', resolved.not_found.requested_id )
        self.assertEqual( '/journeys/1/countries/99', resolved.not_found.path )
        self.assertEqual( [ self.journey ], resolved.entities )
        return

    def test_missing_journey(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/7/countries/1' )
        self.assertEqual( PathCategory.JOURNEYS, resolved.not_found.category )
        self.assertEqual( [], resolved.entities )
        return

    def test_ids_are_parent_scoped(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/2/countries/2' )
        self.assertEqual( PathCategory.COUNTRIES, resolved.not_found.category )

        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/2/countries/1' )
        self.assertEqual( 'Peru', resolved.leaf.name )
        return

    def test_non_numeric_id_not_found(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries/two' )
        self.assertEqual( PathCategory.COUNTRIES, resolved.not_found.category )
        self.assertEqual( 'two', resolved.not_found.requested_id )
        return

    def test_digit_like_id_not_found(self):
        for raw_id in [ '²', '1²', '½' ]:
            resolved = BreadcrumbResolver.resolve( self.journeys, f'/journeys/{raw_id}' )
            self.assertEqual( PathCategory.JOURNEYS, resolved.not_found.category, raw_id )
            self.assertEqual( raw_id, resolved.not_found.requested_id )
            continue
        return

    def test_digit_like_pending_id_ignored(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/add_country/²' )
        self.assertEqual( 'add_country', resolved.pending_action )
        self.assertIsNone( resolved.pending_id )
        return

    def test_add_marker_is_not_an_entity(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries/2/add_location' )
        self.assertTrue( resolved.is_found )
        self.assertEqual( [ 'Foo Vacation', 'New Zealand' ], [ x.name for x in resolved.entities ] )
        self.assertEqual( 'add_location', resolved.pending_action )
        self.assertIsNone( resolved.pending_id )
        return

    def test_add_marker_pending_id_not_looked_up(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries/2/add_location/4' )
        self.assertTrue( resolved.is_found )
        self.assertEqual( 2, len( resolved.entities ))
        self.assertEqual( 4, resolved.pending_id )
        return

    def test_add_marker_at_journey_level(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/add_country' )
        self.assertEqual( [ self.journey ], resolved.entities )
        self.assertEqual( 'add_country', resolved.pending_action )
        return

    def test_visa_singleton(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries/2/visa' )
        self.assertTrue( resolved.is_found )
        self.assertEqual( 'NZ-123', resolved.leaf.visa_number )
        self.assertEqual( ( 'Visa', '/journeys/1/countries/2/visa' ),
                          ( resolved.breadcrumbs[-1].name, resolved.breadcrumbs[-1].path ))
        return

    def test_visa_not_needed_is_not_found(self):
        resolved = BreadcrumbResolver.resolve( self.journeys, '/journeys/1/countries/1/visa' )
        self.assertEqual( PathCategory.VISA, resolved.not_found.category )
        self.assertIsNone( resolved.not_found.requested_id )
        return

    def test_departure_ticket_singleton(self):
        resolved = BreadcrumbResolver.resolve(
            self.journeys, '/journeys/1/countries/2/locations/2/departure_ticket',
        )
        self.assertEqual( 'NZ615', resolved.leaf.ticket_number )
        self.assertEqual( 'Departure ticket', resolved.breadcrumbs[-1].name )

        resolved = BreadcrumbResolver.resolve(
            self.journeys, '/journeys/1/countries/2/locations/1/departure_ticket',
        )
        self.assertEqual( PathCategory.DEPARTURE_TICKET, resolved.not_found.category )
        return

    def test_accommodations(self):
        resolved = BreadcrumbResolver.resolve(
            self.journeys, [ 'journeys', '1', 'countries', '2', 'locations', '2', 'accommodations', '1' ],
        )
        self.assertEqual( 'Harbour Hostel', resolved.leaf.name )
        return

    def test_malformed_path_raises(self):
        with self.assertRaises( MalformedPathError ):
            BreadcrumbResolver.resolve( self.journeys, '/journeys/1/activities/1' )
        return
