"""The module tests the statistics, success story, enumeration, heartbeat and page endpoints."""
import json
import unittest
from datetime import datetime
from datetime import timedelta
from decimal import Decimal

import mock
from flask_api import status
from sqlalchemy.exc import OperationalError

from aid_coordination.app import create_app
from aid_coordination.flask_essentials import database
from aid_coordination.models.connection import AidTransactionModel
from aid_coordination.models.statistics_cache import StatisticsCacheModel
from aid_coordination.models.success_story import SuccessStoryModel
from aid_coordination.models.user import USER_ROLES
from aid_coordination.schemas.aid_request import AidRequestSchema
from aid_coordination.schemas.cause import CauseSchema
from aid_coordination.schemas.cause_donation import CauseDonationSchema
from aid_coordination.schemas.connection import ConnectionSchema
from tests.helpers.default_dictionaries import get_cause_dict
from tests.helpers.default_dictionaries import get_connection_dict
from tests.helpers.default_dictionaries import get_donation_dict
from tests.helpers.default_dictionaries import get_request_dict
from tests.helpers.default_dictionaries import get_story_dict
from tests.helpers.model_helpers import create_model_list
from tests.helpers.model_helpers import create_user
from tests.helpers.model_helpers import get_auth_headers


class APIOtherEndpointsTestCase( unittest.TestCase ):
    """This test suite is designed to verify the basic functionality of the remaining API endpoints.

    python -m unittest -v tests.test_api_other_endpoints.APIOtherEndpointsTestCase
    """

    def setUp( self ):
        self.app = create_app( 'TEST' )
        self.app.testing = True
        self.test_client = self.app.test_client()
        with self.app.app_context():
            database.drop_all()
            database.create_all()

    def tearDown( self ):
        with self.app.app_context():
            database.session.remove()
            database.drop_all()

    @staticmethod
    def create_platform():
        """Two donors, a receiver, a cause with two completed and one pending donation, a connection with aid."""

        donor = create_user( 'donor' )
        create_user( 'donor', 'second_donor' )
        receiver = create_user( 'receiver' )

        cause = create_model_list( CauseSchema(), get_cause_dict(), 1 )[ 0 ]
        aid_request = create_model_list( AidRequestSchema(), get_request_dict( { 'user_id': receiver.id } ), 1 )[ 0 ]
        database.session.add_all( [ cause, aid_request ] )
        database.session.commit()

        donations = create_model_list( CauseDonationSchema(), get_donation_dict( { 'cause_id': cause.id } ), 2 )
        donations += create_model_list(
            CauseDonationSchema(), get_donation_dict( { 'cause_id': cause.id, 'status': 'pending' } ), 1
        )
        connection = create_model_list(
            ConnectionSchema(), get_connection_dict( { 'request_id': aid_request.id, 'donor_id': donor.id } ), 1
        )[ 0 ]
        database.session.add_all( donations + [ connection ] )
        database.session.commit()

        database.session.add_all( [
            AidTransactionModel( connection_id=connection.id, amount=Decimal( '100.00' ), transaction_type='monetary' ),
            AidTransactionModel( connection_id=connection.id, amount=Decimal( '60.00' ), transaction_type='goods' )
        ] )
        database.session.commit()
        return cause, connection

    def test_statistics( self ):
        """The snapshot is computed on first read and refreshed by an admin ( methods = [ GET, POST ] )."""

        with self.app.app_context():
            self.create_platform()

            response = self.test_client.get( '/api/statistics' )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            data = json.loads( response.data.decode( 'utf-8' ) )
            self.assertEqual( data[ 'total_donors' ], 2 )
            self.assertEqual( data[ 'total_receivers' ], 1 )
            self.assertEqual( data[ 'total_causes' ], 1 )
            self.assertEqual( data[ 'total_requests' ], 1 )
            self.assertEqual( data[ 'total_connections' ], 1 )
            self.assertEqual( data[ 'total_aid_amount' ], '150.00' )

            admin = create_user( 'admin' )
            create_user( 'receiver', 'second_receiver' )

            response = self.test_client.get( '/api/statistics' )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) )[ 'total_receivers' ], 1 )

            response = self.test_client.post( '/api/statistics/refresh', headers=get_auth_headers( admin ) )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) )[ 'total_receivers' ], 2 )
            self.assertEqual( StatisticsCacheModel.query.count(), 1 )

            response = self.test_client.post(
                '/api/statistics/refresh', headers=get_auth_headers( create_user( 'donor', 'third_donor' ) )
            )
            self.assertEqual( response.status_code, status.HTTP_403_FORBIDDEN )

    def test_success_stories( self ):
        """Admins write stories; only published ones are listed ( methods = [ GET, POST, PUT ] )."""

        with self.app.app_context():
            admin = create_user( 'admin' )
            headers = get_auth_headers( admin )
            cause, connection = self.create_platform()
            cause_id = cause.id
            connection_id = connection.id

            response = self.test_client.post(
                '/api/stories',
                data=json.dumps( get_story_dict( { 'is_featured': True, 'cause_id': cause_id } ) ),
                headers=headers
            )
            self.assertEqual( response.status_code, status.HTTP_201_CREATED )
            data = json.loads( response.data.decode( 'utf-8' ) )
            featured_id = data[ 'id' ]
            self.assertEqual( data[ 'cause_id' ], cause_id )
            self.assertTrue( data[ 'is_featured' ] )

            self.test_client.post(
                '/api/stories', data=json.dumps( get_story_dict( { 'title': 'Second story' } ) ), headers=headers
            )
            response = self.test_client.post(
                '/api/stories', data=json.dumps( get_story_dict( { 'title': 'Draft', 'publish': False } ) ),
                headers=headers
            )
            draft_id = json.loads( response.data.decode( 'utf-8' ) )[ 'id' ]

            response = self.test_client.get( '/api/stories' )
            self.assertEqual( len( json.loads( response.data.decode( 'utf-8' ) ) ), 2 )

            response = self.test_client.get( '/api/stories?featured=1' )
            data = json.loads( response.data.decode( 'utf-8' ) )
            self.assertEqual( [ item[ 'id' ] for item in data ], [ featured_id ] )

            published_at = ( datetime.utcnow() - timedelta( days=1 ) ).isoformat()
            response = self.test_client.put(
                '/api/stories/{}'.format( draft_id ), data=json.dumps( { 'published_at': published_at } ),
                headers=headers
            )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            self.assertIsNotNone( database.session.get( SuccessStoryModel, draft_id ).published_at )

            response = self.test_client.post(
                '/api/stories', data=json.dumps( get_story_dict( { 'cause_id': 9999 } ) ), headers=headers
            )
            self.assertEqual( response.status_code, status.HTTP_404_NOT_FOUND )

            response = self.test_client.post(
                '/api/stories', data=json.dumps( get_story_dict( { 'connection_id': 9999 } ) ), headers=headers
            )
            self.assertEqual( response.status_code, status.HTTP_404_NOT_FOUND )

            response = self.test_client.post(
                '/api/stories', data=json.dumps( get_story_dict( { 'connection_id': connection_id } ) ), headers=headers
            )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) )[ 'connection_id' ], connection_id )
            self.assertEqual( SuccessStoryModel.query.filter_by( cause_id=cause_id ).count(), 1 )

            response = self.test_client.post(
                '/api/stories', data=json.dumps( get_story_dict() ),
                headers=get_auth_headers( create_user( 'donor', 'story_donor' ) )
            )
            self.assertEqual( response.status_code, status.HTTP_403_FORBIDDEN )

    def test_enumeration( self ):
        """Retrieve the allowed values of an enumerated column ( methods = [ GET ] )."""

        with self.app.app_context():
            response = self.test_client.get( '/api/enumeration/users/role' )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) ), list( USER_ROLES ) )

            response = self.test_client.get( '/api/enumeration/requests/urgency' )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) ), [ 'low', 'medium', 'high' ] )

            response = self.test_client.get( '/api/enumeration/requests/title' )
            self.assertEqual( response.status_code, status.HTTP_404_NOT_FOUND )

    def test_heartbeat( self ):
        """The application and its database answer ( methods = [ GET ] )."""

        with self.app.app_context():
            response = self.test_client.get( '/api/heartbeat' )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            self.assertEqual( response.headers[ 'Access-Control-Allow-Origin' ], '*' )

    @mock.patch(
        'aid_coordination.resources.app_health.heartbeat',
        side_effect=OperationalError( 'SELECT 1', {}, Exception( 'database is down' ) )
    )
    def test_database_error( self, mock_heartbeat ):  # pylint: disable=unused-argument
        """A database error is a server error with the raw message ( methods = [ GET ] )."""

        with self.app.app_context():
            response = self.test_client.get( '/api/heartbeat' )
            self.assertEqual( response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR )
            self.assertIn( 'database is down', json.loads( response.data.decode( 'utf-8' ) )[ 'error' ] )

    def test_pages( self ):
        """The server-rendered pages show the same data as the API."""

        with self.app.app_context():
            self.create_platform()

            response = self.test_client.get( '/' )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            self.assertIn( b'Clean water for the valley', response.data )

            response = self.test_client.get( '/collective-aid' )
            self.assertIn( b'Clean water for the valley', response.data )

            response = self.test_client.get( '/individual-aid?urgency=medium' )
            self.assertIn( b'Rent after a hospital stay', response.data )

            response = self.test_client.get( '/individual-aid?urgency=high' )
            self.assertNotIn( b'Rent after a hospital stay', response.data )

            response = self.test_client.get( '/success-stories' )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
