"""The module tests the admin verification endpoints: the review queue, documents and user verification."""
import json
import unittest

from flask_api import status

from aid_coordination.app import create_app
from aid_coordination.flask_essentials import database
from aid_coordination.models.aid_request import AidRequestModel
from aid_coordination.models.aid_request import RequestDocumentModel
from aid_coordination.models.user import UserModel
from aid_coordination.schemas.aid_request import AidRequestSchema
from tests.helpers.default_dictionaries import get_request_dict
from tests.helpers.model_helpers import create_model_list
from tests.helpers.model_helpers import create_user
from tests.helpers.model_helpers import get_auth_headers

DOCUMENT = { 'document_type': 'hospital bill', 'document_url': 'https://files.example.org/bill.pdf' }


class APIVerificationEndpointsTestCase( unittest.TestCase ):
    """This test suite is designed to verify the basic functionality of the API verification endpoints.

    python -m unittest -v tests.test_api_verification_endpoints.APIVerificationEndpointsTestCase
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
    def create_requests( user_id, total_items, request_status='pending' ):
        request_models = create_model_list(
            AidRequestSchema(),
            get_request_dict( { 'user_id': user_id, 'status': request_status } ),
            total_items,
            'title'
        )
        database.session.add_all( request_models )
        database.session.commit()
        return [ request_model.id for request_model in request_models ]

    def test_review_queue( self ):
        """The admin sees pending requests oldest first and other statuses on request ( methods = [ GET ] )."""

        with self.app.app_context():
            admin = create_user( 'admin' )
            receiver = create_user( 'receiver' )
            pending_ids = self.create_requests( receiver.id, 3 )
            self.create_requests( receiver.id, 2, 'approved' )

            response = self.test_client.get( '/api/verification/requests', headers=get_auth_headers( admin ) )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            data = json.loads( response.data.decode( 'utf-8' ) )
            self.assertEqual( [ item[ 'id' ] for item in data ], pending_ids )

            response = self.test_client.get(
                '/api/verification/requests?status=approved', headers=get_auth_headers( admin )
            )
            self.assertEqual( len( json.loads( response.data.decode( 'utf-8' ) ) ), 2 )

            response = self.test_client.get(
                '/api/verification/requests?status=lost', headers=get_auth_headers( admin )
            )
            self.assertEqual( response.status_code, status.HTTP_400_BAD_REQUEST )

            response = self.test_client.get( '/api/verification/requests', headers=get_auth_headers( receiver ) )
            self.assertEqual( response.status_code, status.HTTP_403_FORBIDDEN )

    def test_review_request( self ):
        """The admin approves a request with notes ( methods = [ PUT ] )."""

        with self.app.app_context():
            admin = create_user( 'admin' )
            receiver = create_user( 'receiver' )
            request_id = self.create_requests( receiver.id, 1 )[ 0 ]

            response = self.test_client.put(
                '/api/verification/requests/{}'.format( request_id ),
                data=json.dumps( { 'status': 'approved', 'admin_notes': 'Bill checked.' } ),
                headers=get_auth_headers( admin )
            )
            self.assertEqual( response.status_code, status.HTTP_200_OK )

            aid_request = database.session.get( AidRequestModel, request_id )
            self.assertEqual( aid_request.status, 'approved' )
            self.assertEqual( aid_request.admin_notes, 'Bill checked.' )

            response = self.test_client.put(
                '/api/verification/requests/{}'.format( request_id ),
                data=json.dumps( { 'status': 'misplaced' } ),
                headers=get_auth_headers( admin )
            )
            self.assertEqual( response.status_code, status.HTTP_400_BAD_REQUEST )

    def test_documents( self ):
        """The owner attaches documents and the admin verifies them ( methods = [ GET, POST, PUT ] )."""

        with self.app.app_context():
            admin = create_user( 'admin' )
            receiver = create_user( 'receiver' )
            other_receiver = create_user( 'receiver', 'other_receiver' )
            request_id = self.create_requests( receiver.id, 1 )[ 0 ]
            url = '/api/verification/requests/{}/documents'.format( request_id )

            response = self.test_client.post( url, data=json.dumps( DOCUMENT ), headers=get_auth_headers( receiver ) )
            self.assertEqual( response.status_code, status.HTTP_201_CREATED )
            document_id = json.loads( response.data.decode( 'utf-8' ) )[ 'id' ]
            self.assertTrue( database.session.get( AidRequestModel, request_id ).documents_provided )

            response = self.test_client.post(
                url, data=json.dumps( DOCUMENT ), headers=get_auth_headers( other_receiver )
            )
            self.assertEqual( response.status_code, status.HTTP_403_FORBIDDEN )

            response = self.test_client.get( url, headers=get_auth_headers( admin ) )
            self.assertEqual( len( json.loads( response.data.decode( 'utf-8' ) ) ), 1 )

            response = self.test_client.put(
                '/api/verification/documents/{}'.format( document_id ),
                data=json.dumps( { 'verified': True } ),
                headers=get_auth_headers( admin )
            )
            self.assertEqual( response.status_code, status.HTTP_200_OK )

            document = database.session.get( RequestDocumentModel, document_id )
            self.assertTrue( document.verified )
            self.assertEqual( document.verified_by, admin.id )
            self.assertIsNotNone( document.verified_at )

            response = self.test_client.put(
                '/api/verification/documents/9999', data=json.dumps( {} ), headers=get_auth_headers( admin )
            )
            self.assertEqual( response.status_code, status.HTTP_404_NOT_FOUND )

    def test_verify_user( self ):
        """The admin verifies a user ( methods = [ PUT ] )."""

        with self.app.app_context():
            admin = create_user( 'admin' )
            receiver_id = create_user( 'receiver' ).id

            response = self.test_client.put(
                '/api/verification/users/{}'.format( receiver_id ),
                data=json.dumps( { 'is_verified': True } ),
                headers=get_auth_headers( admin )
            )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            self.assertTrue( database.session.get( UserModel, receiver_id ).is_verified )

            response = self.test_client.put(
                '/api/verification/users/9999', data=json.dumps( {} ), headers=get_auth_headers( admin )
            )
            self.assertEqual( response.status_code, status.HTTP_404_NOT_FOUND )
