"""The module tests each aid request API endpoint to ensure a request is successfully made and valid data returned."""
import json
import unittest

from flask_api import status

from aid_coordination.app import create_app
from aid_coordination.flask_essentials import database
from aid_coordination.models.aid_request import AidRequestModel
from aid_coordination.schemas.aid_request import AidRequestSchema
from tests.helpers.default_dictionaries import get_request_dict
from tests.helpers.model_helpers import create_model_list
from tests.helpers.model_helpers import create_user
from tests.helpers.model_helpers import get_auth_headers


class APIRequestEndpointsTestCase( unittest.TestCase ):
    """This test suite is designed to verify the basic functionality of the API aid request endpoints.

    python -m unittest discover -v
    python -m unittest -v tests.test_api_request_endpoints.APIRequestEndpointsTestCase
    python -m unittest -v tests.test_api_request_endpoints.APIRequestEndpointsTestCase.test_get_requests_by_urgency
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

    def create_requests( self, user_id, total_items, update_key_values=None ):
        """Persist requests owned by the user and return their IDs."""

        request_dict = get_request_dict( update_key_values )
        request_dict[ 'user_id' ] = user_id
        request_models = create_model_list( AidRequestSchema(), request_dict, total_items, 'title' )
        database.session.add_all( request_models )
        database.session.commit()
        return [ request_model.id for request_model in request_models ]

    def test_get_requests_by_urgency( self ):
        """Only approved requests of the urgency are listed, newest first ( methods = [ GET ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            high_ids = self.create_requests( receiver.id, 3, { 'urgency': 'high' } )
            self.create_requests( receiver.id, 2, { 'urgency': 'low' } )
            self.create_requests( receiver.id, 2, { 'urgency': 'high', 'status': 'pending' } )

            response = self.test_client.get( '/api/requests?urgency=high' )
            self.assertEqual( response.status_code, status.HTTP_200_OK )

            data = json.loads( response.data.decode( 'utf-8' ) )
            self.assertEqual( [ item[ 'id' ] for item in data ], sorted( high_ids, reverse=True ) )
            for item in data:
                self.assertEqual( item[ 'urgency' ], 'high' )
                self.assertEqual( item[ 'status' ], 'approved' )
                self.assertEqual( item[ 'username' ], 'receiver' )

    def test_get_requests_by_every_filter( self ):
        """Every supplied filter is matched exactly ( methods = [ GET ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            self.create_requests( receiver.id, 2, { 'category': 'food', 'location': 'Shelbyville' } )
            self.create_requests( receiver.id, 1, { 'category': 'food', 'location': 'Springfield' } )
            self.create_requests( receiver.id, 1, { 'category': 'housing', 'location': 'Shelbyville' } )

            response = self.test_client.get( '/api/requests?category=food&location=Shelbyville&urgency=medium' )
            data = json.loads( response.data.decode( 'utf-8' ) )
            self.assertEqual( len( data ), 2 )
            for item in data:
                self.assertEqual( item[ 'category' ], 'food' )
                self.assertEqual( item[ 'location' ], 'Shelbyville' )
                self.assertEqual( item[ 'status' ], 'approved' )

            response = self.test_client.get( '/api/requests?category=furniture' )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) ), [] )

    def test_get_requests_paginated( self ):
        """A page of requests with the Link header ( methods = [ GET ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            self.create_requests( receiver.id, 5 )

            response = self.test_client.get( '/api/requests?rows_per_page=2&page_number=2' )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            self.assertEqual( len( json.loads( response.data.decode( 'utf-8' ) )[ 'items' ] ), 2 )
            self.assertIn( 'rel="prev"', response.headers[ 'Link' ] )
            self.assertIn( 'rel="next"', response.headers[ 'Link' ] )

            response = self.test_client.get( '/api/requests?rows_per_page=zero' )
            self.assertEqual( response.status_code, status.HTTP_400_BAD_REQUEST )

    def test_get_request_by_id( self ):
        """Retrieve an approved request; a pending one is not visible ( methods = [ GET ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            approved_id = self.create_requests( receiver.id, 1 )[ 0 ]
            pending_id = self.create_requests( receiver.id, 1, { 'status': 'pending' } )[ 0 ]

            response = self.test_client.get( '/api/requests/{}'.format( approved_id ) )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) )[ 'id' ], approved_id )

            response = self.test_client.get( '/api/requests/{}'.format( pending_id ) )
            self.assertEqual( response.status_code, status.HTTP_404_NOT_FOUND )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) )[ 'message' ], 'Request not found' )

    def test_create_request_as_receiver( self ):
        """A receiver files a request and the status is forced to pending ( methods = [ POST ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            payload = get_request_dict( { 'status': 'approved' } )

            response = self.test_client.post(
                '/api/requests', data=json.dumps( payload ), headers=get_auth_headers( receiver )
            )
            self.assertEqual( response.status_code, status.HTTP_201_CREATED )

            data = json.loads( response.data.decode( 'utf-8' ) )
            self.assertEqual( data[ 'status' ], 'pending' )
            self.assertEqual( data[ 'user_id' ], receiver.id )
            self.assertEqual( database.session.get( AidRequestModel, data[ 'id' ] ).status, 'pending' )

    def test_create_request_refused_for_other_roles( self ):
        """Donors and admins may not file requests; anonymous callers are unauthorized ( methods = [ POST ] )."""

        with self.app.app_context():
            payload = json.dumps( get_request_dict() )
            for role in [ 'donor', 'admin' ]:
                response = self.test_client.post(
                    '/api/requests', data=payload, headers=get_auth_headers( create_user( role ) )
                )
                self.assertEqual( response.status_code, status.HTTP_403_FORBIDDEN )

            response = self.test_client.post(
                '/api/requests', data=payload, headers={ 'Content-Type': 'application/json' }
            )
            self.assertEqual( response.status_code, status.HTTP_401_UNAUTHORIZED )

            response = self.test_client.post(
                '/api/requests', data=payload, headers={ 'Authorization': 'Bearer not-a-token' }
            )
            self.assertEqual( response.status_code, status.HTTP_401_UNAUTHORIZED )
            self.assertEqual( AidRequestModel.query.count(), 0 )

    def test_create_request_validation( self ):
        """An unknown urgency is a bad request ( methods = [ POST ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            response = self.test_client.post(
                '/api/requests',
                data=json.dumps( get_request_dict( { 'urgency': 'whenever' } ) ),
                headers=get_auth_headers( receiver )
            )
            self.assertEqual( response.status_code, status.HTTP_400_BAD_REQUEST )
            self.assertIn( 'urgency', json.loads( response.data.decode( 'utf-8' ) )[ 'error' ] )

    def test_update_request_as_owner_ignores_status( self ):
        """The owner updates the fields but not the status ( methods = [ PUT ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            request_id = self.create_requests( receiver.id, 1, { 'status': 'pending' } )[ 0 ]

            response = self.test_client.put(
                '/api/requests/{}'.format( request_id ),
                data=json.dumps( { 'title': 'New title', 'summary': '', 'status': 'approved' } ),
                headers=get_auth_headers( receiver )
            )
            self.assertEqual( response.status_code, status.HTTP_200_OK )

            aid_request = database.session.get( AidRequestModel, request_id )
            self.assertEqual( aid_request.title, 'New title' )
            self.assertEqual( aid_request.summary, 'One month of rent.' )
            self.assertEqual( aid_request.status, 'pending' )

    def test_update_request_as_admin_sets_status( self ):
        """An admin may change the status ( methods = [ PUT ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            admin = create_user( 'admin' )
            request_id = self.create_requests( receiver.id, 1, { 'status': 'pending' } )[ 0 ]

            response = self.test_client.put(
                '/api/requests/{}'.format( request_id ),
                data=json.dumps( { 'status': 'approved' } ),
                headers=get_auth_headers( admin )
            )
            self.assertEqual( response.status_code, status.HTTP_200_OK )
            self.assertEqual( database.session.get( AidRequestModel, request_id ).status, 'approved' )

    def test_update_request_refused( self ):
        """Neither owner nor admin is forbidden, an unknown ID is not found ( methods = [ PUT ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            other_receiver = create_user( 'receiver', 'other_receiver' )
            request_id = self.create_requests( receiver.id, 1 )[ 0 ]

            response = self.test_client.put(
                '/api/requests/{}'.format( request_id ),
                data=json.dumps( { 'title': 'Hijacked' } ),
                headers=get_auth_headers( other_receiver )
            )
            self.assertEqual( response.status_code, status.HTTP_403_FORBIDDEN )
            self.assertNotEqual( database.session.get( AidRequestModel, request_id ).title, 'Hijacked' )

            response = self.test_client.put(
                '/api/requests/9999', data=json.dumps( { 'title': 'Nothing' } ), headers=get_auth_headers( receiver )
            )
            self.assertEqual( response.status_code, status.HTTP_404_NOT_FOUND )

    def test_update_request_with_empty_body( self ):
        """An update with nothing to apply is a bad request and writes nothing ( methods = [ PUT ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            request_id = self.create_requests( receiver.id, 1 )[ 0 ]
            updated_at = database.session.get( AidRequestModel, request_id ).updated_at

            response = self.test_client.put(
                '/api/requests/{}'.format( request_id ), data=json.dumps( {} ), headers=get_auth_headers( receiver )
            )
            self.assertEqual( response.status_code, status.HTTP_400_BAD_REQUEST )
            self.assertEqual( json.loads( response.data.decode( 'utf-8' ) )[ 'message' ], 'No fields to update' )
            self.assertEqual( database.session.get( AidRequestModel, request_id ).updated_at, updated_at )

    def test_write_with_non_object_body( self ):
        """A JSON body that is not an object is a bad request with the usual error body ( methods = [ POST, PUT ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            request_id = self.create_requests( receiver.id, 1 )[ 0 ]

            for method, url in [
                    ( self.test_client.put, '/api/requests/{}'.format( request_id ) ),
                    ( self.test_client.post, '/api/requests' )
            ]:
                for body in [ [ 'title' ], 'title', 7 ]:
                    response = method( url, data=json.dumps( body ), headers=get_auth_headers( receiver ) )
                    self.assertEqual( response.status_code, status.HTTP_400_BAD_REQUEST )
                    data = json.loads( response.data.decode( 'utf-8' ) )
                    self.assertEqual( data[ 'message' ], 'Request body must be a JSON object' )
                    self.assertEqual( data[ 'error' ], 'ModelImproperFieldError' )

            self.assertEqual( AidRequestModel.query.count(), 1 )

    def test_get_my_requests( self ):
        """The receiver sees their own requests in every status ( methods = [ GET ] )."""

        with self.app.app_context():
            receiver = create_user( 'receiver' )
            other_receiver = create_user( 'receiver', 'other_receiver' )
            self.create_requests( receiver.id, 1, { 'status': 'pending' } )
            self.create_requests( receiver.id, 1, { 'status': 'rejected' } )
            self.create_requests( other_receiver.id, 2 )

            response = self.test_client.get( '/api/requests/mine', headers=get_auth_headers( receiver ) )
            data = json.loads( response.data.decode( 'utf-8' ) )
            self.assertEqual( sorted( item[ 'status' ] for item in data ), [ 'pending', 'rejected' ] )
