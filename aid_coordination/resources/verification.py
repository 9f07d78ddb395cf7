"""Resource entry point for verification endpoints."""
from flask import request
from flask_api import status

from aid_coordination.controllers.verification import add_request_document
from aid_coordination.controllers.verification import get_request_documents
from aid_coordination.controllers.verification import get_requests_for_review
from aid_coordination.controllers.verification import review_request
from aid_coordination.controllers.verification import verify_document
from aid_coordination.controllers.verification import verify_user
from aid_coordination.exceptions.exception_model import ModelImproperFieldError
from aid_coordination.helpers.authentication import AdminResource
from aid_coordination.helpers.authentication import AuthenticatedResource
from aid_coordination.helpers.authentication import current_user
from aid_coordination.helpers.model_serialization import json_payload
from aid_coordination.models.aid_request import REQUEST_STATUSES
from aid_coordination.schemas.aid_request import AidRequestSchema
from aid_coordination.schemas.aid_request import RequestDocumentSchema
from aid_coordination.schemas.user import UserSchema
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use


class ReviewRequests( AdminResource ):
    """Flask-RESTful resource endpoint for the admin review queue."""

    def get( self ):
        """Endpoint to retrieve requests by status, pending by default, oldest first."""

        review_status = request.args.get( 'status', 'pending' )
        if review_status not in REQUEST_STATUSES:
            raise ModelImproperFieldError( 'Unknown request status {}'.format( review_status ) )
        return AidRequestSchema( many=True ).dump( get_requests_for_review( review_status ) ), status.HTTP_200_OK


class ReviewRequestById( AdminResource ):
    """Flask-RESTful resource endpoint for an admin decision on a request."""

    def put( self, request_id ):
        """Endpoint to set the status and admin notes of a request."""

        aid_request = review_request( request_id, json_payload(), current_user() )
        return AidRequestSchema().dump( aid_request ), status.HTTP_200_OK


class RequestDocuments( AuthenticatedResource ):
    """Flask-RESTful resource endpoints for RequestDocumentModel on a request."""

    def get( self, request_id ):
        """Endpoint for the owner or an admin to list the documents of a request."""

        documents = get_request_documents( request_id )
        return RequestDocumentSchema( many=True ).dump( documents ), status.HTTP_200_OK

    def post( self, request_id ):
        """Endpoint for the owner or an admin to attach a document to a request."""

        document = add_request_document( request_id, json_payload() )
        return RequestDocumentSchema().dump( document ), status.HTTP_201_CREATED


class VerifyDocument( AdminResource ):
    """Flask-RESTful resource endpoint for an admin to verify a document."""

    def put( self, document_id ):
        """Endpoint to mark a document verified or unverified."""

        document = verify_document( document_id, json_payload(), current_user() )
        return RequestDocumentSchema().dump( document ), status.HTTP_200_OK


class VerifyUser( AdminResource ):
    """Flask-RESTful resource endpoint for an admin to verify a user."""

    def put( self, user_id ):
        """Endpoint to mark a user verified or unverified."""

        user = verify_user( user_id, json_payload() )
        return UserSchema().dump( user ), status.HTTP_200_OK
