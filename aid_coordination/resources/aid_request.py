"""Resource entry point for aid request endpoints."""
from flask import request
from flask_api import status
from flask_restful import Resource

from aid_coordination.controllers.aid_request import build_approved_requests_query
from aid_coordination.controllers.aid_request import create_request
from aid_coordination.controllers.aid_request import get_approved_request_by_id
from aid_coordination.controllers.aid_request import get_approved_requests
from aid_coordination.controllers.aid_request import get_request_filters
from aid_coordination.controllers.aid_request import get_requests_by_owner
from aid_coordination.controllers.aid_request import update_request
from aid_coordination.helpers.authentication import AuthenticatedResource
from aid_coordination.helpers.authentication import authenticate_user
from aid_coordination.helpers.authentication import check_role
from aid_coordination.helpers.authentication import current_user
from aid_coordination.helpers.manage_paginate import get_page_information
from aid_coordination.helpers.manage_paginate import paginated_response
from aid_coordination.helpers.model_serialization import json_payload
from aid_coordination.schemas.aid_request import AidRequestSchema
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use


class AidRequests( Resource ):
    """Flask-RESTful resource endpoints for AidRequestModel: list approved requests and file a new one."""

    def get( self ):
        """Endpoint to retrieve approved requests filtered by category, location and urgency, newest first."""

        filters = get_request_filters( request.args )
        page_information = get_page_information( request.args )
        if page_information:
            return paginated_response(
                build_approved_requests_query( filters ),
                page_information,
                request.path,
                filters,
                AidRequestSchema( many=True )
            )

        aid_requests = get_approved_requests( filters )
        return AidRequestSchema( many=True ).dump( aid_requests ), status.HTTP_200_OK

    @authenticate_user
    @check_role( 'receiver' )
    def post( self ):
        """Endpoint for a receiver to file a request. It is always created pending."""

        aid_request = create_request( json_payload(), current_user() )
        return AidRequestSchema().dump( aid_request ), status.HTTP_201_CREATED


class AidRequestById( Resource ):
    """Flask-RESTful resource endpoints for AidRequestModel by ID."""

    def get( self, request_id ):
        """Endpoint to retrieve an approved request by its ID."""

        aid_request = get_approved_request_by_id( request_id )
        return AidRequestSchema().dump( aid_request ), status.HTTP_200_OK

    @authenticate_user
    def put( self, request_id ):
        """Endpoint for the owner or an admin to update a request."""

        aid_request = update_request( request_id, json_payload(), current_user() )
        return AidRequestSchema().dump( aid_request ), status.HTTP_200_OK


class MyAidRequests( AuthenticatedResource ):
    """Flask-RESTful resource endpoint for the caller's own requests in every status."""

    def get( self ):
        """Endpoint to retrieve the caller's requests, newest first."""

        aid_requests = get_requests_by_owner( current_user() )
        return AidRequestSchema( many=True ).dump( aid_requests ), status.HTTP_200_OK
