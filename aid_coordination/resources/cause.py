"""Resource entry point for cause endpoints."""
from flask import request
from flask_api import status
from flask_restful import Resource

from aid_coordination.controllers.cause import build_causes_query
from aid_coordination.controllers.cause import create_cause
from aid_coordination.controllers.cause import get_cause_by_id
from aid_coordination.controllers.cause import get_cause_donations
from aid_coordination.controllers.cause import get_cause_filters
from aid_coordination.controllers.cause import update_cause
from aid_coordination.helpers.authentication import authenticate_user
from aid_coordination.helpers.authentication import check_role
from aid_coordination.helpers.authentication import current_user
from aid_coordination.helpers.manage_paginate import get_page_information
from aid_coordination.helpers.manage_paginate import paginated_response
from aid_coordination.helpers.model_serialization import json_payload
from aid_coordination.schemas.cause import CauseSchema
from aid_coordination.schemas.cause_donation import PublicCauseDonationSchema
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use


class Causes( Resource ):
    """Flask-RESTful resource endpoints for CauseModel: list causes and create one."""

    def get( self ):
        """Endpoint to retrieve causes filtered by category, location and status ( default active )."""

        filters = get_cause_filters( request.args )
        page_information = get_page_information( request.args )
        query = build_causes_query( filters )
        if page_information:
            return paginated_response(
                query, page_information, request.path, filters, CauseSchema( many=True )
            )

        return CauseSchema( many=True ).dump( query.all() ), status.HTTP_200_OK

    @authenticate_user
    @check_role( 'admin' )
    def post( self ):
        """Endpoint for an admin to create a cause."""

        cause = create_cause( json_payload(), current_user() )
        return CauseSchema().dump( cause ), status.HTTP_201_CREATED


class CauseById( Resource ):
    """Flask-RESTful resource endpoints for CauseModel by ID."""

    def get( self, cause_id ):
        """Endpoint to retrieve a cause by its ID."""

        return CauseSchema().dump( get_cause_by_id( cause_id ) ), status.HTTP_200_OK

    @authenticate_user
    @check_role( 'admin' )
    def put( self, cause_id ):
        """Endpoint for an admin to update a cause, its status included."""

        cause = update_cause( cause_id, json_payload() )
        return CauseSchema().dump( cause ), status.HTTP_200_OK


class CauseDonations( Resource ):
    """Flask-RESTful resource endpoint for the completed donations to a cause."""

    def get( self, cause_id ):
        """Endpoint to retrieve the donations to a cause with anonymous donors hidden."""

        donations = get_cause_donations( cause_id )
        return PublicCauseDonationSchema( many=True ).dump( donations ), status.HTTP_200_OK
