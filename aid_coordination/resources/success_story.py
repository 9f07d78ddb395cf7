"""Resource entry point for success story endpoints."""
from flask import request
from flask_api import status
from flask_restful import Resource

from aid_coordination.controllers.success_story import create_story
from aid_coordination.controllers.success_story import get_published_stories
from aid_coordination.controllers.success_story import update_story
from aid_coordination.helpers.authentication import AdminResource
from aid_coordination.helpers.authentication import authenticate_user
from aid_coordination.helpers.authentication import check_role
from aid_coordination.helpers.model_serialization import json_payload
from aid_coordination.schemas.success_story import SuccessStorySchema
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use


class SuccessStories( Resource ):
    """Flask-RESTful resource endpoints for SuccessStoryModel."""

    def get( self ):
        """Endpoint to retrieve published stories; ?featured=1 for featured ones only."""

        featured = request.args.get( 'featured' ) in ( '1', 'true' )
        return SuccessStorySchema( many=True ).dump( get_published_stories( featured ) ), status.HTTP_200_OK

    @authenticate_user
    @check_role( 'admin' )
    def post( self ):
        """Endpoint for an admin to write a story."""

        story = create_story( json_payload() )
        return SuccessStorySchema().dump( story ), status.HTTP_201_CREATED


class SuccessStoryById( AdminResource ):
    """Flask-RESTful resource endpoint for an admin to edit a story."""

    def put( self, story_id ):
        """Endpoint to update a story."""

        story = update_story( story_id, json_payload() )
        return SuccessStorySchema().dump( story ), status.HTTP_200_OK
