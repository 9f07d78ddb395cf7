"""Resource entry point for message endpoints."""
from flask_api import status

from aid_coordination.controllers.message import get_messages
from aid_coordination.controllers.message import mark_messages_read
from aid_coordination.controllers.message import post_message
from aid_coordination.helpers.authentication import AuthenticatedResource
from aid_coordination.helpers.authentication import current_user
from aid_coordination.helpers.model_serialization import json_payload
from aid_coordination.schemas.connection import MessageSchema
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use


class Messages( AuthenticatedResource ):
    """Flask-RESTful resource endpoints for MessageModel in a connection's thread."""

    def get( self, connection_id ):
        """Endpoint to retrieve the thread."""

        messages = get_messages( connection_id, current_user() )
        return MessageSchema( many=True ).dump( messages ), status.HTTP_200_OK

    def post( self, connection_id ):
        """Endpoint to post a message to the thread."""

        message = post_message( connection_id, json_payload(), current_user() )
        return MessageSchema().dump( message ), status.HTTP_201_CREATED


class MessagesRead( AuthenticatedResource ):
    """Flask-RESTful resource endpoint to mark the other participant's messages read."""

    def put( self, connection_id ):
        """Endpoint to mark messages read."""

        return { 'marked_read': mark_messages_read( connection_id, current_user() ) }, status.HTTP_200_OK
