"""Resource entry point for connection and aid transaction endpoints."""
from flask_api import status

from aid_coordination.controllers.connection import create_aid_transaction
from aid_coordination.controllers.connection import create_connection
from aid_coordination.controllers.connection import get_aid_transactions
from aid_coordination.controllers.connection import get_connection
from aid_coordination.controllers.connection import get_connections
from aid_coordination.controllers.connection import submit_feedback
from aid_coordination.controllers.connection import update_connection_status
from aid_coordination.helpers.authentication import AuthenticatedResource
from aid_coordination.helpers.authentication import check_role
from aid_coordination.helpers.authentication import current_user
from aid_coordination.helpers.model_serialization import json_payload
from aid_coordination.schemas.connection import AidTransactionSchema
from aid_coordination.schemas.connection import ConnectionSchema
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use


class Connections( AuthenticatedResource ):
    """Flask-RESTful resource endpoints for ConnectionModel."""

    def get( self ):
        """Endpoint to retrieve the connections visible to the caller."""

        connections = get_connections( current_user() )
        return ConnectionSchema( many=True ).dump( connections ), status.HTTP_200_OK

    @check_role( 'donor' )
    def post( self ):
        """Endpoint for a donor to connect to an approved request."""

        connection = create_connection( json_payload(), current_user() )
        return ConnectionSchema().dump( connection ), status.HTTP_201_CREATED


class ConnectionById( AuthenticatedResource ):
    """Flask-RESTful resource endpoints for ConnectionModel by ID."""

    def get( self, connection_id ):
        """Endpoint to retrieve a connection for a participant or an admin."""

        return ConnectionSchema().dump( get_connection( connection_id, current_user() ) ), status.HTTP_200_OK

    def put( self, connection_id ):
        """Endpoint to change the status of a connection."""

        connection = update_connection_status( connection_id, json_payload(), current_user() )
        return ConnectionSchema().dump( connection ), status.HTTP_200_OK


class ConnectionFeedback( AuthenticatedResource ):
    """Flask-RESTful resource endpoint for a participant's rating and feedback."""

    def put( self, connection_id ):
        """Endpoint to rate a completed connection."""

        connection = submit_feedback( connection_id, json_payload(), current_user() )
        return ConnectionSchema().dump( connection ), status.HTTP_200_OK


class ConnectionTransactions( AuthenticatedResource ):
    """Flask-RESTful resource endpoints for AidTransactionModel on a connection."""

    def get( self, connection_id ):
        """Endpoint to retrieve the aid transactions of a connection."""

        aid_transactions = get_aid_transactions( connection_id, current_user() )
        return AidTransactionSchema( many=True ).dump( aid_transactions ), status.HTTP_200_OK

    def post( self, connection_id ):
        """Endpoint for the donor or an admin to record an aid transaction."""

        aid_transaction = create_aid_transaction(
            connection_id, json_payload(), current_user()
        )
        return AidTransactionSchema().dump( aid_transaction ), status.HTTP_201_CREATED
