"""Resources entry point to test the health of the application."""
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use
from flask_api import status
from flask_restful import Resource

from aid_coordination.controllers.app_health import heartbeat


class Heartbeat( Resource ):
    """Flask-RESTful resource endpoint to test the heartbeat of the application."""

    def get( self ):
        """Endpoint to see if the application and its database are up."""

        if heartbeat():
            return { 'status': 'ok' }, status.HTTP_200_OK

        return None, status.HTTP_500_INTERNAL_SERVER_ERROR
