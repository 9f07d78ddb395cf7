"""Resource entry point for the statistics endpoints."""
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use
from flask_api import status
from flask_restful import Resource

from aid_coordination.controllers.statistics import get_statistics
from aid_coordination.helpers.authentication import AdminResource
from aid_coordination.helpers.statistics import refresh_statistics
from aid_coordination.schemas.statistics_cache import StatisticsCacheSchema


class Statistics( Resource ):
    """Flask-RESTful resource endpoint for the platform statistics snapshot."""

    def get( self ):
        """Endpoint to retrieve the snapshot."""

        return StatisticsCacheSchema().dump( get_statistics() ), status.HTTP_200_OK


class StatisticsRefresh( AdminResource ):
    """Flask-RESTful resource endpoint for an admin to recompute the snapshot."""

    def post( self ):
        """Endpoint to refresh the snapshot."""

        return StatisticsCacheSchema().dump( refresh_statistics() ), status.HTTP_200_OK
