"""Resource entry point for donation endpoints."""
from flask_api import status

from aid_coordination.controllers.donation import create_donation
from aid_coordination.controllers.donation import get_donations_by_user
from aid_coordination.controllers.donation import update_donation_status
from aid_coordination.helpers.authentication import AdminResource
from aid_coordination.helpers.authentication import AuthenticatedResource
from aid_coordination.helpers.authentication import OptionalUserResource
from aid_coordination.helpers.authentication import current_user
from aid_coordination.helpers.model_serialization import json_payload
from aid_coordination.schemas.cause_donation import CauseDonationSchema
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use


class Donations( OptionalUserResource ):
    """Flask-RESTful resource endpoint to donate to a cause, signed in or not."""

    def post( self ):
        """Endpoint to record a donation."""

        donation = create_donation( json_payload(), current_user() )
        return CauseDonationSchema().dump( donation ), status.HTTP_201_CREATED


class MyDonations( AuthenticatedResource ):
    """Flask-RESTful resource endpoint for the caller's donations."""

    def get( self ):
        """Endpoint to retrieve the caller's donations, newest first."""

        donations = get_donations_by_user( current_user() )
        return CauseDonationSchema( many=True ).dump( donations ), status.HTTP_200_OK


class DonationById( AdminResource ):
    """Flask-RESTful resource endpoint for an admin to change a donation's status."""

    def put( self, donation_id ):
        """Endpoint to update the donation status, e.g. to refunded."""

        donation = update_donation_status( donation_id, json_payload() )
        return CauseDonationSchema().dump( donation ), status.HTTP_200_OK
