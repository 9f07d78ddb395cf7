"""Resource entry point for authentication and profile endpoints."""
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use
from flask_api import status
from flask_restful import Resource

from aid_coordination.controllers.user import login_user
from aid_coordination.controllers.user import register_user
from aid_coordination.controllers.user import request_password_reset
from aid_coordination.controllers.user import reset_password
from aid_coordination.controllers.user import update_profile
from aid_coordination.controllers.user import verify_email
from aid_coordination.helpers.authentication import AuthenticatedResource
from aid_coordination.helpers.authentication import current_user
from aid_coordination.helpers.model_serialization import json_payload
from aid_coordination.schemas.user import UserSchema


def session_payload( session ):
    """Dump the access token and the user."""
    return { 'access_token': session[ 'access_token' ], 'user': UserSchema().dump( session[ 'user' ] ) }


class Register( Resource ):
    """Flask-RESTful resource endpoint to create a donor or receiver account."""

    def post( self ):
        """Endpoint to register and sign in."""

        session = register_user( json_payload() )
        return session_payload( session ), status.HTTP_201_CREATED


class Login( Resource ):
    """Flask-RESTful resource endpoint to sign in."""

    def post( self ):
        """Endpoint to exchange credentials for an access token."""

        return session_payload( login_user( json_payload() ) ), status.HTTP_200_OK


class Me( AuthenticatedResource ):
    """Flask-RESTful resource endpoints for the caller's own account."""

    def get( self ):
        """Endpoint to retrieve the caller."""

        return UserSchema().dump( current_user() ), status.HTTP_200_OK

    def put( self ):
        """Endpoint to edit the caller's profile."""

        user = update_profile( current_user(), json_payload() )
        return UserSchema().dump( user ), status.HTTP_200_OK


class VerifyEmail( Resource ):
    """Flask-RESTful resource endpoint to spend a verification token."""

    def get( self, token ):
        """Endpoint to verify the account holding the token."""

        return UserSchema().dump( verify_email( token ) ), status.HTTP_200_OK


class ForgotPassword( Resource ):
    """Flask-RESTful resource endpoint to request a password reset."""

    def post( self ):
        """Endpoint to issue a reset token. Answers the same whether or not the email is registered."""

        request_password_reset( json_payload() )
        return { 'message': 'If the email is registered a reset token has been issued' }, status.HTTP_200_OK


class ResetPassword( Resource ):
    """Flask-RESTful resource endpoint to set a new password with a reset token."""

    def post( self ):
        """Endpoint to reset the password."""

        reset_password( json_payload() )
        return { 'message': 'Password updated' }, status.HTTP_200_OK
