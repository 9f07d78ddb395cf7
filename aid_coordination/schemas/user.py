"""Marshmallow schema module for UserModel."""
# pylint: disable=too-few-public-methods
from marshmallow import fields
from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from aid_coordination.flask_essentials import database
from aid_coordination.models.user import USER_ROLES
from aid_coordination.models.user import UserModel


class UserSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of UserModel.

    The credential and token columns never leave the API.
    """
    role = fields.String( required=True, validate=validate.OneOf( USER_ROLES ) )
    email = fields.Email( required=True )

    class Meta:
        """Meta object for Marshmallow schema."""

        model = UserModel
        load_instance = True
        sqla_session = database.session
        exclude = ( 'password_hash', 'verification_token', 'reset_token' )
