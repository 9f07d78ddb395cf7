"""Marshmallow schema module for AidRequestModel and RequestDocumentModel."""
# pylint: disable=too-few-public-methods
from marshmallow import fields
from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from aid_coordination.flask_essentials import database
from aid_coordination.models.aid_request import AidRequestModel
from aid_coordination.models.aid_request import REQUEST_STATUSES
from aid_coordination.models.aid_request import REQUEST_URGENCIES
from aid_coordination.models.aid_request import RequestDocumentModel


class AidRequestSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of AidRequestModel.

    The owner's username and profile image are dumped alongside the row.
    """
    amount_needed = fields.Decimal( places=2, as_string=True, allow_none=True, validate=validate.Range( min=0 ) )
    urgency = fields.String( required=True, validate=validate.OneOf( REQUEST_URGENCIES ) )
    status = fields.String( validate=validate.OneOf( REQUEST_STATUSES ) )
    username = fields.String( attribute='user.username', dump_only=True )
    profile_img = fields.String( attribute='user.profile_img', dump_only=True )

    class Meta:
        """Meta object for Marshmallow schema."""

        model = AidRequestModel
        load_instance = True
        include_fk = True
        sqla_session = database.session


class RequestDocumentSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of RequestDocumentModel."""

    class Meta:
        """Meta object for Marshmallow schema."""

        model = RequestDocumentModel
        load_instance = True
        include_fk = True
        sqla_session = database.session
