"""Marshmallow schema module for ConnectionModel, MessageModel and AidTransactionModel."""
# pylint: disable=too-few-public-methods
from marshmallow import fields
from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from aid_coordination.flask_essentials import database
from aid_coordination.models.connection import AidTransactionModel
from aid_coordination.models.connection import CONNECTION_STATUSES
from aid_coordination.models.connection import ConnectionModel
from aid_coordination.models.connection import MessageModel
from aid_coordination.models.connection import TRANSACTION_STATUSES
from aid_coordination.models.connection import TRANSACTION_TYPES


class ConnectionSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of ConnectionModel."""
    status = fields.String( validate=validate.OneOf( CONNECTION_STATUSES ) )
    donor_rating = fields.Integer( allow_none=True, validate=validate.Range( min=1, max=5 ) )
    receiver_rating = fields.Integer( allow_none=True, validate=validate.Range( min=1, max=5 ) )
    request_title = fields.String( attribute='aid_request.title', dump_only=True )
    receiver_id = fields.Integer( dump_only=True )
    donor_username = fields.String( attribute='donor.username', dump_only=True )

    class Meta:
        """Meta object for Marshmallow schema."""

        model = ConnectionModel
        load_instance = True
        include_fk = True
        sqla_session = database.session


class MessageSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of MessageModel."""
    message_text = fields.String( required=True, validate=validate.Length( min=1 ) )

    class Meta:
        """Meta object for Marshmallow schema."""

        model = MessageModel
        load_instance = True
        include_fk = True
        sqla_session = database.session


class AidTransactionSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of AidTransactionModel."""
    amount = fields.Decimal( places=2, as_string=True, allow_none=True, validate=validate.Range( min=0 ) )
    transaction_type = fields.String( required=True, validate=validate.OneOf( TRANSACTION_TYPES ) )
    status = fields.String( validate=validate.OneOf( TRANSACTION_STATUSES ) )

    class Meta:
        """Meta object for Marshmallow schema."""

        model = AidTransactionModel
        load_instance = True
        include_fk = True
        sqla_session = database.session
