"""Marshmallow schema module for CauseModel."""
# pylint: disable=too-few-public-methods
from marshmallow import fields
from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from aid_coordination.flask_essentials import database
from aid_coordination.models.cause import CAUSE_STATUSES
from aid_coordination.models.cause import CauseModel


class CauseSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of CauseModel."""
    goal_amount = fields.Decimal( places=2, as_string=True, required=True, validate=validate.Range( min=0 ) )
    current_amount = fields.Decimal( places=2, as_string=True )
    start_date = fields.Date( required=True )
    end_date = fields.Date( allow_none=True )
    status = fields.String( validate=validate.OneOf( CAUSE_STATUSES ) )

    class Meta:
        """Meta object for Marshmallow schema."""

        model = CauseModel
        load_instance = True
        include_fk = True
        sqla_session = database.session
