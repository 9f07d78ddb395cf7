"""Marshmallow schema module for CauseDonationModel."""
# pylint: disable=too-few-public-methods
from marshmallow import fields
from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from aid_coordination.flask_essentials import database
from aid_coordination.models.cause_donation import CauseDonationModel
from aid_coordination.models.cause_donation import DONATION_STATUSES


class CauseDonationSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of CauseDonationModel."""
    amount = fields.Decimal( places=2, as_string=True, required=True )
    status = fields.String( validate=validate.OneOf( DONATION_STATUSES ) )

    class Meta:
        """Meta object for Marshmallow schema."""

        model = CauseDonationModel
        load_instance = True
        include_fk = True
        sqla_session = database.session


class PublicCauseDonationSchema( CauseDonationSchema ):
    """A donation as listed on its cause: the donor's username unless the donation is anonymous."""
    donor_name = fields.Method( 'get_donor_name', dump_only=True )

    class Meta( CauseDonationSchema.Meta ):
        """Meta object for Marshmallow schema."""

        exclude = ( 'user_id', 'transaction_id', 'payment_method' )

    def get_donor_name( self, donation ):  # pylint: disable=no-self-use
        """Anonymous and unauthenticated donations show as Anonymous."""
        if donation.is_anonymous or not donation.user:
            return 'Anonymous'
        return donation.user.username
