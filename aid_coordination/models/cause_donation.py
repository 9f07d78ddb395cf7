"""The model for the Aid Coordination API: cause_donations table."""
# pylint: disable=R0903
from datetime import datetime

from aid_coordination.flask_essentials import database
from aid_coordination.models.ddl import check_in

DONATION_STATUSES = ( 'pending', 'completed', 'refunded', 'failed' )


class CauseDonationModel( database.Model ):
    """A monetary contribution to a cause. The user_id is NULL for unauthenticated donations."""

    __tablename__ = 'cause_donations'
    __table_args__ = (
        check_in( 'status', DONATION_STATUSES, 'ck_cause_donations_status' ),
    )
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    cause_id = database.Column( database.Integer, database.ForeignKey( 'causes.id' ), nullable=False )
    user_id = database.Column( database.Integer, database.ForeignKey( 'users.id' ), nullable=True )
    amount = database.Column( database.DECIMAL( 12, 2 ), nullable=False )
    transaction_id = database.Column( database.VARCHAR( 100 ), nullable=True )
    payment_method = database.Column( database.VARCHAR( 50 ), nullable=True )
    is_anonymous = database.Column( database.Boolean, nullable=True, default=False )
    message = database.Column( database.Text, nullable=True )
    status = database.Column( database.VARCHAR( 20 ), nullable=True, default='completed' )
    created_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
    user = database.relationship( 'UserModel', foreign_keys=[ user_id ], uselist=False )
