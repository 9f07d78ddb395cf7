"""The model for the Aid Coordination API: causes table.

A cause is a collective fundraising campaign. The current_amount accrues as donations complete; the status is set
explicitly by an admin and is never derived from current_amount against goal_amount.
"""
# pylint: disable=R0903
from datetime import datetime

from aid_coordination.flask_essentials import database
from aid_coordination.models.ddl import attach_modified_trigger
from aid_coordination.models.ddl import check_in

CAUSE_STATUSES = ( 'active', 'completed', 'cancelled' )


class CauseModel( database.Model ):
    """A collective cause with a goal amount."""

    __tablename__ = 'causes'
    __table_args__ = (
        check_in( 'status', CAUSE_STATUSES, 'ck_causes_status' ),
        database.Index( 'idx_causes_status', 'status' ),
    )
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    title = database.Column( database.VARCHAR( 255 ), nullable=False )
    summary = database.Column( database.Text, nullable=False )
    description = database.Column( database.Text, nullable=False )
    image_url = database.Column( database.VARCHAR( 255 ), nullable=True )
    category = database.Column( database.VARCHAR( 100 ), nullable=False )
    location = database.Column( database.VARCHAR( 100 ), nullable=True )
    goal_amount = database.Column( database.DECIMAL( 12, 2 ), nullable=False )
    current_amount = database.Column( database.DECIMAL( 12, 2 ), nullable=True, default=0 )
    start_date = database.Column( database.Date, nullable=False )
    end_date = database.Column( database.Date, nullable=True )
    status = database.Column( database.VARCHAR( 20 ), nullable=True, default='active' )
    created_by = database.Column( database.Integer, database.ForeignKey( 'users.id' ), nullable=True )
    created_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
    updated_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow, onupdate=datetime.utcnow )
    creator = database.relationship( 'UserModel', foreign_keys=[ created_by ], uselist=False )


attach_modified_trigger( CauseModel.__table__ )
