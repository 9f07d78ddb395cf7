"""The model for the Aid Coordination API: connections, messages and aid_transactions tables.

A connection pairs one approved request with one donor. The message thread and the aid transactions hang off the
connection.
"""
# pylint: disable=R0903
from datetime import datetime

from aid_coordination.flask_essentials import database
from aid_coordination.models.ddl import check_in

CONNECTION_STATUSES = ( 'pending', 'active', 'completed', 'cancelled' )
TRANSACTION_TYPES = ( 'monetary', 'goods', 'services' )
TRANSACTION_STATUSES = ( 'pending', 'completed', 'cancelled' )


class ConnectionModel( database.Model ):
    """The pairing of a donor with a request."""

    __tablename__ = 'connections'
    __table_args__ = (
        check_in( 'status', CONNECTION_STATUSES, 'ck_connections_status' ),
        database.CheckConstraint( 'donor_rating BETWEEN 1 AND 5', name='ck_connections_donor_rating' ),
        database.CheckConstraint( 'receiver_rating BETWEEN 1 AND 5', name='ck_connections_receiver_rating' ),
        database.Index( 'idx_connections_status', 'status' ),
        database.Index( 'idx_connections_donor', 'donor_id' ),
        database.Index( 'idx_connections_request', 'request_id' ),
    )
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    request_id = database.Column( database.Integer, database.ForeignKey( 'requests.id' ), nullable=False )
    donor_id = database.Column( database.Integer, database.ForeignKey( 'users.id' ), nullable=False )
    status = database.Column( database.VARCHAR( 20 ), nullable=True, default='pending' )
    initiated_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
    last_activity_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
    completion_date = database.Column( database.DateTime, nullable=True )
    donor_rating = database.Column( database.Integer, nullable=True )
    receiver_rating = database.Column( database.Integer, nullable=True )
    donor_feedback = database.Column( database.Text, nullable=True )
    receiver_feedback = database.Column( database.Text, nullable=True )
    aid_request = database.relationship( 'AidRequestModel', foreign_keys=[ request_id ], uselist=False )
    donor = database.relationship( 'UserModel', foreign_keys=[ donor_id ], uselist=False )

    @property
    def receiver_id( self ):
        return self.aid_request.user_id if self.aid_request else None

    def is_participant( self, user ):
        """The donor and the owner of the request take part in the connection."""
        return user.id in ( self.donor_id, self.receiver_id )


class MessageModel( database.Model ):
    """A message in a connection's thread."""

    __tablename__ = 'messages'
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    connection_id = database.Column( database.Integer, database.ForeignKey( 'connections.id' ), nullable=False )
    sender_id = database.Column( database.Integer, database.ForeignKey( 'users.id' ), nullable=False )
    message_text = database.Column( database.Text, nullable=False )
    is_read = database.Column( database.Boolean, nullable=True, default=False )
    created_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )


class AidTransactionModel( database.Model ):
    """Value transferred within a connection: money, goods or services."""

    __tablename__ = 'aid_transactions'
    __table_args__ = (
        check_in( 'transaction_type', TRANSACTION_TYPES, 'ck_aid_transactions_type' ),
        check_in( 'status', TRANSACTION_STATUSES, 'ck_aid_transactions_status' ),
    )
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    connection_id = database.Column( database.Integer, database.ForeignKey( 'connections.id' ), nullable=False )
    amount = database.Column( database.DECIMAL( 12, 2 ), nullable=True )
    transaction_type = database.Column( database.VARCHAR( 50 ), nullable=False )
    description = database.Column( database.Text, nullable=True )
    transaction_id = database.Column( database.VARCHAR( 100 ), nullable=True )
    payment_method = database.Column( database.VARCHAR( 50 ), nullable=True )
    status = database.Column( database.VARCHAR( 20 ), nullable=True, default='completed' )
    created_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
