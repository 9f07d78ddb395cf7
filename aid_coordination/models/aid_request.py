"""The model for the Aid Coordination API: requests and request_documents tables.

An aid request is filed by a receiver and moves through pending -> approved | rejected, approved -> fulfilled. Only
the value set is constrained by the schema: an admin may write any of the statuses at any time.
"""
# pylint: disable=R0903
from datetime import datetime

from aid_coordination.flask_essentials import database
from aid_coordination.models.ddl import attach_modified_trigger
from aid_coordination.models.ddl import check_in

REQUEST_URGENCIES = ( 'low', 'medium', 'high' )
REQUEST_STATUSES = ( 'pending', 'approved', 'rejected', 'fulfilled' )


class AidRequestModel( database.Model ):
    """An individual aid request."""

    __tablename__ = 'requests'
    __table_args__ = (
        check_in( 'urgency', REQUEST_URGENCIES, 'ck_requests_urgency' ),
        check_in( 'status', REQUEST_STATUSES, 'ck_requests_status' ),
        database.Index( 'idx_requests_status', 'status' ),
        database.Index( 'idx_requests_urgency', 'urgency' ),
        database.Index( 'idx_requests_location', 'location' ),
    )
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    user_id = database.Column( database.Integer, database.ForeignKey( 'users.id' ), nullable=False )
    title = database.Column( database.VARCHAR( 255 ), nullable=False )
    summary = database.Column( database.Text, nullable=False )
    description = database.Column( database.Text, nullable=False )
    category = database.Column( database.VARCHAR( 100 ), nullable=False )
    location = database.Column( database.VARCHAR( 100 ), nullable=False )
    urgency = database.Column( database.VARCHAR( 20 ), nullable=False )
    amount_needed = database.Column( database.DECIMAL( 12, 2 ), nullable=True )
    documents_provided = database.Column( database.Boolean, nullable=True, default=False )
    status = database.Column( database.VARCHAR( 20 ), nullable=True, default='pending' )
    admin_notes = database.Column( database.Text, nullable=True )
    created_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
    updated_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow, onupdate=datetime.utcnow )
    user = database.relationship( 'UserModel', foreign_keys=[ user_id ], uselist=False )


class RequestDocumentModel( database.Model ):
    """A supporting document attached to a request, verified independently by an admin."""

    __tablename__ = 'request_documents'
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    request_id = database.Column( database.Integer, database.ForeignKey( 'requests.id' ), nullable=False )
    document_type = database.Column( database.VARCHAR( 100 ), nullable=False )
    document_url = database.Column( database.VARCHAR( 255 ), nullable=False )
    uploaded_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
    verified = database.Column( database.Boolean, nullable=True, default=False )
    verified_by = database.Column( database.Integer, database.ForeignKey( 'users.id' ), nullable=True )
    verified_at = database.Column( database.DateTime, nullable=True )


attach_modified_trigger( AidRequestModel.__table__ )
