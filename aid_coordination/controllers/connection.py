"""Controllers for Flask-RESTful resources: handle the business logic for the connection endpoints.

A connection pairs a donor with an approved request. The donor and the owner of the request are its participants.
Admins may read and update any connection but do not take part in its feedback.
"""
import logging
from datetime import datetime

from aid_coordination.exceptions.exception_auth import AuthForbiddenError
from aid_coordination.exceptions.exception_model import ModelConnectionNotFoundError
from aid_coordination.exceptions.exception_model import ModelNoFieldsToUpdateError
from aid_coordination.exceptions.exception_model import ModelRequestNotFoundError
from aid_coordination.exceptions.exception_workflow import WorkflowConnectionCancelledError
from aid_coordination.exceptions.exception_workflow import WorkflowConnectionNotCompletedError
from aid_coordination.exceptions.exception_workflow import WorkflowDuplicateConnectionError
from aid_coordination.exceptions.exception_workflow import WorkflowRequestNotApprovedError
from aid_coordination.exceptions.exception_workflow import WorkflowStatusTransitionError
from aid_coordination.flask_essentials import database
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.helpers.model_serialization import pick_updates
from aid_coordination.models.aid_request import AidRequestModel
from aid_coordination.models.connection import AidTransactionModel
from aid_coordination.models.connection import CONNECTION_STATUSES
from aid_coordination.models.connection import ConnectionModel
from aid_coordination.schemas.connection import AidTransactionSchema
from aid_coordination.schemas.connection import ConnectionSchema

OPEN_CONNECTION_STATUSES = ( 'pending', 'active' )
# ( current status, new status ): the participant sides allowed to make the change.
PARTICIPANT_TRANSITIONS = {
    ( 'pending', 'active' ): ( 'receiver', ),
    ( 'pending', 'cancelled' ): ( 'donor', 'receiver' ),
    ( 'active', 'completed' ): ( 'donor', 'receiver' ),
    ( 'active', 'cancelled' ): ( 'donor', 'receiver' )
}
TRANSACTION_FIELDS = ( 'amount', 'transaction_type', 'description', 'transaction_id', 'payment_method', 'status' )


def get_connection( connection_id, user, participants_only=False ):
    """Load a connection the caller may see.

    :param int connection_id: The connection ID.
    :param user: The caller.
    :param bool participants_only: When True admins are refused as well.
    :return: The ConnectionModel.
    """

    connection = ConnectionModel.query.filter_by( id=connection_id ).one_or_none()
    if not connection:
        raise ModelConnectionNotFoundError

    if not connection.is_participant( user ) and ( participants_only or not user.is_admin ):
        raise AuthForbiddenError( 'Not a participant of this connection' )
    return connection


def touch( connection ):
    """Record activity on the connection."""
    connection.last_activity_at = datetime.utcnow()


def create_connection( payload, donor ):
    """Connect the donor to an approved request.

    :param dict payload: The JSON body with request_id.
    :param donor: The donor.
    :return: The new ConnectionModel.
    """

    aid_request = AidRequestModel.query.filter_by( id=payload.get( 'request_id' ) ).one_or_none()
    if not aid_request:
        raise ModelRequestNotFoundError
    if aid_request.status != 'approved':
        raise WorkflowRequestNotApprovedError

    open_connection = ConnectionModel.query\
        .filter_by( request_id=aid_request.id, donor_id=donor.id )\
        .filter( ConnectionModel.status.in_( OPEN_CONNECTION_STATUSES ) ).first()
    if open_connection:
        raise WorkflowDuplicateConnectionError

    connection = from_json( ConnectionSchema(), { 'request_id': aid_request.id, 'donor_id': donor.id } )
    database.session.add( connection )
    database.session.commit()

    logging.info( 'Connection %s opened by donor %s on request %s.', connection.id, donor.id, aid_request.id )
    return connection


def get_connections( user ):
    """The connections visible to the caller, most recently active first.

    Admins see every connection, receivers the connections on their requests and donors their own.

    :param user: The caller.
    :return: List of ConnectionModel.
    """

    query = ConnectionModel.query
    if user.role == 'donor':
        query = query.filter( ConnectionModel.donor_id == user.id )
    elif user.role == 'receiver':
        query = query.join( AidRequestModel, ConnectionModel.request_id == AidRequestModel.id )\
            .filter( AidRequestModel.user_id == user.id )

    return query.order_by( ConnectionModel.last_activity_at.desc(), ConnectionModel.id.desc() ).all()


def update_connection_status( connection_id, payload, user ):
    """Set the status of a connection. Completing it stamps the completion date.

    Admins may set any status. Participants follow PARTICIPANT_TRANSITIONS: the receiver accepts a pending
    connection, either side completes an active one or cancels an open one. Completed and cancelled are final.

    :param int connection_id: The connection ID.
    :param dict payload: The JSON body with status.
    :param user: The caller.
    :return: The updated ConnectionModel.
    """

    connection = get_connection( connection_id, user )
    new_status = payload.get( 'status' )
    if not new_status:
        raise ModelNoFieldsToUpdateError

    if not user.is_admin and new_status in CONNECTION_STATUSES:
        side = 'donor' if user.id == connection.donor_id else 'receiver'
        if side not in PARTICIPANT_TRANSITIONS.get( ( connection.status, new_status ), () ):
            raise WorkflowStatusTransitionError( connection.status, new_status )

    from_json( ConnectionSchema(), { 'status': new_status }, create=False, instance=connection )
    if connection.status == 'completed' and not connection.completion_date:
        connection.completion_date = datetime.utcnow()
    touch( connection )
    database.session.commit()

    logging.info( 'Connection %s set to %s by user %s.', connection_id, connection.status, user.id )
    return connection


def submit_feedback( connection_id, payload, user ):
    """Record a participant's rating and feedback on a completed connection.

    The donor writes donor_rating and donor_feedback, the receiver writes receiver_rating and receiver_feedback.

    :param int connection_id: The connection ID.
    :param dict payload: The JSON body with rating and feedback.
    :param user: The participant.
    :return: The updated ConnectionModel.
    """

    connection = get_connection( connection_id, user, participants_only=True )
    if connection.status != 'completed':
        raise WorkflowConnectionNotCompletedError

    side = 'donor' if user.id == connection.donor_id else 'receiver'
    updates = {
        '{}_{}'.format( side, key ): value for key, value in pick_updates( payload, ( 'rating', 'feedback' ) ).items()
    }
    if not updates:
        raise ModelNoFieldsToUpdateError

    from_json( ConnectionSchema(), updates, create=False, instance=connection )
    touch( connection )
    database.session.commit()
    return connection


def get_aid_transactions( connection_id, user ):
    """The aid transactions of a connection, oldest first."""

    get_connection( connection_id, user )
    return AidTransactionModel.query.filter_by( connection_id=connection_id )\
        .order_by( AidTransactionModel.created_at.asc(), AidTransactionModel.id.asc() ).all()


def create_aid_transaction( connection_id, payload, user ):
    """Record value transferred within a connection. The donor or an admin records it.

    :param int connection_id: The connection ID.
    :param dict payload: The JSON body.
    :param user: The caller.
    :return: The new AidTransactionModel.
    """

    connection = get_connection( connection_id, user )
    if user.id != connection.donor_id and not user.is_admin:
        raise AuthForbiddenError( 'Only the donor records aid transactions' )
    if connection.status == 'cancelled':
        raise WorkflowConnectionCancelledError

    transaction_json = { field: payload[ field ] for field in TRANSACTION_FIELDS if field in payload }
    transaction_json[ 'connection_id' ] = connection.id

    aid_transaction = from_json( AidTransactionSchema(), transaction_json )
    database.session.add( aid_transaction )
    touch( connection )
    database.session.commit()

    logging.info( 'Aid transaction %s ( %s ) on connection %s.',
                  aid_transaction.id, aid_transaction.transaction_type, connection.id )
    return aid_transaction
