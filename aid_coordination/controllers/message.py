"""Controllers for Flask-RESTful resources: handle the business logic for the message endpoints."""
from aid_coordination.controllers.connection import get_connection
from aid_coordination.controllers.connection import touch
from aid_coordination.exceptions.exception_workflow import WorkflowConnectionCancelledError
from aid_coordination.flask_essentials import database
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.models.connection import MessageModel
from aid_coordination.schemas.connection import MessageSchema


def get_messages( connection_id, user ):
    """The thread of a connection in the order it was written.

    :param int connection_id: The connection ID.
    :param user: A participant or an admin.
    :return: List of MessageModel.
    """

    get_connection( connection_id, user )
    return MessageModel.query.filter_by( connection_id=connection_id )\
        .order_by( MessageModel.created_at.asc(), MessageModel.id.asc() ).all()


def post_message( connection_id, payload, user ):
    """Add a message from a participant to the thread.

    :param int connection_id: The connection ID.
    :param dict payload: The JSON body with message_text.
    :param user: The participant.
    :return: The new MessageModel.
    """

    connection = get_connection( connection_id, user, participants_only=True )
    if connection.status == 'cancelled':
        raise WorkflowConnectionCancelledError

    message = from_json(
        MessageSchema(),
        { 'connection_id': connection.id, 'sender_id': user.id, 'message_text': payload.get( 'message_text' ) }
    )
    database.session.add( message )
    touch( connection )
    database.session.commit()
    return message


def mark_messages_read( connection_id, user ):
    """Mark the messages the other participant sent as read.

    :param int connection_id: The connection ID.
    :param user: The participant reading the thread.
    :return: The number of messages marked.
    """

    get_connection( connection_id, user, participants_only=True )
    total_marked = MessageModel.query\
        .filter( MessageModel.connection_id == connection_id )\
        .filter( MessageModel.sender_id != user.id )\
        .filter( MessageModel.is_read.is_( False ) )\
        .update( { MessageModel.is_read: True }, synchronize_session=False )
    database.session.commit()
    return total_marked
