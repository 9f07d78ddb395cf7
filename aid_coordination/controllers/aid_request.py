"""Controllers for Flask-RESTful resources: handle the business logic for the aid request endpoints."""
import logging

from aid_coordination.exceptions.exception_model import ModelNoFieldsToUpdateError
from aid_coordination.exceptions.exception_model import ModelRequestNotFoundError
from aid_coordination.flask_essentials import database
from aid_coordination.helpers.authentication import require_owner_or_admin
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.helpers.model_serialization import pick_updates
from aid_coordination.models.aid_request import AidRequestModel
from aid_coordination.schemas.aid_request import AidRequestSchema

REQUEST_FILTERS = ( 'category', 'location', 'urgency' )
REQUEST_FIELDS = ( 'title', 'summary', 'description', 'category', 'location', 'urgency', 'amount_needed' )


def get_request_filters( args ):
    """The supplied, non-empty filter terms from the query string."""
    return { key: args.get( key ) for key in REQUEST_FILTERS if args.get( key ) }


def build_approved_requests_query( filters ):
    """Query the AidRequestModel for approved requests matching every supplied filter exactly.

    :param dict filters: Any of category, location and urgency.
    :return: The query, newest first.
    """

    query = AidRequestModel.query.filter( AidRequestModel.status == 'approved' )
    for key in REQUEST_FILTERS:
        if filters.get( key ):
            query = query.filter( getattr( AidRequestModel, key ) == filters[ key ] )

    return query.order_by( AidRequestModel.created_at.desc(), AidRequestModel.id.desc() )


def get_approved_requests( filters ):
    """All approved requests matching the filters, newest first."""
    return build_approved_requests_query( filters ).all()


def get_approved_request_by_id( request_id ):
    """Query the AidRequestModel for an approved request matching the ID.

    :param int request_id: The request ID.
    :return: The request.
    """

    aid_request = AidRequestModel.query.filter_by( id=request_id, status='approved' ).one_or_none()
    if not aid_request:
        raise ModelRequestNotFoundError
    return aid_request


def get_requests_by_owner( user ):
    """The caller's own requests in every status, newest first."""
    return AidRequestModel.query.filter_by( user_id=user.id )\
        .order_by( AidRequestModel.created_at.desc(), AidRequestModel.id.desc() ).all()


def create_request( payload, user ):
    """Persist a new aid request for the receiver. The status is always pending whatever the payload says.

    :param dict payload: The JSON body.
    :param user: The receiver filing the request.
    :return: The new AidRequestModel.
    """

    request_json = { field: payload[ field ] for field in REQUEST_FIELDS if field in payload }
    request_json[ 'user_id' ] = user.id
    request_json[ 'status' ] = 'pending'

    aid_request = from_json( AidRequestSchema(), request_json )
    database.session.add( aid_request )
    database.session.commit()

    logging.info( 'Request %s filed by user %s.', aid_request.id, user.id )
    return aid_request


def update_request( request_id, payload, user ):
    """Apply the supplied, non-empty fields of the payload to the request.

    The owner and admins may update. Only an admin may change the status; a status sent by the owner is ignored.

    :param int request_id: The request ID.
    :param dict payload: The JSON body.
    :param user: The caller.
    :return: The updated AidRequestModel.
    """

    aid_request = AidRequestModel.query.filter_by( id=request_id ).one_or_none()
    if not aid_request:
        raise ModelRequestNotFoundError

    require_owner_or_admin( aid_request.user_id )

    updates = pick_updates( payload, REQUEST_FIELDS )
    if user.is_admin and payload.get( 'status' ):
        updates[ 'status' ] = payload[ 'status' ]

    if not updates:
        raise ModelNoFieldsToUpdateError

    from_json( AidRequestSchema(), updates, create=False, instance=aid_request )
    database.session.commit()

    logging.info( 'Request %s updated by user %s: %s.', request_id, user.id, ', '.join( sorted( updates ) ) )
    return aid_request
