"""Controllers for Flask-RESTful resources: handle the business logic for the cause endpoints."""
import logging

from aid_coordination.exceptions.exception_model import ModelCauseNotFoundError
from aid_coordination.exceptions.exception_model import ModelNoFieldsToUpdateError
from aid_coordination.flask_essentials import database
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.helpers.model_serialization import pick_updates
from aid_coordination.models.cause import CauseModel
from aid_coordination.models.cause_donation import CauseDonationModel
from aid_coordination.schemas.cause import CauseSchema

CAUSE_FILTERS = ( 'category', 'location', 'status' )
CAUSE_FIELDS = (
    'title', 'summary', 'description', 'image_url', 'category', 'location', 'goal_amount', 'start_date', 'end_date'
)


def get_cause_filters( args ):
    """The filter terms from the query string. The status defaults to active."""

    filters = { key: args.get( key ) for key in CAUSE_FILTERS if args.get( key ) }
    filters.setdefault( 'status', 'active' )
    return filters


def build_causes_query( filters ):
    """Query the CauseModel for causes matching every supplied filter exactly, newest first.

    :param dict filters: Any of category, location and status.
    :return: The query.
    """

    query = CauseModel.query
    for key in CAUSE_FILTERS:
        if filters.get( key ):
            query = query.filter( getattr( CauseModel, key ) == filters[ key ] )

    return query.order_by( CauseModel.created_at.desc(), CauseModel.id.desc() )


def get_cause_by_id( cause_id ):
    """Query the CauseModel for a cause matching the ID.

    :param int cause_id: The cause ID.
    :return: The cause.
    """

    cause = CauseModel.query.filter_by( id=cause_id ).one_or_none()
    if not cause:
        raise ModelCauseNotFoundError
    return cause


def create_cause( payload, user ):
    """Persist a new cause created by the admin. The current amount starts at zero.

    :param dict payload: The JSON body.
    :param user: The admin.
    :return: The new CauseModel.
    """

    cause_json = { field: payload[ field ] for field in CAUSE_FIELDS if field in payload }
    cause_json[ 'created_by' ] = user.id
    cause_json[ 'current_amount' ] = '0.00'
    if payload.get( 'status' ):
        cause_json[ 'status' ] = payload[ 'status' ]

    cause = from_json( CauseSchema(), cause_json )
    database.session.add( cause )
    database.session.commit()

    logging.info( 'Cause %s created by admin %s.', cause.id, user.id )
    return cause


def update_cause( cause_id, payload ):
    """Apply the supplied, non-empty fields of the payload, status included, to the cause.

    :param int cause_id: The cause ID.
    :param dict payload: The JSON body.
    :return: The updated CauseModel.
    """

    cause = get_cause_by_id( cause_id )

    updates = pick_updates( payload, CAUSE_FIELDS + ( 'status', ) )
    if not updates:
        raise ModelNoFieldsToUpdateError

    from_json( CauseSchema(), updates, create=False, instance=cause )
    database.session.commit()
    return cause


def get_cause_donations( cause_id ):
    """The completed donations to a cause, newest first.

    :param int cause_id: The cause ID.
    :return: List of CauseDonationModel.
    """

    get_cause_by_id( cause_id )
    return CauseDonationModel.query.filter_by( cause_id=cause_id, status='completed' )\
        .order_by( CauseDonationModel.created_at.desc(), CauseDonationModel.id.desc() ).all()
