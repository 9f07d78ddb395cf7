"""Controllers for Flask-RESTful resources: handle the business logic for the donation endpoints.

A cause's current_amount is the running total of its completed donations. Every status change on a donation keeps
that total consistent: entering completed adds the amount, leaving completed subtracts it.
"""
import logging
from decimal import Decimal

from aid_coordination.controllers.cause import get_cause_by_id
from aid_coordination.exceptions.exception_model import ModelDonationNotFoundError
from aid_coordination.exceptions.exception_model import ModelNoFieldsToUpdateError
from aid_coordination.exceptions.exception_workflow import WorkflowCauseNotActiveError
from aid_coordination.exceptions.exception_workflow import WorkflowNonPositiveAmountError
from aid_coordination.flask_essentials import database
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.models.cause_donation import CauseDonationModel
from aid_coordination.schemas.cause_donation import CauseDonationSchema

DONATION_FIELDS = ( 'cause_id', 'amount', 'transaction_id', 'payment_method', 'message' )
CLIENT_DONATION_STATUSES = ( 'pending', 'completed' )


def adjust_cause_total( cause, amount ):
    """Add the amount, which may be negative, to the cause's current amount."""
    cause.current_amount = Decimal( cause.current_amount or 0 ) + amount


def create_donation( payload, user=None ):
    """Record a donation to an active cause.

    Unauthenticated donations carry no user. A donation is completed unless the payload marks it pending, e.g. while
    a payment clears; only completed donations count toward the cause.

    :param dict payload: The JSON body.
    :param user: The donor or None.
    :return: The new CauseDonationModel.
    """

    cause = get_cause_by_id( payload.get( 'cause_id' ) )
    if cause.status != 'active':
        raise WorkflowCauseNotActiveError

    donation_json = { field: payload[ field ] for field in DONATION_FIELDS if field in payload }
    donation_json[ 'cause_id' ] = cause.id
    donation_json[ 'user_id' ] = user.id if user else None
    donation_json[ 'is_anonymous' ] = payload.get( 'is_anonymous', False )
    donation_json[ 'status' ] = payload.get( 'status' ) \
        if payload.get( 'status' ) in CLIENT_DONATION_STATUSES else 'completed'

    donation = from_json( CauseDonationSchema(), donation_json )
    if donation.amount <= 0:
        raise WorkflowNonPositiveAmountError

    if donation.status == 'completed':
        adjust_cause_total( cause, donation.amount )

    database.session.add( donation )
    database.session.commit()

    logging.info( 'Donation %s of %s to cause %s.', donation.id, donation.amount, cause.id )
    return donation


def get_donations_by_user( user ):
    """The caller's donations, newest first."""
    return CauseDonationModel.query.filter_by( user_id=user.id )\
        .order_by( CauseDonationModel.created_at.desc(), CauseDonationModel.id.desc() ).all()


def update_donation_status( donation_id, payload ):
    """Set the status of a donation and keep the cause total consistent.

    :param int donation_id: The donation ID.
    :param dict payload: The JSON body with status.
    :return: The updated CauseDonationModel.
    """

    donation = CauseDonationModel.query.filter_by( id=donation_id ).one_or_none()
    if not donation:
        raise ModelDonationNotFoundError

    if not payload.get( 'status' ):
        raise ModelNoFieldsToUpdateError

    previous_status = donation.status
    from_json( CauseDonationSchema(), { 'status': payload[ 'status' ] }, create=False, instance=donation )

    cause = get_cause_by_id( donation.cause_id )
    if previous_status == 'completed' and donation.status != 'completed':
        adjust_cause_total( cause, -donation.amount )
    elif previous_status != 'completed' and donation.status == 'completed':
        adjust_cause_total( cause, donation.amount )

    database.session.commit()

    logging.info( 'Donation %s moved from %s to %s.', donation_id, previous_status, donation.status )
    return donation
