"""Builds the platform statistics snapshot held in the statistics_cache table."""
import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from aid_coordination.flask_essentials import database
from aid_coordination.models.aid_request import AidRequestModel
from aid_coordination.models.cause import CauseModel
from aid_coordination.models.cause_donation import CauseDonationModel
from aid_coordination.models.connection import AidTransactionModel
from aid_coordination.models.connection import ConnectionModel
from aid_coordination.models.statistics_cache import StatisticsCacheModel
from aid_coordination.models.user import UserModel


def compute_statistics():
    """Count the platform rows and total the aid that changed hands.

    The total aid amount is the sum of completed cause donations and completed monetary aid transactions.

    :return: Dictionary of the snapshot columns.
    """

    session = database.session
    donation_total = session.query( func.coalesce( func.sum( CauseDonationModel.amount ), 0 ) )\
        .filter( CauseDonationModel.status == 'completed' ).scalar()
    transaction_total = session.query( func.coalesce( func.sum( AidTransactionModel.amount ), 0 ) )\
        .filter( AidTransactionModel.status == 'completed' )\
        .filter( AidTransactionModel.transaction_type == 'monetary' ).scalar()

    return {
        'total_donors': UserModel.query.filter_by( role='donor' ).count(),
        'total_receivers': UserModel.query.filter_by( role='receiver' ).count(),
        'total_causes': CauseModel.query.count(),
        'total_requests': AidRequestModel.query.count(),
        'total_connections': ConnectionModel.query.count(),
        'total_aid_amount': Decimal( str( donation_total ) ) + Decimal( str( transaction_total ) )
    }


def latest_snapshot():
    """The most recent snapshot row or None."""
    return StatisticsCacheModel.query\
        .order_by( StatisticsCacheModel.last_updated.desc(), StatisticsCacheModel.id.desc() ).first()


def refresh_statistics():
    """Recompute the snapshot and write it into the single cache row, creating the row when absent.

    :return: The StatisticsCacheModel.
    """

    snapshot = latest_snapshot()
    if not snapshot:
        snapshot = StatisticsCacheModel()
        database.session.add( snapshot )

    for key, value in compute_statistics().items():
        setattr( snapshot, key, value )
    snapshot.last_updated = datetime.utcnow()

    try:
        database.session.commit()
    except SQLAlchemyError as error:
        database.session.rollback()
        raise error

    logging.info( 'Statistics refreshed: %s donors, %s receivers, %s aid.',
                  snapshot.total_donors, snapshot.total_receivers, snapshot.total_aid_amount )
    return snapshot
