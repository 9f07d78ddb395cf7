"""The model for the Aid Coordination API: statistics_cache table.

A plain denormalized row of platform counts. The latest row by last_updated is the current snapshot.
"""
# pylint: disable=R0903
from datetime import datetime

from aid_coordination.flask_essentials import database


class StatisticsCacheModel( database.Model ):
    """Aggregate snapshot of platform counts and totals."""

    __tablename__ = 'statistics_cache'
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    total_donors = database.Column( database.Integer, nullable=True, default=0 )
    total_receivers = database.Column( database.Integer, nullable=True, default=0 )
    total_causes = database.Column( database.Integer, nullable=True, default=0 )
    total_requests = database.Column( database.Integer, nullable=True, default=0 )
    total_connections = database.Column( database.Integer, nullable=True, default=0 )
    total_aid_amount = database.Column( database.DECIMAL( 15, 2 ), nullable=True, default=0 )
    last_updated = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
