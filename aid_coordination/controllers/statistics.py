"""Controllers for Flask-RESTful resources: handle the business logic for the statistics endpoints."""
from aid_coordination.helpers.statistics import latest_snapshot
from aid_coordination.helpers.statistics import refresh_statistics


def get_statistics():
    """The current snapshot, computed on first read when the cache is empty."""

    snapshot = latest_snapshot()
    if not snapshot:
        snapshot = refresh_statistics()
    return snapshot
