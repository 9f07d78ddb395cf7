"""Controllers for Flask-RESTful resources: provide endpoint to test health of application."""
from sqlalchemy import text

from aid_coordination.flask_essentials import database


def heartbeat():
    """Controller for simple heartbeat: the application answers and the database accepts a query."""

    database.session.execute( text( 'SELECT 1' ) )
    return True
