"""The model for the Aid Coordination API: success_stories table."""
# pylint: disable=R0903
from datetime import datetime

from aid_coordination.flask_essentials import database


class SuccessStoryModel( database.Model ):
    """A narrative tied to a connection or a cause. Unpublished while published_at is NULL."""

    __tablename__ = 'success_stories'
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    connection_id = database.Column( database.Integer, database.ForeignKey( 'connections.id' ), nullable=True )
    cause_id = database.Column( database.Integer, database.ForeignKey( 'causes.id' ), nullable=True )
    title = database.Column( database.VARCHAR( 255 ), nullable=False )
    content = database.Column( database.Text, nullable=False )
    image_url = database.Column( database.VARCHAR( 255 ), nullable=True )
    is_featured = database.Column( database.Boolean, nullable=True, default=False )
    created_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
    published_at = database.Column( database.DateTime, nullable=True )
