"""The model for the Aid Coordination API: users table.

Tables are explicitly named. Notice that the database=SQLAlchemy() is done through the import of flask_essentials.
This will keep the Marshmallow and model SQLAlchemy sessions the same.
"""
# pylint: disable=R0903
from datetime import datetime

from werkzeug.security import check_password_hash
from werkzeug.security import generate_password_hash

from aid_coordination.flask_essentials import database
from aid_coordination.models.ddl import attach_modified_trigger
from aid_coordination.models.ddl import check_in

USER_ROLES = ( 'donor', 'receiver', 'admin' )


class UserModel( database.Model ):
    """A platform user: a donor, a receiver or an admin."""

    __tablename__ = 'users'
    __table_args__ = (
        check_in( 'role', USER_ROLES, 'ck_users_role' ),
        database.Index( 'idx_users_role', 'role' ),
    )
    id = database.Column( database.Integer, primary_key=True, autoincrement=True, nullable=False )
    username = database.Column( database.VARCHAR( 100 ), nullable=False, unique=True )
    email = database.Column( database.VARCHAR( 255 ), nullable=False, unique=True )
    password_hash = database.Column( database.VARCHAR( 255 ), nullable=False )
    role = database.Column( database.VARCHAR( 20 ), nullable=False )
    first_name = database.Column( database.VARCHAR( 100 ), nullable=True )
    last_name = database.Column( database.VARCHAR( 100 ), nullable=True )
    profile_img = database.Column( database.VARCHAR( 255 ), nullable=True )
    bio = database.Column( database.Text, nullable=True )
    location = database.Column( database.VARCHAR( 100 ), nullable=True )
    phone = database.Column( database.VARCHAR( 20 ), nullable=True )
    is_verified = database.Column( database.Boolean, nullable=True, default=False )
    verification_token = database.Column( database.VARCHAR( 100 ), nullable=True )
    reset_token = database.Column( database.VARCHAR( 100 ), nullable=True )
    created_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow )
    updated_at = database.Column( database.DateTime, nullable=True, default=datetime.utcnow, onupdate=datetime.utcnow )

    def set_password( self, password ):
        """Hash and store the password."""
        self.password_hash = generate_password_hash( password )

    def check_password( self, password ):
        """True when the password matches the stored hash."""
        return check_password_hash( self.password_hash, password )

    @property
    def is_admin( self ):
        return self.role == 'admin'


attach_modified_trigger( UserModel.__table__ )
