"""The following script will DROP ALL tables and then CREATE ALL, and seed the database for development.

Use with caution! drop_all_and_create() removes all existing data and reconstructs the tables with no entries. To
run a function navigate to the project root and, for example, on the command line type:

python -c "import scripts.manage_aid_db;scripts.manage_aid_db.drop_all_and_create()"
python -c "import scripts.manage_aid_db;scripts.manage_aid_db.create_admin( 'admin', 'admin@example.org', 'secret-pass' )"
python -c "import scripts.manage_aid_db;scripts.manage_aid_db.seed_demo_data()"
python -c "import scripts.manage_aid_db;scripts.manage_aid_db.refresh_statistics()"

The configuration defaults to DEV; set APP_ENV to target another section of conf.yml.
"""
import logging
import os
from datetime import datetime

from aid_coordination.app import create_app
from aid_coordination.flask_essentials import database
from aid_coordination.helpers import statistics
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.models.user import UserModel
from aid_coordination.schemas.aid_request import AidRequestSchema
from aid_coordination.schemas.cause import CauseSchema
from aid_coordination.schemas.cause_donation import CauseDonationSchema
from aid_coordination.schemas.connection import ConnectionSchema
from aid_coordination.schemas.success_story import SuccessStorySchema
from tests.helpers.default_dictionaries import get_cause_dict
from tests.helpers.default_dictionaries import get_connection_dict
from tests.helpers.default_dictionaries import get_donation_dict
from tests.helpers.default_dictionaries import get_request_dict

app = create_app( os.environ.get( 'APP_ENV', 'DEV' ) )  # pylint: disable=C0103

DEMO_PASSWORD = 'demo-password'
DEMO_CAUSES = [
    { 'title': 'Clean water for the valley', 'category': 'water', 'location': 'Springfield' },
    { 'title': 'Winter coats for schools', 'category': 'clothing', 'location': 'Shelbyville' },
    { 'title': 'Flood relief', 'category': 'disaster', 'location': 'Ogdenville' }
]
DEMO_REQUESTS = [
    { 'title': 'Rent after a hospital stay', 'urgency': 'high', 'status': 'approved' },
    { 'title': 'School books for two children', 'urgency': 'medium', 'status': 'approved', 'category': 'education' },
    { 'title': 'Replacement wheelchair', 'urgency': 'low', 'status': 'pending', 'category': 'health' }
]


def drop_all_and_create():
    """A function to drop and then recreate the database tables."""

    with app.app_context():
        database.reflect()
        database.drop_all()
        database.create_all()


def build_user( username, email, password, role ):
    """Build a UserModel with a hashed password, verified by default."""

    user = UserModel( username=username, email=email, role=role, is_verified=True )
    user.set_password( password )
    return user


def create_admin( username, email, password ):
    """A function to create an admin account. Admins cannot register themselves through the API.

    :param str username: The admin's username.
    :param str email: The admin's email.
    :param str password: The clear password.
    :return:
    """

    with app.app_context():
        database.session.add( build_user( username, email, password, 'admin' ) )
        database.session.commit()
        logging.info( 'Admin %s created.', username )


def seed_demo_data():
    """A function to fill an empty database with a small, coherent demo platform.

    Every demo account uses the password demo-password.
    """

    with app.app_context():
        admin = build_user( 'demo_admin', 'demo_admin@example.org', DEMO_PASSWORD, 'admin' )
        donor = build_user( 'demo_donor', 'demo_donor@example.org', DEMO_PASSWORD, 'donor' )
        receiver = build_user( 'demo_receiver', 'demo_receiver@example.org', DEMO_PASSWORD, 'receiver' )
        database.session.add_all( [ admin, donor, receiver ] )
        database.session.flush()

        causes = [
            from_json( CauseSchema(), get_cause_dict( dict( cause_values, created_by=admin.id ) ) )
            for cause_values in DEMO_CAUSES
        ]
        aid_requests = [
            from_json( AidRequestSchema(), get_request_dict( dict( request_values, user_id=receiver.id ) ) )
            for request_values in DEMO_REQUESTS
        ]
        database.session.add_all( causes + aid_requests )
        database.session.flush()

        total_raised = 0
        for cause in causes:
            donation = from_json(
                CauseDonationSchema(), get_donation_dict( { 'cause_id': cause.id, 'user_id': donor.id } )
            )
            database.session.add( donation )
            total_raised += donation.amount
            cause.current_amount = donation.amount

        connection = from_json(
            ConnectionSchema(), get_connection_dict( { 'request_id': aid_requests[ 0 ].id, 'donor_id': donor.id } )
        )
        database.session.add( connection )
        database.session.flush()

        story = from_json( SuccessStorySchema(), {
            'connection_id': connection.id,
            'title': 'Rent covered in a day',
            'content': 'A donor covered a month of rent the day the request was approved.',
            'is_featured': True
        } )
        story.published_at = datetime.utcnow()
        database.session.add( story )
        database.session.commit()

        logging.info( 'Demo data seeded: %s causes, %s requests, %s raised.',
                      len( causes ), len( aid_requests ), total_raised )

    refresh_statistics()


def refresh_statistics():
    """A function to recompute the statistics snapshot."""

    with app.app_context():
        statistics.refresh_statistics()
