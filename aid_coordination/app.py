"""The main application module with create_app(), resources and error handlers."""
import importlib
import logging
from logging.config import dictConfig
import os

from flask import Flask
from flask import jsonify
from flask import request
from flask_restful import Api
from marshmallow.exceptions import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import SQLAlchemyError

from aid_coordination.exceptions.exception_auth import AuthDuplicateUserError
from aid_coordination.exceptions.exception_auth import AuthForbiddenError
from aid_coordination.exceptions.exception_auth import AuthInvalidCredentialsError
from aid_coordination.exceptions.exception_auth import AuthInvalidTokenError
from aid_coordination.exceptions.exception_auth import AuthUnauthorizedError
from aid_coordination.exceptions.exception_model import ModelImproperFieldError
from aid_coordination.exceptions.exception_model import ModelNoFieldsToUpdateError
from aid_coordination.exceptions.exception_model import ModelNotFoundError
from aid_coordination.exceptions.exception_workflow import WorkflowCauseNotActiveError
from aid_coordination.exceptions.exception_workflow import WorkflowConnectionCancelledError
from aid_coordination.exceptions.exception_workflow import WorkflowConnectionNotCompletedError
from aid_coordination.exceptions.exception_workflow import WorkflowDuplicateConnectionError
from aid_coordination.exceptions.exception_workflow import WorkflowNonPositiveAmountError
from aid_coordination.exceptions.exception_workflow import WorkflowRequestNotApprovedError
from aid_coordination.exceptions.exception_workflow import WorkflowStatusTransitionError
from aid_coordination.flask_essentials import database
from aid_coordination.flask_essentials import jwt
from aid_coordination.flask_essentials import marshmallow
from aid_coordination.logging_configuration import get_logging_configuration
from aid_coordination.resources.aid_request import AidRequestById
from aid_coordination.resources.aid_request import AidRequests
from aid_coordination.resources.aid_request import MyAidRequests
from aid_coordination.resources.app_health import Heartbeat
from aid_coordination.resources.cause import CauseById
from aid_coordination.resources.cause import CauseDonations
from aid_coordination.resources.cause import Causes
from aid_coordination.resources.connection import ConnectionById
from aid_coordination.resources.connection import ConnectionFeedback
from aid_coordination.resources.connection import Connections
from aid_coordination.resources.connection import ConnectionTransactions
from aid_coordination.resources.donation import DonationById
from aid_coordination.resources.donation import Donations
from aid_coordination.resources.donation import MyDonations
from aid_coordination.resources.message import Messages
from aid_coordination.resources.message import MessagesRead
from aid_coordination.resources.statistics import Statistics
from aid_coordination.resources.statistics import StatisticsRefresh
from aid_coordination.resources.success_story import SuccessStories
from aid_coordination.resources.success_story import SuccessStoryById
from aid_coordination.resources.user import ForgotPassword
from aid_coordination.resources.user import Login
from aid_coordination.resources.user import Me
from aid_coordination.resources.user import Register
from aid_coordination.resources.user import ResetPassword
from aid_coordination.resources.user import VerifyEmail
from aid_coordination.resources.utilities import Enumeration
from aid_coordination.resources.verification import RequestDocuments
from aid_coordination.resources.verification import ReviewRequestById
from aid_coordination.resources.verification import ReviewRequests
from aid_coordination.resources.verification import VerifyDocument
from aid_coordination.resources.verification import VerifyUser
from aid_coordination.views.pages import pages
# pylint: disable=too-many-locals
# pylint: disable=too-many-statements

ACCESS_LOGGER = logging.getLogger( 'aid_coordination.access' )


def create_app( app_config_env=None ):
    """Application factory.

    Allows the application to be instantiated with a specific configuration, e.g. configurations for development,
    testing, and production. Implements a configuration loader to augment the Flask app.config() in loading these
    configurations. Supports YAML and tagged environment variables. Manages the application logging level.

    :param str app_config_env: The configuration name to use in loading the configuration variables.
    :return: The Flask application.
    """

    # Set APP_ENV in the deployment. If we can't find a value set the app_config_env to DEFAULT.
    if not app_config_env:
        if 'APP_ENV' in os.environ:
            app_config_env = os.environ[ 'APP_ENV' ]
        else:
            app_config_env = 'DEFAULT'

    app = Flask( 'aid_coordination', root_path=os.path.dirname( __file__ ) )

    conf_root = os.path.join( os.path.dirname( __file__ ), '..', 'configuration' )
    importlib.import_module( 'configuration' )
    configuration_module = importlib.import_module( '.config_loader', package='configuration' )
    configuration = configuration_module.ConfigLoader()
    configuration.update_from_yaml_file( os.path.join( conf_root, 'conf.yml' ), app_config_env )
    configuration.update_from_env_variables( app_config_env )

    app.config.update( configuration )

    wsgi_log_level = 'WARNING'
    gunicorn_log_level = 'WARNING'
    access_log_level = 'INFO'
    # Set the level of the root logger.
    if app.config.get( 'WSGI_LOG_LEVEL' ):
        wsgi_log_level = app.config[ 'WSGI_LOG_LEVEL' ]
    if app.config.get( 'GUNICORN_LOG_LEVEL' ):
        gunicorn_log_level = app.config[ 'GUNICORN_LOG_LEVEL' ]
    if app.config.get( 'ACCESS_LOG_LEVEL' ):
        access_log_level = app.config[ 'ACCESS_LOG_LEVEL' ]

    # If running gunicorn add gunicorn.error to handlers.
    gunicorn = 'gunicorn' in os.environ.get( 'SERVER_SOFTWARE', '' )

    dictConfig( get_logging_configuration( wsgi_log_level, gunicorn_log_level, gunicorn, access_log_level ) )
    logging.root.log( logging.root.level, '***** Logging is enabled for this level.' )
    logging.root.log( logging.root.level, '***** Configuration: %s', app_config_env )

    database.init_app( app )
    marshmallow.init_app( app )
    jwt.init_app( app )
    # Absolutely needed for the error handlers below to receive exceptions raised inside Flask-RESTful resources.
    app.config.update( PROPAGATE_EXCEPTIONS=True )

    api = Api( app )

    api.add_resource( Register, '/api/auth/register' )
    api.add_resource( Login, '/api/auth/login' )
    api.add_resource( Me, '/api/auth/me' )
    api.add_resource( VerifyEmail, '/api/auth/verify/<string:token>' )
    api.add_resource( ForgotPassword, '/api/auth/forgot-password' )
    api.add_resource( ResetPassword, '/api/auth/reset-password' )
    api.add_resource( Causes, '/api/causes' )
    api.add_resource( CauseById, '/api/causes/<int:cause_id>' )
    api.add_resource( CauseDonations, '/api/causes/<int:cause_id>/donations' )
    api.add_resource( AidRequests, '/api/requests' )
    api.add_resource( MyAidRequests, '/api/requests/mine' )
    api.add_resource( AidRequestById, '/api/requests/<int:request_id>' )
    api.add_resource( Donations, '/api/donations' )
    api.add_resource( MyDonations, '/api/donations/mine' )
    api.add_resource( DonationById, '/api/donations/<int:donation_id>' )
    api.add_resource( Connections, '/api/connections' )
    api.add_resource( ConnectionById, '/api/connections/<int:connection_id>' )
    api.add_resource( ConnectionFeedback, '/api/connections/<int:connection_id>/feedback' )
    api.add_resource( ConnectionTransactions, '/api/connections/<int:connection_id>/transactions' )
    api.add_resource( Messages, '/api/messages/<int:connection_id>' )
    api.add_resource( MessagesRead, '/api/messages/<int:connection_id>/read' )
    api.add_resource( ReviewRequests, '/api/verification/requests' )
    api.add_resource( ReviewRequestById, '/api/verification/requests/<int:request_id>' )
    api.add_resource( RequestDocuments, '/api/verification/requests/<int:request_id>/documents' )
    api.add_resource( VerifyDocument, '/api/verification/documents/<int:document_id>' )
    api.add_resource( VerifyUser, '/api/verification/users/<int:user_id>' )
    api.add_resource( Statistics, '/api/statistics' )
    api.add_resource( StatisticsRefresh, '/api/statistics/refresh' )
    api.add_resource( SuccessStories, '/api/stories' )
    api.add_resource( SuccessStoryById, '/api/stories/<int:story_id>' )
    api.add_resource( Enumeration, '/api/enumeration/<string:model>/<string:attribute>' )
    api.add_resource( Heartbeat, '/api/heartbeat' )

    app.register_blueprint( pages )

    @app.after_request
    def after_request( response ):  # pylint: disable=unused-variable
        """A handler for defining response headers and writing the access log line.

        :param response: an HTTP response object
        :return:
        """

        response.headers.add( 'Access-Control-Allow-Origin', '*' )
        response.headers.add( 'Access-Control-Allow-Headers', 'Content-Type, Authorization' )
        response.headers.add( 'Access-Control-Allow-Methods', 'GET, PUT, POST, DELETE' )
        response.headers.add( 'Access-Control-Expose-Headers', 'Link' )

        ACCESS_LOGGER.info(
            '%s %s %s %s', request.method, request.full_path.rstrip( '?' ), response.status_code,
            response.content_length
        )
        return response

    @app.errorhandler( ModelNoFieldsToUpdateError )
    @app.errorhandler( ModelImproperFieldError )
    @app.errorhandler( WorkflowNonPositiveAmountError )
    @app.errorhandler( MarshmallowValidationError )
    def handle_400( error ):  # pylint: disable=unused-variable
        """HTTP status 400 ( bad request ) error handler.

         :param error: Error message raised by exception.
         :return:
         """

        response = jsonify( handle_error_message( error ) )
        response.status_code = 400
        return response

    @app.errorhandler( AuthUnauthorizedError )
    @app.errorhandler( AuthInvalidCredentialsError )
    @app.errorhandler( AuthInvalidTokenError )
    def handle_401( error ):  # pylint: disable=unused-variable
        """HTTP status 401 ( unauthorized ) error handler.

         :param error: Error message raised by exception.
         :return:
         """

        response = jsonify( handle_error_message( error ) )
        response.status_code = 401
        return response

    @app.errorhandler( AuthForbiddenError )
    def handle_403( error ):  # pylint: disable=unused-variable
        """HTTP status 403 ( forbidden ) error handler.

         :param error: Error message raised by exception.
         :return:
         """

        response = jsonify( handle_error_message( error ) )
        response.status_code = 403
        return response

    @app.errorhandler( ModelNotFoundError )
    def handle_404( error ):  # pylint: disable=unused-variable
        """HTTP status 404 ( not found ) error handler.

        :param error: Error message raised by exception.
        :return:
        """

        response = jsonify( handle_error_message( error ) )
        response.status_code = 404
        return response

    @app.errorhandler( AuthDuplicateUserError )
    @app.errorhandler( WorkflowDuplicateConnectionError )
    def handle_409( error ):  # pylint: disable=unused-variable
        """HTTP status 409 ( conflict ) error handler.

        :param error: Error message raised by exception.
        :return:
        """

        response = jsonify( handle_error_message( error ) )
        response.status_code = 409
        return response

    @app.errorhandler( WorkflowCauseNotActiveError )
    @app.errorhandler( WorkflowRequestNotApprovedError )
    @app.errorhandler( WorkflowConnectionNotCompletedError )
    @app.errorhandler( WorkflowConnectionCancelledError )
    @app.errorhandler( WorkflowStatusTransitionError )
    def handle_422( error ):  # pylint: disable=unused-variable
        """HTTP status 422 ( unprocessable entity ) error handler.

        :param error: Error message raised by exception.
        :return:
        """

        response = jsonify( handle_error_message( error ) )
        response.status_code = 422
        return response

    @app.errorhandler( SQLAlchemyError )
    def handle_500( error ):  # pylint: disable=unused-variable
        """HTTP status 500 ( internal server error ) error handler. The session is rolled back.

        :param error: Error message raised by exception.
        :return:
        """

        database.session.rollback()
        response = jsonify( handle_error_message( error ) )
        response.status_code = 500
        return response

    def handle_error_message( error ):
        """Used by error handlers for building the error body from error.message.

        :param error: The error raised by the exception.
        :return: The error body: { "message": ..., "error": ... }.
        """

        if hasattr( error, 'messages' ):
            # This is a Marshmallow ValidationError.
            logging.exception( error.messages )
            return { 'message': 'Validation failed', 'error': error.messages }
        if hasattr( error, 'message' ):
            logging.exception( error.message )
            return { 'message': error.message, 'error': type( error ).__name__ }
        logging.exception( error )
        return { 'message': 'Server error', 'error': str( error ) }

    return app


if __name__ == '__main__':
    create_app().run( host='127.0.0.1', port=5000, debug=True )
