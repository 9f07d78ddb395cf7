"""The WSGI entry point: gunicorn aid_coordination.wsgi:aid_app"""
import logging

from aid_coordination.app import create_app

aid_app = create_app()  # pylint: disable=invalid-name

gunicorn_logger = logging.getLogger( 'gunicorn.error' )  # pylint: disable=invalid-name
if gunicorn_logger.handlers:
    aid_app.logger.handlers = gunicorn_logger.handlers
    aid_app.logger.setLevel( gunicorn_logger.level )
