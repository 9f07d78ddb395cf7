"""The logging configuration for the application."""

LOG_FORMAT = '%(levelname)-5s [%(filename)s:%(funcName)s:%(lineno)d] %(message)s'


def get_logging_configuration( wsgi_level, gunicorn_level, gunicorn=False, access_level='INFO' ):
    """"Return a dictionary to build the logging configuration.

    :param str wsgi_level: Level of the root and wsgi loggers.
    :param str gunicorn_level: Level of the gunicorn.error logger, used only when running under gunicorn.
    :param bool gunicorn: Whether to add the gunicorn.error file handler.
    :param str access_level: Level of the per-response access logger.
    :return: A dictConfig dictionary.
    """

    logging_configuration = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': { 'format': LOG_FORMAT },
            'access': { 'format': '%(asctime)s %(message)s' }
        },
        'handlers': {
            'wsgi': { 'class': 'logging.StreamHandler', 'stream': 'ext://sys.stdout', 'formatter': 'default' },
            'access': { 'class': 'logging.StreamHandler', 'stream': 'ext://sys.stdout', 'formatter': 'access' }
        },
        'loggers': {
            'wsgi': { 'level': wsgi_level, 'propagate': False, 'handlers': [ 'wsgi' ] },
            'aid_coordination.access': { 'level': access_level, 'propagate': False, 'handlers': [ 'access' ] }
        },
        'root': {
            'level': wsgi_level,
            'handlers': [ 'wsgi' ]
        }
    }
    if gunicorn:
        logging_configuration[ 'handlers' ][ 'gunicorn.error' ] = {
            'class': 'logging.FileHandler', 'filename': 'errors.log', 'formatter': 'default'
        }
        logging_configuration[ 'loggers' ][ 'gunicorn.error' ] = {
            'level': gunicorn_level, 'propagate': False, 'handlers': [ 'gunicorn.error' ]
        }
        logging_configuration[ 'root' ][ 'handlers' ].append( 'gunicorn.error' )

    return logging_configuration
