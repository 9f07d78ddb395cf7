"""Configuration loader for the application factory.

The configuration is a flat dictionary handed to Flask's app.config.update(). It is built in three passes:

    1. The DEFAULT section of conf.yml.
    2. The section named by the environment ( DEV, TEST, PROD ) laid over the defaults.
    3. Environment variables: AID_<KEY> overrides <KEY>, and DB_USER, DB_HOST, DB_NAME, DB_PASSWORD, DB_PORT
       build the PostgreSQL connection string when DB_HOST is set.

Values from environment variables arrive as strings. A key whose conf.yml value is a string ( JWT_SECRET_KEY, the
log levels ) keeps the raw string. Other values are coerced with YAML scalar rules so that
AID_JWT_ACCESS_TOKEN_EXPIRES_MINUTES=30 is the integer 30 and AID_SQLALCHEMY_ECHO=true is a boolean; anything that
does not parse to a scalar stays a string.
"""
import logging
import os

import yaml

ENV_PREFIX = 'AID_'
DEFAULT_SECTION = 'DEFAULT'
DATABASE_URI_TEMPLATE = 'postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}'


def coerce_env_value( current_value, value ):
    """Type an environment variable string after the value it replaces.

    :param current_value: The value already configured for the key, or None.
    :param str value: The raw environment value.
    :return: The string itself, or the YAML scalar it parses to.
    """

    if value == '' or isinstance( current_value, str ):
        return value
    try:
        coerced = yaml.safe_load( value )
    except yaml.YAMLError:
        return value
    if isinstance( coerced, ( dict, list ) ):
        return value
    return coerced


class ConfigLoader( dict ):
    """A dictionary that knows how to update itself from the YAML file and the environment."""

    def update_from_yaml_file( self, file_path, app_config_env ):
        """Load the DEFAULT section and then the section for the environment.

        :param str file_path: Path to conf.yml.
        :param str app_config_env: The section to overlay on DEFAULT.
        :return:
        """

        with open( file_path, 'r' ) as file_pointer:
            sections = yaml.safe_load( file_pointer ) or {}

        self.update( sections.get( DEFAULT_SECTION, {} ) or {} )
        if app_config_env != DEFAULT_SECTION:
            if app_config_env not in sections:
                logging.warning( 'Configuration section %s not found in %s.', app_config_env, file_path )
            self.update( sections.get( app_config_env, {} ) or {} )

    def update_from_env_variables( self, app_config_env, environment=None ):
        """Overlay the environment variables.

        :param str app_config_env: The configuration name, recorded on the dictionary as APP_ENV.
        :param dict environment: The variables to read, os.environ when None.
        :return:
        """

        if environment is None:
            environment = os.environ

        for key, value in environment.items():
            if key.startswith( ENV_PREFIX ) and len( key ) > len( ENV_PREFIX ):
                config_key = key[ len( ENV_PREFIX ): ]
                self[ config_key ] = coerce_env_value( self.get( config_key ), value )

        if environment.get( 'DB_HOST' ):
            self[ 'SQLALCHEMY_DATABASE_URI' ] = DATABASE_URI_TEMPLATE.format(
                user=environment.get( 'DB_USER', '' ),
                password=environment.get( 'DB_PASSWORD', '' ),
                host=environment[ 'DB_HOST' ],
                port=environment.get( 'DB_PORT', '5432' ),
                name=environment.get( 'DB_NAME', '' )
            )

        self[ 'APP_ENV' ] = app_config_env
