"""Authentication and role gating for the Flask-RESTful resources.

The access token is the caller's session. authenticate_user resolves it to a UserModel row and places the row on
flask.g, check_role( role ) then gates the endpoint by the row's role. The role is read from the database rather
than the token claims so that a role change takes effect immediately.

Resources that require a caller subclass AuthenticatedResource. Role gating is applied per method:

    class AidRequests( AuthenticatedResource ):

        @check_role( 'receiver' )
        def post( self ):
            ...
"""
import logging
from datetime import timedelta
from functools import wraps

from flask import current_app
from flask import g
from flask_jwt_extended import create_access_token
from flask_jwt_extended import get_jwt_identity
from flask_jwt_extended import verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from flask_restful import Resource
from jwt.exceptions import PyJWTError

from aid_coordination.exceptions.exception_auth import AuthForbiddenError
from aid_coordination.exceptions.exception_auth import AuthUnauthorizedError
from aid_coordination.models.user import UserModel


def issue_access_token( user ):
    """Build the access token for a user: the identity is the user ID, the role rides along as a claim.

    :param user: The UserModel.
    :return: The encoded access token.
    """

    expires = timedelta( minutes=int( current_app.config.get( 'JWT_ACCESS_TOKEN_EXPIRES_MINUTES', 1440 ) ) )
    return create_access_token(
        identity=str( user.id ), additional_claims={ 'role': user.role }, expires_delta=expires
    )


def resolve_user( optional=False ):
    """Verify the token on the request and load its user.

    :param bool optional: When True a missing token resolves to None instead of failing.
    :return: The UserModel or None.
    """

    try:
        verify_jwt_in_request( optional=optional )
        identity = get_jwt_identity()
    except ( JWTExtendedException, PyJWTError ) as error:
        logging.debug( 'Token rejected: %s', error )
        raise AuthUnauthorizedError() from error

    if identity is None:
        return None

    try:
        user = UserModel.query.filter_by( id=int( identity ) ).one_or_none()
    except ValueError as error:
        raise AuthUnauthorizedError() from error
    if not user:
        raise AuthUnauthorizedError( 'User no longer exists' )
    return user


def authenticate_user( function ):
    """Decorator: require a valid access token and resolve the caller onto g.current_user."""

    @wraps( function )
    def wrapper( *args, **kwargs ):
        g.current_user = resolve_user()
        return function( *args, **kwargs )

    return wrapper


def optional_user( function ):
    """Decorator: resolve the caller when a token is present, continue anonymously otherwise."""

    @wraps( function )
    def wrapper( *args, **kwargs ):
        g.current_user = resolve_user( optional=True )
        return function( *args, **kwargs )

    return wrapper


def check_role( *roles ):
    """Decorator factory: fail with forbidden unless the resolved caller holds one of the roles.

    Must run inside authenticate_user.

    :param roles: The permitted roles.
    :return: The decorator.
    """

    def decorator( function ):

        @wraps( function )
        def wrapper( *args, **kwargs ):
            user = current_user()
            if user is None:
                raise AuthUnauthorizedError()
            if user.role not in roles:
                raise AuthForbiddenError( 'Access denied: requires role {}'.format( ' or '.join( roles ) ) )
            return function( *args, **kwargs )

        return wrapper

    return decorator


def current_user():
    """The UserModel resolved for this request, or None."""
    return g.get( 'current_user' )


def require_owner_or_admin( owner_id, message='Unauthorized' ):
    """Fail with forbidden unless the caller owns the row or is an admin.

    :param int owner_id: The user ID owning the row.
    :param str message: The error message.
    :return: True when the caller is the owner, False when admitted as admin.
    """

    user = current_user()
    is_owner = user.id == owner_id
    if not is_owner and not user.is_admin:
        raise AuthForbiddenError( message )
    return is_owner


class AuthenticatedResource( Resource ):
    """Flask-RESTful resource whose every method requires a valid access token."""

    method_decorators = [ authenticate_user ]


class AdminResource( AuthenticatedResource ):
    """Flask-RESTful resource whose every method requires an admin."""

    method_decorators = [ check_role( 'admin' ), authenticate_user ]


class OptionalUserResource( Resource ):
    """Flask-RESTful resource that resolves the caller when a token is supplied."""

    method_decorators = [ optional_user ]
