"""Controllers for Flask-RESTful resources: handle registration, login and profile management.

No email is sent: verification and reset tokens are logged so that an operator or a mail relay can deliver them.
"""
import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from aid_coordination.exceptions.exception_auth import AuthDuplicateUserError
from aid_coordination.exceptions.exception_auth import AuthInvalidCredentialsError
from aid_coordination.exceptions.exception_auth import AuthInvalidTokenError
from aid_coordination.exceptions.exception_model import ModelImproperFieldError
from aid_coordination.exceptions.exception_model import ModelNoFieldsToUpdateError
from aid_coordination.flask_essentials import database
from aid_coordination.helpers.authentication import issue_access_token
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.helpers.model_serialization import pick_updates
from aid_coordination.models.user import UserModel
from aid_coordination.schemas.user import UserSchema

REGISTRATION_ROLES = ( 'donor', 'receiver' )
MINIMUM_PASSWORD_LENGTH = 8
PROFILE_FIELDS = ( 'first_name', 'last_name', 'profile_img', 'bio', 'location', 'phone' )
REGISTRATION_FIELDS = ( 'username', 'email', 'role' ) + PROFILE_FIELDS


def validate_password( password ):
    """Refuse passwords that are missing or shorter than the minimum length."""

    if not password or len( password ) < MINIMUM_PASSWORD_LENGTH:
        raise ModelImproperFieldError(
            'Password must be at least {} characters'.format( MINIMUM_PASSWORD_LENGTH )
        )


def register_user( payload ):
    """Create a donor or receiver account. Admin accounts are not self-service.

    :param dict payload: The JSON body.
    :return: Dictionary with the access token and the new UserModel.
    """

    if payload.get( 'role' ) not in REGISTRATION_ROLES:
        raise ModelImproperFieldError( 'Role must be donor or receiver' )
    validate_password( payload.get( 'password' ) )

    existing = UserModel.query.filter(
        or_( UserModel.username == payload.get( 'username' ), UserModel.email == payload.get( 'email' ) )
    ).first()
    if existing:
        raise AuthDuplicateUserError

    user_json = { field: payload[ field ] for field in REGISTRATION_FIELDS if field in payload }
    user = from_json( UserSchema(), user_json )
    user.set_password( payload[ 'password' ] )
    user.is_verified = False
    user.verification_token = uuid.uuid4().hex

    database.session.add( user )
    try:
        database.session.commit()
    except IntegrityError:
        # A concurrent registration took the username or email after the check above.
        database.session.rollback()
        raise AuthDuplicateUserError

    logging.info( 'User %s registered as %s; verification token %s.', user.id, user.role, user.verification_token )
    return { 'access_token': issue_access_token( user ), 'user': user }


def login_user( payload ):
    """Check the credentials and issue an access token.

    :param dict payload: The JSON body with username ( or email ) and password.
    :return: Dictionary with the access token and the UserModel.
    """

    identifier = payload.get( 'username' ) or payload.get( 'email' )
    password = payload.get( 'password' )
    if not identifier or not password:
        raise AuthInvalidCredentialsError

    user = UserModel.query.filter(
        or_( UserModel.username == identifier, UserModel.email == identifier )
    ).first()
    if not user or not user.check_password( password ):
        logging.warning( 'Failed login for %s.', identifier )
        raise AuthInvalidCredentialsError

    return { 'access_token': issue_access_token( user ), 'user': user }


def update_profile( user, payload ):
    """Apply the supplied, non-empty profile fields. Username, email and role are not editable here.

    :param user: The caller.
    :param dict payload: The JSON body.
    :return: The updated UserModel.
    """

    updates = pick_updates( payload, PROFILE_FIELDS )
    if not updates:
        raise ModelNoFieldsToUpdateError

    from_json( UserSchema(), updates, create=False, instance=user )
    database.session.commit()
    return user


def verify_email( token ):
    """Mark the user holding the verification token as verified and spend the token."""

    user = UserModel.query.filter_by( verification_token=token ).one_or_none() if token else None
    if not user:
        raise AuthInvalidTokenError

    user.is_verified = True
    user.verification_token = None
    database.session.commit()
    return user


def request_password_reset( payload ):
    """Issue a reset token when the email is registered. The caller learns nothing either way.

    :param dict payload: The JSON body with email.
    :return:
    """

    user = UserModel.query.filter_by( email=payload.get( 'email' ) ).one_or_none()
    if not user:
        logging.info( 'Password reset requested for unknown email.' )
        return

    user.reset_token = uuid.uuid4().hex
    database.session.commit()
    logging.info( 'Password reset token issued for user %s: %s.', user.id, user.reset_token )


def reset_password( payload ):
    """Set a new password for the user holding the reset token and spend the token.

    :param dict payload: The JSON body with token and password.
    :return: The UserModel.
    """

    token = payload.get( 'token' )
    user = UserModel.query.filter_by( reset_token=token ).one_or_none() if token else None
    if not user:
        raise AuthInvalidTokenError
    validate_password( payload.get( 'password' ) )

    user.set_password( payload[ 'password' ] )
    user.reset_token = None
    database.session.commit()
    return user
