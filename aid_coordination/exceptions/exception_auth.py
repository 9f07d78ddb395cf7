"""Exception handlers for authentication and authorization errors."""
# pylint: disable=too-few-public-methods


class AuthError( Exception ):
    """Base class for some custom exceptions for authentication."""


class AuthUnauthorizedError( AuthError ):
    """Exception to handle a request without a valid access token."""

    def __init__( self, message='Authentication required' ):
        super().__init__()
        self.message = message


class AuthInvalidCredentialsError( AuthError ):
    """Exception to handle a login with an unknown user or a wrong password."""

    def __init__( self ):
        super().__init__()
        self.message = 'Invalid credentials'


class AuthInvalidTokenError( AuthError ):
    """Exception to handle an unknown verification or reset token."""

    def __init__( self ):
        super().__init__()
        self.message = 'Invalid or expired token'


class AuthForbiddenError( AuthError ):
    """Exception to handle a caller whose role or ownership does not permit the action."""

    def __init__( self, message='Unauthorized' ):
        super().__init__()
        self.message = message


class AuthDuplicateUserError( AuthError ):
    """Exception to handle registration with a username or email already taken."""

    def __init__( self ):
        super().__init__()
        self.message = 'Username or email already registered'
