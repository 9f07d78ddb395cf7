"""Exception handlers for the models."""
# pylint: disable=too-few-public-methods


class ModelError( Exception ):
    """Base class for some custom exceptions for the models."""


class ModelNotFoundError( ModelError ):
    """Exception for a lookup with no row found."""

    def __init__( self, model_name='Resource' ):
        super().__init__()
        self.message = '{} not found'.format( model_name )


class ModelRequestNotFoundError( ModelNotFoundError ):
    """Exception for an aid request that does not exist or is not visible."""

    def __init__( self ):
        super().__init__( 'Request' )


class ModelCauseNotFoundError( ModelNotFoundError ):
    """Exception for a cause that does not exist."""

    def __init__( self ):
        super().__init__( 'Cause' )


class ModelUserNotFoundError( ModelNotFoundError ):
    """Exception for a user that does not exist."""

    def __init__( self ):
        super().__init__( 'User' )


class ModelConnectionNotFoundError( ModelNotFoundError ):
    """Exception for a connection that does not exist."""

    def __init__( self ):
        super().__init__( 'Connection' )


class ModelDocumentNotFoundError( ModelNotFoundError ):
    """Exception for a request document that does not exist."""

    def __init__( self ):
        super().__init__( 'Document' )


class ModelDonationNotFoundError( ModelNotFoundError ):
    """Exception for a cause donation that does not exist."""

    def __init__( self ):
        super().__init__( 'Donation' )


class ModelStoryNotFoundError( ModelNotFoundError ):
    """Exception for a success story that does not exist."""

    def __init__( self ):
        super().__init__( 'Story' )


class ModelEnumerationNotFoundError( ModelNotFoundError ):
    """Exception for an enumeration lookup on an unknown model or attribute."""

    def __init__( self ):
        super().__init__( 'Enumeration' )


class ModelNoFieldsToUpdateError( ModelError ):
    """Exception for an update that carries no applicable field."""

    def __init__( self ):
        super().__init__()
        self.message = 'No fields to update'


class ModelImproperFieldError( ModelError ):
    """Exception for a field value the model cannot accept."""

    def __init__( self, message='Improper field value' ):
        super().__init__()
        self.message = message
