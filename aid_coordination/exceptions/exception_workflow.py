"""Exception handlers for state errors in the donation and connection workflows."""
# pylint: disable=too-few-public-methods


class WorkflowError( Exception ):
    """Base class for some custom exceptions for the workflows."""


class WorkflowCauseNotActiveError( WorkflowError ):
    """Exception to handle a donation to a cause that is completed or cancelled."""

    def __init__( self ):
        super().__init__()
        self.message = 'Cause is not accepting donations'


class WorkflowNonPositiveAmountError( WorkflowError ):
    """Exception to handle a donation amount that is zero or negative."""

    def __init__( self ):
        super().__init__()
        self.message = 'Amount must be greater than zero'


class WorkflowRequestNotApprovedError( WorkflowError ):
    """Exception to handle a connection to a request that is not approved."""

    def __init__( self ):
        super().__init__()
        self.message = 'Request is not open for connections'


class WorkflowDuplicateConnectionError( WorkflowError ):
    """Exception to handle a second open connection between the same donor and request."""

    def __init__( self ):
        super().__init__()
        self.message = 'An open connection to this request already exists'


class WorkflowConnectionNotCompletedError( WorkflowError ):
    """Exception to handle feedback on a connection that is not completed."""

    def __init__( self ):
        super().__init__()
        self.message = 'Feedback is accepted only on completed connections'


class WorkflowConnectionCancelledError( WorkflowError ):
    """Exception to handle messages or transactions on a cancelled connection."""

    def __init__( self ):
        super().__init__()
        self.message = 'Connection is cancelled'


class WorkflowStatusTransitionError( WorkflowError ):
    """Exception to handle a connection status change a participant may not make."""

    def __init__( self, current_status, new_status ):
        super().__init__()
        self.message = 'Connection cannot move from {} to {}'.format( current_status, new_status )
