"""Controllers for Flask-RESTful resources: handle the business logic for the endpoint."""
from aid_coordination.exceptions.exception_model import ModelEnumerationNotFoundError
from aid_coordination.models.aid_request import REQUEST_STATUSES
from aid_coordination.models.aid_request import REQUEST_URGENCIES
from aid_coordination.models.cause import CAUSE_STATUSES
from aid_coordination.models.cause_donation import DONATION_STATUSES
from aid_coordination.models.connection import CONNECTION_STATUSES
from aid_coordination.models.connection import TRANSACTION_STATUSES
from aid_coordination.models.connection import TRANSACTION_TYPES
from aid_coordination.models.user import USER_ROLES

MODELS_WITH_ENUMERATIONS = {
    'users': { 'role': USER_ROLES },
    'causes': { 'status': CAUSE_STATUSES },
    'requests': { 'urgency': REQUEST_URGENCIES, 'status': REQUEST_STATUSES },
    'cause_donations': { 'status': DONATION_STATUSES },
    'connections': { 'status': CONNECTION_STATUSES },
    'aid_transactions': { 'transaction_type': TRANSACTION_TYPES, 'status': TRANSACTION_STATUSES }
}


def get_enumeration( model, attribute ):
    """Simple lookup to return the allowed values of an enumerated column.

    :param model: The table name, e.g. requests.
    :param attribute: The enumerated column, e.g. urgency.
    :return: An enumeration list.
    """

    try:
        return list( MODELS_WITH_ENUMERATIONS[ model ][ attribute ] )
    except KeyError as error:
        raise ModelEnumerationNotFoundError from error
