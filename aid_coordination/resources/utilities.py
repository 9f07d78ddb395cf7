"""The Resources entry point for utility endpoints"""
# pylint: disable=too-few-public-methods
# pylint: disable=no-self-use
from flask_api import status
from flask_restful import Resource

from aid_coordination.controllers.utilities import get_enumeration


class Enumeration( Resource ):
    """Flask-RESTful resource endpoints to get an enumeration on a model."""

    def get( self, model, attribute ):
        """Retrieve the allowed values of the specified model and attribute.

        :param model: The table to retrieve the enumeration from.
        :param attribute: The enumerated column on the table.
        :return: List of the enumeration values.
        """

        return get_enumeration( model, attribute ), status.HTTP_200_OK
