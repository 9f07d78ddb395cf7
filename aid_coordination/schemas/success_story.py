"""Marshmallow schema module for SuccessStoryModel."""
# pylint: disable=too-few-public-methods
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from aid_coordination.flask_essentials import database
from aid_coordination.models.success_story import SuccessStoryModel


class SuccessStorySchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization/deserialization of SuccessStoryModel."""

    class Meta:
        """Meta object for Marshmallow schema."""

        model = SuccessStoryModel
        load_instance = True
        include_fk = True
        sqla_session = database.session
