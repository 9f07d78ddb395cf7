"""Marshmallow schema module for StatisticsCacheModel."""
# pylint: disable=too-few-public-methods
from marshmallow import fields
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema

from aid_coordination.models.statistics_cache import StatisticsCacheModel


class StatisticsCacheSchema( SQLAlchemyAutoSchema ):
    """Marshmallow schema for serialization of StatisticsCacheModel. The snapshot is only ever dumped."""
    total_aid_amount = fields.Decimal( places=2, as_string=True )

    class Meta:
        """Meta object for Marshmallow schema."""

        model = StatisticsCacheModel
