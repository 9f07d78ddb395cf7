"""A module to facilitate serialization and deserialization of a model given their schema."""
from flask import request

from aid_coordination.exceptions.exception_model import ModelImproperFieldError


def from_json( model_schema, model_dictionary, create=True, instance=None ):
    """Takes the model_dictionary and deserializes it into the model using its Marshmallow schema: model_schema.

    Only keys that are loadable columns on the schema's model are passed to the schema, so a client cannot smuggle
    unknown keys or excluded columns ( password_hash ) into the load. When create is True the ID is removed and a
    new model instance is built. When create is False the instance is updated in place with a partial load.

    :param obj model_schema: This is a Marshmallow schema to be used for 2-way serialization.
    :param dict model_dictionary: The dictionary that is to be deserialized by the schema.
    :param bool create: Whether create or update the model. Default is to create.
    :param obj instance: The model instance to update when create is False.
    :return: The model instance.
    """

    fields = [
        column.key for column in model_schema.Meta.model.__table__.columns if column.key in model_schema.load_fields
    ]
    if create and 'id' in fields:
        fields.remove( 'id' )

    model_json = {}
    for field in fields:
        if field in model_dictionary:
            model_json[ field ] = model_dictionary[ field ]

    if create:
        return model_schema.load( model_json )
    return model_schema.load( model_json, instance=instance, partial=True )


def pick_updates( payload, allowed_fields ):
    """Collect the supplied, non-empty fields of an update payload.

    Empty strings, zero, None and missing keys are not applied, which mirrors the front-end sending every form field
    whether or not it was edited.

    :param dict payload: The JSON body of the PUT.
    :param allowed_fields: The field names the caller may update.
    :return: A dictionary of the fields to apply.
    """

    return { field: payload[ field ] for field in allowed_fields if payload.get( field ) }


def json_payload():
    """The JSON body of the current request as a dictionary.

    A missing or unparsable body is treated as empty. A body that parses to anything but an object is refused.

    :return: The payload dictionary.
    """

    payload = request.get_json( silent=True )
    if payload is None:
        return {}
    if not isinstance( payload, dict ):
        raise ModelImproperFieldError( 'Request body must be a JSON object' )
    return payload
