"""Controllers for Flask-RESTful resources: handle the business logic for the success story endpoints."""
from datetime import datetime

from aid_coordination.exceptions.exception_model import ModelCauseNotFoundError
from aid_coordination.exceptions.exception_model import ModelConnectionNotFoundError
from aid_coordination.exceptions.exception_model import ModelNoFieldsToUpdateError
from aid_coordination.exceptions.exception_model import ModelStoryNotFoundError
from aid_coordination.flask_essentials import database
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.helpers.model_serialization import pick_updates
from aid_coordination.models.cause import CauseModel
from aid_coordination.models.connection import ConnectionModel
from aid_coordination.models.success_story import SuccessStoryModel
from aid_coordination.schemas.success_story import SuccessStorySchema

STORY_FIELDS = ( 'title', 'content', 'image_url', 'published_at', 'connection_id', 'cause_id' )


def get_published_stories( featured=False ):
    """Stories whose publish time has passed, most recently published first.

    :param bool featured: Only featured stories when True.
    :return: List of SuccessStoryModel.
    """

    query = SuccessStoryModel.query\
        .filter( SuccessStoryModel.published_at.isnot( None ) )\
        .filter( SuccessStoryModel.published_at <= datetime.utcnow() )
    if featured:
        query = query.filter( SuccessStoryModel.is_featured.is_( True ) )
    return query.order_by( SuccessStoryModel.published_at.desc(), SuccessStoryModel.id.desc() ).all()


def validate_story_links( story_json ):
    """The connection and the cause a story refers to must exist."""

    if story_json.get( 'connection_id' ) and \
            not ConnectionModel.query.filter_by( id=story_json[ 'connection_id' ] ).one_or_none():
        raise ModelConnectionNotFoundError
    if story_json.get( 'cause_id' ) and not CauseModel.query.filter_by( id=story_json[ 'cause_id' ] ).one_or_none():
        raise ModelCauseNotFoundError


def create_story( payload ):
    """Persist a story. "publish": true publishes it now unless published_at is supplied.

    :param dict payload: The JSON body.
    :return: The new SuccessStoryModel.
    """

    story_json = { field: payload[ field ] for field in STORY_FIELDS if field in payload }
    story_json[ 'is_featured' ] = payload.get( 'is_featured', False )
    validate_story_links( story_json )

    story = from_json( SuccessStorySchema(), story_json )
    if payload.get( 'publish' ) and not story.published_at:
        story.published_at = datetime.utcnow()

    database.session.add( story )
    database.session.commit()
    return story


def update_story( story_id, payload ):
    """Apply the supplied, non-empty fields; is_featured is applied whenever present.

    :param int story_id: The story ID.
    :param dict payload: The JSON body.
    :return: The updated SuccessStoryModel.
    """

    story = SuccessStoryModel.query.filter_by( id=story_id ).one_or_none()
    if not story:
        raise ModelStoryNotFoundError

    updates = pick_updates( payload, STORY_FIELDS )
    if 'is_featured' in payload:
        updates[ 'is_featured' ] = payload[ 'is_featured' ]
    if not updates:
        raise ModelNoFieldsToUpdateError

    validate_story_links( updates )
    from_json( SuccessStorySchema(), updates, create=False, instance=story )
    database.session.commit()
    return story
