"""Server-rendered pages built from the same controllers as the JSON endpoints."""
from flask import Blueprint
from flask import render_template
from flask import request

from aid_coordination.controllers.aid_request import get_approved_requests
from aid_coordination.controllers.aid_request import get_request_filters
from aid_coordination.controllers.cause import build_causes_query
from aid_coordination.controllers.cause import get_cause_filters
from aid_coordination.controllers.statistics import get_statistics
from aid_coordination.controllers.success_story import get_published_stories
from aid_coordination.models.aid_request import REQUEST_URGENCIES

FEATURED_CAUSE_COUNT = 3

pages = Blueprint( 'pages', __name__ )  # pylint: disable=invalid-name


@pages.route( '/' )
def home():
    """Home page: the statistics snapshot, the newest active causes and the featured stories."""

    return render_template(
        'home.html',
        statistics=get_statistics(),
        causes=build_causes_query( { 'status': 'active' } ).limit( FEATURED_CAUSE_COUNT ).all(),
        stories=get_published_stories( featured=True )
    )


@pages.route( '/collective-aid' )
def collective_aid():
    """Active causes, filtered like GET /api/causes."""

    causes = build_causes_query( get_cause_filters( request.args ) ).all()
    return render_template( 'collective_aid.html', causes=causes )


@pages.route( '/individual-aid' )
def individual_aid():
    """Approved requests with the category, location and urgency filter form."""

    filters = get_request_filters( request.args )
    return render_template(
        'individual_aid.html',
        aid_requests=get_approved_requests( filters ),
        filters=filters,
        urgencies=REQUEST_URGENCIES
    )


@pages.route( '/success-stories' )
def success_stories():
    return render_template( 'success_stories.html', stories=get_published_stories() )
