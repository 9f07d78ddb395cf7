"""Module to handle pagination requests.

A list endpoint is paginated when the query string carries rows_per_page or page_number. The response is then
{ "items": [ ... ] } with a Link header pointing at the previous and next pages, for example:

    </api/requests?urgency=high&rows_per_page=10&page_number=1&page_total=42>; rel="prev"
"""
from urllib.parse import urlencode

from flask import current_app
from flask import jsonify
from flask_api import status

from aid_coordination.exceptions.exception_model import ModelImproperFieldError


def get_page_information( args ):
    """Pull the page terms from the query string.

    A page_number without rows_per_page pages by DEFAULT_ROWS_PER_PAGE.

    :param args: The request.args MultiDict.
    :return: A dictionary with page_number and rows_per_page, or an empty dictionary when not paginating.
    """

    if not args.get( 'rows_per_page' ) and not args.get( 'page_number' ):
        return {}

    try:
        rows_per_page = int( args.get( 'rows_per_page' ) or current_app.config.get( 'DEFAULT_ROWS_PER_PAGE', 25 ) )
        page_number = int( args.get( 'page_number', 1 ) )
    except ValueError as error:
        raise ModelImproperFieldError( 'rows_per_page and page_number must be integers' ) from error

    if rows_per_page < 1 or page_number < 1:
        raise ModelImproperFieldError( 'rows_per_page and page_number must be positive' )

    return { 'page_number': page_number, 'rows_per_page': rows_per_page }


def build_link_header( page, base_url, query_terms ):
    """Build the previous and next links for the link header.

    :param page: The Flask-SQLAlchemy Pagination.
    :param base_url: The URL for the endpoint.
    :param query_terms: The filter terms used on the query.
    :return: Links for the link header.
    """

    query_string = ''
    if query_terms:
        query_string = '{}&'.format( urlencode( query_terms ) )

    links = ''
    if page.has_prev:
        links += '<{}?{}rows_per_page={}&page_number={}&page_total={}>; rel="prev"'.format(
            base_url, query_string, page.per_page, page.prev_num, page.total
        )
    if page.has_next:
        if links:
            links += ', '
        links += '<{}?{}rows_per_page={}&page_number={}&page_total={}>; rel="next"'.format(
            base_url, query_string, page.per_page, page.next_num, page.total
        )

    if links == '':
        return None

    return links


def paginated_response( query, page_information, base_url, query_terms, schema ):
    """Paginate a query and build the response with its Link header.

    A page number beyond the last page is clamped to the last page.

    :param query: A Flask-SQLAlchemy query built by the controller.
    :param page_information: Page number and rows per page.
    :param base_url: Base URL to build the link from.
    :param query_terms: The filter terms to carry on the links.
    :param schema: The schema instance ( many=True ) to dump the items with.
    :return: A Flask response.
    """

    page = query.paginate(
        page=page_information[ 'page_number' ],
        per_page=page_information[ 'rows_per_page' ],
        error_out=False,
        count=True
    )
    if page.pages and page.page > page.pages:
        page = query.paginate(
            page=page.pages, per_page=page_information[ 'rows_per_page' ], error_out=False, count=True
        )

    response = jsonify( { 'items': schema.dump( page.items ) } )
    link_header = build_link_header( page, base_url, query_terms )
    if link_header:
        response.headers[ 'Link' ] = link_header
    response.status_code = status.HTTP_200_OK
    return response
