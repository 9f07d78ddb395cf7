"""Controllers for Flask-RESTful resources: handle the business logic for the verification endpoints.

Admins review requests, their supporting documents and user accounts. Receivers attach the documents to their own
requests.
"""
import logging
from datetime import datetime

from marshmallow import fields

from aid_coordination.exceptions.exception_model import ModelDocumentNotFoundError
from aid_coordination.exceptions.exception_model import ModelNoFieldsToUpdateError
from aid_coordination.exceptions.exception_model import ModelRequestNotFoundError
from aid_coordination.exceptions.exception_model import ModelUserNotFoundError
from aid_coordination.flask_essentials import database
from aid_coordination.helpers.authentication import require_owner_or_admin
from aid_coordination.helpers.model_serialization import from_json
from aid_coordination.helpers.model_serialization import pick_updates
from aid_coordination.models.aid_request import AidRequestModel
from aid_coordination.models.aid_request import RequestDocumentModel
from aid_coordination.models.user import UserModel
from aid_coordination.schemas.aid_request import AidRequestSchema
from aid_coordination.schemas.aid_request import RequestDocumentSchema


def get_request( request_id ):
    """Load a request in any status."""

    aid_request = AidRequestModel.query.filter_by( id=request_id ).one_or_none()
    if not aid_request:
        raise ModelRequestNotFoundError
    return aid_request


def get_requests_for_review( status='pending' ):
    """The review queue: requests in the given status, oldest first.

    :param str status: The request status to list.
    :return: List of AidRequestModel.
    """

    return AidRequestModel.query.filter_by( status=status )\
        .order_by( AidRequestModel.created_at.asc(), AidRequestModel.id.asc() ).all()


def review_request( request_id, payload, admin ):
    """Set the status and the admin notes of a request.

    Any status in the allowed set may be written at any time: pending, approved, rejected, fulfilled.

    :param int request_id: The request ID.
    :param dict payload: The JSON body with status and/or admin_notes.
    :param admin: The reviewing admin.
    :return: The updated AidRequestModel.
    """

    aid_request = get_request( request_id )

    updates = pick_updates( payload, ( 'status', 'admin_notes' ) )
    if not updates:
        raise ModelNoFieldsToUpdateError

    from_json( AidRequestSchema(), updates, create=False, instance=aid_request )
    database.session.commit()

    logging.info( 'Request %s reviewed by admin %s: status %s.', request_id, admin.id, aid_request.status )
    return aid_request


def get_request_documents( request_id ):
    """The documents of a request the caller owns or reviews."""

    aid_request = get_request( request_id )
    require_owner_or_admin( aid_request.user_id )
    return RequestDocumentModel.query.filter_by( request_id=request_id )\
        .order_by( RequestDocumentModel.uploaded_at.asc(), RequestDocumentModel.id.asc() ).all()


def add_request_document( request_id, payload ):
    """Attach a supporting document to a request and flag the request as documented.

    :param int request_id: The request ID.
    :param dict payload: The JSON body with document_type and document_url.
    :return: The new RequestDocumentModel.
    """

    aid_request = get_request( request_id )
    require_owner_or_admin( aid_request.user_id )

    document = from_json(
        RequestDocumentSchema(),
        {
            'request_id': aid_request.id,
            'document_type': payload.get( 'document_type' ),
            'document_url': payload.get( 'document_url' )
        }
    )
    aid_request.documents_provided = True
    database.session.add( document )
    database.session.commit()
    return document


def verify_document( document_id, payload, admin ):
    """Mark a document verified, or unverified when the payload says "verified": false.

    :param int document_id: The document ID.
    :param dict payload: The JSON body.
    :param admin: The verifying admin.
    :return: The updated RequestDocumentModel.
    """

    document = RequestDocumentModel.query.filter_by( id=document_id ).one_or_none()
    if not document:
        raise ModelDocumentNotFoundError

    document.verified = fields.Boolean().deserialize( payload.get( 'verified', True ) )
    document.verified_by = admin.id if document.verified else None
    document.verified_at = datetime.utcnow() if document.verified else None
    database.session.commit()
    return document


def verify_user( user_id, payload ):
    """Set a user's verified flag, true unless the payload says "is_verified": false.

    :param int user_id: The user ID.
    :param dict payload: The JSON body.
    :return: The updated UserModel.
    """

    user = UserModel.query.filter_by( id=user_id ).one_or_none()
    if not user:
        raise ModelUserNotFoundError

    user.is_verified = fields.Boolean().deserialize( payload.get( 'is_verified', True ) )
    database.session.commit()
    return user
