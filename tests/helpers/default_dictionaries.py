"""A collection of dictionary payloads for the unit tests, e.g. payloads to build the models.

   Call the dictionary and provide it an argument for key-value pairs to be updated. If None is provided
   no key-value pairs are updated and the default dictionary is returned. So, for example, calling the
   get_request_dict like:

       get_request_dict( { 'urgency': 'high' } )

   will return the default dictionary with the urgency updated from 'medium' to 'high'. The update()
   function at the end of the module is called to do the updating.
"""
import collections.abc


def get_user_dict( update_key_values=None ):
    """The registration payload for a user.

    :param update_key_values: The key-value pairs that should be updated in the default dictionary.
    :return: Updated dictionary
    """

    user_default = {
        'username': 'test_user',
        'email': 'test_user@example.org',
        'password': 'a-long-password',
        'role': 'donor',
        'first_name': 'Test',
        'last_name': 'User',
        'location': 'Springfield'
    }
    return update( update_key_values, user_default )


def get_cause_dict( update_key_values=None ):
    """The CauseModel dictionary for deserialization.

    :param update_key_values: The key-value pairs that should be updated in the default dictionary.
    :return: Updated dictionary
    """

    cause_default = {
        'id': None,
        'title': 'Clean water for the valley',
        'summary': 'Wells for three villages.',
        'description': 'Drill and maintain wells for three villages over one year.',
        'image_url': None,
        'category': 'water',
        'location': 'Springfield',
        'goal_amount': '10000.00',
        'current_amount': '0.00',
        'start_date': '2026-01-01',
        'end_date': None,
        'status': 'active',
        'created_by': None
    }
    return update( update_key_values, cause_default )


def get_request_dict( update_key_values=None ):
    """The AidRequestModel dictionary for deserialization.

    :param update_key_values: The key-value pairs that should be updated in the default dictionary.
    :return: Updated dictionary
    """

    request_default = {
        'id': None,
        'user_id': None,
        'title': 'Rent after a hospital stay',
        'summary': 'One month of rent.',
        'description': 'Two weeks in hospital cost me a month of wages.',
        'category': 'housing',
        'location': 'Springfield',
        'urgency': 'medium',
        'amount_needed': '850.00',
        'status': 'approved'
    }
    return update( update_key_values, request_default )


def get_donation_dict( update_key_values=None ):
    """The CauseDonationModel dictionary for deserialization.

    :param update_key_values: The key-value pairs that should be updated in the default dictionary.
    :return: Updated dictionary
    """

    donation_default = {
        'id': None,
        'cause_id': None,
        'user_id': None,
        'amount': '25.00',
        'transaction_id': 'txn-0001',
        'payment_method': 'card',
        'is_anonymous': False,
        'message': 'Good luck!',
        'status': 'completed'
    }
    return update( update_key_values, donation_default )


def get_connection_dict( update_key_values=None ):
    """The ConnectionModel dictionary for deserialization.

    :param update_key_values: The key-value pairs that should be updated in the default dictionary.
    :return: Updated dictionary
    """

    connection_default = {
        'id': None,
        'request_id': None,
        'donor_id': None,
        'status': 'active'
    }
    return update( update_key_values, connection_default )


def get_aid_transaction_dict( update_key_values=None ):
    """The AidTransactionModel payload.

    :param update_key_values: The key-value pairs that should be updated in the default dictionary.
    :return: Updated dictionary
    """

    aid_transaction_default = {
        'amount': '100.00',
        'transaction_type': 'monetary',
        'description': 'First instalment.',
        'payment_method': 'bank transfer',
        'status': 'completed'
    }
    return update( update_key_values, aid_transaction_default )


def get_story_dict( update_key_values=None ):
    """The SuccessStoryModel payload.

    :param update_key_values: The key-value pairs that should be updated in the default dictionary.
    :return: Updated dictionary
    """

    story_default = {
        'title': 'A roof before winter',
        'content': 'Thanks to three donors the roof was fixed in October.',
        'image_url': None,
        'connection_id': None,
        'cause_id': None,
        'is_featured': False,
        'publish': True
    }
    return update( update_key_values, story_default )


def update( update_key_values, base_dictionary ):
    """A routine to update a possibly nested dictionary with key-value pairs.

    :param update_key_values: The key-value pairs to update in the dictionary.
    :param base_dictionary: The dictionary to update.
    :return: Updated base dictionary.
    """

    if update_key_values:
        for base_key, base_value in base_dictionary.items():
            if isinstance( base_value, collections.abc.Mapping ):
                if base_key in update_key_values:
                    base_dictionary[ base_key ] = update(
                        update_key_values.get( base_key, {} ), base_value )
            else:
                if base_key in update_key_values:
                    base_dictionary[ base_key ] = update_key_values[ base_key ]

    return base_dictionary
