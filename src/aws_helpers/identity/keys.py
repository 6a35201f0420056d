"""
Normalisation of Cognito user records.

Cognito returns users as a username plus a list of {Name, Value} attribute
pairs. These helpers flatten that into one dict with camelCase keys.
"""
import re
from typing import Any, Dict

SUBJECT_ATTRIBUTE = 'sub'
CUSTOM_PREFIX = 'custom:'

_SNAKE_SEGMENT = re.compile(r'_\w', re.ASCII)


def clean_key(key: str) -> str:
    """
    Format a Cognito attribute name as a camelCase field name.

    Examples:
        >>> clean_key('sub')
        'id'
        >>> clean_key('given_name')
        'givenName'
        >>> clean_key('custom:sqid_token')
        'sqidToken'
    """
    if key == SUBJECT_ATTRIBUTE:
        key = 'id'
    key = _SNAKE_SEGMENT.sub(lambda match: match.group(0)[1].upper(), key)
    if key.startswith(CUSTOM_PREFIX):
        key = key[len(CUSTOM_PREFIX):]
    return key


def clean_cognito_keys(user: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a raw Cognito user into a flat dict with friendly names.

    Args:
        user: A user as returned by list_users / list_users_in_group,
            with 'Username' and 'Attributes'

    Returns:
        {'username': ..., <clean_key(Name)>: Value, ...}
    """
    formatted_attrs: Dict[str, Any] = {'username': user['Username']}

    for attr in user['Attributes']:
        formatted_attrs[clean_key(attr['Name'])] = attr['Value']

    return formatted_attrs
