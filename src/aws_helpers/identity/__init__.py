"""
Cognito user directory helpers.
"""

from .directory import UserDirectory
from .auth import get_user_id
from .keys import (
    clean_key,
    clean_cognito_keys,
    SUBJECT_ATTRIBUTE,
    CUSTOM_PREFIX,
)

__all__ = [
    'UserDirectory',
    'get_user_id',
    'clean_key',
    'clean_cognito_keys',
    'SUBJECT_ATTRIBUTE',
    'CUSTOM_PREFIX',
]
