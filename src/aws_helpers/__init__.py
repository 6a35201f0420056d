"""
Helpers for Lambda functions that use DynamoDB and Cognito.

Usage:
    from aws_helpers import ServiceConfig, open_record_store, open_user_directory

    config = ServiceConfig.from_env()

    async with open_user_directory(config) as directory:
        user = await directory.get_user(user_id)
"""

from .config import ServiceConfig
from .errors import (
    AwsHelperError,
    NotFound,
    NotAuthorized,
    ConflictError,
    UserNotFoundError,
    UserAccessViolationError,
    RegoConflictError,
)
from .db import RecordStore
from .identity import (
    UserDirectory,
    get_user_id,
    clean_key,
    clean_cognito_keys,
)
from .clients import (
    dynamodb_client,
    cognito_client,
    open_record_store,
    open_user_directory,
)

__all__ = [
    'ServiceConfig',
    'AwsHelperError',
    'NotFound',
    'NotAuthorized',
    'ConflictError',
    'UserNotFoundError',
    'UserAccessViolationError',
    'RegoConflictError',
    'RecordStore',
    'UserDirectory',
    'get_user_id',
    'clean_key',
    'clean_cognito_keys',
    'dynamodb_client',
    'cognito_client',
    'open_record_store',
    'open_user_directory',
]
