"""
Client construction for the adapters.

Clients come from an aiobotocore session and are async context managers;
the adapters only ever receive an already-open client.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from aiobotocore.session import AioSession, get_session

from aws_helpers.config import ServiceConfig
from aws_helpers.db.store import RecordStore
from aws_helpers.identity.directory import UserDirectory

logger = logging.getLogger(__name__)


def dynamodb_client(config: ServiceConfig, session: Optional[AioSession] = None):
    """
    Create a DynamoDB client context for the configured region/endpoint.

    Usage:
        async with dynamodb_client(config) as client:
            ...
    """
    session = session or get_session()
    return session.create_client(
        'dynamodb',
        region_name=config.region,
        endpoint_url=config.endpoint_url,
    )


def cognito_client(config: ServiceConfig, session: Optional[AioSession] = None):
    """Create a Cognito Identity Provider client context for the configured region."""
    session = session or get_session()
    return session.create_client('cognito-idp', region_name=config.region)


@asynccontextmanager
async def open_record_store(
    config: ServiceConfig,
    session: Optional[AioSession] = None
) -> AsyncIterator[RecordStore]:
    """Yield a RecordStore backed by a fresh DynamoDB client."""
    async with dynamodb_client(config, session) as client:
        logger.debug(f"Opened DynamoDB client (region={config.region})")
        yield RecordStore(client)


@asynccontextmanager
async def open_user_directory(
    config: ServiceConfig,
    session: Optional[AioSession] = None
) -> AsyncIterator[UserDirectory]:
    """Yield a UserDirectory for the configured user pool."""
    async with cognito_client(config, session) as client:
        logger.debug(f"Opened Cognito client (user_pool={config.user_pool_id})")
        yield UserDirectory(client, config)
