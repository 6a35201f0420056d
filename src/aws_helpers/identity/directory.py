"""
User directory adapter for Cognito user pools.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from aws_helpers.base import aws_operation
from aws_helpers.config import ServiceConfig
from aws_helpers.errors import UserNotFoundError
from aws_helpers.identity.auth import get_user_id
from aws_helpers.identity.keys import clean_cognito_keys

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    Async wrapper over a Cognito Identity Provider client.

    Users are returned as flat dicts (see clean_cognito_keys): the Cognito
    'sub' becomes 'id' and attribute names are camelCased.

    Args:
        client: An aiobotocore 'cognito-idp' client
        config: Supplies the user pool merged into every request

    Raises:
        ValueError: If the config has no user pool id
    """

    def __init__(self, client: Any, config: ServiceConfig):
        if not config.user_pool_id:
            raise ValueError("A Cognito user pool id is required")
        self._client = client
        self.params: Dict[str, Any] = {'UserPoolId': config.user_pool_id}

    get_user_id = staticmethod(get_user_id)

    @aws_operation("cognito.get_group_users")
    async def get_group_users(self, group: str) -> List[Dict[str, Any]]:
        """
        Get the users in a group.

        Only the first page is fetched; list_users_in_group pagination is not
        followed.
        """
        # TODO: follow NextToken once groups can exceed one page (60 users)
        response = await self._client.list_users_in_group(**self.params, GroupName=group)
        return [clean_cognito_keys(user) for user in response['Users']]

    @aws_operation("cognito.get_user")
    async def get_user(self, user_id: str) -> Dict[str, Any]:
        """
        Get the user whose subject identifier is `user_id`.

        Raises:
            UserNotFoundError: If no user matches
        """
        return await self._find_user(user_id)

    @aws_operation("cognito.get_all_users")
    async def get_all_users(self, page_token: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Get every user in the pool, following pagination tokens.

        Args:
            page_token: Start from this page instead of the first one

        Returns:
            Users from all pages, in the order Cognito returned them
        """
        params = dict(self.params)
        if page_token:
            params['PaginationToken'] = page_token

        users: List[Dict[str, Any]] = []
        pages = 0
        while True:
            response = await self._client.list_users(**params)
            users.extend(clean_cognito_keys(user) for user in response['Users'])
            pages += 1

            next_token = response.get('PaginationToken')
            if not next_token:
                break
            params['PaginationToken'] = next_token

        logger.debug(f"Listed {len(users)} users over {pages} page(s)")
        return users

    @aws_operation("cognito.get_user_groups")
    async def get_user_groups(self, user_id: str) -> List[str]:
        """Get the names of the groups a user belongs to."""
        user = await self._find_user(user_id)
        response = await self._client.admin_list_groups_for_user(
            **self.params,
            Username=user['username'],
        )
        return [group['GroupName'] for group in response['Groups']]

    @aws_operation("cognito.update_user_attributes")
    async def update_user_attributes(self, user_id: str, attributes: Mapping[str, Any]) -> None:
        """
        Update a user's Cognito attributes.

        None values are sent as '' which clears the attribute in Cognito.
        """
        user = await self._find_user(user_id)
        user_attributes = [
            {'Name': name, 'Value': '' if value is None else value}
            for name, value in attributes.items()
        ]
        await self._client.admin_update_user_attributes(
            **self.params,
            Username=user['username'],
            UserAttributes=user_attributes,
        )

    async def _find_user(self, user_id: str) -> Dict[str, Any]:
        response = await self._client.list_users(**self.params, Filter=f'sub = "{user_id}"')
        users = response['Users']
        if not users:
            raise UserNotFoundError()
        return clean_cognito_keys(users[0])
