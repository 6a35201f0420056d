"""
Record store adapter for DynamoDB.

Each coroutine builds one request, awaits the injected client, and returns
the service's response with AttributeValues converted back to native
values. Client exceptions propagate untouched.
"""

import logging
from typing import Any, Dict, Optional

from aws_helpers.base import aws_operation
from aws_helpers.db.helpers import (
    build_key_condition,
    build_update_expression,
    marshal_params,
    resolve_operation_name,
    strip_empty_strings,
    table_params,
    unmarshal_response,
)

logger = logging.getLogger(__name__)

# Secondary indexes are named after the field they index
INDEX_NAME_FORMAT = "{field}-index"


class RecordStore:
    """
    Thin async wrapper over a DynamoDB client.

    Args:
        client: An aiobotocore 'dynamodb' client, or anything exposing the
            same coroutine methods (put_item, update_item, query, ...)

    Usage:
        async with open_record_store(config) as store:
            await store.put('vehicles', {'plate': 'ABC123', 'owner': user_id})
            result = await store.query('vehicles', 'owner', user_id)
    """

    def __init__(self, client: Any):
        self._client = client

    @aws_operation("dynamodb.put")
    async def put(self, table: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or replace an item, dropping attributes whose value is ''."""
        params = {
            'TableName': table,
            'Item': strip_empty_strings(item),
        }
        return await self._call('put_item', params)

    @aws_operation("dynamodb.update")
    async def update(self, table: str, key_field: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Partially update an item, setting every field of `item` except its key.

        Empty-string values are written as NULL. When `item` holds nothing
        but its key the request carries no update expression at all.

        Args:
            table: Name of the table to modify
            key_field: Name of the primary key field; item[key_field] selects
                the item to update
            item: The key plus the attributes to set

        Returns:
            The raw response; 'Attributes' holds the updated values
        """
        params: Dict[str, Any] = {
            'TableName': table,
            'Key': {key_field: item[key_field]},
            'ReturnValues': 'UPDATED_NEW',
        }

        update_expression, names, values = build_update_expression(item, key_field)
        if names:
            params.update(
                UpdateExpression=update_expression,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
            )
        else:
            logger.debug(f"No attributes to set on {table}, sending key-only update")

        return await self._call('update_item', params)

    @aws_operation("dynamodb.query")
    async def query(self, table: str, field: str, value: Any) -> Dict[str, Any]:
        """
        Query the '<field>-index' secondary index for field == value.

        Returns a single page. When 'LastEvaluatedKey' is present the caller
        must issue the follow-up request (see operation()).
        """
        key_condition, names, values = build_key_condition(field, value)
        params = {
            'TableName': table,
            'IndexName': INDEX_NAME_FORMAT.format(field=field),
            'KeyConditionExpression': key_condition,
            'ExpressionAttributeNames': names,
            'ExpressionAttributeValues': values,
        }
        return await self._call('query', params)

    @aws_operation("dynamodb.get")
    async def get(self, table: str, key_field: str, value: Any) -> Dict[str, Any]:
        """Look up one item by primary key. A miss returns a response without 'Item'."""
        params = {
            'TableName': table,
            'Key': {key_field: value},
        }
        return await self._call('get_item', params)

    @aws_operation("dynamodb.scan")
    async def scan(self, table: str) -> Dict[str, Any]:
        """Return the first page of a full table scan."""
        return await self._call('scan', {'TableName': table})

    @aws_operation("dynamodb.remove")
    async def remove(self, table: str, key: Dict[str, Any]) -> Dict[str, Any]:
        """
        Delete an item.

        Args:
            table: Name of the table to remove from
            key: Key attributes of the item. If the table has a sort key its
                value must be supplied in addition to the hash key.
        """
        params = {
            'TableName': table,
            'Key': key,
        }
        return await self._call('delete_item', params)

    @aws_operation("dynamodb.operation")
    async def operation(
        self,
        table: Optional[str],
        name: str,
        params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Perform an arbitrary operation using the full API options.

        Args:
            table: Table to operate on, merged in as TableName. Pass None for
                multi-table calls (batch/transact) that do not accept one.
            name: Operation name, e.g. 'query', 'batch_write_item', or a
                document-client shorthand such as 'batchGet'
            params: Request parameters with native values; TableName may be
                omitted

        Example:
            page = await store.operation('vehicles', 'query', {
                'IndexName': 'owner-index',
                'KeyConditionExpression': '#owner = :owner',
                'ExpressionAttributeNames': {'#owner': 'owner'},
                'ExpressionAttributeValues': {':owner': user_id},
                'ExclusiveStartKey': previous['LastEvaluatedKey'],
            })
        """
        return await self._call(resolve_operation_name(name), table_params(table, params))

    async def _call(self, method_name: str, params: Dict[str, Any]) -> Dict[str, Any]:
        method = getattr(self._client, method_name)
        response = await method(**marshal_params(params))
        return unmarshal_response(response)
