"""
Helper functions for DynamoDB requests.

This module provides:
- Empty value helpers
- Update/key-condition expression builders
- Marshalling between native values and DynamoDB AttributeValues
- Operation name resolution for passthrough calls
"""

import logging
import re
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

logger = logging.getLogger(__name__)

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()

# Characters DynamoDB does not accept inside expression placeholders
_UNSAFE_PLACEHOLDER_CHARS = re.compile(r'[^A-Za-z0-9_]')


# ============================================================================
# Empty Value Helpers
# ============================================================================

def strip_empty_strings(item: Dict[str, Any]) -> Dict[str, Any]:
    """
    Drop attributes whose value is the empty string.

    Only the exact value '' is dropped; None, 0, False and empty
    collections are kept.

    Example:
        strip_empty_strings({'id': '1', 'name': ''})  # {'id': '1'}
    """
    return {key: value for key, value in item.items() if not _is_empty_string(value)}


def empty_string_to_none(value: Any) -> Any:
    """Map '' to None so the attribute is stored as NULL."""
    return None if _is_empty_string(value) else value


def _is_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value == ''


# ============================================================================
# Expression Builders
# ============================================================================

def placeholder_token(name: str) -> str:
    """
    Build the token used for '#name' / ':name' placeholders.

    Example:
        placeholder_token('created-at')  # 'created_at'
    """
    return _UNSAFE_PLACEHOLDER_CHARS.sub('_', name)


def build_update_expression(
    item: Dict[str, Any],
    key_field: str
) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
    """
    Build a SET UpdateExpression covering every non-key field of an item.

    Attribute names are referenced through '#name' placeholders and values
    through ':name' placeholders. Empty-string values are stored as None.

    Args:
        item: The full item, including its primary key field
        key_field: Name of the primary key field (never SET)

    Returns:
        Tuple of (update_expression, expression_attribute_names,
        expression_attribute_values). All three are empty when the item has
        no fields besides its key.

    Example:
        expr, names, values = build_update_expression(
            {'id': '1', 'name': 'New Name', 'note': ''}, 'id'
        )
        # expr   == 'SET #name = :name, #note = :note'
        # names  == {'#name': 'name', '#note': 'note'}
        # values == {':name': 'New Name', ':note': None}
    """
    set_parts: List[str] = []
    expr_attr_names: Dict[str, str] = {}
    expr_attr_values: Dict[str, Any] = {}

    for key, value in item.items():
        if key == key_field:
            continue

        token = placeholder_token(key)
        # Distinct names can sanitise to the same token
        if f"#{token}" in expr_attr_names:
            suffix = 1
            while f"#{token}_{suffix}" in expr_attr_names:
                suffix += 1
            token = f"{token}_{suffix}"
            logger.debug(f"Placeholder for '{key}' collides, using #{token}")

        set_parts.append(f"#{token} = :{token}")
        expr_attr_names[f"#{token}"] = key
        expr_attr_values[f":{token}"] = empty_string_to_none(value)

    if not set_parts:
        return '', {}, {}

    return "SET " + ", ".join(set_parts), expr_attr_names, expr_attr_values


def build_key_condition(
    field: str,
    value: Any
) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
    """
    Build an equality KeyConditionExpression for a single field.

    Returns:
        Tuple of (key_condition_expression, expression_attribute_names,
        expression_attribute_values)
    """
    token = placeholder_token(field)
    return (
        f"#{token} = :{token}",
        {f"#{token}": field},
        {f":{token}": value},
    )


# ============================================================================
# Marshalling
# ============================================================================

def float_to_decimal(value: Any) -> Any:
    """
    Recursively convert float values to Decimal in nested structures.

    DynamoDB requires numbers to be Decimal. This helper converts floats
    to Decimal for storage.
    """
    if isinstance(value, float):
        return Decimal(str(value))
    elif isinstance(value, dict):
        return {k: float_to_decimal(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [float_to_decimal(v) for v in value]
    elif isinstance(value, (set, frozenset)):
        # Number sets
        return {float_to_decimal(v) for v in value}
    else:
        return value


def marshal_item(item: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a native item (or key) into DynamoDB AttributeValue form."""
    return {key: _serializer.serialize(float_to_decimal(value)) for key, value in item.items()}


def unmarshal_item(item: Dict[str, Any]) -> Dict[str, Any]:
    """Convert an AttributeValue map back into native Python values."""
    return {key: _deserializer.deserialize(value) for key, value in item.items()}


def marshal_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Marshal the native values in a request into AttributeValue form.

    Handles Item, Key, ExclusiveStartKey and ExpressionAttributeValues, the
    per-table shapes in RequestItems (batch calls) and each entry of
    TransactItems. Everything else is passed through as-is.
    """
    result = dict(params)

    for field in ('Item', 'Key', 'ExclusiveStartKey', 'ExpressionAttributeValues'):
        if result.get(field) is not None:
            result[field] = marshal_item(result[field])

    if 'RequestItems' in result:
        result['RequestItems'] = _convert_request_items(result['RequestItems'], marshal_item)

    if 'TransactItems' in result:
        result['TransactItems'] = [
            {action: marshal_params(request) for action, request in entry.items()}
            for entry in result['TransactItems']
        ]

    return result


def unmarshal_response(response: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert the AttributeValues in a response back into native values.

    Response metadata and any other fields are passed through untouched.
    """
    result = dict(response)

    for field in ('Item', 'Attributes', 'LastEvaluatedKey'):
        if result.get(field) is not None:
            result[field] = unmarshal_item(result[field])

    if 'Items' in result:
        result['Items'] = [unmarshal_item(item) for item in result['Items']]

    responses = result.get('Responses')
    if isinstance(responses, dict):
        # batch_get_item: {table: [items]}
        result['Responses'] = {
            table_name: [unmarshal_item(item) for item in items]
            for table_name, items in responses.items()
        }
    elif isinstance(responses, list):
        # transact_get_items: [{'Item': ...}]
        result['Responses'] = [unmarshal_response(entry) for entry in responses]

    for field in ('UnprocessedItems', 'UnprocessedKeys'):
        if field in result:
            result[field] = _convert_request_items(result[field], unmarshal_item)

    return result


def _convert_request_items(
    request_items: Dict[str, Any],
    convert: Callable[[Dict[str, Any]], Dict[str, Any]]
) -> Dict[str, Any]:
    converted: Dict[str, Any] = {}
    for table_name, requests in request_items.items():
        if isinstance(requests, list):
            # batch_write_item: [{'PutRequest': ...} | {'DeleteRequest': ...}]
            converted[table_name] = [_convert_write_request(r, convert) for r in requests]
        else:
            # batch_get_item: {'Keys': [...], ...}
            converted[table_name] = {
                **requests,
                'Keys': [convert(key) for key in requests.get('Keys', [])],
            }
    return converted


def _convert_write_request(
    request: Dict[str, Any],
    convert: Callable[[Dict[str, Any]], Dict[str, Any]]
) -> Dict[str, Any]:
    if 'PutRequest' in request:
        put = request['PutRequest']
        return {'PutRequest': {**put, 'Item': convert(put['Item'])}}
    if 'DeleteRequest' in request:
        delete = request['DeleteRequest']
        return {'DeleteRequest': {**delete, 'Key': convert(delete['Key'])}}
    return request


# ============================================================================
# Operation Names
# ============================================================================

# Document-client style shorthands mapped to low-level client methods
DOCUMENT_CLIENT_OPERATIONS = {
    'put': 'put_item',
    'get': 'get_item',
    'update': 'update_item',
    'delete': 'delete_item',
    'query': 'query',
    'scan': 'scan',
    'batchGet': 'batch_get_item',
    'batchWrite': 'batch_write_item',
    'transactGet': 'transact_get_items',
    'transactWrite': 'transact_write_items',
}

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def resolve_operation_name(name: str) -> str:
    """
    Map an operation name onto the client method that performs it.

    Accepts document-client shorthands ('put', 'batchWrite'), camelCase API
    names ('describeTable') and snake_case method names ('describe_table').

    Example:
        resolve_operation_name('batchGet')       # 'batch_get_item'
        resolve_operation_name('describeTable')  # 'describe_table'
    """
    if name in DOCUMENT_CLIENT_OPERATIONS:
        return DOCUMENT_CLIENT_OPERATIONS[name]
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def table_params(table: Optional[str], params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merge TableName into request params; explicit params take precedence."""
    merged: Dict[str, Any] = {}
    if table is not None:
        merged['TableName'] = table
    merged.update(params or {})
    return merged
