"""
DynamoDB record store helpers.

Imports are organized by concern for easy navigation.
"""

# ============================================================================
# Adapter
# ============================================================================

from .store import (
    RecordStore,
    INDEX_NAME_FORMAT,
)

# ============================================================================
# Helpers
# ============================================================================

from .helpers import (
    # Empty values
    strip_empty_strings,
    empty_string_to_none,

    # Expressions
    placeholder_token,
    build_update_expression,
    build_key_condition,

    # Marshalling
    float_to_decimal,
    marshal_item,
    unmarshal_item,
    marshal_params,
    unmarshal_response,

    # Operation names
    DOCUMENT_CLIENT_OPERATIONS,
    resolve_operation_name,
    table_params,
)

__all__ = [
    'RecordStore',
    'INDEX_NAME_FORMAT',
    'strip_empty_strings',
    'empty_string_to_none',
    'placeholder_token',
    'build_update_expression',
    'build_key_condition',
    'float_to_decimal',
    'marshal_item',
    'unmarshal_item',
    'marshal_params',
    'unmarshal_response',
    'DOCUMENT_CLIENT_OPERATIONS',
    'resolve_operation_name',
    'table_params',
]
