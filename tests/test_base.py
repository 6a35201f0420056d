"""
Unit tests for the aws_operation decorator.
"""

import logging
import unittest

from botocore.exceptions import ClientError

from aws_helpers.base import aws_operation
from aws_helpers.errors import UserNotFoundError


class TestAwsOperationDecorator(unittest.IsolatedAsyncioTestCase):
    """Tests for @aws_operation decorator."""

    async def test_successful_operation(self):
        @aws_operation("test_op")
        async def successful_function():
            return "success"

        with self.assertLogs('aws_helpers.base', level='INFO') as logs:
            result = await successful_function()

        self.assertEqual(result, "success")
        self.assertTrue(any('Successfully completed test_op' in line for line in logs.output))

    async def test_client_error_reraised_unchanged(self):
        error = ClientError(
            {'Error': {'Code': 'ConditionalCheckFailedException', 'Message': 'Failed'}},
            'PutItem'
        )

        @aws_operation("test_op")
        async def failing_function():
            raise error

        with self.assertLogs('aws_helpers.base', level='ERROR') as logs:
            with self.assertRaises(ClientError) as context:
                await failing_function()

        self.assertIs(context.exception, error)
        self.assertEqual(logs.records[0].error_code, 'ConditionalCheckFailedException')
        self.assertEqual(logs.records[0].operation, 'test_op')
        self.assertIsNotNone(logs.records[0].exc_info)

    async def test_helper_error_logged_as_warning(self):
        @aws_operation("test_op")
        async def not_found_function():
            raise UserNotFoundError()

        with self.assertLogs('aws_helpers.base', level='WARNING') as logs:
            with self.assertRaises(UserNotFoundError):
                await not_found_function()

        self.assertEqual(logs.records[0].levelno, logging.WARNING)

    async def test_generic_exception_reraised(self):
        @aws_operation("test_op")
        async def generic_failing_function():
            raise RuntimeError("Something went wrong")

        with self.assertRaises(RuntimeError):
            await generic_failing_function()

    async def test_defaults_to_function_name(self):
        @aws_operation()
        async def named_function():
            return 1

        with self.assertLogs('aws_helpers.base', level='INFO') as logs:
            await named_function()

        self.assertTrue(any('named_function' in line for line in logs.output))

    def test_preserves_function_metadata(self):
        @aws_operation("test_op")
        async def documented():
            """Docstring."""

        self.assertEqual(documented.__name__, 'documented')
        self.assertEqual(documented.__doc__, 'Docstring.')
