"""
Unit tests for service configuration.
"""
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from aws_helpers.config import ServiceConfig


class TestServiceConfig(unittest.TestCase):

    def test_from_env_mapping(self):
        config = ServiceConfig.from_env({
            'AWS_REGION': 'ap-southeast-2',
            'COGNITO_USERPOOL_ID': 'ap-southeast-2_abc123',
            'DYNAMODB_ENDPOINT_URL': 'http://localhost:8000',
        })
        self.assertEqual(config.region, 'ap-southeast-2')
        self.assertEqual(config.user_pool_id, 'ap-southeast-2_abc123')
        self.assertEqual(config.endpoint_url, 'http://localhost:8000')

    def test_from_env_defaults_to_os_environ(self):
        with patch.dict('os.environ', {'AWS_REGION': 'us-east-1', 'COGNITO_USERPOOL_ID': 'pool'}, clear=True):
            config = ServiceConfig.from_env()
        self.assertEqual(config.region, 'us-east-1')
        self.assertEqual(config.user_pool_id, 'pool')
        self.assertIsNone(config.endpoint_url)

    def test_missing_values_are_none(self):
        config = ServiceConfig.from_env({})
        self.assertIsNone(config.region)
        self.assertIsNone(config.user_pool_id)

    def test_blank_values_are_unset(self):
        config = ServiceConfig(region='  ', user_pool_id='')
        self.assertIsNone(config.region)
        self.assertIsNone(config.user_pool_id)

    def test_config_is_frozen(self):
        config = ServiceConfig(region='us-east-1')
        with self.assertRaises(ValidationError):
            config.region = 'eu-west-1'
