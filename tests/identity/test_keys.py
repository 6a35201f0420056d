"""
Unit tests for Cognito key normalisation.
"""
import unittest

from aws_helpers.identity.keys import clean_key, clean_cognito_keys


class TestCleanKey(unittest.TestCase):

    def test_custom_prefix_removed(self):
        self.assertEqual(clean_key('custom:keyname'), 'keyname')

    def test_sub_renamed_to_id(self):
        self.assertEqual(clean_key('sub'), 'id')

    def test_snake_case_converted_to_camel_case(self):
        self.assertEqual(clean_key('key_name'), 'keyName')

    def test_custom_snake_case_key(self):
        self.assertEqual(clean_key('custom:sqid_token'), 'sqidToken')

    def test_plain_key_unchanged(self):
        self.assertEqual(clean_key('email'), 'email')

    def test_only_exact_sub_is_renamed(self):
        self.assertEqual(clean_key('subject'), 'subject')
        self.assertEqual(clean_key('custom:sub'), 'sub')

    def test_non_ascii_after_underscore_unchanged(self):
        self.assertEqual(clean_key('name_\u00e9t\u00e9'), 'name_\u00e9t\u00e9')
        self.assertEqual(clean_key('stra_\u00dfe'), 'stra_\u00dfe')

    def test_multiple_underscores(self):
        self.assertEqual(clean_key('email_verified_at'), 'emailVerifiedAt')


class TestCleanCognitoKeys(unittest.TestCase):

    def test_maps_key_names(self):
        user = {
            'Username': 'a',
            'Attributes': [
                {'Name': 'sub', 'Value': 'b'},
                {'Name': 'given_name', 'Value': 'c'},
                {'Name': 'family_name', 'Value': 'd'},
                {'Name': 'custom:sqid_token', 'Value': 'e'},
            ],
        }

        self.assertEqual(clean_cognito_keys(user), {
            'id': 'b',
            'username': 'a',
            'givenName': 'c',
            'familyName': 'd',
            'sqidToken': 'e',
        })

    def test_no_attributes(self):
        self.assertEqual(clean_cognito_keys({'Username': 'a', 'Attributes': []}), {'username': 'a'})

    def test_extra_user_fields_ignored(self):
        user = {
            'Username': 'a',
            'Attributes': [{'Name': 'email', 'Value': 'a@example.com'}],
            'Enabled': True,
            'UserStatus': 'CONFIRMED',
        }
        self.assertEqual(clean_cognito_keys(user), {'username': 'a', 'email': 'a@example.com'})

    def test_last_duplicate_wins(self):
        user = {
            'Username': 'a',
            'Attributes': [
                {'Name': 'given_name', 'Value': 'first'},
                {'Name': 'givenName', 'Value': 'second'},
            ],
        }
        self.assertEqual(clean_cognito_keys(user)['givenName'], 'second')

    def test_input_not_modified(self):
        user = {'Username': 'a', 'Attributes': [{'Name': 'sub', 'Value': 'b'}]}
        clean_cognito_keys(user)
        self.assertEqual(user, {'Username': 'a', 'Attributes': [{'Name': 'sub', 'Value': 'b'}]})
