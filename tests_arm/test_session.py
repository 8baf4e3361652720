# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import json
import os
import tempfile
import uuid

from mock import patch

from .arm_common import BaseTest, CUSTOM_SUBSCRIPTION_ID, DEFAULT_SUBSCRIPTION_ID, \
    DEFAULT_TENANT_ID
from arm_client import constants
from arm_client.config import Bag, Config
from arm_client.exceptions import ArmClientError
from arm_client.session import Session


class SessionTest(BaseTest):

    def write_authorization_file(self, params):
        fh = tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False)
        self.addCleanup(os.unlink, fh.name)
        with fh:
            json.dump(params, fh)
        return fh.name

    def test_initialize_session_environment(self):
        with patch.dict(os.environ, {
                constants.ENV_ACCESS_TOKEN: 'env_token',
                constants.ENV_SUB_ID: DEFAULT_SUBSCRIPTION_ID}, clear=True):
            s = Session()
            self.assertEqual(s.get_bearer_token(), 'env_token')
            self.assertEqual(s.get_subscription_id(), uuid.UUID(DEFAULT_SUBSCRIPTION_ID))

    def test_initialize_session_auth_file(self):
        path = self.write_authorization_file({
            'access_token': 'file_token', 'subscription_id': DEFAULT_SUBSCRIPTION_ID})
        with patch.dict(os.environ, {constants.ENV_ACCESS_TOKEN: 'env_token'}, clear=True):
            s = Session(authorization_file=path)
            self.assertEqual(s.get_bearer_token(), 'file_token')
            self.assertEqual(s.get_subscription_id(), uuid.UUID(DEFAULT_SUBSCRIPTION_ID))

    def test_initialize_session_overrides(self):
        path = self.write_authorization_file({
            'access_token': 'file_token', 'subscription_id': DEFAULT_SUBSCRIPTION_ID})
        s = Session(access_token='token', subscription_id=CUSTOM_SUBSCRIPTION_ID,
                    authorization_file=path)
        self.assertEqual(s.get_bearer_token(), 'token')
        self.assertEqual(s.get_subscription_id(), uuid.UUID(CUSTOM_SUBSCRIPTION_ID))

    def test_missing_credentials(self):
        with patch.dict(os.environ, {}, clear=True):
            s = Session()
            with self.assertRaises(ArmClientError):
                s.get_bearer_token()
            with self.assertRaises(ArmClientError):
                s.get_subscription_id()

    def test_invalid_subscription(self):
        s = Session(access_token='token', subscription_id='not-a-guid')
        with self.assertRaises(ArmClientError):
            s.get_subscription_id()

    @patch('arm_client.session.jwt.decode', return_value={'tid': DEFAULT_TENANT_ID})
    def test_get_tenant_id(self, decode):
        s = Session(access_token='token')
        self.assertEqual(s.get_tenant_id(), DEFAULT_TENANT_ID)
        decode.assert_called_once_with('token', options={'verify_signature': False})

    def test_from_config(self):
        s = Session.from_config(Config.empty(access_token='token'))
        self.assertEqual(s.get_bearer_token(), 'token')


class ConfigTest(BaseTest):

    def test_bag(self):
        b = Bag(a=1)
        self.assertEqual(b.a, 1)
        b.c = 2
        self.assertEqual(b['c'], 2)
        with self.assertRaises(AttributeError):
            b.missing

    def test_empty_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.empty()
        self.assertEqual(config.timeout, constants.DEFAULT_TIMEOUT)
        self.assertEqual(config.max_attempts, constants.DEFAULT_MAX_ATTEMPTS)
        self.assertEqual(config.cache_dir, os.getcwd())
        self.assertIsNone(config.access_token)

    def test_empty_environment(self):
        with patch.dict(os.environ, {
                constants.ENV_TIMEOUT: '30', constants.ENV_MAX_ATTEMPTS: '2',
                constants.ENV_CACHE_DIR: '/tmp/arm'}, clear=True):
            config = Config.empty(subscription_id=DEFAULT_SUBSCRIPTION_ID)
        self.assertEqual(config.timeout, 30)
        self.assertEqual(config.max_attempts, 2)
        self.assertEqual(config.cache_dir, '/tmp/arm')
        self.assertEqual(config.subscription_id, DEFAULT_SUBSCRIPTION_ID)

    def test_copy(self):
        config = Config.empty(timeout=5)
        copied = config.copy(timeout=10)
        self.assertEqual(config.timeout, 5)
        self.assertEqual(copied.timeout, 10)
        self.assertIsInstance(copied, Config)
