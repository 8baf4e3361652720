# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import json
import logging
import unittest
import uuid

from mock import patch, Mock

from arm_client import constants

logging.basicConfig(level=logging.DEBUG, format='%(message)s')
logging.getLogger("urllib3").setLevel(logging.INFO)

DEFAULT_SUBSCRIPTION_ID = 'ea42f556-5106-4743-99b0-c129bfa71a47'
CUSTOM_SUBSCRIPTION_ID = '00000000-5106-4743-99b0-c129bfa71a47'
DEFAULT_TENANT_ID = '00000000-0000-0000-0000-000000000003'
DEFAULT_TOKEN = 'fake_token'
DEFAULT_RESOURCE_GROUP = 'test_rg'

SUBSCRIPTION_URL = '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, DEFAULT_SUBSCRIPTION_ID)
RESOURCE_GROUP_URL = '%s/resourceGroups/%s' % (SUBSCRIPTION_URL, DEFAULT_RESOURCE_GROUP)


def mock_response(status_code=200, body=None, headers=None):
    """A stand in for a requests.Response."""
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return Mock(status_code=status_code, text=body or '', headers=headers or {})


def arm_error(code, message='failed'):
    return {'error': {'code': code, 'message': message}}


def resource_id(provider_type, name, resource_group=DEFAULT_RESOURCE_GROUP):
    return '/subscriptions/%s/resourceGroups/%s/providers/%s/%s' % (
        DEFAULT_SUBSCRIPTION_ID, resource_group, provider_type, name)


class BaseTest(unittest.TestCase):
    """ ARM client base testing class.

    Requests never leave the process, ``patch_request`` queues the
    responses the transport hands back in order.
    """

    subscription = uuid.UUID(DEFAULT_SUBSCRIPTION_ID)
    token = DEFAULT_TOKEN

    def setUp(self):
        super(BaseTest, self).setUp()
        self._sleep_patch = patch('arm_client.utils.time.sleep')
        self._sleep_patch.start()
        self.addCleanup(self._sleep_patch.stop)

    def patch_request(self, *responses):
        request_patch = patch('arm_client.rest.requests.request', side_effect=list(responses))
        self.addCleanup(request_patch.stop)
        self.request = request_patch.start()
        return self.request

    def sent(self, index=-1):
        """(method, url, json body) of a request the transport received."""
        args, kwargs = self.request.call_args_list[index]
        data = kwargs.get('data')
        return args[0], args[1], json.loads(data) if data else None

    def sent_kwargs(self, index=-1):
        return self.request.call_args_list[index][1]

    def assertSent(self, method, url, index=-1):
        sent_method, sent_url, _ = self.sent(index)
        self.assertEqual(sent_method, method)
        self.assertEqual(sent_url, url)
