# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import datetime
import uuid

import requests
from dateutil import tz
from mock import Mock

from .arm_common import BaseTest, DEFAULT_SUBSCRIPTION_ID
from arm_client.utils import RetryPolicy, StringUtils, as_utc, require, to_subscription


class UtilsTest(BaseTest):

    def test_string_utils_equal(self):
        # Case insensitive matches
        self.assertTrue(StringUtils.equal("FOO", "foo"))
        self.assertTrue(StringUtils.equal(" fOo", "FoO "))
        self.assertFalse(StringUtils.equal("Foo", "Bar"))

        # Case sensitive matches
        self.assertFalse(StringUtils.equal("Foo", "foo", False))
        self.assertTrue(StringUtils.equal("foo", "foo", False))

        # Strings only
        self.assertFalse(StringUtils.equal(1, 1))
        self.assertFalse(StringUtils.equal(None, "foo"))

    def test_string_utils_is_blank(self):
        self.assertTrue(StringUtils.is_blank(None))
        self.assertTrue(StringUtils.is_blank(' \t'))
        self.assertFalse(StringUtils.is_blank('a'))
        self.assertFalse(StringUtils.is_blank(0))

    def test_require(self):
        self.assertEqual(require('a', 'name'), 'a')
        with self.assertRaises(ValueError):
            require('', 'name')

    def test_to_subscription(self):
        expected = uuid.UUID(DEFAULT_SUBSCRIPTION_ID)
        self.assertEqual(to_subscription(DEFAULT_SUBSCRIPTION_ID), expected)
        self.assertEqual(to_subscription(' %s ' % DEFAULT_SUBSCRIPTION_ID), expected)
        self.assertEqual(to_subscription(expected), expected)

    def test_to_subscription_invalid(self):
        for value in (None, '', '00000000-0000-0000-0000-000000000000', 'not-a-guid',
                      uuid.UUID(int=0)):
            with self.assertRaises(ValueError):
                to_subscription(value)
        with self.assertRaises(TypeError):
            to_subscription(42)

    def test_as_utc(self):
        naive = datetime.datetime(2020, 1, 1, 10)
        self.assertEqual(as_utc(naive).tzinfo, tz.tzutc())
        aware = datetime.datetime(2020, 1, 1, 10, tzinfo=tz.tzoffset('EST', -18000))
        self.assertIs(as_utc(aware), aware)


class RetryPolicyTest(BaseTest):

    def test_delays(self):
        self.assertEqual(RetryPolicy(max_attempts=4).delays(), [1, 2, 4])
        self.assertEqual(
            RetryPolicy(max_attempts=8, min_delay=1, max_delay=30).delays(),
            [1, 2, 4, 8, 16, 30, 30])
        self.assertEqual(RetryPolicy(max_attempts=1).delays(), [])

    def test_invalid_attempts(self):
        with self.assertRaises(ValueError):
            RetryPolicy(max_attempts=0)

    def test_is_retryable(self):
        policy = RetryPolicy()
        self.assertTrue(policy.is_retryable(requests.ConnectionError('reset')))
        self.assertTrue(policy.is_retryable(requests.Timeout('slow')))
        self.assertTrue(policy.is_retryable(Exception('No such host is known')))
        self.assertTrue(policy.is_retryable(Exception('The operation was Cancelled')))
        self.assertFalse(policy.is_retryable(ValueError('bad value')))

    def test_call_gives_up(self):
        func = Mock(side_effect=requests.ConnectionError('reset'))
        with self.assertRaises(requests.ConnectionError):
            RetryPolicy(max_attempts=3).call(func, 1, a=2)
        self.assertEqual(func.call_count, 3)
        func.assert_called_with(1, a=2)

    def test_call_does_not_retry_other_errors(self):
        func = Mock(side_effect=KeyError('x'))
        with self.assertRaises(KeyError):
            RetryPolicy(max_attempts=3).call(func)
        self.assertEqual(func.call_count, 1)

    def test_call_recovers(self):
        func = Mock(side_effect=[requests.Timeout('slow'), 'ok'])
        self.assertEqual(RetryPolicy().call(func), 'ok')
        self.assertEqual(func.call_count, 2)
