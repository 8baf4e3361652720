# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import os

import requests
from mock import patch

from .arm_common import BaseTest, DEFAULT_TOKEN, arm_error, mock_response
from arm_client.exceptions import ArmRequestError
from arm_client.models import AzureNameValuePair
from arm_client.rest import RestApiClient, RestApiResponse, build_url, serialize_body
from arm_client.utils import NO_RETRY

URL = 'https://management.azure.com/subscriptions'


class RestApiClientTest(BaseTest):

    def test_build_url(self):
        self.assertEqual(
            build_url(URL, '2019-11-01', {'$top': 5, '$filter': None, 'name': 'a b'}),
            URL + '?api-version=2019-11-01&$top=5&name=a%20b')
        self.assertEqual(build_url(URL, None, {'x': 1}), URL + '?x=1')
        self.assertEqual(build_url(URL, '', None), URL)

    def test_serialize_body(self):
        self.assertIsNone(serialize_body(None))
        self.assertEqual(serialize_body('raw'), 'raw')
        self.assertEqual(serialize_body({'a': 1}), '{"a": 1}')
        self.assertEqual(
            serialize_body(AzureNameValuePair(name='n', value='v')),
            '{"name": "n", "value": "v"}')

    def test_get_sends_token(self):
        self.patch_request(mock_response(200, {'value': []}))
        response = RestApiClient.get(DEFAULT_TOKEN, URL, '2019-11-01')

        self.assertTrue(response.is_expected_success)
        self.assertEqual(response.http_status, 200)
        self.assertSent('GET', URL + '?api-version=2019-11-01')
        headers = self.sent_kwargs()['headers']
        self.assertEqual(headers['Authorization'], 'Bearer fake_token')

    def test_blank_token_rejected_before_io(self):
        self.patch_request()
        with self.assertRaises(ValueError):
            RestApiClient.get(' ', URL, '2019-11-01')
        self.assertFalse(self.request.called)

    def test_get_without_authentication(self):
        self.patch_request(mock_response(200, '{}'))
        response = RestApiClient.get_without_authentication(URL, codes=(200,))
        self.assertTrue(response.is_expected_success)
        self.assertNotIn('Authorization', self.sent_kwargs()['headers'])

    def test_expected_not_found(self):
        self.patch_request(mock_response(404))
        response = RestApiClient.head(DEFAULT_TOKEN, URL, '2019-11-01', codes=(204, 404))
        self.assertTrue(response.is_expected_success)
        self.assertEqual(response.http_status, 404)

    def test_unexpected_status(self):
        self.patch_request(mock_response(409, arm_error('Conflict', 'in use')))
        response = RestApiClient.delete(DEFAULT_TOKEN, URL, '2019-11-01')

        self.assertFalse(response.is_expected_success)
        self.assertFalse(response.was_exception)
        self.assertEqual(response.error['code'], 'Conflict')
        with self.assertRaises(ArmRequestError) as e:
            response.raise_for_status()
        self.assertEqual(e.exception.status_code, 409)
        self.assertEqual(e.exception.error_code, 'Conflict')

    def test_transport_exception_becomes_envelope(self):
        self.patch_request(ValueError('bad request body'))
        response = RestApiClient.post(DEFAULT_TOKEN, URL, '2019-11-01', body={})

        self.assertTrue(response.was_exception)
        self.assertFalse(response.is_expected_success)
        self.assertEqual(response.exception_message, 'bad request body')
        self.assertEqual(self.request.call_count, 1)
        with self.assertRaises(ArmRequestError):
            response.raise_for_status()

    def test_transient_error_retried(self):
        self.patch_request(requests.ConnectionError('reset'), mock_response(200, '{}'))
        response = RestApiClient.get(DEFAULT_TOKEN, URL, '2019-11-01')
        self.assertTrue(response.is_expected_success)
        self.assertEqual(self.request.call_count, 2)

    def test_transient_error_not_retried_without_attempts(self):
        self.patch_request(requests.Timeout('slow'))
        response = RestApiClient.get(DEFAULT_TOKEN, URL, '2019-11-01', retry_policy=NO_RETRY)
        self.assertTrue(response.was_exception)
        self.assertEqual(self.request.call_count, 1)

    def test_timeout_and_attempts_from_environment(self):
        self.patch_request(
            requests.ConnectionError('reset'), requests.ConnectionError('reset'),
            mock_response(200, '{}'))
        env = {'ARM_CLIENT_TIMEOUT': '3', 'ARM_CLIENT_MAX_ATTEMPTS': '2'}
        with patch.dict(os.environ, env):
            response = RestApiClient.get(DEFAULT_TOKEN, URL, '2019-11-01')
        self.assertTrue(response.was_exception)
        self.assertEqual(self.request.call_count, 2)
        self.assertEqual(self.sent_kwargs()['timeout'], 3)

    def test_explicit_timeout_wins(self):
        self.patch_request(mock_response(200, '{}'))
        with patch.dict(os.environ, {'ARM_CLIENT_TIMEOUT': '3'}):
            RestApiClient.get(DEFAULT_TOKEN, URL, '2019-11-01', timeout=30)
        self.assertEqual(self.sent_kwargs()['timeout'], 30)

    def test_default_timeout(self):
        self.patch_request(mock_response(200, '{}'))
        with patch.dict(os.environ):
            os.environ.pop('ARM_CLIENT_TIMEOUT', None)
            RestApiClient.get(DEFAULT_TOKEN, URL, '2019-11-01')
        self.assertEqual(self.sent_kwargs()['timeout'], 15)

    def test_headers_case_insensitive(self):
        self.patch_request(mock_response(202, headers={'location': 'https://poll'}))
        response = RestApiClient.put(DEFAULT_TOKEN, URL, '2019-11-01')
        self.assertEqual(response.headers['Location'], 'https://poll')

    def test_continuations(self):
        next_link = URL + '?api-version=2019-11-01&$skiptoken=abc'
        self.patch_request(
            mock_response(200, {'value': [{'id': 1}, {'id': 2}], 'nextLink': next_link}),
            mock_response(200, {'value': [{'id': 3}]}))
        response = RestApiClient.get_with_continuations(DEFAULT_TOKEN, URL, '2019-11-01')

        self.assertTrue(response.is_expected_success)
        self.assertEqual([v['id'] for v in response.values], [1, 2, 3])
        self.assertSent('GET', next_link)

    def test_continuations_bare_list(self):
        self.patch_request(mock_response(200, [{'id': 1}]))
        response = RestApiClient.get_with_continuations(DEFAULT_TOKEN, URL, None)
        self.assertEqual(response.values, [{'id': 1}])

    def test_continuations_later_page_fails(self):
        self.patch_request(
            mock_response(200, {'value': [{'id': 1}], 'nextLink': URL + '?page=2'}),
            mock_response(500, arm_error('InternalError')))
        response = RestApiClient.get_with_continuations(DEFAULT_TOKEN, URL, '2019-11-01')
        self.assertTrue(response.is_expected_success)
        self.assertEqual(response.values, [{'id': 1}])

    def test_continuations_first_page_fails(self):
        self.patch_request(mock_response(403, arm_error('AuthorizationFailed')))
        response = RestApiClient.get_with_continuations(
            DEFAULT_TOKEN, URL, '2019-11-01', codes=(200,))
        self.assertFalse(response.is_expected_success)
        self.assertEqual(response.http_status, 403)
        self.assertIsNone(response.values)


class RestApiResponseTest(BaseTest):

    def test_json(self):
        self.assertIsNone(RestApiResponse(body='').json())
        self.assertIsNone(RestApiResponse(body='<html/>').json())
        self.assertEqual(RestApiResponse(body='{"a": 1}').json(), {'a': 1})

    def test_error(self):
        self.assertIsNone(RestApiResponse(body='{"a": 1}').error)
        self.assertEqual(
            RestApiResponse(body='{"error": {"code": "X"}}').error, {'code': 'X'})

    def test_raise_for_status_success(self):
        response = RestApiResponse(http_status=200, is_expected_success=True)
        self.assertIs(response.raise_for_status(), response)
