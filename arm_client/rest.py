# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Thin synchronous wrapper over requests for ARM calls.

Every verb returns a :class:`RestApiResponse` envelope, transport
errors included, so callers inspect ``is_expected_success`` rather than
catching exceptions.
"""
import json
import logging
from urllib.parse import quote

import requests
from requests.structures import CaseInsensitiveDict
from msrest.serialization import Model

from arm_client import constants
from arm_client.config import Config
from arm_client.exceptions import ArmRequestError
from arm_client.utils import RetryPolicy, StringUtils, require

log = logging.getLogger('arm_client.rest')


def transport_defaults(config=None):
    """Timeout and retry policy of calls that set neither, read from the environment."""
    config = config or Config.empty()
    return config.timeout, RetryPolicy.from_config(config)


class RestApiResponse:

    def __init__(self, http_status=0, body=None, headers=None, is_expected_success=False,
                 was_exception=False, exception_message=None, values=None):
        self.http_status = http_status
        self.body = body
        self.headers = CaseInsensitiveDict(headers or {})
        self.is_expected_success = is_expected_success
        self.was_exception = was_exception
        self.exception_message = exception_message
        self.values = values

    @classmethod
    def from_exception(cls, error):
        return cls(was_exception=True, exception_message=str(error))

    def json(self):
        """The decoded body, None when empty or not json."""
        if StringUtils.is_blank(self.body):
            return None
        try:
            return json.loads(self.body)
        except ValueError:
            return None

    @property
    def error(self):
        """The ``{"error": {"code", "message"}}`` pair of an ARM failure."""
        data = self.json()
        if not isinstance(data, dict) or not isinstance(data.get('error'), dict):
            return None
        return data['error']

    def raise_for_status(self):
        if self.is_expected_success:
            return self
        if self.was_exception:
            raise ArmRequestError('request failed: %s' % self.exception_message)
        error = self.error or {}
        raise ArmRequestError(
            'unexpected status %s: %s' % (self.http_status, error.get('message', self.body)),
            status_code=self.http_status, body=self.body, error_code=error.get('code'))

    def __repr__(self):
        return '<RestApiResponse status:%s success:%s exception:%s>' % (
            self.http_status, self.is_expected_success, self.was_exception)


def build_url(url, api_version, params=None):
    if not StringUtils.is_blank(api_version):
        url = '%s?api-version=%s' % (url, api_version)
    for k, v in (params or {}).items():
        if v is None:
            continue
        url = '%s%s%s=%s' % (url, '&' if '?' in url else '?', k, quote(str(v), safe=''))
    return url


def serialize_body(body):
    if body is None:
        return None
    if isinstance(body, str):
        return body
    if isinstance(body, Model):
        return json.dumps(body.serialize())
    return json.dumps(body)


class RestApiClient:

    @staticmethod
    def _send(method, bearer_token, url, body=None, codes=constants.DEFAULT_SUCCESS_CODES,
              timeout=None, authenticate=True, allow_redirects=True, retry_policy=None):
        headers = {'Content-Type': 'application/json'}
        if authenticate:
            require(bearer_token, 'bearer_token')
            headers['Authorization'] = 'Bearer %s' % bearer_token
        data = serialize_body(body)
        if timeout is None or retry_policy is None:
            default_timeout, default_policy = transport_defaults()
            timeout = timeout or default_timeout
            retry_policy = retry_policy or default_policy
        log.debug('%s %s', method, url)
        try:
            response = retry_policy.call(
                requests.request, method, url, headers=headers, data=data,
                timeout=timeout, allow_redirects=allow_redirects)
        except Exception as e:
            log.warning('%s %s failed error:%s', method, url, e)
            return RestApiResponse.from_exception(e)

        return RestApiResponse(
            http_status=response.status_code,
            body=response.text,
            headers=response.headers,
            is_expected_success=response.status_code in codes)

    @classmethod
    def get(cls, bearer_token, url, api_version, params=None,
            codes=constants.DEFAULT_SUCCESS_CODES, **kw):
        return cls._send('GET', bearer_token, build_url(url, api_version, params),
                         codes=codes, **kw)

    @classmethod
    def post(cls, bearer_token, url, api_version, body=None, params=None,
             codes=constants.DEFAULT_SUCCESS_CODES, **kw):
        return cls._send('POST', bearer_token, build_url(url, api_version, params),
                         body=body, codes=codes, **kw)

    @classmethod
    def put(cls, bearer_token, url, api_version, body=None, params=None,
            codes=constants.DEFAULT_SUCCESS_CODES, **kw):
        return cls._send('PUT', bearer_token, build_url(url, api_version, params),
                         body=body, codes=codes, **kw)

    @classmethod
    def delete(cls, bearer_token, url, api_version, params=None,
               codes=constants.DEFAULT_DELETE_SUCCESS_CODES, **kw):
        return cls._send('DELETE', bearer_token, build_url(url, api_version, params),
                         codes=codes, **kw)

    @classmethod
    def head(cls, bearer_token, url, api_version, params=None,
             codes=constants.DEFAULT_HEAD_SUCCESS_CODES, **kw):
        return cls._send('HEAD', bearer_token, build_url(url, api_version, params),
                         codes=codes, **kw)

    @classmethod
    def get_without_authentication(cls, url, api_version=None, params=None,
                                   codes=constants.DEFAULT_SUCCESS_CODES, **kw):
        return cls._send('GET', None, build_url(url, api_version, params),
                         codes=codes, authenticate=False, **kw)

    @classmethod
    def get_with_continuations(cls, bearer_token, url, api_version, params=None,
                               codes=constants.DEFAULT_SUCCESS_CODES, **kw):
        """Collect the ``value`` arrays of every page reached by ``nextLink``.

        A failing first page is returned as is. A failing later page
        stops the walk, keeping what was gathered so far.
        """
        first = cls.get(bearer_token, url, api_version, params=params, codes=codes, **kw)
        if first.was_exception or not (
                200 <= first.http_status < 300 or first.http_status in codes):
            return first

        values = []
        page = first
        while True:
            data = page.json() or {}
            if isinstance(data, list):
                # some collections come back as a bare array
                values.extend(data)
                break
            values.extend(data.get('value') or ())
            next_link = data.get('nextLink')
            if StringUtils.is_blank(next_link):
                break
            # next links carry their own query string, api-version included
            page = cls.get(bearer_token, next_link, None, codes=codes, **kw)
            if page.was_exception or not (
                    200 <= page.http_status < 300 or page.http_status in codes):
                log.warning('stopped paging at %s status:%s', next_link, page.http_status)
                break

        return RestApiResponse(
            http_status=200, body=json.dumps(values), is_expected_success=True,
            values=values)
