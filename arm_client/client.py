# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import logging

from msrest.exceptions import DeserializationError

from arm_client import constants
from arm_client.rest import RestApiClient
from arm_client.resource_uri import ResourceUri
from arm_client.utils import StringUtils, strip_leading_slash

log = logging.getLogger('arm_client.client')


class ArmClient:
    """Base of the per resource clients.

    Operations are classmethods. ``API_VERSION`` is fixed per class, a
    subclass may pin another one. ``RETRY_POLICY`` of None uses the
    transport default.
    """

    API_VERSION = None
    RETRY_POLICY = None

    @classmethod
    def _kw(cls, kw):
        kw.setdefault('retry_policy', cls.RETRY_POLICY)
        return kw

    @classmethod
    def _version(cls, api_version):
        return cls.API_VERSION if api_version is None else api_version

    @staticmethod
    def _resource_url(resource_id, *segments):
        """Endpoint url of an absolute resource id plus trailing segments."""
        if isinstance(resource_id, ResourceUri):
            resource_id = str(resource_id)
        if StringUtils.is_blank(resource_id) or \
                not strip_leading_slash(resource_id).lower().startswith('subscriptions/'):
            raise ValueError('resource id must be absolute, not %r' % (resource_id,))
        return '/'.join(
            (constants.ARM_ENDPOINT, strip_leading_slash(resource_id).rstrip('/')) + segments)

    @classmethod
    def _get(cls, bearer_token, url, api_version=None, **kw):
        return RestApiClient.get(bearer_token, url, cls._version(api_version), **cls._kw(kw))

    @classmethod
    def _list(cls, bearer_token, url, api_version=None, **kw):
        return RestApiClient.get_with_continuations(
            bearer_token, url, cls._version(api_version), **cls._kw(kw))

    @classmethod
    def _post(cls, bearer_token, url, api_version=None, **kw):
        return RestApiClient.post(bearer_token, url, cls._version(api_version), **cls._kw(kw))

    @classmethod
    def _put(cls, bearer_token, url, api_version=None, **kw):
        return RestApiClient.put(bearer_token, url, cls._version(api_version), **cls._kw(kw))

    @classmethod
    def _delete(cls, bearer_token, url, api_version=None, **kw):
        return RestApiClient.delete(bearer_token, url, cls._version(api_version), **cls._kw(kw))

    @classmethod
    def _head(cls, bearer_token, url, api_version=None, **kw):
        return RestApiClient.head(bearer_token, url, cls._version(api_version), **cls._kw(kw))

    @classmethod
    def _succeeded(cls, response, operation):
        """True on an expected status, otherwise log the failure."""
        if response.is_expected_success:
            return True
        if response.was_exception:
            log.warning('%s.%s error:%s', cls.__name__, operation, response.exception_message)
        else:
            error = response.error or {}
            log.warning('%s.%s status:%s code:%s message:%s', cls.__name__, operation,
                        response.http_status, error.get('code'), error.get('message'))
        return False

    @classmethod
    def _model(cls, response, model, operation):
        if not cls._succeeded(response, operation) or StringUtils.is_blank(response.body):
            return None
        return cls._loads(response, model, operation)

    @classmethod
    def _loads(cls, response, model, operation):
        """Deserialize a successful body, None when it is not the expected json."""
        try:
            return model.loads(response.body)
        except (ValueError, DeserializationError) as e:
            log.warning('%s.%s status:%s unreadable body error:%s', cls.__name__, operation,
                        response.http_status, e)
            return None

    @classmethod
    def _models(cls, response, model, operation):
        if not cls._succeeded(response, operation):
            return []
        if response.values is not None:
            return model.deserialize_list(response.values)
        data = response.json() or {}
        return model.deserialize_list(data.get('value'))

    @classmethod
    def _json(cls, response, operation):
        if not cls._succeeded(response, operation):
            return None
        return response.json()
