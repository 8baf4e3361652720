# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client import constants
from arm_client.client import ArmClient
from arm_client.core.models import Tag
from arm_client.utils import require, to_subscription

MAX_TAG_NAME_LENGTH = 512
RESERVED_TAG_PREFIXES = ('microsoft', 'azure', 'windows')


def validate_tag_name(name):
    require(name, 'name')
    if len(name) > MAX_TAG_NAME_LENGTH or name.lower().startswith(RESERVED_TAG_PREFIXES):
        raise ValueError(
            "tag name must be <= %d characters and not start with 'microsoft', "
            "'azure' or 'windows'." % MAX_TAG_NAME_LENGTH)
    return name


class TagsClient(ArmClient):

    API_VERSION = '2019-08-01'

    @staticmethod
    def _url(subscription, *segments):
        return '/'.join(
            ('%s/subscriptions/%s/tagNames' % (constants.ARM_ENDPOINT, subscription),) +
            segments)

    @classmethod
    def create(cls, bearer_token, subscription, name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        validate_tag_name(name)
        response = cls._put(bearer_token, cls._url(subscription, name), codes=(200, 201))
        return cls._model(response, Tag, 'create')

    @classmethod
    def set_value(cls, bearer_token, subscription, name, value):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(name, 'name')
        require(value, 'value')
        response = cls._put(
            bearer_token, cls._url(subscription, name, value), codes=(200, 201))
        return cls._model(response, Tag, 'set_value')

    @classmethod
    def delete(cls, bearer_token, subscription, name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(name, 'name')
        response = cls._delete(bearer_token, cls._url(subscription, name), codes=(200, 204))
        return cls._succeeded(response, 'delete')

    @classmethod
    def list(cls, bearer_token, subscription):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(bearer_token, cls._url(subscription), codes=(200,))
        return cls._models(response, Tag, 'list')
