# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client import constants
from arm_client.client import ArmClient
from arm_client.core.models import ResourceProvider
from arm_client.utils import require, to_subscription


class ProviderClient(ArmClient):
    """Resource providers, at tenant scope or within a subscription."""

    API_VERSION = '2019-08-01'

    @staticmethod
    def _url(subscription=None, namespace=None):
        url = constants.ARM_ENDPOINT
        if subscription is not None:
            url += '/subscriptions/%s' % to_subscription(subscription)
        url += '/providers'
        if namespace is not None:
            url += '/%s' % namespace
        return url

    @staticmethod
    def _expand(fetch_metadata, fetch_aliases):
        expand = []
        if fetch_metadata:
            expand.append('metadata')
        if fetch_aliases:
            expand.append('resourceTypes/aliases')
        return {'$expand': ','.join(expand)} if expand else None

    @classmethod
    def list(cls, bearer_token, subscription=None, fetch_metadata=False, fetch_aliases=False):
        require(bearer_token, 'bearer_token')
        response = cls._list(
            bearer_token, cls._url(subscription),
            params=cls._expand(fetch_metadata, fetch_aliases), codes=(200,))
        return cls._models(response, ResourceProvider, 'list')

    @classmethod
    def get(cls, bearer_token, namespace, subscription=None, fetch_metadata=False,
            fetch_aliases=False):
        require(bearer_token, 'bearer_token')
        require(namespace, 'namespace')
        response = cls._get(
            bearer_token, cls._url(subscription, namespace),
            params=cls._expand(fetch_metadata, fetch_aliases), codes=(200,))
        return cls._model(response, ResourceProvider, 'get')

    @classmethod
    def register(cls, bearer_token, subscription, namespace):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(namespace, 'namespace')
        response = cls._post(
            bearer_token, '%s/register' % cls._url(subscription, namespace), codes=(200,))
        return cls._succeeded(response, 'register')

    @classmethod
    def unregister(cls, bearer_token, subscription, namespace):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(namespace, 'namespace')
        response = cls._post(
            bearer_token, '%s/unregister' % cls._url(subscription, namespace), codes=(200,))
        return cls._succeeded(response, 'unregister')
