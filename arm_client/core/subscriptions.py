# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client import constants
from arm_client.client import ArmClient
from arm_client.core.models import Subscription, SubscriptionLocation
from arm_client.utils import require, to_subscription


class SubscriptionClient(ArmClient):

    API_VERSION = '2019-11-01'
    # cancel, enable and rename only exist on the preview surface
    MANAGEMENT_API_VERSION = '2019-03-01-preview'

    @classmethod
    def list(cls, bearer_token):
        require(bearer_token, 'bearer_token')
        response = cls._list(
            bearer_token, '%s/subscriptions' % constants.ARM_ENDPOINT, codes=(200,))
        return cls._models(response, Subscription, 'list')

    @classmethod
    def get(cls, bearer_token, subscription):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._get(
            bearer_token, '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, subscription),
            codes=(200,))
        return cls._model(response, Subscription, 'get')

    @classmethod
    def list_locations(cls, bearer_token, subscription):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(
            bearer_token,
            '%s/subscriptions/%s/locations' % (constants.ARM_ENDPOINT, subscription),
            codes=(200,))
        return cls._models(response, SubscriptionLocation, 'list_locations')

    @classmethod
    def _manage(cls, bearer_token, subscription, action, body=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._post(
            bearer_token,
            '%s/subscriptions/%s/providers/Microsoft.Subscription/%s' % (
                constants.ARM_ENDPOINT, subscription, action),
            api_version=cls.MANAGEMENT_API_VERSION, body=body, codes=(200,))
        response.raise_for_status()

    @classmethod
    def cancel(cls, bearer_token, subscription):
        cls._manage(bearer_token, subscription, 'cancel')

    @classmethod
    def enable(cls, bearer_token, subscription):
        cls._manage(bearer_token, subscription, 'enable')

    @classmethod
    def rename(cls, bearer_token, subscription, new_name):
        require(new_name, 'new_name')
        cls._manage(bearer_token, subscription, 'rename', body={'SubscriptionName': new_name})
