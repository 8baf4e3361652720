# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client import constants
from arm_client.client import ArmClient
from arm_client.utils import StringUtils, require, to_subscription


class ComputeClient(ArmClient):
    """Clients of one Microsoft.Compute resource type.

    Operations address resources by absolute id. ``resource_id`` builds
    one from its parts.
    """

    RESOURCE_TYPE = None

    @classmethod
    def resource_id(cls, subscription, resource_group_name, name):
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        require(name, 'name')
        return '/subscriptions/%s/resourceGroups/%s/providers/Microsoft.Compute/%s/%s' % (
            subscription, resource_group_name, cls.RESOURCE_TYPE, name)

    @classmethod
    def collection_url(cls, subscription, resource_group_name=None):
        subscription = to_subscription(subscription)
        url = '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, subscription)
        if not StringUtils.is_blank(resource_group_name):
            url += '/resourceGroups/%s' % resource_group_name
        return '%s/providers/Microsoft.Compute/%s' % (url, cls.RESOURCE_TYPE)

    @classmethod
    def _action(cls, bearer_token, resource_id, action, operation, codes=(200, 202), **kw):
        require(bearer_token, 'bearer_token')
        response = cls._post(
            bearer_token, cls._resource_url(resource_id, action), codes=codes, **kw)
        return cls._succeeded(response, operation)

    @classmethod
    def _remove(cls, bearer_token, resource_id, codes=(200, 202, 204)):
        require(bearer_token, 'bearer_token')
        response = cls._delete(bearer_token, cls._resource_url(resource_id), codes=codes)
        return cls._succeeded(response, 'delete')
