# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import logging

from arm_client import constants
from arm_client.client import ArmClient
from arm_client.core.models import GenericResource, ResourceMoveRequest
from arm_client.resource_uri import ResourceUri, ResourceUriCompareLevel
from arm_client.utils import StringUtils, require, strip_leading_slash, to_subscription

log = logging.getLogger('arm_client.core.generic_resources')


def require_uri(resource_uri, name='resource_uri'):
    if not isinstance(resource_uri, ResourceUri) or not resource_uri.is_valid:
        raise ValueError('%s must be a valid ResourceUri' % name)
    return resource_uri


class GenericResourceClient(ArmClient):
    """Any ARM resource addressed by its id."""

    API_VERSION = '2019-08-01'

    @classmethod
    def exists(cls, bearer_token, resource_uri):
        require(bearer_token, 'bearer_token')
        require_uri(resource_uri)
        response = cls._head(
            bearer_token, resource_uri.to_absolute_arm_endpoint_uri(), codes=(204, 404))
        if not cls._succeeded(response, 'exists'):
            return None
        return response.http_status == 204

    @classmethod
    def delete(cls, bearer_token, resource_uri):
        require(bearer_token, 'bearer_token')
        require_uri(resource_uri)
        response = cls._delete(
            bearer_token, resource_uri.to_absolute_arm_endpoint_uri(), codes=(200, 202, 204))
        return cls._succeeded(response, 'delete')

    @classmethod
    def create_or_update(cls, bearer_token, resource):
        """Put the resource at its id. The input is returned unchanged on failure."""
        require(bearer_token, 'bearer_token')
        if resource is None or StringUtils.is_blank(resource.id):
            raise ValueError('resource id must be populated')
        response = cls._put(
            bearer_token, '%s/%s' % (constants.ARM_ENDPOINT, strip_leading_slash(resource.id)),
            body=resource, codes=(200, 201, 202))
        result = cls._model(response, GenericResource, 'create_or_update')
        return resource if result is None else result

    @classmethod
    def get(cls, bearer_token, resource_uri):
        require(bearer_token, 'bearer_token')
        require_uri(resource_uri)
        response = cls._get(
            bearer_token, resource_uri.to_absolute_arm_endpoint_uri(), codes=(200,))
        return cls._model(response, GenericResource, 'get')

    @classmethod
    def list(cls, bearer_token, subscription, resource_group_name=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        url = '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, subscription)
        if not StringUtils.is_blank(resource_group_name):
            url += '/resourceGroups/%s' % resource_group_name
        response = cls._list(bearer_token, url + '/resources', codes=(200,))
        return cls._models(response, GenericResource, 'list')

    @classmethod
    def move(cls, bearer_token, resources, target_resource_group, only_validate=True):
        """Move resources of one group into another, or only validate the move.

        :param resources: resources with ids, all from the same resource group
        :param target_resource_group: the destination group, its id must be set
        """
        require(bearer_token, 'bearer_token')
        resources = list(resources or ())
        if not resources:
            raise ValueError('resources is required')
        if target_resource_group is None or StringUtils.is_blank(target_resource_group.id):
            raise ValueError('target_resource_group is not valid')

        source = None
        for resource in resources:
            uri = ResourceUri.parse(resource.id)
            if source is None:
                source = ResourceUri(uri.subscription, uri.resource_group_name)
            elif not source.compare(
                    uri, ResourceUriCompareLevel.SUBSCRIPTION |
                    ResourceUriCompareLevel.RESOURCE_GROUP):
                raise ValueError('All resources must belong to the same resource group.')
        if not source.is_valid or StringUtils.is_blank(source.resource_group_name):
            raise ValueError('resource ids do not name a resource group')

        endpoint = 'validateMoveResources' if only_validate else 'moveResources'
        request = ResourceMoveRequest(
            target_resource_group=target_resource_group.id,
            resources=[r.id for r in resources])
        log.debug('%s %d resources from %s', endpoint, len(resources), source)
        response = cls._post(
            bearer_token, source.to_absolute_arm_endpoint_uri(endpoint),
            body=request, codes=(202, 204))
        return cls._succeeded(response, 'move')
