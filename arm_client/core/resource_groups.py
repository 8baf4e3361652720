# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import logging

from arm_client import constants
from arm_client.client import ArmClient
from arm_client.core.models import ExportTemplateOptions, ResourceGroup
from arm_client.utils import require, to_subscription

log = logging.getLogger('arm_client.core.resource_groups')


class ResourceGroupClient(ArmClient):

    API_VERSION = '2019-06-01'

    @staticmethod
    def _url(subscription, resource_group_name=None):
        url = '%s/subscriptions/%s/resourcegroups' % (constants.ARM_ENDPOINT, subscription)
        if resource_group_name is not None:
            url = '%s/%s' % (url, resource_group_name)
        return url

    @classmethod
    def list(cls, bearer_token, subscription):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(bearer_token, cls._url(subscription), codes=(200,))
        return cls._models(response, ResourceGroup, 'list')

    @classmethod
    def get(cls, bearer_token, subscription, resource_group_name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        response = cls._get(
            bearer_token, cls._url(subscription, resource_group_name), codes=(200,))
        return cls._model(response, ResourceGroup, 'get')

    @classmethod
    def exists(cls, bearer_token, subscription, resource_group_name):
        """True or False, None when the check itself failed."""
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        response = cls._head(
            bearer_token, cls._url(subscription, resource_group_name), codes=(204, 404))
        if not cls._succeeded(response, 'exists'):
            return None
        return response.http_status == 204

    @classmethod
    def create(cls, bearer_token, subscription, resource_group_name, location, tags=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        require(location, 'location')
        response = cls._put(
            bearer_token, cls._url(subscription, resource_group_name),
            body=ResourceGroup(location=location, tags=tags), codes=(200, 201))
        return cls._model(response, ResourceGroup, 'create')

    @classmethod
    def update_tags(cls, bearer_token, subscription, resource_group_name, tags):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        if not tags:
            raise ValueError('tags is required')
        response = cls._put(
            bearer_token, cls._url(subscription, resource_group_name),
            body={'tags': tags}, codes=(200, 201))
        return cls._model(response, ResourceGroup, 'update_tags')

    @classmethod
    def delete(cls, bearer_token, subscription, resource_group_name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        response = cls._delete(
            bearer_token, cls._url(subscription, resource_group_name), codes=(200, 202))
        return cls._succeeded(response, 'delete')

    @classmethod
    def export_template(cls, bearer_token, subscription, resource_group_name, options=None):
        """The exported template document as json text, or None."""
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        options = options or ExportTemplateOptions()
        response = cls._post(
            bearer_token, '%s/exportTemplate' % cls._url(subscription, resource_group_name),
            body=options.to_request(), codes=(200, 202))
        if not cls._succeeded(response, 'export_template') or not response.body:
            return None
        log.debug('exported template of %s', resource_group_name)
        return response.body
