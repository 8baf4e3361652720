# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Template deployments at tenant, subscription or resource group scope.
"""
import copy
import logging

from arm_client import constants
from arm_client.client import ArmClient
from arm_client.deployments.models import (
    AzureDeploymentTemplate, DeploymentRequest, DeploymentResponse, DeploymentStatusResponse)
from arm_client.utils import StringUtils, require, to_subscription

log = logging.getLogger('arm_client.deployments')

INVALID_ON_ERROR_DEPLOYMENT = 'InvalidOnErrorDeployment'


def deployment_url(subscription, resource_group_name, deployment_name=None):
    """Deployment collection url.

    Tenant scope when subscription is None, subscription scope when
    resource_group_name is blank.
    """
    url = constants.ARM_ENDPOINT
    if subscription is not None:
        url += '/subscriptions/%s' % to_subscription(subscription)
        if not StringUtils.is_blank(resource_group_name):
            url += '/resourceGroups/%s' % resource_group_name
    url += '/providers/Microsoft.Resources/deployments'
    if deployment_name:
        url += '/%s' % deployment_name
    return url


class DeploymentClient(ArmClient):

    API_VERSION = '2019-10-01'

    @classmethod
    def create_deployment(cls, bearer_token, subscription, resource_group_name,
                          deployment_name, properties, location=None):
        """Start a deployment.

        Deployments outside a resource group keep their data in
        ``location``. A request whose fallback deployment does not exist
        is sent again without the fallback.
        """
        require(bearer_token, 'bearer_token')
        require(deployment_name, 'deployment_name')
        if properties is None:
            raise ValueError('properties is required')
        if subscription is None:
            resource_group_name = None
        if StringUtils.is_blank(resource_group_name) and StringUtils.is_blank(location):
            raise ValueError('location is required outside of a resource group')

        scoped = not StringUtils.is_blank(resource_group_name)
        request = DeploymentRequest(properties=properties, location=None if scoped else location)
        url = deployment_url(subscription, resource_group_name, deployment_name)
        response = cls._put(bearer_token, url, body=request, codes=(200, 201))
        if response.http_status == 400 and INVALID_ON_ERROR_DEPLOYMENT in (response.body or '') \
                and properties.on_error_deployment is not None:
            log.info('deployment %s has no usable on error deployment, retrying without it',
                     deployment_name)
            properties = copy.copy(properties)
            properties.on_error_deployment = None
            request = DeploymentRequest(properties=properties, location=request.location)
            response = cls._put(bearer_token, url, body=request, codes=(200, 201))
        return cls._model(response, DeploymentResponse, 'create_deployment')

    @classmethod
    def get_status(cls, bearer_token, subscription, resource_group_name, deployment_name):
        require(bearer_token, 'bearer_token')
        require(deployment_name, 'deployment_name')
        if subscription is None:
            resource_group_name = None
        response = cls._get(
            bearer_token, deployment_url(subscription, resource_group_name, deployment_name),
            codes=(200,))
        return cls._model(response, DeploymentStatusResponse, 'get_status')

    @classmethod
    def get_status_list(cls, bearer_token, subscription, resource_group_name=None,
                        odata_filter=None, top=None):
        require(bearer_token, 'bearer_token')
        if subscription is None:
            resource_group_name = None
        if top is not None and top <= 0:
            raise ValueError('top must be positive')
        response = cls._list(
            bearer_token, deployment_url(subscription, resource_group_name),
            params={'$filter': odata_filter or None, '$top': top}, codes=(200,))
        return cls._models(response, DeploymentStatusResponse, 'get_status_list')

    @classmethod
    def export_template(cls, bearer_token, subscription, resource_group_name, deployment_name):
        require(bearer_token, 'bearer_token')
        require(deployment_name, 'deployment_name')
        if subscription is None:
            resource_group_name = None
        response = cls._post(
            bearer_token,
            deployment_url(subscription, resource_group_name, deployment_name) +
            '/exportTemplate',
            codes=(200,))
        data = cls._json(response, 'export_template')
        if not isinstance(data, dict):
            return None
        return AzureDeploymentTemplate.deserialize(data.get('template', data))
