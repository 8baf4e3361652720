# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import logging

from arm_client import constants
from arm_client.appservice.models import (
    AppServicePlan, AppServicePlanProperties, AppServicePlanSku, AppServiceWebApp)
from arm_client.client import ArmClient
from arm_client.models import OSTypeNames, UsageAPIResponseItem, UsageSdkResponseItem
from arm_client.utils import StringUtils, as_utc, require, to_subscription, utcnow

log = logging.getLogger('arm_client.appservice.plans')


class AppServicePlanClient(ArmClient):
    """App Service plans, the server farms that host web apps."""

    API_VERSION = '2019-08-01'

    @staticmethod
    def _plans_url(subscription, resource_group_name=None):
        url = '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, subscription)
        if not StringUtils.is_blank(resource_group_name):
            url += '/resourceGroups/%s' % resource_group_name
        return url + '/providers/Microsoft.Web/serverfarms'

    @classmethod
    def _plan_url(cls, bearer_token, subscription, resource_group_name, plan_name, *segments):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        require(plan_name, 'plan_name')
        return '/'.join(
            ('%s/%s' % (cls._plans_url(subscription, resource_group_name), plan_name),) +
            segments)

    @classmethod
    def get(cls, bearer_token, subscription, resource_group_name, plan_name):
        url = cls._plan_url(bearer_token, subscription, resource_group_name, plan_name)
        return cls._model(cls._get(bearer_token, url, codes=(200,)), AppServicePlan, 'get')

    @classmethod
    def list(cls, bearer_token, subscription, resource_group_name=None, detailed=False):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(
            bearer_token, cls._plans_url(subscription, resource_group_name),
            params={'detailed': StringUtils.bool_string(detailed)}, codes=(200,))
        return cls._models(response, AppServicePlan, 'list')

    @classmethod
    def get_capabilities(cls, bearer_token, subscription, resource_group_name, plan_name):
        """Capability name to value map of the plan."""
        url = cls._plan_url(
            bearer_token, subscription, resource_group_name, plan_name, 'capabilities')
        response = cls._list(bearer_token, url, codes=(200,))
        if not cls._succeeded(response, 'get_capabilities'):
            return {}
        capabilities = {}
        for item in response.values:
            item = item.get('properties', item)
            capabilities[item.get('name')] = item.get('value')
        return capabilities

    @classmethod
    def get_usage(cls, bearer_token, subscription, resource_group_name, plan_name):
        url = cls._plan_url(
            bearer_token, subscription, resource_group_name, plan_name, 'usages')
        response = cls._list(bearer_token, url, codes=(200,))
        return [UsageSdkResponseItem(u) for u in
                cls._models(response, UsageAPIResponseItem, 'get_usage')]

    @classmethod
    def _create(cls, bearer_token, subscription, resource_group_name, plan_name, location,
                operating_system, sku, tags, **properties):
        require(location, 'location')
        if sku is None:
            raise ValueError('sku is required')
        operating_system = OSTypeNames(operating_system)
        url = cls._plan_url(bearer_token, subscription, resource_group_name, plan_name)
        request = AppServicePlan(
            location=location, sku=sku, tags=tags,
            properties=AppServicePlanProperties(
                hyper_v=False, reserved=operating_system == OSTypeNames.LINUX, **properties))
        response = cls._put(bearer_token, url, body=request, codes=(200, 202))
        return cls._model(response, AppServicePlan, 'create')

    @classmethod
    def create_standard_plan(cls, bearer_token, subscription, resource_group_name, plan_name,
                             location, operating_system, sku, tags=None):
        return cls._create(
            bearer_token, subscription, resource_group_name, plan_name, location,
            operating_system, sku, tags, is_spot=False, per_site_scaling=False)

    @classmethod
    def create_elastic_scaling_plan(cls, bearer_token, subscription, resource_group_name,
                                    plan_name, location, operating_system, sku,
                                    maximum_worker_count, per_site_scaling=False, tags=None):
        return cls._create(
            bearer_token, subscription, resource_group_name, plan_name, location,
            operating_system, sku, tags, is_spot=False, per_site_scaling=per_site_scaling,
            maximum_elastic_worker_count=maximum_worker_count)

    @classmethod
    def create_spot_plan(cls, bearer_token, subscription, resource_group_name, plan_name,
                         location, operating_system, sku, maximum_worker_count,
                         spot_expiration_time, per_site_scaling=False, tags=None):
        if spot_expiration_time is None or as_utc(spot_expiration_time) < utcnow():
            raise ValueError('spot_expiration_time must be in the future')
        return cls._create(
            bearer_token, subscription, resource_group_name, plan_name, location,
            operating_system, sku, tags, is_spot=True, per_site_scaling=per_site_scaling,
            maximum_elastic_worker_count=maximum_worker_count,
            spot_expiration_time=spot_expiration_time)

    @classmethod
    def update(cls, bearer_token, subscription, resource_group_name, plan_name, plan):
        if plan is None:
            raise ValueError('plan is required')
        url = cls._plan_url(bearer_token, subscription, resource_group_name, plan_name)
        response = cls._put(bearer_token, url, body=plan, codes=(200, 202))
        return cls._model(response, AppServicePlan, 'update')

    @classmethod
    def delete(cls, bearer_token, subscription, resource_group_name, plan_name):
        url = cls._plan_url(bearer_token, subscription, resource_group_name, plan_name)
        response = cls._delete(bearer_token, url, codes=(200, 204))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'delete')

    @classmethod
    def get_web_apps(cls, bearer_token, subscription, resource_group_name, plan_name):
        url = cls._plan_url(
            bearer_token, subscription, resource_group_name, plan_name, 'sites')
        response = cls._list(bearer_token, url, codes=(200,))
        return cls._models(response, AppServiceWebApp, 'get_web_apps')

    @classmethod
    def reboot_worker(cls, bearer_token, subscription, resource_group_name, plan_name,
                      worker_name):
        require(worker_name, 'worker_name')
        url = cls._plan_url(bearer_token, subscription, resource_group_name, plan_name,
                            'workers', worker_name, 'reboot')
        response = cls._post(bearer_token, url, codes=(204,))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'reboot_worker')

    @classmethod
    def restart_all_web_apps(cls, bearer_token, subscription, resource_group_name, plan_name,
                             force=False):
        url = cls._plan_url(
            bearer_token, subscription, resource_group_name, plan_name, 'restartSites')
        response = cls._post(
            bearer_token, url, params={'softRestart': StringUtils.bool_string(not force)},
            codes=(204,))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'restart_all_web_apps')

    @classmethod
    def get_sku_list(cls, bearer_token, subscription, resource_group_name, plan_name):
        url = cls._plan_url(
            bearer_token, subscription, resource_group_name, plan_name, 'skus')
        response = cls._list(bearer_token, url, codes=(200,))
        return cls._models(response, AppServicePlanSku, 'get_sku_list')
