# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import logging

from arm_client import constants
from arm_client.appservice.models import AppServiceWebApp, DeletedWebApp
from arm_client.client import ArmClient
from arm_client.resource_uri import ResourceUri, ResourceUriCompareLevel
from arm_client.utils import StringUtils, require, to_subscription

log = logging.getLogger('arm_client.appservice.webapps')


def require_web_app(app_uri):
    if not isinstance(app_uri, ResourceUri) or not app_uri.is_valid or \
            not app_uri.is_(ResourceUriCompareLevel.PROVIDER, 'Microsoft.Web') or \
            not app_uri.is_(ResourceUriCompareLevel.TYPE, 'sites'):
        raise ValueError('app_uri must be the ResourceUri of a Microsoft.Web/sites resource')
    return app_uri


class AppServiceWebAppClient(ArmClient):

    API_VERSION = '2019-08-01'

    @staticmethod
    def _app_url(app_uri, slot_name=None, action=None):
        require_web_app(app_uri)
        segments = []
        if not StringUtils.is_blank(slot_name):
            segments.extend(('slots', slot_name))
        if action:
            segments.append(action)
        return app_uri.to_absolute_arm_endpoint_uri('/'.join(segments) or None)

    @classmethod
    def create_or_update(cls, bearer_token, subscription, resource_group_name, app):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        if app is None or StringUtils.is_blank(app.name):
            raise ValueError('app with a name is required')
        url = '%s/subscriptions/%s/resourceGroups/%s/providers/Microsoft.Web/sites/%s' % (
            constants.ARM_ENDPOINT, subscription, resource_group_name, app.name)
        response = cls._put(bearer_token, url, body=app, codes=(200, 202))
        return cls._model(response, AppServiceWebApp, 'create_or_update')

    @classmethod
    def delete(cls, bearer_token, app_uri, delete_metrics=False, delete_empty_plan=False):
        require(bearer_token, 'bearer_token')
        response = cls._delete(
            bearer_token, cls._app_url(app_uri),
            params={'deleteMetrics': StringUtils.bool_string(delete_metrics),
                    'deleteEmptyServerFarm': StringUtils.bool_string(delete_empty_plan)},
            codes=(200, 204, 404))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'delete')

    @classmethod
    def get(cls, bearer_token, app_uri, slot_name=None):
        """The app or one of its slots, None when it does not exist."""
        require(bearer_token, 'bearer_token')
        response = cls._get(bearer_token, cls._app_url(app_uri, slot_name), codes=(200, 404))
        if response.http_status == 404:
            return None
        return cls._model(response, AppServiceWebApp, 'get')

    @classmethod
    def list(cls, bearer_token, subscription, resource_group_name=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        url = '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, subscription)
        if not StringUtils.is_blank(resource_group_name):
            url += '/resourceGroups/%s' % resource_group_name
        response = cls._list(bearer_token, url + '/providers/Microsoft.Web/sites', codes=(200,))
        return cls._models(response, AppServiceWebApp, 'list')

    @classmethod
    def _action(cls, bearer_token, app_uri, slot_name, action, params=None):
        require(bearer_token, 'bearer_token')
        response = cls._post(
            bearer_token, cls._app_url(app_uri, slot_name, action), params=params,
            codes=(200,))
        if response.was_exception:
            return None
        return cls._succeeded(response, action)

    @classmethod
    def restart(cls, bearer_token, app_uri, slot_name=None, soft_restart=True,
                synchronous=False):
        return cls._action(
            bearer_token, app_uri, slot_name, 'restart',
            params={'softRestart': StringUtils.bool_string(soft_restart),
                    'synchronous': StringUtils.bool_string(synchronous)})

    @classmethod
    def start(cls, bearer_token, app_uri, slot_name=None):
        return cls._action(bearer_token, app_uri, slot_name, 'start')

    @classmethod
    def stop(cls, bearer_token, app_uri, slot_name=None):
        return cls._action(bearer_token, app_uri, slot_name, 'stop')


class DeletedWebAppsClient(ArmClient):

    API_VERSION = '2019-08-01'

    @staticmethod
    def _url(subscription, location=None):
        url = '%s/subscriptions/%s/providers/Microsoft.Web' % (
            constants.ARM_ENDPOINT, subscription)
        if not StringUtils.is_blank(location):
            url += '/locations/%s' % location
        return url + '/deletedSites'

    @classmethod
    def get_deleted_web_apps(cls, bearer_token, subscription, location=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(bearer_token, cls._url(subscription, location), codes=(200,))
        return cls._models(response, DeletedWebApp, 'get_deleted_web_apps')

    @classmethod
    def get_deleted_web_app(cls, bearer_token, subscription, location, site_id):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(location, 'location')
        if not isinstance(site_id, int):
            raise TypeError('site_id must be an int')
        if site_id < 0:
            raise ValueError('site_id must not be negative')
        response = cls._get(
            bearer_token, '%s/%d' % (cls._url(subscription, location), site_id), codes=(200,))
        return cls._model(response, DeletedWebApp, 'get_deleted_web_app')
