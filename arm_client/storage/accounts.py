# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import logging
import time

from arm_client import constants
from arm_client.client import ArmClient
from arm_client.storage.models import (
    BlobRestoreProgress, BlobRestoreRequest, BlobRestoreStatus, SASServiceTokenResponse,
    SASTokenResponse, StorageAccount, StorageAccountCreateRequest,
    StorageAccountCreateRequestProperties, StorageAccountKeyResponse, StorageAccountKind,
    StorageAccountSku, StorageAccountSkuNames, StorageAccountSkuTiers,
    StorageNameAvailabilityRequest, StorageNameAvailabilityResponse)
from arm_client.utils import StringUtils, require, to_subscription

log = logging.getLogger('arm_client.storage.accounts')


class StorageServicesClient(ArmClient):

    API_VERSION = '2019-06-01'

    @staticmethod
    def _accounts_url(subscription, resource_group_name=None):
        url = '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, subscription)
        if not StringUtils.is_blank(resource_group_name):
            url += '/resourceGroups/%s' % resource_group_name
        return url + '/providers/Microsoft.Storage/storageAccounts'

    @classmethod
    def _account_url(cls, bearer_token, subscription, resource_group_name, account_name,
                     *segments):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        require(account_name, 'account_name')
        return '/'.join(
            ('%s/%s' % (cls._accounts_url(subscription, resource_group_name), account_name),) +
            segments)

    @classmethod
    def is_name_available(cls, bearer_token, subscription, name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(name, 'name')
        response = cls._post(
            bearer_token,
            '%s/subscriptions/%s/providers/Microsoft.Storage/checkNameAvailability' % (
                constants.ARM_ENDPOINT, subscription),
            body=StorageNameAvailabilityRequest(name=name), codes=(200,))
        result = cls._model(response, StorageNameAvailabilityResponse, 'is_name_available')
        return bool(result and result.name_available)

    @classmethod
    def create(cls, bearer_token, subscription, resource_group_name, account_name, location,
               kind=StorageAccountKind.DEFAULT, sku=StorageAccountSkuNames.DEFAULT,
               properties=None, tags=None,
               poll_attempts=constants.STORAGE_CREATE_POLL_ATTEMPTS,
               poll_delay=constants.STORAGE_CREATE_POLL_DELAY):
        """Create an account, waiting for ARM to finish provisioning it.

        An accepted (202) request is polled at its ``Location`` until the
        account is returned, at most ``poll_attempts`` times.
        """
        url = cls._account_url(bearer_token, subscription, resource_group_name, account_name)
        require(location, 'location')
        sku = StorageAccountSkuNames(sku)
        tier = StorageAccountSkuTiers.PREMIUM if sku.value.startswith('Premium') \
            else StorageAccountSkuTiers.STANDARD
        request = StorageAccountCreateRequest(
            kind=StorageAccountKind(kind), location=location, tags=tags,
            sku=StorageAccountSku(name=sku, tier=tier),
            properties=properties or StorageAccountCreateRequestProperties())
        response = cls._put(bearer_token, url, body=request, codes=(200, 202))
        if not cls._succeeded(response, 'create'):
            return None

        poll_url = response.headers.get('Location')
        if response.http_status == 202 and not StringUtils.is_blank(poll_url):
            for attempt in range(poll_attempts):
                time.sleep(poll_delay)
                response = cls._get(bearer_token, poll_url, api_version='', codes=(200, 202))
                if not cls._succeeded(response, 'create'):
                    return None
                if response.http_status == 200 and not StringUtils.is_blank(response.body):
                    break
                log.debug('storage account %s still provisioning, attempt:%d',
                          account_name, attempt + 1)
            else:
                log.warning('storage account %s not provisioned after %d polls',
                            account_name, poll_attempts)
                return None
        return cls._loads(response, StorageAccount, 'create')

    @classmethod
    def delete(cls, bearer_token, subscription, resource_group_name, account_name):
        url = cls._account_url(bearer_token, subscription, resource_group_name, account_name)
        response = cls._delete(bearer_token, url, codes=(200, 204))
        if not cls._succeeded(response, 'delete'):
            return None
        return True

    @classmethod
    def failover(cls, bearer_token, subscription, resource_group_name, account_name):
        """Fail over to the secondary region of a geo replicated account."""
        url = cls._account_url(
            bearer_token, subscription, resource_group_name, account_name, 'failover')
        response = cls._post(bearer_token, url, codes=(200, 202))
        if not cls._succeeded(response, 'failover'):
            return None
        return True

    @classmethod
    def get(cls, bearer_token, subscription, resource_group_name, account_name):
        url = cls._account_url(bearer_token, subscription, resource_group_name, account_name)
        return cls._model(cls._get(bearer_token, url, codes=(200,)), StorageAccount, 'get')

    @classmethod
    def list(cls, bearer_token, subscription, resource_group_name=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(
            bearer_token, cls._accounts_url(subscription, resource_group_name), codes=(200,))
        return cls._models(response, StorageAccount, 'list')

    @classmethod
    def get_sas_token(cls, bearer_token, subscription, resource_group_name, account_name,
                      request):
        if request is None:
            raise ValueError('request is required')
        url = cls._account_url(
            bearer_token, subscription, resource_group_name, account_name, 'ListAccountSas')
        result = cls._model(
            cls._post(bearer_token, url, body=request, codes=(200,)),
            SASTokenResponse, 'get_sas_token')
        return result and result.account_sas_token

    @classmethod
    def get_sas_service_token(cls, bearer_token, subscription, resource_group_name,
                              account_name, request):
        if request is None:
            raise ValueError('request is required')
        url = cls._account_url(
            bearer_token, subscription, resource_group_name, account_name, 'ListServiceSas')
        result = cls._model(
            cls._post(bearer_token, url, body=request, codes=(200,)),
            SASServiceTokenResponse, 'get_sas_service_token')
        return result and result.service_sas_token

    @classmethod
    def list_keys(cls, bearer_token, subscription, resource_group_name, account_name):
        url = cls._account_url(
            bearer_token, subscription, resource_group_name, account_name, 'listKeys')
        result = cls._model(
            cls._post(bearer_token, url, codes=(200,)), StorageAccountKeyResponse, 'list_keys')
        return (result.keys or []) if result else []

    @classmethod
    def get_key(cls, bearer_token, subscription, resource_group_name, account_name, key_name):
        """Value of one of the account keys, eg. ``key1``."""
        require(key_name, 'key_name')
        for key in cls.list_keys(bearer_token, subscription, resource_group_name, account_name):
            if key.key_name == key_name:
                return key.value
        return None

    @classmethod
    def regenerate_key(cls, bearer_token, subscription, resource_group_name, account_name,
                       key_name):
        """Regenerate a key, returning its new value."""
        require(key_name, 'key_name')
        url = cls._account_url(
            bearer_token, subscription, resource_group_name, account_name, 'regenerateKey')
        result = cls._model(
            cls._post(bearer_token, url, body={'keyName': key_name}, codes=(200,)),
            StorageAccountKeyResponse, 'regenerate_key')
        return result and result.get_key(key_name)

    @classmethod
    def restore_blobs(cls, bearer_token, subscription, resource_group_name, account_name,
                      time_to_restore, blob_ranges):
        """Restore blob ranges to a point in time.

        True unless the restore failed, None when the request did not go
        through.
        """
        require(time_to_restore, 'time_to_restore')
        blob_ranges = list(blob_ranges or ())
        if not blob_ranges:
            raise ValueError('blob_ranges is required')
        url = cls._account_url(
            bearer_token, subscription, resource_group_name, account_name, 'restoreBlobRanges')
        request = BlobRestoreRequest(time_to_restore=time_to_restore, blob_ranges=blob_ranges)
        status = cls._model(
            cls._post(bearer_token, url, body=request, codes=(200, 202)),
            BlobRestoreStatus, 'restore_blobs')
        if status is None:
            return None
        return status.status != BlobRestoreProgress.FAILED
