# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from .arm_common import BaseTest, RESOURCE_GROUP_URL, SUBSCRIPTION_URL, arm_error, \
    mock_response
from arm_client.storage.accounts import StorageServicesClient
from arm_client.storage.models import (
    BlobRestoreRange, SASTokenRequest, StorageAccountKind, StorageAccountSkuNames,
    StorageProvisioningState)

ACCOUNT_URL = RESOURCE_GROUP_URL + '/providers/Microsoft.Storage/storageAccounts/store1'
POLL_URL = 'https://management.azure.com/subscriptions/x/operations/op1'
KEYS = {'keys': [
    {'keyName': 'key1', 'value': 'secret1', 'permissions': 'FULL'},
    {'keyName': 'key2', 'value': 'secret2', 'permissions': 'FULL'}]}


class StorageServicesClientTest(BaseTest):

    def test_is_name_available(self):
        self.patch_request(mock_response(200, {'nameAvailable': True}))
        self.assertTrue(
            StorageServicesClient.is_name_available(self.token, self.subscription, 'store1'))
        method, url, body = self.sent()
        self.assertEqual(method, 'POST')
        self.assertEqual(
            url, SUBSCRIPTION_URL + '/providers/Microsoft.Storage/checkNameAvailability'
                                    '?api-version=2019-06-01')
        self.assertEqual(body, {'name': 'store1', 'type': 'Microsoft.Storage/storageAccounts'})

    def test_is_name_available_failure(self):
        self.patch_request(mock_response(500, arm_error('InternalError')))
        self.assertFalse(
            StorageServicesClient.is_name_available(self.token, self.subscription, 'store1'))

    def test_create(self):
        self.patch_request(mock_response(200, {
            'name': 'store1', 'kind': 'BlobStorage',
            'properties': {'provisioningState': 'Succeeded'}}))
        account = StorageServicesClient.create(
            self.token, self.subscription, 'test_rg', 'store1', 'westus',
            kind=StorageAccountKind.BLOB_STORAGE, sku=StorageAccountSkuNames.PREMIUM_LRS)
        self.assertEqual(account.kind, StorageAccountKind.BLOB_STORAGE)
        self.assertEqual(account.properties.provisioning_state,
                         StorageProvisioningState.SUCCEEDED)
        method, url, body = self.sent()
        self.assertEqual((method, url), ('PUT', ACCOUNT_URL + '?api-version=2019-06-01'))
        self.assertEqual(body['sku'], {'name': 'Premium_LRS', 'tier': 'Premium'})
        self.assertEqual(body['kind'], 'BlobStorage')
        self.assertEqual(body['location'], 'westus')

    def test_create_polls_until_provisioned(self):
        self.patch_request(
            mock_response(202, headers={'Location': POLL_URL}),
            mock_response(202),
            mock_response(200, {'name': 'store1', 'sku': {'name': 'Standard_LRS'}}))
        account = StorageServicesClient.create(
            self.token, self.subscription, 'test_rg', 'store1', 'westus', poll_delay=0)
        self.assertEqual(account.name, 'store1')
        self.assertEqual(self.request.call_count, 3)
        self.assertSent('GET', POLL_URL)
        self.assertEqual(self.sent(0)[2]['sku'], {'name': 'Standard_LRS', 'tier': 'Standard'})

    def test_create_poll_exhausted(self):
        self.patch_request(
            mock_response(202, headers={'Location': POLL_URL}),
            mock_response(202),
            mock_response(202))
        with self.assertLogs('arm_client.storage.accounts', level='WARNING'):
            self.assertIsNone(StorageServicesClient.create(
                self.token, self.subscription, 'test_rg', 'store1', 'westus',
                poll_attempts=2, poll_delay=0))
        self.assertEqual(self.request.call_count, 3)

    def test_create_rejected(self):
        self.patch_request(mock_response(409, arm_error('StorageAccountAlreadyTaken')))
        self.assertIsNone(StorageServicesClient.create(
            self.token, self.subscription, 'test_rg', 'store1', 'westus'))

    def test_create_unreadable_body(self):
        self.patch_request(mock_response(200, '<html>maintenance</html>'))
        with self.assertLogs('arm_client.client', level='WARNING'):
            self.assertIsNone(StorageServicesClient.create(
                self.token, self.subscription, 'test_rg', 'store1', 'westus'))

    def test_create_requires_location(self):
        with self.assertRaises(ValueError):
            StorageServicesClient.create(
                self.token, self.subscription, 'test_rg', 'store1', '')

    def test_list_keys(self):
        self.patch_request(mock_response(200, KEYS))
        keys = StorageServicesClient.list_keys(
            self.token, self.subscription, 'test_rg', 'store1')
        self.assertEqual([k.key_name for k in keys], ['key1', 'key2'])
        self.assertSent('POST', ACCOUNT_URL + '/listKeys?api-version=2019-06-01')

    def test_get_key(self):
        self.patch_request(mock_response(200, KEYS), mock_response(200, KEYS))
        self.assertEqual(StorageServicesClient.get_key(
            self.token, self.subscription, 'test_rg', 'store1', 'key2'), 'secret2')
        self.assertIsNone(StorageServicesClient.get_key(
            self.token, self.subscription, 'test_rg', 'store1', 'key3'))

    def test_regenerate_key(self):
        self.patch_request(mock_response(200, KEYS))
        self.assertEqual(StorageServicesClient.regenerate_key(
            self.token, self.subscription, 'test_rg', 'store1', 'key1'), 'secret1')
        method, url, body = self.sent()
        self.assertEqual(
            (method, url), ('POST', ACCOUNT_URL + '/regenerateKey?api-version=2019-06-01'))
        self.assertEqual(body, {'keyName': 'key1'})

    def test_get_sas_token(self):
        self.patch_request(mock_response(200, {'accountSasToken': 'sv=2019&sig=1'}))
        token = StorageServicesClient.get_sas_token(
            self.token, self.subscription, 'test_rg', 'store1',
            SASTokenRequest(signed_services='b', signed_permission='r',
                            signed_resource_types='o'))
        self.assertEqual(token, 'sv=2019&sig=1')
        self.assertEqual(self.sent()[2], {
            'signedServices': 'b', 'signedPermission': 'r', 'signedResourceTypes': 'o'})

    def test_failover(self):
        self.patch_request(mock_response(202))
        self.assertTrue(StorageServicesClient.failover(
            self.token, self.subscription, 'test_rg', 'store1'))
        self.assertSent('POST', ACCOUNT_URL + '/failover?api-version=2019-06-01')

    def test_delete(self):
        self.patch_request(mock_response(204), mock_response(404, arm_error('NotFound')))
        self.assertTrue(StorageServicesClient.delete(
            self.token, self.subscription, 'test_rg', 'store1'))
        self.assertIsNone(StorageServicesClient.delete(
            self.token, self.subscription, 'test_rg', 'store1'))

    def test_restore_blobs(self):
        self.patch_request(
            mock_response(202, {'status': 'InProgress', 'restoreId': 'r1'}),
            mock_response(200, {'status': 'Failed', 'failureReason': 'oops'}))
        ranges = [BlobRestoreRange(start_range='container/a', end_range='container/b')]
        self.assertTrue(StorageServicesClient.restore_blobs(
            self.token, self.subscription, 'test_rg', 'store1', '2020-01-01T00:00:00Z', ranges))
        method, url, body = self.sent(0)
        self.assertEqual(
            (method, url), ('POST', ACCOUNT_URL + '/restoreBlobRanges?api-version=2019-06-01'))
        self.assertEqual(body, {
            'timeToRestore': '2020-01-01T00:00:00Z',
            'blobRanges': [{'startRange': 'container/a', 'endRange': 'container/b'}]})
        self.assertFalse(StorageServicesClient.restore_blobs(
            self.token, self.subscription, 'test_rg', 'store1', '2020-01-01T00:00:00Z', ranges))

    def test_restore_blobs_requires_ranges(self):
        with self.assertRaises(ValueError):
            StorageServicesClient.restore_blobs(
                self.token, self.subscription, 'test_rg', 'store1', '2020-01-01T00:00:00Z', [])

    def test_list(self):
        self.patch_request(mock_response(200, {'value': [{'name': 'store1'}]}))
        accounts = StorageServicesClient.list(self.token, self.subscription, 'test_rg')
        self.assertEqual(accounts[0].name, 'store1')
        self.assertSent(
            'GET', RESOURCE_GROUP_URL + '/providers/Microsoft.Storage/storageAccounts'
                                        '?api-version=2019-06-01')
