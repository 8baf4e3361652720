# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import datetime

from .arm_common import BaseTest, RESOURCE_GROUP_URL, SUBSCRIPTION_URL, arm_error, \
    mock_response, resource_id
from arm_client.compute.availability_sets import AvailabilitySetClient
from arm_client.compute.disks import (
    DiskEncryptionSetClient, DisksClient, VirtualMachineSnapshotsClient)
from arm_client.compute.misc import ComputeMiscClient, ResourceSkusClient
from arm_client.compute.models import (
    AccessLevel, AvailabilitySet, ComputeAnalyticsLogGrouping, ComputeAnalyticsLogType,
    DiskCreationMetadata, DiskCreationOptions, DiskProperties, VMCommandTypes,
    VMExtensionProperties, VMSnapshotProperties)
from arm_client.compute.virtual_machines import (
    VirtualMachineClient, VirtualMachineExtensionsClient, VirtualMachineSizeClient)

COMPUTE_URL = RESOURCE_GROUP_URL + '/providers/Microsoft.Compute'
VM_ID = resource_id('Microsoft.Compute/virtualMachines', 'vm1')
VM_URL = 'https://management.azure.com' + VM_ID
DISK_ID = resource_id('Microsoft.Compute/disks', 'disk1')
DISK_URL = 'https://management.azure.com' + DISK_ID


class ComputeClientTest(BaseTest):

    def test_resource_id(self):
        self.assertEqual(
            VirtualMachineClient.resource_id(self.subscription, 'test_rg', 'vm1'), VM_ID)
        with self.assertRaises(ValueError):
            VirtualMachineClient.resource_id(self.subscription, '', 'vm1')

    def test_collection_url(self):
        self.assertEqual(
            DisksClient.collection_url(self.subscription),
            SUBSCRIPTION_URL + '/providers/Microsoft.Compute/disks')
        self.assertEqual(
            DisksClient.collection_url(self.subscription, 'test_rg'),
            COMPUTE_URL + '/disks')

    def test_relative_id_rejected(self):
        with self.assertRaises(ValueError):
            VirtualMachineClient.get(self.token, 'resourceGroups/test_rg/vm1')


class AvailabilitySetClientTest(BaseTest):

    def test_create(self):
        self.patch_request(mock_response(201, {'name': 'set1', 'location': 'westus'}))
        result = AvailabilitySetClient.create(
            self.token, self.subscription, 'test_rg', 'set1',
            AvailabilitySet(location='westus'))
        self.assertEqual(result.name, 'set1')
        method, url, body = self.sent()
        self.assertEqual(method, 'PUT')
        self.assertEqual(url, COMPUTE_URL + '/availabilitySets/set1?api-version=2019-03-01')
        self.assertEqual(body, {'location': 'westus'})

    def test_update_requires_id(self):
        with self.assertRaises(ValueError):
            AvailabilitySetClient.update(self.token, AvailabilitySet(location='westus'))

    def test_list(self):
        self.patch_request(mock_response(200, {'value': [{'name': 'set1'}, {'name': 'set2'}]}))
        sets = AvailabilitySetClient.list(self.token, self.subscription)
        self.assertEqual([s.name for s in sets], ['set1', 'set2'])
        self.assertSent(
            'GET', SUBSCRIPTION_URL + '/providers/Microsoft.Compute/availabilitySets'
                                      '?api-version=2019-03-01')

    def test_delete_not_found(self):
        self.patch_request(mock_response(404, arm_error('NotFound')))
        self.assertFalse(AvailabilitySetClient.delete(
            self.token, resource_id('Microsoft.Compute/availabilitySets', 'set1')))


class DisksClientTest(BaseTest):

    def test_create(self):
        self.patch_request(mock_response(202))
        properties = DiskProperties(
            disk_size_gb=32,
            creation_data=DiskCreationMetadata(create_option=DiskCreationOptions.EMPTY))
        self.assertTrue(DisksClient.create(
            self.token, self.subscription, 'test_rg', 'disk1', properties, 'westus',
            sku='Premium_LRS'))
        method, url, body = self.sent()
        self.assertEqual((method, url), ('PUT', DISK_URL + '?api-version=2019-07-01'))
        self.assertEqual(body['sku'], {'name': 'Premium_LRS'})
        self.assertEqual(body['properties'], {
            'creationData': {'createOption': 'Empty'}, 'diskSizeGB': 32})

    def test_create_requires_creation_data(self):
        with self.assertRaises(ValueError):
            DisksClient.create(
                self.token, self.subscription, 'test_rg', 'disk1', DiskProperties(), 'westus')

    def test_get_access(self):
        self.patch_request(mock_response(200, {'accessSAS': 'https://blob/disk?sig=1'}))
        sas = DisksClient.get_access(self.token, DISK_ID, 3600, AccessLevel.WRITE)
        self.assertEqual(sas, 'https://blob/disk?sig=1')
        method, url, body = self.sent()
        self.assertEqual(
            (method, url), ('POST', DISK_URL + '/beginGetAccess?api-version=2019-07-01'))
        self.assertEqual(body, {'access': 'Write', 'durationInSeconds': 3600})

    def test_get_access_duration(self):
        with self.assertRaises(ValueError):
            DisksClient.get_access(self.token, DISK_ID, 0)

    def test_get_access_failure(self):
        self.patch_request(mock_response(409, arm_error('Conflict')))
        self.assertIsNone(DisksClient.get_access(self.token, DISK_ID, 60))

    def test_revoke_access(self):
        self.patch_request(mock_response(202))
        self.assertTrue(DisksClient.revoke_access(self.token, DISK_ID))
        self.assertSent('POST', DISK_URL + '/endGetAccess?api-version=2019-07-01')

    def test_encryption_set_identity(self):
        self.patch_request(mock_response(200, {'name': 'des1'}))
        DiskEncryptionSetClient.create_or_update(
            self.token, self.subscription, 'test_rg', 'des1', 'westus')
        body = self.sent()[2]
        self.assertEqual(body['identity'], {'type': 'SystemAssigned'})

    def test_take_snapshot(self):
        self.patch_request(mock_response(200, {
            'name': 'snap1', 'properties': {'provisioningState': 'Succeeded'}}))
        snapshot = VirtualMachineSnapshotsClient.take(
            self.token, self.subscription, 'test_rg', 'snap1', 'westus',
            VMSnapshotProperties(creation_data=DiskCreationMetadata(
                create_option=DiskCreationOptions.COPY, source_resource_id=DISK_ID)))
        self.assertEqual(snapshot.name, 'snap1')
        method, url, body = self.sent()
        self.assertEqual(
            (method, url), ('PUT', COMPUTE_URL + '/snapshots/snap1?api-version=2019-07-01'))
        self.assertEqual(body['properties']['creationData']['sourceResourceId'], DISK_ID)


class VirtualMachineClientTest(BaseTest):

    def test_get_instance_view(self):
        self.patch_request(mock_response(200, {'name': 'vm1', 'location': 'westus'}))
        vm = VirtualMachineClient.get(self.token, VM_ID, expand_instance_view=True)
        self.assertEqual(vm.name, 'vm1')
        self.assertSent('GET', VM_URL + '?api-version=2019-03-01&$expand=instanceView')

    def test_get_not_found(self):
        self.patch_request(mock_response(404, arm_error('NotFound')))
        self.assertIsNone(VirtualMachineClient.get(self.token, VM_ID))

    def test_get_unreadable_body(self):
        self.patch_request(mock_response(200, '<html>gateway</html>'))
        with self.assertLogs('arm_client.client', level='WARNING') as logs:
            self.assertIsNone(VirtualMachineClient.get(self.token, VM_ID))
        self.assertIn('VirtualMachineClient.get status:200 unreadable body', logs.output[0])

    def test_list_by_location(self):
        self.patch_request(mock_response(200, {'value': [{'name': 'vm1'}]}))
        vms = VirtualMachineClient.list_by_location(self.token, self.subscription, 'westus')
        self.assertEqual(vms[0].name, 'vm1')
        self.assertSent(
            'GET', SUBSCRIPTION_URL + '/providers/Microsoft.Compute/locations/westus/'
                                      'virtualMachines?api-version=2019-03-01')

    def test_create_template_sync(self):
        self.patch_request(mock_response(200, {'id': 'template-1'}))
        self.assertEqual(VirtualMachineClient.create_template(self.token, VM_ID), 'template-1')
        method, url, body = self.sent()
        self.assertEqual((method, url), ('POST', VM_URL + '/capture?api-version=2019-03-01'))
        self.assertTrue(body['overwriteVhds'])

    def test_create_template_async(self):
        self.patch_request(mock_response(202))
        self.assertEqual(VirtualMachineClient.create_template(self.token, VM_ID), '')

    def test_create_template_failure(self):
        self.patch_request(mock_response(409, arm_error('OperationNotAllowed')))
        self.assertIsNone(VirtualMachineClient.create_template(self.token, VM_ID))

    def test_create_template_unreadable_body(self):
        self.patch_request(mock_response(200, '<html>'))
        with self.assertLogs('arm_client.client', level='WARNING'):
            self.assertIsNone(VirtualMachineClient.create_template(self.token, VM_ID))

    def test_power_off(self):
        self.patch_request(mock_response(202))
        self.assertTrue(VirtualMachineClient.power_off(self.token, VM_ID, skip_shutdown=True))
        self.assertSent(
            'POST', VM_URL + '/powerOff?api-version=2019-03-01&skipShutdown=true')

    def test_generalize_accepts_only_ok(self):
        self.patch_request(mock_response(202))
        self.assertFalse(VirtualMachineClient.generalize(self.token, VM_ID))

    def test_delete(self):
        self.patch_request(mock_response(204))
        self.assertTrue(VirtualMachineClient.delete(self.token, VM_ID))
        self.assertSent('DELETE', VM_URL + '?api-version=2019-03-01')

    def test_get_running_view(self):
        self.patch_request(mock_response(200, {
            'computerName': 'vm1',
            'statuses': [{'code': 'ProvisioningState/succeeded'},
                         {'code': 'PowerState/running'}]}))
        view = VirtualMachineClient.get_running_view(self.token, VM_ID)
        self.assertEqual(view.computer_name, 'vm1')
        self.assertEqual(view.power_state, 'running')
        self.assertSent('GET', VM_URL + '/instanceView?api-version=2019-03-01')

    def test_execute_command(self):
        self.patch_request(mock_response(200, {'value': [{
            'level': 'Info', 'displayStatus': 'Provisioning succeeded',
            'message': 'eth0 up'}]}))
        output = VirtualMachineClient.execute_command(
            self.token, VM_ID, VMCommandTypes.RUN_SHELL_SCRIPT, 'ls $dir', {'dir': '/tmp'})
        self.assertEqual(output, ['[Info]: Provisioning succeeded. eth0 up'])
        method, url, body = self.sent()
        self.assertEqual((method, url), ('POST', VM_URL + '/runCommand?api-version=2019-03-01'))
        self.assertEqual(body, {
            'commandId': 'RunShellScript', 'script': ['ls $dir'],
            'parameters': [{'name': 'dir', 'value': '/tmp'}]})

    def test_execute_ifconfig(self):
        self.patch_request(mock_response(200, {'value': []}))
        self.assertEqual(VirtualMachineClient.execute_command(self.token, VM_ID), [])
        self.assertEqual(self.sent()[2], {'commandId': 'ifconfig'})

    def test_execute_script_required(self):
        with self.assertRaises(ValueError):
            VirtualMachineClient.execute_command(
                self.token, VM_ID, VMCommandTypes.RUN_POWERSHELL_SCRIPT)


class VirtualMachineExtensionsClientTest(BaseTest):

    def test_create(self):
        self.patch_request(mock_response(201, {'name': 'ext1'}))
        properties = VMExtensionProperties(
            publisher='Microsoft.Azure.Extensions', type='CustomScript',
            type_handler_version='2.0', provisioning_state='Succeeded')
        extension = VirtualMachineExtensionsClient.create(
            self.token, VM_ID, 'ext1', 'westus', properties)
        self.assertEqual(extension.name, 'ext1')
        method, url, body = self.sent()
        self.assertEqual(
            (method, url), ('PUT', VM_URL + '/extensions/ext1?api-version=2019-03-01'))
        self.assertEqual(body['id'], VM_ID + '/extensions/ext1')
        self.assertNotIn('provisioningState', body['properties'])
        self.assertEqual(body['properties']['typeHandlerVersion'], '2.0')

    def test_list(self):
        self.patch_request(mock_response(200, {'value': [{'name': 'ext1'}]}))
        extensions = VirtualMachineExtensionsClient.list(self.token, VM_ID)
        self.assertEqual(extensions[0].name, 'ext1')
        self.assertSent('GET', VM_URL + '/extensions?api-version=2019-03-01')


class VirtualMachineSizeClientTest(BaseTest):

    def test_by_location(self):
        self.patch_request(mock_response(200, {'value': [
            {'name': 'Standard_A1', 'numberOfCores': 1, 'memoryInMB': 1792}]}))
        sizes = VirtualMachineSizeClient.get_available_sizes_by_location(
            self.token, self.subscription, 'westus')
        self.assertEqual(sizes[0].number_of_cores, 1)
        self.assertSent(
            'GET', SUBSCRIPTION_URL + '/providers/Microsoft.Compute/locations/westus/vmSizes'
                                      '?api-version=2019-03-01')

    def test_by_vm(self):
        self.patch_request(mock_response(200, {'value': []}))
        self.assertEqual(
            VirtualMachineSizeClient.get_available_sizes_by_vm(self.token, VM_ID), [])
        self.assertSent('GET', VM_URL + '/vmSizes?api-version=2019-03-01')


class ComputeMiscClientTest(BaseTest):

    start = datetime.datetime(2020, 1, 1)
    end = datetime.datetime(2020, 1, 2)

    def test_export_log_analytics(self):
        self.patch_request(mock_response(200, {
            'properties': {'output': 'https://blob/logs/out.csv'}}))
        output = ComputeMiscClient.export_log_analytics(
            self.token, self.subscription, 'westus', ComputeAnalyticsLogType.THROTTLE_RATE,
            self.start, self.end, 'https://blob/logs?sig=1',
            grouping=ComputeAnalyticsLogGrouping.OPERATION | ComputeAnalyticsLogGrouping.RESOURCE)
        self.assertEqual(output, 'https://blob/logs/out.csv')
        method, url, body = self.sent()
        self.assertEqual(method, 'POST')
        self.assertEqual(
            url, SUBSCRIPTION_URL + '/providers/Microsoft.Compute/locations/westus/'
                                    'logAnalytics/apiAccess/getThrottledRequests'
                                    '?api-version=2019-03-01')
        self.assertTrue(body['groupByOperationName'])
        self.assertTrue(body['groupByResourceName'])
        self.assertFalse(body['groupByThrottlePolicy'])
        self.assertEqual(body['intervalLength'], 'ThreeMins')

    def test_export_log_analytics_window(self):
        with self.assertRaises(ValueError):
            ComputeMiscClient.export_log_analytics(
                self.token, self.subscription, 'westus', ComputeAnalyticsLogType.REQUEST_RATE,
                self.end, self.start, 'https://blob/logs?sig=1')

    def test_get_usages(self):
        self.patch_request(mock_response(200, {'value': [
            {'name': {'value': 'cores'}, 'limit': 20, 'currentValue': 4, 'unit': 'Count'}]}))
        usages = ComputeMiscClient.get_usages(self.token, self.subscription, 'westus')
        self.assertEqual(usages[0].current_value, 4)

    def test_resource_skus(self):
        self.patch_request(mock_response(200, {'value': [{'name': 'Standard_A1'}]}))
        skus = ResourceSkusClient.get_all_available_sizes(self.token, self.subscription)
        self.assertEqual(skus[0].name, 'Standard_A1')
        self.assertSent(
            'GET', SUBSCRIPTION_URL + '/providers/Microsoft.Compute/skus?api-version=2017-09-01')
