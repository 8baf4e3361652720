# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import json
import sys
import types

from mock import patch

from .arm_common import BaseTest, DEFAULT_TENANT_ID
from arm_client.appservice.models import CertificateOrderStatus
from arm_client.compute.models import DiskSkuNames
from arm_client.core.models import GenericResource
from arm_client.models import (
    ArmModel, ExtensibleAzureObject, ProvisioningStatus, ResourceIdentity, ResourceIdentityType,
    UsageAPIResponseItem, UsageSdkResponseItem, model_registry)
from arm_client.storage.models import StorageAccountKind, StorageAccountSkuNames

IDENTITY_PREFIX = 'Microsoft.ManagedIdentity/userAssignedIdentities/'
PRINCIPAL_ID = '00000000-0000-0000-0000-000000000010'
CLIENT_ID = '00000000-0000-0000-0000-000000000011'


class EnumTest(BaseTest):

    def test_default_aliases(self):
        self.assertIs(CertificateOrderStatus.DEFAULT, CertificateOrderStatus.NOT_SUBMITTED)
        self.assertIs(ProvisioningStatus.DEFAULT, ProvisioningStatus.SUCCEEDED)
        self.assertIs(StorageAccountKind('StorageV2'), StorageAccountKind.DEFAULT)
        self.assertIs(StorageAccountSkuNames.DEFAULT, StorageAccountSkuNames('Standard_LRS'))

    def test_wire_values(self):
        self.assertEqual(CertificateOrderStatus('PendingIssuance'),
                         CertificateOrderStatus.PENDING_ISSUANCE)
        self.assertEqual(DiskSkuNames.PREMIUM_LRS.value, 'Premium_LRS')


class ResourceIdentityTest(BaseTest):

    def test_system_identity(self):
        identity = ResourceIdentity.create_system_identity(DEFAULT_TENANT_ID, PRINCIPAL_ID)
        self.assertEqual(identity.type, 'SystemAssigned')
        self.assertTrue(identity.has_system_assigned_identity)
        self.assertFalse(identity.has_user_assigned_identity)
        with self.assertRaises(ValueError):
            identity.add_system_identity(DEFAULT_TENANT_ID, PRINCIPAL_ID)

    def test_user_assigned_identities(self):
        identity = ResourceIdentity.create_system_identity(DEFAULT_TENANT_ID, PRINCIPAL_ID)
        identity.add_user_assigned_identity('first', CLIENT_ID, PRINCIPAL_ID)
        self.assertEqual(identity.type, 'SystemAssigned, UserAssigned')
        self.assertEqual(
            identity.user_assigned_identities[IDENTITY_PREFIX + 'first'].client_id, CLIENT_ID)

        with self.assertRaises(ValueError):
            identity.add_user_assigned_identity('FIRST', CLIENT_ID, PRINCIPAL_ID)

        identity.add_user_assigned_identity('second', CLIENT_ID, PRINCIPAL_ID)
        identity.clear_user_assigned_identity('first')
        self.assertEqual(list(identity.user_assigned_identities), [IDENTITY_PREFIX + 'second'])

        identity.clear_user_assigned_identity('second')
        self.assertIsNone(identity.user_assigned_identities)
        self.assertEqual(identity.assigned_identities, [ResourceIdentityType.SYSTEM_ASSIGNED])

        identity.clear_system_identity()
        self.assertIsNone(identity.type)
        self.assertIsNone(identity.tenant_id)

    def test_parse_identity_type(self):
        identity = ResourceIdentity.deserialize({'type': 'UserAssigned,SystemAssigned'})
        self.assertEqual(identity.assigned_identities, [
            ResourceIdentityType.USER_ASSIGNED, ResourceIdentityType.SYSTEM_ASSIGNED])

    def test_user_identity_requires_name(self):
        with self.assertRaises(ValueError):
            ResourceIdentity.create_user_assigned_identity(' ', CLIENT_ID, PRINCIPAL_ID)


class ExtensibleAzureObjectTest(BaseTest):

    document = {
        'id': '/subscriptions/x/resourceGroups/rg',
        'name': 'rg',
        'properties': {'provisioningState': 'Succeeded'},
        'kind': 'special',
    }

    def test_values(self):
        obj = ExtensibleAzureObject.deserialize(self.document)
        self.assertEqual(obj.name, 'rg')
        self.assertEqual(obj.get_value('provisioningState'), 'Succeeded')
        self.assertEqual(obj.get_value('kind'), 'special')
        self.assertIsNone(obj.get_value('missing'))
        self.assertIn('kind', obj)

    def test_set_and_remove(self):
        obj = ExtensibleAzureObject.deserialize(self.document)
        obj.set_value('provisioningState', 'Failed')
        obj.set_value('extra', 1)
        self.assertEqual(obj.properties['provisioningState'], 'Failed')
        self.assertEqual(obj.additional_properties['extra'], 1)

        obj.set_value('kind', None)
        self.assertNotIn('kind', obj)

        serialized = obj.serialize()
        self.assertEqual(serialized['extra'], 1)
        self.assertEqual(serialized['properties'], {'provisioningState': 'Failed'})

    def test_empty(self):
        obj = ExtensibleAzureObject()
        self.assertEqual(obj.properties, {})
        self.assertIsNone(obj.id)


class ModelTest(BaseTest):

    def test_loads(self):
        self.assertIsNone(GenericResource.loads(''))
        resource = GenericResource.loads(json.dumps({
            'id': '/subscriptions/x', 'sku': {'name': 'S1', 'capacity': 2},
            'identity': {'type': 'SystemAssigned', 'principalId': PRINCIPAL_ID}}))
        self.assertEqual(resource.sku.capacity, 2)
        self.assertTrue(resource.identity.has_system_assigned_identity)
        self.assertIsNone(resource.plan)

    def test_usage_flattened(self):
        item = UsageAPIResponseItem.deserialize({
            'unit': 'Count', 'currentValue': 3, 'limit': 10,
            'name': {'value': 'cores', 'localizedValue': 'Total Cores'}})
        usage = UsageSdkResponseItem(item)
        self.assertEqual(usage.counter_name, 'cores')
        self.assertEqual(usage.display_name, 'Total Cores')
        self.assertEqual((usage.value, usage.maximum_limit), (3, 10))

    def test_registry_reused(self):
        registry = model_registry()
        self.assertIs(registry['GenericResource'], GenericResource)
        self.assertIs(registry['StorageAccountKind'], StorageAccountKind)
        self.assertIs(model_registry(), registry)

    def test_registry_follows_new_modules(self):
        registry = model_registry()
        module = types.ModuleType('arm_client.extra_models')

        class ExtraModel(ArmModel):
            _attribute_map = {'name': {'key': 'name', 'type': 'str'}}

        module.ExtraModel = ExtraModel
        with patch.dict(sys.modules, {'arm_client.extra_models': module}):
            updated = model_registry()
            self.assertIsNot(updated, registry)
            self.assertIs(updated['ExtraModel'], ExtraModel)
        self.assertNotIn('ExtraModel', model_registry())
