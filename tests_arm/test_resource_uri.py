# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import uuid

from .arm_common import BaseTest, DEFAULT_SUBSCRIPTION_ID
from arm_client.exceptions import ResourceUriError
from arm_client.resource_uri import ResourceUri, ResourceUriCompareLevel as Level

RESOURCE_ID = (
    "/subscriptions/%s/resourceGroups/"
    "rgtest/providers/Microsoft.Compute/virtualMachines/nametest" % DEFAULT_SUBSCRIPTION_ID)

RESOURCE_ID_CHILD = (
    "/subscriptions/%s/resourceGroups/"
    "rgtest/providers/Microsoft.Web/sites/app/slots/staging" % DEFAULT_SUBSCRIPTION_ID)


class ResourceUriTest(BaseTest):

    def test_parse(self):
        uri = ResourceUri.parse(RESOURCE_ID)
        self.assertEqual(uri.subscription, uuid.UUID(DEFAULT_SUBSCRIPTION_ID))
        self.assertEqual(uri.resource_group_name, 'rgtest')
        self.assertEqual(uri.provider_name, 'Microsoft.Compute')
        self.assertEqual(uri.type, 'virtualMachines')
        self.assertEqual(uri.resource_name, 'nametest')
        self.assertEqual(str(uri), RESOURCE_ID)

    def test_parse_child(self):
        uri = ResourceUri.parse(RESOURCE_ID_CHILD)
        self.assertEqual(uri.provider_name, 'Microsoft.Web/sites/app')
        self.assertEqual(uri.type, 'slots')
        self.assertEqual(uri.resource_name, 'staging')
        self.assertEqual(str(uri), RESOURCE_ID_CHILD)

    def test_parse_resource_group(self):
        resource_group_id = '/subscriptions/%s/resourcegroups/rgtest' % DEFAULT_SUBSCRIPTION_ID
        uri = ResourceUri.parse(resource_group_id)
        self.assertEqual(uri.resource_group_name, 'rgtest')
        self.assertIsNone(uri.provider_name)
        self.assertEqual(
            str(uri), '/subscriptions/%s/resourceGroups/rgtest' % DEFAULT_SUBSCRIPTION_ID)

    def test_parse_invalid(self):
        for value in ('', None, '/subscriptions/not-a-guid', '/subscriptions'):
            with self.assertRaises(ResourceUriError):
                ResourceUri.parse(value)
        # still a ValueError for callers validating input
        self.assertTrue(issubclass(ResourceUriError, ValueError))

    def test_is_valid(self):
        self.assertFalse(ResourceUri().is_valid)
        self.assertFalse(ResourceUri(uuid.UUID(int=0)).is_valid)
        self.assertTrue(ResourceUri(uuid.uuid4()).is_valid)
        with self.assertRaises(ResourceUriError):
            str(ResourceUri())

    def test_builder(self):
        uri = ResourceUri().with_subscription_id(DEFAULT_SUBSCRIPTION_ID) \
            .with_resource_group('rgtest') \
            .with_provider('Microsoft.Compute') \
            .with_type('virtualMachines') \
            .with_resource('nametest') \
            .build()
        self.assertEqual(str(uri), RESOURCE_ID)
        self.assertEqual(
            uri.to_absolute_arm_endpoint_uri('start'),
            'https://management.azure.com%s/start' % RESOURCE_ID)

    def test_blank_components_skipped(self):
        uri = ResourceUri(DEFAULT_SUBSCRIPTION_ID, ' ', None, '', 'name')
        self.assertEqual(str(uri), '/subscriptions/%s/name' % DEFAULT_SUBSCRIPTION_ID)

    def test_is(self):
        uri = ResourceUri.parse(RESOURCE_ID)
        self.assertTrue(uri.is_(Level.TYPE, 'VIRTUALMACHINES'))
        self.assertTrue(uri.is_(Level.PROVIDER, 'microsoft.compute'))
        self.assertTrue(uri.is_(Level.SUBSCRIPTION, DEFAULT_SUBSCRIPTION_ID))
        self.assertFalse(uri.is_(Level.RESOURCE_GROUP, 'other'))
        self.assertFalse(ResourceUri(DEFAULT_SUBSCRIPTION_ID).is_(Level.TYPE, 'sites'))

    def test_compare(self):
        uri = ResourceUri.parse(RESOURCE_ID)
        self.assertTrue(ResourceUri.parse(RESOURCE_ID.upper().replace(
            DEFAULT_SUBSCRIPTION_ID.upper(), DEFAULT_SUBSCRIPTION_ID)).compare(uri))

        # unset components never count as a mismatch
        group = ResourceUri(DEFAULT_SUBSCRIPTION_ID, 'RGTEST')
        self.assertTrue(group.compare(uri))
        self.assertTrue(group.compare(uri, Level.SUBSCRIPTION | Level.RESOURCE_GROUP))

        other = ResourceUri(DEFAULT_SUBSCRIPTION_ID, 'other')
        self.assertFalse(other.compare(uri, Level.RESOURCE_GROUP))
        self.assertTrue(other.compare(uri, Level.SUBSCRIPTION))

        self.assertFalse(ResourceUri(uuid.uuid4(), 'rgtest').compare(uri, Level.SUBSCRIPTION))
