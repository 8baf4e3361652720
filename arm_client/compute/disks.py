# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Managed disks, disk images, snapshots and disk encryption sets.
"""
import logging

from arm_client.compute.client import ComputeClient
from arm_client.compute.models import (
    AccessLevel, Disk, DiskAccessRequest, DiskAccessResponse, DiskEncryptionSet,
    DiskEncryptionSetIdentity, DiskEncryptionSetIdentityTypeNames, DiskEncryptionSetProperties,
    DiskImage, DiskSku, DiskSkuNames, VMSnapshot)
from arm_client.utils import StringUtils, require

log = logging.getLogger('arm_client.compute.disks')


class _ManagedResourceClient(ComputeClient):
    """get, list, update and delete shared by the disk family."""

    MODEL = None

    @classmethod
    def get(cls, bearer_token, resource_id):
        require(bearer_token, 'bearer_token')
        response = cls._get(bearer_token, cls._resource_url(resource_id), codes=(200,))
        return cls._model(response, cls.MODEL, 'get')

    @classmethod
    def list(cls, bearer_token, subscription, resource_group_name=None):
        require(bearer_token, 'bearer_token')
        response = cls._list(
            bearer_token, cls.collection_url(subscription, resource_group_name), codes=(200,))
        return cls._models(response, cls.MODEL, 'list')

    @classmethod
    def delete(cls, bearer_token, resource_id):
        return cls._remove(bearer_token, resource_id)

    @classmethod
    def _write(cls, bearer_token, resource_id, resource, operation, codes=(200, 202)):
        require(bearer_token, 'bearer_token')
        response = cls._put(
            bearer_token, cls._resource_url(resource_id), body=resource, codes=codes)
        return cls._succeeded(response, operation)

    @classmethod
    def update(cls, bearer_token, resource):
        if resource is None or StringUtils.is_blank(resource.id):
            raise ValueError('resource with an id is required')
        return cls._write(bearer_token, resource.id, resource, 'update')


class DiskEncryptionSetClient(_ManagedResourceClient):

    API_VERSION = '2019-07-01'
    RESOURCE_TYPE = 'diskEncryptionSets'
    MODEL = DiskEncryptionSet

    @classmethod
    def create_or_update(cls, bearer_token, subscription, resource_group_name,
                         disk_encryption_set_name, location, properties=None, tags=None):
        """Encryption sets always carry a system assigned identity."""
        require(bearer_token, 'bearer_token')
        require(location, 'location')
        resource_id = cls.resource_id(subscription, resource_group_name, disk_encryption_set_name)
        request = DiskEncryptionSet(
            name=disk_encryption_set_name, location=location, tags=tags,
            properties=properties or DiskEncryptionSetProperties(),
            identity=DiskEncryptionSetIdentity(
                type=DiskEncryptionSetIdentityTypeNames.SYSTEM_ASSIGNED))
        response = cls._put(
            bearer_token, cls._resource_url(resource_id), body=request, codes=(200, 201))
        return cls._model(response, DiskEncryptionSet, 'create_or_update')


class DiskImageClient(_ManagedResourceClient):

    API_VERSION = '2019-07-01'
    RESOURCE_TYPE = 'images'
    MODEL = DiskImage

    @classmethod
    def create(cls, bearer_token, subscription, resource_group_name, image_name, properties,
               location, tags=None):
        if properties is None:
            raise ValueError('properties is required')
        require(location, 'location')
        resource_id = cls.resource_id(subscription, resource_group_name, image_name)
        image = DiskImage(
            name=image_name, location=location, tags=tags, properties=properties,
            type='Microsoft.Compute/images')
        return cls._write(bearer_token, resource_id, image, 'create')


class DisksClient(_ManagedResourceClient):

    API_VERSION = '2019-07-01'
    RESOURCE_TYPE = 'disks'
    MODEL = Disk

    @classmethod
    def create(cls, bearer_token, subscription, resource_group_name, disk_name, properties,
               location, sku=DiskSkuNames.STANDARD_LRS, tags=None):
        if properties is None or properties.creation_data is None:
            raise ValueError('properties with creation_data is required')
        require(location, 'location')
        resource_id = cls.resource_id(subscription, resource_group_name, disk_name)
        disk = Disk(
            name=disk_name, location=location, tags=tags, properties=properties,
            sku=DiskSku(name=DiskSkuNames(sku)), type='Microsoft.Compute/disks')
        return cls._write(bearer_token, resource_id, disk, 'create')

    @classmethod
    def get_access(cls, bearer_token, resource_id, duration_seconds,
                   access_level=AccessLevel.READ):
        """Grant time limited access to the disk, returning the SAS uri."""
        require(bearer_token, 'bearer_token')
        if duration_seconds is None or duration_seconds <= 0:
            raise ValueError('duration_seconds must be positive')
        request = DiskAccessRequest(
            access=AccessLevel(access_level), duration_in_seconds=duration_seconds)
        response = cls._post(
            bearer_token, cls._resource_url(resource_id, 'beginGetAccess'), body=request,
            codes=(200, 202))
        result = cls._model(response, DiskAccessResponse, 'get_access')
        return result and result.access_sas

    @classmethod
    def revoke_access(cls, bearer_token, resource_id):
        return cls._action(bearer_token, resource_id, 'endGetAccess', 'revoke_access')


class VirtualMachineSnapshotsClient(_ManagedResourceClient):

    API_VERSION = '2019-07-01'
    RESOURCE_TYPE = 'snapshots'
    MODEL = VMSnapshot

    @classmethod
    def take(cls, bearer_token, subscription, resource_group_name, snapshot_name, location,
             properties, tags=None):
        """Snapshot a disk. ``properties.creation_data`` names the source."""
        require(bearer_token, 'bearer_token')
        require(location, 'location')
        if properties is None or properties.creation_data is None:
            raise ValueError('properties with creation_data is required')
        resource_id = cls.resource_id(subscription, resource_group_name, snapshot_name)
        snapshot = VMSnapshot(
            name=snapshot_name, location=location, tags=tags, properties=properties)
        response = cls._put(
            bearer_token, cls._resource_url(resource_id), body=snapshot, codes=(200, 202))
        return cls._model(response, VMSnapshot, 'take')
