# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Virtual machines, their extensions and the sizes they can run at.

Power operations are accepted by ARM and complete asynchronously. They
return True once the request is accepted.
"""
import logging

from arm_client import constants
from arm_client.compute.client import ComputeClient
from arm_client.compute.models import (
    RunCommand, RunCommandParameter, RunCommandResult, VirtualMachine, VirtualMachineSize,
    VMCaptureRequest, VMCaptureResult, VMCommandTypes, VMExtension, VMExtensionProperties,
    VMInstanceView)
from arm_client.utils import StringUtils, require, to_subscription, utcnow

log = logging.getLogger('arm_client.compute.virtual_machines')


class VirtualMachineClient(ComputeClient):

    API_VERSION = '2019-03-01'
    RESOURCE_TYPE = 'virtualMachines'

    @classmethod
    def get(cls, bearer_token, resource_id, expand_instance_view=False):
        require(bearer_token, 'bearer_token')
        params = {'$expand': 'instanceView'} if expand_instance_view else None
        response = cls._get(
            bearer_token, cls._resource_url(resource_id), params=params, codes=(200,))
        return cls._model(response, VirtualMachine, 'get')

    @classmethod
    def list_all(cls, bearer_token, subscription):
        require(bearer_token, 'bearer_token')
        response = cls._list(bearer_token, cls.collection_url(subscription), codes=(200,))
        return cls._models(response, VirtualMachine, 'list_all')

    @classmethod
    def list_by_resource_group(cls, bearer_token, subscription, resource_group_name):
        require(bearer_token, 'bearer_token')
        require(resource_group_name, 'resource_group_name')
        response = cls._list(
            bearer_token, cls.collection_url(subscription, resource_group_name), codes=(200,))
        return cls._models(response, VirtualMachine, 'list_by_resource_group')

    @classmethod
    def list_by_location(cls, bearer_token, subscription, location):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(location, 'location')
        url = '%s/subscriptions/%s/providers/Microsoft.Compute/locations/%s/virtualMachines' % (
            constants.ARM_ENDPOINT, subscription, location)
        response = cls._list(bearer_token, url, codes=(200,))
        return cls._models(response, VirtualMachine, 'list_by_location')

    @classmethod
    def create_template(cls, bearer_token, resource_id):
        """Capture the VM into a template.

        Returns the template id, an empty string while the capture runs
        asynchronously, or None on failure.
        """
        require(bearer_token, 'bearer_token')
        request = VMCaptureRequest(
            destination_container_name=utcnow().strftime('%Y%m%d_%H%M'),
            overwrite_vhds=True, vhd_prefix='')
        response = cls._post(
            bearer_token, cls._resource_url(resource_id, 'capture'), body=request,
            codes=(200, 202))
        if not cls._succeeded(response, 'create_template'):
            return None
        if response.http_status == 200 and not StringUtils.is_blank(response.body):
            result = cls._loads(response, VMCaptureResult, 'create_template')
            return result and result.id
        return ''

    @classmethod
    def convert_to_managed_disks(cls, bearer_token, resource_id):
        return cls._action(
            bearer_token, resource_id, 'convertToManagedDisks', 'convert_to_managed_disks')

    @classmethod
    def generalize(cls, bearer_token, resource_id):
        return cls._action(bearer_token, resource_id, 'generalize', 'generalize', codes=(200,))

    @classmethod
    def create(cls, bearer_token, subscription, resource_group_name, virtual_machine_name,
               virtual_machine):
        require(bearer_token, 'bearer_token')
        if virtual_machine is None:
            raise ValueError('virtual_machine is required')
        resource_id = cls.resource_id(subscription, resource_group_name, virtual_machine_name)
        response = cls._put(
            bearer_token, cls._resource_url(resource_id), body=virtual_machine,
            codes=(200, 201))
        return cls._model(response, VirtualMachine, 'create')

    @classmethod
    def update(cls, bearer_token, virtual_machine):
        require(bearer_token, 'bearer_token')
        if virtual_machine is None or StringUtils.is_blank(virtual_machine.id):
            raise ValueError('virtual_machine with an id is required')
        response = cls._put(
            bearer_token, cls._resource_url(virtual_machine.id), body=virtual_machine,
            codes=(200, 201))
        return cls._model(response, VirtualMachine, 'update')

    @classmethod
    def deallocate(cls, bearer_token, resource_id):
        return cls._action(bearer_token, resource_id, 'deallocate', 'deallocate')

    @classmethod
    def delete(cls, bearer_token, resource_id):
        return cls._remove(bearer_token, resource_id, codes=(200, 202, 204))

    @classmethod
    def get_running_view(cls, bearer_token, resource_id):
        require(bearer_token, 'bearer_token')
        response = cls._get(
            bearer_token, cls._resource_url(resource_id, 'instanceView'), codes=(200,))
        return cls._model(response, VMInstanceView, 'get_running_view')

    @classmethod
    def perform_maintenance(cls, bearer_token, resource_id):
        return cls._action(
            bearer_token, resource_id, 'performMaintenance', 'perform_maintenance')

    @classmethod
    def power_off(cls, bearer_token, resource_id, skip_shutdown=False):
        """Stop the VM, without shutting the guest OS down when skip_shutdown is set."""
        return cls._action(
            bearer_token, resource_id, 'powerOff', 'power_off',
            params={'skipShutdown': StringUtils.bool_string(skip_shutdown)})

    @classmethod
    def redeploy(cls, bearer_token, resource_id):
        return cls._action(bearer_token, resource_id, 'redeploy', 'redeploy')

    @classmethod
    def reimage(cls, bearer_token, resource_id):
        return cls._action(bearer_token, resource_id, 'reimage', 'reimage')

    @classmethod
    def restart(cls, bearer_token, resource_id):
        return cls._action(bearer_token, resource_id, 'restart', 'restart')

    @classmethod
    def start(cls, bearer_token, resource_id):
        return cls._action(bearer_token, resource_id, 'start', 'start')

    @classmethod
    def execute_command(cls, bearer_token, resource_id, command_type=VMCommandTypes.IFCONFIG,
                        script=None, parameters=None):
        """Run a command on the VM and return its output lines.

        Each line reads ``[level]: displayStatus. message``. Script
        commands need a script, given as a string or a list of lines.
        """
        require(bearer_token, 'bearer_token')
        command_type = VMCommandTypes(command_type)
        if isinstance(script, str):
            script = [script]
        if command_type != VMCommandTypes.IFCONFIG and not script:
            raise ValueError('script is required to run %s' % command_type.value)

        command = RunCommand(
            command_id=command_type, script=script or None,
            parameters=[RunCommandParameter(name=k, value=v)
                        for k, v in (parameters or {}).items()] or None)
        response = cls._post(
            bearer_token, cls._resource_url(resource_id, 'runCommand'), body=command,
            codes=(200, 202))
        result = cls._model(response, RunCommandResult, 'execute_command')
        if result is None:
            return []
        return [str(status) for status in result.value or ()]


class VirtualMachineExtensionsClient(ComputeClient):

    API_VERSION = '2019-03-01'

    @classmethod
    def create(cls, bearer_token, virtual_machine_id, extension_name, location, properties,
               tags=None):
        """Install an extension on a VM.

        Only the settable properties are sent, any instance view or
        provisioning state carried by ``properties`` is dropped.
        """
        require(extension_name, 'extension_name')
        require(location, 'location')
        if properties is None:
            raise ValueError('properties is required')
        request = VMExtensionProperties(
            auto_upgrade_minor_version=properties.auto_upgrade_minor_version,
            force_update_tag=properties.force_update_tag,
            protected_settings=properties.protected_settings,
            publisher=properties.publisher,
            settings=properties.settings,
            type=properties.type,
            type_handler_version=properties.type_handler_version)
        extension = VMExtension(
            id='%s/extensions/%s' % (
                cls._resource_url(virtual_machine_id)[len(constants.ARM_ENDPOINT):],
                extension_name),
            name=extension_name, location=location, tags=tags, properties=request)
        return cls.create_or_update(bearer_token, extension)

    @classmethod
    def create_or_update(cls, bearer_token, extension):
        require(bearer_token, 'bearer_token')
        if extension is None or StringUtils.is_blank(extension.id):
            raise ValueError('extension with an id is required')
        response = cls._put(
            bearer_token, cls._resource_url(extension.id), body=extension, codes=(200, 201))
        return cls._model(response, VMExtension, 'create_or_update')

    @classmethod
    def delete(cls, bearer_token, extension_id):
        require(bearer_token, 'bearer_token')
        response = cls._delete(
            bearer_token, cls._resource_url(extension_id), codes=(200, 202, 204))
        return cls._succeeded(response, 'delete')

    @classmethod
    def get(cls, bearer_token, extension_id):
        require(bearer_token, 'bearer_token')
        response = cls._get(bearer_token, cls._resource_url(extension_id), codes=(200,))
        return cls._model(response, VMExtension, 'get')

    @classmethod
    def list(cls, bearer_token, virtual_machine_id):
        require(bearer_token, 'bearer_token')
        response = cls._list(
            bearer_token, cls._resource_url(virtual_machine_id, 'extensions'), codes=(200,))
        return cls._models(response, VMExtension, 'list')


class VirtualMachineSizeClient(ComputeClient):

    API_VERSION = '2019-03-01'

    @classmethod
    def _sizes(cls, bearer_token, url, operation):
        require(bearer_token, 'bearer_token')
        response = cls._get(bearer_token, url, codes=(200,))
        return cls._models(response, VirtualMachineSize, operation)

    @classmethod
    def get_available_sizes_by_location(cls, bearer_token, subscription, location):
        subscription = to_subscription(subscription)
        require(location, 'location')
        return cls._sizes(
            bearer_token,
            '%s/subscriptions/%s/providers/Microsoft.Compute/locations/%s/vmSizes' % (
                constants.ARM_ENDPOINT, subscription, location),
            'get_available_sizes_by_location')

    @classmethod
    def get_available_sizes_by_vm(cls, bearer_token, virtual_machine_id):
        """Sizes the VM can be resized to."""
        return cls._sizes(
            bearer_token, cls._resource_url(virtual_machine_id, 'vmSizes'),
            'get_available_sizes_by_vm')

    @classmethod
    def get_available_sizes_by_availability_set(cls, bearer_token, availability_set_id):
        return cls._sizes(
            bearer_token, cls._resource_url(availability_set_id, 'vmSizes'),
            'get_available_sizes_by_availability_set')
