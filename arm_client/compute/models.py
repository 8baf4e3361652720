# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Compute shapes: availability sets, disks, images, snapshots, disk
encryption sets, virtual machines and their extensions.
"""
import enum

from arm_client.models import ArmModel, AzureObjectBase, resource_map


class AccessLevel(str, enum.Enum):
    NONE = 'None'
    READ = 'Read'
    WRITE = 'Write'


class CachingTypeNames(str, enum.Enum):
    NONE = 'None'
    READ_ONLY = 'ReadOnly'
    READ_WRITE = 'ReadWrite'


class DiskCreationOptions(str, enum.Enum):
    ATTACH = 'Attach'
    COPY = 'Copy'
    EMPTY = 'Empty'
    FROM_IMAGE = 'FromImage'
    IMPORT = 'Import'
    RESTORE = 'Restore'
    UPLOAD = 'Upload'


class DiskSkuNames(str, enum.Enum):
    STANDARD_LRS = 'Standard_LRS'
    STANDARD_SSD_LRS = 'StandardSSD_LRS'
    PREMIUM_LRS = 'Premium_LRS'
    ULTRA_SSD_LRS = 'UltraSSD_LRS'
    STANDARD_ZRS = 'Standard_ZRS'


class DiskStateNames(str, enum.Enum):
    ACTIVE_SAS = 'ActiveSAS'
    ACTIVE_UPLOAD = 'ActiveUpload'
    ATTACHED = 'Attached'
    READY_TO_UPLOAD = 'ReadyToUpload'
    RESERVED = 'Reserved'
    UNATTACHED = 'Unattached'


class HyperVGenerationNames(str, enum.Enum):
    V1 = 'V1'
    V2 = 'V2'


class OSStateTypeNames(str, enum.Enum):
    GENERALIZED = 'Generalized'
    SPECIALIZED = 'Specialized'


class VMCommandTypes(str, enum.Enum):
    IFCONFIG = 'ifconfig'
    RUN_SHELL_SCRIPT = 'RunShellScript'
    RUN_POWERSHELL_SCRIPT = 'RunPowerShellScript'


class DiskDataEncryptionTypeNames(str, enum.Enum):
    CUSTOMER_KEY = 'EncryptionAtRestWithCustomerKey'
    PLATFORM_KEY = 'EncryptionAtRestWithPlatformKey'


class DiskEncryptionSetIdentityTypeNames(str, enum.Enum):
    SYSTEM_ASSIGNED = 'SystemAssigned'


class MaintenanceOperationResultCodes(str, enum.Enum):
    NONE = 'None'
    RETRY_LATER = 'RetryLater'
    MAINTENANCE_ABORTED = 'MaintenanceAborted'
    MAINTENANCE_COMPLETED = 'MaintenanceCompleted'


class VMUnattendedWindowsSetupRunAt(str, enum.Enum):
    FIRST_LOGON_COMMANDS = 'FirstLogonCommands'
    AUTO_LOGON = 'AutoLogon'


class WinRMProtocols(str, enum.Enum):
    HTTP = 'Http'
    HTTPS = 'Https'


class ComputeLogAnalyticsIntervals(str, enum.Enum):
    THREE_MINS = 'ThreeMins'
    FIVE_MINS = 'FiveMins'
    THIRTY_MINS = 'ThirtyMins'
    SIXTY_MINS = 'SixtyMins'


class ComputeAnalyticsLogType(enum.Enum):
    REQUEST_RATE = 'getRequestRateByInterval'
    THROTTLE_RATE = 'getThrottledRequests'


class ComputeAnalyticsLogGrouping(enum.IntFlag):
    NONE = 0
    OPERATION = 1
    RESOURCE = 2
    THROTTLE_POLICY = 4


# Encryption

class SourceVault(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
    }


class KeyVaultAndKeyReference(ArmModel):

    _attribute_map = {
        'key_url': {'key': 'keyUrl', 'type': 'str'},
        'source_vault': {'key': 'sourceVault', 'type': 'SourceVault'},
    }


class KeyVaultAndSecretReference(ArmModel):

    _attribute_map = {
        'secret_url': {'key': 'secretUrl', 'type': 'str'},
        'source_vault': {'key': 'sourceVault', 'type': 'SourceVault'},
    }


class AzureDiskEncryptionOption(ArmModel):

    _attribute_map = {
        'disk_encryption_key': {'key': 'diskEncryptionKey', 'type': 'KeyVaultAndSecretReference'},
        'key_encryption_key': {'key': 'keyEncryptionKey', 'type': 'KeyVaultAndKeyReference'},
    }


class AzureDiskEncryptionSettings(ArmModel):

    _attribute_map = {
        'enabled': {'key': 'enabled', 'type': 'bool'},
        'encryption_settings_version': {'key': 'encryptionSettingsVersion', 'type': 'str'},
        'encryption_settings': {
            'key': 'encryptionSettings', 'type': '[AzureDiskEncryptionOption]'},
    }


class DiskDataEncryptionProperties(ArmModel):

    _attribute_map = {
        'disk_encryption_set_id': {'key': 'diskEncryptionSetId', 'type': 'str'},
        'type': {'key': 'type', 'type': 'DiskDataEncryptionTypeNames'},
    }


# Availability sets

class InstanceViewStatus(ArmModel):

    _attribute_map = {
        'code': {'key': 'code', 'type': 'str'},
        'display_status': {'key': 'displayStatus', 'type': 'str'},
        'level': {'key': 'level', 'type': 'str'},
        'message': {'key': 'message', 'type': 'str'},
        'time': {'key': 'time', 'type': 'iso-8601'},
    }

    def __str__(self):
        return '[%s]: %s. %s' % (self.level, self.display_status, self.message)


class AvailabilitySetProperties(ArmModel):

    _attribute_map = {
        'platform_fault_domain_count': {'key': 'platformFaultDomainCount', 'type': 'int'},
        'platform_update_domain_count': {'key': 'platformUpdateDomainCount', 'type': 'int'},
        'proximity_placement_group': {'key': 'proximityPlacementGroup', 'type': 'SubResource'},
        'statuses': {'key': 'statuses', 'type': '[InstanceViewStatus]'},
        'virtual_machines': {'key': 'virtualMachines', 'type': '[SubResource]'},
    }


class AvailabilitySet(AzureObjectBase):

    _attribute_map = resource_map(
        sku={'key': 'sku', 'type': 'ResourceSku'},
        properties={'key': 'properties', 'type': 'AvailabilitySetProperties'})


# Disk encryption sets

class DiskEncryptionSetIdentity(ArmModel):

    _attribute_map = {
        'principal_id': {'key': 'principalId', 'type': 'str'},
        'tenant_id': {'key': 'tenantId', 'type': 'str'},
        'type': {'key': 'type', 'type': 'DiskEncryptionSetIdentityTypeNames'},
    }


class DiskEncryptionSetProperties(ArmModel):

    _attribute_map = {
        'provisioning_state': {'key': 'provisioningState', 'type': 'str'},
        'active_key': {'key': 'activeKey', 'type': 'KeyVaultAndKeyReference'},
        'previous_keys': {'key': 'previousKeys', 'type': '[KeyVaultAndKeyReference]'},
    }


class DiskEncryptionSet(AzureObjectBase):

    _attribute_map = resource_map(
        identity={'key': 'identity', 'type': 'DiskEncryptionSetIdentity'},
        properties={'key': 'properties', 'type': 'DiskEncryptionSetProperties'})


# Images

class ImageDataDisk(ArmModel):

    _attribute_map = {
        'blob_uri': {'key': 'blobUri', 'type': 'str'},
        'caching': {'key': 'caching', 'type': 'CachingTypeNames'},
        'disk_size_gb': {'key': 'diskSizeGB', 'type': 'int'},
        'lun': {'key': 'lun', 'type': 'int'},
        'managed_disk': {'key': 'managedDisk', 'type': 'SubResource'},
        'snapshot': {'key': 'snapshot', 'type': 'SubResource'},
        'storage_account_type': {'key': 'storageAccountType', 'type': 'DiskSkuNames'},
    }


class ImageOSDisk(ArmModel):

    _attribute_map = {
        'blob_uri': {'key': 'blobUri', 'type': 'str'},
        'caching': {'key': 'caching', 'type': 'CachingTypeNames'},
        'disk_size_gb': {'key': 'diskSizeGB', 'type': 'int'},
        'managed_disk': {'key': 'managedDisk', 'type': 'SubResource'},
        'snapshot': {'key': 'snapshot', 'type': 'SubResource'},
        'storage_account_type': {'key': 'storageAccountType', 'type': 'DiskSkuNames'},
        'os_state': {'key': 'osState', 'type': 'OSStateTypeNames'},
        'os_type': {'key': 'osType', 'type': 'OSTypeNames'},
    }


class ImageStorageProfile(ArmModel):

    _attribute_map = {
        'zone_resilient': {'key': 'zoneResilient', 'type': 'bool'},
        'data_disks': {'key': 'dataDisks', 'type': '[ImageDataDisk]'},
        'os_disk': {'key': 'osDisk', 'type': 'ImageOSDisk'},
    }


class DiskImageProperties(ArmModel):

    _attribute_map = {
        'hyper_v_generation': {'key': 'hyperVGeneration', 'type': 'HyperVGenerationNames'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'str'},
        'source_virtual_machine': {'key': 'sourceVirtualMachine', 'type': 'SubResource'},
        'storage_profile': {'key': 'storageProfile', 'type': 'ImageStorageProfile'},
    }


class DiskImage(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'DiskImageProperties'})


# Disks and snapshots

class DiskCreationMetadata(ArmModel):

    _attribute_map = {
        'create_option': {'key': 'createOption', 'type': 'DiskCreationOptions'},
        'source_resource_id': {'key': 'sourceResourceId', 'type': 'str'},
        'source_unique_id': {'key': 'sourceUniqueId', 'type': 'str'},
        'source_uri': {'key': 'sourceUri', 'type': 'str'},
        'storage_account_id': {'key': 'storageAccountId', 'type': 'str'},
        'upload_size_bytes': {'key': 'uploadSizeBytes', 'type': 'long'},
        'image_reference': {'key': 'imageReference', 'type': 'DiskImageReference'},
    }


class DiskImageReference(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'lun': {'key': 'lun', 'type': 'int'},
    }


class DiskSku(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'DiskSkuNames'},
        'tier': {'key': 'tier', 'type': 'str'},
    }


class DiskProperties(ArmModel):

    _attribute_map = {
        'creation_data': {'key': 'creationData', 'type': 'DiskCreationMetadata'},
        'disk_iops_read_write': {'key': 'diskIOPSReadWrite', 'type': 'long'},
        'disk_mbps_read_write': {'key': 'diskMBpsReadWrite', 'type': 'long'},
        'disk_size_bytes': {'key': 'diskSizeBytes', 'type': 'long'},
        'disk_size_gb': {'key': 'diskSizeGB', 'type': 'int'},
        'disk_state': {'key': 'diskState', 'type': 'DiskStateNames'},
        'encryption': {'key': 'encryption', 'type': 'DiskDataEncryptionProperties'},
        'encryption_settings_collection': {
            'key': 'encryptionSettingsCollection', 'type': 'AzureDiskEncryptionSettings'},
        'hyper_v_generation': {'key': 'hyperVGeneration', 'type': 'HyperVGenerationNames'},
        'os_type': {'key': 'osType', 'type': 'OSTypeNames'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'ProvisioningStatus'},
        'time_created': {'key': 'timeCreated', 'type': 'iso-8601'},
        'unique_id': {'key': 'uniqueId', 'type': 'str'},
    }


class Disk(AzureObjectBase):

    _attribute_map = resource_map(
        managed_by={'key': 'managedBy', 'type': 'str'},
        sku={'key': 'sku', 'type': 'DiskSku'},
        zones={'key': 'zones', 'type': '[str]'},
        properties={'key': 'properties', 'type': 'DiskProperties'})


class DiskAccessRequest(ArmModel):

    _attribute_map = {
        'access': {'key': 'access', 'type': 'AccessLevel'},
        'duration_in_seconds': {'key': 'durationInSeconds', 'type': 'int'},
    }


class DiskAccessResponse(ArmModel):

    _attribute_map = {
        'access_sas': {'key': 'accessSAS', 'type': 'str'},
    }


class VMSnapshotProperties(ArmModel):

    _attribute_map = {
        'creation_data': {'key': 'creationData', 'type': 'DiskCreationMetadata'},
        'disk_size_bytes': {'key': 'diskSizeBytes', 'type': 'long'},
        'disk_size_gb': {'key': 'diskSizeGB', 'type': 'int'},
        'encryption': {'key': 'encryption', 'type': 'DiskDataEncryptionProperties'},
        'encryption_settings_collection': {
            'key': 'encryptionSettingsCollection', 'type': 'AzureDiskEncryptionSettings'},
        'hyper_v_generation': {'key': 'hyperVGeneration', 'type': 'HyperVGenerationNames'},
        'incremental': {'key': 'incremental', 'type': 'bool'},
        'os_type': {'key': 'osType', 'type': 'OSTypeNames'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'ProvisioningStatus'},
        'time_created': {'key': 'timeCreated', 'type': 'iso-8601'},
        'unique_id': {'key': 'uniqueId', 'type': 'str'},
    }


class VMSnapshot(AzureObjectBase):

    _attribute_map = resource_map(
        managed_by={'key': 'managedBy', 'type': 'str'},
        sku={'key': 'sku', 'type': 'DiskSku'},
        properties={'key': 'properties', 'type': 'VMSnapshotProperties'})


# Virtual machine instance view

class VMExtensionHandlerInstanceView(ArmModel):

    _attribute_map = {
        'type': {'key': 'type', 'type': 'str'},
        'type_handler_version': {'key': 'typeHandlerVersion', 'type': 'str'},
        'status': {'key': 'status', 'type': 'InstanceViewStatus'},
    }


class VMAgentInstanceView(ArmModel):

    _attribute_map = {
        'vm_agent_version': {'key': 'vmAgentVersion', 'type': 'str'},
        'statuses': {'key': 'statuses', 'type': '[InstanceViewStatus]'},
        'extension_handlers': {
            'key': 'extensionHandlers', 'type': '[VMExtensionHandlerInstanceView]'},
    }


class VMExtensionInstanceView(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'type_handler_version': {'key': 'typeHandlerVersion', 'type': 'str'},
        'statuses': {'key': 'statuses', 'type': '[InstanceViewStatus]'},
        'substatuses': {'key': 'substatuses', 'type': '[InstanceViewStatus]'},
    }


class VMInstanceViewBootDiagnostics(ArmModel):

    _attribute_map = {
        'console_screenshot_blob_uri': {'key': 'consoleScreenshotBlobUri', 'type': 'str'},
        'serial_console_log_blob_uri': {'key': 'serialConsoleLogBlobUri', 'type': 'str'},
        'status': {'key': 'status', 'type': 'InstanceViewStatus'},
    }


class VMDiskEncryptionSettings(ArmModel):

    _attribute_map = {
        'disk_encryption_key': {'key': 'diskEncryptionKey', 'type': 'KeyVaultAndSecretReference'},
        'key_encryption_key': {'key': 'keyEncryptionKey', 'type': 'KeyVaultAndKeyReference'},
        'enabled': {'key': 'enabled', 'type': 'bool'},
    }


class VMInstanceViewDisk(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'statuses': {'key': 'statuses', 'type': '[InstanceViewStatus]'},
        'encryption_settings': {
            'key': 'encryptionSettings', 'type': '[VMDiskEncryptionSettings]'},
    }


class VMInstanceViewMaintenanceRedeploymentStatus(ArmModel):

    _attribute_map = {
        'is_customer_initiated_maintenance_allowed': {
            'key': 'isCustomerInitiatedMaintenanceAllowed', 'type': 'bool'},
        'last_operation_message': {'key': 'lastOperationMessage', 'type': 'str'},
        'last_operation_result_code': {
            'key': 'lastOperationResultCode', 'type': 'MaintenanceOperationResultCodes'},
        'maintenance_window_start_time': {'key': 'maintenanceWindowStartTime', 'type': 'iso-8601'},
        'maintenance_window_end_time': {'key': 'maintenanceWindowEndTime', 'type': 'iso-8601'},
        'pre_maintenance_window_start_time': {
            'key': 'preMaintenanceWindowStartTime', 'type': 'iso-8601'},
        'pre_maintenance_window_end_time': {
            'key': 'preMaintenanceWindowEndTime', 'type': 'iso-8601'},
    }


class VMInstanceView(ArmModel):

    _attribute_map = {
        'boot_diagnostics': {'key': 'bootDiagnostics', 'type': 'VMInstanceViewBootDiagnostics'},
        'computer_name': {'key': 'computerName', 'type': 'str'},
        'os_name': {'key': 'osName', 'type': 'str'},
        'os_version': {'key': 'osVersion', 'type': 'str'},
        'disks': {'key': 'disks', 'type': '[VMInstanceViewDisk]'},
        'extensions': {'key': 'extensions', 'type': '[VMExtensionInstanceView]'},
        'hyper_v_generation': {'key': 'hyperVGeneration', 'type': 'HyperVGenerationNames'},
        'maintenance_redeploy_status': {
            'key': 'maintenanceRedeployStatus',
            'type': 'VMInstanceViewMaintenanceRedeploymentStatus'},
        'platform_fault_domain': {'key': 'platformFaultDomain', 'type': 'int'},
        'platform_update_domain': {'key': 'platformUpdateDomain', 'type': 'int'},
        'rdp_thumb_print': {'key': 'rdpThumbPrint', 'type': 'str'},
        'statuses': {'key': 'statuses', 'type': '[InstanceViewStatus]'},
        'vm_agent': {'key': 'vmAgent', 'type': 'VMAgentInstanceView'},
    }

    @property
    def power_state(self):
        """The ``PowerState/...`` status code suffix, eg. ``running``."""
        for status in self.statuses or ():
            if status.code and status.code.startswith('PowerState/'):
                return status.code.split('/', 1)[1]
        return None


# Virtual machines

class RunCommandParameter(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'value': {'key': 'value', 'type': 'str'},
    }


class RunCommand(ArmModel):

    _attribute_map = {
        'command_id': {'key': 'commandId', 'type': 'VMCommandTypes'},
        'parameters': {'key': 'parameters', 'type': '[RunCommandParameter]'},
        'script': {'key': 'script', 'type': '[str]'},
    }


class RunCommandResult(ArmModel):

    _attribute_map = {
        'value': {'key': 'value', 'type': '[InstanceViewStatus]'},
    }


class VMCaptureRequest(ArmModel):

    _attribute_map = {
        'destination_container_name': {'key': 'destinationContainerName', 'type': 'str'},
        'overwrite_vhds': {'key': 'overwriteVhds', 'type': 'bool'},
        'vhd_prefix': {'key': 'vhdPrefix', 'type': 'str'},
    }


class VMCaptureResult(ArmModel):

    _attribute_map = {
        'schema': {'key': '$schema', 'type': 'str'},
        'content_version': {'key': 'contentVersion', 'type': 'str'},
        'id': {'key': 'id', 'type': 'str'},
        'parameters': {'key': 'parameters', 'type': 'object'},
        'resources': {'key': 'resources', 'type': '[object]'},
    }


class VMAdditionalCapabilities(ArmModel):

    _attribute_map = {
        'ultra_ssd_enabled': {'key': 'ultraSSDEnabled', 'type': 'bool'},
    }


class VMBillingProfile(ArmModel):

    _attribute_map = {
        'max_price': {'key': 'maxPrice', 'type': 'float'},
    }


class VMBootDiagnostics(ArmModel):

    _attribute_map = {
        'enabled': {'key': 'enabled', 'type': 'bool'},
        'storage_uri': {'key': 'storageUri', 'type': 'str'},
    }


class VMDiagnosticsProfile(ArmModel):

    _attribute_map = {
        'boot_diagnostics': {'key': 'bootDiagnostics', 'type': 'VMBootDiagnostics'},
    }


class VMHardwareProfile(ArmModel):

    _attribute_map = {
        'vm_size': {'key': 'vmSize', 'type': 'str'},
    }


class VMManagedDisk(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'storage_account_type': {'key': 'storageAccountType', 'type': 'DiskSkuNames'},
    }


class VMMarketplaceOfferingReference(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'offer': {'key': 'offer', 'type': 'str'},
        'publisher': {'key': 'publisher', 'type': 'str'},
        'sku': {'key': 'sku', 'type': 'str'},
        'version': {'key': 'version', 'type': 'str'},
    }


class VMNetworkInterfaceProperties(ArmModel):

    _attribute_map = {
        'primary': {'key': 'primary', 'type': 'bool'},
    }


class VMNetworkInterface(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'properties': {'key': 'properties', 'type': 'VMNetworkInterfaceProperties'},
    }


class VMNetworkProfile(ArmModel):

    _attribute_map = {
        'network_interfaces': {'key': 'networkInterfaces', 'type': '[VMNetworkInterface]'},
    }


class VMDataDisk(ArmModel):

    _attribute_map = {
        'caching': {'key': 'caching', 'type': 'CachingTypeNames'},
        'create_option': {'key': 'createOption', 'type': 'DiskCreationOptions'},
        'disk_size_gb': {'key': 'diskSizeGB', 'type': 'int'},
        'lun': {'key': 'lun', 'type': 'int'},
        'name': {'key': 'name', 'type': 'str'},
        'to_be_detached': {'key': 'toBeDetached', 'type': 'bool'},
        'write_accelerator_enabled': {'key': 'writeAcceleratorEnabled', 'type': 'bool'},
        'image': {'key': 'image', 'type': 'UriResource'},
        'vhd': {'key': 'vhd', 'type': 'UriResource'},
        'managed_disk': {'key': 'managedDisk', 'type': 'VMManagedDisk'},
    }


class VMOSDisk(ArmModel):

    _attribute_map = {
        'caching': {'key': 'caching', 'type': 'CachingTypeNames'},
        'create_option': {'key': 'createOption', 'type': 'DiskCreationOptions'},
        'diff_disk_settings': {'key': 'diffDiskSettings', 'type': '{str}'},
        'disk_size_gb': {'key': 'diskSizeGB', 'type': 'int'},
        'encryption_settings': {'key': 'encryptionSettings', 'type': 'VMDiskEncryptionSettings'},
        'image': {'key': 'image', 'type': 'UriResource'},
        'managed_disk': {'key': 'managedDisk', 'type': 'VMManagedDisk'},
        'name': {'key': 'name', 'type': 'str'},
        'os_type': {'key': 'osType', 'type': 'OSTypeNames'},
        'vhd': {'key': 'vhd', 'type': 'UriResource'},
        'write_accelerator_enabled': {'key': 'writeAcceleratorEnabled', 'type': 'bool'},
    }


class VMStorageSettings(ArmModel):

    _attribute_map = {
        'data_disks': {'key': 'dataDisks', 'type': '[VMDataDisk]'},
        'os_disk': {'key': 'osDisk', 'type': 'VMOSDisk'},
        'image_reference': {'key': 'imageReference', 'type': 'VMMarketplaceOfferingReference'},
    }


class VMSshPublicKey(ArmModel):

    _attribute_map = {
        'key_data': {'key': 'keyData', 'type': 'str'},
        'path': {'key': 'path', 'type': 'str'},
    }


class VMSshConfiguration(ArmModel):

    _attribute_map = {
        'public_keys': {'key': 'publicKeys', 'type': '[VMSshPublicKey]'},
    }


class VMSettingsForLinux(ArmModel):

    _attribute_map = {
        'disable_password_authentication': {
            'key': 'disablePasswordAuthentication', 'type': 'bool'},
        'provision_vm_agent': {'key': 'provisionVMAgent', 'type': 'bool'},
        'ssh': {'key': 'ssh', 'type': 'VMSshConfiguration'},
    }


class VMUnattendedWindowsSetupContent(ArmModel):

    _attribute_map = {
        'component_name': {'key': 'componentName', 'type': 'str'},
        'content': {'key': 'content', 'type': 'str'},
        'pass_name': {'key': 'passName', 'type': 'str'},
        'setting_name': {'key': 'settingName', 'type': 'VMUnattendedWindowsSetupRunAt'},
    }


class WinRMListener(ArmModel):

    _attribute_map = {
        'certificate_url': {'key': 'certificateUrl', 'type': 'str'},
        'protocol': {'key': 'protocol', 'type': 'WinRMProtocols'},
    }


class WinRMConfiguration(ArmModel):

    _attribute_map = {
        'listeners': {'key': 'listeners', 'type': '[WinRMListener]'},
    }


class VMSettingsForWindows(ArmModel):

    _attribute_map = {
        'enable_automatic_updates': {'key': 'enableAutomaticUpdates', 'type': 'bool'},
        'provision_vm_agent': {'key': 'provisionVMAgent', 'type': 'bool'},
        'time_zone': {'key': 'timeZone', 'type': 'str'},
        'additional_unattend_content': {
            'key': 'additionalUnattendContent', 'type': '[VMUnattendedWindowsSetupContent]'},
        'win_rm': {'key': 'winRM', 'type': 'WinRMConfiguration'},
    }


class VMCertificateStoreCertificate(ArmModel):

    _attribute_map = {
        'certificate_store': {'key': 'certificateStore', 'type': 'str'},
        'certificate_url': {'key': 'certificateUrl', 'type': 'str'},
    }


class VMCertificates(ArmModel):

    _attribute_map = {
        'source_vault': {'key': 'sourceVault', 'type': 'SubResource'},
        'vault_certificates': {
            'key': 'vaultCertificates', 'type': '[VMCertificateStoreCertificate]'},
    }


class VMOSProfile(ArmModel):

    _attribute_map = {
        'admin_password': {'key': 'adminPassword', 'type': 'str'},
        'admin_username': {'key': 'adminUsername', 'type': 'str'},
        'allow_extension_operations': {'key': 'allowExtensionOperations', 'type': 'bool'},
        'computer_name': {'key': 'computerName', 'type': 'str'},
        'custom_data': {'key': 'customData', 'type': 'str'},
        'require_guest_provision_signal': {
            'key': 'requireGuestProvisionSignal', 'type': 'bool'},
        'linux_configuration': {'key': 'linuxConfiguration', 'type': 'VMSettingsForLinux'},
        'windows_configuration': {'key': 'windowsConfiguration', 'type': 'VMSettingsForWindows'},
        'secrets': {'key': 'secrets', 'type': '[VMCertificates]'},
    }


class VMExtensionProperties(ArmModel):

    _attribute_map = {
        'auto_upgrade_minor_version': {'key': 'autoUpgradeMinorVersion', 'type': 'bool'},
        'force_update_tag': {'key': 'forceUpdateTag', 'type': 'str'},
        'instance_view': {'key': 'instanceView', 'type': 'VMExtensionInstanceView'},
        'protected_settings': {'key': 'protectedSettings', 'type': 'object'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'str'},
        'publisher': {'key': 'publisher', 'type': 'str'},
        'settings': {'key': 'settings', 'type': 'object'},
        'type': {'key': 'type', 'type': 'str'},
        'type_handler_version': {'key': 'typeHandlerVersion', 'type': 'str'},
    }


class VMExtension(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'VMExtensionProperties'})


class VMProperties(ArmModel):

    _attribute_map = {
        'additional_capabilities': {
            'key': 'additionalCapabilities', 'type': 'VMAdditionalCapabilities'},
        'availability_set': {'key': 'availabilitySet', 'type': 'SubResource'},
        'billing_profile': {'key': 'billingProfile', 'type': 'VMBillingProfile'},
        'eviction_policy': {'key': 'evictionPolicy', 'type': 'str'},
        'diagnostics_profile': {'key': 'diagnosticsProfile', 'type': 'VMDiagnosticsProfile'},
        'hardware_profile': {'key': 'hardwareProfile', 'type': 'VMHardwareProfile'},
        'host': {'key': 'host', 'type': 'SubResource'},
        'instance_view': {'key': 'instanceView', 'type': 'VMInstanceView'},
        'license_type': {'key': 'licenseType', 'type': 'str'},
        'network_profile': {'key': 'networkProfile', 'type': 'VMNetworkProfile'},
        'os_profile': {'key': 'osProfile', 'type': 'VMOSProfile'},
        'priority': {'key': 'priority', 'type': 'str'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'str'},
        'proximity_placement_group': {'key': 'proximityPlacementGroup', 'type': 'SubResource'},
        'storage_profile': {'key': 'storageProfile', 'type': 'VMStorageSettings'},
        'virtual_machine_scale_set': {'key': 'virtualMachineScaleSet', 'type': 'SubResource'},
        'vm_id': {'key': 'vmId', 'type': 'str'},
    }


class VirtualMachine(AzureObjectBase):

    _attribute_map = resource_map(
        identity={'key': 'identity', 'type': 'ResourceIdentity'},
        plan={'key': 'plan', 'type': 'ResourcePlan'},
        properties={'key': 'properties', 'type': 'VMProperties'},
        resources={'key': 'resources', 'type': '[VMExtension]'},
        zones={'key': 'zones', 'type': '[str]'})


class VirtualMachineSize(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'max_data_disk_count': {'key': 'maxDataDiskCount', 'type': 'int'},
        'memory_in_mb': {'key': 'memoryInMB', 'type': 'int'},
        'number_of_cores': {'key': 'numberOfCores', 'type': 'int'},
        'os_disk_size_in_mb': {'key': 'osDiskSizeInMB', 'type': 'int'},
        'resource_disk_size_in_mb': {'key': 'resourceDiskSizeInMB', 'type': 'int'},
    }


# Skus and usage

class ComputeResourceSkuLocationInfo(ArmModel):

    _attribute_map = {
        'location': {'key': 'location', 'type': 'str'},
        'zones': {'key': 'zones', 'type': '[str]'},
    }


class ComputeResourceSku(ArmModel):

    _attribute_map = {
        'resource_type': {'key': 'resourceType', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'size': {'key': 'size', 'type': 'str'},
        'tier': {'key': 'tier', 'type': 'str'},
        'family': {'key': 'family', 'type': 'str'},
        'locations': {'key': 'locations', 'type': '[str]'},
        'location_info': {'key': 'locationInfo', 'type': '[ComputeResourceSkuLocationInfo]'},
    }


class ComputeUsage(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'LocalizedStringValue'},
        'unit': {'key': 'unit', 'type': 'str'},
        'limit': {'key': 'limit', 'type': 'long'},
        'current_value': {'key': 'currentValue', 'type': 'int'},
    }


class ComputeLogAnalyticsRequest(ArmModel):

    _attribute_map = {
        'blob_container_sas_uri': {'key': 'blobContainerSasUri', 'type': 'str'},
        'from_time': {'key': 'fromTime', 'type': 'iso-8601'},
        'to_time': {'key': 'toTime', 'type': 'iso-8601'},
        'group_by_operation_name': {'key': 'groupByOperationName', 'type': 'bool'},
        'group_by_resource_name': {'key': 'groupByResourceName', 'type': 'bool'},
        'group_by_throttle_policy': {'key': 'groupByThrottlePolicy', 'type': 'bool'},
        'interval_length': {'key': 'intervalLength', 'type': 'ComputeLogAnalyticsIntervals'},
    }


class ComputeLogAnalyticsResponseProperties(ArmModel):

    _attribute_map = {
        'output': {'key': 'output', 'type': 'str'},
    }


class ComputeLogAnalyticsResponse(ArmModel):

    _attribute_map = {
        'properties': {'key': 'properties', 'type': 'ComputeLogAnalyticsResponseProperties'},
    }
