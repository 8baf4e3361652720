# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import enum

from arm_client.models import ArmModel, AzureObjectBase, resource_map


class AccountStatus(str, enum.Enum):
    AVAILABLE = 'available'
    UNAVAILABLE = 'unavailable'


class ActiveDirectoryServiceOptions(str, enum.Enum):
    AADDS = 'AADDS'
    AD = 'AD'
    NONE = 'None'


class BlobRestoreProgress(str, enum.Enum):
    COMPLETE = 'Complete'
    FAILED = 'Failed'
    IN_PROGRESS = 'InProgress'


class EncryptionServiceKeyType(str, enum.Enum):
    ACCOUNT = 'Account'
    SERVICE = 'Service'


class GeoReplicationStatus(str, enum.Enum):
    BOOTSTRAP = 'Bootstrap'
    LIVE = 'Live'
    UNAVAILABLE = 'Unavailable'


class LargeFilesShareState(str, enum.Enum):
    DISABLED = 'Disabled'
    ENABLED = 'Enabled'


class StorageProvisioningState(str, enum.Enum):
    CREATING = 'Creating'
    DELETING = 'Deleting'
    FAILED = 'Failed'
    SUCCEEDED = 'Succeeded'
    RESOLVING_DNS = 'ResolvingDNS'


class RoutingChoice(str, enum.Enum):
    INTERNET_ROUTING = 'InternetRouting'
    MICROSOFT_ROUTING = 'MicrosoftRouting'


class RuleAction(str, enum.Enum):
    DENY = 'Deny'
    ALLOW = 'Allow'


class StorageAccessTier(str, enum.Enum):
    COOL = 'Cool'
    HOT = 'Hot'


class StorageAccountKind(str, enum.Enum):
    BLOB_STORAGE = 'BlobStorage'
    BLOCK_BLOB_STORAGE = 'BlockBlobStorage'
    FILE_STORAGE = 'FileStorage'
    STORAGE = 'Storage'
    STORAGE_V2 = 'StorageV2'
    DEFAULT = 'StorageV2'


class StorageAccountSkuNames(str, enum.Enum):
    PREMIUM_LRS = 'Premium_LRS'
    PREMIUM_ZRS = 'Premium_ZRS'
    STANDARD_GRS = 'Standard_GRS'
    STANDARD_GZRS = 'Standard_GZRS'
    STANDARD_LRS = 'Standard_LRS'
    STANDARD_RAGRS = 'Standard_RAGRS'
    STANDARD_RAGZRS = 'Standard_RAGZRS'
    STANDARD_ZRS = 'Standard_ZRS'
    DEFAULT = 'Standard_LRS'


class StorageAccountSkuTiers(str, enum.Enum):
    PREMIUM = 'Premium'
    STANDARD = 'Standard'


class VirtualNetworkRuleState(str, enum.Enum):
    DEPROVISIONING = 'deprovisioning'
    FAILED = 'failed'
    NETWORK_SOURCE_DELETED = 'networkSourceDeleted'
    PROVISIONING = 'provisioning'
    SUCCEEDED = 'succeeded'


class StorageNameAvailabilityRequest(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('type', 'Microsoft.Storage/storageAccounts')
        super(StorageNameAvailabilityRequest, self).__init__(**kwargs)


class StorageNameAvailabilityResponse(ArmModel):

    _attribute_map = {
        'name_available': {'key': 'nameAvailable', 'type': 'bool'},
        'reason': {'key': 'reason', 'type': 'str'},
        'message': {'key': 'message', 'type': 'str'},
    }


class ActiveDirectoryProperties(ArmModel):

    _attribute_map = {
        'azure_storage_sid': {'key': 'azureStorageSid', 'type': 'str'},
        'domain_guid': {'key': 'domainGuid', 'type': 'str'},
        'domain_name': {'key': 'domainName', 'type': 'str'},
        'domain_sid': {'key': 'domainSid', 'type': 'str'},
        'forest_name': {'key': 'forestName', 'type': 'str'},
        'net_bios_domain_name': {'key': 'netBiosDomainName', 'type': 'str'},
    }


class AzureFilesIdentityBasedAuthentication(ArmModel):

    _attribute_map = {
        'active_directory_properties': {
            'key': 'activeDirectoryProperties', 'type': 'ActiveDirectoryProperties'},
        'directory_service_options': {
            'key': 'directoryServiceOptions', 'type': 'ActiveDirectoryServiceOptions'},
    }


class BlobRestoreRange(ArmModel):

    _attribute_map = {
        'start_range': {'key': 'startRange', 'type': 'str'},
        'end_range': {'key': 'endRange', 'type': 'str'},
    }


class BlobRestoreParameters(ArmModel):

    _attribute_map = {
        'blob_ranges': {'key': 'blobRanges', 'type': '[BlobRestoreRange]'},
        'time_to_restore': {'key': 'timeToRestore', 'type': 'str'},
    }


class BlobRestoreStatus(ArmModel):

    _attribute_map = {
        'failure_reason': {'key': 'failureReason', 'type': 'str'},
        'parameters': {'key': 'parameters', 'type': 'BlobRestoreParameters'},
        'restore_id': {'key': 'restoreId', 'type': 'str'},
        'status': {'key': 'status', 'type': 'BlobRestoreProgress'},
    }


class BlobStorageCustomDomain(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'use_sub_domain_name': {'key': 'useSubDomainName', 'type': 'bool'},
    }


class EncryptionService(ArmModel):

    _attribute_map = {
        'enabled': {'key': 'enabled', 'type': 'bool'},
        'key_type': {'key': 'keyType', 'type': 'EncryptionServiceKeyType'},
        'last_enabled_time': {'key': 'lastEnabledTime', 'type': 'iso-8601'},
    }


class EncryptableServices(ArmModel):

    _attribute_map = {
        'blob': {'key': 'blob', 'type': 'EncryptionService'},
        'file': {'key': 'file', 'type': 'EncryptionService'},
        'queue': {'key': 'queue', 'type': 'EncryptionService'},
        'table': {'key': 'table', 'type': 'EncryptionService'},
    }


class StorageKeyVaultProperties(ArmModel):

    _attribute_map = {
        'current_versioned_key_identifier': {
            'key': 'currentVersionedKeyIdentifier', 'type': 'str'},
        'key_name': {'key': 'keyname', 'type': 'str'},
        'key_vault_uri': {'key': 'keyvaulturi', 'type': 'str'},
        'key_version': {'key': 'keyversion', 'type': 'str'},
        'last_key_rotation_timestamp': {'key': 'lastKeyRotationTimestamp', 'type': 'iso-8601'},
    }


class StorageAccountEncryption(ArmModel):

    _attribute_map = {
        'key_source': {'key': 'keySource', 'type': 'str'},
        'key_vault_properties': {
            'key': 'keyvaultproperties', 'type': 'StorageKeyVaultProperties'},
        'services': {'key': 'services', 'type': 'EncryptableServices'},
    }


class GeoReplicationStatistics(ArmModel):

    _attribute_map = {
        'can_failover': {'key': 'canFailover', 'type': 'bool'},
        'last_sync_time': {'key': 'lastSyncTime', 'type': 'iso-8601'},
        'status': {'key': 'status', 'type': 'GeoReplicationStatus'},
    }


class IPRule(ArmModel):

    _attribute_map = {
        'action': {'key': 'action', 'type': 'RuleAction'},
        'value': {'key': 'value', 'type': 'str'},
    }


class VirtualNetworkRule(ArmModel):

    _attribute_map = {
        'action': {'key': 'action', 'type': 'RuleAction'},
        'id': {'key': 'id', 'type': 'str'},
        'state': {'key': 'state', 'type': 'VirtualNetworkRuleState'},
    }


class NetworkRuleSet(ArmModel):

    _attribute_map = {
        'bypass': {'key': 'bypass', 'type': 'str'},
        'default_action': {'key': 'defaultAction', 'type': 'RuleAction'},
        'ip_rules': {'key': 'ipRules', 'type': '[IPRule]'},
        'virtual_network_rules': {'key': 'virtualNetworkRules', 'type': '[VirtualNetworkRule]'},
    }


class PrivateLinkServiceConnectionState(ArmModel):

    _attribute_map = {
        'action_required': {'key': 'actionRequired', 'type': 'str'},
        'description': {'key': 'description', 'type': 'str'},
        'status': {'key': 'status', 'type': 'str'},
    }


class PrivateEndpointConnectionProperties(ArmModel):

    _attribute_map = {
        'private_endpoint': {'key': 'privateEndpoint', 'type': 'SubResource'},
        'private_link_service_connection_state': {
            'key': 'privateLinkServiceConnectionState',
            'type': 'PrivateLinkServiceConnectionState'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'str'},
    }


class PrivateEndpointConnection(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'properties': {'key': 'properties', 'type': 'PrivateEndpointConnectionProperties'},
    }


class RoutingPreference(ArmModel):

    _attribute_map = {
        'publish_internet_endpoints': {'key': 'publishInternetEndpoints', 'type': 'bool'},
        'publish_microsoft_endpoints': {'key': 'publishMicrosoftEndpoints', 'type': 'bool'},
        'routing_choice': {'key': 'routingChoice', 'type': 'RoutingChoice'},
    }


class StorageAccountEndpointUris(ArmModel):

    _attribute_map = {
        'blob': {'key': 'blob', 'type': 'str'},
        'dfs': {'key': 'dfs', 'type': 'str'},
        'file': {'key': 'file', 'type': 'str'},
        'queue': {'key': 'queue', 'type': 'str'},
        'table': {'key': 'table', 'type': 'str'},
        'web': {'key': 'web', 'type': 'str'},
    }


class StorageAccountEndpoints(StorageAccountEndpointUris):

    _attribute_map = dict(
        StorageAccountEndpointUris._attribute_map,
        internet_endpoints={'key': 'internetEndpoints', 'type': 'StorageAccountEndpointUris'},
        microsoft_endpoints={'key': 'microsoftEndpoints', 'type': 'StorageAccountEndpointUris'})


class StorageAccountSku(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'StorageAccountSkuNames'},
        'tier': {'key': 'tier', 'type': 'StorageAccountSkuTiers'},
    }


class StorageAccountCreateRequestProperties(ArmModel):

    _attribute_map = {
        'access_tier': {'key': 'accessTier', 'type': 'StorageAccessTier'},
        'azure_files_identity_based_authentication': {
            'key': 'azureFilesIdentityBasedAuthentication',
            'type': 'AzureFilesIdentityBasedAuthentication'},
        'custom_domain': {'key': 'customDomain', 'type': 'BlobStorageCustomDomain'},
        'encryption': {'key': 'encryption', 'type': 'StorageAccountEncryption'},
        'is_hns_enabled': {'key': 'isHnsEnabled', 'type': 'bool'},
        'large_file_shares_state': {'key': 'largeFileSharesState', 'type': 'LargeFilesShareState'},
        'network_acls': {'key': 'networkAcls', 'type': 'NetworkRuleSet'},
        'routing_preference': {'key': 'routingPreference', 'type': 'RoutingPreference'},
        'supports_https_traffic_only': {'key': 'supportsHttpsTrafficOnly', 'type': 'bool'},
    }


class StorageAccountCreateRequest(ArmModel):

    _attribute_map = {
        'identity': {'key': 'identity', 'type': 'ResourceIdentity'},
        'kind': {'key': 'kind', 'type': 'StorageAccountKind'},
        'sku': {'key': 'sku', 'type': 'StorageAccountSku'},
        'location': {'key': 'location', 'type': 'str'},
        'tags': {'key': 'tags', 'type': '{str}'},
        'properties': {'key': 'properties', 'type': 'StorageAccountCreateRequestProperties'},
    }


class StorageAccountProperties(ArmModel):

    _attribute_map = {
        'access_tier': {'key': 'accessTier', 'type': 'StorageAccessTier'},
        'azure_files_identity_based_authentication': {
            'key': 'azureFilesIdentityBasedAuthentication',
            'type': 'AzureFilesIdentityBasedAuthentication'},
        'blob_restore_status': {'key': 'blobRestoreStatus', 'type': 'BlobRestoreStatus'},
        'creation_time': {'key': 'creationTime', 'type': 'iso-8601'},
        'custom_domain': {'key': 'customDomain', 'type': 'BlobStorageCustomDomain'},
        'encryption': {'key': 'encryption', 'type': 'StorageAccountEncryption'},
        'failover_in_progress': {'key': 'failoverInProgress', 'type': 'bool'},
        'geo_replication_stats': {'key': 'geoReplicationStats', 'type': 'GeoReplicationStatistics'},
        'is_hns_enabled': {'key': 'isHnsEnabled', 'type': 'bool'},
        'large_file_shares_state': {'key': 'largeFileSharesState', 'type': 'LargeFilesShareState'},
        'last_geo_failover_time': {'key': 'lastGeoFailoverTime', 'type': 'iso-8601'},
        'network_acls': {'key': 'networkAcls', 'type': 'NetworkRuleSet'},
        'primary_endpoints': {'key': 'primaryEndpoints', 'type': 'StorageAccountEndpoints'},
        'primary_location': {'key': 'primaryLocation', 'type': 'str'},
        'private_endpoint_connections': {
            'key': 'privateEndpointConnections', 'type': '[PrivateEndpointConnection]'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'StorageProvisioningState'},
        'routing_preference': {'key': 'routingPreference', 'type': 'RoutingPreference'},
        'secondary_endpoints': {'key': 'secondaryEndpoints', 'type': 'StorageAccountEndpoints'},
        'secondary_location': {'key': 'secondaryLocation', 'type': 'str'},
        'status_of_primary': {'key': 'statusOfPrimary', 'type': 'AccountStatus'},
        'status_of_secondary': {'key': 'statusOfSecondary', 'type': 'AccountStatus'},
        'supports_https_traffic_only': {'key': 'supportsHttpsTrafficOnly', 'type': 'bool'},
    }


class StorageAccount(AzureObjectBase):

    _attribute_map = resource_map(
        identity={'key': 'identity', 'type': 'ResourceIdentity'},
        kind={'key': 'kind', 'type': 'StorageAccountKind'},
        sku={'key': 'sku', 'type': 'StorageAccountSku'},
        properties={'key': 'properties', 'type': 'StorageAccountProperties'})


class StorageAccountKey(ArmModel):

    _attribute_map = {
        'key_name': {'key': 'keyName', 'type': 'str'},
        'value': {'key': 'value', 'type': 'str'},
        'permissions': {'key': 'permissions', 'type': 'str'},
    }


class StorageAccountKeyResponse(ArmModel):

    _attribute_map = {
        'keys': {'key': 'keys', 'type': '[StorageAccountKey]'},
    }

    def get_key(self, key_name):
        for key in self.keys or ():
            if key.key_name == key_name:
                return key.value
        return None


class BlobRestoreRequest(ArmModel):

    _attribute_map = {
        'time_to_restore': {'key': 'timeToRestore', 'type': 'str'},
        'blob_ranges': {'key': 'blobRanges', 'type': '[BlobRestoreRange]'},
    }


class SASTokenRequest(ArmModel):
    """Account SAS parameters, see ListAccountSas."""

    _attribute_map = {
        'key_to_sign': {'key': 'keyToSign', 'type': 'str'},
        'signed_expiry': {'key': 'signedExpiry', 'type': 'iso-8601'},
        'signed_start': {'key': 'signedStart', 'type': 'iso-8601'},
        'signed_ip': {'key': 'signedIp', 'type': 'str'},
        'signed_protocol': {'key': 'signedProtocol', 'type': 'str'},
        'signed_permission': {'key': 'signedPermission', 'type': 'str'},
        'signed_resource_types': {'key': 'signedResourceTypes', 'type': 'str'},
        'signed_services': {'key': 'signedServices', 'type': 'str'},
    }


class SASServiceTokenRequest(SASTokenRequest):

    _attribute_map = dict(
        SASTokenRequest._attribute_map,
        canonicalized_resource={'key': 'canonicalizedResource', 'type': 'str'},
        start_pk={'key': 'startPk', 'type': 'str'},
        end_pk={'key': 'endPk', 'type': 'str'},
        start_rk={'key': 'startRk', 'type': 'str'},
        end_rk={'key': 'endRk', 'type': 'str'},
        rscc={'key': 'rscc', 'type': 'str'},
        rscd={'key': 'rscd', 'type': 'str'},
        rsce={'key': 'rsce', 'type': 'str'},
        rscl={'key': 'rscl', 'type': 'str'},
        rsct={'key': 'rsct', 'type': 'str'})


class SASTokenResponse(ArmModel):

    _attribute_map = {
        'account_sas_token': {'key': 'accountSasToken', 'type': 'str'},
    }


class SASServiceTokenResponse(ArmModel):

    _attribute_map = {
        'service_sas_token': {'key': 'serviceSasToken', 'type': 'str'},
    }
