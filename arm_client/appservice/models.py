# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
App Service shapes: certificate orders, domains, plans, web apps and
runtime stacks.
"""
import enum

from arm_client.models import ArmModel, AzureObjectBase, resource_map


# Certificate orders

class CertificateKeySizes(enum.IntEnum):
    SZ_2048 = 2048
    SZ_4096 = 4096
    DEFAULT = 2048


class CertificateValidityPeriod(enum.IntEnum):
    ONE_YEAR = 1
    TWO_YEARS = 2
    THREE_YEARS = 3
    DEFAULT = 1


class CertificateOrderStatus(str, enum.Enum):
    NOT_SUBMITTED = 'NotSubmitted'
    CANCELED = 'Canceled'
    DENIED = 'Denied'
    EXPIRED = 'Expired'
    ISSUED = 'Issued'
    PENDING_REKEY = 'PendingRekey'
    PENDING_ISSUANCE = 'PendingIssuance'
    PENDING_REVOCATION = 'PendingRevocation'
    REVOKED = 'Revoked'
    UNUSED = 'Unused'
    DEFAULT = 'NotSubmitted'


class CertificateSignatureAlgorithmNames(str, enum.Enum):
    SHA256_RSA = 'sha256RSA'


class CertificateTypes(str, enum.Enum):
    STANDARD_DOMAIN_VALIDATED_SSL = 'StandardDomainValidatedSsl'
    STANDARD_DOMAIN_VALIDATED_WILDCARD_SSL = 'StandardDomainValidatedWildCardSsl'


class KeyVaultSecretStatus(str, enum.Enum):
    UNKNOWN = 'Unknown'
    AZURE_SERVICE_UNAUTHORIZED_TO_ACCESS_KEY_VAULT = 'AzureServiceUnauthorizedToAccessKeyVault'
    CERTIFICATE_ORDER_FAILED = 'CertificateOrderFailed'
    EXTERNAL_PRIVATE_KEY = 'ExternalPrivateKey'
    INITIALIZED = 'Initialized'
    KEY_VAULT_DOES_NOT_EXIST = 'KeyVaultDoesNotExist'
    KEY_VAULT_SECRET_DOES_NOT_EXIST = 'KeyVaultSecretDoesNotExist'
    OPERATION_NOT_PERMITTED_ON_KEY_VAULT = 'OperationNotPermittedOnKeyVault'
    SUCCEEDED = 'Succeeded'
    UNKNOWN_ERROR = 'UnknownError'
    WAITING_ON_CERTIFICATE_ORDER = 'WaitingOnCertificateOrder'


class CertificateInfo(ArmModel):

    _attribute_map = {
        'issuer': {'key': 'issuer', 'type': 'str'},
        'not_after': {'key': 'notAfter', 'type': 'iso-8601'},
        'not_before': {'key': 'notBefore', 'type': 'iso-8601'},
        'raw_data': {'key': 'rawData', 'type': 'str'},
        'serial_number': {'key': 'serialNumber', 'type': 'str'},
        'signature_algorithm': {
            'key': 'signatureAlgorithm', 'type': 'CertificateSignatureAlgorithmNames'},
        'subject': {'key': 'subject', 'type': 'str'},
        'thumbprint': {'key': 'thumbprint', 'type': 'str'},
        'version': {'key': 'version', 'type': 'int'},
    }


class CertificateOrderRequestProperties(ArmModel):

    _attribute_map = {
        'auto_renew': {'key': 'autoRenew', 'type': 'bool'},
        'distinguished_name': {'key': 'distinguishedName', 'type': 'str'},
        'key_size': {'key': 'keySize', 'type': 'int'},
        'product_type': {'key': 'productType', 'type': 'CertificateTypes'},
        'validity_in_years': {'key': 'validityInYears', 'type': 'int'},
        'csr': {'key': 'csr', 'type': 'str'},
    }


class CertificateOrderRequest(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'CertificateOrderRequestProperties'})


class CertificateOrderDetailProperties(ArmModel):

    _attribute_map = {
        'not_renewable_reasons': {
            'key': 'appServiceCertificateNotRenewableReasons', 'type': '[str]'},
        'auto_renew': {'key': 'autoRenew', 'type': 'bool'},
        'distinguished_name': {'key': 'distinguishedName', 'type': 'str'},
        'key_size': {'key': 'keySize', 'type': 'int'},
        'product_type': {'key': 'productType', 'type': 'CertificateTypes'},
        'validity_in_years': {'key': 'validityInYears', 'type': 'int'},
        'csr': {'key': 'csr', 'type': 'str'},
        'domain_verification_token': {'key': 'domainVerificationToken', 'type': 'str'},
        'expiration_time': {'key': 'expirationTime', 'type': 'iso-8601'},
        'is_private_key_external': {'key': 'isPrivateKeyExternal', 'type': 'bool'},
        'last_certificate_issuance_time': {
            'key': 'lastCertificateIssuanceTime', 'type': 'iso-8601'},
        'next_auto_renewal_time_stamp': {'key': 'nextAutoRenewalTimeStamp', 'type': 'iso-8601'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'ProvisioningStatus'},
        'serial_number': {'key': 'serialNumber', 'type': 'str'},
        'status': {'key': 'status', 'type': 'CertificateOrderStatus'},
        'intermediate': {'key': 'intermediate', 'type': 'CertificateInfo'},
        'root': {'key': 'root', 'type': 'CertificateInfo'},
        'signed_certificate': {'key': 'signedCertificate', 'type': 'CertificateInfo'},
    }


class CertificateOrderDetail(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'CertificateOrderDetailProperties'})


class CertificateEmailProperties(ArmModel):

    _attribute_map = {
        'email_id': {'key': 'emailId', 'type': 'str'},
        'time_stamp': {'key': 'timeStamp', 'type': 'iso-8601'},
    }


class CertificateEmail(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'kind': {'key': 'kind', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'properties': {'key': 'properties', 'type': 'CertificateEmailProperties'},
    }


class CertificateIssueRequestProperties(ArmModel):

    _attribute_map = {
        'key_vault_id': {'key': 'keyVaultId', 'type': 'str'},
        'key_vault_secret_name': {'key': 'keyVaultSecretName', 'type': 'str'},
    }


class CertificateIssueRequest(ArmModel):

    _attribute_map = {
        'kind': {'key': 'kind', 'type': 'str'},
        'location': {'key': 'location', 'type': 'str'},
        'properties': {'key': 'properties', 'type': 'CertificateIssueRequestProperties'},
        'tags': {'key': 'tags', 'type': '{str}'},
    }


class IssuedCertificateProperties(ArmModel):

    _attribute_map = {
        'key_vault_id': {'key': 'keyVaultId', 'type': 'str'},
        'key_vault_secret_name': {'key': 'keyVaultSecretName', 'type': 'str'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'KeyVaultSecretStatus'},
    }


class IssuedCertificate(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'IssuedCertificateProperties'})


# Name availability

class AppServiceResourceTypes(str, enum.Enum):
    HOSTING_ENVIRONMENT = 'HostingEnvironment'
    SITE = 'Site'
    SLOT = 'Slot'
    PUBLISHING_USER = 'PublishingUser'
    MICROSOFT_WEB_HOSTING_ENVIRONMENTS = 'Microsoft.Web/hostingEnvironments'
    MICROSOFT_WEB_SITES = 'Microsoft.Web/sites'
    MICROSOFT_WEB_SITES_SLOTS = 'Microsoft.Web/sites/slots'
    MICROSOFT_WEB_PUBLISHING_USERS = 'Microsoft.Web/publishingUsers'


class ResourceNameUnavailabilityReason(str, enum.Enum):
    INVALID = 'Invalid'
    ALREADY_EXISTS = 'AlreadyExists'


class ResourceNameAvailabilityRequest(ArmModel):

    _attribute_map = {
        'is_fqdn': {'key': 'isFqdn', 'type': 'bool'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'AppServiceResourceTypes'},
    }


class ResourceNameAvailabilityResponse(ArmModel):

    _attribute_map = {
        'message': {'key': 'message', 'type': 'str'},
        'name_available': {'key': 'nameAvailable', 'type': 'bool'},
        'reason': {'key': 'reason', 'type': 'ResourceNameUnavailabilityReason'},
    }


# Deleted apps

class DeletedWebAppProperties(ArmModel):

    _attribute_map = {
        'deleted_site_id': {'key': 'deletedSiteId', 'type': 'int'},
        'deleted_site_name': {'key': 'deletedSiteName', 'type': 'str'},
        'deleted_timestamp': {'key': 'deletedTimestamp', 'type': 'iso-8601'},
        'geo_region_name': {'key': 'geoRegionName', 'type': 'str'},
        'kind': {'key': 'kind', 'type': 'str'},
        'resource_group': {'key': 'resourceGroup', 'type': 'str'},
        'slot': {'key': 'slot', 'type': 'str'},
        'subscription': {'key': 'subscription', 'type': 'str'},
    }


class DeletedWebApp(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'DeletedWebAppProperties'})


# Domains

class DomainRegistrationDnsType(str, enum.Enum):
    AZURE_DNS = 'AzureDns'
    DEFAULT_DOMAIN_REGISTRAR_DNS = 'DefaultDomainRegistrarDns'


class DomainRegistrationStatus(str, enum.Enum):
    ACTIVE = 'Active'
    AWAITING = 'Awaiting'
    CANCELLED = 'Cancelled'
    CONFISCATED = 'Confiscated'
    DISABLED = 'Disabled'
    EXCLUDED = 'Excluded'
    EXPIRED = 'Expired'
    FAILED = 'Failed'
    HELD = 'Held'
    LOCKED = 'Locked'
    PARKED = 'Parked'
    PENDING = 'Pending'
    RESERVED = 'Reserved'
    REVERTED = 'Reverted'
    SUSPENDED = 'Suspended'
    TRANSFERRED = 'Transferred'
    UNKNOWN = 'Unknown'
    UNLOCKED = 'Unlocked'
    UNPARKED = 'Unparked'
    UPDATED = 'Updated'


class AvailableResultDomainType(str, enum.Enum):
    REGULAR = 'Regular'
    SOFT_DELETED = 'SoftDeleted'


class AppServiceDomainProperties(ArmModel):

    _attribute_map = {
        'registration_status': {'key': 'registrationStatus', 'type': 'DomainRegistrationStatus'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'ProvisioningStatus'},
        'name_servers': {'key': 'nameServers', 'type': '[str]'},
        'privacy': {'key': 'privacy', 'type': 'bool'},
        'created_time': {'key': 'createdTime', 'type': 'iso-8601'},
        'expiration_time': {'key': 'expirationTime', 'type': 'iso-8601'},
        'auto_renew': {'key': 'autoRenew', 'type': 'bool'},
        'ready_for_dns_record_management': {
            'key': 'readyForDnsRecordManagement', 'type': 'bool'},
        'managed_host_names': {'key': 'managedHostNames', 'type': '[str]'},
        'domain_not_renewable_reasons': {'key': 'domainNotRenewableReasons', 'type': '[str]'},
        'dns_type': {'key': 'dnsType', 'type': 'DomainRegistrationDnsType'},
        'dns_zone_id': {'key': 'dnsZoneId', 'type': 'str'},
    }


class AppServiceDomain(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'AppServiceDomainProperties'})


class AvailabilityResult(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'available': {'key': 'available', 'type': 'bool'},
        'domain_type': {'key': 'domainType', 'type': 'AvailableResultDomainType'},
    }


class DomainPurchaseConsent(ArmModel):

    _attribute_map = {
        'agreed_at': {'key': 'agreedAt', 'type': 'iso-8601'},
        'agreed_by': {'key': 'agreedBy', 'type': 'str'},
        'agreement_keys': {'key': 'agreementKeys', 'type': '[str]'},
    }


class DomainRegistrationContactAddress(ArmModel):

    _attribute_map = {
        'address1': {'key': 'address1', 'type': 'str'},
        'address2': {'key': 'address2', 'type': 'str'},
        'city': {'key': 'city', 'type': 'str'},
        'state': {'key': 'state', 'type': 'str'},
        'country': {'key': 'country', 'type': 'str'},
        'postal_code': {'key': 'postalCode', 'type': 'str'},
    }


class DomainRegistrationContact(ArmModel):

    _attribute_map = {
        'name_first': {'key': 'nameFirst', 'type': 'str'},
        'name_last': {'key': 'nameLast', 'type': 'str'},
        'name_middle': {'key': 'nameMiddle', 'type': 'str'},
        'organization': {'key': 'organization', 'type': 'str'},
        'job_title': {'key': 'jobTitle', 'type': 'str'},
        'phone': {'key': 'phone', 'type': 'str'},
        'email': {'key': 'email', 'type': 'str'},
        'address_mailing': {'key': 'addressMailing', 'type': 'DomainRegistrationContactAddress'},
    }


class RegistrationRequestProperties(ArmModel):

    _attribute_map = {
        'auto_renew': {'key': 'autoRenew', 'type': 'bool'},
        'consent': {'key': 'consent', 'type': 'DomainPurchaseConsent'},
        'contact_admin': {'key': 'contactAdmin', 'type': 'DomainRegistrationContact'},
        'contact_billing': {'key': 'contactBilling', 'type': 'DomainRegistrationContact'},
        'contact_registrant': {'key': 'contactRegistrant', 'type': 'DomainRegistrationContact'},
        'contact_tech': {'key': 'contactTech', 'type': 'DomainRegistrationContact'},
        'dns_type': {'key': 'dnsType', 'type': 'DomainRegistrationDnsType'},
        'dns_zone_id': {'key': 'dnsZoneId', 'type': 'str'},
    }


class DomainTransferRequestProperties(RegistrationRequestProperties):

    _attribute_map = dict(
        RegistrationRequestProperties._attribute_map,
        auth_code={'key': 'authCode', 'type': 'str'})


class RegistrationRequest(ArmModel):

    _attribute_map = {
        'location': {'key': 'location', 'type': 'str'},
        'properties': {'key': 'properties', 'type': 'RegistrationRequestProperties'},
        'tags': {'key': 'tags', 'type': '{str}'},
    }


class DomainTransferRequest(ArmModel):

    _attribute_map = {
        'location': {'key': 'location', 'type': 'str'},
        'properties': {'key': 'properties', 'type': 'DomainTransferRequestProperties'},
        'tags': {'key': 'tags', 'type': '{str}'},
    }


class DomainNameRecommendationRequest(ArmModel):

    _attribute_map = {
        'keywords': {'key': 'keywords', 'type': 'str'},
        'max_domain_recommendations': {'key': 'maxDomainRecommendations', 'type': 'int'},
    }


class TopLevelAgreement(ArmModel):

    _attribute_map = {
        'agreement_key': {'key': 'agreementKey', 'type': 'str'},
        'title': {'key': 'title', 'type': 'str'},
        'content': {'key': 'content', 'type': 'str'},
        'url': {'key': 'url', 'type': 'str'},
    }


class TopLevelAgreementRequest(ArmModel):

    _attribute_map = {
        'for_transfer': {'key': 'forTransfer', 'type': 'bool'},
        'include_privacy': {'key': 'includePrivacy', 'type': 'bool'},
    }


class TopLevelDomainProperties(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'privacy': {'key': 'privacy', 'type': 'bool'},
    }


class TopLevelDomain(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'TopLevelDomainProperties'})


# Plans

class AppServicePlanScaleType(str, enum.Enum):
    NONE = 'None'
    MANUAL = 'Manual'
    AUTOMATIC = 'Automatic'
    DEFAULT = 'None'


class AppServicePlanStatus(str, enum.Enum):
    READY = 'Ready'
    CREATING = 'Creating'
    PENDING = 'Pending'
    DEFAULT = 'Ready'


class HostingEnvironmentProfile(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
    }


class AppServicePlanProperties(ArmModel):

    _attribute_map = {
        'free_offer_expiration_time': {'key': 'freeOfferExpirationTime', 'type': 'iso-8601'},
        'geo_region': {'key': 'geoRegion', 'type': 'str'},
        'hosting_environment_profile': {
            'key': 'hostingEnvironmentProfile', 'type': 'HostingEnvironmentProfile'},
        'hyper_v': {'key': 'hyperV', 'type': 'bool'},
        'is_spot': {'key': 'isSpot', 'type': 'bool'},
        'maximum_elastic_worker_count': {'key': 'maximumElasticWorkerCount', 'type': 'int'},
        'maximum_number_of_workers': {'key': 'maximumNumberOfWorkers', 'type': 'int'},
        'number_of_sites': {'key': 'numberOfSites', 'type': 'int'},
        'per_site_scaling': {'key': 'perSiteScaling', 'type': 'bool'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'ProvisioningStatus'},
        'reserved': {'key': 'reserved', 'type': 'bool'},
        'resource_group': {'key': 'resourceGroup', 'type': 'str'},
        'spot_expiration_time': {'key': 'spotExpirationTime', 'type': 'iso-8601'},
        'status': {'key': 'status', 'type': 'AppServicePlanStatus'},
        'subscription': {'key': 'subscription', 'type': 'str'},
        'target_worker_count': {'key': 'targetWorkerCount', 'type': 'int'},
        'target_worker_size_id': {'key': 'targetWorkerSizeId', 'type': 'int'},
        'worker_tier_name': {'key': 'workerTierName', 'type': 'str'},
        'number_of_workers': {'key': 'numberOfWorkers', 'type': 'int'},
        'current_worker_size': {'key': 'currentWorkerSize', 'type': 'str'},
        'current_number_of_workers': {'key': 'currentNumberOfWorkers', 'type': 'int'},
        'web_space': {'key': 'webSpace', 'type': 'str'},
        'plan_name': {'key': 'planName', 'type': 'str'},
        'compute_mode': {'key': 'computeMode', 'type': 'str'},
        'site_mode': {'key': 'siteMode', 'type': 'str'},
        'kind': {'key': 'kind', 'type': 'str'},
    }


class AppServicePlan(AzureObjectBase):

    _attribute_map = resource_map(
        kind={'key': 'kind', 'type': 'str'},
        properties={'key': 'properties', 'type': 'AppServicePlanProperties'},
        sku={'key': 'sku', 'type': 'ResourceSku'})

    @property
    def is_linux(self):
        return bool(self.properties and self.properties.reserved)


class AppServicePlanSkuCapacity(ArmModel):

    _attribute_map = {
        'minimum': {'key': 'minimum', 'type': 'int'},
        'maximum': {'key': 'maximum', 'type': 'int'},
        'elastic_maximum': {'key': 'elasticMaximum', 'type': 'int'},
        'default': {'key': 'default', 'type': 'int'},
        'scale_type': {'key': 'scaleType', 'type': 'AppServicePlanScaleType'},
    }


class AppServicePlanSku(ArmModel):

    _attribute_map = {
        'resource_type': {'key': 'resourceType', 'type': 'str'},
        'sku': {'key': 'sku', 'type': 'ResourceSku'},
        'capacity': {'key': 'capacity', 'type': 'AppServicePlanSkuCapacity'},
    }


# Runtime stacks

class ApplicationStackMinorVersion(ArmModel):

    _attribute_map = {
        'display_version': {'key': 'displayVersion', 'type': 'str'},
        'runtime_version': {'key': 'runtimeVersion', 'type': 'str'},
        'is_default': {'key': 'isDefault', 'type': 'bool'},
        'is_remote_debugging_enabled': {'key': 'isRemoteDebuggingEnabled', 'type': 'bool'},
    }


class ApplicationStackMajorVersion(ArmModel):

    _attribute_map = {
        'display_version': {'key': 'displayVersion', 'type': 'str'},
        'runtime_version': {'key': 'runtimeVersion', 'type': 'str'},
        'is_default': {'key': 'isDefault', 'type': 'bool'},
        'application_insights': {'key': 'applicationInsights', 'type': 'bool'},
        'is_deprecated': {'key': 'isDeprecated', 'type': 'bool'},
        'is_hidden': {'key': 'isHidden', 'type': 'bool'},
        'is_preview': {'key': 'isPreview', 'type': 'bool'},
        'minor_versions': {'key': 'minorVersions', 'type': '[ApplicationStackMinorVersion]'},
    }


class ApplicationStackProperties(ArmModel):

    _attribute_map = {
        'dependency': {'key': 'dependency', 'type': 'str'},
        'display': {'key': 'display', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'major_versions': {'key': 'majorVersions', 'type': '[ApplicationStackMajorVersion]'},
    }


class ApplicationStack(AzureObjectBase):

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': 'ApplicationStackProperties'})

    def simplified(self):
        """Every minor version of the stack as flat runtime entries."""
        runtimes = []
        properties = self.properties or ApplicationStackProperties()
        for major in properties.major_versions or ():
            for minor in major.minor_versions or ():
                runtimes.append(AppRuntimeStackSimplified(
                    internal_name=properties.name,
                    major_version=major.runtime_version or major.display_version,
                    minor_version=minor.runtime_version or minor.display_version,
                    is_remote_debugging_enabled=bool(minor.is_remote_debugging_enabled),
                    is_app_insights_supported=bool(major.application_insights)))
        return runtimes


class AppRuntimeStackSimplified:

    def __init__(self, internal_name, major_version, minor_version,
                 is_remote_debugging_enabled=False, is_app_insights_supported=False):
        self.internal_name = internal_name
        self.major_version = major_version
        self.minor_version = minor_version
        self.is_remote_debugging_enabled = is_remote_debugging_enabled
        self.is_app_insights_supported = is_app_insights_supported

    def __repr__(self):
        return 'AppRuntimeStackSimplified(%s %s/%s)' % (
            self.internal_name, self.major_version, self.minor_version)


# Web apps

class AppServiceWebAppAvailabilityState(str, enum.Enum):
    NORMAL = 'Normal'
    LIMITED = 'Limited'
    DISASTER_RECOVERY_MODE = 'DisasterRecoveryMode'
    DEFAULT = 'Normal'


class AppServiceRedundancyMode(str, enum.Enum):
    NONE = 'None'
    MANUAL = 'Manual'
    GEO_REDUNDANT = 'GeoRedundant'
    FAILOVER = 'Failover'
    ACTIVE_ACTIVE = 'ActiveActive'
    DEFAULT = 'None'


class AppServiceWebAppUsageStatus(str, enum.Enum):
    NORMAL = 'Normal'
    EXCEEDED = 'Exceeded'
    DEFAULT = 'Normal'


class AppServiceWebAppHostType(str, enum.Enum):
    STANDARD = 'Standard'
    REPOSITORY = 'Repository'
    DEFAULT = 'Standard'


class AppServiceWebAppSslType(str, enum.Enum):
    DISABLED = 'Disabled'
    SNI_ENABLED = 'SniEnabled'
    IP_BASED_ENABLED = 'IpBasedEnabled'
    DEFAULT = 'Disabled'


class AppServiceFtpServiceState(str, enum.Enum):
    ALL_ALLOWED = 'AllAllowed'
    FTPS_ONLY = 'FtpsOnly'
    DISABLED = 'Disabled'
    DEFAULT = 'AllAllowed'


class AppServiceWebAppManagedPipelineMode(str, enum.Enum):
    INTEGRATED = 'Integrated'
    CLASSIC = 'Classic'
    DEFAULT = 'Integrated'


class AppServiceWebAppAutoHealActionType(str, enum.Enum):
    LOG_EVENT = 'LogEvent'
    RECYCLE = 'Recycle'
    CUSTOM_ACTION = 'CustomAction'
    DEFAULT = 'LogEvent'


class AppServiceWebAppConnectionStringType(str, enum.Enum):
    CUSTOM = 'Custom'
    API_HUB = 'ApiHub'
    DOC_DB = 'DocDb'
    EVENT_HUB = 'EventHub'
    MY_SQL = 'MySql'
    NOTIFICATION_HUB = 'NotificationHub'
    POSTGRE_SQL = 'PostgreSQL'
    REDIS_CACHE = 'RedisCache'
    SQL_AZURE = 'SQLAzure'
    SQL_SERVER = 'SQLServer'
    SERVICE_BUS = 'ServiceBus'
    DEFAULT = 'Custom'


class AppServiceWebAppSiteLoadBalancingType(str, enum.Enum):
    LEAST_REQUESTS = 'LeastRequests'
    LEAST_RESPONSE_TIME = 'LeastResponseTime'
    REQUEST_HASH = 'RequestHash'
    WEIGHTED_ROUND_ROBIN = 'WeightedRoundRobin'
    WEIGHTED_TOTAL_TRAFFIC = 'WeightedTotalTraffic'


class AppServiceWebAppSourceControlType(str, enum.Enum):
    NONE = 'None'
    BITBUCKET_GIT = 'BitbucketGit'
    BITBUCKET_HG = 'BitbucketHg'
    CODE_PLEX_GIT = 'CodePlexGit'
    CODE_PLEX_HG = 'CodePlexHg'
    DROPBOX = 'Dropbox'
    EXTERNAL_GIT = 'ExternalGit'
    EXTERNAL_HG = 'ExternalHg'
    GIT_HUB = 'GitHub'
    LOCAL_GIT = 'LocalGit'
    ONE_DRIVE = 'OneDrive'
    TFS = 'Tfs'
    VSO = 'VSO'
    VSTSRM = 'VSTSRM'


class IpSecurityRestrictionFilterType(str, enum.Enum):
    DEFAULT = 'Default'
    XFF_PROXY = 'XffProxy'


class AppServiceDebugEngineVersion(str, enum.Enum):
    VS2017 = 'VS2017'
    VS2018 = 'VS2018'
    VS2019 = 'VS2019'


class AppServiceHostNameSslState(ArmModel):

    _attribute_map = {
        'host_type': {'key': 'hostType', 'type': 'AppServiceWebAppHostType'},
        'name': {'key': 'name', 'type': 'str'},
        'ssl_state': {'key': 'sslState', 'type': 'AppServiceWebAppSslType'},
        'thumbprint': {'key': 'thumbprint', 'type': 'str'},
        'to_update': {'key': 'toUpdate', 'type': 'bool'},
        'virtual_ip': {'key': 'virtualIP', 'type': 'str'},
    }


class AppServiceWebAppCloningInformation(ArmModel):

    _attribute_map = {
        'app_settings_overrides': {'key': 'appSettingsOverrides', 'type': '{str}'},
        'clone_custom_host_names': {'key': 'cloneCustomHostNames', 'type': 'bool'},
        'clone_source_control': {'key': 'cloneSourceControl', 'type': 'bool'},
        'configure_load_balancing': {'key': 'configureLoadBalancing', 'type': 'bool'},
        'correlation_id': {'key': 'correlationId', 'type': 'str'},
        'hosting_environment': {'key': 'hostingEnvironment', 'type': 'str'},
        'overwrite': {'key': 'overwrite', 'type': 'bool'},
        'source_web_app_id': {'key': 'sourceWebAppId', 'type': 'str'},
        'source_web_app_location': {'key': 'sourceWebAppLocation', 'type': 'str'},
        'traffic_manager_profile_id': {'key': 'trafficManagerProfileId', 'type': 'str'},
        'traffic_manager_profile_name': {'key': 'trafficManagerProfileName', 'type': 'str'},
    }


class AppServiceWebAppSlotSwapStatus(ArmModel):

    _attribute_map = {
        'destination_slot_name': {'key': 'destinationSlotName', 'type': 'str'},
        'source_slot_name': {'key': 'sourceSlotName', 'type': 'str'},
        'timestamp_utc': {'key': 'timestampUtc', 'type': 'iso-8601'},
    }


class AppServiceWebAppApiDefinition(ArmModel):

    _attribute_map = {
        'url': {'key': 'url', 'type': 'str'},
    }


class AzureApiManagementConfiguration(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
    }


class AppServiceWebAppAutoHealCustomAction(ArmModel):

    _attribute_map = {
        'exe': {'key': 'exe', 'type': 'str'},
        'parameters': {'key': 'parameters', 'type': 'str'},
    }


class AppServiceWebAppAutoHealAction(ArmModel):

    _attribute_map = {
        'action_type': {'key': 'actionType', 'type': 'AppServiceWebAppAutoHealActionType'},
        'min_process_execution_time': {'key': 'minProcessExecutionTime', 'type': 'str'},
        'custom_action': {'key': 'customAction', 'type': 'AppServiceWebAppAutoHealCustomAction'},
    }


class AppServiceWebAppAutoHealRequestBasedTrigger(ArmModel):

    _attribute_map = {
        'count': {'key': 'count', 'type': 'int'},
        'time_interval': {'key': 'timeInterval', 'type': 'str'},
    }


class AppServiceWebAppAutoHealSlowRequestTrigger(ArmModel):

    _attribute_map = {
        'count': {'key': 'count', 'type': 'int'},
        'time_interval': {'key': 'timeInterval', 'type': 'str'},
        'time_taken': {'key': 'timeTaken', 'type': 'str'},
    }


class AppServiceWebAppAutoHealStatusCodeTrigger(ArmModel):

    _attribute_map = {
        'count': {'key': 'count', 'type': 'int'},
        'time_interval': {'key': 'timeInterval', 'type': 'str'},
        'status': {'key': 'status', 'type': 'int'},
        'sub_status': {'key': 'subStatus', 'type': 'int'},
        'win32_status': {'key': 'win32Status', 'type': 'int'},
    }


class AppServiceWebAppAutoHealTrigger(ArmModel):

    _attribute_map = {
        'private_bytes_in_kb': {'key': 'privateBytesInKB', 'type': 'int'},
        'requests': {'key': 'requests', 'type': 'AppServiceWebAppAutoHealRequestBasedTrigger'},
        'slow_requests': {
            'key': 'slowRequests', 'type': 'AppServiceWebAppAutoHealSlowRequestTrigger'},
        'status_codes': {
            'key': 'statusCodes', 'type': '[AppServiceWebAppAutoHealStatusCodeTrigger]'},
    }


class AppServiceWebAppAutoHealRule(ArmModel):

    _attribute_map = {
        'actions': {'key': 'actions', 'type': 'AppServiceWebAppAutoHealAction'},
        'triggers': {'key': 'triggers', 'type': 'AppServiceWebAppAutoHealTrigger'},
    }


class AppServiceWebAppConnectionString(ArmModel):

    _attribute_map = {
        'type': {'key': 'type', 'type': 'AppServiceWebAppConnectionStringType'},
        'name': {'key': 'name', 'type': 'str'},
        'connection_string': {'key': 'connectionString', 'type': 'str'},
    }


class AppServiceWebAppRampUpRule(ArmModel):

    _attribute_map = {
        'action_host_name': {'key': 'actionHostName', 'type': 'str'},
        'change_decision_callback_url': {'key': 'changeDecisionCallbackUrl', 'type': 'str'},
        'change_interval_in_minutes': {'key': 'changeIntervalInMinutes', 'type': 'int'},
        'change_step': {'key': 'changeStep', 'type': 'float'},
        'max_reroute_percentage': {'key': 'maxReroutePercentage', 'type': 'float'},
        'min_reroute_percentage': {'key': 'minReroutePercentage', 'type': 'float'},
        'name': {'key': 'name', 'type': 'str'},
        'reroute_percentage': {'key': 'reroutePercentage', 'type': 'float'},
    }


class AppServiceWebAppExperiment(ArmModel):

    _attribute_map = {
        'ramp_up_rules': {'key': 'rampUpRules', 'type': '[AppServiceWebAppRampUpRule]'},
    }


class AppServiceWebAppHandlerMapping(ArmModel):

    _attribute_map = {
        'arguments': {'key': 'arguments', 'type': 'str'},
        'extension': {'key': 'extension', 'type': 'str'},
        'script_processor': {'key': 'scriptProcessor', 'type': 'str'},
    }


class AppServiceWebAppIPSecurityRestriction(ArmModel):

    _attribute_map = {
        'action': {'key': 'action', 'type': 'str'},
        'description': {'key': 'description', 'type': 'str'},
        'ip_address': {'key': 'ipAddress', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'priority': {'key': 'priority', 'type': 'int'},
        'subnet_mask': {'key': 'subnetMask', 'type': 'str'},
        'subnet_traffic_tag': {'key': 'subnetTrafficTag', 'type': 'int'},
        'tag': {'key': 'tag', 'type': 'IpSecurityRestrictionFilterType'},
        'vnet_subnet_resource_id': {'key': 'vnetSubnetResourceId', 'type': 'str'},
        'vnet_traffic_tag': {'key': 'vnetTrafficTag', 'type': 'int'},
    }


class AppServiceWebAppSiteLimits(ArmModel):

    _attribute_map = {
        'max_disk_size_in_mb': {'key': 'maxDiskSizeInMb', 'type': 'long'},
        'max_memory_in_mb': {'key': 'maxMemoryInMb', 'type': 'long'},
        'max_percentage_cpu': {'key': 'maxPercentageCpu', 'type': 'float'},
    }


class AppServiceWebAppSiteMachineKey(ArmModel):

    _attribute_map = {
        'decryption': {'key': 'decryption', 'type': 'str'},
        'decryption_key': {'key': 'decryptionKey', 'type': 'str'},
        'validation': {'key': 'validation', 'type': 'str'},
        'validation_key': {'key': 'validationKey', 'type': 'str'},
    }


class AppServiceWebAppPushNotificationsProperties(ArmModel):

    _attribute_map = {
        'dynamic_tags_json': {'key': 'dynamicTagsJson', 'type': 'str'},
        'is_push_enabled': {'key': 'isPushEnabled', 'type': 'bool'},
        'tag_whitelist_json': {'key': 'tagWhitelistJson', 'type': 'str'},
        'tags_requiring_auth': {'key': 'tagsRequiringAuth', 'type': 'str'},
    }


class AppServiceWebAppPushNotificationsSettings(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'kind': {'key': 'kind', 'type': 'str'},
        'properties': {
            'key': 'properties', 'type': 'AppServiceWebAppPushNotificationsProperties'},
    }


class AppServiceWebAppVirtualAppDirectory(ArmModel):

    _attribute_map = {
        'physical_path': {'key': 'physicalPath', 'type': 'str'},
        'virtual_path': {'key': 'virtualPath', 'type': 'str'},
    }


class AppServiceWebAppVirtualApplication(ArmModel):

    _attribute_map = {
        'physical_path': {'key': 'physicalPath', 'type': 'str'},
        'preload_enabled': {'key': 'preloadEnabled', 'type': 'bool'},
        'virtual_path': {'key': 'virtualPath', 'type': 'str'},
        'virtual_directories': {
            'key': 'virtualDirectories', 'type': '[AppServiceWebAppVirtualAppDirectory]'},
    }


class AppServiceWebAppConfiguration(ArmModel):

    _attribute_map = {
        'always_on': {'key': 'alwaysOn', 'type': 'bool'},
        'api_definition': {'key': 'apiDefinition', 'type': 'AppServiceWebAppApiDefinition'},
        'api_management_config': {
            'key': 'apiManagementConfig', 'type': 'AzureApiManagementConfiguration'},
        'app_command_line': {'key': 'appCommandLine', 'type': 'str'},
        'app_settings': {'key': 'appSettings', 'type': '[AzureNameValuePair]'},
        'auto_heal_enabled': {'key': 'autoHealEnabled', 'type': 'bool'},
        'auto_heal_rules': {'key': 'autoHealRules', 'type': 'AppServiceWebAppAutoHealRule'},
        'auto_swap_slot_name': {'key': 'autoSwapSlotName', 'type': 'str'},
        'connection_strings': {
            'key': 'connectionStrings', 'type': '[AppServiceWebAppConnectionString]'},
        'cors': {'key': 'cors', 'type': 'CorsPolicy'},
        'default_documents': {'key': 'defaultDocuments', 'type': '[str]'},
        'detailed_error_logging_enabled': {'key': 'detailedErrorLoggingEnabled', 'type': 'bool'},
        'document_root': {'key': 'documentRoot', 'type': 'str'},
        'experiments': {'key': 'experiments', 'type': 'AppServiceWebAppExperiment'},
        'ftps_state': {'key': 'ftpsState', 'type': 'AppServiceFtpServiceState'},
        'handler_mappings': {'key': 'handlerMappings', 'type': '[AppServiceWebAppHandlerMapping]'},
        'health_check_path': {'key': 'healthCheckPath', 'type': 'str'},
        'http20_enabled': {'key': 'http20Enabled', 'type': 'bool'},
        'http_logging_enabled': {'key': 'httpLoggingEnabled', 'type': 'bool'},
        'ip_security_restrictions': {
            'key': 'ipSecurityRestrictions', 'type': '[AppServiceWebAppIPSecurityRestriction]'},
        'java_container': {'key': 'javaContainer', 'type': 'str'},
        'java_container_version': {'key': 'javaContainerVersion', 'type': 'str'},
        'java_version': {'key': 'javaVersion', 'type': 'str'},
        'limits': {'key': 'limits', 'type': 'AppServiceWebAppSiteLimits'},
        'linux_fx_version': {'key': 'linuxFxVersion', 'type': 'str'},
        'load_balancing': {'key': 'loadBalancing', 'type': 'AppServiceWebAppSiteLoadBalancingType'},
        'local_my_sql_enabled': {'key': 'localMySqlEnabled', 'type': 'bool'},
        'logs_directory_size_limit': {'key': 'logsDirectorySizeLimit', 'type': 'int'},
        'machine_key': {'key': 'machineKey', 'type': 'AppServiceWebAppSiteMachineKey'},
        'managed_pipeline_mode': {
            'key': 'managedPipelineMode', 'type': 'AppServiceWebAppManagedPipelineMode'},
        'managed_service_identity_id': {'key': 'managedServiceIdentityId', 'type': 'int'},
        'min_tls_version': {'key': 'minTlsVersion', 'type': 'TlsVersion'},
        'net_framework_version': {'key': 'netFrameworkVersion', 'type': 'str'},
        'node_version': {'key': 'nodeVersion', 'type': 'str'},
        'number_of_workers': {'key': 'numberOfWorkers', 'type': 'int'},
        'php_version': {'key': 'phpVersion', 'type': 'str'},
        'pre_warmed_instance_count': {'key': 'preWarmedInstanceCount', 'type': 'int'},
        'publishing_username': {'key': 'publishingUsername', 'type': 'str'},
        'push': {'key': 'push', 'type': 'AppServiceWebAppPushNotificationsSettings'},
        'python_version': {'key': 'pythonVersion', 'type': 'str'},
        'remote_debugging_enabled': {'key': 'remoteDebuggingEnabled', 'type': 'bool'},
        'remote_debugging_version': {'key': 'remoteDebuggingVersion', 'type': 'str'},
        'request_tracing_enabled': {'key': 'requestTracingEnabled', 'type': 'bool'},
        'request_tracing_expiration_time': {
            'key': 'requestTracingExpirationTime', 'type': 'iso-8601'},
        'scm_ip_security_restrictions': {
            'key': 'scmIpSecurityRestrictions', 'type': '[AppServiceWebAppIPSecurityRestriction]'},
        'scm_ip_security_restrictions_use_main': {
            'key': 'scmIpSecurityRestrictionsUseMain', 'type': 'bool'},
        'scm_type': {'key': 'scmType', 'type': 'AppServiceWebAppSourceControlType'},
        'tracing_options': {'key': 'tracingOptions', 'type': 'str'},
        'use32_bit_worker_process': {'key': 'use32BitWorkerProcess', 'type': 'bool'},
        'virtual_applications': {
            'key': 'virtualApplications', 'type': '[AppServiceWebAppVirtualApplication]'},
        'vnet_name': {'key': 'vnetName', 'type': 'str'},
        'web_sockets_enabled': {'key': 'webSocketsEnabled', 'type': 'bool'},
        'windows_fx_version': {'key': 'windowsFxVersion', 'type': 'str'},
        'x_managed_service_identity_id': {'key': 'xManagedServiceIdentityId', 'type': 'int'},
        'metadata': {'key': 'metadata', 'type': '[AzureNameValuePair]'},
    }


class AppServiceWebAppProperties(ArmModel):

    _attribute_map = {
        'availability_state': {
            'key': 'availabilityState', 'type': 'AppServiceWebAppAvailabilityState'},
        'client_affinity_enabled': {'key': 'clientAffinityEnabled', 'type': 'bool'},
        'client_cert_enabled': {'key': 'clientCertEnabled', 'type': 'bool'},
        'client_cert_exclusion_paths': {'key': 'clientCertExclusionPaths', 'type': 'str'},
        'cloning_info': {'key': 'cloningInfo', 'type': 'AppServiceWebAppCloningInformation'},
        'container_size': {'key': 'containerSize', 'type': 'int'},
        'daily_memory_time_quota': {'key': 'dailyMemoryTimeQuota', 'type': 'int'},
        'default_host_name': {'key': 'defaultHostName', 'type': 'str'},
        'enabled': {'key': 'enabled', 'type': 'bool'},
        'enabled_host_names': {'key': 'enabledHostNames', 'type': '[str]'},
        'host_name_ssl_states': {'key': 'hostNameSslStates', 'type': '[AppServiceHostNameSslState]'},
        'host_names': {'key': 'hostNames', 'type': '[str]'},
        'host_names_disabled': {'key': 'hostNamesDisabled', 'type': 'bool'},
        'hosting_environment_profile': {
            'key': 'hostingEnvironmentProfile', 'type': 'HostingEnvironmentProfile'},
        'https_only': {'key': 'httpsOnly', 'type': 'bool'},
        'in_progress_operation_id': {'key': 'inProgressOperationId', 'type': 'str'},
        'is_default_container': {'key': 'isDefaultContainer', 'type': 'bool'},
        'last_modified_time_utc': {'key': 'lastModifiedTimeUtc', 'type': 'iso-8601'},
        'max_number_of_workers': {'key': 'maxNumberOfWorkers', 'type': 'int'},
        'outbound_ip_addresses': {'key': 'outboundIpAddresses', 'type': 'str'},
        'possible_outbound_ip_addresses': {'key': 'possibleOutboundIpAddresses', 'type': 'str'},
        'redundancy_mode': {'key': 'redundancyMode', 'type': 'AppServiceRedundancyMode'},
        'repository_site_name': {'key': 'repositorySiteName', 'type': 'str'},
        'reserved': {'key': 'reserved', 'type': 'bool'},
        'resource_group': {'key': 'resourceGroup', 'type': 'str'},
        'scm_site_also_stopped': {'key': 'scmSiteAlsoStopped', 'type': 'bool'},
        'server_farm_id': {'key': 'serverFarmId', 'type': 'str'},
        'site_config': {'key': 'siteConfig', 'type': 'AppServiceWebAppConfiguration'},
        'slot_swap_status': {'key': 'slotSwapStatus', 'type': 'AppServiceWebAppSlotSwapStatus'},
        'state': {'key': 'state', 'type': 'str'},
        'suspended_till': {'key': 'suspendedTill', 'type': 'iso-8601'},
        'target_swap_slot': {'key': 'targetSwapSlot', 'type': 'str'},
        'traffic_manager_host_names': {'key': 'trafficManagerHostNames', 'type': '[str]'},
        'usage_state': {'key': 'usageState', 'type': 'AppServiceWebAppUsageStatus'},
    }


class AppServiceWebApp(AzureObjectBase):

    _attribute_map = resource_map(
        kind={'key': 'kind', 'type': 'str'},
        identity={'key': 'identity', 'type': 'ResourceIdentity'},
        properties={'key': 'properties', 'type': 'AppServiceWebAppProperties'})
