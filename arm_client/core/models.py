# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client.models import ArmModel, AzureObjectBase
from arm_client.utils import StringUtils


class ResourceGroup(AzureObjectBase):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'location': {'key': 'location', 'type': 'str'},
        'tags': {'key': 'tags', 'type': '{str}'},
        'managed_by': {'key': 'managedBy', 'type': 'str'},
        'properties': {'key': 'properties', 'type': '{str}'},
    }

    @property
    def provisioning_state(self):
        return (self.properties or {}).get('provisioningState')


class SubscriptionPolicy(ArmModel):

    _attribute_map = {
        'location_placement_id': {'key': 'locationPlacementId', 'type': 'str'},
        'quota_id': {'key': 'quotaId', 'type': 'str'},
        'spending_limit': {'key': 'spendingLimit', 'type': 'str'},
    }


class ManagedByTenant(ArmModel):

    _attribute_map = {
        'tenant_id': {'key': 'tenantId', 'type': 'str'},
    }


class Subscription(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'authorization_source': {'key': 'authorizationSource', 'type': 'str'},
        'subscription_id': {'key': 'subscriptionId', 'type': 'str'},
        'tenant_id': {'key': 'tenantId', 'type': 'str'},
        'display_name': {'key': 'displayName', 'type': 'str'},
        'state': {'key': 'state', 'type': 'str'},
        'managed_by_tenants': {'key': 'managedByTenants', 'type': '[ManagedByTenant]'},
        'subscription_policies': {'key': 'subscriptionPolicies', 'type': 'SubscriptionPolicy'},
    }


class SubscriptionLocation(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'display_name': {'key': 'displayName', 'type': 'str'},
        'longitude': {'key': 'longitude', 'type': 'float'},
        'latitude': {'key': 'latitude', 'type': 'float'},
        'subscription_id': {'key': 'subscriptionId', 'type': 'str'},
    }


class ProviderResourceType(ArmModel):

    _attribute_map = {
        'type': {'key': 'resourceType', 'type': 'str'},
        'capabilities': {'key': 'capabilities', 'type': 'str'},
        'api_versions': {'key': 'apiVersions', 'type': '[str]'},
        'default_api_version': {'key': 'defaultApiVersion', 'type': 'str'},
        'locations': {'key': 'locations', 'type': '[str]'},
    }

    def supports_location(self, location):
        if StringUtils.is_blank(location):
            raise ValueError('location is required')
        return any(StringUtils.equal(loc, location) for loc in self.locations or ())

    def has_capability(self, capability):
        if StringUtils.is_blank(capability):
            raise ValueError('capability is required')
        return bool(self.capabilities) and \
            capability.lower() in self.capabilities.lower()

    def get_latest_version(self):
        """Highest api version, api versions sort as plain strings."""
        if self.api_versions:
            return sorted(self.api_versions)[-1]
        if not StringUtils.is_blank(self.default_api_version):
            return self.default_api_version
        raise ValueError('Could not determine an available version for %s' % self.type)


class ResourceProvider(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'namespace': {'key': 'namespace', 'type': 'str'},
        'registration_state': {'key': 'registrationState', 'type': 'str'},
        'registration_policy': {'key': 'registrationPolicy', 'type': 'str'},
        'resource_types': {'key': 'resourceTypes', 'type': '[ProviderResourceType]'},
        'metadata': {'key': 'metadata', 'type': '{object}'},
    }

    @property
    def is_registered(self):
        return StringUtils.equal(self.registration_state, 'Registered')

    def get_resource_type(self, type):
        for resource_type in self.resource_types or ():
            if StringUtils.equal(resource_type.type, type):
                return resource_type
        return None


class TagValue(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'value': {'key': 'tagValue', 'type': 'str'},
        'count': {'key': 'count', 'type': 'ResultValueAggregate'},
    }


class Tag(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'name': {'key': 'tagName', 'type': 'str'},
        'count': {'key': 'count', 'type': 'ResultValueAggregate'},
        'values': {'key': 'values', 'type': '[TagValue]'},
    }


class Tenant(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'tenant_id': {'key': 'tenantId', 'type': 'str'},
        'display_name': {'key': 'displayName', 'type': 'str'},
        'country_code': {'key': 'countryCode', 'type': 'str'},
        'tenant_category': {'key': 'tenantCategory', 'type': 'str'},
        'domains': {'key': 'domains', 'type': '[str]'},
    }

    @property
    def primary_domain_name(self):
        """The initial ``*.onmicrosoft.com`` domain of the tenant."""
        for domain in self.domains or ():
            if domain.endswith('.onmicrosoft.com') and \
                    not domain.endswith('.mail.onmicrosoft.com'):
                return domain
        return None


class GenericResource(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'kind': {'key': 'kind', 'type': 'str'},
        'location': {'key': 'location', 'type': 'str'},
        'managed_by': {'key': 'managedBy', 'type': 'str'},
        'identity': {'key': 'identity', 'type': 'ResourceIdentity'},
        'plan': {'key': 'plan', 'type': 'ResourcePlan'},
        'sku': {'key': 'sku', 'type': 'ResourceSku'},
        'properties': {'key': 'properties', 'type': '{object}'},
        'tags': {'key': 'tags', 'type': '{str}'},
    }


class ResourceMoveRequest(ArmModel):

    _attribute_map = {
        'target_resource_group': {'key': 'targetResourceGroup', 'type': 'str'},
        'resources': {'key': 'resources', 'type': '[str]'},
    }


class ExportTemplateOptions:
    """What to include when exporting a resource group template."""

    def __init__(self, include_default_values_for_parameters=True, include_comments=True,
                 retain_existing_resource_names=False, do_not_parameterize=False,
                 include_all_resources=True, resource_names=None):
        self.include_default_values_for_parameters = include_default_values_for_parameters
        self.include_comments = include_comments
        self.retain_existing_resource_names = retain_existing_resource_names
        self.do_not_parameterize = do_not_parameterize
        self.include_all_resources = include_all_resources
        self.resource_names = resource_names

    def options(self):
        flags = []
        if self.include_default_values_for_parameters:
            flags.append('IncludeParameterDefaultValue')
        if self.include_comments:
            flags.append('IncludeComments')
        if self.do_not_parameterize:
            flags.append('SkipAllParameterization')
        elif self.retain_existing_resource_names:
            flags.append('SkipResourceNameParameterization')
        return ','.join(flags)

    def resources(self):
        if self.include_all_resources:
            return ['*']
        if not self.resource_names:
            raise ValueError(
                'resource_names must be specified when include_all_resources is false')
        return list(self.resource_names)

    def to_request(self):
        return {'options': self.options(), 'resources': self.resources()}


class CorsPolicy(ArmModel):

    _attribute_map = {
        'allowed_origins': {'key': 'allowedOrigins', 'type': '[str]'},
        'support_credentials': {'key': 'supportCredentials', 'type': 'bool'},
    }

    def __init__(self, **kwargs):
        super(CorsPolicy, self).__init__(**kwargs)
        if self.allowed_origins is None:
            self.allowed_origins = []
        if self.support_credentials is None:
            self.support_credentials = False

    def with_origins(self, *origins):
        # a wildcard already admits everything
        if '*' not in self.allowed_origins:
            for origin in origins:
                if origin not in self.allowed_origins:
                    self.allowed_origins.append(origin)
        return self

    def with_all_origins(self):
        self.allowed_origins = ['*']
        return self

    def with_credentials_allowed(self):
        self.support_credentials = True
        return self
