# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Shared ARM shapes.

Every DTO is an msrest ``Model`` whose ``_attribute_map`` is the table
from python attribute to json key and wire type. Enums are ``str``
enums whose values are the wire strings, referenced by class name in
those tables. Class names are unique across the package so any table
can refer to any model.
"""
import enum
import json
import sys

from msrest.serialization import Model

from arm_client import constants
from arm_client.utils import StringUtils

PACKAGE = __name__.split('.')[0]


_registry = {'modules': None, 'models': {}}


def model_registry():
    """Name to class map of every model and enum loaded from the package.

    Rebuilt only when the set of loaded package modules changes.
    """
    modules = frozenset(
        name for name, module in list(sys.modules.items())
        if module is not None and (name == PACKAGE or name.startswith(PACKAGE + '.')))
    if modules == _registry['modules']:
        return _registry['models']
    registry = {}
    for name in sorted(modules):
        for value in list(vars(sys.modules[name]).values()):
            if isinstance(value, type) and issubclass(value, (Model, enum.Enum)):
                registry.setdefault(value.__name__, value)
    _registry['modules'], _registry['models'] = modules, registry
    return registry


class ArmModel(Model):
    """Base of all ARM DTOs, unset attributes read as None."""

    def __init__(self, **kwargs):
        for attr in self._attribute_map:
            if attr != 'additional_properties':
                setattr(self, attr, None)
        super(ArmModel, self).__init__(**kwargs)

    @classmethod
    def _infer_class_models(cls):
        return model_registry()

    @classmethod
    def loads(cls, body):
        """Deserialize a json document, None for an empty one."""
        if StringUtils.is_blank(body):
            return None
        return cls.deserialize(json.loads(body))

    @classmethod
    def deserialize_list(cls, values):
        return [cls.deserialize(v) for v in values or ()]

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.serialize(keep_readonly=True))


class ProvisioningStatus(str, enum.Enum):
    SUCCEEDED = 'Succeeded'
    IN_PROGRESS = 'InProgress'
    FAILED = 'Failed'
    DELETING = 'Deleting'
    CANCELED = 'Canceled'
    DEFAULT = 'Succeeded'


class OSTypeNames(str, enum.Enum):
    WINDOWS = 'Windows'
    LINUX = 'Linux'
    DEFAULT = 'Windows'


class TlsVersion(str, enum.Enum):
    V1_0 = '1.0'
    V1_1 = '1.1'
    V1_2 = '1.2'


class ResourceIdentityType(str, enum.Enum):
    USER_ASSIGNED = 'UserAssigned'
    SYSTEM_ASSIGNED = 'SystemAssigned'


def resource_map(**extra):
    """The attribute map of a tracked resource plus the given entries."""
    attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'location': {'key': 'location', 'type': 'str'},
        'tags': {'key': 'tags', 'type': '{str}'},
    }
    attribute_map.update(extra)
    return attribute_map


class AzureObjectBase(ArmModel):

    _attribute_map = resource_map()


class ExtensibleAzureObject(AzureObjectBase):
    """A resource whose shape is only partly known.

    Values are looked up first in ``properties`` and then in the
    remainder of the document that did not map to a known attribute.
    The remainder is written back out on serialization.
    """

    _attribute_map = resource_map(
        properties={'key': 'properties', 'type': '{object}'},
        additional_properties={'key': '', 'type': '{object}'})

    def __init__(self, **kwargs):
        super(ExtensibleAzureObject, self).__init__(**kwargs)
        if self.properties is None:
            self.properties = {}

    def get_value(self, key, default=None):
        if key in self.properties:
            return self.properties[key]
        return self.additional_properties.get(key, default)

    def set_value(self, key, value):
        """Update a known property or remainder entry. None removes it.

        Keys not present in either place are added to the remainder.
        """
        if value is None:
            self.remove_value(key)
        elif key in self.properties:
            self.properties[key] = value
        else:
            self.additional_properties[key] = value

    def remove_value(self, key):
        if key in self.properties:
            del self.properties[key]
        else:
            self.additional_properties.pop(key, None)

    def __contains__(self, key):
        return key in self.properties or key in self.additional_properties


class SubResource(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
    }


class UriResource(ArmModel):

    _attribute_map = {
        'uri': {'key': 'uri', 'type': 'str'},
    }


class ResourceSku(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'tier': {'key': 'tier', 'type': 'str'},
        'family': {'key': 'family', 'type': 'str'},
        'size': {'key': 'size', 'type': 'str'},
        'capacity': {'key': 'capacity', 'type': 'int'},
        'model': {'key': 'model', 'type': 'str'},
    }


class ResourcePlan(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'product': {'key': 'product', 'type': 'str'},
        'promotion_code': {'key': 'promotionCode', 'type': 'str'},
        'publisher': {'key': 'publisher', 'type': 'str'},
        'version': {'key': 'version', 'type': 'str'},
    }


class UserAssignedResourceIdentity(ArmModel):

    _attribute_map = {
        'principal_id': {'key': 'principalId', 'type': 'str'},
        'client_id': {'key': 'clientId', 'type': 'str'},
    }


class ResourceIdentity(ArmModel):
    """Managed identities of a resource.

    ARM carries the identity kinds as one comma separated ``type``
    string, exposed here as the ``assigned_identities`` list.
    """

    _attribute_map = {
        'principal_id': {'key': 'principalId', 'type': 'str'},
        'tenant_id': {'key': 'tenantId', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'user_assigned_identities': {
            'key': 'userAssignedIdentities', 'type': '{UserAssignedResourceIdentity}'},
    }

    @property
    def assigned_identities(self):
        found = []
        for name in (self.type or '').split(','):
            for kind in ResourceIdentityType:
                if StringUtils.equal(name, kind.value) and kind not in found:
                    found.append(kind)
        return found

    @assigned_identities.setter
    def assigned_identities(self, kinds):
        ordered = []
        for kind in kinds:
            kind = ResourceIdentityType(kind)
            if kind not in ordered:
                ordered.append(kind)
        self.type = ', '.join(k.value for k in ordered) or None

    @property
    def has_system_assigned_identity(self):
        return ResourceIdentityType.SYSTEM_ASSIGNED in self.assigned_identities

    @property
    def has_user_assigned_identity(self):
        return ResourceIdentityType.USER_ASSIGNED in self.assigned_identities

    @staticmethod
    def _identity_key(identity_name):
        return constants.USER_ASSIGNED_IDENTITY_PREFIX + identity_name

    @classmethod
    def create_system_identity(cls, tenant_id, principal_id):
        identity = cls(tenant_id=str(tenant_id), principal_id=str(principal_id))
        identity.assigned_identities = [ResourceIdentityType.SYSTEM_ASSIGNED]
        return identity

    @classmethod
    def create_user_assigned_identity(cls, identity_name, client_id, principal_id):
        if StringUtils.is_blank(identity_name):
            raise ValueError('identity_name is required')
        identity = cls(user_assigned_identities={
            cls._identity_key(identity_name): UserAssignedResourceIdentity(
                client_id=str(client_id), principal_id=str(principal_id))})
        identity.assigned_identities = [ResourceIdentityType.USER_ASSIGNED]
        return identity

    def add_system_identity(self, tenant_id, principal_id):
        if self.has_system_assigned_identity:
            raise ValueError('Resource already contains a system assigned identity.')
        self.tenant_id = str(tenant_id)
        self.principal_id = str(principal_id)
        self.assigned_identities = self.assigned_identities + [
            ResourceIdentityType.SYSTEM_ASSIGNED]

    def add_user_assigned_identity(self, identity_name, client_id, principal_id):
        if StringUtils.is_blank(identity_name):
            raise ValueError('identity_name is required')
        key = self._identity_key(identity_name)
        existing = self.user_assigned_identities or {}
        if any(StringUtils.equal(k, key) for k in existing):
            raise ValueError(
                'Collection already contains identity with the name %s' % identity_name)
        existing[key] = UserAssignedResourceIdentity(
            client_id=str(client_id), principal_id=str(principal_id))
        self.user_assigned_identities = existing
        if not self.has_user_assigned_identity:
            self.assigned_identities = self.assigned_identities + [
                ResourceIdentityType.USER_ASSIGNED]

    def clear_system_identity(self):
        if self.has_system_assigned_identity:
            self.tenant_id = None
            self.principal_id = None
            self.assigned_identities = [
                k for k in self.assigned_identities
                if k != ResourceIdentityType.SYSTEM_ASSIGNED]

    def clear_user_assigned_identities(self):
        if self.has_user_assigned_identity:
            self.user_assigned_identities = None
            self.assigned_identities = [
                k for k in self.assigned_identities
                if k != ResourceIdentityType.USER_ASSIGNED]

    def clear_user_assigned_identity(self, identity_name):
        if StringUtils.is_blank(identity_name):
            raise ValueError('identity_name is required')
        if not self.has_user_assigned_identity or not self.user_assigned_identities:
            return
        self.user_assigned_identities.pop(self._identity_key(identity_name), None)
        if not self.user_assigned_identities:
            self.clear_user_assigned_identities()


class LocalizedStringValue(ArmModel):

    _attribute_map = {
        'value': {'key': 'value', 'type': 'str'},
        'localized_value': {'key': 'localizedValue', 'type': 'str'},
    }


class AzureNameValuePair(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'value': {'key': 'value', 'type': 'str'},
    }


class Count(ArmModel):

    _attribute_map = {
        'type': {'key': 'type', 'type': 'str'},
        'value': {'key': 'value', 'type': 'int'},
    }


class ResultValueAggregate(ArmModel):

    _attribute_map = {
        'type': {'key': 'type', 'type': 'str'},
        'value': {'key': 'value', 'type': 'int'},
    }


class UsageAPIResponseItem(ArmModel):

    _attribute_map = {
        'unit': {'key': 'unit', 'type': 'str'},
        'next_reset_time': {'key': 'nextResetTime', 'type': 'iso-8601'},
        'current_value': {'key': 'currentValue', 'type': 'int'},
        'limit': {'key': 'limit', 'type': 'int'},
        'name': {'key': 'name', 'type': 'LocalizedStringValue'},
    }


class UsageSdkResponseItem:
    """Flattened view of a usage counter."""

    def __init__(self, item):
        name = item.name or LocalizedStringValue()
        self.display_name = name.localized_value
        self.counter_name = name.value
        self.maximum_limit = item.limit
        self.value = item.current_value
        self.next_reset_at = item.next_reset_time

    def __repr__(self):
        return 'UsageSdkResponseItem(counter_name=%r, value=%r, maximum_limit=%r)' % (
            self.counter_name, self.value, self.maximum_limit)
