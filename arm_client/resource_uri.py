# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import enum
import uuid

from arm_client import constants
from arm_client.exceptions import ResourceUriError
from arm_client.utils import StringUtils


class ResourceUriCompareLevel(enum.IntFlag):
    ALL = 0
    RESOURCE_NAME = 1
    TYPE = 2
    PROVIDER = 4
    RESOURCE_GROUP = 8
    SUBSCRIPTION = 16


def _as_uuid(value):
    if value is None or isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value).strip())


def _clean(value):
    if StringUtils.is_blank(value):
        return None
    return value.strip()


class ResourceUri:
    """An ARM resource id broken into its components.

    ``/subscriptions/{subscription}/resourceGroups/{resource_group_name}
    /providers/{provider_name}/{type}/{resource_name}``

    Every component but the subscription is optional. Nested resources
    keep their parent segments in ``provider_name``, so the id of a web
    app slot parses into provider ``Microsoft.Web/sites/{app}``, type
    ``slots`` and the slot name.
    """

    def __init__(self, subscription=None, resource_group_name=None, provider_name=None,
                 type=None, resource_name=None):
        self.subscription = _as_uuid(subscription)
        self.resource_group_name = resource_group_name
        self.provider_name = provider_name
        self.type = type
        self.resource_name = resource_name

    @classmethod
    def parse(cls, resource_id):
        if StringUtils.is_blank(resource_id):
            raise ResourceUriError('resource id is required')

        uri = cls()
        pieces = [p for p in resource_id.split('/') if p]
        count = len(pieces)
        i = 0
        try:
            while i < count:
                marker = pieces[i].lower()
                if marker == 'subscriptions':
                    i += 1
                    uri.subscription = uuid.UUID(pieces[i])
                elif marker == 'resourcegroups':
                    i += 1
                    uri.resource_group_name = pieces[i]
                elif marker == 'providers':
                    # everything but the trailing type/name pair
                    provider = []
                    while i < count - 3:
                        i += 1
                        provider.append(pieces[i])
                    if not provider and i + 1 < count:
                        # collection path, eg. .../providers/Microsoft.Web/sites
                        i += 1
                        provider.append(pieces[i])
                        if i + 1 < count:
                            i += 1
                            uri.type = pieces[i]
                    uri.provider_name = '/'.join(provider) or None
                elif i == count - 2:
                    uri.type = pieces[i]
                    i += 1
                    uri.resource_name = pieces[i]
                i += 1
        except (IndexError, ValueError) as e:
            raise ResourceUriError('malformed resource id %r: %s' % (resource_id, e))
        return uri

    @property
    def is_valid(self):
        return self.subscription is not None and self.subscription.int != 0

    def with_subscription_id(self, subscription):
        self.subscription = _as_uuid(subscription)
        return self

    def with_resource_group(self, resource_group):
        if isinstance(resource_group, uuid.UUID):
            resource_group = str(resource_group)
        self.resource_group_name = resource_group
        return self

    def with_provider(self, provider_name):
        self.provider_name = provider_name
        return self

    def with_type(self, type):
        self.type = type
        return self

    def with_resource(self, resource_name):
        self.resource_name = resource_name
        return self

    def build(self):
        if not self.is_valid:
            raise ResourceUriError(
                'ResourceUri does not contain the components of a valid resource id')
        return self

    def __str__(self):
        self.build()
        segments = ['/subscriptions/%s' % self.subscription]
        resource_group_name = _clean(self.resource_group_name)
        provider_name = _clean(self.provider_name)
        type = _clean(self.type)
        resource_name = _clean(self.resource_name)
        if resource_group_name:
            segments.append('/resourceGroups/%s' % resource_group_name)
        if provider_name:
            segments.append('/providers/%s' % provider_name)
        if type:
            segments.append('/%s' % type)
        if resource_name:
            segments.append('/%s' % resource_name)
        return ''.join(segments)

    def __repr__(self):
        return ('ResourceUri(subscription=%r, resource_group_name=%r, provider_name=%r, '
                'type=%r, resource_name=%r)' % (
                    self.subscription and str(self.subscription), self.resource_group_name,
                    self.provider_name, self.type, self.resource_name))

    def to_absolute_arm_endpoint_uri(self, endpoint=None):
        uri = constants.ARM_ENDPOINT + str(self)
        if not StringUtils.is_blank(endpoint):
            uri += '/' + endpoint
        return uri

    def is_(self, level, value):
        """Test a single component against value, ignoring case.

        Always false for an unset local component.
        """
        if level == ResourceUriCompareLevel.SUBSCRIPTION:
            return self.subscription is not None and self.subscription == _as_uuid(value)
        local = {
            ResourceUriCompareLevel.RESOURCE_NAME: self.resource_name,
            ResourceUriCompareLevel.TYPE: self.type,
            ResourceUriCompareLevel.PROVIDER: self.provider_name,
            ResourceUriCompareLevel.RESOURCE_GROUP: self.resource_group_name,
        }.get(level)
        if local is None:
            return False
        return StringUtils.equal(local, value)

    def compare(self, other, level=ResourceUriCompareLevel.ALL):
        """Compare the components selected by level with another uri.

        Components left unset here are not compared, so the check is
        deliberately one sided. The subscription is always compared
        when selected.
        """
        def selected(flag):
            return level == ResourceUriCompareLevel.ALL or bool(level & flag)

        pairs = (
            (ResourceUriCompareLevel.RESOURCE_NAME, self.resource_name, other.resource_name),
            (ResourceUriCompareLevel.TYPE, self.type, other.type),
            (ResourceUriCompareLevel.PROVIDER, self.provider_name, other.provider_name),
            (ResourceUriCompareLevel.RESOURCE_GROUP,
             self.resource_group_name, other.resource_group_name),
        )
        for flag, mine, theirs in pairs:
            if selected(flag) and mine is not None and not StringUtils.equal(mine, theirs):
                return False

        if selected(ResourceUriCompareLevel.SUBSCRIPTION) and \
                self.subscription != other.subscription:
            return False
        return True
