# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import enum

from arm_client.models import ArmModel


class TenantBackfillStatusEnum(str, enum.Enum):
    CANCELLED = 'Cancelled'
    FAILED = 'Failed'
    NOT_STARTED = 'NotStarted'
    NOT_STARTED_BUT_GROUPS_EXIST = 'NotStartedButGroupsExist'
    STARTED = 'Started'
    COMPLETED = 'Completed'
    DEFAULT = 'NotStarted'


class TenantBackfillStatus(ArmModel):
    """Progress of moving a tenant's subscriptions into its root management group."""

    _attribute_map = {
        'tenant_id': {'key': 'tenantId', 'type': 'str'},
        'status': {'key': 'status', 'type': 'TenantBackfillStatusEnum'},
    }

