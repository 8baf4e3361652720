# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client import constants
from arm_client.client import ArmClient
from arm_client.core.models import Tenant
from arm_client.utils import require


class TenantClient(ArmClient):

    API_VERSION = '2019-11-01'

    @classmethod
    def list(cls, bearer_token):
        require(bearer_token, 'bearer_token')
        response = cls._list(bearer_token, '%s/tenants' % constants.ARM_ENDPOINT, codes=(200,))
        return cls._models(response, Tenant, 'list')
