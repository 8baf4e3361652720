# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client import constants
from arm_client.client import ArmClient
from arm_client.management.models import TenantBackfillStatus
from arm_client.utils import require


class TenantBackfillClient(ArmClient):

    API_VERSION = '2018-03-01-preview'

    @classmethod
    def _status(cls, bearer_token, action, operation):
        require(bearer_token, 'bearer_token')
        response = cls._post(
            bearer_token,
            '%s/providers/Microsoft.Management/%s' % (constants.ARM_ENDPOINT, action),
            codes=(200,))
        return cls._model(response, TenantBackfillStatus, operation)

    @classmethod
    def start_backfilling_subscriptions(cls, bearer_token):
        return cls._status(bearer_token, 'startTenantBackfill', 'start_backfilling_subscriptions')

    @classmethod
    def get_previous_backfilling_operation_status(cls, bearer_token):
        return cls._status(
            bearer_token, 'tenantBackfillStatus', 'get_previous_backfilling_operation_status')
