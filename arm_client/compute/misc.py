# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client import constants
from arm_client.compute.models import (
    ComputeAnalyticsLogGrouping, ComputeAnalyticsLogType, ComputeLogAnalyticsIntervals,
    ComputeLogAnalyticsRequest, ComputeLogAnalyticsResponse, ComputeResourceSku, ComputeUsage)
from arm_client.client import ArmClient
from arm_client.utils import as_utc, require, to_subscription


def _location_url(subscription, location, *segments):
    subscription = to_subscription(subscription)
    require(location, 'location')
    return '/'.join(
        ('%s/subscriptions/%s/providers/Microsoft.Compute/locations/%s' % (
            constants.ARM_ENDPOINT, subscription, location),) + segments)


class ResourceSkusClient(ArmClient):

    API_VERSION = '2017-09-01'

    @classmethod
    def get_all_available_sizes(cls, bearer_token, subscription):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(
            bearer_token,
            '%s/subscriptions/%s/providers/Microsoft.Compute/skus' % (
                constants.ARM_ENDPOINT, subscription),
            codes=(200,))
        return cls._models(response, ComputeResourceSku, 'get_all_available_sizes')


class ComputeMiscClient(ArmClient):

    API_VERSION = '2019-03-01'

    @classmethod
    def get_usages(cls, bearer_token, subscription, location):
        require(bearer_token, 'bearer_token')
        response = cls._list(
            bearer_token, _location_url(subscription, location, 'usages'), codes=(200,))
        return cls._models(response, ComputeUsage, 'get_usages')

    @classmethod
    def export_log_analytics(cls, bearer_token, subscription, location, log_type,
                             start_time, end_time, blob_container_sas_uri,
                             interval=ComputeLogAnalyticsIntervals.THREE_MINS,
                             grouping=ComputeAnalyticsLogGrouping.NONE):
        """Write request rate or throttling logs to a blob container.

        Returns the uri of the written blob. It does not carry the SAS
        token of ``blob_container_sas_uri``.
        """
        require(bearer_token, 'bearer_token')
        require(blob_container_sas_uri, 'blob_container_sas_uri')
        log_type = ComputeAnalyticsLogType(log_type)
        grouping = ComputeAnalyticsLogGrouping(grouping)
        start_time, end_time = as_utc(start_time), as_utc(end_time)
        if end_time <= start_time:
            raise ValueError('end_time must be after start_time')

        request = ComputeLogAnalyticsRequest(
            blob_container_sas_uri=blob_container_sas_uri,
            from_time=start_time, to_time=end_time,
            interval_length=ComputeLogAnalyticsIntervals(interval),
            group_by_operation_name=bool(grouping & ComputeAnalyticsLogGrouping.OPERATION),
            group_by_resource_name=bool(grouping & ComputeAnalyticsLogGrouping.RESOURCE),
            group_by_throttle_policy=bool(grouping & ComputeAnalyticsLogGrouping.THROTTLE_POLICY))
        response = cls._post(
            bearer_token,
            _location_url(subscription, location, 'logAnalytics', 'apiAccess', log_type.value),
            body=request, codes=(200, 202))
        result = cls._model(response, ComputeLogAnalyticsResponse, 'export_log_analytics')
        if result is None or result.properties is None:
            return None
        return result.properties.output
