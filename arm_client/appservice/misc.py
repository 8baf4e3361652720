# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client import constants
from arm_client.appservice.models import (
    AppServiceResourceTypes, ApplicationStack, ResourceNameAvailabilityRequest,
    ResourceNameAvailabilityResponse, ResourceNameUnavailabilityReason)
from arm_client.client import ArmClient
from arm_client.models import OSTypeNames
from arm_client.utils import require, to_subscription


class ApplicationStacksClient(ArmClient):

    API_VERSION = '2019-08-01'

    @classmethod
    def get_application_stacks(cls, bearer_token, os_type=OSTypeNames.WINDOWS):
        require(bearer_token, 'bearer_token')
        os_type = OSTypeNames(os_type)
        response = cls._list(
            bearer_token, '%s/providers/Microsoft.Web/availableStacks' % constants.ARM_ENDPOINT,
            params={'osTypeSelected': os_type.value}, codes=(200,))
        return cls._models(response, ApplicationStack, 'get_application_stacks')


class AppServiceMiscClient(ArmClient):

    API_VERSION = '2019-08-01'

    @classmethod
    def is_name_available(cls, bearer_token, subscription, name,
                          type=AppServiceResourceTypes.SITE, is_fqdn=False):
        """True when free, False when taken, None when the name is invalid or unknown."""
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(name, 'name')
        request = ResourceNameAvailabilityRequest(
            name=name, type=AppServiceResourceTypes(type), is_fqdn=is_fqdn)
        response = cls._post(
            bearer_token,
            '%s/subscriptions/%s/providers/Microsoft.Web/checknameavailability' % (
                constants.ARM_ENDPOINT, subscription),
            body=request, codes=(200,))
        result = cls._model(response, ResourceNameAvailabilityResponse, 'is_name_available')
        if result is None:
            return None
        if result.name_available:
            return True
        if result.reason == ResourceNameUnavailabilityReason.ALREADY_EXISTS:
            return False
        return None
