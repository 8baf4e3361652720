# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Commerce RateCard lookups.

ARM answers a rate card query with a redirect to a pre-signed blob, the
blob is then read without the bearer token.
"""
import logging

from arm_client import constants
from arm_client.client import ArmClient
from arm_client.ratecard.models import RateCardResponse
from arm_client.rest import RestApiClient
from arm_client.utils import StringUtils, require, to_subscription

log = logging.getLogger('arm_client.ratecard')


class RateCardClient(ArmClient):

    API_VERSION = '2016-08-31-preview'

    @staticmethod
    def rate_card_filter(offer_id, currency, locale, region):
        return "OfferDurableId eq '%s' and Currency eq '%s' and Locale eq '%s' " \
               "and RegionInfo eq '%s'" % (offer_id, currency, locale, region)

    @classmethod
    def get_rates(cls, bearer_token, subscription, offer_id, currency, locale, region):
        """Prices of every meter for an offer, eg. ``MS-AZR-0003P``.

        :param currency: ISO currency code, eg. ``USD``.
        :param locale: ISO locale, eg. ``en-US``.
        :param region: ISO country code of the billing region, eg. ``US``.
        """
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(offer_id, 'offer_id')
        require(currency, 'currency')
        require(locale, 'locale')
        require(region, 'region')

        response = cls._get(
            bearer_token,
            '%s/subscriptions/%s/providers/Microsoft.Commerce/RateCard' % (
                constants.ARM_ENDPOINT, subscription),
            params={'$filter': cls.rate_card_filter(offer_id, currency, locale, region)},
            codes=(302,), allow_redirects=False)
        if not cls._succeeded(response, 'get_rates'):
            return None
        location = response.headers.get('Location')
        if StringUtils.is_blank(location):
            log.warning('rate card redirect for %s carried no location', offer_id)
            return None

        response = RestApiClient.get_without_authentication(
            location, None, codes=(200,), timeout=constants.LONG_TIMEOUT,
            retry_policy=cls.RETRY_POLICY)
        return cls._model(response, RateCardResponse, 'get_rates')
