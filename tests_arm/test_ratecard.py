# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from .arm_common import BaseTest, SUBSCRIPTION_URL, arm_error, mock_response
from arm_client.ratecard.client import RateCardClient

BLOB_URL = 'https://ratecard.blob.core.windows.net/rates/MS-AZR-0003P.json?sig=abc'
RATES = {
    'OfferTerms': [],
    'Meters': [
        {'MeterId': 'm1', 'MeterName': 'D2 v3', 'MeterCategory': 'Virtual Machines',
         'MeterRegion': 'US West', 'MeterRates': {'0': 0.096}, 'IncludedQuantity': 0.0,
         'Unit': '1 Hour', 'MeterTags': [], 'EffectiveDate': '2020-01-01T00:00:00Z'},
        {'MeterId': 'm2', 'MeterName': 'LRS Data Stored', 'MeterCategory': 'Storage',
         'MeterRegion': 'US West', 'MeterRates': {'0': 0.02, '51200': 0.019},
         'IncludedQuantity': 5.0, 'Unit': '1 GB/Month'},
    ],
    'Currency': 'USD', 'Locale': 'en-US', 'IsTaxIncluded': False, 'Tags': [],
}


class RateCardClientTest(BaseTest):

    def test_get_rates(self):
        self.patch_request(
            mock_response(302, headers={'Location': BLOB_URL}),
            mock_response(200, RATES))
        rates = RateCardClient.get_rates(
            self.token, self.subscription, 'MS-AZR-0003P', 'USD', 'en-US', 'US')
        self.assertEqual(rates.currency, 'USD')
        self.assertEqual(len(rates.meters), 2)

        method, url, _ = self.sent(0)
        self.assertEqual(method, 'GET')
        self.assertEqual(
            url, SUBSCRIPTION_URL + '/providers/Microsoft.Commerce/RateCard'
                                    '?api-version=2016-08-31-preview&$filter='
                                    'OfferDurableId%20eq%20%27MS-AZR-0003P%27%20and%20'
                                    'Currency%20eq%20%27USD%27%20and%20'
                                    'Locale%20eq%20%27en-US%27%20and%20'
                                    'RegionInfo%20eq%20%27US%27')
        self.assertFalse(self.sent_kwargs(0)['allow_redirects'])
        self.assertEqual(self.sent_kwargs(0)['headers']['Authorization'], 'Bearer fake_token')

        self.assertSent('GET', BLOB_URL, index=1)
        self.assertNotIn('Authorization', self.sent_kwargs(1)['headers'])
        self.assertEqual(self.sent_kwargs(1)['timeout'], 60)

    def test_get_meters(self):
        self.patch_request(
            mock_response(302, headers={'location': BLOB_URL}),
            mock_response(200, RATES))
        rates = RateCardClient.get_rates(
            self.token, self.subscription, 'MS-AZR-0003P', 'USD', 'en-US', 'US')
        storage = rates.get_meters(category='storage')
        self.assertEqual([m.meter_id for m in storage], ['m2'])
        self.assertEqual(storage[0].meter_rates, {'0': 0.02, '51200': 0.019})
        self.assertEqual(storage[0].included_quantity, 5.0)
        self.assertEqual(len(rates.get_meters(region='us west')), 2)
        self.assertEqual(rates.get_meters(category='Storage', region='EU North'), [])

    def test_missing_location(self):
        self.patch_request(mock_response(302))
        with self.assertLogs('arm_client.ratecard', level='WARNING'):
            self.assertIsNone(RateCardClient.get_rates(
                self.token, self.subscription, 'MS-AZR-0003P', 'USD', 'en-US', 'US'))
        self.assertEqual(self.request.call_count, 1)

    def test_not_redirected(self):
        self.patch_request(mock_response(200, RATES))
        self.assertIsNone(RateCardClient.get_rates(
            self.token, self.subscription, 'MS-AZR-0003P', 'USD', 'en-US', 'US'))

    def test_blob_failure(self):
        self.patch_request(
            mock_response(302, headers={'Location': BLOB_URL}),
            mock_response(403, arm_error('AuthenticationFailed')))
        self.assertIsNone(RateCardClient.get_rates(
            self.token, self.subscription, 'MS-AZR-0003P', 'USD', 'en-US', 'US'))

    def test_requires_filter_values(self):
        with self.assertRaises(ValueError):
            RateCardClient.get_rates(
                self.token, self.subscription, 'MS-AZR-0003P', '', 'en-US', 'US')
