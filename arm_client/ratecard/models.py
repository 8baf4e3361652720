# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client.models import ArmModel


class MeterItem(ArmModel):
    """Price of one billable meter, ``meter_rates`` maps quantity tiers to prices."""

    _attribute_map = {
        'effective_date': {'key': 'EffectiveDate', 'type': 'iso-8601'},
        'included_quantity': {'key': 'IncludedQuantity', 'type': 'float'},
        'meter_category': {'key': 'MeterCategory', 'type': 'str'},
        'meter_sub_category': {'key': 'MeterSubCategory', 'type': 'str'},
        'meter_id': {'key': 'MeterId', 'type': 'str'},
        'meter_name': {'key': 'MeterName', 'type': 'str'},
        'meter_rates': {'key': 'MeterRates', 'type': '{float}'},
        'unit': {'key': 'Unit', 'type': 'str'},
        'meter_region': {'key': 'MeterRegion', 'type': 'str'},
        'meter_status': {'key': 'MeterStatus', 'type': 'str'},
        'meter_tags': {'key': 'MeterTags', 'type': '[str]'},
    }


class OfferTermItem(ArmModel):

    _attribute_map = {
        'name': {'key': 'Name', 'type': 'str'},
        'credit': {'key': 'Credit', 'type': 'float'},
        'tiered_discount': {'key': 'TieredDiscount', 'type': '{float}'},
        'effective_date': {'key': 'EffectiveDate', 'type': 'iso-8601'},
        'excluded_meter_ids': {'key': 'ExcludedMeterIds', 'type': '[str]'},
    }


class RateCardResponse(ArmModel):

    _attribute_map = {
        'offer_terms': {'key': 'OfferTerms', 'type': '[OfferTermItem]'},
        'meters': {'key': 'Meters', 'type': '[MeterItem]'},
        'currency': {'key': 'Currency', 'type': 'str'},
        'locale': {'key': 'Locale', 'type': 'str'},
        'is_tax_included': {'key': 'IsTaxIncluded', 'type': 'bool'},
        'meter_region': {'key': 'MeterRegion', 'type': 'str'},
        'tags': {'key': 'Tags', 'type': '[str]'},
    }

    def get_meters(self, category=None, region=None):
        """Meters of a category and region, both matched case insensitively."""
        found = []
        for meter in self.meters or ():
            if category and (meter.meter_category or '').lower() != category.lower():
                continue
            if region and (meter.meter_region or '').lower() != region.lower():
                continue
            found.append(meter)
        return found
