# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Shapes returned by the public Marketplace catalog api.
"""
from arm_client.models import ArmModel
from arm_client.utils import StringUtils


def _matches(value, *candidates):
    return any(StringUtils.equal(value, c) for c in candidates if c is not None)


class CatalogSkuArtifact(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'uri': {'key': 'uri', 'type': 'str'},
    }


class CatalogImageContextItem(ArmModel):

    _attribute_map = {
        'context': {'key': 'context', 'type': 'str'},
        'items': {'key': 'items', 'type': '[CatalogSkuArtifact]'},
    }


class CatalogDefinitionTemplate(ArmModel):

    _attribute_map = {
        'ui_definition_file_uri': {'key': 'uiDefinitionFileUri', 'type': 'str'},
        'default_deployment_template_id': {
            'key': 'defaultDeploymentTemplateId', 'type': 'str'},
    }


class CatalogLink(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'display_name': {'key': 'displayName', 'type': 'str'},
        'uri': {'key': 'uri', 'type': 'str'},
    }


class CatalogMarketingMaterial(ArmModel):

    _attribute_map = {
        'path': {'key': 'path', 'type': 'str'},
        'learn_uri': {'key': 'learnUri', 'type': 'str'},
    }


class MarketplaceItemPlan(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'sku_id': {'key': 'skuId', 'type': 'str'},
        'plan_id': {'key': 'planId', 'type': 'str'},
        'legacy_plan_id': {'key': 'legacyPlanId', 'type': 'str'},
        'version': {'key': 'version', 'type': 'str'},
        'display_name': {'key': 'displayName', 'type': 'str'},
        'item_name': {'key': 'itemName', 'type': 'str'},
        'summary': {'key': 'summary', 'type': 'str'},
        'description': {'key': 'description', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'ui_definition_uri': {'key': 'uiDefinitionUri', 'type': 'str'},
        'alt_stack_reference': {'key': 'altStackReference', 'type': 'str'},
        'keywords': {'key': 'keywords', 'type': '[str]'},
        'category_ids': {'key': 'categoryIds', 'type': '[str]'},
        'metadata': {'key': 'metadata', 'type': '{object}'},
        'artifacts': {'key': 'artifacts', 'type': '[CatalogSkuArtifact]'},
        'stack_type': {'key': 'stackType', 'type': 'str'},
        'csp_state': {'key': 'cspState', 'type': 'str'},
        'is_private': {'key': 'isPrivate', 'type': 'bool'},
        'is_hidden': {'key': 'isHidden', 'type': 'bool'},
        'has_free_trials': {'key': 'hasFreeTrials', 'type': 'bool'},
        'is_free': {'key': 'isFree', 'type': 'bool'},
        'is_stop_sell': {'key': 'isStopSell', 'type': 'bool'},
        'is_byol': {'key': 'isByol', 'type': 'bool'},
        'is_payg': {'key': 'isPayg', 'type': 'bool'},
        'is_quantifiable': {'key': 'isQuantifiable', 'type': 'bool'},
    }

    def matches(self, plan_id_or_sku_id):
        return _matches(plan_id_or_sku_id, self.id, self.sku_id, self.plan_id,
                        self.legacy_plan_id)


class IndexItem(ArmModel):
    """A gallery offer."""

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'item_type': {'key': 'itemType', 'type': 'str'},
        'version': {'key': 'version', 'type': 'str'},
        'language': {'key': 'language', 'type': 'str'},
        'display_name': {'key': 'displayName', 'type': 'str'},
        'publisher_id': {'key': 'publisherId', 'type': 'str'},
        'publisher_display_name': {'key': 'publisherDisplayName', 'type': 'str'},
        'offer_id': {'key': 'offerId', 'type': 'str'},
        'legacy_offer_id': {'key': 'legacyId', 'type': 'str'},
        'big_id': {'key': 'bigId', 'type': 'str'},
        'standard_contract_amendments_revision_id': {
            'key': 'standardContractAmendmentsRevisionId', 'type': 'str'},
        'offer_type': {'key': 'offerType', 'type': 'str'},
        'summary': {'key': 'summary', 'type': 'str'},
        'long_summary': {'key': 'longSummary', 'type': 'str'},
        'description': {'key': 'description', 'type': 'str'},
        'has_standard_contract_amendments': {
            'key': 'hasStandardContractAmendments', 'type': 'bool'},
        'is_private': {'key': 'isPrivate', 'type': 'bool'},
        'is_preview': {'key': 'isPreview', 'type': 'bool'},
        'has_free_trials': {'key': 'hasFreeTrials', 'type': 'bool'},
        'is_byol': {'key': 'isByol', 'type': 'bool'},
        'has_payg_plans': {'key': 'hasPaygPlans', 'type': 'bool'},
        'is_stop_sell': {'key': 'isStopSell', 'type': 'bool'},
        'fulfill_before_charge_eligible': {'key': 'fulfillBeforeChargeEligible', 'type': 'bool'},
        'is_third_party': {'key': 'isThirdParty', 'type': 'bool'},
        'is_quantifiable': {'key': 'isQuantifiable', 'type': 'bool'},
        'is_reseller': {'key': 'isReseller', 'type': 'bool'},
        'marketing_material': {'key': 'marketingMaterial', 'type': 'CatalogMarketingMaterial'},
        'category_ids': {'key': 'categoryIds', 'type': '[str]'},
        'keywords': {'key': 'keywords', 'type': '[str]'},
        'links': {'key': 'links', 'type': '[CatalogLink]'},
        'icon_file_uris': {'key': 'iconFileUris', 'type': '{str}'},
        'artifacts': {'key': 'artifacts', 'type': '[CatalogSkuArtifact]'},
        'metadata': {'key': 'metadata', 'type': '{object}'},
        'images': {'key': 'images', 'type': '[CatalogImageContextItem]'},
        'definition_templates': {
            'key': 'definitionTemplates', 'type': 'CatalogDefinitionTemplate'},
        'plans': {'key': 'plans', 'type': '[MarketplaceItemPlan]'},
        'legal_terms_uri': {'key': 'legalTermsUri', 'type': 'str'},
        'legal_terms_type': {'key': 'legalTermsType', 'type': 'str'},
        'privacy_policy_uri': {'key': 'privacyPolicyUri', 'type': 'str'},
        'support_uri': {'key': 'supportUri', 'type': 'str'},
        'pricing_details_uri': {'key': 'pricingDetailsUri', 'type': 'str'},
        'popularity': {'key': 'popularity', 'type': 'float'},
    }

    def matches(self, id_or_name_or_offer_id):
        return _matches(id_or_name_or_offer_id, self.id, self.offer_id, self.legacy_offer_id,
                        self.big_id, self.display_name)

    def get_plan(self, plan_id_or_sku_id):
        for plan in self.plans or ():
            if plan.matches(plan_id_or_sku_id):
                return plan
        return None


class IndexCatalogCategory(ArmModel):
    """A section of a catalog page, eg. ``Compute`` or ``Databases``."""

    _attribute_map = {
        'group_id': {'key': 'submenuId', 'type': 'str'},
        'items': {'key': 'items', 'type': '[IndexItem]'},
    }


class IndexCatalog(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'text': {'key': 'text', 'type': 'str'},
    }


class IndexCatalogMenuItemItem(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'text': {'key': 'text', 'type': 'str'},
        'icon': {'key': 'icon', 'type': 'str'},
    }


class IndexCatalogMenuItem(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'text': {'key': 'text', 'type': 'str'},
        'language': {'key': 'lang', 'type': 'str'},
        'locale': {'key': 'locale', 'type': 'str'},
        'items': {'key': 'items', 'type': '[IndexCatalogMenuItemItem]'},
    }


class IndexCatalogMenu(ArmModel):

    _attribute_map = {
        'static_menus': {'key': 'staticMenus', 'type': '[IndexCatalogMenuItem]'},
        'dynamic_menus': {'key': 'dynamicMenus', 'type': '[IndexCatalogMenuItem]'},
    }

    def menu_items(self):
        return list(self.static_menus or ()) + list(self.dynamic_menus or ())
