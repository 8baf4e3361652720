# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
App Service domain registration.

Domains are registered at second level only, so a name has either two
components (``contoso.com``) or three (``contoso.co.uk``).
"""
import logging

from arm_client import constants
from arm_client.appservice.models import (
    AppServiceDomain, AvailabilityResult, DomainNameRecommendationRequest,
    DomainPurchaseConsent, DomainRegistrationDnsType, DomainTransferRequest,
    DomainTransferRequestProperties, RegistrationRequest, RegistrationRequestProperties,
    TopLevelAgreement, TopLevelAgreementRequest, TopLevelDomain)
from arm_client.client import ArmClient
from arm_client.models import ArmModel
from arm_client.resource_uri import ResourceUriCompareLevel
from arm_client.utils import StringUtils, require, to_subscription, utcnow

log = logging.getLogger('arm_client.appservice.domains')

SUPPORTED_TLD_NAMES = ('com', 'net', 'org', 'biz', 'nl', 'in', 'co.in', 'co.uk', 'org.uk')


def get_domain_name_components(domain_name):
    if StringUtils.is_blank(domain_name):
        return []
    # empty components are kept so that "a..com" fails validation
    return domain_name.lower().split('.')


def get_possible_top_level_domain_name(domain_name):
    components = get_domain_name_components(domain_name)
    if len(components) < 2 or len(components) > 3:
        return None
    if len(components) == 2:
        return components[-1]
    return '%s.%s' % (components[1], components[2])


def validate_domain_name(domain_name, supported_tlds):
    tld = get_possible_top_level_domain_name(domain_name)
    return tld is not None and tld in supported_tlds


class AvailabilityRequest(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
    }

    def __init__(self, **kwargs):
        super(AvailabilityRequest, self).__init__(**kwargs)
        if self.name is not None and not self.validate():
            raise ValueError(
                "The Tld in '%s' is not supported for registration at this time." % self.name)

    def validate(self):
        return validate_domain_name(self.name, SUPPORTED_TLD_NAMES)


def _contact_properties(properties_class, auto_renew, contact, caller_ip_address,
                        agreement_keys, **extra):
    return properties_class(
        auto_renew=auto_renew,
        consent=DomainPurchaseConsent(
            agreed_at=utcnow(), agreed_by=caller_ip_address,
            agreement_keys=list(agreement_keys)),
        contact_admin=contact,
        contact_billing=contact,
        contact_registrant=contact,
        contact_tech=contact,
        dns_type=DomainRegistrationDnsType.AZURE_DNS,
        **extra)


def _apply_dns(properties, use_custom_dns, existing_azure_zone):
    if use_custom_dns:
        properties.dns_type = DomainRegistrationDnsType.DEFAULT_DOMAIN_REGISTRAR_DNS
    if existing_azure_zone is not None:
        if not existing_azure_zone.is_valid or \
                not existing_azure_zone.is_(ResourceUriCompareLevel.PROVIDER,
                                            'Microsoft.Network') or \
                not existing_azure_zone.is_(ResourceUriCompareLevel.TYPE, 'dnszones'):
            raise ValueError('existing_azure_zone must be an Azure DNS zone id')
        properties.dns_zone_id = str(existing_azure_zone)


class AppServiceDomainClient(ArmClient):

    API_VERSION = '2019-08-01'

    @staticmethod
    def _provider_url(subscription, resource_group_name=None):
        url = '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, subscription)
        if not StringUtils.is_blank(resource_group_name):
            url += '/resourceGroups/%s' % resource_group_name
        return url + '/providers/Microsoft.DomainRegistration'

    @classmethod
    def _domain_url(cls, subscription, resource_group_name, domain_name):
        return '%s/domains/%s' % (
            cls._provider_url(subscription, resource_group_name), domain_name)

    @classmethod
    def is_available(cls, bearer_token, subscription, domain_name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        request = AvailabilityRequest(name=require(domain_name, 'domain_name'))
        response = cls._post(
            bearer_token, '%s/checkDomainAvailability' % cls._provider_url(subscription),
            body=request, codes=(200,))
        result = cls._model(response, AvailabilityResult, 'is_available')
        return None if result is None else result.available

    @classmethod
    def _agreement_keys(cls, bearer_token, subscription, domain_name, for_transfer):
        tld_name = get_possible_top_level_domain_name(domain_name)
        if StringUtils.is_blank(tld_name):
            raise ValueError("Could not retrieve TLD of '%s'." % domain_name)
        tlds = cls.get_supported_top_level_domains(bearer_token, subscription)
        tld = next((t for t in tlds if t.name == tld_name), None)
        if tld is None:
            raise ValueError("The TLD '%s' is not supported at this time." % tld_name)
        agreements = cls.get_required_consents(
            bearer_token, subscription, tld.name, include_privacy=True,
            for_transfer=for_transfer)
        return [a.agreement_key for a in agreements]

    @classmethod
    def register(cls, bearer_token, subscription, domain_name, resource_group_name, auto_renew,
                 contact, caller_ip_address, agreement_keys=None, use_custom_dns=False,
                 existing_azure_zone=None):
        """Register a domain. None if the request could not be sent.

        Without ``agreement_keys`` the consents the TLD requires are
        looked up and agreed to.
        """
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        AvailabilityRequest(name=require(domain_name, 'domain_name'))
        if agreement_keys is None:
            agreement_keys = cls._agreement_keys(
                bearer_token, subscription, domain_name, for_transfer=False)

        properties = _contact_properties(
            RegistrationRequestProperties, auto_renew, contact, caller_ip_address,
            agreement_keys)
        _apply_dns(properties, use_custom_dns, existing_azure_zone)
        response = cls._put(
            bearer_token, cls._domain_url(subscription, resource_group_name, domain_name),
            body=RegistrationRequest(location='global', properties=properties),
            codes=(200, 202))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'register')

    @classmethod
    def transfer_domain(cls, bearer_token, subscription, domain_name, auth_code,
                        resource_group_name, auto_renew, contact, caller_ip_address,
                        agreement_keys=None, use_custom_dns=False, existing_azure_zone=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(auth_code, 'auth_code')
        require(resource_group_name, 'resource_group_name')
        AvailabilityRequest(name=require(domain_name, 'domain_name'))
        if agreement_keys is None:
            agreement_keys = cls._agreement_keys(
                bearer_token, subscription, domain_name, for_transfer=True)

        properties = _contact_properties(
            DomainTransferRequestProperties, auto_renew, contact, caller_ip_address,
            agreement_keys, auth_code=auth_code)
        _apply_dns(properties, use_custom_dns, existing_azure_zone)
        response = cls._put(
            bearer_token, cls._domain_url(subscription, resource_group_name, domain_name),
            body=DomainTransferRequest(location='global', properties=properties),
            codes=(200, 202))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'transfer_domain')

    @classmethod
    def delete(cls, bearer_token, subscription, resource_group_name, domain_name,
               force_delete=False):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        require(domain_name, 'domain_name')
        response = cls._delete(
            bearer_token, cls._domain_url(subscription, resource_group_name, domain_name),
            params={'forceHardDeleteDomain': StringUtils.bool_string(force_delete)},
            codes=(200, 204))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'delete')

    @classmethod
    def force_renew(cls, bearer_token, subscription, resource_group_name, domain_name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        require(domain_name, 'domain_name')
        response = cls._post(
            bearer_token,
            '%s/renew' % cls._domain_url(subscription, resource_group_name, domain_name),
            codes=(200, 202, 204))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'force_renew')

    @classmethod
    def get(cls, bearer_token, subscription, resource_group_name, domain_name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        require(domain_name, 'domain_name')
        response = cls._get(
            bearer_token, cls._domain_url(subscription, resource_group_name, domain_name),
            codes=(200,))
        return cls._model(response, AppServiceDomain, 'get')

    @classmethod
    def list(cls, bearer_token, subscription, resource_group_name=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(
            bearer_token, '%s/domains' % cls._provider_url(subscription, resource_group_name),
            codes=(200,))
        return cls._models(response, AppServiceDomain, 'list')

    @classmethod
    def get_domain_name_recommendations(cls, bearer_token, subscription, keywords,
                                        max_recommendations=5):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        keywords = [k for k in keywords or () if not StringUtils.is_blank(k)]
        if not keywords:
            raise ValueError('keywords is required')
        if not 1 <= max_recommendations <= 25:
            raise ValueError('max_recommendations must be between 1 and 25')
        request = DomainNameRecommendationRequest(
            keywords=','.join(keywords), max_domain_recommendations=max_recommendations)
        response = cls._post(
            bearer_token, '%s/listDomainRecommendations' % cls._provider_url(subscription),
            body=request, codes=(200,))
        data = cls._json(response, 'get_domain_name_recommendations') or {}
        return [v.get('name') for v in data.get('value') or ()]

    @classmethod
    def get_supported_top_level_domains(cls, bearer_token, subscription):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(
            bearer_token, '%s/topLevelDomains' % cls._provider_url(subscription),
            codes=(200,))
        return cls._models(response, TopLevelDomain, 'get_supported_top_level_domains')

    @classmethod
    def get_supported_top_level_domain(cls, bearer_token, subscription, tld_name):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        tld_name = require(tld_name, 'tld_name').lstrip('.')
        response = cls._get(
            bearer_token,
            '%s/topLevelDomains/%s' % (cls._provider_url(subscription), tld_name),
            codes=(200,))
        return cls._model(response, TopLevelDomain, 'get_supported_top_level_domain')

    @classmethod
    def get_required_consents(cls, bearer_token, subscription, tld_name, include_privacy=True,
                              for_transfer=False):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        tld_name = require(tld_name, 'tld_name').lstrip('.')
        response = cls._post(
            bearer_token,
            '%s/topLevelDomains/%s/listAgreements' % (cls._provider_url(subscription), tld_name),
            body=TopLevelAgreementRequest(
                include_privacy=include_privacy, for_transfer=for_transfer),
            codes=(200,))
        return cls._models(response, TopLevelAgreement, 'get_required_consents')

