# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
App Service certificate orders and the certificates issued for them.
"""
import logging

from arm_client import constants
from arm_client.appservice.models import (
    CertificateEmail, CertificateIssueRequest, CertificateIssueRequestProperties,
    CertificateKeySizes, CertificateOrderDetail, CertificateOrderRequest,
    CertificateOrderRequestProperties, CertificateTypes, CertificateValidityPeriod,
    IssuedCertificate)
from arm_client.client import ArmClient
from arm_client.resource_uri import ResourceUri, ResourceUriCompareLevel
from arm_client.utils import StringUtils, require, to_subscription

log = logging.getLogger('arm_client.appservice.certificates')

PENDING_VALIDATION_CLOSED = 'This request is no longer Pending Validation'


def validate_locale(locale):
    """Locales are of the form ``en-US``."""
    if locale is None:
        return 'en-US'
    if len(locale) != 5 or locale[2] != '-':
        raise ValueError('locale must be of the form xx-XX, not %r' % locale)
    return locale


class AppServiceCertificateClient(ArmClient):

    API_VERSION = '2019-08-01'

    @staticmethod
    def _orders_url(subscription, resource_group_name=None):
        url = '%s/subscriptions/%s' % (constants.ARM_ENDPOINT, subscription)
        if not StringUtils.is_blank(resource_group_name):
            url += '/resourceGroups/%s' % resource_group_name
        return url + '/providers/Microsoft.CertificateRegistration/certificateOrders'

    @classmethod
    def _order_url(cls, bearer_token, subscription, resource_group_name, order_name, *segments):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        require(resource_group_name, 'resource_group_name')
        require(order_name, 'order_name')
        return '/'.join(
            ('%s/%s' % (cls._orders_url(subscription, resource_group_name), order_name),) +
            segments)

    # certificates

    @classmethod
    def get_certificates(cls, bearer_token, subscription, resource_group_name, order_name):
        url = cls._order_url(
            bearer_token, subscription, resource_group_name, order_name, 'certificates')
        response = cls._list(bearer_token, url, codes=(200,))
        return cls._models(response, IssuedCertificate, 'get_certificates')

    @classmethod
    def get_certificate(cls, bearer_token, subscription, resource_group_name, order_name,
                        certificate_name):
        require(certificate_name, 'certificate_name')
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name,
                             'certificates', certificate_name)
        response = cls._get(bearer_token, url, codes=(200,))
        return cls._model(response, IssuedCertificate, 'get_certificate')

    @classmethod
    def issue(cls, bearer_token, subscription, resource_group_name, order_name,
              certificate_name, key_vault_id, key_vault_secret_name):
        """Store the certificate of an order as a key vault secret.

        :param key_vault_id: ResourceUri of a Microsoft.KeyVault vault
        """
        require(certificate_name, 'certificate_name')
        require(key_vault_secret_name, 'key_vault_secret_name')
        if not isinstance(key_vault_id, ResourceUri) or not key_vault_id.is_valid or \
                not key_vault_id.is_(ResourceUriCompareLevel.PROVIDER, 'Microsoft.KeyVault'):
            raise ValueError('key_vault_id must be the ResourceUri of a key vault')
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name,
                             'certificates', certificate_name)
        request = CertificateIssueRequest(
            kind='certificates', location='global',
            properties=CertificateIssueRequestProperties(
                key_vault_id=str(key_vault_id), key_vault_secret_name=key_vault_secret_name))
        response = cls._put(bearer_token, url, body=request, codes=(200, 201))
        return cls._model(response, IssuedCertificate, 'issue')

    @classmethod
    def _order_action(cls, bearer_token, subscription, resource_group_name, order_name,
                      action, codes=(204,), body=None):
        url = cls._order_url(
            bearer_token, subscription, resource_group_name, order_name, action)
        response = cls._post(bearer_token, url, body=body, codes=codes)
        if response.was_exception:
            log.warning('%s on order %s error:%s', action, order_name, response.exception_message)
            return None
        return cls._succeeded(response, action)

    @classmethod
    def reissue(cls, bearer_token, subscription, resource_group_name, order_name):
        return cls._order_action(
            bearer_token, subscription, resource_group_name, order_name, 'reissue')

    @classmethod
    def renew(cls, bearer_token, subscription, resource_group_name, order_name):
        return cls._order_action(
            bearer_token, subscription, resource_group_name, order_name, 'renew')

    @classmethod
    def delete_certificate(cls, bearer_token, subscription, resource_group_name, order_name,
                           certificate_name):
        require(certificate_name, 'certificate_name')
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name,
                             'certificates', certificate_name)
        response = cls._delete(bearer_token, url, codes=(200, 204))
        if response.was_exception:
            return None
        return cls._succeeded(response, 'delete_certificate')

    # orders

    @classmethod
    def _order(cls, bearer_token, subscription, resource_group_name, order_name, properties):
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name)
        request = CertificateOrderRequest(
            location='global', name=order_name, properties=properties)
        response = cls._put(bearer_token, url, body=request, codes=(200, 201))
        return cls._model(response, CertificateOrderDetail, 'order')

    @classmethod
    def order_using_domain_name(cls, bearer_token, subscription, resource_group_name, order_name,
                                domain_name, auto_renew=True,
                                type=CertificateTypes.STANDARD_DOMAIN_VALIDATED_SSL,
                                validity=CertificateValidityPeriod.ONE_YEAR):
        require(domain_name, 'domain_name')
        return cls._order(
            bearer_token, subscription, resource_group_name, order_name,
            CertificateOrderRequestProperties(
                distinguished_name=domain_name, auto_renew=auto_renew,
                key_size=int(CertificateKeySizes.DEFAULT), product_type=type,
                validity_in_years=int(validity)))

    @classmethod
    def order_using_csr(cls, bearer_token, subscription, resource_group_name, order_name,
                        csr, auto_renew=True,
                        type=CertificateTypes.STANDARD_DOMAIN_VALIDATED_SSL,
                        validity=CertificateValidityPeriod.ONE_YEAR):
        require(csr, 'csr')
        return cls._order(
            bearer_token, subscription, resource_group_name, order_name,
            CertificateOrderRequestProperties(
                csr=csr, auto_renew=auto_renew,
                key_size=int(CertificateKeySizes.DEFAULT), product_type=type,
                validity_in_years=int(validity)))

    @classmethod
    def delete_order(cls, bearer_token, subscription, resource_group_name, order_name):
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name)
        response = cls._delete(bearer_token, url, codes=(200, 201))
        if response.was_exception or StringUtils.is_blank(response.body):
            return None
        return cls._succeeded(response, 'delete_order')

    @classmethod
    def get_previous_order(cls, bearer_token, subscription, resource_group_name, order_name):
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name)
        response = cls._get(bearer_token, url, codes=(200,))
        return cls._model(response, CertificateOrderDetail, 'get_previous_order')

    @classmethod
    def get_previous_orders(cls, bearer_token, subscription, resource_group_name=None):
        require(bearer_token, 'bearer_token')
        subscription = to_subscription(subscription)
        response = cls._list(
            bearer_token, cls._orders_url(subscription, resource_group_name), codes=(200,))
        return cls._models(response, CertificateOrderDetail, 'get_previous_orders')

    @classmethod
    def resend_certificate_email(cls, bearer_token, subscription, resource_group_name,
                                 order_name):
        return cls._order_action(
            bearer_token, subscription, resource_group_name, order_name, 'resendEmail')

    @classmethod
    def resend_certificate_request_email(cls, bearer_token, subscription, resource_group_name,
                                         order_name):
        return cls._order_action(
            bearer_token, subscription, resource_group_name, order_name, 'resendRequestEmails')

    @classmethod
    def get_email_history(cls, bearer_token, subscription, resource_group_name, order_name):
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name,
                             'retrieveEmailHistory')
        response = cls._post(bearer_token, url, codes=(200,))
        if not cls._succeeded(response, 'get_email_history'):
            return []
        data = response.json()
        if isinstance(data, dict):
            data = data.get('value')
        return CertificateEmail.deserialize_list(data)

    @classmethod
    def get_site_seal(cls, bearer_token, subscription, resource_group_name, order_name,
                      light_theme=False, locale='en-US'):
        """The html snippet of the order's site seal."""
        locale = validate_locale(locale)
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name,
                             'retrieveSiteSeal')
        response = cls._post(
            bearer_token, url, body={'lightTheme': bool(light_theme), 'locale': locale},
            codes=(200,))
        seal = cls._json(response, 'get_site_seal') or {}
        return seal.get('html')

    @classmethod
    def verify_domain_ownership(cls, bearer_token, subscription, resource_group_name,
                                order_name):
        """True once ownership is verified, including orders already past validation."""
        url = cls._order_url(bearer_token, subscription, resource_group_name, order_name,
                             'verifyDomainOwnership')
        response = cls._post(bearer_token, url, codes=(204, 400))
        if response.was_exception:
            log.warning('verify_domain_ownership error:%s', response.exception_message)
            return None
        if response.http_status == 400:
            return PENDING_VALIDATION_CLOSED in (response.body or '')
        return cls._succeeded(response, 'verify_domain_ownership')
