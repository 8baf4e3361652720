# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import json
import logging
import os

import jwt

from arm_client import constants
from arm_client.exceptions import ArmClientError
from arm_client.utils import StringUtils, to_subscription

log = logging.getLogger('arm_client.session')


class Session:

    def __init__(self, access_token=None, subscription_id=None, authorization_file=None):
        """
        :param access_token: Bearer token, overrides every other source.
        :param subscription_id: If provided overrides the file and environment.
        :param authorization_file: Json file with access_token and subscription_id keys.
        """
        self.access_token_override = access_token
        self.subscription_id_override = subscription_id
        self.authorization_file = authorization_file
        self._auth_params = None

    @classmethod
    def from_config(cls, config):
        return cls(access_token=config.get('access_token'),
                   subscription_id=config.get('subscription_id'),
                   authorization_file=config.get('authorization_file'))

    @property
    def auth_params(self):
        self._initialize_session()
        return self._auth_params

    def _initialize_session(self):
        # Only run once
        if self._auth_params is not None:
            return

        if self.authorization_file:
            with open(self.authorization_file) as json_file:
                params = json.load(json_file)
            source = 'authorization file'
        else:
            params = {
                'access_token': os.environ.get(constants.ENV_ACCESS_TOKEN),
                'subscription_id': os.environ.get(constants.ENV_SUB_ID),
            }
            source = 'environment'

        if self.access_token_override is not None:
            params['access_token'] = self.access_token_override
        if self.subscription_id_override is not None:
            params['subscription_id'] = self.subscription_id_override

        self._auth_params = params
        log.debug('Session credentials resolved from %s', source)

    def get_bearer_token(self):
        token = self.auth_params.get('access_token')
        if StringUtils.is_blank(token):
            raise ArmClientError(
                'No access token, set %s or use an authorization file' %
                constants.ENV_ACCESS_TOKEN)
        return token

    def get_subscription_id(self):
        subscription = self.auth_params.get('subscription_id')
        if StringUtils.is_blank(subscription) and not hasattr(subscription, 'int'):
            raise ArmClientError(
                'No subscription id, set %s or use an authorization file' %
                constants.ENV_SUB_ID)
        try:
            return to_subscription(subscription)
        except (TypeError, ValueError) as e:
            raise ArmClientError(str(e))

    def get_tenant_id(self):
        """The ``tid`` claim of the access token. The signature is not checked."""
        claims = jwt.decode(self.get_bearer_token(), options={'verify_signature': False})
        return claims.get('tid')

    def __repr__(self):
        return '<Session subscription:%s file:%s>' % (
            self.auth_params.get('subscription_id'), self.authorization_file)
