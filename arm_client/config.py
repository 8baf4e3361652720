# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import os
import logging

from arm_client import constants

log = logging.getLogger('arm_client.config')


class Bag(dict):
    def __getattr__(self, k):
        try:
            return self[k]
        except KeyError:
            raise AttributeError(k)

    def __setattr__(self, k, v):
        self[k] = v


class Config(Bag):

    def copy(self, **kw):
        d = {}
        d.update(self)
        d.update(**kw)
        return Config(d)

    @classmethod
    def empty(cls, **kw):
        d = {}
        d.update({
            'timeout': int(os.environ.get(constants.ENV_TIMEOUT, constants.DEFAULT_TIMEOUT)),
            'max_attempts': int(os.environ.get(
                constants.ENV_MAX_ATTEMPTS, constants.DEFAULT_MAX_ATTEMPTS)),
            'cache_dir': os.environ.get(constants.ENV_CACHE_DIR, os.getcwd()),
            'access_token': os.environ.get(constants.ENV_ACCESS_TOKEN),
            'subscription_id': os.environ.get(constants.ENV_SUB_ID),
            'authorization_file': None})
        d.update(kw)
        return cls(d)
