# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0


class ArmClientError(Exception):
    """ARM Client Exception Base Class
    """


class ArmRequestError(ArmClientError):
    """An ARM call did not complete with an expected status.
    """
    def __init__(self, msg, status_code=None, body=None, error_code=None):
        super(ArmRequestError, self).__init__(msg)
        self.status_code = status_code
        self.body = body
        self.error_code = error_code


class ResourceUriError(ArmClientError, ValueError):
    """Malformed or incomplete resource id
    """


class CatalogCacheError(ArmClientError):
    """Marketplace catalog is neither cached nor reachable
    """
