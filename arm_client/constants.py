# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0

"""
Endpoints
"""
ARM_ENDPOINT = 'https://management.azure.com'
CATALOG_ENDPOINT = 'https://catalogapi.azure.com'

"""
Environment Variables
"""
ENV_ACCESS_TOKEN = 'AZURE_ACCESS_TOKEN'
ENV_SUB_ID = 'AZURE_SUBSCRIPTION_ID'
ENV_TIMEOUT = 'ARM_CLIENT_TIMEOUT'
ENV_MAX_ATTEMPTS = 'ARM_CLIENT_MAX_ATTEMPTS'
ENV_CACHE_DIR = 'ARM_CLIENT_CACHE_DIR'

"""
Http
"""
DEFAULT_TIMEOUT = 15
LONG_TIMEOUT = 60
DEFAULT_MAX_ATTEMPTS = 4
DEFAULT_MIN_RETRY_DELAY = 1
DEFAULT_MAX_RETRY_DELAY = 30

DEFAULT_SUCCESS_CODES = (200, 201, 202)
DEFAULT_DELETE_SUCCESS_CODES = (200, 202)
DEFAULT_HEAD_SUCCESS_CODES = (200, 201, 202, 204, 404)

# polling of long running storage account creation
STORAGE_CREATE_POLL_ATTEMPTS = 60
STORAGE_CREATE_POLL_DELAY = 5

# substrings of transport errors that are worth retrying
RETRYABLE_ERROR_MESSAGES = ('no such host', 'cancelled')

NIL_UUID = '00000000-0000-0000-0000-000000000000'

"""
Marketplace Catalog Cache
"""
CATALOG_CACHE_FOLDER = ('_azureSdk', 'catalogApi')
CATALOG_CACHE_DAYS = 15
CATALOG_CURATION_ID = '20190624.2'

"""
Resource Types
"""
RESOURCE_GROUPS_TYPE = 'Microsoft.Resources/resourceGroups'
USER_ASSIGNED_IDENTITY_PREFIX = 'Microsoft.ManagedIdentity/userAssignedIdentities/'
