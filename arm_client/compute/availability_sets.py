# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from arm_client.compute.client import ComputeClient
from arm_client.compute.models import AvailabilitySet
from arm_client.utils import StringUtils, require


class AvailabilitySetClient(ComputeClient):

    API_VERSION = '2019-03-01'
    RESOURCE_TYPE = 'availabilitySets'

    @classmethod
    def create(cls, bearer_token, subscription, resource_group_name, availability_set_name,
               availability_set):
        require(bearer_token, 'bearer_token')
        if availability_set is None:
            raise ValueError('availability_set is required')
        resource_id = cls.resource_id(subscription, resource_group_name, availability_set_name)
        response = cls._put(
            bearer_token, cls._resource_url(resource_id), body=availability_set,
            codes=(200, 201))
        return cls._model(response, AvailabilitySet, 'create')

    @classmethod
    def update(cls, bearer_token, availability_set):
        """Write back an availability set previously read, addressed by its id."""
        require(bearer_token, 'bearer_token')
        if availability_set is None or StringUtils.is_blank(availability_set.id):
            raise ValueError('availability_set with an id is required')
        response = cls._put(
            bearer_token, cls._resource_url(availability_set.id), body=availability_set,
            codes=(200, 201))
        return cls._model(response, AvailabilitySet, 'update')

    @classmethod
    def delete(cls, bearer_token, resource_id):
        return cls._remove(bearer_token, resource_id, codes=(200, 204))

    @classmethod
    def get(cls, bearer_token, resource_id):
        require(bearer_token, 'bearer_token')
        response = cls._get(bearer_token, cls._resource_url(resource_id), codes=(200,))
        return cls._model(response, AvailabilitySet, 'get')

    @classmethod
    def list(cls, bearer_token, subscription, resource_group_name=None):
        require(bearer_token, 'bearer_token')
        response = cls._list(
            bearer_token, cls.collection_url(subscription, resource_group_name), codes=(200,))
        return cls._models(response, AvailabilitySet, 'list')
