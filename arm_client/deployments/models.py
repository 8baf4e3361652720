# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import enum

from arm_client.models import ArmModel


class DeploymentMode(str, enum.Enum):
    COMPLETE = 'Complete'
    INCREMENTAL = 'Incremental'
    DEFAULT = 'Incremental'


class OnErrorDeploymentType(str, enum.Enum):
    SPECIFIC_DEPLOYMENT = 'SpecificDeployment'
    LAST_SUCCESSFUL = 'LastSuccessful'


class VersionedUri(ArmModel):

    _attribute_map = {
        'content_version': {'key': 'contentVersion', 'type': 'str'},
        'uri': {'key': 'uri', 'type': 'str'},
    }


class OnErrorDeployment(ArmModel):
    """Deployment to fall back to when this one fails."""

    _attribute_map = {
        'type': {'key': 'type', 'type': 'OnErrorDeploymentType'},
        'deployment_name': {'key': 'deploymentName', 'type': 'str'},
    }


class DeploymentRequestProperties(ArmModel):
    """Either ``template`` or ``template_link`` is set, likewise for parameters."""

    _attribute_map = {
        'template_link': {'key': 'templateLink', 'type': 'VersionedUri'},
        'template': {'key': 'template', 'type': 'object'},
        'parameters': {'key': 'parameters', 'type': 'object'},
        'parameters_link': {'key': 'parametersLink', 'type': 'VersionedUri'},
        'mode': {'key': 'mode', 'type': 'DeploymentMode'},
        'on_error_deployment': {'key': 'onErrorDeployment', 'type': 'OnErrorDeployment'},
    }


class DeploymentRequest(ArmModel):

    _attribute_map = {
        'location': {'key': 'location', 'type': 'str'},
        'properties': {'key': 'properties', 'type': 'DeploymentRequestProperties'},
    }


class DeploymentProviderAliasPath(ArmModel):

    _attribute_map = {
        'api_versions': {'key': 'apiVersions', 'type': '[str]'},
        'path': {'key': 'path', 'type': 'str'},
    }


class DeploymentProviderAlias(ArmModel):

    _attribute_map = {
        'name': {'key': 'name', 'type': 'str'},
        'paths': {'key': 'paths', 'type': '[DeploymentProviderAliasPath]'},
    }


class DeploymentProviderTypeResourceType(ArmModel):

    _attribute_map = {
        'api_versions': {'key': 'apiVersions', 'type': '[str]'},
        'resource_type': {'key': 'resourceType', 'type': 'str'},
        'capabilities': {'key': 'capabilities', 'type': 'str'},
        'locations': {'key': 'locations', 'type': '[str]'},
        'properties': {'key': 'properties', 'type': '{object}'},
        'aliases': {'key': 'aliases', 'type': '[DeploymentProviderAlias]'},
    }


class DeploymentProviderType(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'namespace': {'key': 'namespace', 'type': 'str'},
        'registration_policy': {'key': 'registrationPolicy', 'type': 'str'},
        'registration_state': {'key': 'registrationState', 'type': 'str'},
        'resource_types': {'key': 'resourceTypes', 'type': '[DeploymentProviderTypeResourceType]'},
    }


class DeploymentResponseProperties(ArmModel):

    _attribute_map = {
        'template_hash': {'key': 'templateHash', 'type': 'str'},
        'provisioning_state': {'key': 'provisioningState', 'type': 'str'},
        'correlation_id': {'key': 'correlationId', 'type': 'str'},
        'duration': {'key': 'duration', 'type': 'str'},
        'timestamp': {'key': 'timestamp', 'type': 'iso-8601'},
        'mode': {'key': 'mode', 'type': 'DeploymentMode'},
        'on_error_deployment': {'key': 'onErrorDeployment', 'type': 'OnErrorDeployment'},
        'outputs': {'key': 'outputs', 'type': '{object}'},
        'template_link': {'key': 'templateLink', 'type': 'VersionedUri'},
        'parameters': {'key': 'parameters', 'type': 'object'},
        'parameters_link': {'key': 'parametersLink', 'type': 'VersionedUri'},
        'providers': {'key': 'providers', 'type': '[DeploymentProviderType]'},
        'error': {'key': 'error', 'type': '{object}'},
    }


class DeploymentResponse(ArmModel):

    _attribute_map = {
        'id': {'key': 'id', 'type': 'str'},
        'location': {'key': 'location', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'properties': {'key': 'properties', 'type': 'DeploymentResponseProperties'},
    }

    @property
    def provisioning_state(self):
        return self.properties and self.properties.provisioning_state


class DeploymentStatusResponse(DeploymentResponse):
    pass


class DeploymentTemplateResource(ArmModel):

    _attribute_map = {
        'api_version': {'key': 'apiVersion', 'type': 'str'},
        'type': {'key': 'type', 'type': 'str'},
        'name': {'key': 'name', 'type': 'str'},
        'location': {'key': 'location', 'type': 'str'},
        'tags': {'key': 'tags', 'type': '{str}'},
        'properties': {'key': 'properties', 'type': '{object}'},
        'depends_on': {'key': 'dependsOn', 'type': '[str]'},
    }


class AzureDeploymentTemplate(ArmModel):

    _attribute_map = {
        'schema': {'key': '$schema', 'type': 'str'},
        'content_version': {'key': 'contentVersion', 'type': 'str'},
        'resources': {'key': 'resources', 'type': '[DeploymentTemplateResource]'},
        'parameters': {'key': 'parameters', 'type': 'object'},
        'variables': {'key': 'variables', 'type': 'object'},
        'outputs': {'key': 'outputs', 'type': 'object'},
    }
