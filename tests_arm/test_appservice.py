# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import datetime

from .arm_common import BaseTest, RESOURCE_GROUP_URL, SUBSCRIPTION_URL, arm_error, \
    mock_response, resource_id
from arm_client.appservice.misc import AppServiceMiscClient, ApplicationStacksClient
from arm_client.appservice.models import AppServiceWebApp
from arm_client.appservice.plans import AppServicePlanClient
from arm_client.appservice.webapps import AppServiceWebAppClient, DeletedWebAppsClient
from arm_client.models import OSTypeNames, ResourceSku
from arm_client.resource_uri import ResourceUri

PLAN_URL = RESOURCE_GROUP_URL + '/providers/Microsoft.Web/serverfarms/plan1'
APP_ID = resource_id('Microsoft.Web/sites', 'app1')
APP_URL = 'https://management.azure.com' + APP_ID


class AppServicePlanClientTest(BaseTest):

    sku = ResourceSku(name='S1', tier='Standard', capacity=1)

    def test_create_standard_plan(self):
        self.patch_request(mock_response(200, {
            'name': 'plan1', 'properties': {'reserved': True}}))
        plan = AppServicePlanClient.create_standard_plan(
            self.token, self.subscription, 'test_rg', 'plan1', 'westus', 'Linux', self.sku)

        self.assertTrue(plan.is_linux)
        method, url, body = self.sent()
        self.assertEqual((method, url), ('PUT', PLAN_URL + '?api-version=2019-08-01'))
        self.assertEqual(body['sku'], {'name': 'S1', 'tier': 'Standard', 'capacity': 1})
        self.assertEqual(body['properties'], {
            'hyperV': False, 'isSpot': False, 'perSiteScaling': False, 'reserved': True})

    def test_create_elastic_plan(self):
        self.patch_request(mock_response(202, '{}'))
        AppServicePlanClient.create_elastic_scaling_plan(
            self.token, self.subscription, 'test_rg', 'plan1', 'westus',
            OSTypeNames.WINDOWS, self.sku, 10, per_site_scaling=True)
        properties = self.sent()[2]['properties']
        self.assertEqual(properties['maximumElasticWorkerCount'], 10)
        self.assertTrue(properties['perSiteScaling'])
        self.assertFalse(properties['reserved'])

    def test_create_spot_plan_in_past(self):
        with self.assertRaises(ValueError):
            AppServicePlanClient.create_spot_plan(
                self.token, self.subscription, 'test_rg', 'plan1', 'westus', 'Linux',
                self.sku, 10, datetime.datetime(2000, 1, 1))

    def test_create_requires_sku(self):
        with self.assertRaises(ValueError):
            AppServicePlanClient.create_standard_plan(
                self.token, self.subscription, 'test_rg', 'plan1', 'westus', 'Linux', None)

    def test_list(self):
        self.patch_request(mock_response(200, {'value': [{'name': 'plan1'}]}))
        plans = AppServicePlanClient.list(self.token, self.subscription, detailed=True)
        self.assertEqual(plans[0].name, 'plan1')
        self.assertSent('GET', SUBSCRIPTION_URL + '/providers/Microsoft.Web/serverfarms'
                               '?api-version=2019-08-01&detailed=true')

    def test_get_capabilities(self):
        self.patch_request(mock_response(200, [
            {'name': 'maxWorkers', 'value': '10'}, {'name': 'linux', 'value': 'true'}]))
        self.assertEqual(
            AppServicePlanClient.get_capabilities(
                self.token, self.subscription, 'test_rg', 'plan1'),
            {'maxWorkers': '10', 'linux': 'true'})

    def test_get_usage(self):
        self.patch_request(mock_response(200, {'value': [
            {'currentValue': 1, 'limit': 10, 'name': {'value': 'sites'}}]}))
        usage = AppServicePlanClient.get_usage(self.token, self.subscription, 'test_rg', 'plan1')
        self.assertEqual(usage[0].counter_name, 'sites')
        self.assertEqual(usage[0].maximum_limit, 10)

    def test_restart_all_web_apps(self):
        self.patch_request(mock_response(204))
        self.assertTrue(AppServicePlanClient.restart_all_web_apps(
            self.token, self.subscription, 'test_rg', 'plan1', force=True))
        self.assertSent('POST', PLAN_URL + '/restartSites?api-version=2019-08-01'
                                           '&softRestart=false')

    def test_reboot_worker(self):
        self.patch_request(mock_response(500, arm_error('InternalError')))
        self.assertFalse(AppServicePlanClient.reboot_worker(
            self.token, self.subscription, 'test_rg', 'plan1', 'RD0001'))
        self.assertSent('POST', PLAN_URL + '/workers/RD0001/reboot?api-version=2019-08-01')


class AppServiceWebAppClientTest(BaseTest):

    app_uri = ResourceUri.parse(APP_ID)

    def test_requires_web_app_uri(self):
        vm = ResourceUri.parse(resource_id('Microsoft.Compute/virtualMachines', 'vm'))
        with self.assertRaises(ValueError):
            AppServiceWebAppClient.start(self.token, vm)
        with self.assertRaises(ValueError):
            AppServiceWebAppClient.start(self.token, APP_ID)

    def test_get_missing(self):
        self.patch_request(mock_response(404, arm_error('ResourceNotFound')))
        self.assertIsNone(AppServiceWebAppClient.get(self.token, self.app_uri))

    def test_get_slot(self):
        self.patch_request(mock_response(200, {'name': 'app1/staging', 'kind': 'app'}))
        app = AppServiceWebAppClient.get(self.token, self.app_uri, slot_name='staging')
        self.assertEqual(app.kind, 'app')
        self.assertSent('GET', APP_URL + '/slots/staging?api-version=2019-08-01')

    def test_create_or_update(self):
        self.patch_request(mock_response(202, '{}'))
        AppServiceWebAppClient.create_or_update(
            self.token, self.subscription, 'test_rg',
            AppServiceWebApp(name='app1', location='westus'))
        method, url, body = self.sent()
        self.assertEqual((method, url), ('PUT', APP_URL + '?api-version=2019-08-01'))
        self.assertEqual(body, {'name': 'app1', 'location': 'westus'})

    def test_delete(self):
        self.patch_request(mock_response(404))
        self.assertTrue(AppServiceWebAppClient.delete(
            self.token, self.app_uri, delete_metrics=True))
        self.assertSent('DELETE', APP_URL + '?api-version=2019-08-01'
                                            '&deleteMetrics=true&deleteEmptyServerFarm=false')

    def test_actions(self):
        self.patch_request(mock_response(200), mock_response(200), mock_response(409))
        self.assertTrue(AppServiceWebAppClient.restart(
            self.token, self.app_uri, soft_restart=False, synchronous=True))
        self.assertSent('POST', APP_URL + '/restart?api-version=2019-08-01'
                                          '&softRestart=false&synchronous=true')
        self.assertTrue(AppServiceWebAppClient.start(self.token, self.app_uri, 'staging'))
        self.assertSent('POST', APP_URL + '/slots/staging/start?api-version=2019-08-01')
        self.assertFalse(AppServiceWebAppClient.stop(self.token, self.app_uri))


class DeletedWebAppsClientTest(BaseTest):

    def test_get_deleted_web_apps(self):
        self.patch_request(mock_response(200, {'value': [
            {'name': 'app1', 'properties': {'deletedSiteId': 12}}]}))
        apps = DeletedWebAppsClient.get_deleted_web_apps(
            self.token, self.subscription, location='westus')
        self.assertEqual(apps[0].properties.deleted_site_id, 12)
        self.assertSent('GET', SUBSCRIPTION_URL + '/providers/Microsoft.Web/locations/westus/'
                               'deletedSites?api-version=2019-08-01')

    def test_get_deleted_web_app(self):
        self.patch_request(mock_response(200, {'name': 'app1'}))
        DeletedWebAppsClient.get_deleted_web_app(self.token, self.subscription, 'westus', 12)
        self.assertSent('GET', SUBSCRIPTION_URL + '/providers/Microsoft.Web/locations/westus/'
                               'deletedSites/12?api-version=2019-08-01')

    def test_get_deleted_web_app_site_id(self):
        with self.assertRaises(ValueError):
            DeletedWebAppsClient.get_deleted_web_app(
                self.token, self.subscription, 'westus', -1)
        with self.assertRaises(TypeError):
            DeletedWebAppsClient.get_deleted_web_app(
                self.token, self.subscription, 'westus', '12')


class AppServiceMiscTest(BaseTest):

    def test_is_name_available(self):
        self.patch_request(
            mock_response(200, {'nameAvailable': True}),
            mock_response(200, {'nameAvailable': False, 'reason': 'AlreadyExists'}),
            mock_response(200, {'nameAvailable': False, 'reason': 'Invalid'}))
        args = (self.token, self.subscription, 'app1')
        self.assertTrue(AppServiceMiscClient.is_name_available(*args))
        self.assertFalse(AppServiceMiscClient.is_name_available(*args))
        self.assertIsNone(AppServiceMiscClient.is_name_available(*args))

        method, url, body = self.sent()
        self.assertEqual(url, SUBSCRIPTION_URL + '/providers/Microsoft.Web/'
                                                 'checknameavailability?api-version=2019-08-01')
        self.assertEqual(body, {'isFqdn': False, 'name': 'app1', 'type': 'Site'})

    def test_application_stacks(self):
        self.patch_request(mock_response(200, {'value': [{'properties': {
            'name': 'python', 'majorVersions': [{
                'runtimeVersion': '3', 'minorVersions': [
                    {'runtimeVersion': '3.8'}, {'runtimeVersion': '3.9'}]}]}}]}))
        stacks = ApplicationStacksClient.get_application_stacks(self.token, 'Linux')
        runtimes = stacks[0].simplified()
        self.assertEqual([r.minor_version for r in runtimes], ['3.8', '3.9'])
        self.assertSent('GET', 'https://management.azure.com/providers/Microsoft.Web/'
                               'availableStacks?api-version=2019-08-01&osTypeSelected=Linux')
