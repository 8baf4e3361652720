# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""
Marketplace gallery lookups.

The catalog api is public and slow, so documents are kept on disk below
``{cache_dir}/_azureSdk/catalogApi/{locale}.{language}/`` and fetched
again once they are older than midnight UTC fifteen days ago.
"""
import datetime
import json
import logging
import os
import tempfile
import threading

from arm_client import constants
from arm_client.client import ArmClient
from arm_client.config import Config
from arm_client.exceptions import CatalogCacheError
from arm_client.marketplace.models import IndexCatalogCategory, IndexCatalogMenu
from arm_client.rest import RestApiClient
from arm_client.utils import StringUtils, require, utcnow

log = logging.getLogger('arm_client.marketplace.catalog')

DEFAULT_LANGUAGE = 'en'
DEFAULT_LOCALE = 'en-us'

# guards directory creation and freshness checks across threads
_fs_lock = threading.Lock()


class CatalogFileCache:

    def __init__(self, cache_dir=None):
        if StringUtils.is_blank(cache_dir):
            cache_dir = Config.empty().cache_dir
        self.root = os.path.join(
            os.path.abspath(os.path.expanduser(cache_dir)), *constants.CATALOG_CACHE_FOLDER)

    def path(self, language, locale, category_id=None, limited_rows=True):
        folder = os.path.join(self.root, '%s.%s' % (locale, language))
        if category_id is None:
            return os.path.join(folder, 'catalog.json')
        return os.path.join(folder, '%s_%s.json' % (
            'Limited' if limited_rows else 'Complete', category_id.lower()))

    @staticmethod
    def expires_before():
        midnight = utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
        return midnight - datetime.timedelta(days=constants.CATALOG_CACHE_DAYS)

    def is_fresh(self, path):
        """Create the folder of path if needed, True when path can be used as is."""
        with _fs_lock:
            folder = os.path.dirname(path)
            if not os.path.isdir(folder):
                try:
                    os.makedirs(folder, exist_ok=True)
                except OSError as e:
                    log.warning("Could not create directory: %s err: %s", folder, e)
                return False
            if not os.path.isfile(path):
                return False
            modified = datetime.datetime.fromtimestamp(
                os.stat(path).st_mtime, tz=datetime.timezone.utc)
            return modified >= self.expires_before()

    def load(self, path):
        """The cached document, None when missing or unreadable."""
        if not os.path.isfile(path):
            return None
        try:
            with open(path, encoding='utf-8') as fh:
                return json.load(fh)
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable catalog cache %s err: %s", path, e)
            return None

    def save(self, path, body):
        """Write body next to path and move it into place, so readers never see a partial file."""
        tmp = None
        try:
            with tempfile.NamedTemporaryFile(
                    'w', encoding='utf-8', dir=os.path.dirname(path), suffix='.tmp',
                    delete=False) as fh:
                tmp = fh.name
                fh.write(body)
            os.replace(tmp, path)
        except OSError as e:
            log.warning("Could not save catalog cache %s err: %s", path, e)
            if tmp is not None and os.path.exists(tmp):
                os.remove(tmp)


class CatalogClient(ArmClient):
    """Read only access to the Marketplace gallery, no token needed."""

    API_VERSION = '2018-08-01-beta'

    @classmethod
    def _fetch(cls, category_id, language, locale, limited_rows):
        effective_locale = '%s.%s' % (language, locale)
        if category_id is None:
            url = '%s/Catalog/CreateMenus' % constants.CATALOG_ENDPOINT
            params = {'x-ms-effective-locale': effective_locale}
        else:
            url = '%s/catalog/portal' % constants.CATALOG_ENDPOINT
            params = {
                'curationArea': 'gallery',
                'limitRows': StringUtils.bool_string(limited_rows),
                'combineReferences': 'true',
                'curationId': constants.CATALOG_CURATION_ID,
                'presistOrder': 'true',
                'x-ms-effective-locale': effective_locale,
                'menuId': category_id,
            }
        # a complete listing can take a long time
        timeout = constants.DEFAULT_TIMEOUT if limited_rows else constants.LONG_TIMEOUT
        return RestApiClient.get_without_authentication(
            url, cls.API_VERSION, params=params, codes=(200,), timeout=timeout,
            retry_policy=cls.RETRY_POLICY)

    @classmethod
    def _get_json(cls, category_id=None, language=DEFAULT_LANGUAGE, locale=DEFAULT_LOCALE,
                  limited_rows=True, cache_dir=None, strict=False):
        if StringUtils.is_blank(language):
            language = DEFAULT_LANGUAGE
        if StringUtils.is_blank(locale):
            locale = DEFAULT_LOCALE

        cache = CatalogFileCache(cache_dir)
        path = cache.path(language, locale, category_id, limited_rows)
        if cache.is_fresh(path):
            data = cache.load(path)
            if data is not None:
                log.debug("Using catalog cache file %s", path)
                return data

        log.info("Reloading catalog %s into %s", category_id or 'menus', path)
        response = cls._fetch(category_id, language, locale, limited_rows)
        if cls._succeeded(response, 'get_json') and not StringUtils.is_blank(response.body):
            data = response.json()
            if data is not None:
                cache.save(path, response.body)
                return data

        stale = cache.load(path)
        if stale is not None:
            log.warning("Using expired catalog cache file %s", path)
            return stale
        if strict:
            raise CatalogCacheError(
                'catalog %s is neither cached nor reachable' % (category_id or 'menus'))
        return None

    @classmethod
    def get_index(cls, language=DEFAULT_LANGUAGE, locale=DEFAULT_LOCALE, cache_dir=None,
                  strict=False):
        """The catalog menus, each item stamped with the language and locale asked for."""
        data = cls._get_json(None, language, locale, cache_dir=cache_dir, strict=strict)
        if data is None:
            return None
        menu = IndexCatalogMenu.deserialize(data)
        for item in menu.menu_items():
            item.language = language
            item.locale = locale
        return menu

    @classmethod
    def get_categories(cls, catalog_index_id, language=DEFAULT_LANGUAGE, locale=DEFAULT_LOCALE,
                       limited_rows=False, cache_dir=None, strict=False):
        require(catalog_index_id, 'catalog_index_id')
        data = cls._get_json(catalog_index_id, language, locale, limited_rows,
                             cache_dir=cache_dir, strict=strict)
        if not isinstance(data, list):
            return []
        return IndexCatalogCategory.deserialize_list(data)

    @classmethod
    def _get_section(cls, catalog_index_id, section_name, language, locale, cache_dir):
        require(section_name, 'catalog_section_name')
        for category in cls.get_categories(
                catalog_index_id, language, locale, cache_dir=cache_dir):
            if category.group_id == section_name:
                return category
        return None

    @classmethod
    def get_category_items(cls, catalog_index_id, catalog_section_name,
                           language=DEFAULT_LANGUAGE, locale=DEFAULT_LOCALE, cache_dir=None):
        section = cls._get_section(
            catalog_index_id, catalog_section_name, language, locale, cache_dir)
        if section is None:
            return []
        return section.items or []

    @classmethod
    def get_category_item(cls, catalog_index_id, catalog_section_name, id_or_name_or_offer_id,
                          language=DEFAULT_LANGUAGE, locale=DEFAULT_LOCALE, cache_dir=None):
        """Find an offer by id, offer id, legacy id, big id or display name."""
        require(id_or_name_or_offer_id, 'id_or_name_or_offer_id')
        for item in cls.get_category_items(
                catalog_index_id, catalog_section_name, language, locale, cache_dir):
            if item.matches(id_or_name_or_offer_id):
                return item
        return None

    @classmethod
    def get_category_item_plan(cls, catalog_index_id, catalog_section_name,
                               id_or_name_or_offer_id, plan_id_or_sku_id,
                               language=DEFAULT_LANGUAGE, locale=DEFAULT_LOCALE,
                               cache_dir=None):
        require(plan_id_or_sku_id, 'plan_id_or_sku_id')
        item = cls.get_category_item(catalog_index_id, catalog_section_name,
                                     id_or_name_or_offer_id, language, locale, cache_dir)
        if item is None:
            return None
        return item.get_plan(plan_id_or_sku_id)
