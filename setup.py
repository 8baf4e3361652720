# Automatically generated from poetry/pyproject.toml
# flake8: noqa
# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['arm_client',
 'arm_client.appservice',
 'arm_client.compute',
 'arm_client.core',
 'arm_client.deployments',
 'arm_client.management',
 'arm_client.marketplace',
 'arm_client.ratecard',
 'arm_client.storage']

package_data = \
{'': ['*']}

install_requires = \
['PyJWT>=1.7.1',
 'msrest>=0.6.10',
 'python-dateutil (>=2.8.1,<3.0.0)',
 'requests>=2.22.0,<3.0.0']

extras_require = \
{'test': ['mock>=4.0.2', 'pytest>=6.0.0']}

setup_kwargs = {
    'name': 'arm-client',
    'version': '0.1.0',
    'description': 'Azure Resource Manager REST client',
    'long_description': '\n# ARM Client\n\nClassmethod clients for the Azure Resource Manager REST api: resource groups,\nsubscriptions, providers, App Service, compute, storage, deployments, the\nMarketplace catalog and the Commerce rate card.\n\n    $ pip install -e .[test]\n    $ pytest tests_arm\n',
    'long_description_content_type': 'text/markdown',
    'author': 'Cloud Custodian Project',
    'author_email': None,
    'maintainer': None,
    'maintainer_email': None,
    'url': 'https://cloudcustodian.io',
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'python_requires': '>=3.6,<4.0',
}


setup(**setup_kwargs)
