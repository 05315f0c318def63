# (c) Copyright IBM Corp. 2025

"""
This file contains a config object that will hold configuration options for the package.
Defaults are set and can be overridden after package load.
"""
from lsfinder.util import DictionaryOfStan

# La Protagonista
config = DictionaryOfStan()

# In-code discovery settings.  Environment variables and the YAML file named by
# LSFINDER_CONFIG_PATH take precedence over these.
#
# config["discovery"]["max_retries"] = 3
# config["discovery"]["retry_delay"] = 0.5
