"""
Controller configuration.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from elasticjob.config.config_loader import ConfigLoader
from elasticjob.config.settings import ControllerSettings, load_settings

__all__ = ["ConfigLoader", "ControllerSettings", "load_settings"]
