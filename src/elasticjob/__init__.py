"""
elasticjob - pod template configuration and pod lifecycle for elastic
PyTorch training jobs on Kubernetes.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

__version__ = "0.1.0"
