"""rosactl - create managed OpenShift clusters.

rosactl validates cluster creation input, such as the OpenShift version and
worker disk size, before a request is sent to the cluster service.
"""

from rosactl.config import RosaConfig

__version__ = "0.1.0"

__all__ = [
    "RosaConfig",
    "__version__",
]
