"""kubegraph: layered layout and click-to-inspect details for Kubernetes resource graphs."""

__version__ = "0.1.0"
