"""Entry point for `python -m kubegraph`.

Usage:
    python -m kubegraph
    KUBEGRAPH_GRAPH_FILE=graph.json python -m kubegraph
"""

from __future__ import annotations

import asyncio

from kubegraph.app import main

asyncio.run(main())
