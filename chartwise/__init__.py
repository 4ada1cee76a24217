"""Chart configuration transformation engine.

Turns a tabular result set plus a declarative chart configuration into the
render spec of a 2-D plotting surface.
"""

from pathlib import Path

BASE_PATH = Path(__file__).resolve().parent.parent
