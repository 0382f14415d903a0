from assetgraph.renderer.mermaid import render_mermaid
from assetgraph.renderer.d2 import render_d2

__all__ = ["render_mermaid", "render_d2"]
