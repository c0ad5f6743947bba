"""Collect tokenize and layout counters for a batch of renders."""

from puszta import DisplayList, FontMetrics, Page
from puszta.profiling import profiled_layout

page = Page(DisplayList({"regular": FontMetrics()}), {"regular": "regular"})

with profiled_layout() as metrics:
    for width in (320, 640, 1280):
        page.load("<p>" + " ".join(f"word{i}" for i in range(500)) + "</p>")
        page.render(width, 720)

print(metrics.summary())
