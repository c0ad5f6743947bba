"""Scroll a long page through a fixed viewport; off-screen words are culled."""

from puszta import DisplayList, FontMetrics, Page

renderer = DisplayList({"mono": FontMetrics()}, viewport_height=120.0, cull_margin=20.0)
page = Page(renderer, {"regular": "mono"})
page.load("".join(f"<p>Paragraph {i} of a long document.</p>" for i in range(40)))

for offset in (0.0, -200.0, -400.0):
    renderer.clear()
    page.set_cursor(y=offset)
    result = page.render(400, 120)
    print(
        f"offset {offset:7.1f}: drew {len(renderer.commands):3d},"
        f" culled {renderer.culled:3d} of {len(result.segments)} segments"
    )
