"""Load a page, lay it out, and print the display list."""

from puszta import DisplayList, FontMetrics, Page

renderer = DisplayList(
    {
        "rubik": FontMetrics(advance=26.0, ascent=36.0),
        "rubik_italic": FontMetrics(advance=24.0, ascent=34.0),
    }
)
page = Page(renderer, {"regular": "rubik", "italic": "rubik_italic"})

page.load(
    "<!DOCTYPE html><head><title>Puszta</title><style>p { color: red }</style></head>"
    "<h1>Welcome</h1>"
    "<p>Words wrap at the right edge, <b>bold</b> and <i>italic</i> runs share a baseline.</p>"
    "<p><small>small print</small> and <big>big print</big></p>"
)
result = page.render(320, 240)

print("Title:", page.title)
print(f"{result.lines} lines, {result.content_height:.1f}px tall")
for cmd in renderer.commands:
    print(f"  {cmd.font_id:<13} x={cmd.x:6.1f} y={cmd.y:6.1f} scale={cmd.scale:.3f}  {cmd.text}")
