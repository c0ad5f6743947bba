"""Lay out 200 documents in parallel, one engine per worker call."""

from concurrent.futures import ThreadPoolExecutor

from puszta import Canvas, DisplayList, FontMetrics, LayoutConfig, layout_tokens, tokenize
from puszta.config import layout_config_context

docs = [f"<h1>Doc {i}</h1><p>Content for document {i}, <i>laid out</i> in a worker.</p>" for i in range(200)]


def lay_out(markup: str) -> int:
    renderer = DisplayList({"regular": FontMetrics()})
    with layout_config_context(LayoutConfig(base_font_size=14.0)):
        result = layout_tokens(tokenize(markup).tokens, renderer, {"regular": "regular"}, Canvas(480, 320))
    return result.lines


with ThreadPoolExecutor(max_workers=8) as ex:
    lines = list(ex.map(lay_out, docs))

print(f"Laid out {len(lines)} documents in parallel")
print("Lines in first doc:", lines[0])
