"""Cache a tokenized document to disk as a JSON round-trip."""

from puszta import tokenize
from puszta.serialization import stream_from_json, to_json

stream = tokenize("<title>Cached</title><p>This token stream can be <b>stored</b>.</p>")

json_str = to_json(stream)
restored = stream_from_json(json_str)

print("Original == restored:", stream == restored)
print("Title:", restored.title)
print("JSON length:", len(json_str), "chars")
