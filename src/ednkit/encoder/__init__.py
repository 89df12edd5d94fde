# topmark:header:start
#
#   project      : EDNKit
#   file         : __init__.py
#   file_relpath : src/ednkit/encoder/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type-driven EDN encoding engine.

Layers, leaf first:

- [`ednkit.encoder.literals`][ednkit.encoder.literals]: renderers for single primitive values.
- [`ednkit.encoder.structures`][ednkit.encoder.structures]: composite renderers (vector,
  list, map, set, optional, record, typed slots).
- [`ednkit.encoder.classifier`][ednkit.encoder.classifier]: maps a shape to its renderer.
- [`ednkit.encoder.cache`][ednkit.encoder.cache]: process-wide, thread-safe shape → renderer memo.
- [`ednkit.encoder.session`][ednkit.encoder.session]: one encode call's output buffer.
- [`ednkit.encoder.stream`][ednkit.encoder.stream]: newline-delimited writer over a binary sink.
"""

from __future__ import annotations
