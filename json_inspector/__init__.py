"""Core logic for JSON Inspector.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- validate JSON text and locate syntax errors
- parse it into ordered native values
- pretty-print or minify parsed trees
- compute structural statistics (types, keys, values, nesting, size)

`json_inspector.pipeline` chains these stages for callers.
"""
