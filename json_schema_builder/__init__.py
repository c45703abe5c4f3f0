"""Core logic for the JSON Schema Builder.

The Gradio UI lives in `app.py`. This package contains the state model it drives:
- an immutable tree of named, typed fields (`fields`)
- index-path addressing and path-copy updates (`paths`, `tree_ops`)
- the field tree store that dispatches add/remove/update operations (`store`)
- the projection of the tree into a plain JSON preview (`preview`)
"""
