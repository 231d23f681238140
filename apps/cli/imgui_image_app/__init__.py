"""Command-line tools for the image widget bindings."""
