"""View rendering module for HTML templates.

Loads the index template once at startup and renders it for the root routes.
"""
