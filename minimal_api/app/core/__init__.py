"""
Cross-cutting infrastructure: settings, logging, database wiring,
bearer tokens, route authorization policy and error rendering.
"""
