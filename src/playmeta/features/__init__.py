"""
Summary: Feature packages for parsing, songs and connectors.
Why: Each feature keeps its domain and use cases side by side.
"""
