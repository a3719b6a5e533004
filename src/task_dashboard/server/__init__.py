"""
Live-refresh glue: local HTTP server (http_server.py) and input watcher (watcher.py).
"""
