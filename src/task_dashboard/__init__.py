"""
task_dashboard: static HTML task dashboard + notepad generator.

Reads tasks.md and notes/*.md, writes _site/dashboard.html and
_site/notepad.html, and optionally serves them with live refresh.
"""

__version__ = "0.1.0"
