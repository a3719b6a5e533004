"""
Rendering.

Components:
- markdown.py: regex-based Markdown-to-HTML for notes
- pages.py: dashboard.html / notepad.html documents
- styles.py: inline stylesheet and auto-refresh script
"""
