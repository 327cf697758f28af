"""
Interface web de MovieFinder (FastAPI + Jinja2 + HTMX).
"""
