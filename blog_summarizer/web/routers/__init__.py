"""Routers mounted by :func:`blog_summarizer.web.app.create_app`."""
