"""
wordboard app package

This package contains the FastAPI application, routers, services, templates and static assets
for managing weighted word lists and showing them as a scrolling dive board.
"""
