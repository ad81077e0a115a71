"""
Wikis app package for the wiki backend.

This package provides the ``Wiki`` model (title, body, private flag and
owning user), the authorization policy deciding who may read or change a
wiki, and the REST endpoints that expose the resource.  See
``wikis/views.py`` for API details.
"""
