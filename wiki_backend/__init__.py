"""
Project package for the wiki backend.

Holds the settings modules, the root URL configuration and the ASGI
entry point.  Domain code lives in the ``users``, ``wikis`` and
``payments`` apps.
"""
