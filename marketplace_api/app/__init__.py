"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Routes are grouped by the role that consumes them: the
``buyer`` API (favorites, reviews), the ``admin`` API (seller
management) and the ``seller`` API (order management).  Each group
exposes routers that are mounted onto the host application through
the module registration helpers in ``core.modules``.
"""

from .main import app  # noqa: F401
