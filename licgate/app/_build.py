"""
Build-mode switches.

Development builds of the package replace this module with one setting
``ALLOW_UNVERIFIED_AUTH = True``. It is deliberately not wired to any
environment variable, command-line option or configuration key.
"""

ALLOW_UNVERIFIED_AUTH: bool = False
