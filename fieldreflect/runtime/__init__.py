"""
Runtime support for fieldreflect.

Errors, configuration and the explicit field registry shared by the
introspection helpers in `fieldreflect.core`.
"""
