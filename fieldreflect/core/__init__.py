"""
Reflective field and setter helpers.

Every helper is a direct walk over a class's MRO; nothing is cached between
calls.
"""
