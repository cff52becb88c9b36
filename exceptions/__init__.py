"""
exceptions
----------

Closed error taxonomy of the care home engine and the status code each maps to.
"""
from .custom_errors import *
