"""Client library for the MTS SMS gateway: batch submit and delivery status polling."""
import logging as _stdlib_logging

from mts_sms.clients import *  # noqa: F401,F403
from mts_sms.clients import __all__  # noqa: F401

__version__ = "0.1.0"

_stdlib_logging.getLogger("mts_sms").addHandler(_stdlib_logging.NullHandler())
