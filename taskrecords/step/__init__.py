"""
This package contains the step record.
"""

from .core import STEP_FIELDS, Step
