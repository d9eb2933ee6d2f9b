"""
Small utilities shared across neuroclass.
"""
from neuroclass.utils.logging import get_logger
