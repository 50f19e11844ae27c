import logging

"""
Package logger. Reports fixed-point types as they are created, literal evaluations, and files
written by the configuration and code generation commands.
"""

logger = logging.getLogger(__name__)
logger.propagate = False
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler())
