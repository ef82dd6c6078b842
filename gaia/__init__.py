"""
Gaia - stack access control and job launch orchestration.
"""

__version__ = "1.0.0"
