"""
urdf_assistant - URDF link description and serialization
"""

__version__ = "0.1.0"
