"""
Test suite for the easydoc project.
"""
