"""
Test suite for the docdraft package.
"""
