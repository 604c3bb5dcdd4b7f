"""Test suite for the testoria package.

This package contains unit and integration tests validating the
authoring hierarchy invariants, identifier suppliers, element catalog
loading, runtime settings and command-line utilities.
"""
