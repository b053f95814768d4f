"""Test package for the schemaconform harness."""
