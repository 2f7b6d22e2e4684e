"""
Test suite for rawport.

Unit tests run against fake backends and a fake kernel32 binding on any
host; POSIX backend tests use real pseudo-terminal pairs.
"""
