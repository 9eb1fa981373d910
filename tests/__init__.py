"""Test suite for chromaramp."""
