"""Tests for the utility modules."""
