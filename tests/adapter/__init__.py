"""Tests for the Git adapter."""
