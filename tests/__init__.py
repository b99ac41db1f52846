"""Tests for git-seek."""
