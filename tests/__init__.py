"""Tests for goldentokens."""
