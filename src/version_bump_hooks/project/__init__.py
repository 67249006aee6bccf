"""Readers and writers for the files the hooks maintain."""
