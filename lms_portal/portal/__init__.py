"""LMS portal content service."""
