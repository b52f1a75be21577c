"""Kernel – error types shared across logbridge."""
