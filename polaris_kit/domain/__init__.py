"""Shared value types for rendered markup."""
