"""Falling snowflake animation driven by rewriting HTML markup."""
