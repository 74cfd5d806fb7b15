"""Evaluation scoring service."""
