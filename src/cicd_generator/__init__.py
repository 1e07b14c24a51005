"""Generates Jenkins pipelines, deployment scripts and credential guides from a project configuration."""

__version__ = "0.1.0"
