"""Adapters - configuration and HTTP clients for the upstream APIs."""
