"""Command line interface for the publishing bot reporter."""
