"""Adapters that turn explicit graphs and grids into engine providers."""
