"""Affine transformations."""
