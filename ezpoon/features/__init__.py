"""Stateless helpers the actions and widgets build on."""
