"""Scaffold Pinocchio-based Solana program projects from a template directory."""

__version__ = "0.1.0"