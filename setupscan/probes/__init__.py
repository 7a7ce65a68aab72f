"""Standalone scripts executed under interpreters other than our own."""
