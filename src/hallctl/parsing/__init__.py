"""Parsing layer — raw command-line tokens in, validated values out."""
