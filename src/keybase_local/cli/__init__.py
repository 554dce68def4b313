"""
CLI subcommand groups for keybase-local.
"""
