"""Parsers for pnpm lockfiles, lockfile keys and batch package lists."""
