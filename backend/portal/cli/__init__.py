"""Operational command-line tools installed as console scripts."""
