"""Simulation of processes competing for houses and fences under Lamport-clock mutual exclusion."""

__version__ = "0.1.0"