"""Metropolis Monte Carlo simulation of the 2D Ising model, with exact 2x2 references and a sweep command."""

__version__ = "0.1.0"

__all__ = ["cli", "ising_model", "simulation", "utils"]