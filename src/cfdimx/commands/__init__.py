"""Command implementations exposed through :mod:`cfdimx.cli`."""
