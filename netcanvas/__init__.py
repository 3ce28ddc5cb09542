"""Scene model for network drawings: geometry, node items, edge paths, guides and a crawler option form."""

__version__ = "3.2.0"