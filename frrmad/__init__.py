"""Configuration, command helpers and text views for monitoring OSPF routers running FRR."""

__version__ = "0.1.0"