"""Peer identities, addresses, request/response types and routing for peer-to-peer services."""

__version__ = "0.1.0"